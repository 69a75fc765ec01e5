"""Runnable models of design patterns: flyweight, mediator, prototype, state,
strategy and observer, with expense sharing and tic-tac-toe exercises."""

__version__ = "0.1.0"
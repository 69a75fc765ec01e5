"""Non-player characters built once and then cloned."""

from __future__ import annotations

import copy


class NPC:
    """A game character template that can be cheaply cloned and tweaked."""

    def __init__(self, name: str, health: int, attack: int, defense: int) -> None:
        self.name = name
        self.health = health
        self.attack = attack
        self.defense = defense
        print(f"Setting up template NPC '{name}'")

    def clone(self) -> "NPC":
        """Return an independent copy without redoing the template setup."""
        duplicate = copy.copy(self)
        print(f"Cloning NPC '{self.name}'")
        return duplicate

    def describe(self) -> str:
        text = f"NPC {self.name} [HP={self.health} ATK={self.attack} DEF={self.defense}]"
        print(text)
        return text
"""Tic-tac-toe on a square board of any size, with move notifications."""

from __future__ import annotations

import argparse
import enum
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, List, Optional, Protocol, Sequence, Tuple


class _Observer(Protocol):
    def update(self, message: str) -> None: ...


class ConsoleNotifier:
    """Prints every notification it receives."""

    def update(self, message: str) -> None:
        print(f"[Notification] {message}")


@dataclass(eq=False)
class Symbol:
    """A mark on the board; marks are compared by identity."""

    mark: str


class Board:
    """A square grid of marks that knows nothing about the rules."""

    def __init__(self, size: int) -> None:
        self.size = size
        self.empty_cell = Symbol("-")
        self._grid: List[List[Symbol]] = [
            [self.empty_cell] * size for _ in range(size)
        ]

    def _in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def is_cell_empty(self, row: int, col: int) -> bool:
        """True if the cell is on the board and holds no mark."""
        return self._in_bounds(row, col) and self._grid[row][col] is self.empty_cell

    def place_mark(self, row: int, col: int, symbol: Symbol) -> None:
        """Put ``symbol`` in an empty cell, raising ValueError otherwise."""
        if not self._in_bounds(row, col):
            raise ValueError(f"cell ({row},{col}) is off the board")
        if not self.is_cell_empty(row, col):
            raise ValueError(f"cell ({row},{col}) is already taken")
        self._grid[row][col] = symbol

    def get_cell(self, row: int, col: int) -> Symbol:
        """The mark in a cell; off-board cells read as empty."""
        if not self._in_bounds(row, col):
            return self.empty_cell
        return self._grid[row][col]

    def render(self) -> str:
        """Print and return the board with row and column numbers."""
        header = "  " + "".join(f"{i} " for i in range(self.size))
        rows = [
            f"{i} " + "".join(f"{cell.mark} " for cell in row)
            for i, row in enumerate(self._grid)
        ]
        text = "\n" + "\n".join([header, *rows]) + "\n\n"
        print(text, end="")
        return text


@dataclass(eq=False)
class TicTacToePlayer:
    """A player with a symbol and a count of games won."""

    player_id: int
    name: str
    symbol: Symbol
    score: int = 0

    def increment_score(self) -> None:
        self.score += 1


class StandardTicTacToeRules:
    """Full row, column or diagonal wins; a full board with no winner is a draw."""

    def is_valid_move(self, board: Board, row: int, col: int) -> bool:
        return board.is_cell_empty(row, col)

    def check_win_condition(self, board: Board, symbol: Symbol) -> bool:
        n = range(board.size)
        lines = [[(i, j) for j in n] for i in n]
        lines += [[(i, j) for i in n] for j in n]
        lines.append([(i, i) for i in n])
        lines.append([(i, board.size - 1 - i) for i in n])
        return any(
            all(board.get_cell(r, c) is symbol for r, c in line) for line in lines
        )

    def check_draw_condition(self, board: Board) -> bool:
        return all(
            board.get_cell(r, c) is not board.empty_cell
            for r in range(board.size)
            for c in range(board.size)
        )


MoveReader = Callable[[TicTacToePlayer], Tuple[int, int]]


class TicTacToeGame:
    """Runs a game, taking turns in order and notifying observers."""

    def __init__(self, board_size: int) -> None:
        self.board = Board(board_size)
        self.rules = StandardTicTacToeRules()
        self.players: Deque[TicTacToePlayer] = deque()
        self.observers: List[_Observer] = []
        self.game_over = False
        self.winner: Optional[TicTacToePlayer] = None

    def add_player(self, player: TicTacToePlayer) -> None:
        self.players.append(player)

    def add_observer(self, observer: _Observer) -> None:
        self.observers.append(observer)

    def notify(self, message: str) -> None:
        for observer in self.observers:
            observer.update(message)

    def play(self, read_move: MoveReader) -> Optional[TicTacToePlayer]:
        """Play to the end; ``read_move`` supplies each move as (row, col).

        Returns the winner, or None for a draw.
        """
        if len(self.players) < 2:
            raise ValueError("Need at least 2 players!")

        self.notify("Tic Tac Toe Game Started!")
        while not self.game_over:
            self.board.render()
            player = self.players[0]
            row, col = read_move(player)

            if not self.rules.is_valid_move(self.board, row, col):
                print("Invalid move! Try again.")
                continue

            self.board.place_mark(row, col, player.symbol)
            self.notify(f"{player.name} played ({row},{col})")

            if self.rules.check_win_condition(self.board, player.symbol):
                self.board.render()
                print(f"{player.name} wins!")
                player.increment_score()
                self.notify(f"{player.name} wins!")
                self.winner = player
                self.game_over = True
            elif self.rules.check_draw_condition(self.board):
                self.board.render()
                print("It's a draw!")
                self.notify("Game is Draw!")
                self.game_over = True
            else:
                self.players.rotate(-1)
        return self.winner


class GameType(enum.Enum):
    """Kinds of game the factory can build."""

    STANDARD = "standard"


def create_game(game_type: GameType, board_size: int) -> TicTacToeGame:
    """Build a game of the given type."""
    if game_type is GameType.STANDARD:
        return TicTacToeGame(board_size)
    raise ValueError(f"unknown game type: {game_type!r}")


def _console_move(player: TicTacToePlayer) -> Tuple[int, int]:
    text = input(f"{player.name} ({player.symbol.mark}) - Enter row and column: ")
    try:
        row, col = (int(part) for part in text.split())
    except ValueError:
        return -1, -1
    return row, col


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play a two-player game on the console."""
    parser = argparse.ArgumentParser(description="Tic-tac-toe.")
    parser.add_argument("--size", type=int, help="board size, e.g. 3 for 3x3")
    args = parser.parse_args(argv)

    print("=== TIC TAC TOE GAME ===")
    try:
        size = args.size
        if size is None:
            size = int(input("Enter board size (e.g., 3 for 3x3): "))
        game = create_game(GameType.STANDARD, size)
        game.add_observer(ConsoleNotifier())
        game.add_player(TicTacToePlayer(1, "Aditya", Symbol("X")))
        game.add_player(TicTacToePlayer(2, "Harshita", Symbol("O")))
        game.play(_console_move)
    except (EOFError, ValueError) as error:
        print(f"Game aborted: {error}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
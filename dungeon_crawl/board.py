"""The character grid the game is played on."""

from __future__ import annotations

import os


class Board:
    """A grid of characters loaded from a level file."""

    def __init__(self) -> None:
        self.rows = 0
        self.cols = 0
        self._fields: list[list[str]] = []

    def resize(self, rows: int, cols: int) -> None:
        """Set the board dimensions; the cells are left as they are."""
        self.rows = rows
        self.cols = cols

    def load(self, path: str | os.PathLike[str]) -> None:
        """Read the first rows - 1 lines of a level file into the grid."""
        fields: list[list[str]] = []
        with open(path, encoding="utf-8") as src:
            for line in src:
                if len(fields) >= self.rows - 1:
                    break
                text = line.rstrip("\n")
                if len(text) > self.cols:
                    raise ValueError(f"line {len(fields)} is longer than {self.cols} columns")
                fields.append(list(text))
        self._fields = fields

    def _check(self, row: int, col: int) -> None:
        if row < 0 or row > self.rows - 1:
            raise IndexError(f"row {row} out of range")
        if col < 0 or col > self.cols:
            raise IndexError(f"column {col} out of range")

    def get(self, row: int, col: int) -> str:
        self._check(row, col)
        return self._fields[row][col]

    def set(self, row: int, col: int, char: str) -> None:
        self._check(row, col)
        self._fields[row][col] = char

    def clear(self) -> None:
        """Blank the interior of the board, keeping repair centres ('R')."""
        for row in range(1, self.rows - 2):
            for col in range(1, self.cols - 2):
                if self.get(row, col) != "R":
                    self.set(row, col, " ")

    def copy(self) -> "Board":
        other = Board()
        other.resize(self.rows, self.cols)
        other._fields = [list(row) for row in self._fields]
        return other

    def render(self) -> str:
        """The visible rows, each followed by a newline."""
        return "".join("".join(row) + "\n" for row in self._fields[: self.rows - 1])
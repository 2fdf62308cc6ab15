"""Things that move around the board: the movement base, units and enemies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .board import Board


@dataclass(frozen=True)
class MovePos:
    """A movement offset; x is passed as the vertical step, y as the horizontal one."""

    x: int = 0
    y: int = 0


_DIRECTIONS = {
    1: MovePos(0, -1),
    2: MovePos(1, 0),
    3: MovePos(0, 1),
    4: MovePos(-1, 0),
}


def move_offset(direction: int) -> MovePos:
    """The offset for a direction: 1 up, 2 right, 3 down, 4 left."""
    try:
        return _DIRECTIONS[direction]
    except KeyError:
        raise ValueError(f"unknown direction {direction}") from None


class MovableObject(ABC):
    """An object with a board position that can step onto neighbouring cells."""

    # Cell contents checked when moving, in the order they are handled.
    _targets: tuple[str, ...] = (" ",)

    def __init__(self, x: int = 1, y: int = 1) -> None:
        if x < 0 or y < 0:
            raise ValueError(f"position ({x}, {y}) out of bounds")
        self.x = x
        self.y = y

    @abstractmethod
    def _enter(self, char: str) -> str | None:
        """React to a target cell; return the marker to leave there, or None to stay."""

    def _shift(self, d_row: int, d_col: int, marker: str, board: Board) -> None:
        board.set(self.x, self.y, " ")
        self.x += d_row
        self.y += d_col
        board.set(self.x, self.y, marker)

    def move(self, vertical: int, horizontal: int, board: Board) -> None:
        """Try to step by horizontal rows and vertical columns, updating the board."""
        row_next = board.get(self.x + horizontal, self.y)
        col_next = board.get(self.x, self.y + vertical)
        for target in self._targets:
            if row_next == target:
                marker = self._enter(target)
                if marker is not None:
                    self._shift(horizontal, 0, marker, board)
            if col_next == target:
                marker = self._enter(target)
                if marker is not None:
                    self._shift(0, vertical, marker, board)


class Unit(MovableObject):
    """A movable object with health and damage."""

    def __init__(self, x: int = 1, y: int = 1, health: int = 50, damage: int = 1) -> None:
        super().__init__(x, y)
        self.health = health
        self.damage = damage


class Enemy(Unit):
    """A monster that wanders the board and may drop loot when killed."""

    marker = "e"
    _targets = (" ", "@")

    def __init__(
        self,
        x: int = 1,
        y: int = 1,
        health: int = 50,
        damage: int = 1,
        drop_chance: int = 50,
    ) -> None:
        super().__init__(x, y, health, damage)
        self.drop_chance = drop_chance
        self.player_encounter = False

    def _enter(self, char: str) -> str | None:
        if char == " ":
            return self.marker
        if char == "@":
            self.player_encounter = True
            return "@"
        return None

    def move(self, vertical: int, horizontal: int, board: Board) -> None:
        """Step into empty cells; stepping onto the player starts an encounter."""
        super().move(vertical, horizontal, board)

    def receive_hit(self, player_damage: int, player_health: int, player_defence: int) -> None:
        self.health -= player_damage

    def can_battle(self, player_damage: int) -> bool:
        """True if the enemy survives a hit of player_damage."""
        return self.health - player_damage > 0

    def __str__(self) -> str:
        return (
            f"Enemy: | Health: {self.health} | Damage: {self.damage}"
            f" | Drop chance: {self.drop_chance}"
        )
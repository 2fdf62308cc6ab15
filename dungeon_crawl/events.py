"""Turning key presses into game actions."""

from __future__ import annotations

import os
from enum import IntEnum
from typing import TYPE_CHECKING

from .savegame import load_game, save_game

if TYPE_CHECKING:
    from .movement import Mover
    from .profile import Profile
    from .renderer import Renderer


class Direction(IntEnum):
    NOTHING = 0
    UP = 1
    RIGHT = 2
    DOWN = 3
    LEFT = 4


_ARROWS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}
_ESCAPE_ARROWS = {
    "\x1b[A": Direction.UP,
    "\x1b[B": Direction.DOWN,
    "\x1b[C": Direction.RIGHT,
    "\x1b[D": Direction.LEFT,
}
_NUMBER_KEYS = {str(number): number for number in range(5)}
SAVE_KEY = "s"
LOAD_KEY = "l"


class EventHandler:
    """Dispatches keys: arrows move, 0-4 equip, s saves and l loads."""

    def __init__(self, save_path: str | os.PathLike[str] = "SaveGame.txt") -> None:
        self.save_path = save_path

    def handle(self, key: str, mover: Mover, renderer: Renderer, profile: Profile) -> bool:
        """Act on a key; False if the key means nothing."""
        if key in _ESCAPE_ARROWS:
            self.arrow_pressed(mover, renderer, _ESCAPE_ARROWS[key])
            return True
        name = key.strip().lower()
        if name in _ARROWS:
            self.arrow_pressed(mover, renderer, _ARROWS[name])
        elif name in _NUMBER_KEYS:
            self.number_pressed(renderer, profile, _NUMBER_KEYS[name])
        elif name == SAVE_KEY:
            save_game(self.save_path, profile.level, profile.player, profile.enemies, profile.game_items)
        elif name == LOAD_KEY:
            self.load_pressed(profile)
        else:
            return False
        return True

    def arrow_pressed(self, mover: Mover, renderer: Renderer, direction: int) -> None:
        renderer.clear()
        mover.direction = direction
        renderer.draw = True

    def number_pressed(self, renderer: Renderer, profile: Profile, number: int) -> None:
        """Queue equipping inventory slot number, if the player may equip."""
        player = profile.player
        if player.can_equip:
            renderer.clear()
            player.can_equip = False
            player.equip_index = number
            player.equip_action = True
            renderer.draw = True

    def load_pressed(self, profile: Profile) -> None:
        """Restore the saved game into the profile."""
        profile.level = load_game(
            self.save_path,
            profile.loader,
            profile.player,
            profile.game_items,
            profile.enemies,
            profile.board,
        )
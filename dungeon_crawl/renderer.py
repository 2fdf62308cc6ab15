"""Drawing the game screen as text."""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from .player import Player
    from .profile import Profile

CLEAR_SCREEN = "\x1b[2J\x1b[H"


class Renderer:
    """Writes the board, the player and menus to a text stream."""

    def __init__(self, save_path: str | os.PathLike[str] = "SaveGame.txt", out: TextIO | None = None) -> None:
        self.save_path = save_path
        self._stream = out
        self.draw = False
        self.can_enter = True

    def _write(self, text: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(text)
        stream.flush()

    def render(self, profile: Profile, running: bool) -> bool:
        """Draw a frame if one is due; advance the level once no enemies remain.

        Returns whether the game is still running.
        """
        if not self.draw:
            return running
        self.draw = False
        self.save_load_menu()
        self._write(profile.board.render())
        if len(profile.player.inventory) > 0:
            self.render_inventory(profile.player)
        self.render_player(profile.player)
        if not profile.enemies:
            profile.next_level()
            self.next_level(profile.level)
            if not profile.new_game():
                running = False
            self.draw = True
        if not running:
            self.draw = False
        return running

    def render_inventory(self, player: Player) -> None:
        self._write("Player inventory:\n")
        self._write(f"{player.inventory}\n")
        self._write("Equip/Consume item using keys 0,1,2...\n")

    def render_player(self, player: Player) -> None:
        self._write(str(player))

    def save_load_menu(self) -> None:
        """Show the save key, and the load key when a saved game exists."""
        self._write("s -> Save game.\n")
        if os.path.isfile(self.save_path):
            self._write("l -> Load game.\n")
        self._write("\n")

    def clear(self) -> None:
        self._write(CLEAR_SCREEN)

    def pause(self) -> None:
        """Wait until the user presses Enter."""
        self._write("Press Enter to continue . . .")
        sys.stdin.readline()

    def next_level(self, level: int) -> None:
        self._write(
            "\n\n***CONGRATULATIONS***\n\nLevel completed!\n\n"
            f"Next level: LEVEL {level}!\n"
        )
        self.pause()
"""The game loop and its command-line entry point."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import TextIO

from .events import EventHandler
from .levels import LevelLoader
from .movement import Mover
from .profile import Profile
from .renderer import Renderer

SAVE_FILE = "SaveGame.txt"


class Game:
    """Ties together input, movement, equipping and drawing."""

    def __init__(self, directory: str | os.PathLike[str] = ".", out: TextIO | None = None) -> None:
        directory = Path(directory)
        save_path = directory / SAVE_FILE
        self.running = False
        self.renderer = Renderer(save_path, out)
        self.mover = Mover(pause=self.renderer.pause)
        self.events = EventHandler(save_path)
        self.profile = Profile(LevelLoader(directory))

    def init(self) -> None:
        """Show the menu and set up the first level."""
        self.renderer.save_load_menu()
        self.profile.new_game()
        self.running = True

    def handle_events(self, key: str) -> None:
        try:
            self.events.handle(key, self.mover, self.renderer, self.profile)
        except OSError:
            print("ERROR: problem with file!")
            self.renderer.pause()

    def update(self) -> None:
        """Play a pending move and carry out a pending equip."""
        profile = self.profile
        player = profile.player
        if self.mover.direction > 0:
            if not self.mover.step(player, profile.enemies, profile.game_items, profile.board):
                self.running = False
            if not self.running:
                self.renderer.draw = False
                profile.game_over()
        if player.equip_action:
            player.equip_action = False
            if profile.can_player_equip():
                player.equip(player.equip_index)
            elif len(player.inventory) > 0:
                player.can_equip = True

    def render(self) -> None:
        self.running = self.renderer.render(self.profile, self.running)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="A dungeon crawl on a text board. Type up, down, left or right "
        "to move, 0-4 to equip, s to save and l to load, each followed by Enter."
    )
    parser.add_argument("directory", nargs="?", default=".", help="directory holding the level files")
    args = parser.parse_args(argv)

    game = Game(args.directory)
    try:
        game.init()
    except OSError as error:
        print(f"cannot start the game: {error}", file=sys.stderr)
        return 1

    while game.running:
        try:
            key = input()
        except EOFError:
            break
        game.handle_events(key)
        if game.renderer.draw:
            game.update()
            game.render()

    game.renderer.pause()
    return 0
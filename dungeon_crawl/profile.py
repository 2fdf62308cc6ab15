"""The state of a game in progress: the player, the level and what fills it."""

from __future__ import annotations

from .board import Board
from .inventory import Inventory
from .levels import LevelLoader
from .player import Player
from .units import Enemy

FIRST_LEVEL = 1
VICTORY = 3
GAME_OVER = 99


class Profile:
    """Holds the player, the board, the items and enemies of the current level."""

    def __init__(self, loader: LevelLoader | None = None) -> None:
        self.loader = loader if loader is not None else LevelLoader()
        self.level = FIRST_LEVEL
        self.player = Player()
        self.enemies: list[Enemy] = []
        self.game_items = Inventory()
        self.board = Board()

    def new_game(self) -> bool:
        """Set up the current level; False once the game has ended."""
        if self.level == FIRST_LEVEL:
            self.loader.load_player(self.player)
        elif self.level < self.loader.MAX_LEVEL:
            self.loader.set_player_start(self.level, self.player)
        running = self.loader.load_level(self.level, self.board, self.game_items, self.enemies)
        if self.level in (FIRST_LEVEL, VICTORY, GAME_OVER):
            print(self.board.render(), end="")
        return running

    def game_over(self) -> bool:
        """Switch to the game-over screen."""
        self.level = GAME_OVER
        return self.new_game()

    def can_player_equip(self) -> bool:
        """True if the chosen equip index points at an inventory item."""
        return self.player.equip_index < len(self.player.inventory)

    def next_level(self) -> None:
        self.level += 1
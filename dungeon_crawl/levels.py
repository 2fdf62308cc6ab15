"""Reading levels, players and the things that populate a level from text files."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

from .inventory import Inventory
from .items import Armor, HealthPotion, SubItemType, Weapon
from .units import Enemy

if TYPE_CHECKING:
    from .board import Board
    from .player import Player

_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_int(text: str, default: int = 0) -> int:
    """Leading integer of text after whitespace, or default if there is none."""
    match = _INT.match(text)
    return int(match.group(1)) if match else default


class FieldReader:
    """Reads newline-terminated lines and ';'-terminated fields from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._text = stream.read()
        self._pos = 0
        self.eof = False

    def _read_until(self, delimiter: str) -> str:
        if self._pos >= len(self._text):
            self.eof = True
            return ""
        end = self._text.find(delimiter, self._pos)
        if end == -1:
            chunk = self._text[self._pos:]
            self._pos = len(self._text)
            self.eof = True
            return chunk
        chunk = self._text[self._pos:end]
        self._pos = end + 1
        return chunk

    def read_line(self) -> str:
        return self._read_until("\n")

    def read_field(self) -> str:
        return self._read_until(";")

    def read_int(self) -> int:
        """Read a field and parse its leading integer; 0 if it has none."""
        return _parse_int(self.read_field())


def read_inventory(reader: FieldReader, size: int, inventory: Inventory) -> None:
    """Replace the inventory's contents with up to size items read from reader."""
    inventory.clear()
    count = 0
    while not reader.eof and count < size:
        name = reader.read_field()
        kind = reader.read_field()
        x = reader.read_int()
        y = reader.read_int()
        value = reader.read_int()
        start_value = reader.read_int()
        battle_count = reader.read_int()
        if kind == "WEAPON":
            inventory.add(Weapon(name, SubItemType.WEAPON, value, x, y, start_value, battle_count))
        elif kind == "ARMOR":
            inventory.add(Armor(name, SubItemType.ARMOR, value, x, y, start_value, battle_count))
        elif kind == "HEAL":
            inventory.add(HealthPotion(name, SubItemType.HEAL, value, x, y))
        count += 1


def read_enemies(reader: FieldReader, size: int, enemies: list[Enemy]) -> None:
    """Replace the list's contents with up to size enemies read from reader."""
    enemies.clear()
    while not reader.eof and len(enemies) < size:
        enemy = Enemy(1, 1, 0, 0, 0)
        enemy.x = reader.read_int()
        enemy.y = reader.read_int()
        enemy.health = reader.read_int()
        enemy.damage = reader.read_int()
        enemy.drop_chance = reader.read_int()
        enemies.append(enemy)


def read_player(reader: FieldReader, player: Player) -> None:
    """Read position, stats, name and base damage into player."""
    player.x = reader.read_int()
    player.y = reader.read_int()
    player.health = reader.read_int()
    player.damage = reader.read_int()
    player.defence = reader.read_int()
    player.name = reader.read_field()
    player.start_damage = reader.read_int()


class LevelLoader:
    """Loads level maps and level descriptions from a directory."""

    MAX_LEVEL = 3
    DEFAULT_PLAYER = "DefaultPlayer.txt"

    def __init__(self, directory: str | os.PathLike[str] = ".") -> None:
        self.directory = Path(directory)

    def level_path(self, level: int) -> Path:
        return self.directory / f"Level{level}.txt"

    def info_path(self, level: int) -> Path:
        return self.directory / f"LevelInfo{level}.txt"

    def load_player(self, player: Player) -> None:
        """Set up a fresh player from the default player file."""
        with open(self.directory / self.DEFAULT_PLAYER, encoding="utf-8") as src:
            read_player(FieldReader(src), player)

    def set_player_start(self, level: int, player: Player) -> None:
        """Place the player at the start position of a level."""
        with open(self.info_path(level), encoding="utf-8") as src:
            reader = FieldReader(src)
            reader.read_line()
            player.x = reader.read_int()
            player.y = reader.read_int()

    def load_level(
        self,
        level: int,
        board: Board,
        game_items: Inventory,
        enemies: list[Enemy],
    ) -> bool:
        """Load a level's board, items and enemies.

        Returns False once the level is at or past the last one, True otherwise.
        A level without a description file leaves everything as it was.
        """
        running = level < self.MAX_LEVEL
        try:
            src = open(self.info_path(level), encoding="utf-8")
        except OSError:
            return running
        with src:
            reader = FieldReader(src)
            reader.read_line()  # Player
            reader.read_line()  # player position
            reader.read_line()  # Board
            rows = reader.read_int()
            cols = reader.read_int()
            board.resize(rows, cols)
            board.load(self.level_path(level))

            reader.read_line()
            reader.read_line()  # Game
            item_count = _parse_int(reader.read_line())
            game_items.clear()
            if item_count != -1:
                read_inventory(reader, item_count, game_items)
                reader.read_line()
            elif running:
                print("There are no more items left to pick!")

            reader.read_line()  # Enemy
            enemy_count = _parse_int(reader.read_line())
            enemies.clear()
            if enemy_count != -1:
                read_enemies(reader, enemy_count, enemies)
            elif running:
                print("No enemies left!")
        return running
"""Saving the game state to a text file and restoring it."""

from __future__ import annotations

import os
import re
from typing import TYPE_CHECKING, TextIO

from .items import Armor, SubItemType, Weapon
from .levels import FieldReader, read_enemies, read_inventory, read_player

if TYPE_CHECKING:
    from .board import Board
    from .inventory import Inventory
    from .levels import LevelLoader
    from .player import Player
    from .units import Enemy

WEAPON_SLOT = 1
ARMOR_SLOT = 2

# Potions carry no start value or battle count; these fill their columns.
_HEAL_FILLER = 1

_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> int:
    match = _INT.match(text)
    return int(match.group(1)) if match else 0


def _fields(*values: object) -> str:
    return "".join(f"{value};" for value in values)


def write_inventory(stream: TextIO, inventory: Inventory) -> None:
    """Write an item count line and all items on one line, or -1 when empty."""
    if len(inventory) == 0:
        stream.write("-1\n")
        return
    stream.write(f"{len(inventory)}\n")
    for item in inventory:
        if item.sub_type == SubItemType.ARMOR:
            stream.write(_fields(item.name, item.sub_type_name, item.x, item.y,
                                 item.armor_value, item.start_armor, item.battle_count))
        elif item.sub_type == SubItemType.WEAPON:
            stream.write(_fields(item.name, item.sub_type_name, item.x, item.y,
                                 item.damage_value, item.start_damage, item.battle_count))
        elif item.sub_type == SubItemType.HEAL:
            stream.write(_fields(item.name, item.sub_type_name, item.x, item.y,
                                 item.health_value, _HEAL_FILLER, _HEAL_FILLER))
    stream.write("\n")


def write_equipment(stream: TextIO, player: Player) -> None:
    """Write the equipped weapon and armor, or None for an empty slot."""
    stream.write("Weapon\n")
    weapon = player.weapon
    if weapon is not None:
        stream.write("Yes\n")
        stream.write(_fields(weapon.name, weapon.sub_type_name, weapon.x, weapon.y,
                             weapon.damage_value, weapon.start_damage, weapon.battle_count))
        stream.write("\n")
    else:
        stream.write("None\n")
    stream.write("Armor\n")
    armor = player.armor
    if armor is not None:
        stream.write("Yes\n")
        # The value column holds the armor's damage value, as the save format always has.
        stream.write(_fields(armor.name, armor.sub_type_name, armor.x, armor.y,
                             armor.damage_value, armor.start_armor, armor.battle_count))
        stream.write("\n")
    else:
        stream.write("None\n")


def save_game(
    path: str | os.PathLike[str],
    level: int,
    player: Player,
    enemies: list[Enemy],
    game_items: Inventory,
) -> None:
    """Write the whole game state to path."""
    with open(path, "w", encoding="utf-8") as out:
        out.write(f"Level\n{level}\n")
        out.write("GameItems\n")
        write_inventory(out, game_items)
        out.write("Player\n")
        out.write(_fields(player.x, player.y, player.health, player.damage,
                          player.defence, player.name, player.start_damage))
        out.write("\n")
        out.write("PlayerInventory\n")
        write_inventory(out, player.inventory)
        out.write("PlayerEquipment\n")
        write_equipment(out, player)
        out.write("Enemy\n")
        if enemies:
            out.write(f"{len(enemies)}\n")
            for enemy in enemies:
                out.write(_fields(enemy.x, enemy.y, enemy.health, enemy.damage, enemy.drop_chance))
                out.write("\n")
        else:
            out.write("-1\n")
    print("\nGame is saved!")


def read_equipment(reader: FieldReader, slot: int, player: Player) -> None:
    """Read one equipment record and put it in the weapon (1) or armor (2) slot."""
    name = reader.read_field()
    reader.read_field()  # sub type name
    x = reader.read_int()
    y = reader.read_int()
    value = reader.read_int()
    start_value = reader.read_int()
    battle_count = reader.read_int()
    if slot == WEAPON_SLOT:
        player.weapon = Weapon(name, SubItemType.WEAPON, value, x, y, start_value, battle_count)
    elif slot == ARMOR_SLOT:
        player.armor = Armor(name, SubItemType.ARMOR, value, x, y, start_value, battle_count)


def load_game(
    path: str | os.PathLike[str],
    loader: LevelLoader,
    player: Player,
    game_items: Inventory,
    enemies: list[Enemy],
    board: Board,
) -> int:
    """Restore a saved game into the given objects and return the saved level."""
    with open(path, encoding="utf-8") as src:
        reader = FieldReader(src)
        reader.read_line()  # Level
        level = _leading_int(reader.read_line())

        reader.read_line()  # GameItems
        item_count = _leading_int(reader.read_line())
        game_items.clear()
        if item_count != -1:
            read_inventory(reader, item_count, game_items)
            print(game_items)
            reader.read_line()
        else:
            print("There are no more items left to pick!")

        reader.read_line()  # Player
        read_player(reader, player)
        print(player)

        reader.read_line()
        reader.read_line()  # PlayerInventory
        player_count = _leading_int(reader.read_line())
        player.inventory.clear()
        if player_count != -1:
            read_inventory(reader, player_count, player.inventory)
            print(player.inventory)
            player.can_equip = True
            reader.read_line()
        else:
            print("Player has no items in inventory!")

        reader.read_line()  # PlayerEquipment
        reader.read_line()  # Weapon
        if reader.read_line() != "None":
            read_equipment(reader, WEAPON_SLOT, player)
            print(f"Player weapon: {player.weapon}")
            reader.read_line()
        else:
            print("Player has no weapon!")
        reader.read_line()  # Armor
        if reader.read_line() != "None":
            read_equipment(reader, ARMOR_SLOT, player)
            print(f"Player armor: {player.armor}")
            reader.read_line()
        else:
            print("Player has no armor!")

        reader.read_line()  # Enemy
        enemy_count = _leading_int(reader.read_line())
        enemies.clear()
        if enemy_count != -1:
            read_enemies(reader, enemy_count, enemies)
            for enemy in enemies:
                print(enemy)
        else:
            print("No enemies left!")

    rebuild_board(loader, level, board, player, game_items, enemies)
    print("Game loaded!")
    return level


def rebuild_board(
    loader: LevelLoader,
    level: int,
    board: Board,
    player: Player,
    game_items: Inventory,
    enemies: list[Enemy],
) -> None:
    """Reload a level's map and place the player, items and enemies on it."""
    with open(loader.info_path(level), encoding="utf-8") as src:
        reader = FieldReader(src)
        reader.read_line()  # Player
        reader.read_line()  # player position
        reader.read_line()  # Board
        rows = reader.read_int()
        cols = reader.read_int()
    board.resize(rows, cols)
    board.load(loader.level_path(level))
    board.clear()
    board.set(player.x, player.y, player.marker)
    for item in game_items:
        board.set(item.x, item.y, "i")
    for enemy in enemies:
        board.set(enemy.x, enemy.y, enemy.marker)
    print(board.render(), end="")
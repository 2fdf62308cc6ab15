"""The repair centre, which restores worn equipment."""

from __future__ import annotations

from typing import Callable

from .player import Player


def _repair_armor(player: Player, pause: Callable[[], None]) -> None:
    armor = player.armor
    if armor is None:
        print("You have no Armor equipped!")
        pause()
        return
    if armor.armor >= armor.start_armor:
        print("Your Armor is in perfect shape!")
        pause()
        return
    print(armor)
    print("Your Armor is damaged! We can repair it right away.")
    pause()
    print()
    armor.armor = armor.start_armor
    armor.reset_battle_count()
    print("Armor repaired!")
    print(armor)
    player.defence = armor.armor
    pause()


def _repair_weapon(player: Player, pause: Callable[[], None]) -> None:
    weapon = player.weapon
    if weapon is None:
        print("You have no Weapon equipped!")
        pause()
        return
    if weapon.damage >= weapon.start_damage:
        print("Your Weapon is in perfect shape!")
        pause()
        return
    print(weapon)
    print("Your Weapon is damaged! We can repair it right away.")
    pause()
    print()
    weapon.damage = weapon.start_damage
    weapon.reset_battle_count()
    print("Weapon repaired!")
    print(weapon)
    player.damage = weapon.damage + player.start_damage
    pause()


def repair_equipment(player: Player, pause: Callable[[], None] | None = None) -> None:
    """Restore the player's armor and weapon to their starting values."""
    pause = pause if pause is not None else (lambda: None)
    print("Welcome to repair center!")
    print("Here you can repair any damaged equipment.")
    _repair_armor(player, pause)
    _repair_weapon(player, pause)
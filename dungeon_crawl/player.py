"""The player character."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .inventory import Inventory
from .items import Armor, SubItemType, Weapon
from .units import Unit

if TYPE_CHECKING:
    from .board import Board


class Player(Unit):
    """The hero: carries an inventory and wears a weapon and armor."""

    marker = "@"
    _targets = (" ", "i", "e", "R")

    def __init__(
        self,
        x: int = 1,
        y: int = 1,
        health: int = 50,
        damage: int = 1,
        defence: int = 0,
        name: str = "",
    ) -> None:
        super().__init__(x, y, health, damage)
        self.name = name
        self.defence = defence
        self.start_damage = damage
        self.inventory = Inventory()
        self.item_picked = False
        self.enemy_encounter = False
        self.can_equip = False
        self.equip_action = False
        self.repair_entered = False
        self.equip_index = 0
        self.weapon: Weapon | None = None
        self.armor: Armor | None = None

    def _enter(self, char: str) -> str | None:
        if char == "i":
            self.item_picked = True
        elif char == "e":
            self.enemy_encounter = True
        elif char == "R":
            self.repair_entered = True
            return None
        return self.marker

    def move(self, vertical: int, horizontal: int, board: Board) -> None:
        """Step onto empty cells, items or enemies; touching 'R' enters the repair centre."""
        super().move(vertical, horizontal, board)

    def receive_hit(self, enemy_damage: int) -> None:
        """Absorb a hit with defence; once defence breaks, the armor is ruined."""
        if self.defence - enemy_damage < 0:
            self.defence = 0
            if self.armor is not None:
                self.armor.armor = 0
            self.health = self.health + self.defence - enemy_damage
        else:
            self.defence -= enemy_damage

    def can_battle(self, enemy_damage: int) -> bool:
        """True if the player survives a hit of enemy_damage."""
        return self.health + self.defence - enemy_damage > 0

    def add_damage(self, value: int) -> None:
        """Add a weapon's damage, taking off the bonus of the one held now."""
        if self.weapon is not None:
            self.damage += value - self.weapon.damage_value
        else:
            self.damage += value

    def add_defence(self, value: int) -> None:
        """Add an armor's value, taking off the bonus of the one worn now."""
        if self.armor is not None:
            self.defence += value - self.armor.armor_value
        else:
            self.defence += value

    def add_health(self, value: int) -> None:
        self.health += value

    def pick_up(self, game_items: Inventory) -> None:
        """Move the item lying under the player from the board into the inventory."""
        self.item_picked = False
        index = game_items.index_at(self.x, self.y)
        if index is not None:
            self.inventory.add(game_items.remove(index))
            self.can_equip = True

    def equip(self, index: int) -> None:
        """Equip or consume the inventory item at index."""
        item = self.inventory[index]
        if item.sub_type == SubItemType.ARMOR:
            self.inventory.remove(index)
            if self.armor is not None:
                self.inventory.add(self.armor)
            self.add_defence(item.armor_value)
            self.armor = item
        elif item.sub_type == SubItemType.WEAPON:
            self.inventory.remove(index)
            if self.weapon is not None:
                self.inventory.add(self.weapon)
            self.add_damage(item.damage_value)
            self.weapon = item
        elif item.sub_type == SubItemType.HEAL:
            self.add_health(item.health_value)
            self.inventory.remove(index)
        if len(self.inventory) > 0:
            self.can_equip = True

    def wear_weapon(self) -> None:
        """Blunt the weapon after every second battle and recompute damage."""
        weapon = self.weapon
        if weapon is None or not weapon.is_damaged():
            return
        new_damage = 0
        if weapon.damage_value > Weapon.MIN_DAMAGE_VALUE:
            new_damage = weapon.damage_value - Weapon.DECREASE_VALUE
        weapon.damage = new_damage
        self.damage = weapon.damage + self.start_damage

    def __str__(self) -> str:
        return (
            f"Player: {self.name} | Health: {self.health} | Damage: {self.damage}"
            f" | Armor: {self.defence}"
        )
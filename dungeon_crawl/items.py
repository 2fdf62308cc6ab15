"""Game items: weapons, armor and potions."""

from __future__ import annotations

import copy
from enum import IntEnum


class ItemType(IntEnum):
    """Broad item category."""

    EQUIPABLE = 0
    CONSUMABLE = 1


class SubItemType(IntEnum):
    """Specific item kind."""

    ARMOR = 0
    WEAPON = 1
    HEAL = 2
    POISON = 3


def _enum_name(enum_cls: type[IntEnum], value: int) -> str:
    try:
        return enum_cls(value).name
    except ValueError:
        return "NONE"


class Item:
    """Base class for everything that can lie on the board or sit in an inventory."""

    _label = "Item"

    def __init__(self, name: str, item_type: int, sub_type: int, x: int = 0, y: int = 0) -> None:
        self.name = name
        self.item_type = item_type
        self.sub_type = sub_type
        self.x = x
        self.y = y

    @property
    def type_name(self) -> str:
        return _enum_name(ItemType, self.item_type)

    @property
    def sub_type_name(self) -> str:
        return _enum_name(SubItemType, self.sub_type)

    def clone(self) -> "Item":
        """Return an independent copy of this item."""
        return copy.copy(self)

    def __str__(self) -> str:
        return f"{self._label}: {self.name} | Type: {self.type_name} | SubType: {self.sub_type_name}"


class EquipableItem(Item):
    """An item the player can wear or wield; it counts the battles it has seen."""

    def __init__(self, name: str, sub_type: int, x: int = 0, y: int = 0, battle_count: int = 0) -> None:
        super().__init__(name, ItemType.EQUIPABLE, sub_type, x, y)
        self.battle_count = battle_count

    @property
    def damage_value(self) -> int:
        return 0

    @property
    def armor_value(self) -> int:
        return 0

    def increase_battle_count(self) -> None:
        self.battle_count += 1

    def reset_battle_count(self) -> None:
        self.battle_count = 0


class ConsumableItem(Item):
    """An item that is used up when consumed."""

    def __init__(self, name: str, sub_type: int, x: int = 0, y: int = 0) -> None:
        super().__init__(name, ItemType.CONSUMABLE, sub_type, x, y)

    @property
    def health_value(self) -> int:
        return 0

    @property
    def poison_value(self) -> int:
        return 0


class Weapon(EquipableItem):
    """A weapon whose damage wears down with use."""

    _label = "Weapon"
    DECREASE_VALUE = 2
    MIN_DAMAGE_VALUE = 1

    def __init__(
        self,
        name: str,
        sub_type: int,
        damage: int,
        x: int = 0,
        y: int = 0,
        start_damage: int | None = None,
        battle_count: int = 0,
    ) -> None:
        super().__init__(name, sub_type, x, y, battle_count)
        self.damage = damage
        self.start_damage = damage if start_damage is None else start_damage

    @property
    def damage_value(self) -> int:
        return self.damage

    def is_damaged(self) -> bool:
        """True after every second battle."""
        return self.battle_count > 0 and self.battle_count % 2 == 0

    def __str__(self) -> str:
        return f"{super().__str__()} | Damage: {self.damage}"


class Armor(EquipableItem):
    """Armor that absorbs damage until it is worn out."""

    _label = "Armor"

    def __init__(
        self,
        name: str,
        sub_type: int,
        armor: int,
        x: int = 0,
        y: int = 0,
        start_armor: int | None = None,
        battle_count: int = 0,
    ) -> None:
        super().__init__(name, sub_type, x, y, battle_count)
        self.armor = armor
        self.start_armor = armor if start_armor is None else start_armor

    @property
    def armor_value(self) -> int:
        return self.armor

    def __str__(self) -> str:
        return f"{super().__str__()} | Armor: {self.armor}"


class HealthPotion(ConsumableItem):
    """A potion that restores health."""

    _label = "Health potion"

    def __init__(self, name: str, sub_type: int, heal: int, x: int = 0, y: int = 0) -> None:
        super().__init__(name, sub_type, x, y)
        self.heal = heal
        self.heal_cap = heal

    @property
    def health_value(self) -> int:
        return self.heal

    def __str__(self) -> str:
        return f"{super().__str__()} | Heal value: {self.heal}"
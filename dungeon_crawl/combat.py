"""Turn-based fights between the player and an enemy."""

from __future__ import annotations

import random
from enum import Enum
from typing import Callable, Protocol

from .items import Armor, HealthPotion, Item, SubItemType, Weapon
from .player import Player
from .units import Enemy


class _Random(Protocol):
    def randint(self, a: int, b: int) -> int: ...

    def randrange(self, stop: int) -> int: ...


class BattleOutcome(Enum):
    """How a battle ended."""

    ENEMY_KILLED = "enemy_killed"
    PLAYER_DIED = "player_died"


_LOOT: tuple[tuple[str, Callable[[], Item]], ...] = (
    ("Enemy dropped a wepon!", lambda: Weapon("Spear", SubItemType.WEAPON, 8)),
    ("Enemy dropped an aromor!", lambda: Armor("Vest", SubItemType.ARMOR, 5)),
    ("Enemy dropped a potion!", lambda: HealthPotion("Spirit", SubItemType.HEAL, 15)),
)


def _drop_loot(player: Player, enemy: Enemy, rng: _Random) -> None:
    if rng.randint(1, 100) > enemy.drop_chance:
        return
    message, make_item = _LOOT[rng.randrange(len(_LOOT))]
    print(message)
    player.inventory.add(make_item())
    player.can_equip = True


def battle(
    player: Player,
    enemy: Enemy,
    rng: _Random | None = None,
    pause: Callable[[], None] | None = None,
) -> BattleOutcome:
    """Fight until one side falls; the enemy strikes first in every round.

    A killed enemy may drop loot, and the player's equipment counts the battle.
    The caller removes a killed enemy from play.
    """
    rng = rng if rng is not None else random.Random()
    pause = pause if pause is not None else (lambda: None)

    if player.enemy_encounter:
        player.enemy_encounter = False
    else:
        enemy.player_encounter = False

    print("Battle started!")
    while True:
        if not player.can_battle(enemy.damage):
            print("You are Dead!")
            pause()
            return BattleOutcome.PLAYER_DIED

        print("Enemy Attacks!")
        player.receive_hit(enemy.damage)
        print(player)

        if enemy.can_battle(player.damage):
            print("Player Attacks!")
            enemy.receive_hit(player.damage, player.health, player.defence)
            print(enemy)
            pause()
            continue

        print("Enemy KILLED!")
        _drop_loot(player, enemy, rng)
        if player.weapon is not None:
            player.weapon.increase_battle_count()
            player.wear_weapon()
        if player.armor is not None:
            player.armor.increase_battle_count()
        pause()
        return BattleOutcome.ENEMY_KILLED
"""Moving the player and the enemies one turn at a time."""

from __future__ import annotations

import random
from typing import Callable

from .board import Board
from .combat import BattleOutcome, battle
from .inventory import Inventory
from .player import Player
from .repair import repair_equipment
from .units import Enemy, move_offset


def enemy_index_at(x: int, y: int, enemies: list[Enemy]) -> int:
    """Index of the last enemy at (x, y), or 0 if none stands there."""
    found = 0
    for index, enemy in enumerate(enemies):
        if enemy.x == x and enemy.y == y:
            found = index
    return found


class Mover:
    """Carries out one turn: the player's step, then each enemy's random step."""

    def __init__(self, rng: random.Random | None = None, pause: Callable[[], None] | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.pause = pause if pause is not None else (lambda: None)
        self.direction = 0

    def _fight(self, player: Player, enemies: list[Enemy], index: int) -> bool:
        outcome = battle(player, enemies[index], self.rng, self.pause)
        if outcome is BattleOutcome.ENEMY_KILLED:
            del enemies[index]
            return True
        return False

    def step(self, player: Player, enemies: list[Enemy], game_items: Inventory, board: Board) -> bool:
        """Play one turn in the chosen direction; False if the player died."""
        alive = True
        battle_index = None

        offset = move_offset(self.direction)
        player.move(offset.x, offset.y, board)

        if player.enemy_encounter:
            if enemies:
                battle_index = enemy_index_at(player.x, player.y, enemies)
                alive = self._fight(player, enemies, battle_index) and alive
            else:
                player.enemy_encounter = False
        if player.item_picked:
            player.pick_up(game_items)
        if player.repair_entered:
            repair_equipment(player, self.pause)
            player.repair_entered = False

        # A killed enemy is removed in place, so the next one waits a turn, as always.
        index = 0
        while index < len(enemies):
            enemy = enemies[index]
            enemy_offset = move_offset(self.rng.randint(1, 4))
            enemy.move(enemy_offset.x, enemy_offset.y, board)
            if enemy.player_encounter and index != battle_index:
                alive = self._fight(player, enemies, index) and alive
            index += 1

        self.direction = 0
        return alive
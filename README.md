# dungeon_crawl

A small turn-based dungeon crawler played on a text board. You move `@`
around a character grid, pick up items (`i`), fight enemies (`e`) and step
next to the repair centre (`R`) to restore worn equipment. When no enemies
are left on a level, the game moves on to the next one.

## Installing

```
pip install .
```

## Playing

```
dungeon-crawl [DIRECTORY]
```

`DIRECTORY` (default: the current directory) must hold the level files:

- `DefaultPlayer.txt`: the starting player as `;`-terminated fields:
  x, y, health, damage, defence, name, start damage.
- `Level<N>.txt`: the board for level `N`, one row per line.
- `LevelInfo<N>.txt`: the player's start position, the board size
  (rows and columns), the items lying on the board and the enemies of
  level `N`. A count of `-1` means there are none.

The game starts at level 1. Reaching level 3 ends the game (its board is
shown as the victory screen); if the player dies, level 99 is loaded and
shown as the game-over screen. The game is saved to and loaded from
`SaveGame.txt` in the same directory.

### Controls

Input is read a line at a time: type a command and press Enter.

- `up`, `down`, `left`, `right` (or an arrow key's escape sequence): move.
- `0` to `4`: equip or consume the item in that inventory slot.
- `s`: save the game.
- `l`: load the saved game.

Messages during battles and at the repair centre wait for Enter.

## How play works

- Weapons add to your damage and armour to your defence. Equipping a new one
  puts the old one back into your inventory.
- Health potions add their value to your health and are used up.
- In battle the enemy strikes first each round. A hit is taken from your
  defence first; once it breaks through, defence drops to 0, your armour is
  ruined and the rest comes off your health.
- After every second battle a weapon loses 2 damage (or drops to 0 once it
  is at 1 or below). The repair centre restores the weapon and armour to
  their starting values.
- A killed enemy may, by its drop chance, leave a Spear, a Vest or a
  Spirit potion in your inventory.

## Using the pieces

The modules can be used on their own, for example to script levels or try
out balance:

- `dungeon_crawl.items`: `Weapon`, `Armor`, `HealthPotion` and their bases.
- `dungeon_crawl.inventory`: `Inventory`, an ordered list of items.
- `dungeon_crawl.board`: `Board`, the character grid.
- `dungeon_crawl.units` and `dungeon_crawl.player`: `Enemy` and `Player`.
- `dungeon_crawl.combat`: `battle()`, returning a `BattleOutcome`.
- `dungeon_crawl.repair`: `repair_equipment()`.
- `dungeon_crawl.levels`: `LevelLoader` and the `FieldReader` used for the
  `;`-separated files.
- `dungeon_crawl.savegame`: `save_game()` and `load_game()`.
- `dungeon_crawl.profile`, `movement`, `renderer`, `events`, `game`: the
  game state, turns, drawing, key handling and the loop.

```python
from dungeon_crawl.items import SubItemType, Weapon
from dungeon_crawl.player import Player

hero = Player(1, 1, 50, 2, 0, "Hero")
hero.inventory.add(Weapon("Spear", SubItemType.WEAPON, 8))
hero.equip(0)
print(hero)  # Player: Hero | Health: 50 | Damage: 10 | Armor: 0
```

## What it does not do

- No level files come with the package; you supply `DefaultPlayer.txt`,
  `Level<N>.txt` and `LevelInfo<N>.txt` yourself.
- Keys are not read as they are pressed: every command is a line of input
  ended with Enter.

## Running the tests

```
pip install .[test]
pytest
```
import io

import pytest

from dungeon_crawl.board import Board
from dungeon_crawl.inventory import Inventory
from dungeon_crawl.items import Armor, HealthPotion, Weapon
from dungeon_crawl.levels import (
    FieldReader,
    LevelLoader,
    read_enemies,
    read_inventory,
    read_player,
)
from dungeon_crawl.player import Player
from dungeon_crawl.units import Enemy

BOARD_ROWS = ["######", "#    #", "#    #", "######"]

LEVEL_INFO = (
    "Player\n"
    "2;3;\n"
    "Board\n"
    "5;6;\n"
    "Game\n"
    "1\n"
    "Sword;WEAPON;1;2;7;9;1;\n"
    "Enemy\n"
    "2\n"
    "2;2;10;3;50;\n"
    "1;4;12;4;25;\n"
)

EMPTY_INFO = "Player\n1;1;\nBoard\n5;6;\nGame\n-1\nEnemy\n-1\n"


def reader_for(text):
    return FieldReader(io.StringIO(text))


def write_level(tmp_path, level, info):
    (tmp_path / f"Level{level}.txt").write_text("\n".join(BOARD_ROWS) + "\n", encoding="utf-8")
    (tmp_path / f"LevelInfo{level}.txt").write_text(info, encoding="utf-8")


def test_read_fields_and_eof():
    reader = reader_for("a;b;")
    assert reader.read_field() == "a"
    assert reader.read_field() == "b"
    assert reader.eof is False
    assert reader.read_field() == ""
    assert reader.eof is True


def test_read_line():
    reader = reader_for("first\nsecond")
    assert reader.read_line() == "first"
    assert reader.read_line() == "second"
    assert reader.eof is True


@pytest.mark.parametrize(
    "text, expected",
    [("12abc;", 12), ("\n-3;", -3), ("x;", 0), (";", 0)],
)
def test_read_int(text, expected):
    assert reader_for(text).read_int() == expected


def test_read_inventory_builds_items():
    text = "Sword;WEAPON;2;3;7;9;1;Vest;ARMOR;4;5;3;6;2;Spirit;HEAL;1;1;15;1;1;\n"
    inventory = Inventory([Weapon("Old", 1, 1)])
    read_inventory(reader_for(text), 3, inventory)
    weapon, armor, potion = inventory
    assert isinstance(weapon, Weapon)
    assert (weapon.name, weapon.x, weapon.y, weapon.damage, weapon.start_damage, weapon.battle_count) == (
        "Sword", 2, 3, 7, 9, 1,
    )
    assert isinstance(armor, Armor)
    assert (armor.armor, armor.start_armor, armor.battle_count) == (3, 6, 2)
    assert isinstance(potion, HealthPotion)
    assert potion.heal == 15


def test_read_inventory_skips_unknown_kind():
    inventory = Inventory()
    read_inventory(reader_for("Rock;STONE;1;1;1;1;1;\n"), 1, inventory)
    assert len(inventory) == 0


def test_read_enemies():
    enemies = [Enemy()]
    read_enemies(reader_for("2;2;10;3;50;\n1;4;12;4;25;\n"), 2, enemies)
    assert [(e.x, e.y, e.health, e.damage, e.drop_chance) for e in enemies] == [
        (2, 2, 10, 3, 50),
        (1, 4, 12, 4, 25),
    ]


def test_read_player():
    player = Player()
    read_player(reader_for("1;2;50;3;4;Hero;3;"), player)
    assert (player.x, player.y, player.health, player.damage, player.defence) == (1, 2, 50, 3, 4)
    assert player.name == "Hero"
    assert player.start_damage == 3


def test_load_player(tmp_path):
    (tmp_path / "DefaultPlayer.txt").write_text("1;2;40;5;0;Hero;5;", encoding="utf-8")
    player = Player()
    LevelLoader(tmp_path).load_player(player)
    assert (player.x, player.y, player.health, player.name) == (1, 2, 40, "Hero")


def test_load_player_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        LevelLoader(tmp_path).load_player(Player())


def test_paths(tmp_path):
    loader = LevelLoader(tmp_path)
    assert loader.level_path(2) == tmp_path / "Level2.txt"
    assert loader.info_path(2) == tmp_path / "LevelInfo2.txt"


def test_set_player_start(tmp_path):
    write_level(tmp_path, 2, LEVEL_INFO)
    player = Player()
    LevelLoader(tmp_path).set_player_start(2, player)
    assert (player.x, player.y) == (2, 3)


def test_load_level(tmp_path):
    write_level(tmp_path, 1, LEVEL_INFO)
    board, items, enemies = Board(), Inventory(), []
    running = LevelLoader(tmp_path).load_level(1, board, items, enemies)
    assert running is True
    assert (board.rows, board.cols) == (5, 6)
    assert board.render() == "".join(row + "\n" for row in BOARD_ROWS)
    assert [item.name for item in items] == ["Sword"]
    assert [(e.x, e.y, e.health) for e in enemies] == [(2, 2, 10), (1, 4, 12)]


def test_load_level_empty_prints_messages(tmp_path, capsys):
    write_level(tmp_path, 1, EMPTY_INFO)
    items = Inventory([Weapon("Old", 1, 1)])
    enemies = [Enemy()]
    LevelLoader(tmp_path).load_level(1, Board(), items, enemies)
    out = capsys.readouterr().out
    assert "There are no more items left to pick!" in out
    assert "No enemies left!" in out
    assert len(items) == 0 and enemies == []


def test_last_level_stops_running_quietly(tmp_path, capsys):
    write_level(tmp_path, LevelLoader.MAX_LEVEL, EMPTY_INFO)
    running = LevelLoader(tmp_path).load_level(LevelLoader.MAX_LEVEL, Board(), Inventory(), [])
    assert running is False
    assert capsys.readouterr().out == ""


def test_missing_level_leaves_state(tmp_path):
    board = Board()
    enemies = [Enemy()]
    items = Inventory([Weapon("Old", 1, 1)])
    running = LevelLoader(tmp_path).load_level(1, board, items, enemies)
    assert running is True
    assert board.rows == 0
    assert len(enemies) == 1 and len(items) == 1
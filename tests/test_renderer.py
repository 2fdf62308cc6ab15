import io
import sys

import pytest

from dungeon_crawl.items import SubItemType, Weapon
from dungeon_crawl.levels import LevelLoader
from dungeon_crawl.player import Player
from dungeon_crawl.profile import Profile
from dungeon_crawl.renderer import CLEAR_SCREEN, Renderer

MAP1 = ["########", "#@     #", "# i    #", "#   e  #", "########"]
MAP2 = ["########", "#    e #", "#  @   #", "#      #", "########"]
INFO1 = "Player\n1;1;\nBoard\n6;8;\nGame\n1\nSword;WEAPON;2;2;5;5;0;\nEnemy\n1\n3;4;10;2;50;\n"
INFO2 = "Player\n2;3;\nBoard\n6;8;\nGame\n-1\nEnemy\n1\n1;5;10;2;50;\n"


@pytest.fixture
def level_dir(tmp_path):
    (tmp_path / "DefaultPlayer.txt").write_text("1;1;30;3;0;Hero;3;\n")
    (tmp_path / "Level1.txt").write_text("\n".join(MAP1) + "\n")
    (tmp_path / "Level2.txt").write_text("\n".join(MAP2) + "\n")
    (tmp_path / "LevelInfo1.txt").write_text(INFO1)
    (tmp_path / "LevelInfo2.txt").write_text(INFO2)
    return tmp_path


def _renderer(directory):
    out = io.StringIO()
    return Renderer(directory / "SaveGame.txt", out), out


def test_save_load_menu_without_save(tmp_path):
    renderer, out = _renderer(tmp_path)
    renderer.save_load_menu()
    assert out.getvalue() == "s -> Save game.\n\n"


def test_save_load_menu_with_save(tmp_path):
    (tmp_path / "SaveGame.txt").write_text("Level\n1\n")
    renderer, out = _renderer(tmp_path)
    renderer.save_load_menu()
    assert out.getvalue() == "s -> Save game.\nl -> Load game.\n\n"


def test_render_does_nothing_without_draw(tmp_path):
    renderer, out = _renderer(tmp_path)
    assert renderer.render(Profile(), True) is True
    assert out.getvalue() == ""


def test_render_draws_board_and_player(level_dir):
    profile = Profile(LevelLoader(level_dir))
    profile.new_game()
    renderer, out = _renderer(level_dir)
    renderer.draw = True
    assert renderer.render(profile, True) is True
    text = out.getvalue()
    assert "#@     #" in text
    assert str(profile.player) in text
    assert "Player inventory:" not in text
    assert renderer.draw is False


def test_render_shows_inventory(level_dir):
    profile = Profile(LevelLoader(level_dir))
    profile.new_game()
    profile.player.inventory.add(Weapon("Axe", SubItemType.WEAPON, 4))
    renderer, out = _renderer(level_dir)
    renderer.draw = True
    renderer.render(profile, True)
    assert "Player inventory:" in out.getvalue()
    assert "Axe" in out.getvalue()


def test_render_advances_level_when_enemies_gone(level_dir, monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("\n"))
    profile = Profile(LevelLoader(level_dir))
    renderer, out = _renderer(level_dir)
    renderer.draw = True
    assert renderer.render(profile, True) is True
    assert profile.level == 2
    assert renderer.draw is True
    assert "***CONGRATULATIONS***" in out.getvalue()
    assert "Next level: LEVEL 2!" in out.getvalue()
    assert (profile.player.x, profile.player.y) == (2, 3)


def test_render_stops_after_last_level(level_dir, monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("\n"))
    profile = Profile(LevelLoader(level_dir))
    profile.level = 2
    renderer, _ = _renderer(level_dir)
    renderer.draw = True
    assert renderer.render(profile, True) is False
    assert renderer.draw is False
    assert profile.level == LevelLoader.MAX_LEVEL


def test_render_inventory_format(tmp_path):
    renderer, out = _renderer(tmp_path)
    player = Player()
    player.inventory.add(Weapon("Axe", SubItemType.WEAPON, 4))
    renderer.render_inventory(player)
    assert out.getvalue() == (
        "Player inventory:\n"
        f"{player.inventory}\n"
        "Equip/Consume item using keys 0,1,2...\n"
    )


def test_render_player_writes_player(tmp_path):
    renderer, out = _renderer(tmp_path)
    player = Player(name="Hero")
    renderer.render_player(player)
    assert out.getvalue() == str(player)


def test_clear_writes_escape(tmp_path):
    renderer, out = _renderer(tmp_path)
    renderer.clear()
    assert out.getvalue() == CLEAR_SCREEN


def test_pause_consumes_a_line(tmp_path, monkeypatch):
    stdin = io.StringIO("first\nsecond\n")
    monkeypatch.setattr(sys, "stdin", stdin)
    renderer, out = _renderer(tmp_path)
    renderer.pause()
    assert stdin.readline() == "second\n"
    assert "continue" in out.getvalue()
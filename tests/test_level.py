import pytest

from tinyrogue.config import Difficulty, MapSettings, Settings
from tinyrogue.game.level import build_level
from tinyrogue.rng import SeededRandom


@pytest.mark.parametrize("difficulty", list(Difficulty))
@pytest.mark.parametrize("seed", range(8))
def test_population_respects_profile(difficulty, seed):
    settings = Settings.load()
    profile = settings.profile(difficulty)
    level = build_level(settings.map, profile, SeededRandom(seed))

    enemies = [e.pos for e in level.registry.enemies]
    items = level.registry.item_positions()

    assert profile.enemy_count[0] <= len(enemies) <= profile.enemy_count[1]
    assert profile.potion_count[0] <= len(items) <= profile.potion_count[1]

    occupied = enemies + items + [level.spawn]
    assert len(set(occupied)) == len(occupied)
    for pos in occupied:
        assert level.grid.is_floor(*pos)
    for enemy in level.registry.enemies:
        assert enemy.alive
        assert profile.enemy_hp[0] <= enemy.hp <= profile.enemy_hp[1]


def test_crowded_map_places_what_fits():
    # A 3x3 map with no rooms opens to a single floor tile: the spawn
    tiny = MapSettings(width=3, height=3, room_count=(0, 0))
    profile = Settings.load().profile(Difficulty.HARD)
    level = build_level(tiny, profile, SeededRandom(0))
    assert level.spawn == (1, 1)
    assert level.registry.enemies == []
    assert level.registry.items == []

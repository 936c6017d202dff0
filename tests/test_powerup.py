import random

import pytest

from entities.player import Player
from entities.powerup import PowerUpManager, PowerUp
from utils.constants import EFFECT_VISION, EFFECT_SPEED, SOUND_BONUS, PATH, EXIT, FPS
from grid_builders import open_room


class RecordingAudio:
    def __init__(self):
        self.played = []

    def play(self, name):
        self.played.append(name)


@pytest.fixture
def audio():
    return RecordingAudio()


@pytest.fixture
def manager(audio):
    return PowerUpManager(rng=random.Random(0), audio=audio, spawn_interval=10, duration=5)


def test_default_timings_follow_frame_rate():
    manager = PowerUpManager()

    assert manager.spawn_interval == 60 * FPS
    assert manager.duration == 15 * FPS


def test_spawns_only_after_interval(manager):
    grid = open_room(9, 9)
    player = Player(1, 1)

    assert not manager.update(9, grid, player)
    assert manager.get_active_powerups() == []

    assert manager.update(10, grid, player)
    types = sorted(p.type for p in manager.get_active_powerups())
    assert types == [EFFECT_SPEED, EFFECT_VISION]


def test_spawn_positions_avoid_player_and_exit():
    grid = open_room(5, 5)
    grid.set_kind(3, 3, EXIT)
    player = Player(1, 1)
    manager = PowerUpManager(rng=random.Random(3), spawn_interval=1)

    for tick in range(1, 60):
        manager.update(tick, grid, player)
        for p in manager.get_active_powerups():
            assert grid.kind_at(p.x, p.y) == PATH
            assert (p.x, p.y) != player.pos


def test_pickup_applies_effect_and_plays_cue(manager, audio):
    player = Player(1, 1)
    manager.powerups[EFFECT_VISION] = PowerUp(2, 1, EFFECT_VISION)
    player.x = 2

    collected = manager.collect(player, tick=20, generation=1)

    assert [p.type for p in collected] == [EFFECT_VISION]
    assert player.vision_radius == 10
    assert audio.played == [SOUND_BONUS]
    assert manager.powerups[EFFECT_VISION] is None

    player.update(25, 1)
    assert player.vision_radius == 5


def test_no_pickup_elsewhere(manager, audio):
    player = Player(1, 1)
    manager.powerups[EFFECT_SPEED] = PowerUp(3, 3, EFFECT_SPEED)

    assert manager.collect(player, tick=0, generation=1) == []
    assert audio.played == []
    assert manager.powerups[EFFECT_SPEED] is not None


def test_reset_clears_and_restarts_timer(manager):
    grid = open_room(9, 9)
    player = Player(1, 1)
    manager.update(10, grid, player)

    manager.reset(100)

    assert manager.get_active_powerups() == []
    assert not manager.update(105, grid, player)
    assert manager.update(110, grid, player)

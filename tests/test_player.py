import random

import pytest

from entities.player import Player
from utils.constants import EFFECT_VISION, EFFECT_SPEED, WALL
from grid_builders import open_room


@pytest.fixture
def room():
    return open_room(9, 9)


def test_defaults():
    player = Player()

    assert player.pos == (1, 1)
    assert player.vision_radius == 5
    assert player.move_interval == 0
    assert player.move_cooldown == 0
    assert player.effects == []


def test_move_into_path(room):
    player = Player(1, 1)

    assert player.attempt_move(1, 0, room)
    assert player.pos == (2, 1)


def test_move_into_wall_is_ignored(room):
    player = Player(1, 1)

    assert not player.attempt_move(-1, 0, room)
    assert not player.attempt_move(0, -1, room)
    assert player.pos == (1, 1)
    assert player.move_cooldown == 0


def test_unthrottled_by_default(room):
    player = Player(1, 1)

    assert player.attempt_move(1, 0, room)
    assert player.attempt_move(1, 0, room)
    assert player.pos == (3, 1)


def test_cooldown_blocks_until_ticked_down(room):
    player = Player(1, 1)
    player.move_interval = 2

    assert player.attempt_move(1, 0, room)
    assert player.move_cooldown == 2
    assert not player.attempt_move(1, 0, room)

    player.update(1, 1)
    assert not player.attempt_move(1, 0, room)
    player.update(2, 1)
    assert player.move_cooldown == 0
    assert player.attempt_move(1, 0, room)
    assert player.pos == (3, 1)


def test_cooldown_never_negative():
    player = Player()
    for tick in range(5):
        player.update(tick, 1)
    assert player.move_cooldown == 0


@pytest.mark.parametrize("seed", range(5))
def test_move_accepted_iff_cooldown_zero_and_target_open(room, seed):
    rng = random.Random(seed)
    room.set_kind(4, 4, WALL)
    player = Player(1, 1)
    player.move_interval = 3
    directions = [(0, -1), (1, 0), (0, 1), (-1, 0)]

    for tick in range(300):
        if rng.random() < 0.6:
            dx, dy = rng.choice(directions)
            expected = player.move_cooldown == 0 and room.is_walkable(player.x + dx, player.y + dy)
            before = player.pos
            moved = player.attempt_move(dx, dy, room)
            assert moved == expected
            assert (player.pos != before) == moved
        else:
            player.update(tick, 1)
        assert player.move_cooldown >= 0
        assert room.is_walkable(*player.pos)


def test_vision_effect_boosts_then_expires():
    player = Player()
    player.apply_effect(EFFECT_VISION, tick=100, generation=1, duration=50)

    assert player.vision_radius == 10
    assert player.has_effect(EFFECT_VISION)

    player.update(149, 1)
    assert player.vision_radius == 10
    player.update(150, 1)
    assert player.vision_radius == 5
    assert not player.has_effect(EFFECT_VISION)


def test_speed_effect_lowers_interval_then_restores():
    player = Player()
    player.default_move_interval = 3
    player.move_interval = 3

    player.apply_effect(EFFECT_SPEED, tick=0, generation=1, duration=10)
    assert player.move_interval == 2

    player.update(10, 1)
    assert player.move_interval == 3


def test_speed_effect_floors_at_zero():
    player = Player()
    player.apply_effect(EFFECT_SPEED, tick=0, generation=1, duration=10)

    assert player.move_interval == 0


def test_reapplying_effect_extends_it():
    player = Player()
    player.apply_effect(EFFECT_VISION, tick=0, generation=1, duration=10)
    player.apply_effect(EFFECT_VISION, tick=8, generation=1, duration=10)

    assert len(player.effects) == 1
    player.update(12, 1)
    assert player.vision_radius == 10
    player.update(18, 1)
    assert player.vision_radius == 5


def test_stale_effect_from_previous_level_is_discarded():
    player = Player()
    player.apply_effect(EFFECT_VISION, tick=0, generation=1, duration=10)
    # New level state that must survive the old effect's expiry
    player.vision_radius = 7

    player.update(50, 2)

    assert player.effects == []
    assert player.vision_radius == 7


def test_unknown_effect_rejected():
    with pytest.raises(ValueError):
        Player().apply_effect('xray', tick=0, generation=1, duration=10)


def test_reset_restores_defaults(room):
    player = Player(1, 1)
    player.move_interval = 4
    player.attempt_move(1, 0, room)
    player.apply_effect(EFFECT_VISION, tick=0, generation=1, duration=10)

    player.reset()

    assert player.pos == (1, 1)
    assert player.vision_radius == 5
    assert player.move_interval == 0
    assert player.move_cooldown == 0
    assert player.effects == []

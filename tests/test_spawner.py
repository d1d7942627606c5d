import pytest

from conftest import DT, ticks

from pixelbird.entities.bird import Bird
from pixelbird.entities.core import TAG_PILLAR, TAG_SCORE_ZONE
from pixelbird.internal.math import Vector2D
from pixelbird.logic.difficulty import DifficultyRamp
from pixelbird.logic.spawner import PillarSpawner


@pytest.fixture
def bird(floating_world, floating_config):
    return floating_world.add(Bird(floating_world, floating_config))


@pytest.fixture
def spawner(floating_world, bird, floating_config):
    return PillarSpawner(floating_world, bird, floating_config)


def test_pair_layout(spawner, floating_config):
    cfg = floating_config
    pair = spawner.spawn()

    assert pair.gap == pytest.approx(cfg.pillar_gap)
    gap_center = (pair.upper.bounds.bottom + pair.lower.bounds.top) / 2
    assert cfg.height / 2 - 15 <= gap_center <= cfg.height / 2 + 15

    for pillar in (pair.upper, pair.lower):
        assert pillar.left == pytest.approx(cfg.width)
        assert pillar.bounds.width == cfg.pillar_width
        assert pillar.bounds.height == cfg.height
    assert pair.upper.flipped and not pair.lower.flipped

    zone = pair.zone.bounds
    assert zone.left == pytest.approx(cfg.width + cfg.score_zone_lead)
    assert zone.width == 0.0
    assert (zone.top, zone.bottom) == (0.0, cfg.height)


def test_spawned_entities_share_base_speed_and_tags(spawner, floating_world):
    pair = spawner.spawn()

    assert {pair.upper.speed, pair.lower.speed, pair.zone.speed} == {90.0}
    assert floating_world.get(TAG_PILLAR) == [pair.upper, pair.lower]
    assert floating_world.get(TAG_SCORE_ZONE) == [pair.zone]
    assert pair.upper.has_tag("surface") and pair.lower.has_tag("surface")
    assert not pair.zone.has_tag("surface")


def test_offsets_stay_in_range(spawner, floating_config):
    for _ in range(50):
        pair = spawner.spawn()
        offset = pair.lower.bounds.top - floating_config.pillar_gap / 2 - floating_config.height / 2
        assert -15.0 <= offset <= 15.0


def test_spawn_loop_fires_every_interval(spawner, floating_world, bird):
    # Let pillars pass through the bird
    bird.collider.set_enabled(False)
    spawner.start()

    for _ in range(ticks(2.5) - 1):
        floating_world.step(DT)
    assert spawner.spawned == 0

    floating_world.step(DT)
    assert spawner.spawned == 1

    for _ in range(ticks(2.5)):
        floating_world.step(DT)
    assert spawner.spawned == 2


def test_dead_bird_skips_spawns_but_loop_keeps_running(spawner, floating_world, bird):
    spawner.start()
    bird.die()

    for _ in range(ticks(5.0)):
        floating_world.step(DT)

    assert spawner.spawned == 0
    assert spawner.running


def test_stop_cancels_the_loop(spawner, floating_world):
    spawner.start()
    spawner.stop()

    for _ in range(ticks(3.0)):
        floating_world.step(DT)

    assert spawner.spawned == 0
    assert not spawner.running
    assert spawner.update not in floating_world.updaters


def test_scrollers_move_left_at_their_own_speed(spawner):
    pair = spawner.spawn()
    pair.lower.speed = 128.0

    spawner.update(DT)

    assert pair.upper.left == pytest.approx(320.0 - 90.0 / 64)
    assert pair.lower.left == pytest.approx(320.0 - 2.0)
    assert pair.zone.left == pytest.approx(380.0 - 90.0 / 64)


def test_nothing_scrolls_once_the_bird_is_dead(spawner, bird):
    pair = spawner.spawn()
    bird.die()

    spawner.update(DT)

    assert pair.upper.left == pytest.approx(320.0)


def test_scrollers_past_the_left_edge_are_destroyed(spawner, floating_world):
    pair = spawner.spawn()
    # Right edges end up just below and just above zero after one tick
    pair.zone.transform.set_position(Vector2D(0.5, pair.zone.position.y))
    pair.upper.transform.set_position(Vector2D(-30.0 + 1.5, pair.upper.position.y))

    spawner.update(DT)

    assert pair.zone not in floating_world.entities
    assert not pair.zone.exists
    assert pair.upper in floating_world.entities
    assert floating_world.get(TAG_SCORE_ZONE) == []


def test_new_spawns_ignore_the_current_difficulty(spawner, floating_world):
    old = spawner.spawn()
    DifficultyRamp(floating_world, 0.5).apply()

    new = spawner.spawn()

    assert old.upper.speed == 90.5
    assert old.zone.speed == 90.5
    assert new.upper.speed == 90.0
    assert new.zone.speed == 90.0

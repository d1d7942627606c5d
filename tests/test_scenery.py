from pixelbird.entities.core import TAG_FLOOR, TAG_SURFACE
from pixelbird.entities.terrain import Background, Floor
from pixelbird.internal.layers import CollisionLayer, RenderLayer
from pixelbird.scenery import build_scenery
from pixelbird.world import World


def test_adds_one_background_and_one_floor(config, rng):
    world = World(config.width, config.height, rng=rng)

    background, floor = build_scenery(world, config)

    assert world.entities == [background, floor]
    assert isinstance(background, Background)
    assert background.sprite.layer is RenderLayer.BACKGROUND
    assert background.bounds.width == 320 and background.bounds.height == 240


def test_floor_is_a_solid_surface_strip(config, rng):
    world = World(config.width, config.height, rng=rng)
    _, floor = build_scenery(world, config)

    assert isinstance(floor, Floor)
    assert floor.tags == {TAG_FLOOR, TAG_SURFACE}
    assert world.get(TAG_SURFACE) == [floor]

    bounds = floor.bounds
    assert bounds.height == 30.0
    assert (bounds.left, bounds.right) == (0.0, 320.0)
    assert bounds.bottom == 240.0
    assert not floor.collider.is_trigger
    assert floor.collider.layer_bits == CollisionLayer.SURFACE
    assert floor.rigidbody.is_static
    assert floor.sprite.layer is RenderLayer.FOREGROUND


def test_world_clear_removes_everything(config, rng):
    world = World(config.width, config.height, rng=rng)
    build_scenery(world, config)

    world.clear()

    assert world.entities == []
    assert world.physics.colliders() == ()
    assert len(world.scheduler) == 0

import pytest

from towertumbler.core import Block, Ground
from towertumbler.physics import BodyKind, GravityManager, PhysicsWorld
from towertumbler.tilt import TiltInput
from towertumbler.vec import Vec2


def test_block_body_properties():
    world = PhysicsWorld()
    size = Vec2(60.0, 20.0)
    body = world.bodies[world.create_block(Vec2(0.0, 100.0), size)]
    assert body.kind is BodyKind.DYNAMIC
    assert body.component == Block(size=size, settled=False)
    assert (body.restitution, body.friction) == (0.3, 0.7)
    assert body.position == Vec2(0.0, 100.0)


def test_ground_body_properties():
    world = PhysicsWorld()
    body = world.bodies[world.create_ground(Vec2(0.0, -200.0), Vec2(400.0, 20.0))]
    assert body.kind is BodyKind.FIXED
    assert isinstance(body.component, Ground)
    assert body.half_extents == Vec2(200.0, 10.0)


def test_ids_are_distinct():
    world = PhysicsWorld()
    ids = {world.create_block(Vec2(), Vec2(1.0, 1.0)) for _ in range(5)}
    ids.add(world.create_ground(Vec2(), Vec2(1.0, 1.0)))
    assert len(ids) == 6
    assert set(world.bodies) == ids


def test_gravity_manager_throttles():
    manager = GravityManager()
    tilt = TiltInput()
    results = [manager.update(tilt, t) is not None for t in (10.0, 16.0, 20.0, 32.0)]
    assert results == [False, True, False, True]


def test_disabled_tilt_gives_straight_down_gravity():
    manager = GravityManager()
    assert manager.update(TiltInput(), 100.0) == Vec2(0.0, -980.0)


def test_tilted_gravity_keeps_magnitude():
    tilt = TiltInput(enabled=True)
    for _ in range(20):
        tilt.update_orientation(0.0, 0.0, 30.0, 0.0)
    gravity = GravityManager().update(tilt, 100.0)
    assert gravity.length() == pytest.approx(980.0)
    assert gravity.x > 0.0
    assert gravity.y < 0.0


def test_world_update_gravity_applies_vector():
    world = PhysicsWorld()
    assert world.update_gravity(TiltInput(), 50.0) is True
    assert world.gravity == Vec2(0.0, -980.0)


def test_world_throttled_update_leaves_gravity():
    world = PhysicsWorld()
    initial = world.gravity
    assert world.update_gravity(TiltInput(), 5.0) is False
    assert world.gravity == initial
    assert initial.y < 0.0
"""Physics bodies and tilt-driven gravity."""

from __future__ import annotations

import enum
import itertools
import logging
from dataclasses import dataclass, field

from towertumbler.core import Block, Ground
from towertumbler.tilt import TiltInput
from towertumbler.vec import Vec2

logger = logging.getLogger(__name__)

PIXELS_PER_METER = 100.0
GROUND_COLOR = (0.3, 0.3, 0.3)
BLOCK_COLOR = (0.8, 0.4, 0.2)


class BodyKind(enum.Enum):
    FIXED = "fixed"
    DYNAMIC = "dynamic"


@dataclass
class Body:
    """A rectangular rigid body centred on `position`."""

    kind: BodyKind
    position: Vec2
    size: Vec2
    color: tuple[float, float, float]
    component: Block | Ground
    restitution: float = 0.0
    friction: float = 0.5

    @property
    def half_extents(self) -> Vec2:
        return Vec2(self.size.x / 2.0, self.size.y / 2.0)


@dataclass
class GravityManager:
    """Turns tilt into a gravity vector, at most once per update interval."""

    base_gravity: float = 980.0  # pixels/s² at 100 pixels per metre
    last_gravity_update: float = 0.0
    update_interval: float = 16.0  # milliseconds

    def update(self, tilt: TiltInput, now_ms: float) -> Vec2 | None:
        """New gravity vector, or None when the update is throttled."""
        if now_ms - self.last_gravity_update < self.update_interval:
            return None
        self.last_gravity_update = now_ms
        direction = tilt.gravity_direction()
        if tilt.enabled:
            logger.debug(
                "Gravity updated: direction=(%.3f, %.3f), magnitude=%.1f",
                direction.x,
                direction.y,
                self.base_gravity,
            )
        return direction * self.base_gravity


@dataclass
class PhysicsWorld:
    """The bodies in play and the current gravity."""

    gravity: Vec2 = field(default_factory=lambda: Vec2(0.0, -9.81 * PIXELS_PER_METER))
    gravity_manager: GravityManager = field(default_factory=GravityManager)
    bodies: dict[int, Body] = field(default_factory=dict)
    _ids: itertools.count = field(default_factory=itertools.count, repr=False)

    def __post_init__(self) -> None:
        logger.info("Physics world initialized")

    def _add(self, body: Body) -> int:
        body_id = next(self._ids)
        self.bodies[body_id] = body
        return body_id

    def create_ground(self, position: Vec2, size: Vec2) -> int:
        """Add a fixed ground slab and return its id."""
        return self._add(Body(BodyKind.FIXED, position, size, GROUND_COLOR, Ground()))

    def create_block(self, position: Vec2, size: Vec2) -> int:
        """Add a dynamic block and return its id."""
        return self._add(
            Body(
                BodyKind.DYNAMIC,
                position,
                size,
                BLOCK_COLOR,
                Block(size=size, settled=False),
                restitution=0.3,
                friction=0.7,
            )
        )

    def update_gravity(self, tilt: TiltInput, now_ms: float) -> bool:
        """Refresh gravity from tilt; True when it was updated."""
        gravity = self.gravity_manager.update(tilt, now_ms)
        if gravity is None:
            return False
        self.gravity = gravity
        return True
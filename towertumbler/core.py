"""Core game entities and scoring."""

from __future__ import annotations

from dataclasses import dataclass, field

from towertumbler.vec import Vec2


@dataclass
class Block:
    """A stackable block."""

    size: Vec2 = field(default_factory=lambda: Vec2(60.0, 20.0))
    settled: bool = False


@dataclass
class Ground:
    """Marker for the fixed ground body."""


@dataclass
class Tower:
    """The tower being built: its height and the ids of its blocks."""

    height: float = 0.0
    blocks: list[int] = field(default_factory=list)


@dataclass
class ScoreSystem:
    """Awards points per placed block, with a bonus for near-perfect stacking."""

    perfect_stack_threshold: float = 3.0  # pixels
    perfect_stack_bonus: int = 2
    base_points: int = 1

    def calculate_score(self, deviation: float) -> int:
        """Points earned for a block placed `deviation` pixels off centre."""
        if deviation <= self.perfect_stack_threshold:
            return self.base_points + self.perfect_stack_bonus
        return self.base_points
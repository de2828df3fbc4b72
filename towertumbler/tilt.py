"""Device tilt input: calibration, dead zone, sensitivity and smoothing."""

from __future__ import annotations

import enum
import logging
import math

from towertumbler.vec import Vec2

logger = logging.getLogger(__name__)

MAX_TILT = 45.0


class InputSource(enum.Enum):
    """Where tilt data comes from."""

    DEVICE = "Device"
    KEYBOARD = "Keyboard"
    VIRTUAL = "Virtual"


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class TiltInput:
    """Raw and processed tilt state, with calibration and control settings."""

    def __init__(
        self,
        *,
        sensitivity: float = 1.0,
        dead_zone: float = 2.0,
        enabled: bool = False,
        input_source: InputSource = InputSource.DEVICE,
        ema_alpha: float = 0.3,
    ) -> None:
        self.beta = 0.0  # front-to-back tilt
        self.gamma = 0.0  # left-to-right tilt
        self.alpha = 0.0  # compass heading
        self.filtered_beta = 0.0
        self.filtered_gamma = 0.0
        self.zero_beta = 0.0
        self.zero_gamma = 0.0
        self.sensitivity = sensitivity
        self.dead_zone = dead_zone
        self.enabled = enabled
        self._input_source = input_source
        self.ema_alpha = ema_alpha
        self.last_update_time = 0.0

    @property
    def sensitivity(self) -> float:
        """Scaling factor, kept between 0.5 and 2.0."""
        return self._sensitivity

    @sensitivity.setter
    def sensitivity(self, value: float) -> None:
        self._sensitivity = _clamp(value, 0.5, 2.0)

    @property
    def dead_zone(self) -> float:
        """Dead zone in degrees, kept between 0 and 10."""
        return self._dead_zone

    @dead_zone.setter
    def dead_zone(self, value: float) -> None:
        self._dead_zone = _clamp(value, 0.0, 10.0)

    @property
    def input_source(self) -> InputSource:
        return self._input_source

    @input_source.setter
    def input_source(self, source: InputSource) -> None:
        self._input_source = source
        logger.info("Input source changed to: %s", source.value)

    def update_orientation(self, alpha: float, beta: float, gamma: float, timestamp: float) -> None:
        """Record raw orientation and update the filtered values."""
        self.alpha = alpha
        self.beta = beta
        self.gamma = gamma
        self.last_update_time = timestamp

        scaled_beta = self._apply_dead_zone(beta - self.zero_beta) * self.sensitivity
        scaled_gamma = self._apply_dead_zone(gamma - self.zero_gamma) * self.sensitivity

        self.filtered_beta = self._ema(self.filtered_beta, scaled_beta)
        self.filtered_gamma = self._ema(self.filtered_gamma, scaled_gamma)

    def _apply_dead_zone(self, value: float) -> float:
        if abs(value) < self.dead_zone:
            return 0.0
        return math.copysign(abs(value) - self.dead_zone, value)

    def _ema(self, previous: float, current: float) -> float:
        return self.ema_alpha * current + (1.0 - self.ema_alpha) * previous

    def normalized_tilt(self) -> Vec2:
        """Filtered tilt mapped to -1..1 on each axis; zero when disabled."""
        if not self.enabled:
            return Vec2(0.0, 0.0)
        return Vec2(
            _clamp(self.filtered_gamma / MAX_TILT, -1.0, 1.0),
            _clamp(self.filtered_beta / MAX_TILT, -1.0, 1.0),
        )

    def gravity_direction(self) -> Vec2:
        """Unit gravity direction for the physics world."""
        if not self.enabled:
            return Vec2(0.0, -1.0)
        normalized = self.normalized_tilt()
        return Vec2(normalized.x, -1.0 + abs(normalized.y) * 0.3).normalize_or_zero()

    def calibrate_zero_point(self) -> None:
        """Take the current raw orientation as the zero point."""
        self.zero_beta = self.beta
        self.zero_gamma = self.gamma
        logger.info(
            "Calibrated zero point: beta=%.2f°, gamma=%.2f°", self.zero_beta, self.zero_gamma
        )

    def debug_info(self) -> str:
        """One-line summary of the current input state."""
        normalized = self.normalized_tilt()
        return (
            f"TiltInput - Raw: β={self.beta:.2f}° γ={self.gamma:.2f}° | "
            f"Filtered: β={self.filtered_beta:.2f}° γ={self.filtered_gamma:.2f}° | "
            f"Normalized: {normalized.x:.2f},{normalized.y:.2f} | "
            f"Enabled: {str(self.enabled).lower()} | Source: {self.input_source.value}"
        )
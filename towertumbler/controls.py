"""Keyboard state and the input systems that drive tilt and calibration."""

from __future__ import annotations

import enum
import logging

from towertumbler.tilt import InputSource, TiltInput

logger = logging.getLogger(__name__)

TILT_SPEED = 30.0  # degrees per second
KEYBOARD_TILT_LIMIT = 45.0
KEYBOARD_BETA = 10.0
DEAD_ZONE_STEP = 0.5


class Key(enum.Enum):
    """Keys the game reacts to."""

    ARROW_LEFT = enum.auto()
    ARROW_RIGHT = enum.auto()
    ARROW_UP = enum.auto()
    ARROW_DOWN = enum.auto()
    KEY_A = enum.auto()
    KEY_C = enum.auto()
    KEY_D = enum.auto()
    KEY_I = enum.auto()
    DIGIT1 = enum.auto()
    DIGIT2 = enum.auto()
    DIGIT3 = enum.auto()
    DIGIT4 = enum.auto()
    EQUAL = enum.auto()
    MINUS = enum.auto()
    ESCAPE = enum.auto()


class KeyboardState:
    """Keys held down, and keys that went down during the current frame."""

    def __init__(self) -> None:
        self._held: set[Key] = set()
        self._just: set[Key] = set()

    def press(self, key: Key) -> None:
        if key not in self._held:
            self._just.add(key)
        self._held.add(key)

    def release(self, key: Key) -> None:
        self._held.discard(key)

    def pressed(self, key: Key) -> bool:
        return key in self._held

    def just_pressed(self, key: Key) -> bool:
        return key in self._just

    def end_frame(self) -> None:
        """Forget which keys were newly pressed; held keys stay held."""
        self._just.clear()


_SENSITIVITY_KEYS = {
    Key.DIGIT1: 0.5,
    Key.DIGIT2: 1.0,
    Key.DIGIT3: 1.5,
    Key.DIGIT4: 2.0,
}

_NEXT_SOURCE = {
    InputSource.DEVICE: InputSource.KEYBOARD,
    InputSource.KEYBOARD: InputSource.VIRTUAL,
    InputSource.VIRTUAL: InputSource.DEVICE,
}


def handle_calibration_input(keys: KeyboardState, tilt: TiltInput) -> None:
    """Calibration, sensitivity, source and dead-zone hotkeys."""
    if keys.just_pressed(Key.KEY_C):
        tilt.calibrate_zero_point()

    for key, sensitivity in _SENSITIVITY_KEYS.items():
        if keys.just_pressed(key):
            tilt.sensitivity = sensitivity
            logger.info("Sensitivity set to %.1fx", sensitivity)

    if keys.just_pressed(Key.KEY_D):
        tilt.input_source = _NEXT_SOURCE[tilt.input_source]

    if keys.just_pressed(Key.EQUAL):
        tilt.dead_zone = tilt.dead_zone + DEAD_ZONE_STEP
        logger.info("Dead zone increased to %.1f°", tilt.dead_zone)
    if keys.just_pressed(Key.MINUS):
        tilt.dead_zone = tilt.dead_zone - DEAD_ZONE_STEP
        logger.info("Dead zone decreased to %.1f°", tilt.dead_zone)

    if keys.just_pressed(Key.KEY_I):
        logger.info("%s", tilt.debug_info())


def _clamp(value: float, limit: float) -> float:
    return max(-limit, min(limit, value))


def handle_keyboard_tilt_input(
    keys: KeyboardState, tilt: TiltInput, elapsed: float, delta: float
) -> None:
    """Simulate device tilt with the arrow keys when the keyboard is the input source.

    `elapsed` and `delta` are in seconds.
    """
    if tilt.input_source is not InputSource.KEYBOARD:
        return

    increment = TILT_SPEED * delta
    beta = tilt.beta
    gamma = tilt.gamma
    if keys.pressed(Key.ARROW_LEFT):
        gamma -= increment
    if keys.pressed(Key.ARROW_RIGHT):
        gamma += increment
    if keys.pressed(Key.ARROW_UP):
        beta -= increment
    if keys.pressed(Key.ARROW_DOWN):
        beta += increment

    tilt.update_orientation(
        0.0,
        _clamp(beta, KEYBOARD_TILT_LIMIT),
        _clamp(gamma, KEYBOARD_TILT_LIMIT),
        elapsed * 1000.0,
    )
    tilt.enabled = True


def handle_virtual_tilt_input(tilt: TiltInput) -> None:
    """Keep input enabled when on-screen controls are the source."""
    if tilt.input_source is InputSource.VIRTUAL:
        tilt.enabled = True


def handle_keyboard_input(keys: KeyboardState, tilt: TiltInput) -> None:
    """Set a fixed left or right tilt while a direction key is held."""
    if keys.pressed(Key.ARROW_LEFT) or keys.pressed(Key.KEY_A):
        tilt.beta = -KEYBOARD_BETA
    elif keys.pressed(Key.ARROW_RIGHT) or keys.pressed(Key.KEY_D):
        tilt.beta = KEYBOARD_BETA
    else:
        tilt.beta = 0.0
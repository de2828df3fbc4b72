import pytest

from towertumbler.controls import (
    Key,
    KeyboardState,
    handle_calibration_input,
    handle_keyboard_input,
    handle_keyboard_tilt_input,
    handle_virtual_tilt_input,
)
from towertumbler.tilt import InputSource, TiltInput


def _tap(key):
    keys = KeyboardState()
    keys.press(key)
    return keys


def test_press_sets_pressed_and_just_pressed():
    keys = KeyboardState()
    keys.press(Key.KEY_C)
    assert keys.pressed(Key.KEY_C)
    assert keys.just_pressed(Key.KEY_C)


def test_end_frame_clears_just_pressed_only():
    keys = KeyboardState()
    keys.press(Key.KEY_C)
    keys.end_frame()
    assert keys.pressed(Key.KEY_C)
    assert not keys.just_pressed(Key.KEY_C)


def test_holding_key_does_not_retrigger():
    keys = KeyboardState()
    keys.press(Key.KEY_C)
    keys.end_frame()
    keys.press(Key.KEY_C)
    assert not keys.just_pressed(Key.KEY_C)


def test_release_clears_pressed():
    keys = KeyboardState()
    keys.press(Key.ARROW_LEFT)
    keys.release(Key.ARROW_LEFT)
    assert not keys.pressed(Key.ARROW_LEFT)


@pytest.mark.parametrize(
    "key, expected",
    [(Key.DIGIT1, 0.5), (Key.DIGIT2, 1.0), (Key.DIGIT3, 1.5), (Key.DIGIT4, 2.0)],
)
def test_digit_keys_set_sensitivity(key, expected):
    tilt = TiltInput()
    handle_calibration_input(_tap(key), tilt)
    assert tilt.sensitivity == expected


def test_c_calibrates_zero_point():
    tilt = TiltInput()
    tilt.update_orientation(0.0, 12.0, -7.0, 0.0)
    handle_calibration_input(_tap(Key.KEY_C), tilt)
    assert (tilt.zero_beta, tilt.zero_gamma) == (12.0, -7.0)


def test_d_cycles_input_source():
    tilt = TiltInput()
    seen = []
    for _ in range(3):
        handle_calibration_input(_tap(Key.KEY_D), tilt)
        seen.append(tilt.input_source)
    assert seen == [InputSource.KEYBOARD, InputSource.VIRTUAL, InputSource.DEVICE]


def test_equal_raises_dead_zone_by_step():
    tilt = TiltInput()
    before = tilt.dead_zone
    handle_calibration_input(_tap(Key.EQUAL), tilt)
    assert tilt.dead_zone == pytest.approx(before + 0.5)


def test_minus_lowers_dead_zone_but_not_below_zero():
    tilt = TiltInput(dead_zone=0.0)
    handle_calibration_input(_tap(Key.MINUS), tilt)
    assert tilt.dead_zone == 0.0


def test_equal_does_not_exceed_limit():
    tilt = TiltInput(dead_zone=10.0)
    handle_calibration_input(_tap(Key.EQUAL), tilt)
    assert tilt.dead_zone == 10.0


def test_keyboard_tilt_ignored_for_device_source():
    tilt = TiltInput()
    keys = _tap(Key.ARROW_RIGHT)
    handle_keyboard_tilt_input(keys, tilt, 1.0, 0.5)
    assert tilt.gamma == 0.0
    assert tilt.enabled is False


def test_keyboard_tilt_moves_gamma_and_enables():
    tilt = TiltInput(input_source=InputSource.KEYBOARD)
    handle_keyboard_tilt_input(_tap(Key.ARROW_RIGHT), tilt, 2.0, 0.5)
    assert tilt.gamma == pytest.approx(15.0)
    assert tilt.enabled is True
    assert tilt.last_update_time == pytest.approx(2000.0)


def test_keyboard_tilt_clamped():
    tilt = TiltInput(input_source=InputSource.KEYBOARD)
    keys = KeyboardState()
    keys.press(Key.ARROW_LEFT)
    keys.press(Key.ARROW_DOWN)
    handle_keyboard_tilt_input(keys, tilt, 0.0, 10.0)
    assert tilt.gamma == -45.0
    assert tilt.beta == 45.0


def test_opposite_keys_cancel():
    tilt = TiltInput(input_source=InputSource.KEYBOARD)
    keys = KeyboardState()
    keys.press(Key.ARROW_UP)
    keys.press(Key.ARROW_DOWN)
    handle_keyboard_tilt_input(keys, tilt, 0.0, 1.0)
    assert tilt.beta == 0.0


def test_virtual_input_enables_only_for_virtual_source():
    device = TiltInput()
    handle_virtual_tilt_input(device)
    virtual = TiltInput(input_source=InputSource.VIRTUAL)
    handle_virtual_tilt_input(virtual)
    assert device.enabled is False
    assert virtual.enabled is True


@pytest.mark.parametrize(
    "key, expected",
    [(Key.ARROW_LEFT, -10.0), (Key.KEY_A, -10.0), (Key.ARROW_RIGHT, 10.0), (Key.KEY_D, 10.0)],
)
def test_keyboard_input_sets_beta(key, expected):
    tilt = TiltInput()
    handle_keyboard_input(_tap(key), tilt)
    assert tilt.beta == expected


def test_keyboard_input_without_keys_resets_beta():
    tilt = TiltInput()
    tilt.beta = 33.0
    handle_keyboard_input(KeyboardState(), tilt)
    assert tilt.beta == 0.0
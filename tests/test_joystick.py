import pytest

from oledarcade.joystick import (
    PIN_X,
    PIN_Y,
    SWITCH_PIN,
    Direction,
    Joystick,
    JoystickHandler,
    JoystickPosition,
    classify,
    position_to_string,
)


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (500, 1000, Direction.LEFT),
        (522, 1023, Direction.LEFT),
        (500, 0, Direction.RIGHT),
        (522, 10, Direction.RIGHT),
        (500, 500, Direction.STOP),
        (522, 515, Direction.STOP),
        (0, 500, Direction.UP),
        (10, 518, Direction.UP),
        (1018, 500, Direction.DOWN),
        (1023, 518, Direction.DOWN),
    ],
)
def test_classify_boundaries(x, y, expected):
    assert classify(x, y) == expected


@pytest.mark.parametrize(
    "x, y", [(499, 1000), (523, 500), (500, 999), (11, 500), (1017, 500), (500, 516)]
)
def test_classify_outside_ranges(x, y):
    assert classify(x, y) is None


def test_direction_codes():
    readings = [(511, 1010), (511, 5), (511, 510), (5, 510), (1020, 510)]
    assert [int(classify(x, y)) for x, y in readings] == [1, 2, 3, 4, 5]


@pytest.mark.parametrize(
    "pos, name",
    [
        (JoystickPosition.CENTER, "Center"),
        (JoystickPosition.UP, "Up"),
        (JoystickPosition.DOWN, "Down"),
        (JoystickPosition.LEFT, "Left"),
        (JoystickPosition.RIGHT, "Right"),
    ],
)
def test_position_to_string(pos, name):
    assert position_to_string(pos) == name


def test_position_to_string_unknown():
    assert position_to_string(None) == "Unknown"


def test_handler_polls_up():
    assert JoystickHandler().poll() is JoystickPosition.UP


def _make(readings, switch_level=1):
    return Joystick(lambda pin: readings[pin], lambda pin: switch_level if pin == SWITCH_PIN else -1)


def test_joystick_direction_reads_configured_pins():
    joy = _make({PIN_X: 511, PIN_Y: 1010})
    assert joy.direction() is Direction.LEFT


def test_joystick_switch():
    assert _make({}, switch_level=0).switch() == 0
    assert _make({}, switch_level=1).switch() == 1


def test_check_position_stores_result():
    readings = {PIN_X: 5, PIN_Y: 510}
    joy = _make(readings)
    assert joy.result is None
    assert joy.check_position() is Direction.UP
    assert joy.result is Direction.UP
    readings[PIN_X] = 300
    assert joy.check_position() is None
    assert joy.result is None


def test_custom_pins():
    joy = Joystick(lambda pin: {"X": 1020, "Y": 505}[pin], lambda pin: 1, "X", "Y", 7)
    assert joy.direction() is Direction.DOWN
"""Analog joystick handling: position classification and the switch."""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable
from typing import Any

log = logging.getLogger(__name__)

PIN_X = "A2"
PIN_Y = "A1"
SWITCH_PIN = 2


class JoystickPosition(enum.Enum):
    """Coarse joystick position."""

    CENTER = "Center"
    UP = "Up"
    DOWN = "Down"
    LEFT = "Left"
    RIGHT = "Right"


class Direction(enum.IntEnum):
    """Direction recognised from raw axis readings."""

    LEFT = 1
    RIGHT = 2
    STOP = 3
    UP = 4
    DOWN = 5


_DIRECTION_LABELS = {
    Direction.LEFT: "Left",
    Direction.RIGHT: "Right",
    Direction.STOP: "Stop",
    Direction.UP: "UP",
    Direction.DOWN: "Down",
}


def position_to_string(pos: Any) -> str:
    """Return the display name of a position, or "Unknown"."""
    if isinstance(pos, JoystickPosition):
        return pos.value
    return "Unknown"


def classify(x: int, y: int) -> Direction | None:
    """Map raw 10-bit axis readings to a direction, or None if ambiguous."""
    centred_x = 500 <= x <= 522
    if centred_x and 1000 <= y <= 1023:
        direction = Direction.LEFT
    elif centred_x and 0 <= y <= 10:
        direction = Direction.RIGHT
    elif centred_x and 500 <= y <= 515:
        direction = Direction.STOP
    elif 0 <= x <= 10 and 500 <= y <= 518:
        direction = Direction.UP
    elif 1018 <= x <= 1023 and 500 <= y <= 518:
        direction = Direction.DOWN
    else:
        return None
    log.debug(_DIRECTION_LABELS[direction])
    return direction


class JoystickHandler:
    """A joystick source that always reports the stick held up."""

    def poll(self) -> JoystickPosition:
        return JoystickPosition.UP


class Joystick:
    """A joystick read through analog and digital input callables."""

    def __init__(
        self,
        read_analog: Callable[[Any], int],
        read_digital: Callable[[Any], int],
        pin_x: Any = PIN_X,
        pin_y: Any = PIN_Y,
        switch_pin: Any = SWITCH_PIN,
    ) -> None:
        self._read_analog = read_analog
        self._read_digital = read_digital
        self.pin_x = pin_x
        self.pin_y = pin_y
        self.switch_pin = switch_pin
        self.result: Direction | None = None

    def direction(self) -> Direction | None:
        """Read both axes and classify the stick position."""
        return classify(self._read_analog(self.pin_x), self._read_analog(self.pin_y))

    def switch(self) -> int:
        """Return the switch level; 0 means pressed (the input is pulled up)."""
        return self._read_digital(self.switch_pin)

    def check_position(self) -> Direction | None:
        """Read the direction, remember it as ``result`` and return it."""
        self.result = self.direction()
        log.debug("joystick result: %s", self.result)
        return self.result
"""Main menu: pick a game with the joystick, start it with the switch."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from .joystick import Direction, Joystick
from .oled import Oled

log = logging.getLogger(__name__)

CAR_ROW = 2
PONG_ROW = 20
RECORDS_ROW = 40
MOVE_DELAY_MS = 1000
FRAME_DELAY_MS = 10

_NEXT = {CAR_ROW: PONG_ROW, PONG_ROW: RECORDS_ROW, RECORDS_ROW: CAR_ROW}
_PREVIOUS = {CAR_ROW: RECORDS_ROW, PONG_ROW: CAR_ROW, RECORDS_ROW: PONG_ROW}
_CHOICES = {CAR_ROW: 1, PONG_ROW: 2, RECORDS_ROW: 3}

Delay = Callable[[int], object]


def _sleep_ms(milliseconds: int) -> None:
    time.sleep(milliseconds / 1000)


class MainWindow:
    """The game selection menu."""

    def __init__(self, oled: Oled, joystick: Joystick,
                 delay: Delay | None = None) -> None:
        self._oled = oled
        self._joystick = joystick
        self._delay = delay if delay is not None else _sleep_ms
        self.pointer = CAR_ROW
        self.previous_pointer = CAR_ROW

    def process_input(self) -> None:
        """Move the pointer down or up the menu."""
        direction = self._joystick.direction()
        if direction is Direction.DOWN and self.pointer in _NEXT:
            self.pointer = _NEXT[self.pointer]
            self._delay(MOVE_DELAY_MS)
        if direction is Direction.UP and self.pointer in _PREVIOUS:
            self.pointer = _PREVIOUS[self.pointer]
            self._delay(MOVE_DELAY_MS)

    def check_button(self) -> int:
        """Return the switch level; 0 means pressed."""
        level = self._joystick.switch()
        log.debug("switch: %s", level)
        return level

    def show(self) -> int:
        """Draw one menu frame; return the chosen entry (1-3) or 0."""
        self.process_input()
        oled = self._oled
        if self.check_button() != 1 and self.pointer in _CHOICES:
            oled.clear()
            oled.update()
            return _CHOICES[self.pointer]
        if self.pointer != self.previous_pointer:
            oled.clear()
            self.previous_pointer = self.pointer
        oled.print("Super Car", 2, CAR_ROW)
        oled.print("|", 100, self.pointer)
        oled.print("Records:", 2, RECORDS_ROW)
        oled.print("Pong", 2, PONG_ROW)
        oled.update()
        self._delay(FRAME_DELAY_MS)
        return 0
"""The console: a menu that starts the car game or pong."""

from __future__ import annotations

import argparse
import logging
import random
import time
from collections.abc import Callable

from .car import CarGame
from .fonts import SMALL_FONT
from .joystick import PIN_X, Joystick
from .menu import MainWindow
from .oled import Oled
from .pong import PongGame

log = logging.getLogger(__name__)

CAR_CHOICE = 1
PONG_CHOICE = 2

Delay = Callable[[int], object]

_STICK_READINGS = {
    "center": (510, 510),
    "up": (5, 510),
    "down": (1020, 510),
    "left": (510, 1010),
    "right": (510, 5),
}


def _sleep_ms(milliseconds: int) -> None:
    time.sleep(milliseconds / 1000)


class Console:
    """Ties the menu and both games to one display and one joystick."""

    def __init__(
        self,
        oled: Oled,
        joystick: Joystick,
        delay: Delay | None = None,
        rng: random.Random | None = None,
    ) -> None:
        delay = delay if delay is not None else _sleep_ms
        rng = rng if rng is not None else random.Random()
        self.oled = oled
        self.menu = MainWindow(oled, joystick, delay)
        self.car = CarGame(oled, joystick, delay, rng)
        self.pong = PongGame(oled, joystick, delay, rng)

    def tick(self) -> int:
        """Show the menu once and run the game it picks; return the choice."""
        choice = self.menu.show()
        if choice == CAR_CHOICE:
            self.car.run()
        elif choice == PONG_CHOICE:
            self.pong.run()
        return choice


class _SimulatedStick:
    """A joystick at rest whose position can be set per frame."""

    def __init__(self) -> None:
        self.position = "center"

    def read_analog(self, pin: object) -> int:
        x, y = _STICK_READINGS[self.position]
        return x if pin == PIN_X else y

    def read_digital(self, pin: object) -> int:
        return 1


def _parse_moves(text: str) -> list[str]:
    moves = [move.strip() for move in text.split(",") if move.strip()]
    unknown = [move for move in moves if move not in _STICK_READINGS]
    if unknown:
        raise argparse.ArgumentTypeError(f"unknown move(s): {', '.join(unknown)}")
    return moves


def main(argv: list[str] | None = None) -> int:
    """Render the menu on a simulated display and print it."""
    parser = argparse.ArgumentParser(
        prog="oledarcade",
        description="Drive the game menu on a simulated 128x64 display.",
    )
    parser.add_argument("--frames", type=int, default=1,
                        help="number of menu frames to run")
    parser.add_argument("--moves", type=_parse_moves, default=[],
                        help="comma separated stick positions, one per frame")
    parser.add_argument("--realtime", action="store_true",
                        help="honour the game's delays")
    args = parser.parse_args(argv)
    if args.frames < 1:
        parser.error("--frames must be at least 1")

    log.info("Hello")
    stick = _SimulatedStick()
    joystick = Joystick(stick.read_analog, stick.read_digital)
    oled = Oled()
    oled.begin()
    oled.set_font(SMALL_FONT)
    delay: Delay = _sleep_ms if args.realtime else (lambda ms: None)
    console = Console(oled, joystick, delay, random.Random())

    moves = iter(args.moves)
    for _ in range(args.frames):
        stick.position = next(moves, "center")
        console.tick()
    print(oled.to_text())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""Car game: dodge the oncoming traffic on a two-lane road."""

from __future__ import annotations

import random
import time
from collections.abc import Callable
from dataclasses import dataclass

from .joystick import Direction, Joystick
from .oled import Oled

ROAD_LEFT = 25
ROAD_RIGHT = 103
INITIAL_SPEED = 0.3
ACCELERATION = 0.001
RESPAWN_LINE = 70
GAME_OVER_PAUSE_MS = 2500
FRAME_DELAY_MS = 5
START_STOP_DELAY_MS = 500
PLAYER_STEP = 2

Delay = Callable[[int], object]


def _sleep_ms(milliseconds: int) -> None:
    time.sleep(milliseconds / 1000)


@dataclass
class Car:
    """An oncoming car; ``x`` runs down the screen, ``y`` across it."""

    x: float
    y: float
    rand: float = 0.0


@dataclass
class Player:
    """The player's car as a bounding box in screen coordinates."""

    x1: float = 40
    x2: float = 50
    y1: float = 45
    y2: float = 60


class CarGame:
    """The car game: one ``step`` draws and advances one frame."""

    def __init__(
        self,
        oled: Oled,
        joystick: Joystick,
        delay: Delay | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._oled = oled
        self._joystick = joystick
        self._delay = delay if delay is not None else _sleep_ms
        self._rng = rng if rng is not None else random.Random()
        self.speed = INITIAL_SPEED
        self.cars = [Car(-10, 40, 40), Car(-50, 70), Car(-30, 60)]
        self.score = 0
        self.record = 0
        self.player = Player()

    def reset(self) -> None:
        """Put every car back at its start and bank the score as a record."""
        self.speed = INITIAL_SPEED
        first, second, third = self.cars
        first.x, first.y, first.rand = -10, 40, 40
        second.x, second.y = -50, 70
        third.x, third.y, third.rand = -30, 60, 0
        self.record = max(self.score, self.record)
        self.score = 0
        self.player = Player()

    def _rect(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self._oled.draw_rect(int(x1), int(y1), int(x2), int(y2))

    def _draw_car(self, car: Car) -> None:
        x, y = car.x, car.y
        self._rect(y, x, y + 10, x + 10)
        self._rect(y, x + 1, y - 3, x + 4)
        self._rect(y, x + 7, y - 3, x + 10)
        self._rect(y + 10, x + 7, y + 13, x + 10)
        self._rect(y + 10, x + 1, y + 13, x + 4)

    def _respawn_first(self, car: Car) -> None:
        previous = car.rand
        car.rand = self._rng.randrange(30, 50)
        while car.rand == previous:
            car.rand = self._rng.randrange(30, 50)
        car.y = car.rand
        car.x = -10
        self.score += 1

    def _respawn_second(self, car: Car) -> None:
        car.rand = self._rng.randrange(50, 70)
        self.score += 1
        car.y = car.rand
        car.x = -80

    def _respawn_third(self, car: Car) -> None:
        car.rand = self._rng.randrange(70, 85)
        car.y = car.rand
        car.x = -60
        self.score += 1

    def _draw_cars(self) -> None:
        respawns = (self._respawn_first, self._respawn_second, self._respawn_third)
        for car, respawn in zip(self.cars, respawns):
            self._draw_car(car)
            if car.x > RESPAWN_LINE:
                respawn(car)

    def _move_player(self) -> None:
        direction = self._joystick.direction()
        p = self.player
        if direction is Direction.RIGHT:
            if p.x1 + 5 < ROAD_RIGHT and p.x2 + 5 < ROAD_RIGHT:
                p.x1 += PLAYER_STEP
                p.x2 += PLAYER_STEP
        if direction is Direction.LEFT:
            if p.x1 - 5 > ROAD_LEFT and p.x2 - 5 > ROAD_LEFT:
                p.x1 -= PLAYER_STEP
                p.x2 -= PLAYER_STEP
        if direction is Direction.DOWN:
            if p.y1 + 1 < 64 and p.y2 < 64:
                p.y1 += PLAYER_STEP
                p.y2 += PLAYER_STEP
        if direction is Direction.UP:
            if p.y1 - 1 > 0 and p.y2 > 0:
                p.y1 -= PLAYER_STEP
                p.y2 -= PLAYER_STEP

    def _draw_player(self) -> None:
        self._move_player()
        p = self.player
        self._rect(p.x1, p.y1, p.x2, p.y2)
        self._rect(p.x1, p.y1 + 1, p.x2 - 14, p.y2 - 9)
        self._rect(p.x1, p.y1 + 10, p.x2 - 14, p.y2)
        self._rect(p.x1 + 14, p.y1 + 10, p.x2, p.y2)
        self._rect(p.x1 + 14, p.y1 + 1, p.x2, p.y2 - 9)

    def _check_collisions(self) -> bool:
        crashed = False
        for car in self.cars:
            p = self.player
            if car.x - 15 < p.y1 <= car.x + 10 and car.y - 14 < p.x1 < car.y + 14:
                self._oled.clear()
                self._oled.print("GAME OVER!", 30, 30)
                self._oled.update()
                self._delay(GAME_OVER_PAUSE_MS)
                self.reset()
                crashed = True
        return crashed

    def step(self) -> bool:
        """Draw and advance one frame; return True if the player crashed."""
        oled = self._oled
        oled.clear()
        oled.draw_line(ROAD_LEFT, 1, ROAD_LEFT, 64)
        oled.draw_line(ROAD_RIGHT, 1, ROAD_RIGHT, 64)
        self._joystick.direction()
        oled.print("c=", 2, 2)
        oled.print(str(self.score), 14, 2)
        oled.print("r=", 2, 10)
        oled.print(str(self.record), 14, 10)

        self._draw_cars()
        self._draw_player()
        crashed = self._check_collisions()
        self.speed += ACCELERATION
        for car in self.cars:
            car.x += self.speed
        oled.update()
        self._delay(FRAME_DELAY_MS)
        return crashed

    def run(self) -> None:
        """Play until the joystick switch is pressed."""
        self._delay(START_STOP_DELAY_MS)
        while self._joystick.switch() != 0:
            self.step()
        self._oled.clear()
        self._delay(START_STOP_DELAY_MS)
"""Single-player pong against the walls of the screen."""

from __future__ import annotations

import random
import time
from collections.abc import Callable

from .joystick import Direction, Joystick
from .oled import Oled

ACCELERATION = 0.001
BALL_RADIUS = 4
PADDLE_WIDTH = 20
PADDLE_ROW = 63
PADDLE_STEP = 3
FRAME_DELAY_MS = 5
SERVE_DELAY_MS = 50
GAME_OVER_PAUSE_MS = 1000

Delay = Callable[[int], object]


def _sleep_ms(milliseconds: int) -> None:
    time.sleep(milliseconds / 1000)


class PongGame:
    """The pong game: one ``step`` draws and advances one frame."""

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
        self.paddle = 30.0
        self.ball_x = 30.0
        self.ball_y = 35.0
        self.dir_x = 1.0
        self.dir_y = 1.0
        self.speed = 0.0
        self.score = 0
        self.record = 0

    def serve(self) -> None:
        """Place the ball and pick random directions for it."""
        a = self._rng.randrange(6, 45)
        self.ball_x = float(a)
        self._delay(SERVE_DELAY_MS)
        self._rng.randrange(6, 120)
        self.ball_y = float(a)
        self._delay(SERVE_DELAY_MS)
        a1 = self._rng.randrange(1, 1024)
        self._delay(SERVE_DELAY_MS)
        self.dir_y = -1.0 if a1 % 2 == 0 else 1.0
        self._rng.randrange(1, 1024)
        self._delay(SERVE_DELAY_MS)
        b1 = self._rng.randrange(1, 1024)
        self.dir_x = -1.0 if b1 % 2 == 0 else 1.0

    def _game_over(self) -> None:
        self.record = max(self.record, self.score)
        oled = self._oled
        oled.clear()
        oled.print("GAME OVER!", 30, 20)
        oled.print("Your chet:", 20, 30)
        oled.print(str(self.score), 100, 30)
        oled.print("Record:", 20, 40)
        oled.print(str(self.record), 100, 40)
        oled.update()
        self._delay(GAME_OVER_PAUSE_MS)
        self.paddle = 30.0
        self.ball_x = 30.0
        self.ball_y = 35.0
        self.speed = 0.0
        self.score = 0

    def _move_ball(self) -> bool:
        missed = False
        if self.ball_y - 5 <= 1:
            self.dir_y *= -1
        if self.ball_y >= 62:
            if self.paddle - 2 <= self.ball_x <= self.paddle + 22:
                self.dir_y *= -1
                self.score += 1
            else:
                self._game_over()
                missed = True

        if self.ball_x - 5 <= 1:
            self.dir_x *= -1
        if self.ball_x + 5 >= 128:
            self.dir_x *= -1

        self.speed += ACCELERATION
        self.ball_y += self.dir_y
        self.ball_y += self.speed if self.dir_y > 0 else -self.speed
        self.ball_x += self.dir_x
        self.ball_x += self.speed if self.dir_x > 0 else -self.speed
        return missed

    def _draw_paddle(self) -> None:
        direction = self._joystick.direction()
        if direction is Direction.RIGHT and self.paddle + 21 < 127:
            self.paddle += PADDLE_STEP
        if direction is Direction.LEFT and self.paddle - 1 > 1:
            self.paddle -= PADDLE_STEP
        self._oled.draw_line(int(self.paddle), PADDLE_ROW,
                             int(self.paddle + PADDLE_WIDTH), PADDLE_ROW)

    def step(self) -> bool:
        """Draw and advance one frame; return True if the ball was missed."""
        oled = self._oled
        oled.clear()
        oled.draw_line(1, 1, 1, 64)
        oled.draw_line(127, 1, 127, 64)
        oled.draw_line(1, 1, 128, 1)
        self._joystick.direction()
        missed = self._move_ball()
        oled.draw_circle(int(self.ball_x), int(self.ball_y), BALL_RADIUS)
        self._draw_paddle()
        oled.update()
        self._delay(FRAME_DELAY_MS)
        return missed

    def run(self) -> None:
        """Serve, then play until the joystick switch is pressed."""
        self.serve()
        self._delay(200)
        while self._joystick.switch() != 0:
            self.step()
        self._oled.clear()
        self._delay(500)
import random

from oledarcade.fonts import SMALL_FONT
from oledarcade.joystick import PIN_X, Joystick
from oledarcade.oled import Oled
from oledarcade.pong import PongGame

POSITIONS = {
    "center": (510, 510),
    "left": (510, 1010),
    "right": (510, 5),
}


class Stick:
    def __init__(self, switches=(), default_switch=1):
        self.pos = "center"
        self.switches = list(switches)
        self.default_switch = default_switch

    def analog(self, pin):
        x, y = POSITIONS[self.pos]
        return x if pin == PIN_X else y

    def digital(self, pin):
        return self.switches.pop(0) if self.switches else self.default_switch


class ScriptedRng:
    def __init__(self, values):
        self.values = list(values)

    def randrange(self, low, high):
        value = self.values.pop(0)
        assert low <= value < high
        return value


def make_game(stick=None, rng=None):
    stick = stick or Stick()
    oled = Oled()
    oled.set_font(SMALL_FONT)
    delays = []
    game = PongGame(oled, Joystick(stick.analog, stick.digital), delays.append,
                    rng or random.Random(1))
    return game, oled, stick, delays


def test_serve_uses_first_draw_for_both_coordinates():
    game, _, _, delays = make_game(rng=ScriptedRng([10, 100, 4, 7, 8]))
    game.serve()
    assert game.ball_x == 10
    assert game.ball_y == 10
    assert game.dir_y == -1
    assert game.dir_x == -1
    assert delays == [50, 50, 50, 50]


def test_serve_odd_draws_go_positive():
    game, _, _, _ = make_game(rng=ScriptedRng([20, 7, 5, 2, 9]))
    game.serve()
    assert game.dir_y == 1
    assert game.dir_x == 1


def test_ball_bounces_off_paddle():
    game, _, _, _ = make_game()
    game.ball_y = 62
    game.ball_x = game.paddle + 10
    game.dir_y = 1
    assert game.step() is False
    assert game.dir_y == -1
    assert game.score == 1
    assert game.ball_y < 62


def test_missed_ball_ends_round():
    game, _, _, delays = make_game()
    game.score = 4
    game.paddle = 60
    game.ball_y = 62
    game.ball_x = 10
    assert game.step() is True
    assert 1000 in delays
    assert game.score == 0
    assert game.record == 4
    assert game.paddle == 30


def test_ball_bounces_off_left_wall():
    game, _, _, _ = make_game()
    game.ball_x = 3
    game.dir_x = -1
    game.step()
    assert game.dir_x == 1
    assert game.ball_x > 3


def test_paddle_moves_right_and_stops_at_edge():
    game, oled, stick, _ = make_game()
    stick.pos = "right"
    game.step()
    assert game.paddle > 30
    assert oled.get_pixel(int(game.paddle), 63)
    game.paddle = 106
    game.step()
    assert game.paddle == 106


def test_run_plays_until_switch_pressed():
    stick = Stick(switches=[1, 0])
    game, oled, _, delays = make_game(stick)
    game.run()
    assert delays.count(5) == 1
    assert delays[-1] == 500
    assert not any(oled.buffer)
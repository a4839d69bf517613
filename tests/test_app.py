import random

import pytest

from oledarcade.app import Console, main
from oledarcade.fonts import SMALL_FONT
from oledarcade.joystick import PIN_X, Joystick
from oledarcade.oled import Oled


class Stick:
    def __init__(self, switch):
        self.switch = switch

    def analog(self, pin):
        return 510

    def digital(self, pin):
        return self.switch


def make_console(switch):
    stick = Stick(switch)
    oled = Oled()
    oled.set_font(SMALL_FONT)
    delays = []
    console = Console(oled, Joystick(stick.analog, stick.digital),
                      delays.append, random.Random(3))
    return console, oled, delays


def test_tick_without_press_shows_menu():
    console, oled, delays = make_console(switch=1)
    assert console.tick() == 0
    assert delays == [10]
    assert any(oled.buffer)


def test_tick_starts_car_game():
    console, oled, delays = make_console(switch=0)
    assert console.tick() == 1
    assert delays == [500, 500]
    assert not any(oled.buffer)


def test_tick_starts_pong():
    console, _, delays = make_console(switch=0)
    console.menu.pointer = 20
    console.menu.previous_pointer = 20
    assert console.tick() == 2
    assert 200 in delays
    assert delays[-1] == 500


def test_tick_records_entry_runs_nothing():
    console, _, delays = make_console(switch=0)
    console.menu.pointer = 40
    assert console.tick() == 3
    assert delays == []


def test_main_prints_display(capsys):
    assert main(["--frames", "2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 64
    assert all(len(line) == 128 for line in lines)
    assert any("#" in line for line in lines)


def test_main_moves_pointer(capsys):
    assert main(["--frames", "1", "--moves", "down"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert any("#" in line[100:106] for line in lines[20:28])


def test_main_rejects_unknown_move():
    with pytest.raises(SystemExit):
        main(["--moves", "sideways"])


def test_main_rejects_zero_frames():
    with pytest.raises(SystemExit):
        main(["--frames", "0"])
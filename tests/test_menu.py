import pytest

from oledarcade.fonts import SMALL_FONT
from oledarcade.joystick import PIN_X, Joystick
from oledarcade.menu import MainWindow
from oledarcade.oled import Oled

POSITIONS = {
    "center": (510, 510),
    "up": (5, 510),
    "down": (1020, 510),
}


class Stick:
    def __init__(self, switch=1):
        self.pos = "center"
        self.switch = switch

    def analog(self, pin):
        x, y = POSITIONS[self.pos]
        return x if pin == PIN_X else y

    def digital(self, pin):
        return self.switch


def make_menu(switch=1):
    stick = Stick(switch)
    oled = Oled()
    oled.set_font(SMALL_FONT)
    delays = []
    menu = MainWindow(oled, Joystick(stick.analog, stick.digital), delays.append)
    return menu, oled, stick, delays


def test_down_cycles_through_entries():
    menu, _, stick, delays = make_menu()
    stick.pos = "down"
    seen = []
    for _ in range(3):
        menu.process_input()
        seen.append(menu.pointer)
    assert seen == [20, 40, 2]
    assert delays == [1000, 1000, 1000]


def test_up_cycles_in_reverse():
    menu, _, stick, _ = make_menu()
    stick.pos = "up"
    seen = []
    for _ in range(3):
        menu.process_input()
        seen.append(menu.pointer)
    assert seen == [40, 20, 2]


def test_centered_stick_leaves_pointer():
    menu, _, _, delays = make_menu()
    menu.process_input()
    assert menu.pointer == 2
    assert delays == []


def test_show_without_press_draws_menu():
    menu, oled, _, delays = make_menu(switch=1)
    assert menu.show() == 0
    assert delays == [10]
    assert any(oled.get_pixel(x, y) for x in range(100, 106) for y in range(2, 10))


@pytest.mark.parametrize("pointer, choice", [(2, 1), (20, 2), (40, 3)])
def test_show_with_press_returns_choice(pointer, choice):
    menu, oled, _, _ = make_menu(switch=0)
    menu.pointer = pointer
    menu.previous_pointer = pointer
    oled.fill()
    assert menu.show() == choice
    assert not any(oled.buffer)


def test_check_button_reports_switch():
    menu, _, stick, _ = make_menu(switch=0)
    assert menu.check_button() == 0
    stick.switch = 1
    assert menu.check_button() == 1
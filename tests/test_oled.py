import pytest

from oledarcade.fonts import SMALL_FONT, TINY_FONT
from oledarcade.oled import (
    BUFFER_SIZE,
    CENTER,
    HEIGHT,
    RIGHT,
    SSD1306_ADDR,
    WIDTH,
    Oled,
)


class Recorder:
    def __init__(self):
        self.sent = []

    def __call__(self, address, payload):
        self.sent.append((address, payload))


def lit(oled):
    return {(x, y) for y in range(HEIGHT) for x in range(WIDTH) if oled.get_pixel(x, y)}


@pytest.fixture
def oled():
    display = Oled()
    display.set_font(SMALL_FONT)
    return display


def test_begin_sends_init_sequence_then_frame():
    bus = Recorder()
    display = Oled(bus)
    display.begin()
    assert all(address == SSD1306_ADDR for address, _ in bus.sent)
    assert bus.sent[0][1] == bytes((0x00, 0xAE))
    assert bus.sent[24][1] == bytes((0x00, 0xAF))
    frame = bus.sent[-1][1]
    assert frame[0] == 0x40
    assert len(frame) == BUFFER_SIZE + 1
    assert display.font is None


def test_update_sends_buffer_contents():
    bus = Recorder()
    display = Oled(bus)
    display.set_pixel(5, 9)
    display.update()
    commands = [payload for _, payload in bus.sent[:6]]
    assert commands[0] == bytes((0x00, 0x21))
    assert commands[3] == bytes((0x00, 0x22))
    assert bus.sent[-1][1][1:] == display.buffer


def test_invert_and_brightness_commands():
    bus = Recorder()
    display = Oled(bus)
    display.invert(True)
    display.invert(False)
    display.set_brightness(0x10)
    payloads = [payload for _, payload in bus.sent]
    assert payloads == [b"\x00\xa7", b"\x00\xa6", b"\x00\x81", b"\x00\x10"]


def test_pixel_round_trip(oled):
    oled.set_pixel(3, 10)
    assert oled.get_pixel(3, 10)
    oled.invert_pixel(3, 10)
    assert not oled.get_pixel(3, 10)
    oled.invert_pixel(3, 10)
    oled.clear_pixel(3, 10)
    assert lit(oled) == set()


def test_out_of_range_pixels_ignored(oled):
    oled.set_pixel(-1, 0)
    oled.set_pixel(128, 0)
    oled.set_pixel(0, 64)
    assert oled.buffer == bytes(BUFFER_SIZE)
    assert oled.get_pixel(200, 200) is False


def test_fill_and_clear(oled):
    oled.fill()
    assert oled.buffer == b"\xff" * BUFFER_SIZE
    oled.clear()
    assert oled.buffer == bytes(BUFFER_SIZE)


def test_hline_and_vline_lengths(oled):
    oled.draw_hline(10, 20, 7)
    assert lit(oled) == {(x, 20) for x in range(10, 17)}
    oled.clear_hline(10, 20, 7)
    oled.draw_vline(4, 30, 5)
    assert lit(oled) == {(4, y) for y in range(30, 35)}
    oled.clear_vline(4, 30, 5)
    assert lit(oled) == set()


def test_horizontal_line_matches_hline():
    a, b = Oled(), Oled()
    a.draw_line(30, 12, 5, 12)
    b.draw_hline(5, 12, 25)
    assert a.buffer == b.buffer


def test_diagonal_line(oled):
    oled.draw_line(0, 0, 10, 10)
    assert lit(oled) == {(i, i) for i in range(11)}


def test_line_endpoint_order_irrelevant():
    a, b = Oled(), Oled()
    a.draw_line(2, 3, 40, 17)
    b.draw_line(40, 17, 2, 3)
    assert a.buffer == b.buffer
    assert a.get_pixel(2, 3) and a.get_pixel(40, 17)


def test_clear_line_undoes_draw(oled):
    oled.draw_line(5, 50, 60, 2)
    assert lit(oled)
    oled.clear_line(5, 50, 60, 2)
    assert lit(oled) == set()


def test_rect_outline(oled):
    oled.draw_rect(20, 10, 10, 30)
    pixels = lit(oled)
    for corner in [(10, 10), (20, 10), (10, 30), (20, 30)]:
        assert corner in pixels
    assert (15, 20) not in pixels
    oled.clear_rect(10, 10, 20, 30)
    assert lit(oled) == set()


def test_round_rect(oled):
    oled.draw_round_rect(0, 0, 3, 3)
    assert lit(oled) == set()
    oled.draw_round_rect(10, 10, 20, 20)
    pixels = lit(oled)
    assert (10, 10) not in pixels
    assert (11, 11) in pixels
    oled.clear_round_rect(10, 10, 20, 20)
    assert lit(oled) == set()


def test_circle_is_symmetric(oled):
    oled.draw_circle(60, 30, 8)
    pixels = lit(oled)
    assert {(60, 38), (60, 22), (68, 30), (52, 30)} <= pixels
    assert pixels == {(120 - x, y) for x, y in pixels}
    assert pixels == {(x, 60 - y) for x, y in pixels}
    oled.clear_circle(60, 30, 8)
    assert lit(oled) == set()


def test_print_char_matches_glyph(oled):
    oled.print("A", 0, 0)
    glyph = SMALL_FONT.glyph_bytes("A")
    for column, byte in enumerate(glyph):
        for bit in range(8):
            assert oled.get_pixel(column, bit) == bool(byte & (1 << bit))


def test_print_right_and_center_alignment():
    a, b = Oled(), Oled()
    for display in (a, b):
        display.set_font(SMALL_FONT)
    a.print("AB", RIGHT, 0)
    b.print("AB", 116, 0)
    assert a.buffer == b.buffer
    a.clear()
    b.clear()
    a.print("AB", CENTER, 0)
    b.print("AB", 58, 0)
    assert a.buffer == b.buffer


def test_inverted_text_fills_space(oled):
    oled.invert_text(True)
    oled.print(" ", 0, 0)
    assert lit(oled) == {(x, y) for x in range(6) for y in range(8)}


def test_tiny_font_pixel_count(oled):
    oled.set_font(TINY_FONT)
    oled.print("A", 0, 0)
    expected = sum(bin(byte).count("1") for byte in TINY_FONT.glyph_bytes("A"))
    assert len(lit(oled)) == expected
    assert all(x < 4 and y < 6 for x, y in lit(oled))


def test_print_without_font_raises():
    with pytest.raises(RuntimeError):
        Oled().print("hi", 0, 0)


def test_print_unsupported_char_raises(oled):
    with pytest.raises(ValueError):
        oled.print("\u00e9", 0, 0)


def _same_as_text(number_call, text):
    a, b = Oled(), Oled()
    a.set_font(SMALL_FONT)
    b.set_font(SMALL_FONT)
    number_call(a)
    b.print(text, 0, 0)
    return a.buffer == b.buffer


def test_print_int_padding():
    assert _same_as_text(lambda d: d.print_int(-42, 0, 0, 5, "0"), "-0042")
    assert _same_as_text(lambda d: d.print_int(0, 0, 0), "0")
    assert _same_as_text(lambda d: d.print_int(123, 0, 0, 2, "x"), "123")


def test_print_float_formats():
    assert _same_as_text(lambda d: d.print_float(3.14159, 2, 0, 0), "3.14")
    assert _same_as_text(
        lambda d: d.print_float(-1.5, 1, 0, 0, ",", 6, "0"), "-001,5"
    )


def test_bitmap_round_trip(oled):
    pattern = bytes((i * 37) & 0xFF for i in range(BUFFER_SIZE))
    oled.draw_bitmap(0, 0, pattern, WIDTH, HEIGHT)
    assert oled.buffer == pattern


def test_to_text_shape(oled):
    oled.set_pixel(0, 0)
    rows = oled.to_text().split("\n")
    assert len(rows) == HEIGHT
    assert all(len(row) == WIDTH for row in rows)
    assert rows[0][0] == "#"
    assert rows[0][1] == "."
"""Frame buffer and drawing primitives for a 128x64 SSD1306 display.

Drawing happens in an in-memory frame buffer laid out the way the
controller expects it: eight pages of 128 column bytes, the low bit of each
byte being the top pixel of its page. ``update`` pushes the buffer through
a transport, a callable ``transport(address, payload)`` that stands for the
I2C bus.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from itertools import chain, repeat

from .fonts import Font, load_font

WIDTH = 128
HEIGHT = 64
BUFFER_SIZE = WIDTH * HEIGHT // 8

SSD1306_ADDR = 0x3C

LEFT = 0
RIGHT = 9999
CENTER = 9998

SSD1306_COMMAND = 0x00
SSD1306_DATA = 0xC0
SSD1306_DATA_CONTINUE = 0x40

# Fundamental commands
SSD1306_SET_CONTRAST_CONTROL = 0x81
SSD1306_DISPLAY_ALL_ON_RESUME = 0xA4
SSD1306_DISPLAY_ALL_ON = 0xA5
SSD1306_NORMAL_DISPLAY = 0xA6
SSD1306_INVERT_DISPLAY = 0xA7
SSD1306_DISPLAY_OFF = 0xAE
SSD1306_DISPLAY_ON = 0xAF
SSD1306_NOP = 0xE3
# Scrolling commands
SSD1306_HORIZONTAL_SCROLL_RIGHT = 0x26
SSD1306_HORIZONTAL_SCROLL_LEFT = 0x27
SSD1306_HORIZONTAL_SCROLL_VERTICAL_AND_RIGHT = 0x29
SSD1306_HORIZONTAL_SCROLL_VERTICAL_AND_LEFT = 0x2A
SSD1306_DEACTIVATE_SCROLL = 0x2E
SSD1306_ACTIVATE_SCROLL = 0x2F
SSD1306_SET_VERTICAL_SCROLL_AREA = 0xA3
# Addressing setting commands
SSD1306_SET_LOWER_COLUMN = 0x00
SSD1306_SET_HIGHER_COLUMN = 0x10
SSD1306_MEMORY_ADDR_MODE = 0x20
SSD1306_SET_COLUMN_ADDR = 0x21
SSD1306_SET_PAGE_ADDR = 0x22
# Hardware configuration commands
SSD1306_SET_START_LINE = 0x40
SSD1306_SET_SEGMENT_REMAP = 0xA0
SSD1306_SET_MULTIPLEX_RATIO = 0xA8
SSD1306_COM_SCAN_DIR_INC = 0xC0
SSD1306_COM_SCAN_DIR_DEC = 0xC8
SSD1306_SET_DISPLAY_OFFSET = 0xD3
SSD1306_SET_COM_PINS = 0xDA
SSD1306_CHARGE_PUMP = 0x8D
# Timing and driving scheme commands
SSD1306_SET_DISPLAY_CLOCK_DIV_RATIO = 0xD5
SSD1306_SET_PRECHARGE_PERIOD = 0xD9
SSD1306_SET_VCOM_DESELECT = 0xDB

INIT_SEQUENCE = (
    SSD1306_DISPLAY_OFF,
    SSD1306_SET_DISPLAY_CLOCK_DIV_RATIO, 0x80,
    SSD1306_SET_MULTIPLEX_RATIO, 0x3F,
    SSD1306_SET_DISPLAY_OFFSET, 0x00,
    SSD1306_SET_START_LINE | 0x0,
    SSD1306_CHARGE_PUMP, 0x14,
    SSD1306_MEMORY_ADDR_MODE, 0x00,
    SSD1306_SET_SEGMENT_REMAP | 0x1,
    SSD1306_COM_SCAN_DIR_DEC,
    SSD1306_SET_COM_PINS, 0x12,
    SSD1306_SET_CONTRAST_CONTROL, 0xCF,
    SSD1306_SET_PRECHARGE_PERIOD, 0xF1,
    SSD1306_SET_VCOM_DESELECT, 0x40,
    SSD1306_DISPLAY_ALL_ON_RESUME,
    SSD1306_NORMAL_DISPLAY,
    SSD1306_DISPLAY_ON,
)

PIXEL_ON = "#"
PIXEL_OFF = "."

Transport = Callable[[int, bytes], object]


def _in_bounds(x: int, y: int) -> bool:
    return 0 <= x < WIDTH and 0 <= y < HEIGHT


class Oled:
    """A 128x64 monochrome display with its own frame buffer."""

    def __init__(self, transport: Transport | None = None) -> None:
        self._transport = transport
        self._buffer = bytearray(BUFFER_SIZE)
        self.font: Font | None = None
        self.inverted_text = False

    @property
    def buffer(self) -> bytes:
        """A copy of the frame buffer."""
        return bytes(self._buffer)

    # Bus

    def _send(self, payload: bytes) -> None:
        if self._transport is not None:
            self._transport(SSD1306_ADDR, payload)

    def _send_command(self, value: int) -> None:
        self._send(bytes((SSD1306_COMMAND, value & 0xFF)))

    def begin(self) -> None:
        """Initialise the controller and blank the screen."""
        for command in INIT_SEQUENCE:
            self._send_command(command)
        self.clear()
        self.update()
        self.font = None

    def update(self) -> None:
        """Send the whole frame buffer to the display."""
        for command in (SSD1306_SET_COLUMN_ADDR, 0, WIDTH - 1,
                        SSD1306_SET_PAGE_ADDR, 0, HEIGHT // 8 - 1):
            self._send_command(command)
        self._send(bytes((SSD1306_DATA_CONTINUE,)) + bytes(self._buffer))

    def set_brightness(self, value: int) -> None:
        self._send_command(SSD1306_SET_CONTRAST_CONTROL)
        self._send_command(value)

    def invert(self, mode: bool) -> None:
        """Switch the whole display between inverted and normal."""
        self._send_command(SSD1306_INVERT_DISPLAY if mode else SSD1306_NORMAL_DISPLAY)

    # Buffer

    def clear(self) -> None:
        self._buffer[:] = bytes(BUFFER_SIZE)

    def fill(self) -> None:
        self._buffer[:] = b"\xff" * BUFFER_SIZE

    @staticmethod
    def _locate(x: int, y: int) -> tuple[int, int]:
        return (y // 8) * WIDTH + x, 1 << (y % 8)

    def set_pixel(self, x: int, y: int) -> None:
        if _in_bounds(x, y):
            index, mask = self._locate(x, y)
            self._buffer[index] |= mask

    def clear_pixel(self, x: int, y: int) -> None:
        if _in_bounds(x, y):
            index, mask = self._locate(x, y)
            self._buffer[index] &= ~mask & 0xFF

    def invert_pixel(self, x: int, y: int) -> None:
        if _in_bounds(x, y):
            index, mask = self._locate(x, y)
            self._buffer[index] ^= mask

    def get_pixel(self, x: int, y: int) -> bool:
        """Return True if the pixel is lit; False outside the screen."""
        if not _in_bounds(x, y):
            return False
        index, mask = self._locate(x, y)
        return bool(self._buffer[index] & mask)

    def _plot(self, x: int, y: int, on: bool) -> None:
        if on:
            self.set_pixel(x, y)
        else:
            self.clear_pixel(x, y)

    # Text

    def invert_text(self, mode: bool) -> None:
        self.inverted_text = bool(mode)

    def set_font(self, font: Font | bytes | bytearray | Sequence[int]) -> None:
        """Select the font used by the print methods."""
        self.font = font if isinstance(font, Font) else load_font(font)
        self.inverted_text = False

    def _require_font(self) -> Font:
        if self.font is None:
            raise RuntimeError("no font selected")
        return self.font

    def print(self, text: str, x: int, y: int) -> None:
        """Draw ``text``; ``x`` may be RIGHT or CENTER to align it."""
        font = self._require_font()
        width = len(text) * font.x_size
        if x == RIGHT:
            x = WIDTH - width
        if x == CENTER:
            x = (WIDTH - width) // 2
        for position, char in enumerate(text):
            self._print_char(font, char, x + position * font.x_size, y)

    def _print_char(self, font: Font, char: str, x: int, y: int) -> None:
        glyph = font.glyph_bytes(char)
        if font.y_size % 8 == 0:
            for row in range(font.y_size // 8):
                for column in range(font.x_size):
                    byte = glyph[column + row * font.x_size]
                    for bit in range(8):
                        lit = bool(byte & (1 << bit))
                        self._plot(x + column, y + row * 8 + bit,
                                   lit != self.inverted_text)
        else:
            bits = chain(_bits_msb_first(glyph), repeat(False))
            for column in range(font.x_size):
                for row in range(font.y_size):
                    lit = next(bits)
                    self._plot(x + column, y + row, lit != self.inverted_text)

    def print_int(self, num: int, x: int, y: int, length: int = 0,
                  filler: str = " ") -> None:
        """Print an integer, padded with ``filler`` to ``length`` characters."""
        num = int(num)
        sign = "-" if num < 0 else ""
        digits = str(abs(num))
        padding = max(0, length - len(digits) - len(sign))
        self.print(sign + filler * padding + digits, x, y)

    def print_float(self, num: float, dec: int, x: int, y: int,
                    divider: str = ".", length: int = 0,
                    filler: str = " ") -> None:
        """Print a number with ``dec`` decimals in a field of ``length``."""
        negative = num < 0
        if length < 0:
            text = f"{num:<{-length}.{dec}f}"
        else:
            text = f"{num:>{length}.{dec}f}"
        if divider != ".":
            text = text.replace(".", divider)
        if filler != " ":
            if negative:
                rest = "".join(filler if ch in " -" else ch for ch in text[1:])
                text = "-" + rest
            else:
                text = text.replace(" ", filler)
        self.print(text, x, y)

    # Graphics

    def draw_bitmap(self, x: int, y: int, bitmap: Sequence[int],
                    sx: int, sy: int) -> None:
        """Draw a page-ordered bitmap of ``sx`` by ``sy`` pixels."""
        for cy in range(sy):
            mask = 1 << (cy % 8)
            for cx in range(sx):
                data = bitmap[cx + (cy // 8) * sx]
                self._plot(x + cx, y + cy, bool(data & mask))

    def _hline(self, x: int, y: int, length: int, on: bool) -> None:
        if not _in_bounds(x, y):
            return
        start, mask = self._locate(x, y)
        for index in range(start, min(start + length, BUFFER_SIZE)):
            if on:
                self._buffer[index] |= mask
            else:
                self._buffer[index] &= ~mask & 0xFF

    def _vline(self, x: int, y: int, length: int, on: bool) -> None:
        if not _in_bounds(x, y):
            return
        for cy in range(length):
            self._plot(x, y + cy, on)

    def draw_hline(self, x: int, y: int, length: int) -> None:
        self._hline(x, y, length, True)

    def clear_hline(self, x: int, y: int, length: int) -> None:
        self._hline(x, y, length, False)

    def draw_vline(self, x: int, y: int, length: int) -> None:
        self._vline(x, y, length, True)

    def clear_vline(self, x: int, y: int, length: int) -> None:
        self._vline(x, y, length, False)

    def _line(self, x1: int, y1: int, x2: int, y2: int, on: bool) -> None:
        if x2 - x1 < 0:
            x1, y1, x2, y2 = x2, y2, x1, y1
        if y2 - y1 < 0:
            x1, y1, x2, y2 = x2, y2, x1, y1

        if y1 == y2:
            if x1 > x2:
                x1, x2 = x2, x1
            self._hline(x1, y1, x2 - x1, on)
        elif x1 == x2:
            if y1 > y2:
                y1, y2 = y2, y1
            self._vline(x1, y1, y2 - y1, on)
        elif abs(x2 - x1) > abs(y2 - y1):
            delta = (y2 - y1) / (x2 - x1)
            ty = float(y1)
            step = -1 if x1 > x2 else 1
            for i in range(x1, x2 + step, step):
                self._plot(i, int(ty + 0.5), on)
                ty += delta * step
        else:
            delta = (x2 - x1) / (y2 - y1)
            tx = float(x1)
            rows = range(y2 + 1, y1, -1) if y1 > y2 else range(y1, y2 + 1)
            for i in rows:
                self._plot(int(tx + 0.5), i, on)
                tx += delta

    def draw_line(self, x1: int, y1: int, x2: int, y2: int) -> None:
        self._line(x1, y1, x2, y2, True)

    def clear_line(self, x1: int, y1: int, x2: int, y2: int) -> None:
        self._line(x1, y1, x2, y2, False)

    def _rect(self, x1: int, y1: int, x2: int, y2: int, on: bool) -> None:
        x1, x2 = min(x1, x2), max(x1, x2)
        y1, y2 = min(y1, y2), max(y1, y2)
        self._hline(x1, y1, x2 - x1, on)
        self._hline(x1, y2, x2 - x1, on)
        self._vline(x1, y1, y2 - y1, on)
        self._vline(x2, y1, y2 - y1 + 1, on)

    def draw_rect(self, x1: int, y1: int, x2: int, y2: int) -> None:
        self._rect(x1, y1, x2, y2, True)

    def clear_rect(self, x1: int, y1: int, x2: int, y2: int) -> None:
        self._rect(x1, y1, x2, y2, False)

    def _round_rect(self, x1: int, y1: int, x2: int, y2: int, on: bool) -> None:
        x1, x2 = min(x1, x2), max(x1, x2)
        y1, y2 = min(y1, y2), max(y1, y2)
        if x2 - x1 > 4 and y2 - y1 > 4:
            self._plot(x1 + 1, y1 + 1, on)
            self._plot(x2 - 1, y1 + 1, on)
            self._plot(x1 + 1, y2 - 1, on)
            self._plot(x2 - 1, y2 - 1, on)
            self._hline(x1 + 2, y1, x2 - x1 - 3, on)
            self._hline(x1 + 2, y2, x2 - x1 - 3, on)
            self._vline(x1, y1 + 2, y2 - y1 - 3, on)
            self._vline(x2, y1 + 2, y2 - y1 - 3, on)

    def draw_round_rect(self, x1: int, y1: int, x2: int, y2: int) -> None:
        self._round_rect(x1, y1, x2, y2, True)

    def clear_round_rect(self, x1: int, y1: int, x2: int, y2: int) -> None:
        self._round_rect(x1, y1, x2, y2, False)

    def _circle(self, x: int, y: int, radius: int, on: bool) -> None:
        for px, py in _circle_points(x, y, radius):
            self._plot(px, py, on)

    def draw_circle(self, x: int, y: int, radius: int) -> None:
        self._circle(x, y, radius, True)

    def clear_circle(self, x: int, y: int, radius: int) -> None:
        self._circle(x, y, radius, False)

    def to_text(self) -> str:
        """Render the frame buffer as 64 lines of 128 characters, '#' for lit."""
        return "\n".join(
            "".join(PIXEL_ON if self.get_pixel(x, y) else PIXEL_OFF
                    for x in range(WIDTH))
            for y in range(HEIGHT)
        )


def _bits_msb_first(data: bytes) -> Iterator[bool]:
    for byte in data:
        for bit in range(7, -1, -1):
            yield bool(byte & (1 << bit))


def _circle_points(x: int, y: int, radius: int) -> Iterator[tuple[int, int]]:
    f = 1 - radius
    dd_f_x = 1
    dd_f_y = -2 * radius
    x1 = 0
    y1 = radius
    yield from ((x, y + radius), (x, y - radius), (x + radius, y), (x - radius, y))
    while x1 < y1:
        if f >= 0:
            y1 -= 1
            dd_f_y += 2
            f += dd_f_y
        x1 += 1
        dd_f_x += 2
        f += dd_f_x
        yield from (
            (x + x1, y + y1), (x - x1, y + y1), (x + x1, y - y1), (x - x1, y - y1),
            (x + y1, y + x1), (x - y1, y + x1), (x + y1, y - x1), (x - y1, y - x1),
        )
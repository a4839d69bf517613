"""Bitmap fonts for the 128x64 monochrome display.

A font is a byte string with a four byte header (glyph width, glyph height,
code of the first glyph, number of glyphs) followed by the glyph bitmaps.
"""

from __future__ import annotations

from dataclasses import dataclass

HEADER_SIZE = 4


@dataclass(frozen=True)
class Font:
    """A fixed-width bitmap font."""

    x_size: int
    y_size: int
    offset: int
    numchars: int
    data: bytes

    @property
    def bytes_per_char(self) -> int:
        """Number of bitmap bytes that make up one glyph."""
        if self.y_size % 8 == 0:
            return self.x_size * (self.y_size // 8)
        return (self.x_size * self.y_size) // 8

    def _code(self, char: str | int) -> int:
        if isinstance(char, int):
            return char
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return ord(char)

    def supports(self, char: str | int) -> bool:
        """Return True if the font has a glyph for ``char``."""
        code = self._code(char)
        return self.offset <= code < self.offset + self.numchars

    def glyph_bytes(self, char: str | int) -> bytes:
        """Return the bitmap bytes of the glyph for ``char``."""
        if not self.supports(char):
            raise ValueError(f"character {char!r} is not in this font")
        size = self.bytes_per_char
        start = HEADER_SIZE + (self._code(char) - self.offset) * size
        return self.data[start:start + size]


def load_font(data: bytes | bytearray | list[int] | tuple[int, ...]) -> Font:
    """Parse a font from its raw bytes, header included."""
    raw = bytes(data)
    if len(raw) < HEADER_SIZE:
        raise ValueError("font data is shorter than its header")
    x_size, y_size, offset, numchars = raw[:HEADER_SIZE]
    if x_size == 0 or y_size == 0:
        raise ValueError("font glyph size must be non-zero")
    font = Font(x_size, y_size, offset, numchars, raw)
    needed = HEADER_SIZE + numchars * font.bytes_per_char
    if len(raw) < needed:
        raise ValueError(
            f"font data holds {len(raw)} bytes, {needed} are needed"
        )
    return font


_SMALL_FONT_DATA = bytes((
    0x06, 0x08, 0x20, 0x5f,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00,  # sp
    0x00, 0x00, 0x00, 0x2f, 0x00, 0x00,  # !
    0x00, 0x00, 0x07, 0x00, 0x07, 0x00,  # "
    0x00, 0x14, 0x7f, 0x14, 0x7f, 0x14,  # #
    0x00, 0x24, 0x2a, 0x7f, 0x2a, 0x12,  # $
    0x00, 0x23, 0x13, 0x08, 0x64, 0x62,  # %
    0x00, 0x36, 0x49, 0x55, 0x22, 0x50,  # &
    0x00, 0x00, 0x05, 0x03, 0x00, 0x00,  # '
    0x00, 0x00, 0x1c, 0x22, 0x41, 0x00,  # (
    0x00, 0x00, 0x41, 0x22, 0x1c, 0x00,  # )
    0x00, 0x14, 0x08, 0x3E, 0x08, 0x14,  # *
    0x00, 0x08, 0x08, 0x3E, 0x08, 0x08,  # +
    0x00, 0x00, 0x00, 0xA0, 0x60, 0x00,  # ,
    0x00, 0x08, 0x08, 0x08, 0x08, 0x08,  # -
    0x00, 0x00, 0x60, 0x60, 0x00, 0x00,  # .
    0x00, 0x20, 0x10, 0x08, 0x04, 0x02,  # /
    0x00, 0x3E, 0x51, 0x49, 0x45, 0x3E,  # 0
    0x00, 0x00, 0x42, 0x7F, 0x40, 0x00,  # 1
    0x00, 0x42, 0x61, 0x51, 0x49, 0x46,  # 2
    0x00, 0x21, 0x41, 0x45, 0x4B, 0x31,  # 3
    0x00, 0x18, 0x14, 0x12, 0x7F, 0x10,  # 4
    0x00, 0x27, 0x45, 0x45, 0x45, 0x39,  # 5
    0x00, 0x3C, 0x4A, 0x49, 0x49, 0x30,  # 6
    0x00, 0x01, 0x71, 0x09, 0x05, 0x03,  # 7
    0x00, 0x36, 0x49, 0x49, 0x49, 0x36,  # 8
    0x00, 0x06, 0x49, 0x49, 0x29, 0x1E,  # 9
    0x00, 0x00, 0x36, 0x36, 0x00, 0x00,  # :
    0x00, 0x00, 0x56, 0x36, 0x00, 0x00,  # ;
    0x00, 0x08, 0x14, 0x22, 0x41, 0x00,  # <
    0x00, 0x14, 0x14, 0x14, 0x14, 0x14,  # =
    0x00, 0x00, 0x41, 0x22, 0x14, 0x08,  # >
    0x00, 0x02, 0x01, 0x51, 0x09, 0x06,  # ?
    0x00, 0x32, 0x49, 0x59, 0x51, 0x3E,  # @
    0x00, 0x7C, 0x12, 0x11, 0x12, 0x7C,  # A
    0x00, 0x7F, 0x49, 0x49, 0x49, 0x36,  # B
    0x00, 0x3E, 0x41, 0x41, 0x41, 0x22,  # C
    0x00, 0x7F, 0x41, 0x41, 0x22, 0x1C,  # D
    0x00, 0x7F, 0x49, 0x49, 0x49, 0x41,  # E
    0x00, 0x7F, 0x09, 0x09, 0x09, 0x01,  # F
    0x00, 0x3E, 0x41, 0x49, 0x49, 0x7A,  # G
    0x00, 0x7F, 0x08, 0x08, 0x08, 0x7F,  # H
    0x00, 0x00, 0x41, 0x7F, 0x41, 0x00,  # I
    0x00, 0x20, 0x40, 0x41, 0x3F, 0x01,  # J
    0x00, 0x7F, 0x08, 0x14, 0x22, 0x41,  # K
    0x00, 0x7F, 0x40, 0x40, 0x40, 0x40,  # L
    0x00, 0x7F, 0x02, 0x0C, 0x02, 0x7F,  # M
    0x00, 0x7F, 0x04, 0x08, 0x10, 0x7F,  # N
    0x00, 0x3E, 0x41, 0x41, 0x41, 0x3E,  # O
    0x00, 0x7F, 0x09, 0x09, 0x09, 0x06,  # P
    0x00, 0x3E, 0x41, 0x51, 0x21, 0x5E,  # Q
    0x00, 0x7F, 0x09, 0x19, 0x29, 0x46,  # R
    0x00, 0x46, 0x49, 0x49, 0x49, 0x31,  # S
    0x00, 0x01, 0x01, 0x7F, 0x01, 0x01,  # T
    0x00, 0x3F, 0x40, 0x40, 0x40, 0x3F,  # U
    0x00, 0x1F, 0x20, 0x40, 0x20, 0x1F,  # V
    0x00, 0x3F, 0x40, 0x38, 0x40, 0x3F,  # W
    0x00, 0x63, 0x14, 0x08, 0x14, 0x63,  # X
    0x00, 0x07, 0x08, 0x70, 0x08, 0x07,  # Y
    0x00, 0x61, 0x51, 0x49, 0x45, 0x43,  # Z
    0x00, 0x00, 0x7F, 0x41, 0x41, 0x00,  # [
    0xAA, 0x55, 0xAA, 0x55, 0xAA, 0x55,  # backslash (checker pattern)
    0x00, 0x00, 0x41, 0x41, 0x7F, 0x00,  # ]
    0x00, 0x04, 0x02, 0x01, 0x02, 0x04,  # ^
    0x00, 0x40, 0x40, 0x40, 0x40, 0x40,  # _
    0x00, 0x00, 0x03, 0x05, 0x00, 0x00,  # `
    0x00, 0x20, 0x54, 0x54, 0x54, 0x78,  # a
    0x00, 0x7F, 0x48, 0x44, 0x44, 0x38,  # b
    0x00, 0x38, 0x44, 0x44, 0x44, 0x20,  # c
    0x00, 0x38, 0x44, 0x44, 0x48, 0x7F,  # d
    0x00, 0x38, 0x54, 0x54, 0x54, 0x18,  # e
    0x00, 0x08, 0x7E, 0x09, 0x01, 0x02,  # f
    0x00, 0x18, 0xA4, 0xA4, 0xA4, 0x7C,  # g
    0x00, 0x7F, 0x08, 0x04, 0x04, 0x78,  # h
    0x00, 0x00, 0x44, 0x7D, 0x40, 0x00,  # i
    0x00, 0x40, 0x80, 0x84, 0x7D, 0x00,  # j
    0x00, 0x7F, 0x10, 0x28, 0x44, 0x00,  # k
    0x00, 0x00, 0x41, 0x7F, 0x40, 0x00,  # l
    0x00, 0x7C, 0x04, 0x18, 0x04, 0x78,  # m
    0x00, 0x7C, 0x08, 0x04, 0x04, 0x78,  # n
    0x00, 0x38, 0x44, 0x44, 0x44, 0x38,  # o
    0x00, 0xFC, 0x24, 0x24, 0x24, 0x18,  # p
    0x00, 0x18, 0x24, 0x24, 0x18, 0xFC,  # q
    0x00, 0x7C, 0x08, 0x04, 0x04, 0x08,  # r
    0x00, 0x48, 0x54, 0x54, 0x54, 0x20,  # s
    0x00, 0x04, 0x3F, 0x44, 0x40, 0x20,  # t
    0x00, 0x3C, 0x40, 0x40, 0x20, 0x7C,  # u
    0x00, 0x1C, 0x20, 0x40, 0x20, 0x1C,  # v
    0x00, 0x3C, 0x40, 0x30, 0x40, 0x3C,  # w
    0x00, 0x44, 0x28, 0x10, 0x28, 0x44,  # x
    0x00, 0x1C, 0xA0, 0xA0, 0xA0, 0x7C,  # y
    0x00, 0x44, 0x64, 0x54, 0x4C, 0x44,  # z
    0x00, 0x00, 0x10, 0x7C, 0x82, 0x00,  # {
    0x00, 0x00, 0x00, 0xFF, 0x00, 0x00,  # |
    0x00, 0x00, 0x82, 0x7C, 0x10, 0x00,  # }
    0x00, 0x00, 0x06, 0x09, 0x09, 0x06,  # ~ (degrees)
))

_MEDIUM_NUMBERS_DATA = bytes((
    0x0c, 0x10, 0x2d, 0x0d,
    # -
    0x00, 0x00, 0x00, 0x80, 0x80, 0x80, 0x80, 0x80, 0x80, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x01, 0x03, 0x03, 0x03, 0x03, 0x03, 0x03, 0x01, 0x00, 0x00,
    # .
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0xc0, 0xc0, 0x00, 0x00, 0x00, 0x00, 0x00,
    # /
    0x00, 0x00, 0x02, 0x86, 0x86, 0x86, 0x86, 0x86, 0x86, 0x02, 0x00, 0x00,
    0x00, 0x00, 0x81, 0xc3, 0xc3, 0xc3, 0xc3, 0xc3, 0xc3, 0x81, 0x00, 0x00,
    # 0
    0x00, 0xfc, 0x7a, 0x06, 0x06, 0x06, 0x06, 0x06, 0x06, 0x7a, 0xfc, 0x00,
    0x00, 0x7e, 0xbc, 0xc0, 0xc0, 0xc0, 0xc0, 0xc0, 0xc0, 0xbc, 0x7e, 0x00,
    # 1
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x78, 0xfc, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x3c, 0x7e, 0x00,
    # 2
    0x00, 0x00, 0x02, 0x86, 0x86, 0x86, 0x86, 0x86, 0x86, 0x7a, 0xfc, 0x00,
    0x00, 0x7e, 0xbd, 0xc3, 0xc3, 0xc3, 0xc3, 0xc3, 0xc3, 0x81, 0x00, 0x00,
    # 3
    0x00, 0x00, 0x02, 0x86, 0x86, 0x86, 0x86, 0x86, 0x86, 0x7a, 0xfc, 0x00,
    0x00, 0x00, 0x81, 0xc3, 0xc3, 0xc3, 0xc3, 0xc3, 0xc3, 0xbd, 0x7e, 0x00,
    # 4
    0x00, 0xfc, 0x78, 0x80, 0x80, 0x80, 0x80, 0x80, 0x80, 0x78, 0xfc, 0x00,
    0x00, 0x00, 0x01, 0x03, 0x03, 0x03, 0x03, 0x03, 0x03, 0x3d, 0x7e, 0x00,
    # 5
    0x00, 0xfc, 0x7a, 0x86, 0x86, 0x86, 0x86, 0x86, 0x86, 0x02, 0x00, 0x00,
    0x00, 0x00, 0x81, 0xc3, 0xc3, 0xc3, 0xc3, 0xc3, 0xc3, 0xbd, 0x7e, 0x00,
    # 6
    0x00, 0xfc, 0x7a, 0x86, 0x86, 0x86, 0x86, 0x86, 0x86, 0x02, 0x00, 0x00,
    0x00, 0x7e, 0xbd, 0xc3, 0xc3, 0xc3, 0xc3, 0xc3, 0xc3, 0xbd, 0x7e, 0x00,
    # 7
    0x00, 0x00, 0x02, 0x06, 0x06, 0x06, 0x06, 0x06, 0x06, 0x7a, 0xfc, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x3c, 0x7e, 0x00,
    # 8
    0x00, 0xfc, 0x7a, 0x86, 0x86, 0x86, 0x86, 0x86, 0x86, 0x7a, 0xfc, 0x00,
    0x00, 0x7e, 0xbd, 0xc3, 0xc3, 0xc3, 0xc3, 0xc3, 0xc3, 0xbd, 0x7e, 0x00,
    # 9
    0x00, 0xfc, 0x7a, 0x86, 0x86, 0x86, 0x86, 0x86, 0x86, 0x7a, 0xfc, 0x00,
    0x00, 0x00, 0x81, 0xc3, 0xc3, 0xc3, 0xc3, 0xc3, 0xc3, 0xbd, 0x7e, 0x00,
))

_BIG_NUMBERS_DATA = bytes((
    0x0e, 0x18, 0x2d, 0x0d,
    # -
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x10, 0x38, 0x38, 0x38, 0x38, 0x38, 0x38, 0x38, 0x38, 0x10, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    # .
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x40, 0xe0, 0xe0, 0x40, 0x00, 0x00, 0x00, 0x00, 0x00,
    # /
    0x00, 0x00, 0x02, 0x06, 0x0e, 0x0e, 0x0e, 0x0e, 0x0e, 0x0e, 0x06, 0x02, 0x00, 0x00,
    0x00, 0x00, 0x10, 0x38, 0x38, 0x38, 0x38, 0x38, 0x38, 0x38, 0x38, 0x10, 0x00, 0x00,
    0x00, 0x00, 0x80, 0xc0, 0xe0, 0xe0, 0xe0, 0xe0, 0xe0, 0xe0, 0xc0, 0x80, 0x00, 0x00,
    # 0
    0x00, 0xfc, 0xfa, 0xf6, 0x0e, 0x0e, 0x0e, 0x0e, 0x0e, 0x0e, 0xf6, 0xfa, 0xfc, 0x00,
    0x00, 0xef, 0xc7, 0x83, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x83, 0xc7, 0xef, 0x00,
    0x00, 0x7f, 0xbf, 0xdf, 0xe0, 0xe0, 0xe0, 0xe0, 0xe0, 0xe0, 0xdf, 0xbf, 0x7f, 0x00,
    # 1
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0xf0, 0xf8, 0xfc, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x83, 0xc7, 0xef, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x1f, 0x3f, 0x7f, 0x00,
    # 2
    0x00, 0x00, 0x02, 0x06, 0x0e, 0x0e, 0x0e, 0x0e, 0x0e, 0x0e, 0xf6, 0xfa, 0xfc, 0x00,
    0x00, 0xe0, 0xd0, 0xb8, 0x38, 0x38, 0x38, 0x38, 0x38, 0x38, 0x3b, 0x17, 0x0f, 0x00,
    0x00, 0x7f, 0xbf, 0xdf, 0xe0, 0xe0, 0xe0, 0xe0, 0xe0, 0xe0, 0xc0, 0x80, 0x00, 0x00,
    # 3
    0x00, 0x00, 0x02, 0x06, 0x0e, 0x0e, 0x0e, 0x0e, 0x0e, 0x0e, 0xf6, 0xfa, 0xfc, 0x00,
    0x00, 0x00, 0x10, 0x38, 0x38, 0x38, 0x38, 0x38, 0x38, 0x38, 0xbb, 0xd7, 0xef, 0x00,
    0x00, 0x00, 0x80, 0xc0, 0xe0, 0xe0, 0xe0, 0xe0, 0xe0, 0xe0, 0xdf, 0xbf, 0x7f, 0x00,
    # 4
    0x00, 0xfc, 0xf8, 0xf0, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0xf0, 0xf8, 0xfc, 0x00,
    0x00, 0x0f, 0x17, 0x3b, 0x38, 0x38, 0x38, 0x38, 0x38, 0x38, 0xbb, 0xd7, 0xef, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x1f, 0x3f, 0x7f, 0x00,
    # 5
    0x00, 0xfc, 0xfa, 0xf6, 0x0e, 0x0e, 0x0e, 0x0e, 0x0e, 0x0e, 0x06, 0x02, 0x00, 0x00,
    0x00, 0x0f, 0x17, 0x3b, 0x38, 0x38, 0x38, 0x38, 0x38, 0x38, 0xb8, 0xd0, 0xe0, 0x00,
    0x00, 0x00, 0x80, 0xc0, 0xe0, 0xe0, 0xe0, 0xe0, 0xe0, 0xe0, 0xdf, 0xbf, 0x7f, 0x00,
    # 6
    0x00, 0xfc, 0xfa, 0xf6, 0x0e, 0x0e, 0x0e, 0x0e, 0x0e, 0x0e, 0x06, 0x02, 0x00, 0x00,
    0x00, 0xef, 0xd7, 0xbb, 0x38, 0x38, 0x38, 0x38, 0x38, 0x38, 0xb8, 0xd0, 0xe0, 0x00,
    0x00, 0x7f, 0xbf, 0xdf, 0xe0, 0xe0, 0xe0, 0xe0, 0xe0, 0xe0, 0xdf, 0xbf, 0x7f, 0x00,
    # 7
    0x00, 0x00, 0x02, 0x06, 0x0e, 0x0e, 0x0e, 0x0e, 0x0e, 0x0e, 0xf6, 0xfa, 0xfc, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x83, 0xc7, 0xef, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x1f, 0x3f, 0x7f, 0x00,
    # 8
    0x00, 0xfc, 0xfa, 0xf6, 0x0e, 0x0e, 0x0e, 0x0e, 0x0e, 0x0e, 0xf6, 0xfa, 0xfc, 0x00,
    0x00, 0xef, 0xd7, 0xbb, 0x38, 0x38, 0x38, 0x38, 0x38, 0x38, 0xbb, 0xd7, 0xef, 0x00,
    0x00, 0x7f, 0xbf, 0xdf, 0xe0, 0xe0, 0xe0, 0xe0, 0xe0, 0xe0, 0xdf, 0xbf, 0x7f, 0x00,
    # 9
    0x00, 0xfc, 0xfa, 0xf6, 0x0e, 0x0e, 0x0e, 0x0e, 0x0e, 0x0e, 0xf6, 0xfa, 0xfc, 0x00,
    0x00, 0x0f, 0x17, 0x3b, 0x38, 0x38, 0x38, 0x38, 0x38, 0x38, 0xbb, 0xd7, 0xef, 0x00,
    0x00, 0x00, 0x80, 0xc0, 0xe0, 0xe0, 0xe0, 0xe0, 0xe0, 0xe0, 0xdf, 0xbf, 0x7f, 0x00,
))

_TINY_FONT_DATA = bytes((
    0x04, 0x06, 0x20, 0x5f,
    # space ! " # $ % & '
    0x00, 0x00, 0x00, 0x03, 0xa0, 0x00, 0xc0, 0x0c, 0x00, 0xf9, 0x4f, 0x80,
    0x6b, 0xeb, 0x00, 0x98, 0x8c, 0x80, 0x52, 0xa5, 0x80, 0x03, 0x00, 0x00,
    # ( ) * + , - . /
    0x01, 0xc8, 0x80, 0x89, 0xc0, 0x00, 0x50, 0x85, 0x00, 0x21, 0xc2, 0x00,
    0x08, 0x40, 0x00, 0x20, 0x82, 0x00, 0x00, 0x20, 0x00, 0x18, 0x8c, 0x00,
    # 0 1 2 3 4 5 6 7
    0xfa, 0x2f, 0x80, 0x4b, 0xe0, 0x80, 0x5a, 0x66, 0x80, 0x8a, 0xa5, 0x00,
    0xe0, 0x8f, 0x80, 0xea, 0xab, 0x00, 0x72, 0xa9, 0x00, 0x9a, 0x8c, 0x00,
    # 8 9 : ; < = > ?
    0xfa, 0xaf, 0x80, 0x4a, 0xa7, 0x00, 0x01, 0x40, 0x00, 0x09, 0x40, 0x00,
    0x21, 0x48, 0x80, 0x51, 0x45, 0x00, 0x89, 0x42, 0x00, 0x42, 0x66, 0x00,
    # @ A B C D E F G
    0x72, 0xa6, 0x80, 0x7a, 0x87, 0x80, 0xfa, 0xa5, 0x00, 0x72, 0x25, 0x00,
    0xfa, 0x27, 0x00, 0xfa, 0xa8, 0x80, 0xfa, 0x88, 0x00, 0x72, 0x2b, 0x00,
    # H I J K L M N O
    0xf8, 0x8f, 0x80, 0x8b, 0xe8, 0x80, 0x8b, 0xe8, 0x00, 0xf8, 0x8d, 0x80,
    0xf8, 0x20, 0x80, 0xf9, 0x0f, 0x80, 0xf9, 0xcf, 0x80, 0x72, 0x27, 0x00,
    # P Q R S T U V W
    0xfa, 0x84, 0x00, 0x72, 0x27, 0x40, 0xfa, 0x85, 0x80, 0x4a, 0xa9, 0x00,
    0x83, 0xe8, 0x00, 0xf0, 0x2f, 0x00, 0xe0, 0x6e, 0x00, 0xf0, 0xef, 0x00,
    # X Y Z [ \ ] ^ _
    0xd8, 0x8d, 0x80, 0xc0, 0xec, 0x00, 0x9a, 0xac, 0x80, 0x03, 0xe8, 0x80,
    0xc0, 0x81, 0x80, 0x8b, 0xe0, 0x00, 0x42, 0x04, 0x00, 0x08, 0x20, 0x80,
    # ` a b c d e f g
    0x02, 0x04, 0x00, 0x31, 0x23, 0x80, 0xf9, 0x23, 0x00, 0x31, 0x24, 0x80,
    0x31, 0x2f, 0x80, 0x31, 0x62, 0x80, 0x23, 0xea, 0x00, 0x25, 0x53, 0x80,
    # h i j k l m n o
    0xf9, 0x03, 0x80, 0x02, 0xe0, 0x00, 0x06, 0xe0, 0x00, 0xf8, 0x42, 0x80,
    0x03, 0xe0, 0x00, 0x79, 0x87, 0x80, 0x39, 0x03, 0x80, 0x31, 0x23, 0x00,
    # p q r s t u v w
    0x7d, 0x23, 0x00, 0x31, 0x27, 0xc0, 0x78, 0x84, 0x00, 0x29, 0x40, 0x00,
    0x43, 0xe4, 0x00, 0x70, 0x27, 0x00, 0x60, 0x66, 0x00, 0x70, 0x67, 0x00,
    # x y z { | } ~
    0x48, 0xc4, 0x80, 0x74, 0x57, 0x80, 0x59, 0xe6, 0x80, 0x23, 0xe8, 0x80,
    0x03, 0x60, 0x00, 0x8b, 0xe2, 0x00, 0x61, 0x0c, 0x00,
))

SMALL_FONT = load_font(_SMALL_FONT_DATA)
MEDIUM_NUMBERS = load_font(_MEDIUM_NUMBERS_DATA)
BIG_NUMBERS = load_font(_BIG_NUMBERS_DATA)
TINY_FONT = load_font(_TINY_FONT_DATA)
# oledarcade

Two small arcade games are drawn on a 128x64 monochrome OLED frame buffer and steered with an analog joystick and its push switch. One is a car-dodging racer and the other is pong. A start menu picks between them.

## Modules

- `oledarcade.fonts` holds the bitmap fonts `SMALL_FONT`, `MEDIUM_NUMBERS`, `BIG_NUMBERS` and `TINY_FONT`.
  - `load_font(data)` parses raw font bytes that start with a 4-byte header.
  - `Font.glyph_bytes(char)` returns the bitmap of one glyph.
  - `Font.supports(char)` tells whether the font has a glyph for a character.
- `oledarcade.joystick` reads the stick.
  - `classify(x, y)` maps raw 10-bit axis readings to a `Direction`: `LEFT`, `RIGHT`, `STOP`, `UP` or `DOWN`. It returns `None` when the reading fits no direction.
  - `Joystick(read_analog, read_digital, pin_x, pin_y, switch_pin)` calls the read functions you supply. Its methods are `direction()`, `switch()` and `check_position()`. A switch level of 0 means pressed.
  - `JoystickHandler.poll()` always reports `JoystickPosition.UP`.
  - `position_to_string(pos)` names a `JoystickPosition`.
- `oledarcade.oled` provides `Oled(transport)`, an in-memory SSD1306-style frame buffer.
  - Pixel methods: `set_pixel`, `clear_pixel`, `invert_pixel` and `get_pixel`.
  - Drawing methods, each with a `clear_` counterpart: `draw_hline`, `draw_vline`, `draw_line`, `draw_rect`, `draw_round_rect` and `draw_circle`.
  - Bitmaps: `draw_bitmap`.
  - Text: `set_font`, `print`, `print_int`, `print_float` and `invert_text`. `print` accepts `RIGHT` or `CENTER` as `x`.
  - Screen-wide methods: `clear`, `fill`, `invert` and `set_brightness`.
  - `begin()` and `update()` send the controller commands and the frame data to the transport. The transport is a callable `transport(address, payload)`. With no transport, nothing is sent.
  - `to_text()` renders the frame as 64 lines of 128 characters, with `#` for a lit pixel.
- `oledarcade.car` provides `CarGame(oled, joystick, delay, rng)`.
  - `step()` draws and advances one frame. It returns `True` on a crash.
  - `run()` plays until the switch is pressed.
  - `reset()` restarts the game and keeps the record.
- `oledarcade.pong` provides `PongGame(oled, joystick, delay, rng)`.
  - `serve()` places the ball and picks its direction.
  - `step()` draws and advances one frame. It returns `True` when the ball is missed.
  - `run()` serves, then plays until the switch is pressed.
- `oledarcade.menu` provides `MainWindow(oled, joystick, delay)`, the start menu.
  - `show()` draws one frame. When the switch is pressed, it returns 1 for the car game, 2 for pong or 3 for records. Otherwise it returns 0.
- `oledarcade.app` provides `Console(oled, joystick, delay, rng)`.
  - `tick()` shows the menu once and runs the game it picks.
  - `main(argv)` is the command-line entry point.

`delay` is a callable that takes milliseconds. It defaults to sleeping. `rng` is a `random.Random`.

## Install

```
pip install .
```

## Run

```
oledarcade --frames 3 --moves down,down
```

The command drives the menu on a simulated display and a simulated joystick, then prints the display as text. It takes these options:

- `--frames N` sets the number of menu frames. The default is 1.
- `--moves` gives one stick position per frame, chosen from `center`, `up`, `down`, `left` and `right`. Frames without a move use `center`.
- `--realtime` keeps the games' delays. Without it, they are skipped.

## Use as a library

```python
from oledarcade.fonts import SMALL_FONT
from oledarcade.joystick import classify
from oledarcade.oled import Oled

screen = Oled(transport=None)
screen.set_font(SMALL_FONT)
screen.draw_rect(10, 10, 40, 30)
screen.draw_circle(64, 32, 4)
screen.print("Pong", 2, 50)
print(screen.to_text())

print(classify(510, 1010))   # Direction.LEFT
```

## What it does not do

The package does not talk to real display or joystick hardware. `Oled` only hands bytes to the transport you give it, and `Joystick` only calls the read functions you give it.

The simulated joystick of the `oledarcade` command never presses the switch. The command therefore shows the menu and moves its pointer, but it never starts a game. To play, drive `Console`, `CarGame` or `PongGame` from your own code, with a `Joystick` whose switch you control.

## Tests

```
pip install .[test]
pytest
```
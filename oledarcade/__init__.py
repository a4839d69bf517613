"""Car-dodging and pong games on a 128x64 monochrome OLED frame buffer with joystick input."""

__version__ = "0.1.2"
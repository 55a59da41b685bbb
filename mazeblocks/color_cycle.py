"""Colour animations for the demo teapot: a smooth gradient and a stepwise switch."""

from __future__ import annotations

Color = tuple[float, float, float]

GRADIENT_COLORS: tuple[Color, ...] = (
    (0.0, 0.0, 0.0),
    (1.0, 1.0, 1.0),
    (0.0, 0.0, 1.0),
    (1.0, 0.0, 0.0),
    (0.5, 0.0, 1.0),
)

SWITCH_COLORS: tuple[Color, ...] = (
    (1.0, 1.0, 1.0),
    (0.0, 0.0, 1.0),
    (1.0, 0.0, 0.0),
    (1.0, 1.0, 0.0),
    (0.5, 0.0, 1.0),
)

GRADIENT_FRAMES = 100
GRADIENT_STEP = 0.01
SWITCH_FRAMES = 50


def _key_code(key) -> int:
    if isinstance(key, str):
        if len(key) != 1:
            raise ValueError("key must be a single character")
        key = ord(key)
    if not 0 <= key <= 255:
        raise ValueError("key code must fit in one byte")
    return key


class GradientCycle:
    """Blends from one palette colour to the next, moving on every GRADIENT_FRAMES+1 steps."""

    def __init__(self, colors=GRADIENT_COLORS) -> None:
        if len(colors) < 2:
            raise ValueError("a gradient needs at least two colours")
        self.colors = tuple(colors)
        self.index = 0
        self.counter = 0
        self.k = 0.0
        self.start = self._at(0)
        self.end = self._at(1)
        self.color: Color = (0.0, 0.0, 0.0)

    def _at(self, index: int) -> Color:
        return self.colors[index % len(self.colors)]

    def step(self) -> Color:
        """Advance one frame and return the colour to draw."""
        frame = self.counter
        self.counter += 1
        if frame > GRADIENT_FRAMES:
            self.counter = 0
            self.index += 1
            if self.index > len(self.colors):
                self.index = 0
            self.start = self._at(self.index)
            self.end = self._at(self.index + 1)
            self.k = 0.0
        self.color = tuple(
            self.k * (e - s) + s for s, e in zip(self.start, self.end)
        )
        self.k += GRADIENT_STEP
        return self.color

    def key_pressed(self, key) -> str:
        """Skip ahead one palette entry; return the key report line."""
        code = _key_code(key)
        self.index += 1
        if self.index == len(self.colors):
            self.index = 0
        return f"Key code is {code}"


class ColorSwitcher:
    """Shows one palette colour at a time, switching every SWITCH_FRAMES+1 steps."""

    def __init__(self, colors=SWITCH_COLORS) -> None:
        if not colors:
            raise ValueError("at least one colour is needed")
        self.colors = tuple(colors)
        self.index = 0
        self.counter = 0
        self.current: Color = self.colors[0]

    def step(self) -> Color:
        """Advance one frame and return the colour to draw."""
        frame = self.counter
        self.counter += 1
        if frame > SWITCH_FRAMES:
            self.counter = 0
            self.index += 1
            if self.index >= len(self.colors):
                self.index = 0
            self.current = self.colors[self.index]
        return self.current

    def key_pressed(self, key) -> str:
        """Skip ahead one palette entry; return the key report line."""
        code = _key_code(key)
        self.index += 1
        if self.index == len(self.colors):
            self.index = 0
        return f"Key code is {code}"
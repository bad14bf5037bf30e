"""Sources and filters of packed RGBA colours."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod

from texstream.colors import color_decode_float, color_encode_float


class ColorGenerator(ABC):
    """Produces a packed colour each time it is asked."""

    @abstractmethod
    def generate_color(self) -> int:
        """Return the next packed colour."""


class ColorFilter(ABC):
    """Transforms a stream of packed colours."""

    @abstractmethod
    def filter(self, value: int) -> int:
        """Return the filtered form of a packed colour."""


def _bounce(value: float, delta: float) -> tuple[float, float]:
    value += delta
    if value < 0.0:
        value, delta = -value, -delta
    if value > 1.0:
        value, delta = 2.0 - value, -delta
    return value, delta


class BouncingColorGenerator(ColorGenerator):
    """Drifts each channel by a fixed step, reflecting off 0 and 1."""

    def __init__(self, delta_r: float, delta_g: float, delta_b: float) -> None:
        self._values = [0.5, 0.5, 0.5]
        self._deltas = [delta_r, delta_g, delta_b]

    def generate_color(self) -> int:
        for channel, (value, delta) in enumerate(zip(self._values, self._deltas)):
            self._values[channel], self._deltas[channel] = _bounce(value, delta)
        r, g, b = self._values
        return color_encode_float(r, g, b, 1.0)


class FilteredColorGenerator(ColorGenerator):
    """Passes the colours of another generator through a filter."""

    def __init__(self, color_generator: ColorGenerator, color_filter: ColorFilter) -> None:
        self.color_generator = color_generator
        self.color_filter = color_filter

    def generate_color(self) -> int:
        return self.color_filter.filter(self.color_generator.generate_color())


class LowPassColorFilter(ColorFilter):
    """A cascade of first-order exponential smoothing stages on RGB."""

    def __init__(self, order: int, alpha: float) -> None:
        self.order = order
        self.alpha = alpha
        self._stages = [[0.5, 0.5, 0.5] for _ in range(order)]

    def filter(self, value: int) -> int:
        r, g, b, _ = color_decode_float(value)
        color = [r, g, b]
        keep = 1.0 - self.alpha
        for stage in self._stages:
            color = [keep * old + self.alpha * new for old, new in zip(stage, color)]
            stage[:] = color
        return color_encode_float(*color, 1.0)


class RandomColorGenerator(ColorGenerator):
    """Returns uniformly random 32-bit colours."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()

    def generate_color(self) -> int:
        return self.rng.randint(0, 0xFFFFFFFF)


class SingleColorGenerator(ColorGenerator):
    """Always returns the same colour."""

    def __init__(self, color: int) -> None:
        self.color = color

    def generate_color(self) -> int:
        return self.color
# -*- coding: utf-8 -*-
"""
Provides the shared types, constants, and the palette builder.
"""

__all__ = [
    "MIN_PALETTE_SIZE", "ORANGE_GREEN", "ConfigError", "DegenerateSelection",
    "Region", "ScreenRect", "build_palette", "divide_up" ]

from collections import namedtuple

import numpy as np

MIN_PALETTE_SIZE = 4

# 198/255, the green level where the red ramp turns orange.
ORANGE_GREEN = 0.7764705882352941


class ConfigError(ValueError):
    """Raised for configuration values the renderer cannot work with."""


class DegenerateSelection(ValueError):
    """Raised for a selection rectangle with zero width or height."""


class _Rect(namedtuple("_Rect", "min_x min_y max_x max_y")):

    __slots__ = ()

    @property
    def width(self):
        return self.max_x - self.min_x

    @property
    def height(self):
        return self.max_y - self.min_y

    def normalized(self):
        """
        Return the same rectangle with min/max ordered on each axis.
        """
        return self.__class__(
            min(self.min_x, self.max_x), min(self.min_y, self.max_y),
            max(self.min_x, self.max_x), max(self.min_y, self.max_y) )


class Region(_Rect):
    """Bounds of the view in complex-plane coordinates."""

    __slots__ = ()


class ScreenRect(_Rect):
    """Bounds in pixel coordinates, y pointing up."""

    __slots__ = ()


def divide_up(dividend, divisor):
    """
    Helper funtion to get the next up value for integer division.
    """
    return dividend // divisor + 1 if dividend % divisor else dividend // divisor


def build_palette(size):
    """
    Return a (size, 4) RGBA array ramping black -> red -> orange.
    The last entry is black, used for points that never escaped.
    """
    if size < MIN_PALETTE_SIZE:
        raise ConfigError(
            "palette size must be at least {}, got {}".format(MIN_PALETTE_SIZE, size))

    palette = np.empty((size, 4), dtype=np.uint8)
    palette[:, 3] = 255

    # black to red
    quarter = size // 4
    for i in range(quarter):
        palette[i, 0] = int(i / quarter * 255 + 0.5)
        palette[i, 1] = 0
        palette[i, 2] = 0

    # red to orange, starting on the last red entry
    start = quarter - 1
    span = size - start - 1
    for i in range(start, size - 1):
        palette[i, 0] = 255
        palette[i, 1] = int((i - start) / span * ORANGE_GREEN * 255 + 0.5)
        palette[i, 2] = 0

    palette[size - 1] = (0, 0, 0, 255)

    return palette

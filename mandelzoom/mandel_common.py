# -*- coding: utf-8 -*-
"""
Common functions for mapping pixels and counting escape iterations.
"""

__all__ = ["escape_time", "grid_point", "grid_steps", "pixel_to_complex"]

import os

os.environ['NUMBA_DISABLE_INTEL_SVML'] = str(1)
os.environ['NUMBA_LOOP_VECTORIZE'] = str(0)
os.environ['NUMBA_SLP_VECTORIZE'] = str(0)
os.environ['NUMBA_OPT'] = str(3)

from numba import njit

ESCAPE_RADIUS = 2.0


def _escape_time(c, max_iters):

    z = 0j
    n = 0

    # Test the magnitude first, so z = 0 always gets one iteration.
    # An overflowed orbit compares false (inf or nan) and counts as escaped.
    while n < max_iters - 1 and abs(z) <= ESCAPE_RADIUS:
        z = z * z + c
        n += 1

    return n

escape_time = njit('i4(c16, i4)', nogil=True)(_escape_time)


def _grid_point(min_x, min_y, step_x, step_y, x, y):

    return complex(min_x + x * step_x, min_y + y * step_y)

grid_point = njit('c16(f8, f8, f8, f8, i4, i4)', nogil=True)(_grid_point)


def grid_steps(width, height, region):
    """
    Return the per-pixel step along x and y for the region.
    """
    step_x = (region.max_x - region.min_x) / width
    step_y = (region.max_y - region.min_y) / height

    return step_x, step_y


def pixel_to_complex(x, y, width, height, region):
    """
    Map pixel (x, y) of a width x height screen onto the region.
    Row 0 maps to region.min_y.
    """
    step_x, step_y = grid_steps(width, height, region)

    return grid_point(region.min_x, region.min_y, step_x, step_y, x, y)

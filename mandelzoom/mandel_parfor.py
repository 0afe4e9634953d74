# -*- coding: utf-8 -*-
"""
Mandelbrot functions. Loop using Numba's parfor loop.
"""

__all__ = ["mandelbrot", "render_view"]

from .mandel_common import escape_time, grid_point, grid_steps

import numpy as np
from numba import njit, prange


@njit('void(u1[:,:,:], u1[:,:], UniTuple(i4,2), f8, f8, f8, f8, i4)', nogil=True, parallel=True)
def mandelbrot(temp, palette, seq, min_x, min_y, step_x, step_y, max_iters):

    width = temp.shape[1]

    # Rows are independent; the output does not depend on the schedule.
    for y in prange(seq[0], seq[1]):
        for x in range(width):
            c = grid_point(min_x, min_y, step_x, step_y, x, y)
            n = escape_time(c, max_iters)
            for k in range(4):
                temp[y,x,k] = palette[n,k]


def render_view(width, height, region, max_iters, palette, seq=None, output=None):
    """
    Render the region into a (height, width, 4) RGBA buffer.

    max_iters bounds the escape-time loop and must not exceed the
    palette length. When seq is given only rows seq[0]..seq[1]-1 are
    computed into output, which the caller allocates.
    """
    if max_iters > palette.shape[0]:
        raise ValueError("palette of {} colors is too short for {} iterations".format(
            palette.shape[0], max_iters))

    if output is None:
        output = np.empty((height, width, 4), dtype=np.uint8)
    if seq is None:
        seq = (0, height)

    step_x, step_y = grid_steps(width, height, region)

    mandelbrot(
        output, palette, seq, region.min_x, region.min_y, step_x, step_y,
        max_iters )

    return output

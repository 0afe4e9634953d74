# -*- coding: utf-8 -*-
"""
Provides the zoom selection to complex-plane region conversion.
"""

__all__ = ["adjusted_region_with_ratio", "corrected_rect"]

from .base import DegenerateSelection, Region


def corrected_rect(rect, ratio):
    """
    Normalize the selection and grow it on one axis until its
    width-to-height ratio equals ratio. The center is kept on the
    axis that grows.
    """
    rect = rect.normalized()
    width, height = rect.width, rect.height

    if width == 0 or height == 0:
        raise DegenerateSelection(
            "selection {!r} has no area".format(tuple(rect)))

    if width / height > ratio:
        increase = width / ratio - height
        return rect._replace(
            min_y=rect.min_y - increase / 2, max_y=rect.max_y + increase / 2)
    else:
        increase = height * ratio - width
        return rect._replace(
            min_x=rect.min_x - increase / 2, max_x=rect.max_x + increase / 2)


def adjusted_region_with_ratio(screen, rect, ratio, region):
    """
    Return the new Region for a selection over the current view.

    screen is the ScreenRect of the window, rect the raw selection in
    any corner order, ratio the target width-to-height ratio and region
    the Region currently shown. Each zoom is relative to region, so the
    result feeds the next call.
    """
    rect = corrected_rect(rect, ratio)

    screen_w, screen_h = screen.width, screen.height
    logical_w, logical_h = region.width, region.height

    return Region(
        region.min_x + rect.min_x / screen_w * logical_w,
        region.min_y + rect.min_y / screen_h * logical_h,
        region.min_x + rect.max_x / screen_w * logical_w,
        region.min_y + rect.max_y / screen_h * logical_h )

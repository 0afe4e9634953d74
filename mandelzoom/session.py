# -*- coding: utf-8 -*-
"""
Provides the view state and the zoom gesture handling.

A Session is an immutable value. Each Navigator method takes the
current session and returns the next one, so the gesture logic runs
without a window.
"""

__all__ = ["ViewState", "Session", "Navigator", "home_region"]

import enum
from collections import namedtuple

from .base import DegenerateSelection, Region, ScreenRect, build_palette
from .region import adjusted_region_with_ratio


class ViewState(enum.Enum):
    VIEWING = "viewing"
    SELECTING = "selecting"


Session = namedtuple("Session", "state region iters palette start level")


def home_region(width, height, min_x, max_x, min_y):
    """
    Return the home Region; max_y follows from the window aspect.
    """
    max_y = (max_x - min_x) * height / width + min_y

    return Region(min_x, min_y, max_x, max_y)


class Navigator(object):

    def __init__(self, width, height, home, min_iters, increment, max_iters=0):

        self.width = width
        self.height = height
        self.screen = ScreenRect(0, 0, width, height)
        self.ratio = width / height
        self.home_view = home
        self.min_iters = min_iters
        self.increment = increment
        # 0 leaves the cap unbounded
        self.max_iters = max(min_iters, max_iters) if max_iters > 0 else 0

        # fail at startup for a palette too small to build
        self.home_palette = build_palette(min_iters)


    def home(self):

        return Session(
            ViewState.VIEWING, self.home_view, self.min_iters,
            self.home_palette, None, 0 )


    def reset(self, session):

        return self.home()


    def press(self, session, x, y):

        if session.state is ViewState.VIEWING:
            return session._replace(state=ViewState.SELECTING, start=(x, y))
        elif session.state is ViewState.SELECTING:
            return session
        else:
            raise ValueError("unknown view state {!r}".format(session.state))


    def drag(self, session, x, y):
        """
        Return the session and the outline to draw, if any.
        """
        if session.state is ViewState.SELECTING:
            (x0, y0) = session.start
            return session, ScreenRect(x0, y0, x, y).normalized()
        elif session.state is ViewState.VIEWING:
            return session, None
        else:
            raise ValueError("unknown view state {!r}".format(session.state))


    def release(self, session, x, y):
        """
        Complete the gesture. Returns the session and True if the view
        zoomed; a selection without area leaves region and iters as is.
        """
        if session.state is ViewState.VIEWING:
            return session, False
        elif session.state is not ViewState.SELECTING:
            raise ValueError("unknown view state {!r}".format(session.state))

        (x0, y0) = session.start
        viewing = session._replace(state=ViewState.VIEWING, start=None)

        try:
            region = adjusted_region_with_ratio(
                self.screen, ScreenRect(x0, y0, x, y), self.ratio,
                session.region )
        except DegenerateSelection as e:
            print("[{:>3}] selection discarded: {}".format(session.level, e))
            return viewing, False

        iters = session.iters + self.increment
        if self.max_iters:
            iters = min(iters, self.max_iters)
        palette = session.palette if iters == session.iters else build_palette(iters)

        return viewing._replace(
            region=region, iters=iters, palette=palette,
            level=session.level + 1 ), True

# -*- coding: utf-8 -*-
"""
Provides the Pygame-based window interface.
"""

__all__ = ["WindowPygame", "flip_y", "outline_rect"]

import os, sys, time
os.environ['SDL_VIDEO_ALLOW_SCREENSAVER'] = '1';

import numpy as np
import pygame as pg

from .session import Navigator, home_region

OUTLINE_COLOR = pg.Color('#ffffff')
OUTLINE_WIDTH = 2


def flip_y(y, height):
    """
    Convert between pygame rows (top down) and screen rows (bottom up).
    Row 0 of one is row height - 1 of the other.
    """
    return height - 1 - y


def outline_rect(rect, height):
    """
    Return the pygame Rect covering a bottom-up ScreenRect, both corner
    pixels included.
    """
    return pg.Rect(
        int(rect.min_x), int(flip_y(rect.max_y, height)),
        int(rect.width) + 1, int(rect.height) + 1 )


class WindowPygame(object):

    def __init__(self, opt):

        self.width = opt.width
        self.height = opt.height
        self.fixed_iters = opt.fixed_iters
        self.image = None
        self.outline = None
        self.start_time = time.time()

        home = home_region(
            self.width, self.height, opt.min_x, opt.max_x, opt.min_y)

        self.navigator = Navigator(
            self.width, self.height, home, opt.min_iters, opt.increment,
            opt.max_iters )

        self.session = self.navigator.home()


    def init(self):

        # There's no sound or anything like that. Thus initializing display only.
        try:
            pg.display.init()
            self.window = pg.display.set_mode((self.width, self.height), flags=pg.DOUBLEBUF)
        except pg.error as e:
            prog = os.path.basename(sys.argv[0])
            print(f"{prog}: error: cannot open display: {e}", file=sys.stderr)
            sys.exit(1)

        self.window.fill(pg.Color('#000000'))
        pg.display.set_caption("Mandelbrot!")
        pg.display.flip()


    def print_info(self):

        region = self.session.region

        print("[{:>3}] min-x, max-x : {:.16f}, {:.16f}".format(
            self.session.level, region.min_x, region.max_x))
        print("[{:>3}] min-y, max-y : {:.16f}, {:.16f}".format(
            self.session.level, region.min_y, region.max_y))
        print("[{:>3}] iterations   : {} (palette {})".format(
            self.session.level, self.eval_iters(), self.session.iters))


    def eval_iters(self):
        """
        Return the escape-time cap for the current session.
        """
        if self.fixed_iters:
            return self.navigator.min_iters

        return self.session.iters


    def run(self):

        self.display()

        while True:
            e = pg.event.wait(20)
            if e.type == pg.KEYDOWN:
                if e.key == pg.K_q or self.__on_key_press(e.key):
                    break
            elif e.type == pg.MOUSEBUTTONDOWN and e.button == 1:
                self.__on_mouse_press(*e.pos)
            elif e.type == pg.MOUSEMOTION and e.buttons[0]:
                self.__on_mouse_drag(*e.pos)
            elif e.type == pg.MOUSEBUTTONUP and e.button == 1:
                self.__on_mouse_release(*e.pos)
            elif e.type == pg.VIDEOEXPOSE:
                self.update_window()
            elif e.type == pg.QUIT:
                break

            self.poll()

        pg.quit()


    def display(self):

        raise NotImplementedError


    def poll(self):

        raise NotImplementedError


    def show(self, buf):
        """
        Replace the image with an RGBA buffer whose row 0 is the bottom row.
        """
        end_time = time.time() - self.start_time
        print("      compute time : {:.3f} seconds".format(end_time))

        # pygame rows run top to bottom
        buf = np.ascontiguousarray(np.flipud(buf))
        self.image = pg.image.frombuffer(
            buf.tobytes(), (self.width, self.height), 'RGBA')

        self.update_window()


    def update_window(self):

        self.window.fill(pg.Color('#000000'))
        if self.image is not None:
            self.window.blit(self.image, (0,0))

        if self.outline is not None:
            rect = self.outline
            pg.draw.rect(
                self.window, OUTLINE_COLOR,
                outline_rect(rect, self.height),
                OUTLINE_WIDTH )

        pg.display.flip()


    def __on_key_press(self, symbol):

        if symbol in (pg.K_r, pg.K_HOME):  # reset display to initial view
            self.session = self.navigator.reset(self.session)
            self.outline = None
            self.display()

        return False


    def __on_mouse_press(self, x, y):

        self.session = self.navigator.press(self.session, x, flip_y(y, self.height))


    def __on_mouse_drag(self, x, y):

        self.session, self.outline = \
            self.navigator.drag(self.session, x, flip_y(y, self.height))

        self.update_window()


    def __on_mouse_release(self, x, y):

        self.session, zoomed = \
            self.navigator.release(self.session, x, flip_y(y, self.height))
        self.outline = None

        if zoomed:
            self.display()
        else:
            self.update_window()

import numpy as np
import pygame as pg

from mandelzoom.base import ScreenRect
from mandelzoom.interface import flip_y, outline_rect

HEIGHT = 984


def test_flip_y_covers_every_row():
    assert flip_y(0, HEIGHT) == HEIGHT - 1
    assert flip_y(HEIGHT - 1, HEIGHT) == 0
    assert sorted(flip_y(r, HEIGHT) for r in range(HEIGHT)) == list(range(HEIGHT))


def test_click_maps_to_displayed_row():
    # each buffer row holds its own index; the window shows flipud(buf)
    buf = np.arange(HEIGHT).reshape(HEIGHT, 1)
    shown = np.flipud(buf)

    for row in (0, 1, 492, HEIGHT - 2, HEIGHT - 1):
        assert buf[flip_y(row, HEIGHT), 0] == shown[row, 0]


def test_outline_covers_corner_pixels():
    rect = outline_rect(ScreenRect(100, 100, 300, 250), HEIGHT)

    assert rect == pg.Rect(100, flip_y(250, HEIGHT), 201, 151)
    assert rect.bottom - 1 == flip_y(100, HEIGHT)
    assert rect.right - 1 == 300

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Explore the Mandelbrot Set by dragging a rectangle to zoom.
Rendering runs on a worker thread using Numba's parfor loop.
"""

import os
import sys
import time

from mandelzoom.option import parse_options

OPT = parse_options()

# Silently limit the number of threads to os.cpu_count() - 1.
NUM_THREADS = min(max(1, (os.cpu_count() or 2) - 1), max(1, OPT.num_threads))
os.environ['NUMBA_NUM_THREADS'] = str(NUM_THREADS)

from mandelzoom.interface import WindowPygame
from mandelzoom.renderer import Renderer

class App(WindowPygame):

    def __init__(self, opt):
        super().__init__(opt)

        print("[CPU] number of threads {}".format(NUM_THREADS))

        self.renderer = Renderer(self.width, self.height)

        # Instantiate the Window interface.
        super().init()

    def display(self):

        self.start_time = time.time()
        self.print_info()

        self.renderer.submit(
            self.session.region, self.eval_iters(), self.session.palette)

    def poll(self):

        result = self.renderer.poll()
        if result is not None:
            self.show(result[1])

    def exit(self):

        self.renderer.exit()


if __name__ == '__main__':

    mandel = App(OPT)
    try:
        mandel.run()
        mandel.exit()
    except KeyboardInterrupt:
        mandel.exit()

# -*- coding: utf-8 -*-
"""
Provides the background renderer.

Jobs are rendered on a worker thread in bands of rows. Submitting a new
job makes any older job stale; a stale job stops at the next band and
its buffer is never handed out.
"""

__all__ = ["Renderer"]

import sys, threading
from queue import SimpleQueue

import numpy as np

from .base import divide_up
from .mandel_parfor import render_view


class Renderer(object):

    def __init__(self, width, height, num_chunks=16):

        self.width = width
        self.height = height
        self.chunksize = max(1, divide_up(height, num_chunks))
        self.generation = 0
        self.result = None

        self.lock = threading.Lock()
        self.idle = threading.Event()
        self.idle.set()

        self.queue_job = SimpleQueue()
        self.consumer = threading.Thread(target=self.__render_task, daemon=True)
        self.consumer.start()


    def submit(self, region, iters, palette):
        """
        Queue a render and return its generation number.
        """
        if iters > palette.shape[0]:
            raise ValueError("palette of {} colors is too short for {} iterations".format(
                palette.shape[0], iters))

        with self.lock:
            self.generation += 1
            generation = self.generation
            self.result = None
            self.idle.clear()

        self.queue_job.put((generation, region, iters, palette))

        return generation


    def poll(self):
        """
        Return (generation, buffer) once the newest job is done, else None.
        """
        with self.lock:
            result, self.result = self.result, None

        return result


    def wait(self, timeout=None):

        if not self.idle.wait(timeout):
            return None

        return self.poll()


    def __stale(self, generation):

        with self.lock:
            return generation != self.generation


    def __render_task(self):

        while True:
            args = self.queue_job.get()
            if args is None: break

            generation, region, iters, palette = args

            try:
                output = self.__render(generation, region, iters, palette)
            except Exception as e:
                print(f"[render] error: generation {generation}: {e!r}", file=sys.stderr)
                output = None

            with self.lock:
                if generation == self.generation:
                    # a failed job leaves result empty but releases waiters
                    self.result = None if output is None else (generation, output)
                    self.idle.set()


    def __render(self, generation, region, iters, palette):
        """
        Render by bands; return None once the job has gone stale.
        """
        output = np.empty((self.height, self.width, 4), dtype=np.uint8)

        for start in range(0, self.height, self.chunksize):
            if self.__stale(generation):
                return None

            stop = min(start + self.chunksize, self.height)
            render_view(
                self.width, self.height, region, iters, palette,
                seq=(start, stop), output=output )

        return output


    def exit(self):

        self.queue_job.put(None)
        self.consumer.join()

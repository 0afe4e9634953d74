# -*- coding: utf-8 -*-
"""
Drag-to-zoom Mandelbrot explorer. Importing the package loads nothing,
so NUMBA_NUM_THREADS may still be set before the JIT modules load.
"""

__version__ = "0.1.0"

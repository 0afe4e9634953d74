# -*- coding: utf-8 -*-
"""
Provides the Option class for config file and command line parsing.
Options are read once at startup and stay fixed for the session.
"""

__all__ = ['Option', 'parse_options', 'show_keyboard_shortcuts']

import os, sys

from configparser import ConfigParser
from optparse import OptionParser
from os.path import basename, exists

from .base import MIN_PALETTE_SIZE

class Option(object):

    def __init__(self, argv=None):

        argv = list(sys.argv[1:] if argv is None else argv)

        usage = "%prog [--config filepath [section]] [options]"
        epilog = """
          Values exceeding the range specification are silently clipped to
          the respective minimum or maximum value. Drag a rectangle with the
          left mouse button to zoom; each zoom raises the iteration cap by
          the increment, up to max-iters when one is given.
          """
        epilog = " ".join([line.lstrip() for line in epilog.splitlines()])

        p = OptionParser(usage=usage, version="%prog 0.1.0", epilog=epilog)

        def _opt(parser, opt, t, h):
          if t is None:
            parser.add_option(opt, help=h, action="store_true", default=False)
          else:
            parser.add_option(opt, type=t, help=h, metavar="ARG")

        # allow options with underscore by replacing with dash
        for i in range(len(argv)):
            if argv[i].startswith('--'):
                (name, sep, value) = argv[i].partition('=')
                argv[i] = name.replace('_', '-') + sep + value

        # configure options
        _opt(p, "--shortcuts", None, "show keyboard shortcuts and exit")
        _opt(p, "--width", "int", "width of window [100-8000]: 1280")
        _opt(p, "--height", "int", "height of window [100-5000]: 984")
        _opt(p, "--min-x", "float", "home min-x value [float]: -2.0")
        _opt(p, "--max-x", "float", "home max-x value [float]: 1.25")
        _opt(p, "--min-y", "float", "home min-y value [float]: -1.25")
        _opt(p, "--min-iters", "int", "starting iteration cap [4-100000]: 200")
        _opt(p, "--max-iters", "int", "largest iteration cap, 0 for none [int]: 0")
        _opt(p, "--increment", "int", "iteration cap increase per zoom [0-10000]: 50")
        _opt(p, "--fixed-iters", "int", "iterate at min-iters on every zoom [0,1]: 0")
        _opt(p, "--num-threads", "string", "number of threads to use: auto")

        p.set_defaults(
            width=1280, height=984, min_x=-2.0, max_x=1.25, min_y=-1.25,
            min_iters=200, max_iters=0, increment=50, fixed_iters=0,
            num_threads='auto' )

        # optionally, override defaults from a config file
        argv = self.__handle_config(p, argv)

        # process command-line arguments
        (opt, args) = p.parse_args(argv)

        # show usage
        if len(args):
            p.print_help()
            sys.exit(2)
        if opt.shortcuts:
            show_keyboard_shortcuts()
            sys.exit(0)

        # a palette needs at least four colors
        if opt.min_iters < MIN_PALETTE_SIZE:
            p.error("--min-iters must be at least {}, got {}".format(
                MIN_PALETTE_SIZE, opt.min_iters))
        if opt.max_x <= opt.min_x:
            p.error("--max-x must be greater than --min-x")

        # clamp to minimum-maximum values
        self.width = max(100, min(8000, opt.width))
        self.height = max(100, min(5000, opt.height))
        self.min_iters = min(100000, opt.min_iters)
        self.max_iters = max(self.min_iters, opt.max_iters) if opt.max_iters > 0 else 0
        self.increment = max(0, min(10000, opt.increment))
        self.fixed_iters = max(0, min(1, opt.fixed_iters))
        self.min_x = opt.min_x
        self.max_x = opt.max_x
        self.min_y = opt.min_y

        if opt.num_threads != 'auto':
            self.num_threads = max(1, int(opt.num_threads))
        else:
            ncpu = int(
                os.getenv('NUMBA_NUM_THREADS') or
                os.getenv('NUM_THREADS') or
                (os.cpu_count() or 2) - 1
                )
            self.num_threads = max(1, ncpu)

        del opt, args


    @classmethod
    def __handle_config(cls, parser, argv):

        if len(argv) >= 1 and argv[0].startswith('--config'):
            try:
                (_, config_path) = argv[0].split('=')
                del argv[0]
            except ValueError:
                if len(argv) < 2:
                    parser.error("--config requires a file path")
                config_path = argv[1]
                del argv[1], argv[0]

            if len(argv) >= 1 and not argv[0].startswith('-'):
                section = argv[0]
                del argv[0]
            else:
                section = 'common'

            if not exists(config_path):
                prog = basename(sys.argv[0])
                mesg = f"{prog}: error: no such file or directory: '{config_path}'"
                print(mesg, file=sys.stderr)
                sys.exit(2)

            config = ConfigParser(default_section=None, empty_lines_in_values=False)
            config.read(config_path)

            cls.__override_defaults(parser, config, 'common')
            if section != 'common':
                cls.__override_defaults(parser, config, section)

        return argv


    @classmethod
    def __override_defaults(cls, parser, config, section):

        if not config.has_section(section):
            prog = basename(sys.argv[0])
            mesg = f"{prog}: error: no such section in config: '{section}'"
            print(mesg, file=sys.stderr)
            sys.exit(2)

        opt = dict()

        for key in ('width', 'height', 'min_iters', 'max_iters', 'increment',
                    'fixed_iters'):
            if config.has_option(section, key):
                opt[key] = int(config.get(section, key))

        for key in ('min_x', 'max_x', 'min_y'):
            if config.has_option(section, key):
                opt[key] = float(config.get(section, key))

        for key in ('num_threads',):
            if config.has_option(section, key):
                opt[key] = str(config.get(section, key))

        if len(opt):
            parser.set_defaults(**opt)


def parse_options(argv=None):

    return Option(argv)


def show_keyboard_shortcuts():

    print("""
Keyboard shortcuts:
  q)         terminate the application and exit
  r) Home)   reset window back to the home location

  Mouse:
    Press the left button, drag a rectangle, and release to zoom into
    the selection. The rectangle is widened or heightened to match the
    window aspect ratio, keeping its center. A click without dragging
    leaves the view unchanged.
    """.strip())


if __name__ == '__main__':
    print(vars(Option()))

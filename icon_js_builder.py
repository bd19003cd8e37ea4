#!/usr/bin/env python3

import argparse
import sys
from pathlib import Path

from console_output import path_help, print_colored
from convert_icons import convert_icon_dir

PATH_FLAG = '-path='
HELP_FLAGS = ('-h', '--help')


def build_parser():
    parser = argparse.ArgumentParser(
        prog='ha-icon-js-builder',
        description='Build custom_icons.js for Home Assistant from a directory of SVG icons',
    )
    parser.add_argument('-path', dest='path', metavar='DIR',
                        help='Directory holding the SVG icons (flag name is case-insensitive, '
                             'use -path=DIR); custom_icons.js is written there')
    return parser


def get_icon_path(argv):
    """Return the value of the first -path=... argument, verbatim, or None."""
    for arg in argv:
        if arg.lower().startswith(PATH_FLAG):
            return arg[len(PATH_FLAG):]
    return None


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    path = get_icon_path(argv)

    # -h only counts when no -path= is given
    if path is None and any(arg in HELP_FLAGS for arg in argv):
        build_parser().print_help()
        return 0

    if not path:
        print_colored("Path not found.", 'red')
        path_help()
        return -1

    icon_dir = Path(path)
    if not icon_dir.is_dir():
        print_colored("Invalid path supplied.", 'red')
        path_help()
        return -1

    convert_icon_dir(icon_dir)

    print_colored("done", 'green')
    return 0


if __name__ == '__main__':
    raise SystemExit(main())

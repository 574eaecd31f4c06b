"""
Entry point for colorls.
"""
import argparse
import logging
import os
import sys

from . import __version__
from .core.app import ColorLS
from .core.config import AppConfig, load_config, save_config
from .core.errors import DataLoadError
from .core.tables import load_tables
from .theme import MONO_THEME, THEMES, get_theme
from .utils import terminal_width

LOGGER = logging.getLogger(__name__)

if os.environ.get('COLORLS_DEBUG'):
    logging.basicConfig(
        level=logging.DEBUG,
        format='[%(levelname)s] %(name)s: %(message)s'
    )


def build_parser():
    parser = argparse.ArgumentParser(
        prog='colorls',
        description='List directory contents with colored icons in a column grid.',
    )
    parser.add_argument('paths', nargs='*', metavar='path', help='directories to list (default: current directory)')
    parser.add_argument('-r', '--report', action='store_true', help='print a folder/file summary after each listing')
    parser.add_argument('--theme', choices=sorted(THEMES), help='color theme (overrides the config file)')
    parser.add_argument('--width', type=int, help='layout width in cells (default: terminal width)')
    parser.add_argument('--config', help='path to config.toml')
    parser.add_argument('--check', action='store_true', help='validate the lookup tables and exit')
    parser.add_argument('--init-config', action='store_true', help='write the effective settings to the config file and exit')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def _effective_config(args, config):
    theme = args.theme or config.theme
    if os.environ.get('NO_COLOR') and not args.theme:
        theme = MONO_THEME
    return AppConfig(
        theme=theme,
        report=args.report or config.report,
        width=args.width if args.width is not None else config.width,
        tables_dir=config.tables_dir,
    )


def _saved_config(args, config):
    """Config file values plus the explicit --theme/--width overrides."""
    return AppConfig(
        theme=args.theme or config.theme,
        report=config.report,
        width=args.width if args.width is not None else config.width,
        tables_dir=config.tables_dir,
    )


def check_tables(tables, out):
    """Report dangling aliases; return an exit code."""
    problems = tables.validate()
    for table, alias, target in problems:
        out.write(f'{table}: {alias!r} -> {target!r} (missing)\n')
    if not problems:
        out.write('lookup tables OK\n')
    return 1 if problems else 0


def run(argv=None, out=None, err=None):
    """Run colorls and return process exit code."""
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr
    args = build_parser().parse_args(argv)
    file_config = load_config(args.config)

    if args.init_config:
        written = save_config(_saved_config(args, file_config), args.config)
        out.write(f'wrote {written}\n')
        return 0

    config = _effective_config(args, file_config)
    try:
        tables = load_tables(config.tables_dir or None)
    except DataLoadError as exc:
        err.write(f'colorls: {exc}\n')
        return 1

    if args.check:
        return check_tables(tables, out)

    width = config.width or terminal_width()
    LOGGER.debug('theme=%s width=%d report=%s', config.theme, width, config.report)
    lister = ColorLS(tables, get_theme(config.theme), width, report=config.report, out=out, err=err)
    return lister.run(args.paths)


def _silence_stdout():
    """Point stdout at devnull so the interpreter's final flush cannot fail again."""
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


def main_cli():
    """Console script entrypoint."""
    try:
        return run()
    except KeyboardInterrupt:
        return 130
    except BrokenPipeError:
        _silence_stdout()
        return 141


if __name__ == '__main__':
    raise SystemExit(main_cli())

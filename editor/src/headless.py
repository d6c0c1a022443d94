"""Headless 4color board: CLI entry point.

Seeds the shared figure from a tile list, replays board commands against it
and prints the board as text together with the status lamps.

Usage:
    python -m headless --tiles "x,y x,y ..." [--commands "CMD CMD ..."] [-v]

Commands are key names (Left, Right, Up, Down, Page_Up, Page_Down, space,
f, Tab, c, z, y), "toggle:x,y" to click a view-space tile in the focused
view, or "focus:N" to focus view N.

Examples:
    python -m headless --tiles "1,1 1,2 1,3 2,1"
    python -m headless --tiles "0,0 1,0 2,0" --commands "Tab Page_Up toggle:4,1"
"""

import sys
import os
import argparse
import logging

# Add editor/src to path so imports work when run as a script
_src_dir = os.path.dirname(os.path.abspath(__file__))
if _src_dir not in sys.path:
    sys.path.insert(0, _src_dir)

from constants import KEY_COMMANDS
from main.grid_map import GridMap
from models.point import Point
from services.ascii_renderer import render_board


def parse_point(text: str) -> Point:
    """Parse "x,y" into an integer Point.

    Raises:
        ValueError: If the text is not two comma-separated integers
    """
    parts = text.split(',')
    if len(parts) != 2:
        raise ValueError(f"Expected 'x,y', got '{text}'")
    try:
        return Point(int(parts[0]), int(parts[1]))
    except ValueError:
        raise ValueError(f"Tile coordinates must be integers, got '{text}'") from None


def parse_tiles(text: str) -> list:
    """Parse a whitespace-separated list of "x,y" tiles"""
    return [parse_point(token) for token in text.split()]


def run_commands(board: GridMap, commands: list) -> None:
    """Replay command tokens against a board.

    Raises:
        ValueError: On an unknown command or malformed argument
    """
    for token in commands:
        name, _, argument = token.partition(':')
        if name == 'toggle':
            board.toggle_tile(parse_point(argument))
        elif name == 'focus':
            try:
                index = int(argument)
            except ValueError:
                raise ValueError(f"focus needs a view index, got '{argument}'") from None
            board.run_command('focus', index)
        elif name in KEY_COMMANDS:
            board.handle_key(name)
        else:
            raise ValueError(f"Unknown command '{token}'")


def format_report(board: GridMap) -> str:
    """Board picture, focus line and status lamps"""
    picture = render_board(board.views) or "(empty board)\n"
    focused = board.focused_view.color()
    return (
        f"{picture}"
        f"tiles: {len(board.figure)}  focused: {focused}\n"
        f"status: {board.status()}\n"
    )


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Transform four colored views of one polyomino and report the four-color status.',
    )
    parser.add_argument(
        '-t', '--tiles',
        default='',
        help='Tiles of the shared figure, e.g. "1,1 1,2 2,1".',
    )
    parser.add_argument(
        '-c', '--commands',
        default='',
        help='Board commands to run, e.g. "Tab Page_Up toggle:3,4".',
    )
    parser.add_argument(
        '--config',
        default=None,
        help='JSON settings file (num_edge_tiles, tile_size, view_spacing, max_history).',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose logging.',
    )
    args = parser.parse_args(argv)

    # Logging
    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    try:
        tiles = parse_tiles(args.tiles)
        board = GridMap(config_file=args.config)
        if tiles:
            board.load_tiles(tiles)
        run_commands(board, args.commands.split())
    except (ValueError, OSError) as e:
        print(f"Error: {e}")
        return 1

    print(format_report(board), end='')
    return 0


if __name__ == '__main__':
    sys.exit(main())

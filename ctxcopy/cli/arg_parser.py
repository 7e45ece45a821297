"""Argument parsing for the ctxcopy CLI."""

import argparse

from ctxcopy import __version__
from ctxcopy.core.constants import PROVIDER_NAMES


def positive_int(value: str) -> int:
    """argparse type for 1-based line numbers."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"line numbers start at 1, got {number}")
    return number


def add_editor_state_args(parser: argparse.ArgumentParser) -> None:
    """Add the options an editor uses to describe its current state."""
    group = parser.add_argument_group("editor state")
    group.add_argument(
        "--file",
        metavar="PATH",
        help="Backing file of the active buffer (omit for unsaved buffers)",
    )
    group.add_argument(
        "--line",
        type=positive_int,
        default=1,
        help="1-based cursor line (default: 1)",
    )
    group.add_argument(
        "--cwd",
        metavar="DIR",
        help="Active working directory (default: current directory)",
    )
    group.add_argument(
        "--buffer",
        metavar="NAME",
        help="Buffer display name (default: file name, or *scratch*)",
    )
    group.add_argument(
        "--project-root",
        metavar="DIR",
        help="Project root, skipping marker detection",
    )
    group.add_argument(
        "--function",
        metavar="NAME",
        help="Enclosing function name, skipping source scanning",
    )


def add_config_args(parser: argparse.ArgumentParser) -> None:
    """Add config, output and logging options."""
    parser.add_argument(
        "--config",
        metavar="PATH",
        help="Load only this config file instead of the layered lookup",
    )
    parser.add_argument(
        "--template",
        metavar="TPL",
        help='Status message template, e.g. "{description}: {text}"',
    )
    parser.add_argument(
        "--register",
        choices=["memory", "system", "osc52"],
        help="Where to copy to (default from config: system)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Debug logging to stderr",
    )
    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Also write logs to this file (rotated at 5MB)",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level parser with menu/copy/list subcommands."""
    parser = argparse.ArgumentParser(
        prog="ctxcopy",
        description="Copy file, project and cursor context to the clipboard",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    add_editor_state_args(parser)
    add_config_args(parser)

    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser(
        "menu",
        help="Pick what to copy from an interactive menu (default)",
    )

    copy_parser = subparsers.add_parser(
        "copy",
        help="Copy one piece of context directly",
    )
    copy_parser.add_argument(
        "provider",
        choices=PROVIDER_NAMES,
        help="What to copy",
    )

    subparsers.add_parser(
        "list",
        help="Show providers, their menu keys and whether they are available",
    )

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments. Defaults the command to "menu"."""
    args = build_parser().parse_args(argv)
    if args.command is None:
        args.command = "menu"
    return args

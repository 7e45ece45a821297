"""ctxcopy command-line entry point.

Editors invoke ctxcopy as a subprocess, describing their state with
options, for example:

    ctxcopy --file /home/u/proj/src/main.py --line 42 copy file-with-line
    ctxcopy --file "$FILE" --line "$LINE"          # interactive menu
    ctxcopy --cwd /tmp/scratch list
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from ctxcopy.cli.arg_parser import parse_args
from ctxcopy.cli.logging_setup import configure_logging
from ctxcopy.cli.menu import MenuChoice, show_menu
from ctxcopy.clipboard.register import create_register
from ctxcopy.clipboard.sink import CopySink
from ctxcopy.config.loader import load_config
from ctxcopy.config.schema import ClipboardConfig, Config
from ctxcopy.context.dispatcher import Dispatcher
from ctxcopy.context.git import GitQuery
from ctxcopy.context.providers import build_providers
from ctxcopy.core.constants import ENCODING, ENCODING_ERRORS
from ctxcopy.core.errors import ConfigError
from ctxcopy.display.console import get_console
from ctxcopy.display.notifier import ConsoleNotifier
from ctxcopy.display.theme import DEFAULT_THEME
from ctxcopy.host.context import HostContext
from ctxcopy.host.definitions import SourceDefinitionLocator
from ctxcopy.host.editor import StaticEditorState
from ctxcopy.host.interfaces import Notifier, Register
from ctxcopy.host.project import MarkerProjectLocator

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def build_host(args: argparse.Namespace, config: Config) -> HostContext:
    """Build host collaborators from CLI options and config."""
    editor = StaticEditorState(
        cwd=args.cwd or os.getcwd(),
        file_path=args.file,
        line=args.line,
        buffer_name=args.buffer,
    )
    return HostContext(
        editor=editor,
        projects=MarkerProjectLocator(
            config.project.markers,
            override=args.project_root,
            cwd=editor.cwd,
        ),
        definitions=SourceDefinitionLocator(
            editor.current_file_path(),
            editor.current_line(),
            override=args.function,
        ),
        git=GitQuery(executable=config.git.executable, timeout=config.git.timeout),
    )


def build_dispatcher(
    host: HostContext,
    config: Config,
    notifier: Notifier,
    register: Register | None = None,
) -> Dispatcher:
    """Wire providers, register and sink together.

    Args:
        host: Host collaborators.
        config: Loaded config (template and register backend).
        notifier: Status/error channel.
        register: Register override. Defaults to the configured backend.
    """
    if register is None:
        register = create_register(config.clipboard)
    sink = CopySink(register, notifier, template=config.message_template)
    return Dispatcher(build_providers(host), sink, notifier)


def apply_cli_overrides(config: Config, args: argparse.Namespace) -> Config:
    """Return config with --template/--register applied on top."""
    updates: dict[str, object] = {}
    if args.template is not None:
        updates["message_template"] = args.template
    if args.register is not None:
        updates["clipboard"] = ClipboardConfig(backend=args.register)
    return config.model_copy(update=updates) if updates else config


def print_listing(
    dispatcher: Dispatcher,
    keys: dict[str, str],
    register_name: str,
    console: Console,
) -> None:
    """Print a table of providers with their key and availability."""
    availability = dispatcher.availability()
    table = Table(title=f"Providers (register: {register_name})", title_justify="left")
    table.add_column("Key", style=DEFAULT_THEME.key)
    table.add_column("Name")
    table.add_column("Description")
    table.add_column("Available")
    for provider in dispatcher.providers:
        available = availability[provider.name]
        table.add_row(
            keys[provider.name],
            provider.name,
            provider.description,
            "yes" if available else "no",
            style=None if available else DEFAULT_THEME.disabled,
        )
    console.print(table)


def run(args: argparse.Namespace, console: Console | None = None) -> int:
    """Execute a parsed command. Returns the process exit code."""
    console = console or get_console()
    notifier = ConsoleNotifier(console)

    cwd = Path(args.cwd).expanduser() if args.cwd else Path.cwd()
    try:
        config = load_config(
            path=Path(args.config) if args.config else None,
            cwd=cwd,
        )
    except ConfigError as e:
        notifier.notify_error(e.message)
        return EXIT_USAGE
    config = apply_cli_overrides(config, args)

    host = build_host(args, config)
    dispatcher = build_dispatcher(host, config, notifier)
    keys = config.menu.keys

    if args.command == "list":
        print_listing(dispatcher, keys, dispatcher.sink.register.name, console)
        return EXIT_OK

    if args.command == "copy":
        value = dispatcher.run(args.provider)
        return EXIT_OK if value is not None else EXIT_FAILED

    result = show_menu(dispatcher, keys, console)
    if result.choice == MenuChoice.FAILED:
        return EXIT_FAILED
    return EXIT_OK


def configure_stdio() -> None:
    """Make stdout/stderr UTF-8 so non-ASCII paths print the same everywhere.

    A Windows console defaults to a legacy code page and would otherwise
    raise UnicodeEncodeError on the status line for a file like "café.py".
    """
    for stream in (sys.stdout, sys.stderr):
        if hasattr(stream, "reconfigure"):
            stream.reconfigure(encoding=ENCODING, errors=ENCODING_ERRORS)


def main(argv: list[str] | None = None) -> int:
    """Console script entry point."""
    configure_stdio()
    load_dotenv()
    args = parse_args(argv)
    configure_logging(
        verbose=args.verbose,
        log_file=Path(args.log_file) if args.log_file else None,
    )
    logger.debug("Running %s", args.command)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())

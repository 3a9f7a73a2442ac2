"""toolcard CLI: main application entry point."""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_LEVEL_ENV_VAR = "TOOLCARD_LOG_LEVEL"
LOG_DIR = Path.home() / ".toolcard" / "logs"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _configure_logging(*, verbose: bool, log_file: bool, to_stderr: bool) -> Path | None:
    """Set up the root logger; returns the log file path when one is used.

    The Textual app owns the terminal, so stream logging is only enabled
    for plain output.
    """
    if verbose:
        level = logging.DEBUG
    else:
        name = os.getenv(LOG_LEVEL_ENV_VAR, "WARNING").upper()
        level = getattr(logging, name, logging.WARNING)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    formatter = logging.Formatter(LOG_FORMAT)

    path: Path | None = None
    if log_file:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        path = LOG_DIR / "toolcard.log"
        file_handler = RotatingFileHandler(
            path, maxBytes=1_000_000, backupCount=3, encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
    if to_stderr:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(formatter)
        root.addHandler(stream_handler)
    if not root.handlers:
        root.addHandler(logging.NullHandler())
    return path


def _print_layouts() -> None:
    from toolcard.shared.layouts import get_registry

    registry = get_registry()
    width = max(len(name) for name in registry.names())
    for name in registry.names():
        print(f"  {name:<{width}}  {registry.display_name(name)}")


def _print_plain(entries, config) -> None:
    from rich.console import Console

    from toolcard.shared.formatters.tool_call import render_tool_call

    console = Console(width=config.width, highlight=False)
    for call, result in entries:
        console.print(render_tool_call(
            call,
            result,
            show_output=config.show_output,
            generic_preview=config.generic_preview,
        ))


def main(argv: list[str] | None = None) -> int:
    import argparse

    parser = argparse.ArgumentParser(
        prog="toolcard",
        description="toolcard: compact terminal summaries of agent tool calls",
    )
    parser.add_argument(
        "transcript", nargs="?", metavar="TRANSCRIPT",
        help="JSON or YAML file of recorded tool calls",
    )
    parser.add_argument(
        "--plain", action="store_true",
        help="Print the rendered calls and exit (no TUI)",
    )
    parser.add_argument(
        "--no-output", action="store_true",
        help="Hide result previews",
    )
    parser.add_argument(
        "--config", metavar="PATH",
        help="Display config YAML (default: $TOOLCARD_CONFIG or ~/.toolcard/config.yaml)",
    )
    parser.add_argument(
        "--width", metavar="N", type=int,
        help="Console width for --plain output",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--log-file", action="store_true",
        help=f"Also write logs to {LOG_DIR / 'toolcard.log'}",
    )
    parser.add_argument(
        "--list-layouts", action="store_true",
        help="List registered tool layouts and exit",
    )
    args = parser.parse_args(argv)

    log_path = _configure_logging(
        verbose=args.verbose,
        log_file=args.log_file,
        to_stderr=args.plain or args.list_layouts,
    )
    logger = logging.getLogger(__name__)

    if args.list_layouts:
        _print_layouts()
        return 0

    if not args.transcript:
        parser.error("TRANSCRIPT is required unless --list-layouts is given")

    from toolcard.config import DisplayConfig
    from toolcard.errors import ToolcardError
    from toolcard.shared.models.transcript import load_transcript

    try:
        config = DisplayConfig.load(args.config)
        entries = load_transcript(args.transcript)
    except ToolcardError as exc:
        print(f"toolcard: {exc}", file=sys.stderr)
        return 1

    if args.no_output:
        config.show_output = False
    if args.width is not None:
        config.width = args.width
    config.validate()
    config.apply_theme()

    logger.info(
        "Starting toolcard transcript=%s calls=%d plain=%s log=%s",
        args.transcript, len(entries), args.plain, log_path or "<none>",
    )

    if args.plain:
        _print_plain(entries, config)
        return 0

    from toolcard.tui.app import ToolcardApp

    ToolcardApp(entries, config=config).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())

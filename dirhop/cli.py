"""Command-line front door for dirhop.

Parses CLI options, merges them with persisted config, and runs the
interactive selector. The chosen path is the only thing written to stdout,
so ``cd "$(dirhop)"`` works.
"""

from __future__ import annotations

import argparse
import logging
import shutil
import sys
from pathlib import Path

from . import config
from .candidates import CandidateSet, list_directory
from .errors import DirhopError
from .layout import Bounds
from .log import setup_logging
from .render import render_listing
from .runtime import run_selector
from .ui_theme import ENTRY_STYLES, available_theme_names, resolve_entry_style, resolve_theme

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    # -h is taken by --hidden, so help is long-form only.
    parser = argparse.ArgumentParser(
        prog="dirhop",
        description="Pick a file or directory by typing its two-letter label.",
        add_help=False,
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to start in. Defaults to current directory.")
    parser.add_argument("--help", action="help", help="Show this help message and exit.")
    parser.add_argument(
        "-h",
        "--hidden",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Show hidden (dot) files.",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--style",
        choices=sorted(ENTRY_STYLES),
        default=None,
        help="Entry styling: emphasize directories or render everything plain.",
    )
    parser.add_argument(
        "--confirm",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Wait for Enter after a complete label instead of acting immediately.",
    )
    parser.add_argument("--list", action="store_true", help="Print labelled pages for PATH and exit.")
    parser.add_argument(
        "--max-cols",
        type=_positive_int,
        default=None,
        help="Column width for --list output (default: terminal width).",
    )
    parser.add_argument(
        "--max-rows",
        type=_positive_int,
        default=None,
        help="Row count for --list output (default: terminal height).",
    )
    parser.add_argument("--log-file", type=Path, default=None, help="Append diagnostic logs to this file.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level used with --log-file.",
    )
    return parser


def main(default_path: Path | None = None, argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run the selector.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used. On quit the current working directory is printed, so
    shell wrappers that ``cd`` into the output stay where they are.
    """
    args = build_parser().parse_args(argv)
    setup_logging(args.log_file, args.log_level)

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or default_path)
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")

    show_hidden = args.hidden if args.hidden is not None else config.load_show_hidden()
    confirm = args.confirm if args.confirm is not None else config.load_confirm()
    theme_name = args.theme or config.load_theme_name()
    style_name = args.style or config.load_entry_style_name()

    if args.list:
        term = shutil.get_terminal_size((80, 24))
        bounds = Bounds(
            0,
            0,
            args.max_cols if args.max_cols is not None else term.columns,
            args.max_rows if args.max_rows is not None else term.lines,
        )
        try:
            candidates = CandidateSet.rebuild(list_directory(path), show_hidden)
        except OSError as exc:
            raise SystemExit(f"Error reading directory {exc}") from exc
        theme = resolve_theme(theme_name, no_color=args.no_color or not sys.stdout.isatty())
        sys.stdout.write(render_listing(candidates, bounds, theme, resolve_entry_style(style_name, theme)))
        return

    try:
        selected = run_selector(
            path,
            show_hidden,
            theme_name=theme_name,
            no_color=args.no_color,
            style_name=style_name,
            confirm=confirm,
        )
    except OSError as exc:
        logger.error("directory read failed: %s", exc)
        raise SystemExit(f"Error reading directory {exc}") from exc
    except DirhopError as exc:
        logger.exception("selector aborted")
        raise SystemExit(f"Internal error: {exc}") from exc

    if selected is None:
        selected = Path.cwd()
    sys.stdout.write(f"{selected}\n")


if __name__ == "__main__":
    main()

"""Command-line front door for lazyeditor.

``prefs`` prints the preferences resolved for an optional file path.
``themes`` runs the theme picker search once and prints the ranked results.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from .errors import PreferencesError, describe_error_chain
from .modes import ThemeMode
from .preferences import Preferences, config_path
from .themes import available_theme_names, resolve_style, themes_dir


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


def render_preferences(preferences: Preferences, path: Path | None = None) -> str:
    """Render resolved preference values as ``key: value`` lines."""
    guide = preferences.line_length_guide()
    rows = [
        ("theme", preferences.theme()),
        ("tab_width", str(preferences.tab_width(path))),
        ("line_length_guide", "off" if guide is None else str(guide)),
        ("line_wrapping", _format_bool(preferences.line_wrapping())),
        ("soft_tabs", _format_bool(preferences.soft_tabs())),
        ("tab_content", repr(preferences.tab_content())),
    ]
    return "".join(f"{key}: {value}\n" for key, value in rows)


def render_theme_results(mode: ThemeMode, current_theme: str) -> str:
    """Render one row per search result, marking the configured theme."""
    out: list[str] = []
    for name in mode.results():
        marker = "*" if name == current_theme else " "
        background = resolve_style(name).background_color
        out.append(f"{marker} {name}  {background}\n")
    return "".join(out)


def _load_preferences(config_dir: Path | None) -> Preferences:
    try:
        return Preferences.load(config_dir)
    except PreferencesError as exc:
        raise SystemExit(f"lazyeditor: {describe_error_chain(exc)}") from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazyeditor",
        description="Inspect editor preferences and search available themes.",
    )
    parser.add_argument(
        "--config-dir",
        type=Path,
        default=None,
        help="Directory holding config.yml (default: platform user config directory).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    prefs_parser = subparsers.add_parser("prefs", help="Print resolved preferences.")
    prefs_parser.add_argument("path", nargs="?", default=None, help="File whose extension selects overrides.")

    themes_parser = subparsers.add_parser("themes", help="Search available themes.")
    themes_parser.add_argument("query", nargs="?", default="", help="Fuzzy query; omit to list every theme.")
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """Parse CLI arguments and run the requested subcommand."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    preferences = _load_preferences(args.config_dir)

    if args.command == "prefs":
        target = Path(args.path) if args.path is not None else None
        sys.stdout.write(f"config: {config_path(args.config_dir)}\n")
        sys.stdout.write(render_preferences(preferences, target))
        return

    names = available_theme_names(themes_dir(args.config_dir))
    if not args.query:
        current = preferences.theme()
        sys.stdout.write("".join(f"{'*' if name == current else ' '} {name}\n" for name in names))
        return

    mode = ThemeMode(names)
    mode.query = args.query
    mode.search()
    output = render_theme_results(mode, preferences.theme())
    if not output:
        raise SystemExit(f"No themes match {args.query!r}")
    sys.stdout.write(output)


if __name__ == "__main__":
    main()

"""Command line interface for merging and resolving theme files."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Iterable, Mapping

from .errors import ThemrError
from .loaders import dump_theme, load_options, load_theme
from .merge import merge
from .options import Compose, Priority, options_from_env
from .resolve import resolve

logger = logging.getLogger(__name__)


def _emit(theme: Mapping[str, Any], args: argparse.Namespace) -> None:
    text = dump_theme(theme, args.format)
    if args.out:
        out = Path(args.out)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(text, encoding="utf-8")
        logger.info("Theme written to %s", out)
    else:
        sys.stdout.write(text)


def _optional_theme(path: str | None) -> dict[str, Any] | None:
    return load_theme(Path(path)) if path else None


def cmd_merge(args: argparse.Namespace) -> None:
    themes = [load_theme(Path(path)) for path in args.themes]
    _emit(merge(*themes), args)


def cmd_resolve(args: argparse.Namespace) -> None:
    options = load_options(Path(args.config)) if args.config else options_from_env()
    options = options.replace(
        compose_adhoc_theme=args.compose_adhoc,
        compose_context_theme=args.compose_context,
        theme_priority=args.priority,
    )
    theme = resolve(
        _optional_theme(args.adhoc),
        args.namespace,
        _optional_theme(args.context),
        _optional_theme(args.default),
        options.compose_adhoc_theme,
        options.compose_context_theme,
        options.theme_priority,
    )
    _emit(theme, args)


def _add_output_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--format", choices=["yaml", "json"], default="yaml", help="Output format"
    )
    parser.add_argument("--out", help="Write the theme here instead of stdout")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="themr-lite", description="Merge and resolve CSS class themes"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    parser_merge = subparsers.add_parser(
        "merge", help="Deep-merge theme files left to right"
    )
    parser_merge.add_argument("themes", nargs="+", help="YAML or JSON theme files")
    _add_output_args(parser_merge)
    parser_merge.set_defaults(func=cmd_merge)

    parser_resolve = subparsers.add_parser(
        "resolve", help="Resolve ad-hoc, context and default themes"
    )
    parser_resolve.add_argument("--adhoc", help="Ad-hoc theme file")
    parser_resolve.add_argument("--namespace", help="Ad-hoc theme namespace prefix")
    parser_resolve.add_argument("--context", help="Contextual theme file")
    parser_resolve.add_argument("--default", help="Default theme file")
    parser_resolve.add_argument(
        "--compose-adhoc",
        choices=[mode.value for mode in Compose],
        help="Composition of the ad-hoc theme",
    )
    parser_resolve.add_argument(
        "--compose-context",
        choices=[Compose.SOFT.value, Compose.SWAP.value],
        help="Composition of the context and default themes",
    )
    parser_resolve.add_argument(
        "--priority",
        choices=[priority.value for priority in Priority],
        help="Theme priority order",
    )
    parser_resolve.add_argument(
        "--config", help="YAML or JSON file with themr options"
    )
    _add_output_args(parser_resolve)
    parser_resolve.set_defaults(func=cmd_resolve)

    return parser


def main(argv: Iterable[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        args.func(args)
    except (ThemrError, FileNotFoundError) as exc:
        print(f"themr-lite: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

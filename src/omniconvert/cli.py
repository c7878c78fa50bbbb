"""CLI entry point: ``omniconvert convert``, ``ask``, ``shell`` and friends."""

from __future__ import annotations

# Phase 1: Singleton logging, before any transitive litellm imports
from omniconvert.logging_config import setup_logging

setup_logging()

import argparse  # noqa: E402
import asyncio  # noqa: E402
import json  # noqa: E402
import sys  # noqa: E402

from omniconvert import __version__  # noqa: E402
from omniconvert.ai.adapter import outcome_to_dict  # noqa: E402
from omniconvert.ai.schemas import (  # noqa: E402
    AIOutcome,
    AISemanticError,
    AISuccess,
)
from omniconvert.catalog.loader import get_catalog  # noqa: E402
from omniconvert.catalog.models import CategoryDefinition  # noqa: E402
from omniconvert.catalog.registry import UnitCatalog  # noqa: E402
from omniconvert.config import Settings  # noqa: E402
from omniconvert.constants import NO_RESULT  # noqa: E402
from omniconvert.engine.converter import convert, resolve_units  # noqa: E402
from omniconvert.engine.reference import reference_table  # noqa: E402
from omniconvert.logger import RequestLogger  # noqa: E402
from omniconvert.logging_config import (  # noqa: E402
    cleanup_third_party_handlers,
    set_log_level,
)
from omniconvert.services.session import ConverterSession  # noqa: E402

# Phase 2: Clear litellm's duplicate handlers after all imports
cleanup_third_party_handlers()

SHELL_HELP = """\
Commands:
  VALUE FROM TO      convert and save to history (e.g. 5 mi km)
  ask QUERY          natural-language conversion
  category NAME      switch the manual category
  reference          quick reference for the last unit pair
  history            show recent conversions
  clear              clear history
  help               show this message
  quit               leave the shell"""


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"omniconvert {__version__}")
        return

    if args.verbose:
        set_log_level("INFO")

    try:
        settings = Settings()
        catalog = get_catalog(settings)
    except (ValueError, FileNotFoundError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    if args.command == "categories":
        _run_categories(catalog)
    elif args.command == "convert":
        _run_convert(args, catalog)
    elif args.command == "reference":
        _run_reference(args, catalog)
    elif args.command == "ask":
        _run_ask(args, settings, catalog)
    elif args.command == "shell":
        _run_shell(settings, catalog)
    else:
        parser.print_help()


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="omniconvert",
        description=(
            "Unit converter: precise table-driven conversions, "
            "or ask in plain English."
        ),
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    sub = parser.add_subparsers(dest="command")

    sub.add_parser(
        "categories",
        help="List categories and their units",
    )

    conv = sub.add_parser(
        "convert",
        help="Convert a value between two units",
    )
    conv.add_argument("value", type=str, help="Value to convert")
    conv.add_argument("from_unit", type=str, help="Source unit id")
    conv.add_argument("to_unit", type=str, help="Target unit id")
    conv.add_argument(
        "--category",
        "-c",
        default=None,
        help="Category name (default: inferred from the unit ids)",
    )
    conv.add_argument(
        "--json",
        action="store_true",
        help="Print the history record as JSON",
    )

    ref = sub.add_parser(
        "reference",
        help="Quick reference table for a unit pair",
    )
    ref.add_argument("from_unit", type=str, help="Source unit id")
    ref.add_argument("to_unit", type=str, help="Target unit id")
    ref.add_argument(
        "--category",
        "-c",
        default=None,
        help="Category name (default: inferred from the unit ids)",
    )

    ask = sub.add_parser(
        "ask",
        help="Natural-language conversion via the AI model",
    )
    ask.add_argument(
        "query",
        nargs="+",
        help='Free-text request, e.g. "5 light years to parsecs"',
    )
    ask.add_argument(
        "--json",
        action="store_true",
        help="Print the outcome as JSON",
    )

    sub.add_parser(
        "shell",
        help="Interactive session with conversion history",
    )

    return parser


def _resolve_category(
    catalog: UnitCatalog,
    from_unit: str,
    to_unit: str,
    name: str | None = None,
) -> CategoryDefinition | None:
    """Named category, or the first one defining both unit ids."""
    if name is not None:
        return catalog.find_category(name)
    for category in catalog.categories_with_unit(from_unit):
        if category.get_unit(to_unit) is not None:
            return category
    return None


def _run_categories(catalog: UnitCatalog) -> None:
    for category in catalog:
        print(f"{category.name} (base: {category.base_unit_id})")
        for unit in category.units:
            print(f"  {unit.id:<10} {unit.name} ({unit.symbol})")


def _run_convert(args: argparse.Namespace, catalog: UnitCatalog) -> None:
    """Execute the convert command."""
    category = _resolve_category(
        catalog, args.from_unit, args.to_unit, args.category
    )
    if category is None:
        print(
            f"Error: no category defines both '{args.from_unit}' "
            f"and '{args.to_unit}'",
            file=sys.stderr,
        )
        sys.exit(1)

    units = resolve_units(category, args.from_unit, args.to_unit)
    if units is None:
        print(
            f"Error: unknown unit for {category.name}: "
            f"{args.from_unit} or {args.to_unit}",
            file=sys.stderr,
        )
        sys.exit(1)
    from_unit, to_unit = units

    result = convert(
        category.name,
        args.value,
        args.from_unit,
        args.to_unit,
        catalog=catalog,
    )
    if result == NO_RESULT:
        print(f"Error: not a number: {args.value!r}", file=sys.stderr)
        sys.exit(1)

    if args.json:
        session = ConverterSession(catalog=catalog)
        session.manual.select_category(category.name)
        session.manual.set_from_unit(args.from_unit)
        session.manual.set_to_unit(args.to_unit)
        session.manual.set_input(args.value)
        record = session.manual.commit()
        if record is None:
            print("Error: conversion could not be recorded", file=sys.stderr)
            sys.exit(1)
        print(json.dumps(record.to_dict(), indent=2, ensure_ascii=False))
        return

    print(f"{args.value} {from_unit.symbol} = {result} {to_unit.symbol}")


def _run_reference(args: argparse.Namespace, catalog: UnitCatalog) -> None:
    """Execute the reference command."""
    category = _resolve_category(
        catalog, args.from_unit, args.to_unit, args.category
    )
    rows = (
        reference_table(
            category.name, args.from_unit, args.to_unit, catalog=catalog
        )
        if category is not None
        else []
    )
    if not rows:
        print(
            f"Error: cannot convert '{args.from_unit}' "
            f"to '{args.to_unit}'",
            file=sys.stderr,
        )
        sys.exit(1)
    for row in rows:
        print(row)


def _run_ask(
    args: argparse.Namespace,
    settings: Settings,
    catalog: UnitCatalog,
) -> None:
    """Execute the ask command."""
    query = " ".join(args.query)
    if not query.strip():
        print("Error: empty query", file=sys.stderr)
        sys.exit(1)

    session = ConverterSession(
        settings,
        catalog,
        request_logger=RequestLogger(settings.log_dir, settings.log_level),
    )
    outcome = asyncio.run(session.ai.submit(query))

    if args.json:
        print(json.dumps(outcome_to_dict(outcome), indent=2))
    else:
        _print_outcome(outcome)

    if isinstance(outcome, AISemanticError):
        sys.exit(2)
    if not isinstance(outcome, AISuccess):
        sys.exit(1)


def _print_outcome(outcome: AIOutcome) -> None:
    match outcome:
        case AISuccess(result=r):
            print(
                f"{r.source_value:g} {r.source_unit} = "
                f"{r.target_value:,.6g} {r.target_unit}"
            )
            print(f"  {r.explanation}")
            if r.formula:
                print(f"  Formula: {r.formula}")
        case _:
            print(f"Error: {outcome.message}", file=sys.stderr)


def _run_shell(settings: Settings, catalog: UnitCatalog) -> None:
    """Interactive loop; history lasts until the shell exits."""
    session = ConverterSession(
        settings,
        catalog,
        request_logger=RequestLogger(settings.log_dir, settings.log_level),
    )
    print(f"omniconvert {__version__}; type 'help' for commands")
    if not session.ai_available:
        print("(AI mode unavailable: no API key configured)")

    while True:
        try:
            line = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if not handle_shell_line(session, line):
            break


def handle_shell_line(session: ConverterSession, line: str) -> bool:
    """Run one shell command. Returns False when the shell should exit."""
    text = line.strip()
    if not text:
        return True
    command, _, rest = text.partition(" ")
    command = command.lower()

    if command in ("quit", "exit"):
        return False
    if command == "help":
        print(SHELL_HELP)
    elif command == "history":
        entries = session.history()
        if not entries:
            print("(no history)")
        for i, entry in enumerate(entries, 1):
            print(f"{i:>2}. {entry}")
    elif command == "clear":
        session.clear_history()
        print("History cleared.")
    elif command == "category":
        category = session.manual.select_category(rest.strip())
        print(f"Category: {category.name}")
    elif command == "reference":
        for row in session.manual.reference():
            print(row)
    elif command == "ask":
        _shell_ask(session, rest)
    else:
        _shell_convert(session, text)
    return True


def _shell_ask(session: ConverterSession, query: str) -> None:
    if not session.ai_available:
        print("AI mode is unavailable: no API key configured.")
        return
    if not query.strip():
        print("Usage: ask QUERY")
        return
    outcome = asyncio.run(session.ai.submit(query))
    _print_outcome(outcome)


def _shell_convert(session: ConverterSession, text: str) -> None:
    parts = text.split()
    if len(parts) != 3:
        print("Usage: VALUE FROM TO (type 'help' for commands)")
        return
    value, from_unit, to_unit = parts

    manual = session.manual
    if manual.category.get_unit(from_unit) is None or (
        manual.category.get_unit(to_unit) is None
    ):
        category = _resolve_category(session.catalog, from_unit, to_unit)
        if category is None:
            print(f"Cannot convert '{from_unit}' to '{to_unit}'.")
            return
        manual.select_category(category.name)

    units = resolve_units(manual.category, from_unit, to_unit)
    if units is None:
        print(f"Cannot convert '{from_unit}' to '{to_unit}'.")
        return
    from_def, to_def = units
    manual.set_from_unit(from_unit)
    manual.set_to_unit(to_unit)
    output = manual.set_input(value)
    if output == NO_RESULT:
        print(f"Not a number: {value!r}")
        return

    manual.commit()
    print(f"{value} {from_def.symbol} = {output} {to_def.symbol}")

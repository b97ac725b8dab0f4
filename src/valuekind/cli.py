"""
valuekind command line

Classifies Python literals given as arguments (or one per stdin line) and
prints their canonical type and every predicate they satisfy.
"""

import argparse
import ast
import json
import logging
import math
import sys
from collections.abc import Iterable, Sequence
from typing import Any, Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.theme import Theme

from .config_loader import build_validation
from .errors import build_error, error_lines
from .logging_config import setup_logging
from .sentinels import UNDEFINED
from .validation import Validation

logger = logging.getLogger(__name__)

VALUEKIND_THEME = Theme(
    {
        "header": "bold blue",
        "tag": "bold cyan",
        "match": "green",
        "dim": "dim white",
    }
)

# Names ast.literal_eval cannot express
SPECIAL_LITERALS: dict[str, Any] = {
    "UNDEFINED": UNDEFINED,
    "nan": math.nan,
    "inf": math.inf,
    "-inf": -math.inf,
}


def parse_literal(text: str) -> Any:
    """Parses a Python literal; raises ValueError when ``text`` is not one."""
    stripped = text.strip()
    if stripped in SPECIAL_LITERALS:
        return SPECIAL_LITERALS[stripped]
    try:
        return ast.literal_eval(stripped)
    except (ValueError, SyntaxError, TypeError, MemoryError, RecursionError) as exc:
        raise ValueError(f"Not a Python literal: {exc}") from exc


def classify(validation: Validation, value: Any) -> dict[str, Any]:
    """Returns the type name and the outcome of every predicate for ``value``."""
    predicates = {name: bool(validation[name](value)) for name in validation if name != "type_of"}
    return {"type": validation.type_of(value), "predicates": predicates}


def render_table(console: Console, rows: Iterable[tuple[str, dict[str, Any]]]) -> None:
    table = Table(
        box=box.ROUNDED,
        header_style="header",
        border_style="dim",
        padding=(0, 1),
        expand=False,
    )
    table.add_column("Input", style="cyan")
    table.add_column("Type", style="tag")
    table.add_column("Matches", style="match")

    for source, result in rows:
        matches = [name for name, ok in result["predicates"].items() if ok]
        table.add_row(source, result["type"], ", ".join(matches) or "-")

    console.print(table)


def _read_inputs(literals: Sequence[str]) -> list[str]:
    if literals:
        return list(literals)
    return [line.rstrip("\n") for line in sys.stdin if line.strip()]


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Classify Python literals by canonical runtime type."
    )
    parser.add_argument(
        "literals",
        nargs="*",
        help="Python literals to classify (reads stdin lines when omitted)",
    )
    parser.add_argument("--json", action="store_true", help="Emit JSON instead of a table")
    parser.add_argument(
        "--config-dir",
        type=str,
        help="Directory containing classifier_config.json",
    )
    parser.add_argument(
        "--strict", action="store_true", help="Fail on missing or invalid configuration"
    )
    parser.add_argument(
        "--log-level", type=str, default="WARNING", help="Console log level (default: WARNING)"
    )

    args = parser.parse_args(argv)
    setup_logging(console_level=args.log_level)

    try:
        validation = build_validation(config_dir=args.config_dir, strict=args.strict or None)
    except (ValueError, FileNotFoundError) as exc:
        payload = build_error(
            "Invalid classifier configuration.",
            details=str(exc),
            hint="Check classifier_config.json or pass --config-dir.",
        )
        for line in error_lines(payload):
            print(line, file=sys.stderr)
        print(json.dumps(payload, indent=2), file=sys.stderr)
        sys.exit(2)

    rows: list[tuple[str, dict[str, Any]]] = []
    errors: list[dict[str, Any]] = []
    for source in _read_inputs(args.literals):
        try:
            value = parse_literal(source)
        except ValueError as exc:
            errors.append(
                build_error(
                    "Could not parse input.",
                    details=str(exc),
                    hint="Quote strings, e.g. \"'abc'\".",
                    source=source,
                )
            )
            continue
        rows.append((source, classify(validation, value)))
        logger.debug("Classified %r as %s", source, rows[-1][1]["type"])

    if args.json:
        report = {"results": [{"input": src, **result} for src, result in rows]}
        if errors:
            report["errors"] = errors
        print(json.dumps(report, indent=2))
    elif rows:
        render_table(Console(theme=VALUEKIND_THEME), rows)

    if errors:
        if not args.json:
            for payload in errors:
                for line in error_lines(payload):
                    print(line, file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()

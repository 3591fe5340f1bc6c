"""Command-line interface for Constellate.

Computes layout targets and prints them as a table or as JSON for an
external renderer to consume.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys

from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from constellate.core.config.loader import load_app_config
from constellate.core.config.models import AppConfig
from constellate.core.layouts.defaults import create_default_layout_registry
from constellate.core.layouts.errors import LayoutError
from constellate.core.layouts.models import LayoutTarget
from constellate.core.layouts.selector import LayoutSelector
from constellate.core.records.models import RankedRecord
from constellate.core.records.parsing import RecordParseError, load_records
from constellate.core.records.ranking import rank_by_net_worth, ranks_of
from constellate.core.utils.logging import configure_logging, configure_logging_from_config

console = Console()
logger = logging.getLogger(__name__)


def _load_config(path: str | None) -> AppConfig:
    return load_app_config(Path(path).resolve() if path else None)


def _build_selector(config: AppConfig, seed: int | None) -> LayoutSelector:
    settings = config.layouts
    if seed is not None:
        tetrahedron = settings.tetrahedron.model_copy(update={"seed": seed})
        settings = settings.model_copy(update={"tetrahedron": tetrahedron})
    return LayoutSelector(create_default_layout_registry(settings))


def _targets_as_json(targets: list[LayoutTarget], records: list[RankedRecord] | None) -> str:
    payload = []
    for i, target in enumerate(targets):
        entry: dict[str, object] = {
            "position": list(target.position),
            "rotation": list(target.rotation),
        }
        if records is not None:
            entry["name"] = records[i].name
            entry["rank"] = records[i].rank
            entry["tier"] = records[i].tier.value
        payload.append(entry)
    return json.dumps(payload)


def _targets_as_table(
    layout_id: str, targets: list[LayoutTarget], records: list[RankedRecord] | None
) -> Table:
    table = Table(title=f"{layout_id} layout ({len(targets)} targets)")
    table.add_column("#", justify="right")
    if records is not None:
        table.add_column("Name")
        table.add_column("Tier")
    for axis in ("x", "y", "z", "rx", "ry", "rz"):
        table.add_column(axis, justify="right")

    for i, target in enumerate(targets):
        row = [str(i)]
        if records is not None:
            row += [records[i].name, records[i].tier.value]
        row += [f"{value:.2f}" for value in (*target.position, *target.rotation)]
        table.add_row(*row)
    return table


def run_layouts(args: argparse.Namespace) -> int:
    """List available layout identifiers."""
    try:
        config = _load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]ERROR: Could not load config: {e}[/red]")
        return 1

    for layout_id in _build_selector(config, seed=None).available():
        console.print(layout_id)
    return 0


def run_generate(args: argparse.Namespace) -> int:
    """Generate and print targets for one layout.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    try:
        config = _load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        # ValidationError is a ValueError subclass
        console.print(f"[red]ERROR: Could not load config: {e}[/red]")
        return 1

    # stdout carries the JSON payload
    log_stream = sys.stderr if args.json else sys.stdout
    if args.log_level:
        configure_logging(level=args.log_level, stream=log_stream)
    else:
        configure_logging_from_config(config.logging, stream=log_stream)

    records: list[RankedRecord] | None = None
    if args.records:
        try:
            records = rank_by_net_worth(load_records(args.records))
        except (FileNotFoundError, RecordParseError, ValidationError) as e:
            console.print(f"[red]ERROR: Could not load records: {e}[/red]")
            return 1
        count = len(records)
        logger.debug(f"Loaded {count} records from {args.records}")
    else:
        count = args.count

    selector = _build_selector(config, args.seed)
    try:
        targets = selector.select(
            args.layout,
            count,
            ranks=ranks_of(records) if records is not None else None,
        )
    except LayoutError as e:
        console.print(f"[red]ERROR: {e}[/red]")
        return 1

    if args.json:
        sys.stdout.write(_targets_as_json(targets, records) + "\n")
    else:
        console.print(_targets_as_table(args.layout, targets, records))
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="constellate",
        description="Constellate - 3D layout targets for ranked records",
    )
    p.add_argument(
        "--config",
        default=None,
        help="Path to app config JSON/YAML (default: constellate.yaml if present)",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("layouts", help="List available layouts")

    gen = sub.add_parser("generate", help="Generate layout targets")
    gen.add_argument("--layout", required=True, help="Layout id (e.g. table, sphere, helix)")
    source = gen.add_mutually_exclusive_group(required=True)
    source.add_argument("--count", type=int, help="Number of records to place")
    source.add_argument("--records", help="Path to a CSV file of records")
    gen.add_argument("--seed", type=int, default=None, help="Seed for randomized layouts")
    gen.add_argument("--json", action="store_true", help="Print targets as JSON")
    gen.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )

    return p


def main(argv: list[str] | None = None) -> None:
    """Main entry point for CLI."""
    p = build_arg_parser()
    args = p.parse_args(argv)

    if args.cmd == "layouts":
        sys.exit(run_layouts(args))
    elif args.cmd == "generate":
        sys.exit(run_generate(args))


if __name__ == "__main__":
    main()

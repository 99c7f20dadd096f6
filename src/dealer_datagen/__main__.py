"""
CLI entry point for the dealer data generator.

Usage:
    python -m dealer_datagen generate
    python -m dealer_datagen generate --seed 42 --json
    python -m dealer_datagen generate --config config.json
    python -m dealer_datagen kpis sales-manager --seed 42
    python -m dealer_datagen summary
"""

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from dealer_datagen.config import GenerationConfig, load_config
from dealer_datagen.dataset import COLLECTION_NAMES, Dataset
from dealer_datagen.generators.master_generators import generate_dataset
from dealer_datagen.kpi import inventory_kpis, kpi_titles_for, order_kpis
from dealer_datagen.shared.exceptions import DealerDataGenException
from dealer_datagen.shared.logging_config import configure_logging
from dealer_datagen.shared.models import KPIRecord, UserRole
from dealer_datagen.views import finance_deals, open_repair_orders, total_gross

logger = logging.getLogger(__name__)


def _load(args: argparse.Namespace) -> GenerationConfig:
    config = load_config(args.config, required=args.config is not None)
    if args.seed is not None:
        config = config.with_seed(args.seed)
    return config


def _dump_kpis(kpis: list[KPIRecord]) -> str:
    return json.dumps([k.model_dump(mode="json") for k in kpis], indent=2)


def _print_kpi_lines(kpis: list[KPIRecord]) -> None:
    for kpi in kpis:
        unit = f" {kpi.unit}" if kpi.unit else ""
        change = f"{kpi.change_type.value} {kpi.change:+}"
        print(f"  {kpi.title:<24} {kpi.value}{unit} ({change})")


def cmd_generate(args: argparse.Namespace, config: GenerationConfig) -> int:
    """
    Generate a dataset and print its collection counts (or the full dataset as JSON).

    Returns:
        Exit code (0 for success)
    """
    dataset = generate_dataset(config)

    if args.json:
        payload = {
            name: [r.model_dump(mode="json") for r in dataset.get_collection(name)]
            for name in COLLECTION_NAMES
        }
        print(json.dumps(payload, indent=2))
        return 0

    print("\n=== Generated Dataset ===")
    print(f"  Seed:           {dataset.seed if dataset.seed is not None else 'random'}")
    print(f"  Reference time: {dataset.reference_time.isoformat()}")
    for name, count in dataset.counts().items():
        print(f"  {name}: {count:,}")
    print()
    return 0


def cmd_kpis(args: argparse.Namespace, config: GenerationConfig) -> int:
    """Print the KPI records for a dashboard role as JSON."""
    dataset = generate_dataset(config)
    kpis = dataset.kpis_for(args.role)
    if not kpis:
        logger.warning(f"No KPIs defined for role '{args.role}'")
    print(_dump_kpis(kpis))
    return 0


def cmd_summary(args: argparse.Namespace, config: GenerationConfig) -> int:
    """Print inventory and order KPIs computed from a generated dataset."""
    dataset: Dataset = generate_dataset(config)

    print("\n=== Inventory ===")
    _print_kpi_lines(inventory_kpis(dataset.vehicles))

    print("\n=== Orders ===")
    _print_kpi_lines(order_kpis(dataset.orders, dataset.reference_time))

    print("\n=== Sales & Service ===")
    print(f"  Total gross:          {total_gross(dataset.deals)}")
    print(f"  Finance/lease deals:  {len(finance_deals(dataset.deals))}")
    print(f"  Open repair orders:   {len(open_repair_orders(dataset.repair_orders))}")
    print()
    return 0


COMMANDS = {
    "generate": cmd_generate,
    "kpis": cmd_kpis,
    "summary": cmd_summary,
}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="Synthetic data generator for a dealership dashboard",
        prog="python -m dealer_datagen",
    )

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--config",
        default=None,
        help="Path to a JSON config file (default: ./config.json if present)",
    )
    common.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed; overrides the config file",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # ===== GENERATE SUBCOMMAND =====
    generate_parser = subparsers.add_parser(
        "generate", parents=[common], help="Generate a dataset and print counts"
    )
    generate_parser.add_argument(
        "--json",
        action="store_true",
        help="Print every collection as JSON instead of counts",
    )

    # ===== KPIS SUBCOMMAND =====
    kpis_parser = subparsers.add_parser(
        "kpis",
        parents=[common],
        help="Print KPI records for a dashboard role",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Roles:\n"
        + "\n".join(
            f"  {role.value:<16} {', '.join(kpi_titles_for(role))}" for role in UserRole
        ),
    )
    kpis_parser.add_argument("role", help="Dashboard role, e.g. sales-manager")

    # ===== SUMMARY SUBCOMMAND =====
    subparsers.add_parser(
        "summary",
        parents=[common],
        help="Print inventory and order KPIs derived from a dataset",
    )

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        sys.exit(1)

    return args


def main(argv: list[str] | None = None) -> int:
    """
    Main CLI entry point - routes to subcommands.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    args = parse_args(argv)

    try:
        config = _load(args)
    except (FileNotFoundError, ValidationError, DealerDataGenException) as e:
        print(f"ERROR: Could not load configuration: {e}", file=sys.stderr)
        return 1

    # Logs go to stderr so stdout stays parseable
    configure_logging(config.log_level, stream=sys.stderr)

    try:
        return COMMANDS[args.command](args, config)
    except DealerDataGenException as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

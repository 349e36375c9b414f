"""
Command line interface.

    synthdata futures --contract_length 3M --time_period 1D \\
        --date_range "2024-01-01 00:00:00|2024-06-01 00:00:00"
    synthdata equities --name ACME --date_range "..."
    synthdata config example.config.json

Every failure prints one line to stderr and exits with status 1.
"""

import argparse
import sys
from pathlib import Path
from typing import Any, Optional

from synthdata import __version__
from synthdata.config.defaults import get_default_config
from synthdata.config.loader import DEFAULT_CONFIG_FILE, ConfigLoader, DatasetConfig
from synthdata.engine import EngineReport, GenerationEngine
from synthdata.errors import InputError, SystemFailureError
from synthdata.logging import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    defaults = get_default_config()

    parser = argparse.ArgumentParser(
        prog="synthdata",
        description="Generates random market data for backtesting",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for reproducible output")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    parser.add_argument("--log-json", action="store_true",
                        help="Emit JSON log lines instead of console output")

    subparsers = parser.add_subparsers(dest="command", required=True)

    futures = subparsers.add_parser("futures", help="Generate a futures contract chain")
    futures.add_argument("--contract_length", default=defaults.futures.contract_length,
                         help="Contract length in months, e.g. 3M")
    futures.add_argument("--time_period", default=defaults.futures.time_period,
                         help="Bar period, e.g. 1D, 4H, 15m")
    futures.add_argument("--date_range", required=True,
                         help='"YYYY-MM-DD HH:MM:SS|YYYY-MM-DD HH:MM:SS"')
    futures.add_argument("--symbol", default=defaults.futures.symbol)
    futures.add_argument("--name", default="futures", help="Dataset name used in logs")
    futures.add_argument("--output", default=defaults.futures.output_template,
                         help="Output path template; {symbol}, {expiry}, {index} and {name} "
                              "give one file per contract, e.g. data_{symbol}_{expiry:%%Y%%m%%d}.csv")

    equities = subparsers.add_parser("equities", help="Generate an equities bar series")
    equities.add_argument("--name", required=True, help="Dataset name")
    equities.add_argument("--date_range", required=True,
                          help='"YYYY-MM-DD HH:MM:SS|YYYY-MM-DD HH:MM:SS"')
    equities.add_argument("--time_period", default=defaults.equities.time_period)
    equities.add_argument("--symbol", default=None)

    config = subparsers.add_parser("config", help="Generate every dataset in a config file")
    config.add_argument("path", nargs="?", type=Path, default=DEFAULT_CONFIG_FILE)
    config.add_argument("--keep-going", action="store_true",
                        help="Report failed datasets and continue with the rest")

    return parser


def dataset_from_args(args: argparse.Namespace) -> DatasetConfig:
    """Translate flags into the same dataset entry a config file would hold."""
    entry: dict[str, Any] = {
        "name": args.name,
        "dataset_type": args.command,
        "date_range": args.date_range,
        "time_period": args.time_period,
        "symbol": args.symbol,
    }
    if args.command == "futures":
        entry["contract_length"] = args.contract_length
        entry["params"] = {"futures": {"output_template": args.output}}

    return ConfigLoader.create().build_dataset(entry)


def run(args: argparse.Namespace) -> EngineReport:
    engine = GenerationEngine(seed=args.seed)

    if args.command == "config":
        datasets = ConfigLoader.create().load_datasets(args.path)
        return engine.run(datasets, fail_fast=not args.keep_going)

    dataset = dataset_from_args(args)
    # Futures templates are relative to the working directory
    output_dir = "." if args.command == "futures" else None
    return engine.run([dataset], output_dir=output_dir)


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(level=args.log_level, format_json=args.log_json)

    try:
        report = run(args)
    except (InputError, SystemFailureError) as e:
        logger.error("Generation aborted", error=str(e), error_type=type(e).__name__)
        print(f"error: {e}", file=sys.stderr)
        return 1

    for failure in report.failures:
        print(f"error: dataset {failure.dataset}: {failure.error}", file=sys.stderr)

    logger.info(
        "Generation finished",
        datasets=len(report.results),
        failures=len(report.failures),
        files=len(report.files)
    )
    return 0 if report.ok else 1


if __name__ == "__main__":
    sys.exit(main())

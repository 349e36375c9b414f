"""
Futures contract chain generator.

A chain is a sequence of overlapping contract windows: each window lasts
`contract_length` calendar months and the next one starts one calendar month
after the previous start. Every window gets its own bar series and price
state, written to a path rendered from the output template.
"""

from collections.abc import Iterator
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

import numpy as np

from synthdata.config.defaults import FuturesParams
from synthdata.config.loader import DatasetConfig
from synthdata.data.models import ContractWindow, DateRange
from synthdata.data.parsers import parse_contract_length, parse_time_period
from synthdata.delivery.csv_writer import CsvWriter
from synthdata.errors import ConfigError, InvalidTimePeriodError
from synthdata.logging.config import log_contract_generated
from synthdata.utils.time import add_months

from .base import GenerationResult, Generator


def schedule_contracts(
    date_range: DateRange,
    contract_length: int,
    symbol: str
) -> Iterator[ContractWindow]:
    """
    Enumerate contract windows over a date range.

    The first window starts at the range start; each next window starts one
    calendar month after the previous window's start. Every window ends
    `contract_length` months after its own start. Iteration stops at the first
    start that is not strictly before the range end.

    Args:
        date_range: Global generation window
        contract_length: Contract length in months
        symbol: Symbol stamped on every window

    Raises:
        DateOverflowError: If month arithmetic leaves the datetime range
    """
    start = date_range.start
    while start < date_range.end:
        yield ContractWindow(
            start=start,
            end=add_months(start, contract_length),
            symbol=symbol,
        )
        # Clamped days carry forward: Jan 31 -> Feb 29 -> Mar 29
        start = add_months(start, 1)


def render_output_path(
    template: str,
    name: str,
    symbol: str,
    expiry: datetime,
    index: int
) -> Path:
    """Fill `{name}`, `{symbol}`, `{expiry}` and `{index}` in an output template."""
    return Path(template.format(name=name, symbol=symbol, expiry=expiry, index=index))


class FuturesGenerator(Generator):
    """Generates a futures chain, writing each contract to its rendered output path."""

    dataset_type = "futures"

    def __init__(
        self,
        dataset: DatasetConfig,
        output_dir: Union[str, Path] = ".",
        rng: Optional[np.random.Generator] = None
    ):
        super().__init__(dataset, output_dir, rng)
        settings = dataset.section("futures")

        self.contract_length = parse_contract_length(
            dataset.contract_length if dataset.contract_length is not None
            else settings.get("contract_length", FuturesParams.contract_length)
        )
        self.time_period = parse_time_period(
            dataset.time_period or settings.get("time_period", FuturesParams.time_period)
        )
        if self.time_period.amount == 0:
            raise InvalidTimePeriodError(
                f"Bar period must be positive, got {self.time_period}",
                context={"dataset": dataset.name}
            )
        self.symbol = dataset.symbol or settings.get("symbol", FuturesParams.symbol)
        self.output_template = settings.get("output_template", FuturesParams.output_template)

        # Validate placeholders now rather than after the first contract
        try:
            render_output_path(self.output_template, dataset.name, self.symbol,
                               dataset.date_range.end, 0)
        except (AttributeError, IndexError, KeyError, TypeError, ValueError) as e:
            raise ConfigError(
                f"Invalid output template {self.output_template!r}: {e}",
                context={"dataset": dataset.name}
            ) from e

    def contracts(self) -> Iterator[ContractWindow]:
        """Contract windows for this dataset."""
        return schedule_contracts(self.dataset.date_range, self.contract_length, self.symbol)

    def generate(self) -> GenerationResult:
        result = GenerationResult(dataset=self.dataset.name)
        seen: set[Path] = set()
        warned = False

        for index, window in enumerate(self.contracts()):
            path = self.output_dir / render_output_path(
                self.output_template, self.dataset.name, window.symbol, window.end, index
            )
            if path in seen and not warned:
                self.logger.warning(
                    "Output template does not vary per contract, later contracts overwrite",
                    output_path=str(path),
                    output_template=self.output_template
                )
                warned = True
            seen.add(path)

            bars = self.synthesizer.bars(
                self.time_period, window.start, window.end, window.symbol, expiry=window.end
            )
            rows = CsvWriter(path, create_dirs=self.create_dirs).write(bars)

            log_contract_generated(self.logger, window.symbol, window.start, window.end,
                                   rows, str(path))
            if path not in result.files:
                result.files.append(path)
            result.rows += rows

        self.logger.info(
            "dataset_completed",
            dataset_type=self.dataset_type,
            files=len(result.files),
            rows=result.rows
        )
        return result

"""Equities bar series generator."""

from pathlib import Path
from typing import Optional, Union

import numpy as np

from synthdata.config.defaults import EquitiesParams
from synthdata.config.loader import DatasetConfig
from synthdata.data.parsers import parse_time_period
from synthdata.delivery.csv_writer import CsvWriter
from synthdata.errors import InvalidTimePeriodError

from .base import GenerationResult, Generator


class EquitiesGenerator(Generator):
    """
    Generates a single bar series per dataset.

    Walks the date range one bar period at a time (daily unless configured)
    and writes `<output_dir>/<name>.csv`. Equities never expire, so the
    expiry column carries the range end.
    """

    dataset_type = "equities"

    def __init__(
        self,
        dataset: DatasetConfig,
        output_dir: Union[str, Path] = ".",
        rng: Optional[np.random.Generator] = None
    ):
        super().__init__(dataset, output_dir, rng)
        settings = dataset.section("equities")

        self.time_period = parse_time_period(
            dataset.time_period or settings.get("time_period", EquitiesParams.time_period)
        )
        if self.time_period.amount == 0:
            raise InvalidTimePeriodError(
                f"Bar period must be positive, got {self.time_period}",
                context={"dataset": dataset.name}
            )
        self.symbol = dataset.symbol or dataset.name.upper()
        self.output_path = self.output_dir / f"{dataset.name}.csv"

    def generate(self) -> GenerationResult:
        date_range = self.dataset.date_range
        bars = self.synthesizer.bars(
            self.time_period, date_range.start, date_range.end, self.symbol
        )
        rows = CsvWriter(self.output_path, create_dirs=self.create_dirs).write(bars)

        self.logger.info(
            "dataset_completed",
            dataset_type=self.dataset_type,
            symbol=self.symbol,
            output_path=str(self.output_path),
            rows=rows
        )
        return GenerationResult(dataset=self.dataset.name, files=[self.output_path], rows=rows)

"""
Dataset generation engine.

Single entry point for both front ends: the config-file path and the
command-line flags path build DatasetConfig objects and hand them here.
The engine dispatches on dataset type, gives every dataset its own
generator and random source, and decides between fail-fast and
per-dataset isolation.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

import numpy as np

from synthdata.config.loader import DatasetConfig
from synthdata.errors import InputError, SystemFailureError, UnknownDatasetTypeError
from synthdata.generators import GENERATORS, GenerationResult, Generator
from synthdata.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class DatasetFailure:
    """A dataset that could not be generated."""
    dataset: str
    error: Exception


@dataclass
class EngineReport:
    """Summary of one engine run."""
    results: list[GenerationResult] = field(default_factory=list)
    failures: list[DatasetFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def files(self) -> list[Path]:
        return [path for result in self.results for path in result.files]


class GenerationEngine:
    """Dispatches dataset configs to their generators."""

    def __init__(
        self,
        generators: Optional[dict[str, type[Generator]]] = None,
        seed: Optional[int] = None
    ):
        self.generators = dict(GENERATORS if generators is None else generators)
        self.seed = seed

    def make_rng(self, index: int) -> np.random.Generator:
        """Independent random source for the index-th dataset."""
        if self.seed is None:
            return np.random.default_rng()
        return np.random.default_rng(self.seed + index)

    def resolve_output_dir(
        self,
        dataset: DatasetConfig,
        output_dir: Optional[Union[str, Path]] = None
    ) -> Path:
        """Explicit directory if given, otherwise `<data_dir>/<dataset name>`."""
        if output_dir is not None:
            return Path(output_dir)
        data_dir = dataset.section("output").get("data_dir", "data")
        return Path(data_dir) / dataset.name

    def create_generator(
        self,
        dataset: DatasetConfig,
        index: int = 0,
        output_dir: Optional[Union[str, Path]] = None
    ) -> Generator:
        """
        Build the generator for a dataset.

        Dataset types are matched case-insensitively.

        Raises:
            UnknownDatasetTypeError: If no generator handles the type
            InputError: If the dataset settings are malformed
        """
        generator_cls = self.generators.get(dataset.dataset_type.lower())
        if generator_cls is None:
            raise UnknownDatasetTypeError(
                f"Invalid dataset type {dataset.dataset_type!r} for dataset {dataset.name!r}; "
                f"expected one of {sorted(self.generators)}",
                dataset_type=dataset.dataset_type,
                context={"dataset": dataset.name}
            )

        return generator_cls(
            dataset,
            output_dir=self.resolve_output_dir(dataset, output_dir),
            rng=self.make_rng(index),
        )

    def run(
        self,
        datasets: list[DatasetConfig],
        output_dir: Optional[Union[str, Path]] = None,
        fail_fast: bool = True
    ) -> EngineReport:
        """
        Generate every dataset.

        All generators are built before any file is written, so malformed
        input in any dataset is reported up front.

        Args:
            datasets: Dataset configs in generation order
            output_dir: Directory for every dataset, defaults to per-dataset
                directories under the configured data dir
            fail_fast: Raise on the first error instead of recording it and
                moving on to the next dataset

        Returns:
            Report of results and recorded failures

        Raises:
            InputError: On malformed input when fail_fast is set
            SystemFailureError: On I/O or date overflow when fail_fast is set
        """
        report = EngineReport()
        generators = []

        for index, dataset in enumerate(datasets):
            try:
                generators.append(self.create_generator(dataset, index, output_dir))
            except InputError as e:
                if fail_fast:
                    raise
                logger.error("Dataset rejected", dataset=dataset.name, error=str(e))
                report.failures.append(DatasetFailure(dataset=dataset.name, error=e))

        for generator in generators:
            name = generator.dataset.name
            logger.info(
                "Generating dataset",
                dataset=name,
                dataset_type=generator.dataset_type,
                output_dir=str(generator.output_dir)
            )
            try:
                report.results.append(generator.generate())
            except (InputError, SystemFailureError) as e:
                if fail_fast:
                    raise
                logger.error("Dataset generation failed", dataset=name, error=str(e))
                report.failures.append(DatasetFailure(dataset=name, error=e))

        return report

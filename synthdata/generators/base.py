"""Base classes for dataset generators."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

import numpy as np

from synthdata.config.defaults import SynthesisParams
from synthdata.config.loader import DatasetConfig
from synthdata.logging.config import get_generator_logger

from .synthesizer import BarSynthesizer


@dataclass
class GenerationResult:
    """Outcome of generating one dataset."""
    dataset: str
    files: list[Path] = field(default_factory=list)
    rows: int = 0


class Generator(ABC):
    """
    Base class for dataset generators.

    Subclasses resolve and parse every dataset setting in their constructor,
    so malformed input is reported before any output file is touched.
    """

    dataset_type: str = ""

    def __init__(
        self,
        dataset: DatasetConfig,
        output_dir: Union[str, Path] = ".",
        rng: Optional[np.random.Generator] = None
    ):
        self.dataset = dataset
        self.output_dir = Path(output_dir)
        self.create_dirs = bool(dataset.section("output").get("create_dirs", True))
        self.synthesizer = BarSynthesizer(
            params=SynthesisParams(**dataset.section("synthesis")),
            rng=rng,
        )
        self.logger = get_generator_logger(
            f"synthdata.generators.{self.dataset_type}", dataset.name
        )

    @abstractmethod
    def generate(self) -> GenerationResult:
        """
        Synthesize the dataset and write its files.

        Returns:
            Files and row count written

        Raises:
            PersistenceError: If an output file cannot be written
        """
        pass

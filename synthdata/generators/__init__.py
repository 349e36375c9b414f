"""
Dataset generators.

Exposes the registry used by the engine to dispatch on dataset type.
"""
from .base import GenerationResult, Generator
from .equities import EquitiesGenerator
from .futures import FuturesGenerator, schedule_contracts

GENERATORS: dict[str, type[Generator]] = {
    FuturesGenerator.dataset_type: FuturesGenerator,
    EquitiesGenerator.dataset_type: EquitiesGenerator,
}

__all__ = [
    "GENERATORS",
    "GenerationResult",
    "Generator",
    "EquitiesGenerator",
    "FuturesGenerator",
    "schedule_contracts",
]

"""Dataset configuration loader with 3-tier parameter precedence."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from synthdata.data.models import DateRange
from synthdata.data.parsers import parse_date_range
from synthdata.errors import ConfigError, InputError
from synthdata.utils.time import parse_timestamp

from .defaults import DefaultConfig, get_default_config
from .validation import ConfigValidator

DEFAULT_CONFIG_FILE = Path("example.config.json")


@dataclass(frozen=True)
class DatasetConfig:
    """One dataset entry resolved against the defaults."""

    name: str
    dataset_type: str
    date_range: DateRange
    time_period: Optional[str] = None
    contract_length: Optional[Union[str, int]] = None
    symbol: Optional[str] = None
    settings: dict[str, Any] = field(default_factory=dict)

    def section(self, name: str) -> dict[str, Any]:
        """Merged settings section, e.g. "synthesis" or "futures"."""
        return self.settings.get(name, {})  # type: ignore[no-any-return]


@dataclass(frozen=True)
class ConfigLoader:
    """Manages dataset configuration loading with 3-tier precedence."""

    defaults: DefaultConfig

    @classmethod
    def create(cls) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        return cls(defaults=get_default_config())

    def load_document(self, path: Path) -> dict[str, Any]:
        """Read a JSON or YAML config document."""
        try:
            with open(path) as f:
                if path.suffix.lower() in (".yaml", ".yml"):
                    document = yaml.safe_load(f)
                else:
                    document = json.load(f)
        except OSError as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigError(f"Config file {path} is not well-formed: {e}") from e

        if not isinstance(document, dict):
            raise ConfigError(f"Config file {path} must contain a mapping at the top level")

        return document

    def load_datasets(self, path: Optional[Path] = None) -> list[DatasetConfig]:
        """
        Load and validate every dataset entry of a config file.

        Raises:
            ConfigError: If the file is unreadable or any entry is invalid
        """
        path = Path(path) if path is not None else DEFAULT_CONFIG_FILE
        document = self.load_document(path)

        errors = ConfigValidator.validate_config(document)
        if errors:
            details = "; ".join(f"{e.field}: {e.message}" for e in errors)
            raise ConfigError(f"Invalid config file {path}: {details}", errors=errors)

        file_defaults = document.get("defaults") or {}
        return [
            self.build_dataset(entry, file_defaults)
            for entry in document["datasets"]
        ]

    def build_dataset(
        self,
        entry: dict[str, Any],
        file_defaults: Optional[dict[str, Any]] = None
    ) -> DatasetConfig:
        """Resolve one raw dataset entry into a DatasetConfig."""
        try:
            date_range = self.parse_daterange(entry.get("daterange", entry.get("date_range")))
        except InputError as e:
            e.context.setdefault("dataset", entry.get("name"))
            raise

        return DatasetConfig(
            name=entry["name"],
            dataset_type=entry["dataset_type"],
            date_range=date_range,
            time_period=entry.get("time_period"),
            contract_length=entry.get("contract_length"),
            symbol=entry.get("symbol"),
            settings=self.merge_config(file_defaults, entry.get("params")),
        )

    @staticmethod
    def parse_daterange(value: Any) -> DateRange:
        """Accept either `"<start>|<end>"` or `{"from": ..., "to": ...}`."""
        if isinstance(value, dict):
            try:
                start = parse_timestamp(str(value["from"]))
                end = parse_timestamp(str(value["to"]))
            except (KeyError, ValueError) as e:
                raise ConfigError(f"Invalid daterange mapping {value!r}: {e}") from e
            return DateRange(start=start, end=end)
        if isinstance(value, str):
            return parse_date_range(value)
        raise ConfigError(f"Missing or unsupported daterange: {value!r}")

    def merge_config(
        self,
        file_defaults: Optional[dict[str, Any]] = None,
        dataset_overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Per-dataset overrides (highest priority)
        2. File-level defaults block
        3. Built-in defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        if file_defaults:
            config = self._deep_merge(config, file_defaults)

        if dataset_overrides:
            config = self._deep_merge(config, dataset_overrides)

        return config

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

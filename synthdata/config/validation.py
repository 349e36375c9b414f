"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

from .defaults import SynthesisParams

KNOWN_SECTIONS = ("synthesis", "futures", "equities", "output")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates dataset configuration documents."""

    @staticmethod
    def validate_synthesis_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate random walk parameters."""
        errors = []
        known = SynthesisParams.__dataclass_fields__

        for name, value in params.items():
            if name not in known:
                errors.append(ValidationError(
                    field=f"synthesis.{name}",
                    message="Unknown synthesis parameter",
                    value=value
                ))
            elif isinstance(value, bool) or not isinstance(value, (int, float)):
                errors.append(ValidationError(
                    field=f"synthesis.{name}",
                    message="Must be a number",
                    value=value
                ))
            elif value < 0:
                errors.append(ValidationError(
                    field=f"synthesis.{name}",
                    message="Must be a non-negative number",
                    value=value
                ))

        # Validate baseline_price
        if "baseline_price" in params:
            value = params["baseline_price"]
            if isinstance(value, (int, float)) and not isinstance(value, bool) and value <= 0:
                errors.append(ValidationError(
                    field="synthesis.baseline_price",
                    message="Must be a positive number",
                    value=value
                ))

        # Validate ranges
        for low, high in (("volume_min", "volume_max"), ("quote_size_min", "quote_size_max")):
            lo = params.get(low, getattr(SynthesisParams, low))
            hi = params.get(high, getattr(SynthesisParams, high))
            if isinstance(lo, (int, float)) and isinstance(hi, (int, float)) and lo >= hi:
                errors.append(ValidationError(
                    field=f"synthesis.{low}",
                    message=f"Must be less than {high}",
                    value=lo
                ))

        return errors

    @staticmethod
    def validate_params(params: Any, prefix: str) -> list[ValidationError]:
        """Validate a defaults or per-dataset params block."""
        if not isinstance(params, dict):
            return [ValidationError(field=prefix, message="Must be a mapping", value=params)]

        errors = []
        for section, value in params.items():
            if section not in KNOWN_SECTIONS:
                errors.append(ValidationError(
                    field=f"{prefix}.{section}",
                    message="Unknown configuration section",
                    value=value
                ))
            elif not isinstance(value, dict):
                errors.append(ValidationError(
                    field=f"{prefix}.{section}",
                    message="Must be a mapping",
                    value=value
                ))
            elif section == "synthesis":
                for error in ConfigValidator.validate_synthesis_params(value):
                    errors.append(ValidationError(
                        field=f"{prefix}.{error.field}",
                        message=error.message,
                        value=error.value
                    ))

        return errors

    @staticmethod
    def validate_dataset(entry: Any, index: int) -> list[ValidationError]:
        """Validate one dataset entry."""
        prefix = f"datasets[{index}]"
        if not isinstance(entry, dict):
            return [ValidationError(field=prefix, message="Must be a mapping", value=entry)]

        errors = []

        # Validate name
        name = entry.get("name")
        if not isinstance(name, str) or not name.strip():
            errors.append(ValidationError(
                field=f"{prefix}.name",
                message="Must be a non-empty string",
                value=name
            ))
        elif "/" in name or "\\" in name or name in (".", ".."):
            errors.append(ValidationError(
                field=f"{prefix}.name",
                message="Must be usable as a directory name",
                value=name
            ))

        # Validate dataset_type
        dataset_type = entry.get("dataset_type")
        if not isinstance(dataset_type, str):
            errors.append(ValidationError(
                field=f"{prefix}.dataset_type",
                message="Must be a string",
                value=dataset_type
            ))

        # Validate daterange presence
        if "daterange" not in entry and "date_range" not in entry:
            errors.append(ValidationError(
                field=f"{prefix}.daterange",
                message="Is required",
                value=None
            ))

        # Validate optional strings
        for key in ("time_period", "symbol"):
            if key in entry and not isinstance(entry[key], str):
                errors.append(ValidationError(
                    field=f"{prefix}.{key}",
                    message="Must be a string",
                    value=entry[key]
                ))

        if "params" in entry:
            errors.extend(ConfigValidator.validate_params(entry["params"], f"{prefix}.params"))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration document."""
        errors = []

        datasets = config.get("datasets")
        if not isinstance(datasets, list):
            return [ValidationError(
                field="datasets",
                message="Must be a list of dataset entries",
                value=datasets
            )]

        if "defaults" in config and config["defaults"] is not None:
            errors.extend(ConfigValidator.validate_params(config["defaults"], "defaults"))

        for index, entry in enumerate(datasets):
            errors.extend(ConfigValidator.validate_dataset(entry, index))

        return errors

"""
Configuration models for the dealer data generator.

These models define the structure and validation of the config.json file
that sizes and seeds a generated dataset.
"""

import json
import logging
from datetime import UTC, datetime
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from dealer_datagen.shared.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class VolumeConfig(BaseModel):
    """Number of records generated per entity collection."""

    stores: int = Field(3, ge=0, description="Number of stores to generate")
    employees: int = Field(25, ge=0, description="Number of employees to generate")
    customers: int = Field(150, ge=0, description="Number of customers to generate")
    vehicles: int = Field(75, ge=0, description="Number of vehicles to generate")
    deals: int = Field(120, ge=0, description="Number of deals to generate")
    appointments: int = Field(
        60, ge=0, description="Number of service appointments to generate"
    )
    repair_orders: int = Field(
        80, ge=0, description="Number of repair orders to generate"
    )
    orders: int = Field(120, ge=0, description="Number of orders to generate")


class GenerationConfig(BaseModel):
    """Main configuration model for the dealer data generator."""

    seed: int | None = Field(
        None,
        ge=0,
        le=2**32 - 1,
        description="Random seed for reproducible generation (None for OS entropy)",
    )
    reference_time: datetime | None = Field(
        None,
        description=(
            "Instant treated as 'now' when placing dates "
            "(None uses the wall clock at generation time)"
        ),
    )
    volume: VolumeConfig = Field(
        default_factory=VolumeConfig, description="Collection sizes"
    )
    log_level: str = Field("INFO", description="Logging level for the CLI")

    @field_validator("reference_time")
    @classmethod
    def assume_utc(cls, v: datetime | None) -> datetime | None:
        """Naive reference times are interpreted as UTC."""
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    def resolve_reference_time(self) -> datetime:
        """Return the configured reference time, or the current UTC time."""
        return self.reference_time or datetime.now(UTC)

    def with_seed(self, seed: int | None) -> "GenerationConfig":
        """
        Return a copy with ``seed`` replaced.

        Raises:
            pydantic.ValidationError: If the seed is out of range
        """
        return type(self).model_validate({**self.model_dump(), "seed": seed})

    @classmethod
    def from_file(cls, file_path: str | Path) -> "GenerationConfig":
        """
        Load configuration from a JSON file.

        Args:
            file_path: Path to the configuration JSON file

        Returns:
            GenerationConfig instance

        Raises:
            FileNotFoundError: If the file doesn't exist
            ConfigurationError: If the file is not valid JSON
            pydantic.ValidationError: If the JSON doesn't match the schema
        """
        path = Path(file_path)

        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {file_path}")

        try:
            with path.open("r") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError("Invalid JSON", file_path=path, original_error=e)

        logger.debug(f"Loaded configuration from {path}")
        return cls(**data)

    def to_file(self, file_path: str | Path) -> None:
        """
        Save configuration to a JSON file.

        Args:
            file_path: Path where to save the configuration file
        """
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with path.open("w") as f:
            json.dump(self.model_dump(mode="json"), f, indent=2)

# src/config/settings.py — v1
"""Typed configuration loaded from .env via pydantic-settings.

Holds the algorithm choice, random seed, sampling parameters, file adapter
defaults and logging configuration. Field names map to upper-cased
environment variables (e.g. SAMPLING_EPSILON=0.1).
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gncommunities.core.models import SamplingParams


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Algorithm ===
    algorithm: Literal["gn", "gn-incremental", "bsa"] = "gn"
    max_iterations: int | None = None
    random_seed: int | None = 42

    # === Betweenness sampling ===
    sampling_epsilon: float = 0.2
    sampling_delta: float = 0.3
    sampling_c: float = 1.0
    sampling_vertex_diameter: int | None = None
    sampling_diameter_samples: int = 10
    sampling_retry_budget: int = 100

    # === Input / output ===
    input_delimiter: str = "\t"
    output_prefix: str = "out"

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "text"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 30

    # --- Validators ---

    @field_validator(
        "max_iterations", "sampling_diameter_samples", "sampling_retry_budget",
    )
    @classmethod
    def validate_positive(cls, v: int | None, info) -> int | None:  # noqa: N805
        if v is not None and v < 1:
            raise ValueError(f"{info.field_name} must be >= 1")
        return v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Collect every sampling parameter problem into one error."""
        errors: list[str] = []

        if not 0.0 < self.sampling_epsilon < 1.0:
            errors.append("SAMPLING_EPSILON must be in (0, 1)")

        if not 0.0 < self.sampling_delta < 1.0:
            errors.append("SAMPLING_DELTA must be in (0, 1)")

        if self.sampling_c <= 0:
            errors.append("SAMPLING_C must be positive")

        if (
            self.sampling_vertex_diameter is not None
            and self.sampling_vertex_diameter <= 2
        ):
            errors.append("SAMPLING_VERTEX_DIAMETER must be greater than 2")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self

    # --- Helpers ---

    def sampling_params(self) -> SamplingParams:
        """Sampling parameters for the bsa backend."""
        return SamplingParams(
            epsilon=self.sampling_epsilon,
            delta=self.sampling_delta,
            c=self.sampling_c,
            vertex_diameter=self.sampling_vertex_diameter,
            diameter_samples=self.sampling_diameter_samples,
            retry_budget=self.sampling_retry_budget,
        )


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Args:
        **overrides: Field-level overrides (CLI flags, tests).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]

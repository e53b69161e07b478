"""Validator bounds and app-wide configuration."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

MIN_YEARS = 1
MAX_YEARS = 50

DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://127.0.0.1:5173"


class ValidationLimits(BaseModel):
    """Inclusive bounds for the investment term."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    min_years: int = Field(MIN_YEARS, ge=1)
    max_years: int = Field(MAX_YEARS, ge=1)

    @model_validator(mode="after")
    def ensure_ordered(self) -> "ValidationLimits":
        if self.max_years < self.min_years:
            raise ValueError("max_years must be greater than or equal to min_years")
        return self


DEFAULT_LIMITS = ValidationLimits()


class SimulatorConfig(BaseSettings):
    """Settings read from SIMULATOR_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="SIMULATOR_", extra="ignore")

    min_years: int = Field(default=MIN_YEARS, description="Shortest accepted term")
    max_years: int = Field(default=MAX_YEARS, description="Longest accepted term")
    cors_origins: str = Field(
        default=DEFAULT_CORS_ORIGINS,
        description="Comma separated origins allowed to call /api",
    )
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.upper()

    @model_validator(mode="after")
    def ensure_limits(self) -> "SimulatorConfig":
        ValidationLimits(min_years=self.min_years, max_years=self.max_years)
        return self

    @property
    def limits(self) -> ValidationLimits:
        return ValidationLimits(min_years=self.min_years, max_years=self.max_years)

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

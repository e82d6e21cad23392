"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Variables are read with the WORKFORCE_ prefix
(e.g. WORKFORCE_REASSIGNMENT_DEADLINE_HOURS=48).
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from workforce.domain.enums import Priority

_TELEMETRY_EXPORTERS = ("console", "otlp", "none")


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    Every field has a default; validate_lifecycle_and_telemetry rejects
    values that would make the task lifecycle or tracing misbehave.
    """

    # App
    app_name: str = "workforce-mgmt"
    app_version: str = "1.0.0"
    debug: bool = False

    # Task lifecycle
    reassignment_deadline_hours: int = 24
    reassignment_description: str = "Task assigned by reference"
    created_task_description: str = "Task created via API"
    default_priority: Priority = Priority.MEDIUM
    # When False, update_task accepts any status change (open setter).
    enforce_status_transitions: bool = False

    # OpenTelemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_prefix="WORKFORCE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_lifecycle_and_telemetry(self) -> "Settings":
        """Validate lifecycle offsets and telemetry exporter settings.

        - reassignment_deadline_hours must be positive.
        - telemetry_exporter must be console, otlp or none; otlp needs an endpoint.
        - telemetry_sample_rate must be within 0.0-1.0.
        """
        if self.reassignment_deadline_hours <= 0:
            raise ValueError(
                "reassignment_deadline_hours must be positive, "
                f"got {self.reassignment_deadline_hours}"
            )
        if self.telemetry_exporter not in _TELEMETRY_EXPORTERS:
            raise ValueError(
                f"Invalid telemetry_exporter '{self.telemetry_exporter}'. "
                f"Must be one of: {', '.join(_TELEMETRY_EXPORTERS)}"
            )
        if self.telemetry_exporter == "otlp" and not self.telemetry_otlp_endpoint:
            raise ValueError(
                "telemetry_otlp_endpoint is required when telemetry_exporter is 'otlp'. "
                "Set WORKFORCE_TELEMETRY_OTLP_ENDPOINT (e.g. http://localhost:4317)."
            )
        if not 0.0 <= self.telemetry_sample_rate <= 1.0:
            raise ValueError("telemetry_sample_rate must be between 0.0 and 1.0")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()

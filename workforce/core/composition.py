"""Composition root.

Builds task services from infrastructure implementations and configures
logging and tracing. No business logic here; callers (a web layer, a job,
a test) depend on the services, not on the in-memory stores directly.
"""

from __future__ import annotations

from dataclasses import dataclass

from workforce.application.use_cases.tasks import TaskHistoryService, TaskService
from workforce.core.config import Settings, get_settings
from workforce.core.reference_locks import ReferenceLockRegistry
from workforce.infrastructure.persistence.repositories import (
    InMemoryTaskActivityRepository,
    InMemoryTaskRepository,
)
from workforce.shared.telemetry import (
    TelemetryConfig,
    get_logger,
    set_telemetry,
    setup_logging,
)

logger = get_logger(__name__)


@dataclass
class TaskServices:
    """Services sharing one task store, activity store and lock registry."""

    tasks: TaskService
    history: TaskHistoryService


def configure_observability(settings: Settings | None = None) -> TelemetryConfig | None:
    """Set up logging, then tracing when telemetry_enabled. Call once at startup."""
    settings = settings or get_settings()
    setup_logging(settings)
    if not settings.telemetry_enabled:
        return None
    telemetry = TelemetryConfig(
        service_name=settings.app_name,
        service_version=settings.app_version,
        enabled=True,
        environment=settings.telemetry_environment,
    )
    telemetry.setup_telemetry(
        exporter_type=settings.telemetry_exporter,
        otlp_endpoint=settings.telemetry_otlp_endpoint,
        sample_rate=settings.telemetry_sample_rate,
    )
    telemetry.instrument_logging()
    set_telemetry(telemetry)
    logger.info("Telemetry initialized")
    return telemetry


def build_task_services(
    settings: Settings | None = None,
    task_repo: InMemoryTaskRepository | None = None,
    activity_repo: InMemoryTaskActivityRepository | None = None,
) -> TaskServices:
    """Wire TaskService and TaskHistoryService over shared in-memory stores."""
    settings = settings or get_settings()
    task_repo = task_repo if task_repo is not None else InMemoryTaskRepository()
    activity_repo = (
        activity_repo if activity_repo is not None else InMemoryTaskActivityRepository()
    )
    services = TaskServices(
        tasks=TaskService(
            task_repo,
            activity_repo=activity_repo,
            settings=settings,
            locks=ReferenceLockRegistry(),
        ),
        history=TaskHistoryService(task_repo, activity_repo),
    )
    logger.info(
        "Task services ready (enforce_status_transitions=%s)",
        settings.enforce_status_transitions,
    )
    return services

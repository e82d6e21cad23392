"""Application ports (Protocols) implemented by infrastructure."""

from workforce.application.interfaces.repositories import (
    ITaskActivityRepository,
    ITaskRepository,
)

__all__ = ["ITaskActivityRepository", "ITaskRepository"]

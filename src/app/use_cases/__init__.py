"""
Use Cases

Organized into domain folders:
- sessions/: Session lifecycle
- usage/: Device and usage tracking
- retention/: Scheduled retention sweeps
- audit/: Unified audit feed and log recording

Import from subdirectories for better organization.
"""

from .sessions import SessionLifecycleUseCase
from .usage import UsageTrackingUseCase
from .retention import RetentionSweepUseCase
from .audit import QueryLogsUseCase, RecordLogUseCase

__all__ = [
    "SessionLifecycleUseCase",
    "UsageTrackingUseCase",
    "RetentionSweepUseCase",
    "QueryLogsUseCase",
    "RecordLogUseCase",
]

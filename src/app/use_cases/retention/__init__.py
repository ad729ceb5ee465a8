"""
Retention Use Cases

Scheduled cleanup of sessions, usage logs and devices.
"""

from .retention_sweep_use_case import RetentionSweepUseCase, subtract_months

__all__ = [
    "RetentionSweepUseCase",
    "subtract_months",
]

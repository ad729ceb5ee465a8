"""
Usage Tracking Use Cases

Device sightings and bandwidth usage per session.
"""

from .usage_tracking_use_case import UsageTrackingUseCase

__all__ = [
    "UsageTrackingUseCase",
]

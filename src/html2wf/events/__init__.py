"""Event system: bus and event types for conversion progress."""

from html2wf.events.bus import EventBus
from html2wf.events.types import (
    ConversionCompleted,
    ConversionFailed,
    ConversionStarted,
    ProgressUpdated,
)

__all__ = [
    "EventBus",
    "ConversionCompleted",
    "ConversionFailed",
    "ConversionStarted",
    "ProgressUpdated",
]

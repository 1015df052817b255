"""Event types emitted during a conversion run."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ConversionStarted:
    prefix: str


@dataclass(frozen=True)
class ProgressUpdated:
    """A named stage was reached; ``progress`` is a percentage (0-100)."""

    status: str
    progress: int


@dataclass(frozen=True)
class ConversionCompleted:
    element_count: int
    rule_count: int
    class_count: int


@dataclass(frozen=True)
class ConversionFailed:
    error: str

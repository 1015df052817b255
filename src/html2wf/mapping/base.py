"""Base protocol for element mappers."""

from __future__ import annotations

from typing import Any, Protocol

from html2wf.model.result import ConversionResult


class ElementMapper(Protocol):
    """Turns a resolved conversion into target-platform elements."""

    def build(self, result: ConversionResult) -> Any: ...

"""Conversion orchestrator: markup + stylesheet -> resolved, renamed elements."""

from __future__ import annotations

import logging

from html2wf.cascade.engine import CascadeEngine
from html2wf.config import ConversionConfig
from html2wf.events import types as events
from html2wf.events.bus import EventBus
from html2wf.mapping.base import ElementMapper
from html2wf.mapping.dict_mapper import DictElementMapper
from html2wf.markup.parser import parse_markup
from html2wf.model.element import ParsedDocument
from html2wf.model.result import ConversionResult
from html2wf.naming.registry import ClassRegistry
from html2wf.naming.rewriter import SelectorRewriter
from html2wf.stylesheet.errors import StylesheetParseError
from html2wf.stylesheet.parser import parse_stylesheet

log = logging.getLogger("html2wf.converter")


class ConversionError(Exception):
    """Raised when the element mapper fails on an otherwise resolved conversion."""


def pre_register_classes(document: ParsedDocument, registry: ClassRegistry) -> None:
    """Register every markup class in document order, before any selector is rewritten."""
    for element in document.walk():
        registry.generate_all(element.classes)


class Converter:
    """Sequence one conversion run.

    Every call to :meth:`convert` or :meth:`convert_document` builds its own
    :class:`ClassRegistry`, so runs never see each other's names and a single
    Converter can be reused.  Progress is reported on ``event_bus``.
    """

    def __init__(
        self,
        config: ConversionConfig | None = None,
        *,
        mapper: ElementMapper | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self.config = config or ConversionConfig()
        self.mapper = mapper or DictElementMapper(
            include_inline_styles=self.config.include_inline_styles
        )
        self.event_bus = event_bus or EventBus()

    def _progress(self, status: str, progress: int) -> None:
        self.event_bus.emit(events.ProgressUpdated(status=status, progress=progress))

    def convert(self, markup: str, stylesheet: str = "") -> ConversionResult:
        """Parse *markup* and convert it against *stylesheet*."""
        self.event_bus.emit(events.ConversionStarted(prefix=self.config.prefix))
        self._progress("Initializing conversion", 0)
        self._progress("Parsing markup", 10)
        document = parse_markup(markup)
        return self._run(document, stylesheet)

    def convert_document(self, document: ParsedDocument, stylesheet: str = "") -> ConversionResult:
        """Convert an already-built element tree against *stylesheet*."""
        self.event_bus.emit(events.ConversionStarted(prefix=self.config.prefix))
        self._progress("Initializing conversion", 0)
        return self._run(document, stylesheet)

    def _run(self, document: ParsedDocument, stylesheet: str) -> ConversionResult:
        try:
            result = self._resolve(document, stylesheet)
        except (StylesheetParseError, ConversionError) as exc:
            log.error("Conversion failed: %s", exc)
            self._progress(f"Error: {exc}", 0)
            self.event_bus.emit(events.ConversionFailed(error=str(exc)))
            raise

        self._progress("Conversion complete", 100)
        self.event_bus.emit(
            events.ConversionCompleted(
                element_count=len(document),
                rule_count=len(result.stylesheet),
                class_count=len(result.class_map),
            )
        )
        log.info(
            "Converted %d element(s) with %d rule(s) and %d class(es)",
            len(document),
            len(result.stylesheet),
            len(result.class_map),
        )
        return result

    def _resolve(self, document: ParsedDocument, stylesheet: str) -> ConversionResult:
        registry = ClassRegistry(self.config.prefix)

        self._progress("Parsing stylesheet", 30)
        parsed = parse_stylesheet(stylesheet)

        self._progress("Processing markup classes", 40)
        pre_register_classes(document, registry)
        markup_classes = len(registry)

        self._progress("Processing stylesheet classes", 50)
        rewritten = SelectorRewriter(registry).rewrite(parsed)
        if len(registry) > markup_classes:
            log.debug(
                "%d class(es) appear only in the stylesheet", len(registry) - markup_classes
            )

        self._progress("Resolving styles", 70)
        cascade = CascadeEngine(registry)
        result = ConversionResult(
            document=document,
            styles=cascade.resolve_document(document, rewritten.rules),
            class_map=registry.mappings(),
            stylesheet=rewritten,
        )
        if self.config.resolve_conditional:
            result.conditional_styles = cascade.resolve_conditional(document, rewritten)

        self._progress("Creating elements", 90)
        try:
            result.elements = self.mapper.build(result)
        except Exception as exc:
            raise ConversionError(f"Element mapping failed: {exc}") from exc
        return result

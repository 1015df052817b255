"""Bidirectional registry of original -> generated class names.

One registry belongs to one conversion run.  Names are deterministic for a
given prefix and call order:

    >>> registry = ClassRegistry("wf-")
    >>> registry.generate("container")
    'wf-container'
    >>> registry.generate("2col")
    'wf-class-1'
    >>> registry.rewrite_selector(".container > .2col")
    '.wf-container > .wf-class-1'
"""

from __future__ import annotations

import logging
import re
from typing import Iterable

__all__ = ["DEFAULT_PREFIX", "ClassRegistry"]

DEFAULT_PREFIX = "html2wf-"

log = logging.getLogger("html2wf.naming")

# Names that can be used verbatim after the prefix.
_VALID_NAME_RE = re.compile(r"^[a-zA-Z_-][a-zA-Z0-9_-]*$")

# A class token, or a span whose dots are not class tokens (attribute
# selectors and quoted strings, e.g. a[href$=".pdf"]).
_CLASS_TOKEN_RE = re.compile(
    r"""
    (?P<opaque>\[[^\]]*\]|"[^"]*"|'[^']*')
    | \.(?P<name>(?:[\w-]|\\.)+)
    """,
    re.VERBOSE,
)

_ESCAPE_RE = re.compile(r"\\(.)")


class ClassRegistry:
    """Maps original class names to unique generated names and back.

    The forward and reverse maps are always written together, so each is
    the exact inverse of the other.  The counter only moves forward, and
    only when a new original name is registered.
    """

    def __init__(self, prefix: str = DEFAULT_PREFIX) -> None:
        self.prefix = prefix
        self._forward: dict[str, str] = {}
        self._reverse: dict[str, str] = {}
        self._counter = 0

    # --- registration -------------------------------------------------------

    def generate(self, original: str) -> str:
        """Return the generated name for *original*, registering it if new."""
        existing = self._forward.get(original)
        if existing is not None:
            return existing

        if original and _VALID_NAME_RE.match(original):
            proposed = f"{self.prefix}{original}"
        else:
            proposed = f"{self.prefix}class-{self._counter}"

        unique = proposed
        suffix = 0
        while unique in self._reverse:
            suffix += 1
            unique = f"{proposed}-{suffix}"

        self._forward[original] = unique
        self._reverse[unique] = original
        self._counter += 1
        return unique

    def generate_all(self, originals: Iterable[str]) -> list[str]:
        return [self.generate(name) for name in originals]

    # --- lookups ------------------------------------------------------------

    def lookup_generated(self, original: str) -> str | None:
        return self._forward.get(original)

    def lookup_original(self, generated: str) -> str | None:
        return self._reverse.get(generated)

    def is_generated(self, name: str) -> bool:
        return name in self._reverse

    def mappings(self) -> dict[str, str]:
        """Return a copy of the original -> generated table in registration order."""
        return dict(self._forward)

    @property
    def counter(self) -> int:
        return self._counter

    def __contains__(self, original: object) -> bool:
        return original in self._forward

    def __len__(self) -> int:
        return len(self._forward)

    # --- selectors ----------------------------------------------------------

    def rewrite_selector(self, selector: str) -> str:
        """Replace every class token in *selector* with its generated name.

        Classes seen for the first time are registered on the spot.  A token
        that is already a generated name (and not itself a registered
        original) is left alone, so rewriting twice changes nothing.
        """

        def substitute(match: re.Match[str]) -> str:
            raw = match.group("name")
            if raw is None:
                return match.group(0)
            name = _ESCAPE_RE.sub(r"\1", raw)
            generated = self._forward.get(name)
            if generated is None:
                if name in self._reverse:
                    return match.group(0)
                generated = self.generate(name)
                log.debug("Registered stylesheet-only class %r as %r", name, generated)
            return f".{generated}"

        return _CLASS_TOKEN_RE.sub(substitute, selector)

    # --- lifecycle ----------------------------------------------------------

    def reset(self) -> None:
        """Forget every mapping and restart the counter; call only between runs."""
        self._forward.clear()
        self._reverse.clear()
        self._counter = 0

    def __repr__(self) -> str:
        return f"ClassRegistry(prefix={self.prefix!r}, classes={len(self._forward)})"

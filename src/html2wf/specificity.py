"""Selector specificity on an additive base-100 scale.

Weights:
    100 = id (#name)
     10 = class (.name), attribute ([attr]), pseudo-class (:name)
      1 = tag name (div), pseudo-element (::name)

Unlike the CSS four-tuple this scale is flat: ten classes weigh the
same as one id, and counts of 10 or more in a lower category can tie or
overtake a higher one.
"""

from __future__ import annotations

import re

__all__ = ["ID_WEIGHT", "CLASS_WEIGHT", "TAG_WEIGHT", "calculate_specificity"]

ID_WEIGHT = 100
CLASS_WEIGHT = 10
TAG_WEIGHT = 1

# Alternation order matters: "::" must win over ":", and parenthesised
# arguments are consumed whole so that ":nth-child(2n+1)" counts once.
_TOKEN_RE = re.compile(
    r"""
    (?P<arguments>\([^)]*\))
    | (?P<string>"[^"]*"|'[^']*')
    | (?P<pseudo_element>::-?[A-Za-z_][\w-]*)
    | (?P<id>\#-?(?:[\w-]|\\.)+)
    | (?P<class>\.-?(?:[\w-]|\\.)+)
    | (?P<attribute>\[[^\]]*\])
    | (?P<pseudo_class>:-?[A-Za-z_][\w-]*)
    | (?P<tag>(?<![\w-])[A-Za-z][\w-]*)
    """,
    re.VERBOSE,
)

_WEIGHTS = {
    "id": ID_WEIGHT,
    "class": CLASS_WEIGHT,
    "attribute": CLASS_WEIGHT,
    "pseudo_class": CLASS_WEIGHT,
    "tag": TAG_WEIGHT,
    "pseudo_element": TAG_WEIGHT,
}


def calculate_specificity(selector: str) -> int:
    """Return the additive specificity of *selector*.

    Comma-joined selector lists are scored as a single string, so
    ``"h1, .title"`` weighs 11.  The universal selector and combinators
    contribute nothing.
    """
    total = 0
    for match in _TOKEN_RE.finditer(selector):
        total += _WEIGHTS.get(match.lastgroup or "", 0)
    return total

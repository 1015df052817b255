from __future__ import annotations

from dataclasses import dataclass

from html2wf.naming.registry import DEFAULT_PREFIX

# Characters that would break a class selector built from the prefix.
_FORBIDDEN_PREFIX_CHARS = frozenset(".#,{}:[]();>+~*\"'\\")


@dataclass(frozen=True)
class ConversionConfig:
    prefix: str = DEFAULT_PREFIX
    resolve_conditional: bool = True  # also resolve each @media group
    include_inline_styles: bool = True  # lay style="" over the cascade when mapping

    def __post_init__(self) -> None:
        bad = sorted({ch for ch in self.prefix if ch in _FORBIDDEN_PREFIX_CHARS or ch.isspace()})
        if bad:
            raise ValueError(
                f"Invalid class prefix {self.prefix!r}: may not contain {''.join(bad)!r}"
            )

"""Utility class-name parsing and variant matching.

Grammar:
    ClassName = ( Variant ':' )* Base
    Variant   = segment
    Base      = segment

A ':' inside ``[...]`` belongs to the segment (arbitrary values such as
``[color:red]`` or ``supports-[display:grid]``).
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

__all__ = [
    "ClassName",
    "parse_class_name",
    "clean_selector",
    "variants_match",
    "is_active",
    "DELIMITER",
]

DELIMITER = ":"

# A delimiter is inside brackets when a ']' follows it before any '['.
_SPLIT_RE = re.compile(r":(?![^\[]*\])")


@dataclass(frozen=True)
class ClassName:
    """A utility class name split into its variant chain and base utility."""

    raw: str
    base: str
    variants: tuple[str, ...] = ()


def parse_class_name(name: str) -> ClassName:
    """Split *name* into variants and base.

    The last segment is always the base, so every name decomposes, e.g.
    ``md:hover:bg-red-500`` -> variants ``("md", "hover")``, base
    ``bg-red-500``.
    """
    parts = _SPLIT_RE.split(name)
    return ClassName(raw=name, base=parts[-1], variants=tuple(parts[:-1]))


def clean_selector(selector: str) -> str:
    """Return the un-escaped class name of a selector without its leading dot."""
    return selector.replace("\\", "")[1:]


def variants_match(
    variants: Iterable[str], state: Iterable[str], strict: bool = False
) -> bool:
    """Return True if every variant is in the active *state*.

    Order of *variants* does not matter here. With *strict*, the state must
    also contain nothing beyond the variants.
    """
    variants = list(variants)
    active = set(state)
    if strict and len(variants) != len(active):
        return False
    return all(variant in active for variant in variants)


def is_active(class_name: str, state: Iterable[str], strict: bool = False) -> bool:
    """Parse *class_name* and test its variant chain against *state*."""
    return variants_match(parse_class_name(class_name).variants, state, strict)

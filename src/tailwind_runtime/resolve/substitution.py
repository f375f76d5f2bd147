"""Resolve ``var(--name)`` references inside a style mapping.

Names are looked up in two tiers: the style mapping being assembled, then
the theme store. Each value is scanned once, left to right; text produced by
a substitution is never rescanned, so self-referential or cyclic variables
cannot loop.
"""

from __future__ import annotations

import logging
import re

from tailwind_runtime.protocols import ThemeStore

__all__ = ["ValueNamespace", "substitute", "substitute_value"]

logger = logging.getLogger(__name__)

# var(--name) or var(--name,) plus any whitespace that follows it. Fallback
# values (``var(--a, 1px)``) do not match and are left alone.
_VAR_RE = re.compile(r"var\((--[^),]+),?\)(\s*)")


class ValueNamespace:
    """Two-tier variable lookup: the current style mapping, then the store."""

    def __init__(self, style: dict[str, str], store: ThemeStore) -> None:
        self._style = style
        self._store = store

    def lookup(self, name: str) -> str | None:
        """Return the value of custom property *name*, or None if unknown.

        A key present in the style mapping wins even if its value is empty.
        """
        value = self._style.get(name)
        if value is not None:
            return value
        return self._store.get_value(name)


def substitute_value(value: str, namespace: ValueNamespace) -> str:
    """Replace every resolvable reference in *value* and strip the result.

    An empty resolution removes the reference together with the whitespace
    after it; unresolved references stay verbatim.
    """

    def _replace(match: re.Match[str]) -> str:
        name, trailing = match.groups()
        resolved = namespace.lookup(name)
        if resolved is None:
            return match.group()
        if not resolved:
            return ""
        return resolved + trailing

    return _VAR_RE.sub(_replace, value).strip()


def substitute(style: dict[str, str], store: ThemeStore) -> None:
    """Resolve variables in *style* in place, then prune internal properties.

    Values are processed in insertion order, so a later value sees the
    already-substituted form of an earlier key. Afterwards every key that is
    a registered non-inheriting property is removed; theme variables stay so
    they remain usable as live variables.
    """
    namespace = ValueNamespace(style, store)
    for key, value in list(style.items()):
        style[key] = substitute_value(value, namespace)

    for key in list(style):
        descriptor = store.describe_property(key)
        if descriptor is not None and not descriptor.inherits:
            logger.debug("Pruning internal property %s", key)
            del style[key]

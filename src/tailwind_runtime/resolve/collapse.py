"""Flatten nested utility rules into a single style mapping."""

from __future__ import annotations

import re

from tailwind_runtime.model.nodes import GroupNode, RuleNode, StyleNode

__all__ = ["collapse_rule", "to_camel_case", "to_kebab_case"]

_HYPHEN_LETTER_RE = re.compile(r"-([a-z])")
_UPPER_RE = re.compile(r"[A-Z]")

CUSTOM_PROPERTY_PREFIX = "--"


def to_camel_case(name: str) -> str:
    """``margin-top`` -> ``marginTop``, ``-webkit-appearance`` -> ``WebkitAppearance``."""
    return _HYPHEN_LETTER_RE.sub(lambda m: m.group(1).upper(), name)


def to_kebab_case(name: str) -> str:
    """``marginTop`` -> ``margin-top``, ``WebkitAppearance`` -> ``-webkit-appearance``."""
    return _UPPER_RE.sub(lambda m: "-" + m.group().lower(), name)


def collapse_rule(rule: RuleNode, target: dict[str, str]) -> None:
    """Recursively merge the declarations of *rule* into *target*.

    Preludes of nested rules (media conditions, ``&:hover`` and so on) are
    dropped: variant matching has already happened on the class name. Rules
    are visited in document order and later declarations overwrite earlier
    ones. Custom property names keep their casing, everything else is stored
    camelCased.
    """
    if isinstance(rule, GroupNode):
        for child in rule.children:
            collapse_rule(child, target)
    elif isinstance(rule, StyleNode):
        for key, value in rule.declaration_items():
            if not key.startswith(CUSTOM_PROPERTY_PREFIX):
                key = to_camel_case(key)
            target[key] = value

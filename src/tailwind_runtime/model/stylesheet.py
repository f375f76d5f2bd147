"""Parsed stylesheet: an ordered tuple of top-level rules."""

from __future__ import annotations

from dataclasses import dataclass

from tailwind_runtime.model.nodes import GroupNode, RuleNode, StyleNode
from tailwind_runtime.model.property import PropertyDescriptor

_LAYER = "@layer"
_PROPERTY = "@property"


def _at_rule_name(prelude: str, keyword: str) -> str | None:
    """Return the argument of ``@keyword <name>`` or None if *prelude* is another rule."""
    head, _, rest = prelude.partition(" ")
    if head != keyword:
        return None
    return rest.strip()


@dataclass(frozen=True)
class Stylesheet:
    """A collection of top-level rules in source order."""

    rules: tuple[RuleNode, ...] = ()

    def find_layer(self, name: str) -> GroupNode | None:
        """Find a top-level ``@layer <name> { ... }`` block by name."""
        for rule in self.rules:
            if isinstance(rule, GroupNode) and _at_rule_name(rule.prelude, _LAYER) == name:
                return rule
        return None

    def find_property(self, name: str) -> PropertyDescriptor | None:
        """Find a top-level ``@property <name>`` registration.

        Registrations without an ``inherits`` descriptor are invalid CSS and
        are ignored.
        """
        for rule in self.rules:
            if not isinstance(rule, StyleNode):
                continue
            if _at_rule_name(rule.prelude, _PROPERTY) != name:
                continue
            descriptors = dict(rule.declaration_items())
            if "inherits" not in descriptors:
                continue
            return PropertyDescriptor(
                name=name,
                inherits=descriptors["inherits"].lower() == "true",
                syntax=descriptors.get("syntax", "*"),
                initial_value=descriptors.get("initial-value"),
            )
        return None

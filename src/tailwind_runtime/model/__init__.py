"""Rule model layer -- public type re-exports."""

from tailwind_runtime.model.nodes import GroupNode, RuleNode, StyleNode, selector_text
from tailwind_runtime.model.property import PropertyDescriptor
from tailwind_runtime.model.stylesheet import Stylesheet

__all__ = [
    # nodes
    "StyleNode",
    "GroupNode",
    "RuleNode",
    "selector_text",
    # registrations
    "PropertyDescriptor",
    # stylesheet
    "Stylesheet",
]

"""Resolution steps: collapse rules, substitute variables, simplify values."""

from tailwind_runtime.resolve.collapse import collapse_rule, to_camel_case, to_kebab_case
from tailwind_runtime.resolve.simplify import simplify
from tailwind_runtime.resolve.substitution import ValueNamespace, substitute, substitute_value

__all__ = [
    "collapse_rule",
    "to_camel_case",
    "to_kebab_case",
    "simplify",
    "ValueNamespace",
    "substitute",
    "substitute_value",
]

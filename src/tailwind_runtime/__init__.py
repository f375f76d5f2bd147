"""Tailwind runtime: resolve utility class names to inline style values."""

__version__ = "0.1.0"

from tailwind_runtime.config import RuntimeOptions  # noqa: E402
from tailwind_runtime.errors import InvalidArgumentError, TailwindRuntimeError  # noqa: E402
from tailwind_runtime.model import GroupNode, PropertyDescriptor, RuleNode, StyleNode, Stylesheet  # noqa: E402
from tailwind_runtime.parser import ParseError, parse_css  # noqa: E402
from tailwind_runtime.runtime import TailwindRuntime  # noqa: E402
from tailwind_runtime.theme import StylesheetStore, ThemeNamespace  # noqa: E402

__all__ = [
    "__version__",
    "TailwindRuntime",
    "RuntimeOptions",
    "StylesheetStore",
    "ThemeNamespace",
    "parse_css",
    "Stylesheet",
    "StyleNode",
    "GroupNode",
    "RuleNode",
    "PropertyDescriptor",
    "TailwindRuntimeError",
    "InvalidArgumentError",
    "ParseError",
]

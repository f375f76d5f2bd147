"""TailwindRuntime: turn utility class names into inline style values."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator

from tailwind_runtime.classnames import clean_selector, is_active
from tailwind_runtime.config import RuntimeOptions
from tailwind_runtime.errors import InvalidArgumentError
from tailwind_runtime.model.nodes import RuleNode
from tailwind_runtime.parser import parse_css
from tailwind_runtime.protocols import RuleSource, ThemeStore
from tailwind_runtime.resolve import collapse_rule, simplify, substitute, to_kebab_case
from tailwind_runtime.theme import StylesheetStore, ThemeNamespace, require_variable_name

__all__ = ["TailwindRuntime"]

logger = logging.getLogger(__name__)

_LENGTH_RE = re.compile(r"^\s*(\d+(?:\.\d+)?|\.\d+)(px|rem|em)\s*$")


class TailwindRuntime:
    """Resolve Tailwind utility classes against a compiled stylesheet.

    The rule source and theme store are explicit collaborators; use
    :meth:`from_css` to build both from stylesheet text.
    """

    def __init__(
        self,
        rules: RuleSource,
        store: ThemeStore,
        options: RuntimeOptions | None = None,
    ) -> None:
        self.rules = rules
        self.store = store
        self.options = options or RuntimeOptions()

    @classmethod
    def from_css(cls, source: str, options: RuntimeOptions | None = None) -> TailwindRuntime:
        """Parse compiled Tailwind CSS and use it as both rule source and store."""
        store = StylesheetStore(parse_css(source), options)
        return cls(store, store, store.options)

    # --- theme ------------------------------------------------------------------

    def theme_namespace(self, name: str) -> ThemeNamespace:
        """Return a read-only mapping over ``--<name>-*`` theme values.

        *name* is the namespace without the ``--`` prefix, like ``color`` or
        ``breakpoint``.
        """
        if not name or name.startswith("-"):
            raise InvalidArgumentError(f"Invalid theme namespace: {name!r}")
        theme = self.store.theme_declaration()
        return ThemeNamespace(name, lookup=theme.get, declared=lambda: theme)

    @property
    def colors(self) -> ThemeNamespace:
        """Shortcut for ``theme_namespace("color")``."""
        return self.theme_namespace("color")

    @property
    def breakpoints(self) -> ThemeNamespace:
        """Shortcut for ``theme_namespace("breakpoint")``."""
        return self.theme_namespace("breakpoint")

    def active_breakpoints(self, viewport_width: float) -> list[str]:
        """Names of breakpoints whose ``min-width`` a viewport of this width meets.

        *viewport_width* is in pixels. Breakpoint sizes in ``rem``/``em`` are
        scaled by ``options.root_font_size``; other units are skipped.
        """
        if viewport_width < 0:
            raise InvalidArgumentError(f"Viewport width must not be negative: {viewport_width}")
        active: list[str] = []
        for name, size in self.breakpoints.items():
            match = _LENGTH_RE.match(size)
            if match is None:
                logger.debug("Skipping breakpoint %s with unsupported size %r", name, size)
                continue
            amount, unit = float(match.group(1)), match.group(2)
            pixels = amount if unit == "px" else amount * self.options.root_font_size
            if viewport_width >= pixels:
                active.append(name)
        return active

    def get_value(self, name: str) -> str | None:
        """Find the value of a CSS variable such as ``--spacing`` or ``--tw-scale-x``.

        Returns None if the variable is unknown.
        """
        require_variable_name(name)
        return self.store.get_value(name)

    # --- utilities --------------------------------------------------------------

    def utility_rules(self) -> Iterator[RuleNode]:
        """Iterate over all known utility class definitions."""
        return self.rules.utility_rules()

    def find_utility_rule(self, class_name: str) -> RuleNode | None:
        """Find the first utility class definition for *class_name*."""
        for rule in self.utility_rules():
            if clean_selector(rule.prelude) == class_name:
                return rule
        return None

    # --- conversion -------------------------------------------------------------

    def to_object(
        self,
        class_names: str | Iterable[str],
        state: Iterable[str] = (),
        strict: bool = False,
    ) -> dict[str, str]:
        """Convert utility class names to an inline style mapping.

        Non-custom property names are camelCased. Class names that match no
        rule and variables that cannot be resolved are not errors: the
        former are skipped, the latter stay as literal ``var(...)`` text.

        Args:
            class_names: A list, or a whitespace-separated string, of class names.
            state: Active variants, like ``["hover", "md"]``.
            strict: Only include classes whose variants match *state* exactly.
        """
        if isinstance(class_names, str):
            class_names = class_names.split()
        state = set(state)
        names = [c.strip() for c in class_names]
        names = [c for c in names if c]

        active = {c for c in names if is_active(c, state, strict)}
        if len(active) < len(set(names)):
            logger.debug("Inactive for state %s: %s", sorted(state), sorted(set(names) - active))

        style: dict[str, str] = {}
        # Iterate rules, not classes, so output order follows the stylesheet.
        for rule in self.utility_rules():
            if clean_selector(rule.prelude) in active:
                collapse_rule(rule, style)

        substitute(style, self.store)

        for key, value in style.items():
            style[key] = simplify(value)

        logger.debug("Resolved %d classes into %d properties", len(active), len(style))
        return style

    def to_css(
        self,
        class_names: str | Iterable[str],
        state: Iterable[str] = (),
        strict: bool = False,
    ) -> str:
        """Convert utility class names to an inline style string.

        Takes the same arguments as :meth:`to_object`; returns
        ``"prop: value; prop: value;"`` with hyphenated property names.
        """
        style = self.to_object(class_names, state, strict)
        pairs = [f"{to_kebab_case(key)}: {value}" for key, value in style.items()]
        return "; ".join(pairs) + ";"

"""Theme values and property registrations read from a parsed stylesheet."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from tailwind_runtime.config import RuntimeOptions
from tailwind_runtime.errors import InvalidArgumentError
from tailwind_runtime.model.nodes import GroupNode, RuleNode, StyleNode, selector_text
from tailwind_runtime.model.property import PropertyDescriptor
from tailwind_runtime.model.stylesheet import Stylesheet

__all__ = ["StylesheetStore", "require_variable_name"]

logger = logging.getLogger(__name__)


def require_variable_name(name: str) -> None:
    """Raise InvalidArgumentError unless *name* is a custom property name."""
    if not name.startswith("--"):
        raise InvalidArgumentError(f'CSS variable name must start with "--": {name!r}')


class StylesheetStore:
    """Rule source and theme store backed by a compiled Tailwind stylesheet.

    The theme layer's first rule (``:root, :host { --color-...: ...; }``)
    provides theme values; top-level ``@property`` rules provide the
    registrations of Tailwind's internal ``--tw-*`` variables.
    """

    def __init__(self, stylesheet: Stylesheet, options: RuntimeOptions | None = None) -> None:
        self.stylesheet = stylesheet
        self.options = options or RuntimeOptions()

        self._theme: dict[str, str] = {}
        theme_layer = stylesheet.find_layer(self.options.theme_layer)
        if theme_layer is not None and theme_layer.children:
            first = theme_layer.children[0]
            if isinstance(first, StyleNode):
                self._theme = dict(first.declaration_items())
        if not self._theme:
            logger.debug("No theme declarations in layer %r", self.options.theme_layer)

        self._utilities: GroupNode | None = stylesheet.find_layer(self.options.utilities_layer)
        if self._utilities is None:
            logger.debug("No utilities layer named %r", self.options.utilities_layer)

    # --- rule source ------------------------------------------------------------

    def utility_rules(self) -> Iterator[RuleNode]:
        """Yield the style rules of the utilities layer in stylesheet order."""
        if self._utilities is None:
            return
        for rule in self._utilities.children:
            if selector_text(rule):
                yield rule

    # --- theme store ------------------------------------------------------------

    def theme_declaration(self) -> dict[str, str]:
        """Return a copy of the theme's custom property declarations."""
        return dict(self._theme)

    def describe_property(self, name: str) -> PropertyDescriptor | None:
        return self.stylesheet.find_property(name)

    def get_value(self, name: str) -> str | None:
        """Find the value of a CSS variable.

        Works for theme values, like ``--color-red-500`` and ``--spacing``,
        and for non-inheriting properties Tailwind registers for internal use
        (all start with ``--tw-``), whose initial value is returned. A
        registration without an initial value resolves to "".
        """
        require_variable_name(name)

        value = self._theme.get(name)
        if value:
            return value

        prop = self.stylesheet.find_property(name)
        if prop is not None and not prop.inherits and prop.name == name:
            return prop.initial_value if prop.initial_value is not None else ""
        return None

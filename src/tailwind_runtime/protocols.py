"""Protocols for the collaborators the resolver reads from."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol

from tailwind_runtime.model.nodes import RuleNode
from tailwind_runtime.model.property import PropertyDescriptor


class RuleSource(Protocol):
    """Ordered source of utility rules."""

    def utility_rules(self) -> Iterator[RuleNode]: ...


class ThemeStore(Protocol):
    """Read-only theme values and ``@property`` registrations."""

    def get_value(self, name: str) -> str | None: ...

    def describe_property(self, name: str) -> PropertyDescriptor | None: ...

    def theme_declaration(self) -> dict[str, str]: ...

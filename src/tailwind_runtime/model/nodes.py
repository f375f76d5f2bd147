"""Rule tree model: StyleNode and GroupNode dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class StyleNode:
    """A rule holding a declaration block and no nested rules.

    ``declarations`` holds one raw ``property: value`` statement per entry,
    exactly as the parser delimited them, so a ``;`` inside a quoted string
    or ``url(...)`` stays part of its value.
    """

    prelude: str
    declarations: tuple[str, ...] = ()

    def declaration_items(self) -> list[tuple[str, str]]:
        """Split each statement into a trimmed ``(property, value)`` pair.

        Statements without a colon or with an empty property name are skipped.
        Only the first colon separates the name, so values such as
        ``url(https://...)`` survive intact.
        """
        items: list[tuple[str, str]] = []
        for statement in self.declarations:
            if ":" not in statement:
                continue
            key, value = statement.split(":", 1)
            key = key.strip()
            if not key:
                continue
            items.append((key, value.strip()))
        return items


@dataclass(frozen=True)
class GroupNode:
    """A rule containing nested rules, such as ``@media`` or a nested selector."""

    prelude: str
    children: tuple[RuleNode, ...] = ()


RuleNode = Union[GroupNode, StyleNode]


def selector_text(node: RuleNode) -> str:
    """Return the selector of a style rule, or "" for at-rules."""
    if node.prelude.startswith("@"):
        return ""
    return node.prelude

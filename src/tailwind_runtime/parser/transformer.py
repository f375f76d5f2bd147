"""Lark Transformer that converts a stylesheet parse tree into a rule tree."""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer

from tailwind_runtime.model.nodes import GroupNode, RuleNode, StyleNode
from tailwind_runtime.model.stylesheet import Stylesheet
from tailwind_runtime.parser.errors import ParseError

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)


class _Declaration:
    """Marker for a single ``property: value`` statement inside a block."""

    def __init__(self, text: str):
        self.text = text


def _statements(declarations: list[_Declaration]) -> tuple[str, ...]:
    return tuple(d.text for d in declarations)


def _build_block(prelude: str, items: list[object]) -> RuleNode:
    """Build a StyleNode or GroupNode from the contents of one block.

    A block with nested rules becomes a GroupNode. Declarations that follow a
    nested rule stay in place as prelude-less StyleNode children; the block's
    leading declarations are appended last, which is the order a browser
    applies a nested style rule when flattening it.
    """
    nested = [item for item in items if not isinstance(item, _Declaration)]
    if not nested:
        return StyleNode(prelude=prelude, declarations=_statements(items))  # type: ignore[arg-type]

    leading: list[_Declaration] = []
    children: list[RuleNode] = []
    run: list[_Declaration] = []
    seen_nested = False
    for item in items:
        if isinstance(item, _Declaration):
            (run if seen_nested else leading).append(item)
            continue
        if run:
            children.append(StyleNode(prelude="", declarations=_statements(run)))
            run = []
        children.append(item)  # type: ignore[arg-type]
        seen_nested = True
    if run:
        children.append(StyleNode(prelude="", declarations=_statements(run)))
    if leading:
        children.append(StyleNode(prelude=prelude, declarations=_statements(leading)))
    return GroupNode(prelude=prelude, children=tuple(children))


class CssTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into StyleNode/GroupNode objects."""

    def declaration(self, items: list[Token]) -> _Declaration:
        return _Declaration(str(items[0]).strip())

    def block(self, items: list[object]) -> RuleNode:
        prelude = " ".join(str(items[0]).split())
        return _build_block(prelude, items[1:])

    def start(self, items: list[object]) -> Stylesheet:
        # Top-level declarations are statement at-rules (``@layer a, b;``,
        # ``@import ...;``) or stray text, neither of which carry rules.
        rules = [item for item in items if not isinstance(item, _Declaration)]
        return Stylesheet(rules=tuple(rules))  # type: ignore[arg-type]


def _blank_comment(match: re.Match[str]) -> str:
    # Keep newlines so error positions still point at the original source.
    return re.sub(r"[^\n]", " ", match.group())


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(),
        parser="lalr",
        start="start",
    )


def parse_css(source: str) -> Stylesheet:
    """Parse stylesheet source text into a Stylesheet of rule nodes."""
    cleaned = _COMMENT_RE.sub(_blank_comment, source)
    try:
        tree = _parser().parse(cleaned)
    except Exception as e:
        raise ParseError.from_exception(e) from e
    return CssTransformer().transform(tree)

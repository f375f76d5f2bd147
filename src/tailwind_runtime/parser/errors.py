"""Stylesheet parse failure, positioned in the source text."""

from __future__ import annotations

from tailwind_runtime.errors import TailwindRuntimeError


class ParseError(TailwindRuntimeError):
    """Stylesheet source is not a well-formed sequence of blocks and statements.

    ``line`` and ``column`` are 1-based, or None when the position is unknown
    (Lark reports -1 for errors at end of input).
    """

    def __init__(self, message: str, line: int | None = None, column: int | None = None) -> None:
        self.line = line if line is not None and line > 0 else None
        self.column = column if column is not None and column > 0 else None
        super().__init__(message)

    @classmethod
    def from_exception(cls, exc: Exception) -> ParseError:
        """Wrap a Lark error, keeping whatever position it carries."""
        return cls(str(exc), line=getattr(exc, "line", None), column=getattr(exc, "column", None))

    def __str__(self) -> str:
        message = super().__str__()
        if self.line is None:
            return message
        return f"line {self.line}, column {self.column or 0}: {message}"

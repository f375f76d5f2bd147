"""Read-only mapping view over one theme namespace, e.g. ``--color-*``."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping

__all__ = ["ThemeNamespace"]


class ThemeNamespace(Mapping[str, str]):
    """Map keys of a theme namespace to their values.

    ``ThemeNamespace("color", ...)["red-500"]`` looks up ``--color-red-500``.
    Iteration lists the keys declared in the theme with the prefix removed.
    """

    def __init__(
        self,
        name: str,
        lookup: Callable[[str], str | None],
        declared: Callable[[], Mapping[str, str]],
    ) -> None:
        self.name = name
        self.prefix = f"--{name}-"
        self._lookup = lookup
        self._declared = declared

    def __getitem__(self, key: str) -> str:
        value = self._lookup(self.prefix + key)
        if value is None:
            raise KeyError(key)
        return value

    def __iter__(self) -> Iterator[str]:
        for prop in self._declared():
            if prop.startswith(self.prefix):
                yield prop[len(self.prefix):]

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"ThemeNamespace({self.name!r}, keys={list(self)})"

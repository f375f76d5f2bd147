"""Registered custom property (``@property``) descriptor."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PropertyDescriptor:
    """A custom property registered with ``@property``.

    Non-inheriting registrations mark values Tailwind uses internally, like
    ``--tw-scale-x``.
    """

    name: str
    inherits: bool
    syntax: str = "*"
    initial_value: str | None = None

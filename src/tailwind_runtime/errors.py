"""Error hierarchy for the Tailwind runtime."""

from __future__ import annotations


class TailwindRuntimeError(Exception):
    """Base error for all tailwind_runtime errors."""


class InvalidArgumentError(TailwindRuntimeError, ValueError):
    """A caller-supplied argument violates a precondition."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RuntimeOptions:
    theme_layer: str = "theme"
    utilities_layer: str = "utilities"
    root_font_size: float = 16.0  # px per rem, used for breakpoint sizes

from tailwind_runtime.theme.namespace import ThemeNamespace
from tailwind_runtime.theme.store import StylesheetStore, require_variable_name

__all__ = ["StylesheetStore", "ThemeNamespace", "require_variable_name"]

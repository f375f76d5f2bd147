from tailwind_runtime.parser.errors import ParseError
from tailwind_runtime.parser.transformer import parse_css

__all__ = ["ParseError", "parse_css"]

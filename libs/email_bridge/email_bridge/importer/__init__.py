"""Import heuristique HTML → Document."""
from .parser import import_html, passthrough_block
from .styles import extract_style, parse_inline_style

__all__ = ["import_html", "passthrough_block", "extract_style", "parse_inline_style"]

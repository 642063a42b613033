"""Rendu Document → HTML email."""
from .base import Renderer
from .html import HtmlRenderer, render_document, render_block, font_stack, FONT_STACKS

__all__ = ["Renderer", "HtmlRenderer", "render_document", "render_block", "font_stack", "FONT_STACKS"]

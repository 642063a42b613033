"""Bloc EmailLayout — racine du document (fond, canevas, police, enfants)."""
from typing import List, Literal, Optional
from pydantic import Field

from .base import BaseBlock, WireModel

DEFAULT_BACKDROP_COLOR = "#F5F5F5"
DEFAULT_CANVAS_COLOR = "#FFFFFF"
DEFAULT_TEXT_COLOR = "#262626"
DEFAULT_FONT_FAMILY = "MODERN_SANS"


class EmailLayoutData(WireModel):
    # Données à plat : pas de style/props pour la racine
    backdrop_color: str = DEFAULT_BACKDROP_COLOR
    canvas_color: str = DEFAULT_CANVAS_COLOR
    text_color: str = DEFAULT_TEXT_COLOR
    font_family: str = DEFAULT_FONT_FAMILY
    border_color: Optional[str] = None
    border_radius: Optional[int] = None
    children_ids: List[str] = Field(default_factory=list)


class EmailLayoutBlock(BaseBlock):
    type: Literal["EmailLayout"] = "EmailLayout"
    data: EmailLayoutData = EmailLayoutData()

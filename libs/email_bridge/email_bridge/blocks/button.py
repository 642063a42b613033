"""Bloc Button — lien stylé en bouton."""
from typing import Literal, Optional
from .base import BaseBlock, BlockData, BlockProps


class ButtonProps(BlockProps):
    text: str = ""
    url: str = "#"
    button_background_color: Optional[str] = None
    button_text_color: Optional[str] = None
    button_style: Optional[Literal["rectangle", "pill", "rounded"]] = None
    full_width: Optional[bool] = None
    size: Optional[Literal["x-small", "small", "medium", "large"]] = None


class ButtonData(BlockData):
    props: ButtonProps = ButtonProps()


class ButtonBlock(BaseBlock):
    type: Literal["Button"] = "Button"
    data: ButtonData = ButtonData()

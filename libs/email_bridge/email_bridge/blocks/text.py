"""Blocs texte — Text (markup inline autorisé) et Heading (h1/h2/h3)."""
from typing import Literal, Optional
from .base import BaseBlock, BlockData, BlockProps


class TextProps(BlockProps):
    text: str = ""
    markdown: Optional[bool] = None


class TextData(BlockData):
    props: TextProps = TextProps()


class TextBlock(BaseBlock):
    type: Literal["Text"] = "Text"
    data: TextData = TextData()


HeadingLevel = Literal["h1", "h2", "h3"]


class HeadingProps(BlockProps):
    text: str = ""
    level: HeadingLevel = "h2"


class HeadingData(BlockData):
    props: HeadingProps = HeadingProps()


class HeadingBlock(BaseBlock):
    type: Literal["Heading"] = "Heading"
    data: HeadingData = HeadingData()

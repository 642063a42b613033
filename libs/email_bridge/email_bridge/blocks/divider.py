"""Blocs de séparation — Divider (ligne) et Spacer (espace vertical)."""
from typing import Literal, Optional
from .base import BaseBlock, BlockData, BlockProps


class DividerProps(BlockProps):
    line_color: Optional[str] = None
    line_height: Optional[int] = None


class DividerData(BlockData):
    props: DividerProps = DividerProps()


class DividerBlock(BaseBlock):
    type: Literal["Divider"] = "Divider"
    data: DividerData = DividerData()


class SpacerProps(BlockProps):
    height: Optional[int] = None


class SpacerData(BlockData):
    props: SpacerProps = SpacerProps()


class SpacerBlock(BaseBlock):
    type: Literal["Spacer"] = "Spacer"
    data: SpacerData = SpacerData()

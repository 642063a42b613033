"""Bloc Html — contenu brut non interprété (bloc de repli de l'import)."""
from typing import Literal
from .base import BaseBlock, BlockData, BlockProps


class HtmlProps(BlockProps):
    contents: str = ""


class HtmlData(BlockData):
    props: HtmlProps = HtmlProps()


class HtmlBlock(BaseBlock):
    type: Literal["Html"] = "Html"
    data: HtmlData = HtmlData()

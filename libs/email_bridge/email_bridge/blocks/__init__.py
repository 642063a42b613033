"""
Blocs — exports publics + BlockUnion discriminé par `type`.
"""
from typing import Annotated, Dict, List, Union
from pydantic import Field

from .base import WireModel, Padding, BlockStyle, BlockProps, BlockData, BaseBlock
from .layout import (
    EmailLayoutBlock, EmailLayoutData,
    DEFAULT_BACKDROP_COLOR, DEFAULT_CANVAS_COLOR, DEFAULT_TEXT_COLOR, DEFAULT_FONT_FAMILY,
)
from .container import (
    ContainerBlock, ContainerData, ContainerProps,
    ColumnsContainerBlock, ColumnsContainerData, ColumnsContainerProps, Column,
)
from .text import TextBlock, TextData, TextProps, HeadingBlock, HeadingData, HeadingProps, HeadingLevel
from .image import ImageBlock, ImageData, ImageProps, AvatarBlock, AvatarData, AvatarProps
from .button import ButtonBlock, ButtonData, ButtonProps
from .divider import DividerBlock, DividerData, DividerProps, SpacerBlock, SpacerData, SpacerProps
from .html import HtmlBlock, HtmlData, HtmlProps

# Union discriminée par type : un type inconnu est une erreur de validation
BlockUnion = Annotated[
    Union[
        EmailLayoutBlock,
        ContainerBlock,
        ColumnsContainerBlock,
        TextBlock,
        HeadingBlock,
        ImageBlock,
        AvatarBlock,
        ButtonBlock,
        DividerBlock,
        SpacerBlock,
        HtmlBlock,
    ],
    Field(discriminator="type"),
]

BLOCK_REGISTRY: Dict[str, type] = {
    "EmailLayout":      EmailLayoutBlock,
    "Container":        ContainerBlock,
    "ColumnsContainer": ColumnsContainerBlock,
    "Text":             TextBlock,
    "Heading":          HeadingBlock,
    "Image":            ImageBlock,
    "Avatar":           AvatarBlock,
    "Button":           ButtonBlock,
    "Divider":          DividerBlock,
    "Spacer":           SpacerBlock,
    "Html":             HtmlBlock,
}


def children_of(block: BaseBlock) -> List[str]:
    """Ids des enfants d'un bloc, dans l'ordre de rendu ([] pour une feuille)."""
    if isinstance(block, EmailLayoutBlock):
        return list(block.data.children_ids)
    if isinstance(block, ContainerBlock):
        return list(block.data.props.children_ids)
    if isinstance(block, ColumnsContainerBlock):
        return [cid for col in block.data.props.columns for cid in col.children_ids]
    return []


__all__ = [
    # Base
    "WireModel", "Padding", "BlockStyle", "BlockProps", "BlockData", "BaseBlock",
    # Layout
    "EmailLayoutBlock", "EmailLayoutData",
    "DEFAULT_BACKDROP_COLOR", "DEFAULT_CANVAS_COLOR", "DEFAULT_TEXT_COLOR", "DEFAULT_FONT_FAMILY",
    # Conteneurs
    "ContainerBlock", "ContainerData", "ContainerProps",
    "ColumnsContainerBlock", "ColumnsContainerData", "ColumnsContainerProps", "Column",
    # Texte
    "TextBlock", "TextData", "TextProps", "HeadingBlock", "HeadingData", "HeadingProps", "HeadingLevel",
    # Image
    "ImageBlock", "ImageData", "ImageProps", "AvatarBlock", "AvatarData", "AvatarProps",
    # Button
    "ButtonBlock", "ButtonData", "ButtonProps",
    # Séparateurs
    "DividerBlock", "DividerData", "DividerProps", "SpacerBlock", "SpacerData", "SpacerProps",
    # Html
    "HtmlBlock", "HtmlData", "HtmlProps",
    # Union
    "BlockUnion", "BLOCK_REGISTRY", "children_of",
]

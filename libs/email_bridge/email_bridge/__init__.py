"""
email_bridge v0.1 — pont HTML ⇄ document de blocs pour l'éditeur d'emails.

Usage:
    >>> from email_bridge import EmailBridge
    >>> bridge = EmailBridge()
    >>> out = bridge.to_html(document)          # out.clean / out.with_metadata
    >>> bridge.from_html(out.with_metadata)     # reconstruction exacte
    >>> bridge.from_html("<h1>Hi</h1><p>x</p>") # import heuristique
"""

from .blocks import (
    WireModel, Padding, BlockStyle, BlockProps, BlockData, BaseBlock,
    EmailLayoutBlock, EmailLayoutData,
    ContainerBlock, ContainerData, ContainerProps,
    ColumnsContainerBlock, ColumnsContainerData, ColumnsContainerProps, Column,
    TextBlock, TextData, TextProps,
    HeadingBlock, HeadingData, HeadingProps,
    ImageBlock, ImageData, ImageProps,
    AvatarBlock, AvatarData, AvatarProps,
    ButtonBlock, ButtonData, ButtonProps,
    DividerBlock, DividerData, DividerProps,
    SpacerBlock, SpacerData, SpacerProps,
    HtmlBlock, HtmlData, HtmlProps,
    BlockUnion, BLOCK_REGISTRY, children_of,
)
from .core import Document, ROOT_ID, new_document, BridgeSettings, load_settings
from .metadata import DecodeError, encode, decode, embed, extract, strip, has_metadata, MARKER_PREFIX, MARKER_SUFFIX
from .importer import import_html, passthrough_block
from .renderer import Renderer, HtmlRenderer, render_document
from .messages import InboundMessage, EmailHtmlMessage, LOAD_EMAIL_HTML, EMAIL_HTML
from .bridge import EmailBridge, RenderedHtml, to_html, from_html, passthrough_document

__version__ = "0.1.0"

__all__ = [
    # blocs
    "WireModel", "Padding", "BlockStyle", "BlockProps", "BlockData", "BaseBlock",
    "EmailLayoutBlock", "EmailLayoutData",
    "ContainerBlock", "ContainerData", "ContainerProps",
    "ColumnsContainerBlock", "ColumnsContainerData", "ColumnsContainerProps", "Column",
    "TextBlock", "TextData", "TextProps",
    "HeadingBlock", "HeadingData", "HeadingProps",
    "ImageBlock", "ImageData", "ImageProps",
    "AvatarBlock", "AvatarData", "AvatarProps",
    "ButtonBlock", "ButtonData", "ButtonProps",
    "DividerBlock", "DividerData", "DividerProps",
    "SpacerBlock", "SpacerData", "SpacerProps",
    "HtmlBlock", "HtmlData", "HtmlProps",
    "BlockUnion", "BLOCK_REGISTRY", "children_of",
    # document
    "Document", "ROOT_ID", "new_document", "BridgeSettings", "load_settings",
    # métadonnées
    "DecodeError", "encode", "decode", "embed", "extract", "strip", "has_metadata",
    "MARKER_PREFIX", "MARKER_SUFFIX",
    # import / rendu
    "import_html", "passthrough_block", "Renderer", "HtmlRenderer", "render_document",
    # messages / pont
    "InboundMessage", "EmailHtmlMessage", "LOAD_EMAIL_HTML", "EMAIL_HTML",
    "EmailBridge", "RenderedHtml", "to_html", "from_html", "passthrough_document",
]

"""
Fixtures partagées — document d'exemple couvrant les blocs de l'éditeur.
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from email_bridge import (
    Document, BridgeSettings,
    EmailLayoutBlock, EmailLayoutData,
    ContainerBlock, ContainerData, ContainerProps,
    HeadingBlock, HeadingData, HeadingProps,
    TextBlock, TextData, TextProps,
    ButtonBlock, ButtonData, ButtonProps,
    ImageBlock, ImageData, ImageProps,
    BlockStyle, Padding,
)


def make_document() -> Document:
    """Racine → [titre, conteneur(texte, bouton), image]."""
    return Document({
        "root": EmailLayoutBlock(data=EmailLayoutData(
            children_ids=["block-title", "block-box", "block-img"],
            font_family="BOOK_SERIF",
        )),
        "block-title": HeadingBlock(data=HeadingData(
            style=BlockStyle(color="#111111", text_align="center"),
            props=HeadingProps(text="Promoção de verão", level="h1"),
        )),
        "block-box": ContainerBlock(data=ContainerData(
            style=BlockStyle(padding=Padding(top=16, bottom=16, left=24, right=24)),
            props=ContainerProps(children_ids=["block-text", "block-cta"]),
        )),
        "block-text": TextBlock(data=TextData(
            props=TextProps(text="Olá <em>Ana</em>, até -->50% de desconto"),
        )),
        "block-cta": ButtonBlock(data=ButtonData(
            props=ButtonProps(text="Comprar", url="https://shop.example.com", button_background_color="#0079CC"),
        )),
        "block-img": ImageBlock(data=ImageData(
            props=ImageProps(url="https://cdn.example.com/banner.png", alt="Banner", link_href="https://shop.example.com"),
        )),
    })


@pytest.fixture
def document() -> Document:
    return make_document()


@pytest.fixture
def settings() -> BridgeSettings:
    """Configuration explicite (indépendante de l'environnement)."""
    return BridgeSettings(lang="pt", html_parser="html.parser", base_url="")

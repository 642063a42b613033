"""
Orchestrateur du pont HTML ⇄ Document.

Sortant : Document → renderer → HTML propre → + marqueur de métadonnées
Entrant : HTML → (marqueur → décodage) sinon (import heuristique) sinon (bloc Html brut)
"""
import logging
from typing import Any, Mapping, NamedTuple, Optional, Union

from pydantic import ValidationError

from .core.document import Document, new_document
from .core.settings import BridgeSettings, load_settings
from .importer import import_html, passthrough_block
from .messages import InboundMessage, EmailHtmlMessage, LOAD_EMAIL_HTML
from .metadata import DecodeError, decode, embed, extract
from .renderer.base import Renderer
from .renderer.html import HtmlRenderer

log = logging.getLogger(__name__)


class RenderedHtml(NamedTuple):
    clean: str
    with_metadata: str


def passthrough_document(html: str) -> Document:
    """Document de dernier recours : un seul bloc Html contenant le HTML d'origine."""
    return new_document(["html-1"], {"html-1": passthrough_block(html or "")})


class EmailBridge:
    """
    Pont bidirectionnel entre le HTML de l'hôte et le document de l'éditeur.

    Usage:
        >>> bridge = EmailBridge()
        >>> out = bridge.to_html(document)
        >>> bridge.from_html(out.with_metadata) == document
        True
    """

    def __init__(self, renderer: Optional[Renderer] = None, settings: Optional[BridgeSettings] = None):
        self.renderer = renderer or HtmlRenderer()
        self.settings = settings or load_settings()

    # ── Sortant ─────────────────────────────────────────────────────────────

    def to_html(self, document: Document) -> RenderedHtml:
        clean = self.renderer.render_document(document)
        return RenderedHtml(clean=clean, with_metadata=embed(clean, document))

    def outbound_message(self, document: Document) -> EmailHtmlMessage:
        rendered = self.to_html(document)
        return EmailHtmlMessage(html=rendered.with_metadata, html_clean=rendered.clean)

    # ── Entrant ─────────────────────────────────────────────────────────────

    def from_html(self, html: str) -> Document:
        """
        Reconstruit un Document depuis du HTML. Ne lève jamais.

        1. Métadonnées embarquées (reconstruction exacte, le reste du HTML est ignoré)
        2. Import heuristique
        3. Bloc Html brut si l'import lui-même échoue
        """
        html = html or ""

        token = extract(html)
        if token is not None:
            try:
                document = decode(token)
                log.info("Métadonnées décodées : %d blocs", len(document.root))
                return document
            except DecodeError as e:
                log.warning("Métadonnées illisibles, import heuristique : %s", e)

        try:
            return import_html(html, self.settings)
        except Exception:
            log.exception("Échec inattendu de l'import HTML, repli sur un bloc Html")
            return passthrough_document(html)

    def handle_message(self, message: Union[InboundMessage, Mapping[str, Any]]) -> Optional[Document]:
        """Traite LOAD_EMAIL_HTML ; tout autre message, même mal formé, est ignoré (None)."""
        if not isinstance(message, InboundMessage):
            try:
                message = InboundMessage.model_validate(message)
            except ValidationError as e:
                log.debug("Message illisible ignoré : %s", e)
                return None
        if message.type != LOAD_EMAIL_HTML:
            log.debug("Message ignoré : %s", message.type)
            return None
        return self.from_html(message.html)


# Fonctions raccourcies pour usage direct

def to_html(document: Document, renderer: Optional[Renderer] = None) -> RenderedHtml:
    return EmailBridge(renderer=renderer).to_html(document)


def from_html(html: str, settings: Optional[BridgeSettings] = None) -> Document:
    return EmailBridge(settings=settings).from_html(html)

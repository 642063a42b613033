"""
Import HTML → Document (meilleur effort, pour du HTML sans métadonnées).

Parcours récursif en profondeur, ordre des éléments conservé :
  h1/h2/h3            → Heading
  p                   → Text (markup inline conservé)
  a                   → Button
  img                 → Image
  hr                  → Divider
  div/section/article → Container (ou Text si seul du texte, ou rien)
  table               → Container des cellules td/th
  autre               → ignoré (sous-arbre non parcouru)

Si rien n'est reconnu, le HTML d'origine est conservé tel quel dans un bloc Html.
"""
import logging
from typing import Dict, List, Optional, Union
from urllib.parse import urljoin

from bs4 import BeautifulSoup, ParserRejectedMarkup, Tag

from ..blocks import (
    BaseBlock,
    HeadingBlock, HeadingData, HeadingProps,
    TextBlock, TextData, TextProps,
    ButtonBlock, ButtonData, ButtonProps,
    ImageBlock, ImageData, ImageProps,
    DividerBlock, DividerData,
    ContainerBlock, ContainerData, ContainerProps,
    HtmlBlock, HtmlData, HtmlProps,
    BlockStyle,
)
from ..core.document import Document, new_document
from ..core.i18n import resolve as i18n_resolve
from ..core.settings import BridgeSettings, load_settings
from .styles import extract_style

log = logging.getLogger(__name__)

HEADING_TAGS = frozenset({"h1", "h2", "h3"})
CONTAINER_TAGS = frozenset({"div", "section", "article"})
CELL_TAGS = ["td", "th"]

BUTTON_FALLBACK_KEY = "@importer.button_text"


class _IdFactory:
    """Ids "<préfixe>-<n>" ; compteur propre à un seul appel d'import."""

    def __init__(self):
        self._counter = 1

    def __call__(self, prefix: str) -> str:
        block_id = f"{prefix}-{self._counter}"
        self._counter += 1
        return block_id


class _Importer:
    def __init__(self, settings: BridgeSettings):
        self.settings = settings
        self.blocks: Dict[str, BaseBlock] = {}
        self.next_id = _IdFactory()

    def _add(self, prefix: str, block: BaseBlock) -> str:
        block_id = self.next_id(prefix)
        self.blocks[block_id] = block
        return block_id

    # ── Dispatch par balise ──────────────────────────────────────────────────

    def process(self, el: Tag) -> Optional[str]:
        tag = (el.name or "").lower()

        if tag in HEADING_TAGS:
            return self._heading(el, tag)
        if tag == "p":
            return self._paragraph(el)
        if tag == "a":
            return self._button(el)
        if tag == "img":
            return self._image(el)
        if tag == "hr":
            return self._add("divider", DividerBlock(data=DividerData(style=extract_style(el))))
        if tag in CONTAINER_TAGS:
            return self._container(el)
        if tag == "table":
            return self._table(el)
        return None

    # ── Feuilles ─────────────────────────────────────────────────────────────

    def _heading(self, el: Tag, level: str) -> str:
        return self._add("heading", HeadingBlock(data=HeadingData(
            style=extract_style(el),
            props=HeadingProps(text=el.get_text().strip(), level=level),
        )))

    def _paragraph(self, el: Tag) -> str:
        text = el.decode_contents() or el.get_text() or ""
        return self._text(text, extract_style(el))

    def _text(self, text: str, style: BlockStyle) -> str:
        return self._add("text", TextBlock(data=TextData(style=style, props=TextProps(text=text))))

    def _button(self, el: Tag) -> str:
        text = el.get_text().strip() or i18n_resolve(BUTTON_FALLBACK_KEY, lang=self.settings.lang)
        return self._add("button", ButtonBlock(data=ButtonData(
            style=extract_style(el),
            props=ButtonProps(text=text, url=self._resolve_href(el.get("href"))),
        )))

    def _resolve_href(self, href: Optional[str]) -> str:
        href = (href or "").strip()
        if not href:
            return "#"
        if self.settings.base_url:
            return urljoin(self.settings.base_url, href)
        return href

    def _image(self, el: Tag) -> str:
        return self._add("image", ImageBlock(data=ImageData(
            style=extract_style(el),
            props=ImageProps(url=el.get("src") or "", alt=el.get("alt") or "", link_href=None),
        )))

    # ── Conteneurs ───────────────────────────────────────────────────────────

    def _wrap(self, children_ids: List[str], el: Tag) -> str:
        return self._add("container", ContainerBlock(data=ContainerData(
            style=extract_style(el),
            props=ContainerProps(children_ids=children_ids),
        )))

    def _container(self, el: Tag) -> Optional[str]:
        children_ids = [cid for cid in map(self.process, _child_elements(el)) if cid]

        # Aucun enfant reconnu : le texte brut de l'élément devient un bloc Text
        if not children_ids:
            text = el.get_text().strip()
            if text:
                children_ids.append(self._text(text, extract_style(el)))

        if not children_ids:
            return None
        return self._wrap(children_ids, el)

    def _table(self, el: Tag) -> Optional[str]:
        # Cellules de cette table uniquement, quelle que soit la profondeur tbody/tr.
        # Une table imbriquée est traitée une seule fois, via la cellule qui la contient ;
        # sous un wrapper non reconnu (<span>...), elle se réduit au texte de cette cellule.
        # Chaque cellule passe par la règle div : un Container par cellule.
        cells = [c for c in el.find_all(CELL_TAGS) if c.find_parent("table") is el]
        children_ids = [cid for cid in map(self._container, cells) if cid]
        if not children_ids:
            return None
        return self._wrap(children_ids, el)

    # ── Document ─────────────────────────────────────────────────────────────

    def run(self, html: str) -> Document:
        try:
            soup = BeautifulSoup(html, self.settings.html_parser)
            body = _document_body(soup)
            elements = _child_elements(body) or [body]
            children_ids = [cid for cid in map(self.process, elements) if cid]
        except ParserRejectedMarkup as e:
            log.warning("Import HTML : markup rejeté par le parser (%s)", e)
            children_ids = []
        except RecursionError:
            # Imbrication trop profonde (parser ou parcours) : les blocs partiels sont abandonnés
            log.warning("Import HTML : imbrication trop profonde, repli sur un bloc Html")
            self.blocks.clear()
            children_ids = []
        except Exception:
            log.exception("Import HTML : échec du parcours, repli sur un bloc Html")
            self.blocks.clear()
            children_ids = []

        if not children_ids:
            log.warning("Import HTML : aucun élément reconnu, repli sur un bloc Html (%d caractères)", len(html))
            children_ids.append(self._add("html", passthrough_block(html)))

        log.debug("Import HTML : %d blocs, %d à la racine", len(self.blocks), len(children_ids))
        return new_document(children_ids, self.blocks)


def _child_elements(el: Union[Tag, BeautifulSoup]) -> List[Tag]:
    return [child for child in el.children if isinstance(child, Tag)]


def _document_body(soup: BeautifulSoup) -> Union[Tag, BeautifulSoup]:
    """<body> s'il existe, sinon <html>, sinon le fragment lui-même."""
    for candidate in (soup.body, soup.find("html")):
        if candidate is not None:
            return candidate
    return soup


def passthrough_block(html: str) -> HtmlBlock:
    """Bloc Html opaque contenant le HTML d'origine, tel quel."""
    return HtmlBlock(data=HtmlData(style=BlockStyle(), props=HtmlProps(contents=html)))


def import_html(html: str, settings: Optional[BridgeSettings] = None) -> Document:
    """
    Reconstruit un Document éditable depuis du HTML quelconque.

    Args:
        html: HTML source (fragment ou document complet)
        settings: configuration (langue des libellés, backend du parser, URL de base)

    Returns:
        Document dont la racine a toujours au moins un enfant
    """
    return _Importer(settings or load_settings()).run(html or "")

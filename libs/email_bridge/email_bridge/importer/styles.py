"""
Extraction des styles inline (attribut style="…") vers un BlockStyle.

Seul l'attribut inline est lu : pas de cascade, pas de feuille de style externe.
Ne lève jamais : une déclaration mal formée est ignorée, une valeur numérique
illisible est omise.
"""
import re
from typing import Dict, Optional

from bs4 import Tag

from ..blocks import BlockStyle, Padding

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")
_IMPORTANT_RE = re.compile(r"\s*!\s*important\s*$", re.IGNORECASE)

_PADDING_SIDES = ("top", "right", "bottom", "left")


def parse_inline_style(text: Optional[str]) -> Dict[str, str]:
    """Déclarations CSS inline → dict (propriétés en minuscules, !important retiré)."""
    declarations: Dict[str, str] = {}
    if not text:
        return declarations
    for chunk in text.split(";"):
        prop, sep, value = chunk.partition(":")
        if not sep:
            continue
        prop = prop.strip().lower()
        value = _IMPORTANT_RE.sub("", value).strip()
        if prop and value:
            declarations[prop] = value
    return declarations


def parse_int(value: Optional[str]) -> Optional[int]:
    """Entier en tête de valeur, façon parseInt : "16px" → 16, "1.5em" → 1, "auto" → None."""
    if not value:
        return None
    match = _LEADING_INT_RE.match(value)
    return int(match.group(1)) if match else None


def _expand_padding(decl: Dict[str, str]) -> Dict[str, int]:
    sides = {side: 0 for side in _PADDING_SIDES}

    # Raccourci CSS : 1 à 4 valeurs (haut, droite, bas, gauche)
    parts = decl.get("padding", "").split()
    if 1 <= len(parts) <= 4:
        values = [parse_int(p) or 0 for p in parts]
        top = values[0]
        right = values[1] if len(values) > 1 else top
        bottom = values[2] if len(values) > 2 else top
        left = values[3] if len(values) > 3 else right
        sides.update(top=top, right=right, bottom=bottom, left=left)

    for side in _PADDING_SIDES:
        longhand = decl.get(f"padding-{side}")
        if longhand is not None:
            sides[side] = parse_int(longhand) or 0
    return sides


def _background_color(decl: Dict[str, str]) -> Optional[str]:
    if "background-color" in decl:
        return decl["background-color"]
    # Raccourci "background" retenu seulement s'il se réduit à une couleur
    background = decl.get("background", "")
    if background and " " not in background.strip() and "url(" not in background:
        return background.strip()
    return None


def style_from_declarations(decl: Dict[str, str]) -> BlockStyle:
    found = {}
    if "color" in decl:
        found["color"] = decl["color"]
    background = _background_color(decl)
    if background:
        found["background_color"] = background
    font_size = parse_int(decl.get("font-size"))
    if font_size is not None:
        found["font_size"] = font_size
    if "font-weight" in decl:
        found["font_weight"] = decl["font-weight"]
    if "font-family" in decl:
        found["font_family"] = decl["font-family"]
    if "text-align" in decl:
        found["text_align"] = decl["text-align"]

    padding = _expand_padding(decl)
    if any(padding.values()):
        found["padding"] = Padding(**padding)

    return BlockStyle(**found)


def extract_style(tag: Tag) -> BlockStyle:
    """Style inline d'un élément, indépendamment de sa balise."""
    raw = tag.get("style")
    if isinstance(raw, list):
        raw = " ".join(raw)
    return style_from_declarations(parse_inline_style(raw))

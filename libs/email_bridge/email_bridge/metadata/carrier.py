"""
Porteur des métadonnées — insère / extrait / retire le marqueur dans une chaîne HTML.

Forme du marqueur (première ligne du HTML) :
    <!-- EMAIL_BUILDER_DATA:<jeton> -->
"""
import re
from typing import Optional

from ..core.document import Document
from .codec import encode

MARKER_PREFIX = "<!-- EMAIL_BUILDER_DATA:"
MARKER_SUFFIX = " -->"

# Jeton = tout jusqu'au premier "-->" (exclu)
_MARKER_RE = re.compile(re.escape(MARKER_PREFIX) + r"(.*?)-->")
_MARKER_LINE_RE = re.compile(re.escape(MARKER_PREFIX) + r".*?-->(?:\r?\n)?")


def embed(html: str, document: Document) -> str:
    """Préfixe le HTML du marqueur portant le document encodé (un seul marqueur)."""
    return f"{MARKER_PREFIX}{encode(document)}{MARKER_SUFFIX}\n{strip(html)}"


def extract(html: str) -> Optional[str]:
    """Retourne le jeton du premier marqueur, ou None si le HTML n'en porte pas."""
    match = _MARKER_RE.search(html or "")
    if not match:
        return None
    token = match.group(1).strip()
    return token or None


def strip(html: str) -> str:
    """Retire tous les marqueurs (et le saut de ligne qui les suit). Idempotent."""
    html = html or ""
    # Un retrait peut recoller deux moitiés de marqueur : on itère jusqu'au point fixe
    while True:
        cleaned = _MARKER_LINE_RE.sub("", html)
        if cleaned == html:
            return cleaned
        html = cleaned


def has_metadata(html: str) -> bool:
    return extract(html) is not None

"""
Codec des métadonnées — Document ⇄ jeton texte embarquable dans un commentaire HTML.

Jeton = base64( JSON canonique du document ). L'alphabet base64 ne contient pas "-",
un jeton ne peut donc jamais contenir "-->".
"""
import base64
import binascii
import json

from pydantic import ValidationError

from ..core.document import Document


class DecodeError(ValueError):
    """Jeton illisible, ou lisible mais ne décrivant pas un Document valide."""


def encode(document: Document) -> str:
    """Sérialise le document (JSON trié, compact) puis l'encode en base64."""
    canonical = json.dumps(
        document.to_wire(compact=False),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )
    return base64.b64encode(canonical.encode("utf-8")).decode("ascii")


def _to_text(raw: bytes) -> str:
    # Les jetons de l'éditeur navigateur (btoa) sont des chaînes d'octets Latin-1
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return raw.decode("latin-1")


def decode(token: str) -> Document:
    """
    Inverse exact de encode(). Lève DecodeError, jamais de Document partiel.
    """
    if not isinstance(token, str) or not token.strip():
        raise DecodeError("jeton vide")

    try:
        raw = base64.b64decode(token.strip(), validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"base64 invalide : {e}") from e

    try:
        data = json.loads(_to_text(raw))
    except json.JSONDecodeError as e:
        raise DecodeError(f"JSON invalide : {e}") from e

    if not isinstance(data, dict):
        raise DecodeError(f"objet JSON attendu, reçu {type(data).__name__}")

    try:
        return Document.from_wire(data)
    except ValidationError as e:
        raise DecodeError(f"document invalide : {e.error_count()} erreur(s) : {e.errors()[0]['msg']}") from e

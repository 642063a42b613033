"""Métadonnées embarquées — codec (Document ⇄ jeton) + porteur (jeton ⇄ HTML)."""
from .codec import DecodeError, encode, decode
from .carrier import MARKER_PREFIX, MARKER_SUFFIX, embed, extract, strip, has_metadata

__all__ = [
    "DecodeError", "encode", "decode",
    "MARKER_PREFIX", "MARKER_SUFFIX", "embed", "extract", "strip", "has_metadata",
]

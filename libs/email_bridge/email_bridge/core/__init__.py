"""Core module pour email_bridge."""
from .document import Document, ROOT_ID, new_document
from .settings import BridgeSettings, load_settings

__all__ = [
    "Document",
    "ROOT_ID",
    "new_document",
    "BridgeSettings",
    "load_settings",
]

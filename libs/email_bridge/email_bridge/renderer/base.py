"""
Protocol Renderer — interface pluggable pour le rendu Document → HTML statique.
"""
from typing import Protocol, runtime_checkable
from ..core.document import Document


@runtime_checkable
class Renderer(Protocol):
    def render_document(self, document: Document) -> str: ...

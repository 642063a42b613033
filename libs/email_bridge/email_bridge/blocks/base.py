"""
Blocs de base pour email_bridge.
Style (présentation) / Props (contenu) séparés, comme dans le schéma de l'éditeur.

Forme JSON d'un bloc : {"type": "<Type>", "data": {"style": {...}, "props": {...}}}
Les champs sont en snake_case côté Python, en camelCase côté JSON (childrenIds, linkHref…).
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Modèle sérialisé en camelCase ; accepte aussi les noms Python en entrée."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Padding(WireModel):
    top: int = 0
    bottom: int = 0
    left: int = 0
    right: int = 0


class BlockStyle(WireModel):
    """Propriétés de présentation. Mapping ouvert : les clés inconnues sont conservées."""
    model_config = ConfigDict(extra="allow")

    color: Optional[str] = None
    background_color: Optional[str] = None
    font_size: Optional[int] = None
    font_weight: Optional[str] = None
    font_family: Optional[str] = None
    text_align: Optional[str] = None
    padding: Optional[Padding] = None
    border_color: Optional[str] = None
    border_radius: Optional[int] = None


class BlockProps(WireModel):
    """Contenu d'un bloc (textes, URLs, enfants)."""
    model_config = ConfigDict(extra="allow")


class BlockData(WireModel):
    style: BlockStyle = BlockStyle()


class BaseBlock(WireModel):
    """Bloc de base (classe parente de tous les blocs du document)."""
    type: str

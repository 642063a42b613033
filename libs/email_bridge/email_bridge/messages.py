"""
Contrat des messages échangés avec l'application hôte.

Entrant : {"type": "LOAD_EMAIL_HTML", "html": "..."}        → from_html()
Sortant : {"type": "EMAIL_HTML", "html": "...", "htmlClean": "..."}
"""
from typing import Any, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

LOAD_EMAIL_HTML = "LOAD_EMAIL_HTML"
EMAIL_HTML = "EMAIL_HTML"


class InboundMessage(BaseModel):
    """
    Message de l'hôte. Seul LOAD_EMAIL_HTML est traité ; les clés inconnues sont ignorées.

    Un type absent ou non textuel vaut None (message ignoré), un html absent ou non textuel vaut "".
    """
    model_config = ConfigDict(extra="ignore")

    type: Optional[str] = None
    html: str = ""

    @field_validator("type", mode="before")
    @classmethod
    def _type_or_none(cls, v: Any) -> Optional[str]:
        return v if isinstance(v, str) else None

    @field_validator("html", mode="before")
    @classmethod
    def _html_or_empty(cls, v: Any) -> str:
        return v if isinstance(v, str) else ""


class EmailHtmlMessage(BaseModel):
    """HTML avec métadonnées (ré-édition) + HTML propre (envoi)."""
    model_config = ConfigDict(populate_by_name=True)

    type: Literal["EMAIL_HTML"] = EMAIL_HTML
    html: str
    html_clean: str = Field(alias="htmlClean")

"""
Router FastAPI — transport HTTP du contrat de messages de l'hôte.

POST /email-bridge/messages → LOAD_EMAIL_HTML → {"document": ...} (autres types ignorés)
POST /email-bridge/render   → Document JSON → message EMAIL_HTML
POST /email-bridge/strip    → {"html"} → HTML sans marqueur
GET  /email-bridge/catalog  → types de blocs + JSON schemas
"""
from typing import Any, Dict

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from .blocks import BLOCK_REGISTRY
from .bridge import EmailBridge
from .core.document import Document
from .messages import InboundMessage, EmailHtmlMessage
from .metadata import strip

router = APIRouter(prefix="/email-bridge", tags=["email_bridge"])

_bridge = EmailBridge()


class HtmlPayload(BaseModel):
    html: str = ""


@router.post("/messages", summary="Traite un message de l'hôte")
def messages(message: InboundMessage) -> Dict[str, Any]:
    """LOAD_EMAIL_HTML → document reconstruit ; les autres messages sont ignorés."""
    document = _bridge.handle_message(message)
    if document is None:
        return {"ignored": True, "type": message.type}
    return {"document": document.to_wire()}


@router.post("/render", summary="Rend un document en HTML (propre + métadonnées)")
def render(payload: Dict[str, Any]) -> JSONResponse:
    try:
        document = Document.from_wire(payload)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False))
    message: EmailHtmlMessage = _bridge.outbound_message(document)
    return JSONResponse(message.model_dump(by_alias=True))


@router.post("/strip", summary="Retire le marqueur de métadonnées")
def strip_metadata(payload: HtmlPayload) -> Dict[str, str]:
    return {"html": strip(payload.html)}


@router.get("/catalog", summary="Liste les blocs disponibles et leurs schemas")
def catalog() -> JSONResponse:
    """Retourne le catalogue des blocs avec leurs JSON schemas Pydantic."""
    return JSONResponse({"blocks": [
        {"type": block_type, "schema": cls.model_json_schema(by_alias=True)}
        for block_type, cls in BLOCK_REGISTRY.items()
    ]})

"""
Configuration — lue depuis l'environnement (valeurs par défaut sûres).

  EMAIL_BRIDGE_LANG         langue des libellés générés à l'import (pt, en, fr)
  EMAIL_BRIDGE_HTML_PARSER  backend BeautifulSoup ("html.parser", "lxml"…)
  EMAIL_BRIDGE_BASE_URL     base de résolution des liens relatifs (vide = liens bruts)
  EMAIL_BRIDGE_LOG_LEVEL    niveau de log de l'app FastAPI
"""
import os
from pydantic import BaseModel, Field


class BridgeSettings(BaseModel):
    lang: str = Field(default="pt")
    html_parser: str = Field(default="html.parser")
    base_url: str = Field(default="")
    log_level: str = Field(default="INFO")


def load_settings() -> BridgeSettings:
    return BridgeSettings(
        lang=os.getenv("EMAIL_BRIDGE_LANG", "pt"),
        html_parser=os.getenv("EMAIL_BRIDGE_HTML_PARSER", "html.parser"),
        base_url=os.getenv("EMAIL_BRIDGE_BASE_URL", ""),
        log_level=os.getenv("EMAIL_BRIDGE_LOG_LEVEL", "INFO").upper(),
    )

"""Tests configuration — lecture des variables d'environnement."""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from email_bridge.core.settings import BridgeSettings, load_settings


def test_defaults(monkeypatch):
    for var in ("EMAIL_BRIDGE_LANG", "EMAIL_BRIDGE_HTML_PARSER", "EMAIL_BRIDGE_BASE_URL", "EMAIL_BRIDGE_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    assert load_settings() == BridgeSettings()
    assert load_settings().lang == "pt"
    assert load_settings().html_parser == "html.parser"


def test_from_environment(monkeypatch):
    monkeypatch.setenv("EMAIL_BRIDGE_LANG", "fr")
    monkeypatch.setenv("EMAIL_BRIDGE_BASE_URL", "https://x.com/")
    monkeypatch.setenv("EMAIL_BRIDGE_LOG_LEVEL", "debug")
    s = load_settings()
    assert s.lang == "fr"
    assert s.base_url == "https://x.com/"
    assert s.log_level == "DEBUG"

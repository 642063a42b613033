"""
i18n — résolution des libellés générés par l'import.

Clés format "@namespace.key" → texte localisé
Textes directs → retournés tels quels
"""
import json
from pathlib import Path

_I18N_CACHE: dict = {}
_I18N_DIR = Path(__file__).parent.parent / "i18n"


def _load_lang(lang: str) -> dict:
    """Charge le fichier i18n/{lang}.json (lazy, mis en cache)."""
    if lang not in _I18N_CACHE:
        path = _I18N_DIR / f"{lang}.json"
        if path.exists():
            with open(path, encoding="utf-8") as f:
                _I18N_CACHE[lang] = json.load(f)
        else:
            _I18N_CACHE[lang] = {}
    return _I18N_CACHE[lang]


def resolve(value: str, lang: str = "pt", fallback_lang: str = "en") -> str:
    """
    Résout une clé i18n.
    "@importer.button_text" → texte localisé (langue demandée, puis fallback_lang)
    "texte direct" → retourné tel quel
    """
    if not value or not value.startswith("@"):
        return value

    key = value[1:]
    for code in (lang, fallback_lang):
        # "importer.button_text" → catalog["importer"]["button_text"]
        node = _load_lang(code)
        for part in key.split("."):
            if isinstance(node, dict) and part in node:
                node = node[part]
            else:
                node = None
                break
        if node is not None and not isinstance(node, dict):
            return str(node)

    return f"[missing:{key}]"


def available_languages() -> list:
    return sorted(p.stem for p in _I18N_DIR.glob("*.json"))


def reload_cache():
    """Force le rechargement du cache i18n (utile en dev)."""
    _I18N_CACHE.clear()

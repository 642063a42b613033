"""Tests métadonnées — codec (Document ⇄ jeton) et porteur (jeton ⇄ HTML)."""
import sys
import base64
import json
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from email_bridge import Document, new_document, BlockStyle, TextBlock, TextData, TextProps
from email_bridge.metadata import (
    DecodeError, encode, decode, embed, extract, strip, has_metadata,
    MARKER_PREFIX, MARKER_SUFFIX,
)


def _b64(obj, encoding="utf-8") -> str:
    return base64.b64encode(json.dumps(obj, ensure_ascii=False).encode(encoding)).decode("ascii")


# ── Codec ─────────────────────────────────────────────────────────────────────

def test_round_trip_exact(document):
    assert decode(encode(document)) == document


def test_token_is_comment_safe(document):
    # Le texte du document contient "-->" : le jeton, lui, ne doit jamais le contenir
    token = encode(document)
    assert "-->" not in token
    assert "-" not in token
    assert token.isascii()
    assert all(ch.isprintable() for ch in token)


def test_encode_is_deterministic_across_key_order(document):
    wire = document.to_wire()
    shuffled = Document.from_wire(dict(reversed(list(wire.items()))))
    assert encode(shuffled) == encode(document)


def test_decode_accepts_browser_latin1_token():
    wire = {
        "root": {"type": "EmailLayout", "data": {"childrenIds": ["t"]}},
        "t": {"type": "Text", "data": {"style": {}, "props": {"text": "café"}}},
    }
    doc = decode(_b64(wire, encoding="latin-1"))
    assert doc.get("t").data.props.text == "café"


def test_decode_ignores_surrounding_whitespace(document):
    assert decode(f"  {encode(document)}\n") == document


@pytest.mark.parametrize("token", [
    "",
    "   ",
    "not base64 !!",
    base64.b64encode(b"{not json").decode(),
    base64.b64encode(b"[1, 2, 3]").decode(),
    base64.b64encode(b'"root"').decode(),
])
def test_decode_malformed_token(token):
    with pytest.raises(DecodeError):
        decode(token)


@pytest.mark.parametrize("wire", [
    {},
    {"t": {"type": "Text", "data": {}}},
    {"root": {"type": "EmailLayout", "data": {"childrenIds": ["missing"]}}},
    {"root": {"type": "EmailLayout", "data": {"childrenIds": ["x"]}}, "x": {"type": "Marquee", "data": {}}},
])
def test_decode_rejects_ill_formed_document(wire):
    with pytest.raises(DecodeError):
        decode(_b64(wire))


def test_round_trip_keeps_null_open_keys():
    doc = new_document(["t"], {"t": TextBlock(data=TextData(
        style=BlockStyle(lineHeight=None, color="#111111"),
        props=TextProps(text="x", tone=None),
    ))})
    again = decode(encode(doc))
    assert again == doc
    assert again.get("t").data.style.model_extra == {"lineHeight": None}
    assert again.get("t").data.props.model_extra == {"tone": None}


def test_decode_rejects_cycle():
    wire = {
        "root": {"type": "EmailLayout", "data": {"childrenIds": ["box"]}},
        "box": {"type": "Container", "data": {"props": {"childrenIds": ["root"]}}},
    }
    with pytest.raises(DecodeError):
        decode(_b64(wire))


def test_decode_error_is_value_error():
    assert issubclass(DecodeError, ValueError)


# ── Porteur ───────────────────────────────────────────────────────────────────

def test_embed_prepends_single_line_marker(document):
    html = "<p>Corpo</p>"
    out = embed(html, document)
    first_line, rest = out.split("\n", 1)
    assert first_line == f"{MARKER_PREFIX}{encode(document)}{MARKER_SUFFIX}"
    assert rest == html


def test_extract_returns_token(document):
    out = embed("<p>x</p>", document)
    assert extract(out) == encode(document)
    assert has_metadata(out)


def test_extract_absent():
    assert extract("<p>sans marqueur</p>") is None
    assert extract("") is None
    assert not has_metadata("<p>x</p>")


def test_extract_ignores_ordinary_comments(document):
    html = "<!-- commentaire --><!--[if mso]><table><![endif]--><p>x</p>"
    assert extract(html) is None
    assert extract(embed(html, document)) == encode(document)


def test_extract_does_not_alter_input(document):
    out = embed("<p>x</p>", document)
    copy = str(out)
    extract(out)
    assert out == copy


def test_strip_inverts_embed(document):
    html = "<!DOCTYPE html>\n<html><body><!-- note --><p>x</p></body></html>"
    assert strip(embed(html, document)) == html


def test_strip_is_idempotent(document):
    html = embed("<p>x</p>", document)
    once = strip(html)
    assert strip(once) == once
    assert strip("<p>rien</p>") == "<p>rien</p>"


def test_strip_fixpoint_on_interleaved_markers():
    html = "<!-- EMAIL_BUI<!-- EMAIL_BUILDER_DATA:abc -->LDER_DATA:def -->\n<p>x</p>"
    once = strip(html)
    assert strip(once) == once
    assert "EMAIL_BUILDER_DATA" not in once


def test_embed_replaces_existing_marker(document):
    old = embed("<p>x</p>", document)
    new = embed(old, document)
    assert new.count(MARKER_PREFIX) == 1
    assert strip(new) == "<p>x</p>"


def test_full_round_trip_through_html(document):
    from email_bridge.renderer import render_document
    html = embed(render_document(document), document)
    assert decode(extract(html)) == document

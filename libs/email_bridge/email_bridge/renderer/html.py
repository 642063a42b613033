"""
Renderer HTML — génère le HTML email (tables, styles inline) d'un Document.
Dispatch par classe de bloc ; un bloc inconnu devient un commentaire HTML.
"""
from html import escape
from typing import Dict, List, Optional

from ..blocks import (
    BaseBlock, BlockStyle,
    EmailLayoutBlock, ContainerBlock, ColumnsContainerBlock,
    TextBlock, HeadingBlock, ImageBlock, AvatarBlock, ButtonBlock,
    DividerBlock, SpacerBlock, HtmlBlock,
)
from ..core.document import Document

# Piles de polices nommées de l'éditeur
FONT_STACKS: Dict[str, str] = {
    "MODERN_SANS":    '"Helvetica Neue", "Arial Nova", "Nimbus Sans", Arial, sans-serif',
    "BOOK_SANS":      'Optima, Candara, "Noto Sans", source-sans-pro, sans-serif',
    "ORGANIC_SANS":   'Seravek, "Gill Sans Nova", Ubuntu, Calibri, "DejaVu Sans", source-sans-pro, sans-serif',
    "GEOMETRIC_SANS": 'Avenir, "Avenir Next LT Pro", Montserrat, Corbel, "URW Gothic", source-sans-pro, sans-serif',
    "HEAVY_SANS":     'Bahnschrift, "DIN Alternate", "Franklin Gothic Medium", "Nimbus Sans Narrow", sans-serif-condensed, sans-serif',
    "ROUNDED_SANS":   'ui-rounded, "Hiragino Maru Gothic ProN", Quicksand, Comfortaa, Manjari, "Arial Rounded MT Bold", Calibri, source-sans-pro, sans-serif',
    "MODERN_SERIF":   'Charter, "Bitstream Charter", "Sitka Text", Cambria, serif',
    "BOOK_SERIF":     '"Iowan Old Style", "Palatino Linotype", "URW Palladio L", P052, serif',
    "MONOSPACE":      '"Nimbus Mono PS", "Courier New", "Cutive Mono", monospace',
}

HEADING_FONT_SIZES = {"h1": 32, "h2": 24, "h3": 20}
BUTTON_PADDINGS = {"x-small": "4px 8px", "small": "8px 12px", "medium": "12px 20px", "large": "16px 32px"}


def font_stack(name: Optional[str]) -> Optional[str]:
    """Nom de pile ("MODERN_SANS") → liste CSS ; une valeur CSS libre est conservée."""
    if not name:
        return None
    return FONT_STACKS.get(name, name)


def _css(rules: Dict[str, object]) -> str:
    return ";".join(f"{k}:{v}" for k, v in rules.items() if v is not None and v != "")


def _style_rules(style: BlockStyle) -> Dict[str, object]:
    rules: Dict[str, object] = {
        "color": style.color,
        "background-color": style.background_color,
        "font-size": f"{style.font_size}px" if style.font_size is not None else None,
        "font-weight": style.font_weight,
        "font-family": font_stack(style.font_family),
        "text-align": style.text_align,
        "border-color": style.border_color,
        "border-radius": f"{style.border_radius}px" if style.border_radius is not None else None,
    }
    if style.padding:
        p = style.padding
        rules["padding"] = f"{p.top}px {p.right}px {p.bottom}px {p.left}px"
    return rules


def _style_attr(rules: Dict[str, object]) -> str:
    css = _css(rules)
    return f' style="{escape(css)}"' if css else ""


# ── Point d'entrée public ───────────────────────────────────────────────────

def render_document(document: Document) -> str:
    """Génère le HTML complet d'un document email."""
    layout = document.layout.data

    wrapper = {
        "background-color": layout.backdrop_color,
        "color": layout.text_color,
        "font-family": font_stack(layout.font_family),
        "font-size": "16px",
        "font-weight": "400",
        "letter-spacing": "0.15008px",
        "line-height": "1.5",
        "margin": "0",
        "padding": "32px 0",
        "min-height": "100%",
        "width": "100%",
    }
    canvas = {
        "margin": "0 auto",
        "max-width": "600px",
        "background-color": layout.canvas_color,
        "border-radius": f"{layout.border_radius}px" if layout.border_radius is not None else None,
        "border": f"1px solid {layout.border_color}" if layout.border_color else None,
    }
    body = render_children(layout.children_ids, document)

    return f"""<!DOCTYPE html>
<html>
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
</head>
<body style="margin:0">
<div{_style_attr(wrapper)}>
<table align="center" width="100%"{_style_attr(canvas)} role="presentation" cellspacing="0" cellpadding="0" border="0">
  <tbody>
    <tr style="width:100%">
      <td>
{body}
      </td>
    </tr>
  </tbody>
</table>
</div>
</body>
</html>"""


def render_children(children_ids: List[str], document: Document) -> str:
    return "\n".join(render_block(document.root[cid], document) for cid in children_ids)


# ── Dispatch bloc ───────────────────────────────────────────────────────────

def render_block(block: BaseBlock, document: Document) -> str:
    """Dispatch vers le renderer approprié."""
    if isinstance(block, ContainerBlock):        return render_container(block, document)
    if isinstance(block, ColumnsContainerBlock): return render_columns(block, document)
    if isinstance(block, TextBlock):             return render_text(block)
    if isinstance(block, HeadingBlock):          return render_heading(block)
    if isinstance(block, ImageBlock):            return render_image(block)
    if isinstance(block, AvatarBlock):           return render_avatar(block)
    if isinstance(block, ButtonBlock):           return render_button(block)
    if isinstance(block, DividerBlock):          return render_divider(block)
    if isinstance(block, SpacerBlock):           return render_spacer(block)
    if isinstance(block, HtmlBlock):             return render_html(block)
    if isinstance(block, EmailLayoutBlock):      return render_children(block.data.children_ids, document)

    return f"<!-- Bloc non rendu : {escape(getattr(block, 'type', '?'))} -->"


# ── Renderers par bloc ──────────────────────────────────────────────────────

def render_container(b: ContainerBlock, document: Document) -> str:
    inner = render_children(b.data.props.children_ids, document)
    return f"<div{_style_attr(_style_rules(b.data.style))}>\n{inner}\n</div>"


def render_columns(b: ColumnsContainerBlock, document: Document) -> str:
    p = b.data.props
    valign = p.content_alignment or "top"
    gap = p.columns_gap or 0
    width = f"{100 // p.columns_count}%"

    cells = []
    for i, col in enumerate(p.columns[:p.columns_count]):
        # La gouttière est répartie de part et d'autre des colonnes intérieures
        cell_style = {
            "width": width,
            "vertical-align": valign,
            "padding-left": f"{gap // 2}px" if i > 0 else None,
            "padding-right": f"{gap // 2}px" if i < p.columns_count - 1 else None,
        }
        cells.append(f"<td{_style_attr(cell_style)}>\n{render_children(col.children_ids, document)}\n</td>")

    return f"""<div{_style_attr(_style_rules(b.data.style))}>
<table align="center" width="100%" cellpadding="0" border="0" style="table-layout:fixed;border-collapse:collapse">
  <tbody style="width:100%"><tr style="width:100%">
{"".join(cells)}
  </tr></tbody>
</table>
</div>"""


def render_text(b: TextBlock) -> str:
    # Le texte importé est du markup inline (contenu de <p>) : émis tel quel
    rules = {**_style_rules(b.data.style), "font-weight": b.data.style.font_weight or "normal"}
    return f"<div{_style_attr(rules)}>{b.data.props.text}</div>"


def render_heading(b: HeadingBlock) -> str:
    level = b.data.props.level
    rules = {
        **_style_rules(b.data.style),
        "font-weight": b.data.style.font_weight or "bold",
        "margin": "0",
        "font-size": f"{b.data.style.font_size or HEADING_FONT_SIZES[level]}px",
    }
    return f"<{level}{_style_attr(rules)}>{escape(b.data.props.text)}</{level}>"


def render_image(b: ImageBlock) -> str:
    p = b.data.props
    img_rules = {
        "outline": "none",
        "border": "none",
        "text-decoration": "none",
        "vertical-align": p.content_alignment or "middle",
        "display": "inline-block",
        "max-width": "100%",
    }
    size_attrs = ""
    if p.width:
        size_attrs += f' width="{p.width}"'
    if p.height:
        size_attrs += f' height="{p.height}"'
    img = f'<img alt="{escape(p.alt)}" src="{escape(p.url)}"{size_attrs}{_style_attr(img_rules)}>'
    if p.link_href:
        img = f'<a href="{escape(p.link_href)}" style="text-decoration:none" target="_blank">{img}</a>'
    return f"<div{_style_attr(_style_rules(b.data.style))}>{img}</div>"


def render_avatar(b: AvatarBlock) -> str:
    p = b.data.props
    size = p.size or 64
    radius = {"circle": f"{size}px", "rounded": f"{size * 0.125}px", "square": None}.get(p.shape or "square")
    img_rules = {
        "outline": "none",
        "border": "none",
        "text-decoration": "none",
        "object-fit": "cover",
        "height": f"{size}px",
        "width": f"{size}px",
        "max-width": "100%",
        "display": "inline-block",
        "vertical-align": "middle",
        "text-align": "center",
        "border-radius": radius,
    }
    img = f'<img alt="{escape(p.alt or "")}" src="{escape(p.image_url)}" height="{size}" width="{size}"{_style_attr(img_rules)}>'
    return f"<div{_style_attr(_style_rules(b.data.style))}>{img}</div>"


def render_button(b: ButtonBlock) -> str:
    p = b.data.props
    radius = {"rectangle": None, "pill": "64px", "rounded": "4px"}.get(p.button_style or "rounded")
    link_rules = {
        "color": p.button_text_color or "#FFFFFF",
        "font-size": f"{b.data.style.font_size or 16}px",
        "font-weight": b.data.style.font_weight or "bold",
        "background-color": p.button_background_color or "#999999",
        "border-radius": radius,
        "display": "block" if p.full_width else "inline-block",
        "padding": BUTTON_PADDINGS.get(p.size or "medium"),
        "text-decoration": "none",
    }
    outer = {**_style_rules(b.data.style), "font-size": None, "font-weight": None}
    return (
        f'<div{_style_attr(outer)}>'
        f'<a href="{escape(p.url)}"{_style_attr(link_rules)} target="_blank">{escape(p.text)}</a>'
        f"</div>"
    )


def render_divider(b: DividerBlock) -> str:
    p = b.data.props
    hr_rules = {
        "width": "100%",
        "border": "none",
        "border-top": f"{p.line_height or 1}px solid {p.line_color or '#333333'}",
        "margin": "0",
    }
    return f"<div{_style_attr(_style_rules(b.data.style))}><hr{_style_attr(hr_rules)}></div>"


def render_spacer(b: SpacerBlock) -> str:
    return f'<div style="height:{b.data.props.height or 16}px"></div>'


def render_html(b: HtmlBlock) -> str:
    # Contenu brut : jamais réinterprété
    return f"<div{_style_attr(_style_rules(b.data.style))}>{b.data.props.contents}</div>"


class HtmlRenderer:
    """Renderer par défaut (satisfait le Protocol Renderer)."""

    def render_document(self, document: Document) -> str:
        return render_document(document)

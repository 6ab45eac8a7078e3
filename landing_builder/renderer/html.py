"""
Sérialisation HTML des RenderNode + page complète de preview.

Tout texte et toute valeur d'attribut sont échappés ; seuls le CSS/JS
personnalisés et les snippets de tracking sont injectés bruts dans
<style>/<script> (après neutralisation de `</`).
"""
from html import escape
from typing import Union

from ..core.nodes import RenderNode
from ..core.schemas import PageDocument, Viewport
from .css import BASE_CSS, style_to_css
from .dispatch import render_canvas

_VOID_TAGS = {"area", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "track", "wbr"}


def _attr(name: str, value) -> str:
    if value is True:
        return f" {escape(name)}"
    return f' {escape(name)}="{escape(str(value), quote=True)}"'


def to_html(node: Union[RenderNode, str]) -> str:
    """RenderNode → HTML (texte échappé)."""
    if isinstance(node, str):
        return escape(node, quote=False)

    attrs = "".join(_attr(k, v) for k, v in node.attrs.items() if v is not None and v is not False)
    if node.classes:
        attrs += _attr("class", " ".join(node.classes))
    css = style_to_css(node.style)
    if css:
        attrs += _attr("style", css)

    if node.tag in _VOID_TAGS:
        return f"<{node.tag}{attrs}>"
    inner = "".join(to_html(child) for child in node.children)
    return f"<{node.tag}{attrs}>{inner}</{node.tag}>"


def _raw_block(source: str) -> str:
    """Contenu brut de <style>/<script> : empêche la fermeture prématurée de la balise."""
    return (source or "").replace("</", "<\\/")


# ── Tracking ────────────────────────────────────────────────────────────────

def _google_analytics(measurement_id: str) -> str:
    mid = escape(measurement_id, quote=True)
    return f"""<script async src="https://www.googletagmanager.com/gtag/js?id={mid}"></script>
  <script>
    window.dataLayer = window.dataLayer || [];
    function gtag(){{dataLayer.push(arguments);}}
    gtag('js', new Date());
    gtag('config', {_js_string(measurement_id)});
  </script>"""


def _facebook_pixel(pixel_id: str) -> str:
    return f"""<script>
    !function(f,b,e,v,n,t,s){{if(f.fbq)return;n=f.fbq=function(){{n.callMethod?
    n.callMethod.apply(n,arguments):n.queue.push(arguments)}};if(!f._fbq)f._fbq=n;
    n.push=n;n.loaded=!0;n.version='2.0';n.queue=[];t=b.createElement(e);t.async=!0;
    t.src=v;s=b.getElementsByTagName(e)[0];s.parentNode.insertBefore(t,s)}}(window,
    document,'script','https://connect.facebook.net/en_US/fbevents.js');
    fbq('init', {_js_string(pixel_id)});
    fbq('track', 'PageView');
  </script>"""


def _js_string(value: str) -> str:
    cleaned = "".join(ch for ch in value if ch.isalnum() or ch in "-_")
    return f"'{cleaned}'"


# ── Page complète ───────────────────────────────────────────────────────────

def render_page(doc: PageDocument, viewport: Union[str, Viewport] = Viewport.DESKTOP) -> str:
    """HTML complet de la preview (SEO, CSS/JS personnalisés, tracking)."""
    canvas = render_canvas(doc, "preview", viewport)
    title = doc.seo.title or doc.title or doc.name

    head = [
        '<meta charset="UTF-8">',
        '<meta name="viewport" content="width=device-width, initial-scale=1.0">',
        f"<title>{escape(title, quote=False)}</title>",
    ]
    description = doc.seo.description or doc.description
    if description:
        head.append(f'<meta name="description" content="{escape(description, quote=True)}">')
    if doc.seo.keywords:
        head.append(f'<meta name="keywords" content="{escape(doc.seo.keywords, quote=True)}">')
    head.append(f"<style>{BASE_CSS}</style>")
    if doc.settings.custom_css:
        head.append(f"<style>{_raw_block(doc.settings.custom_css)}</style>")

    tracking = doc.settings.tracking
    if tracking.google_analytics:
        head.append(_google_analytics(tracking.google_analytics))
    if tracking.facebook_pixel:
        head.append(_facebook_pixel(tracking.facebook_pixel))

    body_end = ""
    if doc.settings.custom_js:
        body_end = f"<script>{_raw_block(doc.settings.custom_js)}</script>"

    head_html = "\n  ".join(head)
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  {head_html}
</head>
<body>
{to_html(canvas)}
{body_end}
</body>
</html>"""

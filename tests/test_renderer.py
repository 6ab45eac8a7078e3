"""Tests rendu — dispatch total, modes édition/preview, HTML échappé."""
import pytest

from landing_builder import (
    Element,
    ElementType,
    add_element,
    render_canvas,
    render_element,
    render_page,
    to_html,
    update_element,
)
from landing_builder.core.nodes import h
from landing_builder.elements.video import embed_url
from landing_builder.renderer.css import style_to_css
from landing_builder.renderer.dispatch import SELECTED_BORDER


# ── Totalité ────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("element_type", list(ElementType))
@pytest.mark.parametrize("mode", ["edit", "preview"])
def test_every_type_renders(doc, element_type, mode):
    el = add_element(doc, element_type)
    node = render_element(el, mode, "desktop")
    html = to_html(node)
    assert html.startswith("<div")
    assert f"lb-element--{element_type.value}" in html


def test_unknown_type_renders_placeholder():
    el = Element(id="x1", type="carousel", content={"slides": 3})
    node = render_element(el, "edit", "mobile")
    placeholders = node.find_all(lambda n: n.attrs.get("data-placeholder") == "true")
    assert len(placeholders) == 1
    assert placeholders[0].text() == "Unknown element type: carousel"


# ── Modes ───────────────────────────────────────────────────────────────────

def test_edit_mode_frame(doc):
    el = add_element(doc, "header")
    node = render_element(el, "edit")
    assert node.style["position"] == "absolute"
    assert node.style["left"] == "50px"
    assert node.style["top"] == "50px"
    assert node.style["width"] == "800px"
    assert node.style["height"] == "80px"
    assert node.style["border"] == "none"
    assert node.attrs["data-element-id"] == el.id
    assert node.attrs["data-action"] == "select"
    assert "lb-element--editable" in node.classes


def test_selected_element_highlighted(doc):
    el = add_element(doc, "text")
    node = render_element(el, "edit", selected_id=el.id)
    assert node.style["border"] == SELECTED_BORDER
    assert "lb-element--selected" in node.classes
    # la sélection n'est jamais stockée dans l'élément
    assert "border" not in doc.elements[0].style


def test_preview_mode_ignores_geometry(doc):
    el = add_element(doc, "header")
    node = render_element(el, "preview", selected_id=el.id)
    assert node.style["position"] == "relative"
    assert node.style["width"] == "100%"
    assert node.style["height"] == "auto"
    assert node.style["border"] == "none"
    assert "data-element-id" not in node.attrs


def test_header_level(doc):
    el = add_element(doc, "header")
    el = update_element(doc, el.id, {"content": {"level": 4, "text": "Programmes"}})
    inner = render_element(el, "preview").find("h4")
    assert inner is not None
    assert inner.text() == "Programmes"


def test_spacer_guide_only_in_edit(doc):
    el = add_element(doc, "spacer")
    assert "Spacer" in render_element(el, "edit").text()
    assert render_element(el, "preview").text() == ""
    assert render_element(el, "preview").style["height"] == "50px"


def test_video_autoplay_only_in_preview(doc):
    el = add_element(doc, "video")
    el = update_element(doc, el.id, {"content": {"url": "https://cdn.test/intro.mp4", "autoplay": True}})
    assert "autoplay" not in render_element(el, "edit").find("video").attrs
    assert render_element(el, "preview").find("video").attrs["autoplay"] is True


def test_video_embed_url():
    assert embed_url("https://www.youtube.com/watch?v=dQw4w9WgXcQ") == "https://www.youtube.com/embed/dQw4w9WgXcQ"
    assert embed_url("https://vimeo.com/76979871") == "https://player.vimeo.com/video/76979871"
    assert embed_url("https://cdn.test/intro.mp4") == ""


def test_hero_background_image(doc):
    el = add_element(doc, "hero")
    el = update_element(doc, el.id, {"content": {"backgroundImage": "https://cdn.test/bg.jpg"}})
    node = render_element(el, "preview")
    assert node.style["backgroundImage"] == "url('https://cdn.test/bg.jpg')"


# ── Canvas ──────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("viewport,width", [("desktop", "1200px"), ("tablet", "768px"), ("mobile", "375px")])
def test_canvas_width_follows_viewport(doc, viewport, width):
    canvas = render_canvas(doc, "edit", viewport)
    assert canvas.style["width"] == width
    assert canvas.style["minHeight"] == "1000px"


def test_empty_canvas_hint(doc):
    canvas = render_canvas(doc)
    assert "Start building your page" in canvas.text()
    assert canvas.attrs["data-action"] == "clear-selection"


def test_canvas_follows_sequence_order(doc):
    ids = [add_element(doc, t).id for t in ("navbar", "hero", "footer")]
    canvas = render_canvas(doc, "edit")
    rendered = [n.attrs["data-element-id"] for n in canvas.children]
    assert rendered == ids
    assert "data-action" not in render_canvas(doc, "preview").attrs


# ── HTML ────────────────────────────────────────────────────────────────────

def test_style_to_css():
    css = style_to_css({"fontSize": 32, "lineHeight": 1.6, "backgroundColor": "#fff", "color": None})
    assert css == "font-size: 32px; line-height: 1.6; background-color: #fff"


def test_text_and_attributes_escaped(doc):
    el = add_element(doc, "button")
    el = update_element(doc, el.id, {"content": {"text": "<script>alert(1)</script>", "action": '" onclick="x'}})
    html = to_html(render_element(el, "preview"))
    assert "<script>" not in html
    assert "&lt;script&gt;" in html
    assert 'onclick="x' not in html
    assert "&quot; onclick=&quot;x" in html


def test_void_tags():
    assert to_html(h("img", src="a.png", alt="")) == '<img src="a.png" alt="">'
    assert to_html(h("input", disabled=True, required=False)) == "<input disabled>"


def test_render_page(doc):
    add_element(doc, "hero")
    doc.seo = doc.seo.model_copy(update={"title": "Admissions 2025", "description": "Apply <now>", "keywords": "mba"})
    doc.settings = doc.settings.model_copy(update={
        "custom_css": "body { color: red }",
        "custom_js": "console.log('</script>')",
    })
    doc.settings.tracking.google_analytics = "G-TEST123"
    doc.settings.tracking.facebook_pixel = "123456"
    html = render_page(doc, "mobile")
    assert html.startswith("<!DOCTYPE html>")
    assert "<title>Admissions 2025</title>" in html
    assert 'content="Apply &lt;now&gt;"' in html
    assert '<meta name="keywords" content="mba">' in html
    assert "body { color: red }" in html
    assert "googletagmanager.com/gtag/js?id=G-TEST123" in html
    assert "fbq('init', '123456')" in html
    assert "console.log('<\\/script>')" in html
    assert "width: 375px" in html
    assert "Welcome to Our Page" in html

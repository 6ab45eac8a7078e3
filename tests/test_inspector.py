"""Tests panneau de propriétés — champs par type, coercition, réglages de page."""
import pytest
from pydantic import ValidationError

from landing_builder import (
    BuilderError,
    Element,
    InvalidElementContent,
    apply_inspector_change,
    inspector_fields,
    render_page,
    update_page_settings,
)

LAYOUT_KEYS = ["position.x", "position.y", "size.width", "size.height"]


def _keys(values):
    return [v.key for v in values]


# ── Champs ──────────────────────────────────────────────────────────────────

def test_header_fields(session):
    el = session.add_element("header")
    values = inspector_fields(el, "edit")
    assert _keys(values) == [
        "content.text", "content.level", "style.fontSize", "style.textAlign", "style.color",
    ] + LAYOUT_KEYS
    current = {v.key: v.value for v in values}
    assert current["content.text"] == "New Header"
    assert current["content.level"] == 2
    assert current["style.textAlign"] == "center"
    assert current["position.y"] == 50


def test_layout_fields_only_in_edit(session):
    el = session.add_element("text")
    assert _keys(inspector_fields(el, "preview")) == ["content.text", "style.fontSize", "style.color"]


def test_spacer_exposes_height_only(session):
    el = session.add_element("spacer")
    assert _keys(inspector_fields(el, "preview")) == ["content.height"]


def test_unknown_type_exposes_layout_only():
    el = Element(id="x1", type="carousel")
    assert _keys(inspector_fields(el, "edit")) == LAYOUT_KEYS
    assert inspector_fields(el, "preview") == []


def test_missing_value_uses_field_default(session):
    el = session.add_element("hero")
    el = session.update_element(el.id, {"style": {"backgroundColor": None}})
    current = {v.key: v.value for v in inspector_fields(el)}
    assert current["style.backgroundColor"] == "#f8fafc"


def test_value_to_dict(session):
    el = session.add_element("button")
    data = inspector_fields(el)[0].to_dict()
    assert data == {"key": "content.text", "label": "Button text", "kind": "text", "value": "Click Me"}


# ── Application ─────────────────────────────────────────────────────────────

def test_apply_requires_selection(session):
    session.add_element("header")
    with pytest.raises(BuilderError):
        apply_inspector_change(session, "content.text", "Titre")


@pytest.mark.parametrize("raw,expected", [("4", 4), ("9", 6), ("0", 1), ("abc", 2), ("1e999", 2)])
def test_header_level_coercion(session, raw, expected):
    el = session.add_element("header")
    session.select(el.id)
    updated = apply_inspector_change(session, "content.level", raw)
    assert updated.content["level"] == expected


def test_font_size_falls_back_to_default(session):
    el = session.add_element("header")
    session.select(el.id)
    assert apply_inspector_change(session, "style.fontSize", "").style["fontSize"] == 32
    assert apply_inspector_change(session, "style.fontSize", "48").style["fontSize"] == 48


def test_nested_hero_button(session):
    el = session.add_element("hero")
    updated = apply_inspector_change(session, "content.primaryButton.text", "Apply now", element_id=el.id)
    assert updated.content["primaryButton"] == {"text": "Apply now", "action": "#"}
    assert session.selected_element_id == el.id


def test_toggle_and_position(session):
    el = session.add_element("video")
    session.select(el.id)
    assert apply_inspector_change(session, "content.autoplay", "on").content["autoplay"] is True
    assert apply_inspector_change(session, "position.x", "120").position.x == 120


def test_select_option_checked(session):
    el = session.add_element("button")
    session.select(el.id)
    assert apply_inspector_change(session, "content.style", "outline").content["style"] == "outline"
    with pytest.raises(InvalidElementContent):
        apply_inspector_change(session, "content.style", "fancy")


def test_unknown_field(session):
    el = session.add_element("spacer")
    session.select(el.id)
    with pytest.raises(InvalidElementContent):
        apply_inspector_change(session, "content.text", "nope")


def test_position_not_editable_in_preview(session):
    el = session.add_element("text")
    session.select(el.id)
    session.set_mode("preview")
    with pytest.raises(InvalidElementContent):
        apply_inspector_change(session, "position.x", 10)


# ── Réglages de page ────────────────────────────────────────────────────────

def test_update_page_settings(session):
    doc = update_page_settings(
        session,
        name="Open Day",
        slug="Open Day 2025!",
        seo_title="Open Day | Campus",
        seo_keywords="open day, campus",
        custom_css=".hero { color: navy }",
        google_analytics="G-ABC123",
    )
    assert doc.name == "Open Day"
    assert doc.slug == "open-day-2025"
    assert doc.seo.title == "Open Day | Campus"
    assert doc.seo.keywords == "open day, campus"
    assert doc.settings.custom_css == ".hero { color: navy }"
    assert doc.settings.tracking.google_analytics == "G-ABC123"
    assert session.dirty


def test_update_page_settings_rejects_unknown(session):
    with pytest.raises(ValueError):
        update_page_settings(session, theme="dark")
    assert not session.dirty


def test_update_page_settings_is_all_or_nothing(session):
    with pytest.raises(ValidationError):
        update_page_settings(session, name="Renamed", title=123)
    assert session.document.name == "Spring Intake"
    assert not session.dirty


def test_update_page_settings_validates_seo_and_tracking(session):
    with pytest.raises(ValidationError):
        update_page_settings(session, seo_title=123)
    with pytest.raises(ValidationError):
        update_page_settings(session, google_analytics=["G-1"])
    assert session.document.seo.title is None
    assert session.document.settings.tracking.google_analytics is None
    assert "<title>Spring Intake</title>" in render_page(session.document)


def test_update_page_settings_keeps_elements(session):
    el = session.add_element("hero")
    doc = update_page_settings(session, seo_description="Campus tour")
    assert doc.element_ids() == [el.id]
    assert doc.seo.description == "Campus tour"

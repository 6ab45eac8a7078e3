"""Tests catalogue de templates — built-ins, copies, import distant."""
from unittest.mock import MagicMock

import pytest

from landing_builder import InvalidElementContent, Template, TemplateCatalog, TemplateNotFound
from landing_builder.elements import validate_elements
from landing_builder.templates import builtin_templates


def test_builtin_templates():
    catalog = TemplateCatalog()
    names = [t.name for t in catalog.list()]
    assert names == ["Education Hero", "Lead Capture", "Course Showcase"]
    assert catalog.categories() == ["Education", "Marketing"]
    assert [t.name for t in catalog.list("Marketing")] == ["Lead Capture"]


@pytest.mark.parametrize("template", builtin_templates(), ids=lambda t: t.id)
def test_builtin_templates_are_valid(template):
    assert validate_elements(template.elements) == []


def test_get_returns_deep_copy():
    catalog = TemplateCatalog()
    t = catalog.get("lead-capture")
    t.elements[0].content["text"] = "Modifié"
    assert catalog.get("lead-capture").elements[0].content["text"] == "Get Your Free Consultation"


def test_get_unknown_template():
    with pytest.raises(TemplateNotFound):
        TemplateCatalog().get("missing")
    assert TemplateCatalog().find_by_name("Missing") is None


def test_register_rejects_invalid_content():
    bad = Template(id="bad", name="Bad", elements=[{"id": "a", "type": "header", "content": {"nope": 1}}])
    catalog = TemplateCatalog(include_builtin=False)
    with pytest.raises(InvalidElementContent):
        catalog.register(bad)
    assert "bad" not in catalog


def test_refresh_from_gateway():
    remote = Template(
        id="webinar", name="Webinar", category="Events",
        elements=[{"id": "w1", "type": "cta", "content": {"title": "Join live"}}],
    )
    broken = Template(id="broken", name="Broken", elements=[{"id": "b1", "type": "spacer", "content": {"height": -1}}])
    gateway = MagicMock()
    gateway.fetch_templates.return_value = [remote, broken]

    catalog = TemplateCatalog()
    assert catalog.refresh(gateway) == 1
    assert len(catalog) == 4
    assert catalog.find_by_name("Webinar").category == "Events"
    assert "broken" not in catalog


def test_instantiate(doc):
    elements = TemplateCatalog().instantiate(doc, "course-showcase")
    assert [e.type for e in doc.elements] == ["features"]
    assert elements[0].id != "course-1"
    assert doc.name == "Course Showcase"

"""Tests router FastAPI — catalogue, templates, validation, rendu."""
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from landing_builder.router import router


@pytest.fixture
def client():
    app = FastAPI()
    app.include_router(router)
    with TestClient(app) as c:
        yield c


def _page(*elements, **extra):
    return {"name": "Open Day", "slug": "open-day", "title": "Open Day", "content": list(elements), **extra}


HEADER = {"id": "h1", "type": "header", "content": {"text": "Welcome", "level": 1}, "styles": {"color": "#111"},
          "position": {"x": 10, "y": 20}, "size": {"width": 600, "height": 80}}


def test_catalog(client):
    r = client.get("/landing-builder/catalog")
    assert r.status_code == 200
    types = [e["type"] for e in r.json()["elements"]]
    assert len(types) == 14
    assert "hero" in types


def test_templates(client):
    data = client.get("/landing-builder/templates").json()
    assert len(data["templates"]) == 3
    assert data["categories"] == ["Education", "Marketing"]
    marketing = client.get("/landing-builder/templates", params={"category": "Marketing"}).json()
    assert [t["name"] for t in marketing["templates"]] == ["Lead Capture"]
    assert "styles" in marketing["templates"][0]["elements"][0]


def test_validate(client):
    assert client.post("/landing-builder/validate", json=_page(HEADER)).json() == {"valid": True}
    bad = {**HEADER, "content": {"text": "x", "bogus": 1}}
    data = client.post("/landing-builder/validate", json=_page(bad)).json()
    assert data["valid"] is False
    assert data["errors"][0].startswith("h1:")


def test_validate_rejects_duplicate_ids(client):
    r = client.post("/landing-builder/validate", json=_page(HEADER, HEADER))
    assert r.status_code == 422


def test_preview(client):
    r = client.post("/landing-builder/preview", params={"viewport": "tablet"},
                    json=_page(HEADER, seo={"title": "Open Day 2025"}))
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    assert "<title>Open Day 2025</title>" in r.text
    assert "<h1" in r.text and "Welcome" in r.text
    assert "width: 768px" in r.text


def test_canvas_edit_with_selection(client):
    r = client.post("/landing-builder/canvas", params={"mode": "edit", "selected": "h1"}, json=_page(HEADER))
    assert r.status_code == 200
    assert 'data-element-id="h1"' in r.text
    assert "border: 2px solid #3B82F6" in r.text
    assert "left: 10px" in r.text


def test_canvas_unknown_selection(client):
    r = client.post("/landing-builder/canvas", params={"selected": "nope"}, json=_page(HEADER))
    assert r.status_code == 404


def test_canvas_bad_mode(client):
    r = client.post("/landing-builder/canvas", params={"mode": "fullscreen"}, json=_page())
    assert r.status_code == 422


def test_apply_template(client):
    r = client.post("/landing-builder/templates/lead-capture", json=_page(HEADER))
    assert r.status_code == 200
    data = r.json()
    assert data["name"] == "Lead Capture"
    assert [e["type"] for e in data["content"]] == ["header", "form"]
    assert data["content"][0]["id"] != "lead-1"


def test_apply_unknown_template(client):
    r = client.post("/landing-builder/templates/missing", json=_page())
    assert r.status_code == 404

"""Tests session d'édition — sélection, modes, dirty, save / publish."""
import threading
import time
from unittest.mock import MagicMock

import pytest

from landing_builder import ElementNotFound, PageStatus, PersistenceError
from landing_builder.renderer.dispatch import SELECTED_BORDER
from landing_builder.templates import EDUCATION_HERO
from conftest import make_response, page_json


def _stored(doc_id="lp_1", **update):
    """Simule la réponse serveur : copie du document reçu + métadonnées."""
    def _save(doc):
        return doc.model_copy(update={"id": doc_id, "view_count": 3, **update})
    return _save


# ── Sélection ───────────────────────────────────────────────────────────────

def test_click_selects_in_edit_mode(session):
    el = session.add_element("hero")
    assert session.click_element(el.id).id == el.id
    assert session.selected_element_id == el.id
    session.click_canvas()
    assert session.selected_element is None


def test_click_ignored_in_preview(session):
    el = session.add_element("hero")
    session.set_mode("preview")
    assert session.click_element(el.id) is None
    assert session.selected_element_id is None


def test_select_unknown_id(session):
    with pytest.raises(ElementNotFound):
        session.select("missing")


def test_selection_is_resolved_on_read(session):
    el = session.add_element("header")
    session.select(el.id)
    session.update_element(el.id, {"content": {"text": "Bienvenue"}})
    assert session.selected_element.content["text"] == "Bienvenue"


def test_delete_selected_clears_selection(session):
    el = session.add_element("text")
    session.select(el.id)
    session.delete_element(el.id)
    assert session.selected_element_id is None


def test_load_template_clears_selection(session):
    el = session.add_element("text")
    session.select(el.id)
    session.load_template(EDUCATION_HERO)
    assert session.selected_element is None
    assert session.document.name == "Education Hero"


def test_canvas_reflects_session_state(session):
    el = session.add_element("button")
    session.select(el.id)
    session.set_viewport("tablet")
    canvas = session.render_canvas()
    assert canvas.style["width"] == "768px"
    assert canvas.children[0].style["border"] == SELECTED_BORDER
    session.toggle_preview()
    assert session.render_canvas().children[0].style["border"] == "none"


def test_active_tab(session):
    session.set_active_tab("templates")
    assert session.active_tab == "templates"
    with pytest.raises(ValueError):
        session.set_active_tab("billing")


# ── Dirty ───────────────────────────────────────────────────────────────────

def test_dirty_tracking(session):
    assert not session.dirty
    el = session.add_element("text")
    assert session.dirty
    revision = session.revision
    assert session.move_element(el.id, "up") is False
    assert session.revision == revision


# ── Persistance ─────────────────────────────────────────────────────────────

def test_save_success_keeps_selection(session):
    el = session.add_element("hero")
    session.select(el.id)
    gateway = MagicMock()
    gateway.save.side_effect = _stored()

    saved = session.save(gateway)
    assert saved.id == "lp_1"
    assert session.document.id == "lp_1"
    assert session.document.view_count == 3
    assert session.selected_element_id == el.id
    assert not session.dirty


def test_save_failure_leaves_session_untouched(session):
    el = session.add_element("hero")
    session.select(el.id)
    before = session.document.model_dump()
    gateway = MagicMock()
    gateway.save.side_effect = PersistenceError("Backend injoignable", 503)

    with pytest.raises(PersistenceError):
        session.save(gateway)
    assert session.document.model_dump() == before
    assert session.selected_element_id == el.id
    assert session.dirty


def test_edits_during_save_are_kept(session):
    session.add_element("hero")

    def slow_save(doc):
        # édition concurrente pendant l'appel réseau
        session.add_element("text")
        return doc.model_copy(update={"id": "lp_9"})

    gateway = MagicMock()
    gateway.save.side_effect = slow_save
    session.save(gateway)

    assert session.document.id == "lp_9"
    assert [e.type for e in session.document.elements] == ["hero", "text"]
    assert session.dirty


def test_publish_updates_status(session):
    session.add_element("cta")
    gateway = MagicMock()
    gateway.publish.side_effect = _stored(status=PageStatus.PUBLISHED)

    session.publish(gateway)
    assert session.document.status is PageStatus.PUBLISHED
    assert session.document.id == "lp_1"


def test_concurrent_saves_of_new_page_create_it_once(session, gateway, http):
    session.add_element("hero")
    created = []

    def slow_request(method, url, **kwargs):
        time.sleep(0.05)
        if method == "POST":
            created.append(f"lp_{len(created) + 1}")
            return make_response(201, page_json(id=created[-1]))
        return make_response(200, page_json(id=url.rsplit("/", 1)[-1]))

    http.request.side_effect = slow_request
    threads = [threading.Thread(target=session.save, args=(gateway,)) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    methods = [c.args[0] for c in http.request.call_args_list]
    assert methods == ["POST", "PUT"]
    assert created == ["lp_1"]
    assert session.document.id == "lp_1"
    assert not session.dirty


def test_edit_block_marks_dirty_even_on_error(session):
    with pytest.raises(RuntimeError):
        with session.edit() as doc:
            doc.name = "Renamed"
            raise RuntimeError("interrompu")
    assert session.document.name == "Renamed"
    assert session.dirty


def test_replace_document_is_all_or_nothing(session):
    def broken(doc):
        raise ValueError("candidat invalide")

    before = session.document
    with pytest.raises(ValueError):
        session.replace_document(broken)
    assert session.document is before
    assert not session.dirty

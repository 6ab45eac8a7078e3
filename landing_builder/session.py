"""
État d'une session d'édition — un seul objet explicite.

EditorSession regroupe le document, la sélection (par id), le mode, le
viewport, l'onglet actif de la palette et le suivi des modifications.
Les mutations passent par le moteur de composition ; la sauvegarde passe
par le gateway et ne remplace que les métadonnées serveur, de sorte que
les éditions faites pendant un appel réseau ne sont pas perdues.
"""
import logging
import threading
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional, Union

from . import composition
from .core.errors import ElementNotFound
from .core.nodes import RenderNode
from .core.schemas import EditorMode, Element, ElementType, PageDocument, Template, Viewport
from .core.selection import Selection
from .core.documents import new_document
from .renderer import render_canvas

log = logging.getLogger(__name__)

TABS = ("elements", "templates", "settings")

# Champs attribués par le serveur, recopiés après save / publish
_SERVER_FIELDS = (
    "id", "status", "published_at", "created_at", "updated_at", "view_count", "conversion_count",
)


class EditorSession:
    def __init__(
        self,
        document: Optional[PageDocument] = None,
        mode: Union[str, EditorMode] = EditorMode.EDIT,
        viewport: Union[str, Viewport] = Viewport.DESKTOP,
    ):
        self.document = document if document is not None else new_document()
        self.selection = Selection()
        self.mode = EditorMode(mode)
        self.viewport = Viewport(viewport)
        self.active_tab = "elements"
        self.revision = 0
        self._saved_revision = 0
        self._lock = threading.RLock()
        # une sauvegarde à la fois : la suivante voit l'id attribué par la précédente
        self._save_lock = threading.Lock()

    @classmethod
    def open(cls, gateway, page_id: str, **kwargs) -> "EditorSession":
        """Session sur une page existante chargée via le gateway."""
        return cls(gateway.load(page_id), **kwargs)

    # ── Suivi des modifications ─────────────────────────────────────────────

    @property
    def dirty(self) -> bool:
        return self.revision != self._saved_revision

    def _touch(self) -> None:
        self.revision += 1

    @contextmanager
    def edit(self) -> Iterator[PageDocument]:
        """Modification directe du document, marquée dirty même si le bloc lève."""
        with self._lock:
            try:
                yield self.document
            finally:
                self._touch()

    def replace_document(self, build) -> PageDocument:
        """Remplace le document par `build(document)` ; inchangé si `build` lève."""
        with self._lock:
            document = build(self.document)
            self.document = document
            self._touch()
        return document

    # ── Sélection ───────────────────────────────────────────────────────────

    @property
    def selected_element_id(self) -> Optional[str]:
        return self.selection.element_id

    @property
    def selected_element(self) -> Optional[Element]:
        """Relu contre la séquence courante : un id périmé donne None."""
        return self.selection.resolve(self.document)

    def select(self, element_id: str) -> Element:
        element = self.document.get_element(element_id)
        if element is None:
            raise ElementNotFound(element_id)
        self.selection.select(element_id)
        return element

    def click_element(self, element_id: str) -> Optional[Element]:
        """Clic sur un élément du canvas : sélection en édition, rien en preview."""
        if self.mode is not EditorMode.EDIT:
            return None
        return self.select(element_id)

    def click_canvas(self) -> None:
        self.selection.clear()

    # ── Mode / viewport / palette ───────────────────────────────────────────

    def set_mode(self, mode: Union[str, EditorMode]) -> None:
        self.mode = EditorMode(mode)

    def toggle_preview(self) -> EditorMode:
        self.mode = EditorMode.PREVIEW if self.mode is EditorMode.EDIT else EditorMode.EDIT
        return self.mode

    def set_viewport(self, viewport: Union[str, Viewport]) -> None:
        self.viewport = Viewport(viewport)

    def set_active_tab(self, tab: str) -> None:
        if tab not in TABS:
            raise ValueError(f"Onglet inconnu : {tab!r} (attendu : {', '.join(TABS)})")
        self.active_tab = tab

    # ── Opérations du moteur ────────────────────────────────────────────────

    def add_element(self, element_type: Union[str, ElementType]) -> Element:
        with self._lock:
            element = composition.add_element(self.document, element_type)
            self._touch()
        return element

    def update_element(self, element_id: str, partial: Dict[str, Any]) -> Element:
        with self._lock:
            element = composition.update_element(self.document, element_id, partial)
            self._touch()
        return element

    def delete_element(self, element_id: str) -> Element:
        with self._lock:
            removed = composition.delete_element(self.document, element_id, self.selection)
            self._touch()
        return removed

    def move_element(self, element_id: str, direction: str) -> bool:
        with self._lock:
            moved = composition.move_element(self.document, element_id, direction)
            if moved:
                self._touch()
        return moved

    def move_to_index(self, element_id: str, index: int) -> int:
        with self._lock:
            before = self.document.element_ids()
            target = composition.move_to_index(self.document, element_id, index)
            if self.document.element_ids() != before:
                self._touch()
        return target

    def duplicate_element(self, element_id: str) -> Element:
        with self._lock:
            element = composition.duplicate_element(self.document, element_id)
            self._touch()
        return element

    def load_template(self, template: Template):
        with self._lock:
            elements = composition.load_template(self.document, template)
            self.selection.clear()
            self._touch()
        return elements

    # ── Rendu ───────────────────────────────────────────────────────────────

    def render_canvas(self) -> RenderNode:
        return render_canvas(self.document, self.mode, self.viewport, self.selection.element_id)

    # ── Persistance ─────────────────────────────────────────────────────────

    def _snapshot(self):
        with self._lock:
            return self.document.model_copy(deep=True), self.revision

    def _apply_server_fields(self, stored: PageDocument, revision: int) -> PageDocument:
        with self._lock:
            update = {name: getattr(stored, name) for name in _SERVER_FIELDS}
            self.document = self.document.model_copy(update=update)
            # des éditions faites pendant l'appel restent à sauvegarder
            if self.revision == revision:
                self._saved_revision = revision
        return self.document

    def save(self, gateway) -> PageDocument:
        """Sauvegarde ; en cas d'échec le document et la sélection sont inchangés."""
        with self._save_lock:
            snapshot, revision = self._snapshot()
            stored = gateway.save(snapshot)
            log.debug("Session : révision %d sauvegardée (page %s)", revision, stored.id)
            return self._apply_server_fields(stored, revision)

    def publish(self, gateway) -> PageDocument:
        with self._save_lock:
            snapshot, revision = self._snapshot()
            stored = gateway.publish(snapshot)
            log.debug("Session : révision %d publiée (page %s)", revision, stored.id)
            return self._apply_server_fields(stored, revision)

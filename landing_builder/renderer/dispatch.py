"""
Dispatcher de rendu : (élément, mode, viewport, sélection) → RenderNode.

Le template visuel vient du descripteur du type ; ce module ajoute le cadre
commun (positionnement absolu + zone de clic en édition, flux vertical en
preview). Un type inconnu produit un placeholder, jamais une exception.
"""
import logging
from typing import Optional, Union

from ..core.nodes import RenderNode, h
from ..core.schemas import VIEWPORT_WIDTHS, EditorMode, Element, PageDocument, Viewport
from ..elements import find_descriptor

log = logging.getLogger(__name__)

SELECTED_BORDER = "2px solid #3B82F6"
CANVAS_MIN_HEIGHT = 1000


def canvas_width(viewport: Union[str, Viewport]) -> int:
    return VIEWPORT_WIDTHS[Viewport(viewport)]


def _frame_style(element: Element, mode: EditorMode, selected: bool) -> dict:
    style = dict(element.style)
    if mode is EditorMode.EDIT:
        style.update({
            "position": "absolute",
            "left": f"{element.position.x}px",
            "top": f"{element.position.y}px",
            "width": f"{element.size.width}px",
            "height": f"{element.size.height}px",
            "border": SELECTED_BORDER if selected else "none",
            "cursor": "pointer",
        })
    else:
        style.update({
            "position": "relative",
            "left": "auto",
            "top": "auto",
            "width": "100%",
            "height": "auto",
            "border": "none",
            "cursor": "default",
        })
    return style


def _placeholder(element: Element) -> RenderNode:
    return h(
        "div", f"Unknown element type: {element.type}",
        style={
            "padding": "16px", "border": "1px dashed #D1D5DB", "color": "#6B7280",
            "backgroundColor": "#F9FAFB", "textAlign": "center", "fontSize": "14px",
        },
        classes=["lb-placeholder"],
        data_placeholder="true",
    )


def render_element(
    element: Element,
    mode: Union[str, EditorMode] = EditorMode.EDIT,
    viewport: Union[str, Viewport] = Viewport.DESKTOP,
    selected_id: Optional[str] = None,
) -> RenderNode:
    """Cadre + contenu d'un élément. `viewport` n'agit que sur le canvas."""
    mode = EditorMode(mode)
    selected = mode is EditorMode.EDIT and selected_id is not None and selected_id == element.id

    desc = find_descriptor(element.type)
    if desc is None:
        log.warning("Type d'élément inconnu au rendu : %r (id=%s)", element.type, element.id)
        inner = _placeholder(element)
        extra_style = {}
    else:
        inner = desc.render(element, mode.value)
        extra_style = desc.frame_style(element) if desc.frame_style else {}

    classes = ["lb-element", f"lb-element--{element.type}"]
    attrs = {}
    if mode is EditorMode.EDIT:
        classes.append("lb-element--editable")
        attrs = {"data_element_id": element.id, "data_action": "select"}
    if selected:
        classes.append("lb-element--selected")

    return h(
        "div", inner,
        style={**_frame_style(element, mode, selected), **extra_style},
        classes=classes,
        **attrs,
    )


def _empty_state() -> RenderNode:
    return h(
        "div",
        h("div",
          h("p", "Start building your page", style={"fontSize": "18px", "fontWeight": "500", "marginBottom": "8px"}),
          h("p", "Add elements from the sidebar to begin", style={"fontSize": "14px"}),
          style={"textAlign": "center"}),
        style={"display": "flex", "alignItems": "center", "justifyContent": "center",
               "height": "384px", "color": "#6B7280"},
        classes=["lb-canvas__empty"],
    )


def render_canvas(
    doc: PageDocument,
    mode: Union[str, EditorMode] = EditorMode.EDIT,
    viewport: Union[str, Viewport] = Viewport.DESKTOP,
    selected_id: Optional[str] = None,
) -> RenderNode:
    """Canvas complet dans l'ordre de la séquence ; un clic sur le fond vide la sélection."""
    mode = EditorMode(mode)
    viewport = Viewport(viewport)
    children = [render_element(el, mode, viewport, selected_id) for el in doc.elements]
    if not children:
        children = [_empty_state()]
    return h(
        "div", children,
        style={
            "width": f"{canvas_width(viewport)}px",
            "minHeight": f"{CANVAS_MIN_HEIGHT}px",
            "position": "relative",
            "backgroundColor": "white",
        },
        classes=["lb-canvas", f"lb-canvas--{mode.value}", f"lb-canvas--{viewport.value}"],
        data_action="clear-selection" if mode is EditorMode.EDIT else None,
        data_viewport=viewport.value,
    )

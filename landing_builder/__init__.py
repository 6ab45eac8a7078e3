"""
Landing Builder — moteur de composition de landing pages.

Usage :
    >>> from landing_builder import EditorSession, TemplateCatalog, render_page
    >>> session = EditorSession()
    >>> hero = session.add_element("hero")
    >>> session.update_element(hero.id, {"content": {"title": "Inscriptions ouvertes"}})
    >>> html = render_page(session.document)

Persistance (backend /api/{tenant}/landing-pages) :
    >>> from landing_builder import GatewayConfig, LandingPageGateway
    >>> gateway = LandingPageGateway(GatewayConfig.from_env())
    >>> session.save(gateway)
"""

# ── Modèle ──────────────────────────────────────────────────────────────────
from .core import (
    BuilderError,
    EditorMode,
    Element,
    ElementNotFound,
    ElementType,
    InvalidElementContent,
    InvalidElementType,
    InvalidStatusTransition,
    PageDocument,
    PageSettings,
    PageStatus,
    PersistenceError,
    Position,
    RenderNode,
    Selection,
    Seo,
    Size,
    Template,
    TemplateNotFound,
    Tracking,
    Viewport,
    can_transition,
    duplicate_document,
    new_document,
    slugify,
    transition,
)

# ── Registry / moteur / rendu ───────────────────────────────────────────────
from .elements import (
    catalog,
    default_content,
    default_size,
    default_style,
    get_descriptor,
    validate_content,
    validate_style,
)
from .composition import (
    add_element,
    delete_element,
    duplicate_element,
    load_template,
    move_element,
    move_to_index,
    update_element,
)
from .renderer import render_canvas, render_element, render_page, to_html
from .templates import TemplateCatalog

# ── Session / persistance ───────────────────────────────────────────────────
from .session import EditorSession
from .inspector import InspectorValue, apply_inspector_change, inspector_fields, update_page_settings
from .config import GatewayConfig
from .gateway import LandingPageGateway, LandingPageList

__version__ = "0.1.0"

__all__ = [
    "BuilderError", "ElementNotFound", "InvalidElementContent", "InvalidElementType",
    "InvalidStatusTransition", "PersistenceError", "TemplateNotFound",
    "EditorMode", "Element", "ElementType", "PageDocument", "PageSettings", "PageStatus",
    "Position", "RenderNode", "Selection", "Seo", "Size", "Template", "Tracking", "Viewport",
    "can_transition", "duplicate_document", "new_document", "slugify", "transition",
    "catalog", "default_content", "default_size", "default_style", "get_descriptor",
    "validate_content", "validate_style",
    "add_element", "delete_element", "duplicate_element", "load_template",
    "move_element", "move_to_index", "update_element",
    "render_canvas", "render_element", "render_page", "to_html",
    "TemplateCatalog",
    "EditorSession",
    "InspectorValue", "apply_inspector_change", "inspector_fields", "update_page_settings",
    "GatewayConfig", "LandingPageGateway", "LandingPageList",
]

"""Core module pour landing_builder."""
from .errors import (
    BuilderError,
    ElementNotFound,
    InvalidElementContent,
    InvalidElementType,
    InvalidStatusTransition,
    PersistenceError,
    TemplateNotFound,
)
from .schemas import (
    ELEMENT_TYPES,
    VIEWPORT_WIDTHS,
    EditorMode,
    Element,
    ElementType,
    PageDocument,
    PageSettings,
    PageStatus,
    Position,
    Seo,
    Size,
    Template,
    Tracking,
    Viewport,
    can_transition,
)
from .nodes import RenderNode, h
from .selection import Selection
from .ids import clone_elements, new_element_id
from .documents import duplicate_document, new_document, slugify, transition

__all__ = [
    "BuilderError",
    "ElementNotFound",
    "InvalidElementContent",
    "InvalidElementType",
    "InvalidStatusTransition",
    "PersistenceError",
    "TemplateNotFound",
    "ELEMENT_TYPES",
    "VIEWPORT_WIDTHS",
    "EditorMode",
    "Element",
    "ElementType",
    "PageDocument",
    "PageSettings",
    "PageStatus",
    "Position",
    "Seo",
    "Size",
    "Template",
    "Tracking",
    "Viewport",
    "can_transition",
    "RenderNode",
    "h",
    "Selection",
    "clone_elements",
    "new_element_id",
    "duplicate_document",
    "new_document",
    "slugify",
    "transition",
]

"""
Panneau de propriétés — projection d'un élément en champs de formulaire.

inspector_fields(element, mode)          → [InspectorValue]
apply_inspector_change(session, key, v)  → coercition + update_element
update_page_settings(session, **fields)  → nom, slug, SEO, CSS/JS, tracking
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from .core.documents import slugify
from .core.errors import BuilderError, InvalidElementContent
from .core.schemas import EditorMode, Element, PageDocument
from .elements import InspectorField, find_descriptor

log = logging.getLogger(__name__)

# Position / taille : mode édition uniquement (ignorées en preview)
LAYOUT_FIELDS = (
    InspectorField("position.x", "X", kind="number", default=0),
    InspectorField("position.y", "Y", kind="number", default=0),
    InspectorField("size.width", "Width", kind="number", default=400, minimum=0),
    InspectorField("size.height", "Height", kind="number", default=100, minimum=0),
)

_TRUE = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class InspectorValue:
    field: InspectorField
    value: Any

    @property
    def key(self) -> str:
        return self.field.key

    def to_dict(self) -> Dict[str, Any]:
        return {**self.field.to_dict(), "value": self.value}


def _read(element: Element, field: InspectorField) -> Any:
    source: Any = {
        "content": element.content,
        "style": element.style,
        "position": element.position.model_dump(),
        "size": element.size.model_dump(),
    }.get(field.target, {})
    for part in field.path:
        if not isinstance(source, dict) or part not in source:
            return field.default
        source = source[part]
    return field.default if source is None else source


def fields_for(element: Element, mode: Union[str, EditorMode] = EditorMode.EDIT) -> List[InspectorField]:
    desc = find_descriptor(element.type)
    fields = list(desc.inspector) if desc is not None else []
    if EditorMode(mode) is EditorMode.EDIT:
        fields.extend(LAYOUT_FIELDS)
    return fields


def inspector_fields(
    element: Element, mode: Union[str, EditorMode] = EditorMode.EDIT
) -> List[InspectorValue]:
    """Champs + valeurs courantes. Type inconnu : position/taille seulement."""
    return [InspectorValue(f, _read(element, f)) for f in fields_for(element, mode)]


# ── Coercition ───────────────────────────────────────────────────────────────

def _to_int(field: InspectorField, value: Any) -> int:
    # saisie illisible → valeur par défaut du champ (comme parseInt(v) || défaut)
    try:
        number = int(float(value))
    except (TypeError, ValueError, OverflowError):
        number = int(field.default or 0)
    if field.minimum is not None:
        number = max(number, field.minimum)
    if field.maximum is not None:
        number = min(number, field.maximum)
    return number


def coerce(field: InspectorField, value: Any) -> Any:
    if field.kind == "number" or (field.kind == "select" and field.minimum is not None):
        return _to_int(field, value)
    if field.kind == "toggle":
        if isinstance(value, str):
            return value.strip().lower() in _TRUE
        return bool(value)
    if field.kind == "select" and field.options:
        allowed = {v for v, _ in field.options}
        if str(value) not in allowed:
            raise InvalidElementContent(f"Valeur {value!r} hors des options de {field.key}")
        return str(value)
    return "" if value is None else str(value)


def _partial(field: InspectorField, value: Any) -> Dict[str, Any]:
    """content.primaryButton.text = v → {"content": {"primaryButton": {"text": v}}}"""
    nested: Any = value
    for part in reversed(field.path):
        nested = {part: nested}
    return {field.target: nested}


def apply_inspector_change(session, key: str, value: Any, element_id: Optional[str] = None) -> Element:
    """Applique une saisie du panneau à l'élément sélectionné (ou `element_id`)."""
    if element_id is None:
        element = session.selected_element
        if element is None:
            raise BuilderError("Aucun élément sélectionné")
    else:
        element = session.select(element_id)

    field = next((f for f in fields_for(element, session.mode) if f.key == key), None)
    if field is None:
        raise InvalidElementContent(f"Champ {key!r} non éditable pour {element.type!r}")

    coerced = coerce(field, value)
    log.debug("Inspecteur : %s.%s = %r", element.id, key, coerced)
    return session.update_element(element.id, _partial(field, coerced))


# ── Réglages de page ─────────────────────────────────────────────────────────

_PAGE_FIELDS = {"name", "slug", "title", "description"}
_SEO_FIELDS = {"seo_title": "title", "seo_description": "description", "seo_keywords": "keywords"}
_SETTINGS_FIELDS = {"custom_css", "custom_js"}
_TRACKING_FIELDS = {"google_analytics", "facebook_pixel"}


def update_page_settings(session, **fields: Any):
    """Onglet « Settings » : métadonnées, SEO, CSS/JS personnalisés, tracking."""
    known = _PAGE_FIELDS | set(_SEO_FIELDS) | _SETTINGS_FIELDS | _TRACKING_FIELDS
    unknown = set(fields) - known
    if unknown:
        raise ValueError(f"Réglage(s) inconnu(s) : {', '.join(sorted(unknown))}")
    if isinstance(fields.get("slug"), str):
        fields["slug"] = slugify(fields["slug"])

    def build(doc: PageDocument) -> PageDocument:
        # document candidat entièrement revalidé : tout ou rien
        data = doc.model_dump()
        data.update({k: v for k, v in fields.items() if k in _PAGE_FIELDS})
        data["seo"].update({_SEO_FIELDS[k]: v for k, v in fields.items() if k in _SEO_FIELDS})
        data["settings"].update({k: v for k, v in fields.items() if k in _SETTINGS_FIELDS})
        data["settings"]["tracking"].update({k: v for k, v in fields.items() if k in _TRACKING_FIELDS})
        return PageDocument.model_validate(data)

    document = session.replace_document(build)
    log.debug("Réglages de page mis à jour : %s", ", ".join(sorted(fields)))
    return document

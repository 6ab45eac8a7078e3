"""
Registry des éléments — une table de descripteurs indexée par ElementType.

Remplace les trois switch (défauts / inspecteur / rendu) par une seule
recherche. L'exhaustivité est vérifiée à l'import : un type sans
descripteur est une erreur de programmation, pas un cas runtime.
"""
from typing import Any, Dict, Iterable, List, Mapping, Union

from pydantic import ValidationError

from ..core.errors import InvalidElementContent, InvalidElementType
from ..core.schemas import Element, ElementType, Size
from .base import ContentModel, ElementDescriptor, InspectorField, StyleDeclarations
from . import (
    button, cta, divider, features, footer, form, header,
    hero, image, navbar, spacer, testimonial, text, video,
)

_DESCRIPTORS: Dict[ElementType, ElementDescriptor] = {
    d.type: d
    for d in (
        header.DESCRIPTOR,
        text.DESCRIPTOR,
        image.DESCRIPTOR,
        video.DESCRIPTOR,
        button.DESCRIPTOR,
        form.DESCRIPTOR,
        testimonial.DESCRIPTOR,
        features.DESCRIPTOR,
        cta.DESCRIPTOR,
        divider.DESCRIPTOR,
        spacer.DESCRIPTOR,
        hero.DESCRIPTOR,
        footer.DESCRIPTOR,
        navbar.DESCRIPTOR,
    )
}

# Ordre d'affichage de la palette
GROUPS = ("basic", "layout", "form", "navigation", "spacing")


def check_exhaustive(table: Mapping[ElementType, ElementDescriptor]) -> None:
    """Lève RuntimeError si un ElementType n'a pas de descripteur (ou l'inverse)."""
    missing = [t.value for t in ElementType if t not in table]
    if missing:
        raise RuntimeError(f"Descripteur manquant pour : {', '.join(missing)}")
    for key, desc in table.items():
        if desc.type is not key:
            raise RuntimeError(f"Descripteur {desc.type.value!r} enregistré sous {key.value!r}")
        if desc.group not in GROUPS:
            raise RuntimeError(f"Groupe inconnu {desc.group!r} pour {key.value!r}")


check_exhaustive(_DESCRIPTORS)


# ── Lookup ───────────────────────────────────────────────────────────────────

def resolve_type(element_type: Union[str, ElementType]) -> ElementType:
    try:
        return ElementType(element_type)
    except ValueError:
        raise InvalidElementType(str(element_type)) from None


def get_descriptor(element_type: Union[str, ElementType]) -> ElementDescriptor:
    return _DESCRIPTORS[resolve_type(element_type)]


def find_descriptor(element_type: str):
    """Comme get_descriptor mais None pour un type inconnu (rendu tolérant)."""
    try:
        return get_descriptor(element_type)
    except InvalidElementType:
        return None


def descriptors() -> List[ElementDescriptor]:
    return list(_DESCRIPTORS.values())


def default_content(element_type: Union[str, ElementType]) -> Dict[str, Any]:
    return get_descriptor(element_type).new_content()


def default_style(element_type: Union[str, ElementType]) -> Dict[str, Any]:
    return get_descriptor(element_type).new_style()


def default_size(element_type: Union[str, ElementType]) -> Size:
    return get_descriptor(element_type).new_size()


# ── Validation ───────────────────────────────────────────────────────────────

def _first_error(exc: ValidationError) -> str:
    err = exc.errors()[0]
    loc = ".".join(str(p) for p in err.get("loc", ()))
    return f"{loc}: {err.get('msg')}" if loc else err.get("msg", str(exc))


def validate_content(element_type: Union[str, ElementType], content: Dict[str, Any]) -> None:
    desc = get_descriptor(element_type)
    try:
        desc.content_model.model_validate(content)
    except ValidationError as e:
        raise InvalidElementContent(
            f"Contenu invalide pour {desc.type.value!r} — {_first_error(e)}"
        ) from e


def validate_style(style: Dict[str, Any]) -> None:
    try:
        StyleDeclarations.model_validate(style)
    except ValidationError as e:
        raise InvalidElementContent(f"Style invalide — {_first_error(e)}") from e


def validate_element(element: Element) -> None:
    """Contrôle schéma d'un élément connu ; un type inconnu est accepté tel quel."""
    if not element.is_known_type:
        return
    validate_content(element.type, element.content)
    validate_style(element.style)


def validate_elements(elements: Iterable[Element]) -> List[str]:
    """Liste des erreurs (vide si tout est conforme)."""
    errors = []
    for el in elements:
        try:
            validate_element(el)
        except InvalidElementContent as e:
            errors.append(f"{el.id}: {e}")
    return errors


# ── Catalogue (palette + API) ────────────────────────────────────────────────

def catalog() -> List[Dict[str, Any]]:
    """Descripteurs sérialisables, groupés dans l'ordre de la palette."""
    ordered = sorted(_DESCRIPTORS.values(), key=lambda d: GROUPS.index(d.group))
    return [d.to_catalog_entry() for d in ordered]


__all__ = [
    "ContentModel", "ElementDescriptor", "InspectorField", "StyleDeclarations",
    "GROUPS", "check_exhaustive",
    "resolve_type", "get_descriptor", "find_descriptor", "descriptors",
    "default_content", "default_style", "default_size",
    "validate_content", "validate_style", "validate_element", "validate_elements",
    "catalog",
]

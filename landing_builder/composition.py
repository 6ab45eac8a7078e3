"""
Moteur de composition — mutations de la séquence d'éléments d'un PageDocument.

Chaque opération valide d'abord puis remplace `doc.elements` par une liste
entièrement construite : en cas d'erreur le document reste intact.
"""
import copy
import logging
from typing import Any, Dict, List, Optional, Union

from .core.errors import ElementNotFound, InvalidElementContent
from .core.ids import clone_elements, new_element_id
from .core.schemas import Element, ElementType, PageDocument, Position, Size, Template
from .core.selection import Selection
from .elements import get_descriptor, validate_content, validate_style

log = logging.getLogger(__name__)

# Clés acceptées par update_element (`styles` = clé JSON de `style`)
_PARTIAL_KEYS = {"content", "style", "styles", "position", "size"}

_DIRECTIONS = ("up", "down")


def _index_of(doc: PageDocument, element_id: str) -> int:
    for i, el in enumerate(doc.elements):
        if el.id == element_id:
            return i
    raise ElementNotFound(element_id)


def _deep_merge(base: Dict[str, Any], patch: Dict[str, Any]) -> Dict[str, Any]:
    """Fusion récursive des sous-dicts ; listes remplacées en bloc, None supprime la clé."""
    merged = copy.deepcopy(base)
    for key, value in patch.items():
        if value is None:
            merged.pop(key, None)
        elif isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


# ── Ajout ────────────────────────────────────────────────────────────────────

def add_element(doc: PageDocument, element_type: Union[str, ElementType]) -> Element:
    """Nouvel élément aux valeurs par défaut, ajouté en fin de séquence."""
    desc = get_descriptor(element_type)
    index = len(doc.elements)
    element = Element(
        id=new_element_id(),
        type=desc.type.value,
        content=desc.new_content(),
        style=desc.new_style(),
        position=Position(x=50, y=50 + index * 80),
        size=desc.new_size(),
    )
    doc.elements = [*doc.elements, element]
    log.debug("Élément %s (%s) ajouté en position %d", element.id, element.type, index)
    return element


# ── Mise à jour ──────────────────────────────────────────────────────────────

def update_element(doc: PageDocument, element_id: str, partial: Dict[str, Any]) -> Element:
    """
    Fusionne `partial` dans l'élément et le remplace par une nouvelle valeur.

    partial : {content?, style? | styles?, position?, size?}
    """
    index = _index_of(doc, element_id)
    unknown = set(partial) - _PARTIAL_KEYS
    if unknown:
        raise InvalidElementContent(f"Clé(s) de mise à jour inconnue(s) : {', '.join(sorted(unknown))}")
    if "style" in partial and "styles" in partial:
        raise InvalidElementContent("`style` et `styles` sont la même clé : n'en fournir qu'une")
    for key in sorted(set(partial) & _PARTIAL_KEYS):
        if partial[key] is not None and not isinstance(partial[key], dict):
            raise InvalidElementContent(f"{key} doit être un objet, reçu {type(partial[key]).__name__}")

    current = doc.elements[index]
    style_patch = partial.get("style") or partial.get("styles") or {}
    content = _deep_merge(current.content, partial.get("content") or {})
    style = _deep_merge(current.style, style_patch)

    if current.is_known_type:
        validate_content(current.type, content)
        validate_style(style)

    try:
        position = Position(**{**current.position.model_dump(), **(partial.get("position") or {})})
        size = Size(**{**current.size.model_dump(), **(partial.get("size") or {})})
    except (TypeError, ValueError) as e:
        raise InvalidElementContent(f"Position/taille invalide — {e}") from e

    updated = Element(
        id=current.id,
        type=current.type,
        content=content,
        style=style,
        position=position,
        size=size,
    )
    elements = list(doc.elements)
    elements[index] = updated
    doc.elements = elements
    log.debug("Élément %s mis à jour (%s)", element_id, ", ".join(sorted(partial)))
    return updated


# ── Suppression / réordonnancement ───────────────────────────────────────────

def delete_element(
    doc: PageDocument, element_id: str, selection: Optional[Selection] = None
) -> Element:
    index = _index_of(doc, element_id)
    removed = doc.elements[index]
    doc.elements = doc.elements[:index] + doc.elements[index + 1:]
    if selection is not None and selection.is_selected(element_id):
        selection.clear()
    log.debug("Élément %s supprimé", element_id)
    return removed


def move_element(doc: PageDocument, element_id: str, direction: str) -> bool:
    """Échange avec le voisin ; False (no-op) en bord de séquence."""
    if direction not in _DIRECTIONS:
        raise ValueError(f"Direction inconnue : {direction!r} (attendu : up | down)")
    index = _index_of(doc, element_id)
    target = index - 1 if direction == "up" else index + 1
    if target < 0 or target >= len(doc.elements):
        return False
    elements = list(doc.elements)
    elements[index], elements[target] = elements[target], elements[index]
    doc.elements = elements
    log.debug("Élément %s déplacé %s (%d → %d)", element_id, direction, index, target)
    return True


def move_to_index(doc: PageDocument, element_id: str, index: int) -> int:
    """Déplace l'élément à `index` (borné à [0, len-1]) ; retourne l'index effectif."""
    current = _index_of(doc, element_id)
    target = max(0, min(int(index), len(doc.elements) - 1))
    if target != current:
        elements = list(doc.elements)
        element = elements.pop(current)
        elements.insert(target, element)
        doc.elements = elements
        log.debug("Élément %s déplacé %d → %d", element_id, current, target)
    return target


def duplicate_element(doc: PageDocument, element_id: str) -> Element:
    """Copie profonde (id neuf, décalée de 20px) insérée juste après la source."""
    index = _index_of(doc, element_id)
    source = doc.elements[index]
    copy_el = source.model_copy(
        update={
            "id": new_element_id(),
            "position": Position(x=source.position.x + 20, y=source.position.y + 20),
        },
        deep=True,
    )
    elements = list(doc.elements)
    elements.insert(index + 1, copy_el)
    doc.elements = elements
    log.debug("Élément %s dupliqué → %s", element_id, copy_el.id)
    return copy_el


# ── Templates ────────────────────────────────────────────────────────────────

def load_template(doc: PageDocument, template: Template) -> List[Element]:
    """Remplace toute la séquence par des copies neuves des prototypes du template."""
    elements = clone_elements(template.elements)
    doc.elements = elements
    doc.name = template.name
    doc.title = template.name
    log.debug("Template %s chargé (%d éléments)", template.id, len(elements))
    return elements

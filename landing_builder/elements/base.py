"""
Descripteur d'élément — une entrée par type dans le registry.

Regroupe ce qui était dispersé en trois switch (défauts, inspecteur, rendu) :
  content_model  : schéma Pydantic du contenu (clés autorisées)
  defaults       : contenu / style / taille initiaux
  inspector      : champs éditables dans le panneau de propriétés
  render         : template visuel (Element, mode) → RenderNode
"""
import copy
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple, Type, Union

from pydantic import BaseModel, ConfigDict

from ..core.nodes import RenderNode
from ..core.schemas import EditorMode, Element, ElementType, Size

StyleValue = Optional[Union[str, int, float]]


class ContentModel(BaseModel):
    """Base des schémas de contenu : clés inconnues refusées, toutes optionnelles."""
    model_config = ConfigDict(extra="forbid")


class StyleDeclarations(BaseModel):
    """Déclarations de présentation autorisées (valeurs simples, pas d'expressions)."""
    model_config = ConfigDict(extra="forbid")

    backgroundColor: StyleValue = None
    color: StyleValue = None
    padding: StyleValue = None
    margin: StyleValue = None
    textAlign: StyleValue = None
    fontSize: StyleValue = None
    fontWeight: StyleValue = None
    fontStyle: StyleValue = None
    lineHeight: StyleValue = None
    borderRadius: StyleValue = None
    border: StyleValue = None
    borderColor: StyleValue = None
    borderWidth: StyleValue = None
    borderStyle: StyleValue = None
    boxShadow: StyleValue = None
    cursor: StyleValue = None
    minHeight: StyleValue = None
    height: StyleValue = None
    width: StyleValue = None
    backgroundSize: StyleValue = None
    backgroundPosition: StyleValue = None
    display: StyleValue = None
    justifyContent: StyleValue = None
    alignItems: StyleValue = None
    objectFit: StyleValue = None


@dataclass(frozen=True)
class InspectorField:
    """Champ du panneau de propriétés. `key` = cible.chemin (ex: content.primaryButton.text)."""
    key: str
    label: str
    kind: str = "text"          # text | textarea | number | color | select | url | toggle
    default: Any = None         # valeur affichée si absente
    options: Tuple[Tuple[str, str], ...] = ()
    minimum: Optional[int] = None
    maximum: Optional[int] = None

    @property
    def target(self) -> str:
        return self.key.split(".", 1)[0]

    @property
    def path(self) -> List[str]:
        return self.key.split(".")[1:]

    def to_dict(self) -> Dict[str, Any]:
        data = {"key": self.key, "label": self.label, "kind": self.kind}
        if self.default is not None:
            data["default"] = self.default
        if self.options:
            data["options"] = [{"value": v, "label": lbl} for v, lbl in self.options]
        if self.minimum is not None:
            data["minimum"] = self.minimum
        if self.maximum is not None:
            data["maximum"] = self.maximum
        return data


RenderTemplate = Callable[[Element, EditorMode], Union[RenderNode, List[RenderNode]]]
FrameStyle = Callable[[Element], Dict[str, Any]]


@dataclass(frozen=True)
class ElementDescriptor:
    type: ElementType
    label: str
    group: str
    content_model: Type[ContentModel]
    content_defaults: Dict[str, Any]
    style_defaults: Dict[str, Any]
    size_defaults: Tuple[int, int]
    render: RenderTemplate
    inspector: Tuple[InspectorField, ...] = ()
    # style additionnel du cadre (ex: image de fond du hero, hauteur du spacer)
    frame_style: Optional[FrameStyle] = None

    def new_content(self) -> Dict[str, Any]:
        return copy.deepcopy(self.content_defaults)

    def new_style(self) -> Dict[str, Any]:
        return copy.deepcopy(self.style_defaults)

    def new_size(self) -> Size:
        width, height = self.size_defaults
        return Size(width=width, height=height)

    def to_catalog_entry(self) -> Dict[str, Any]:
        width, height = self.size_defaults
        return {
            "type": self.type.value,
            "label": self.label,
            "group": self.group,
            "defaultContent": self.new_content(),
            "defaultStyle": self.new_style(),
            "defaultSize": {"width": width, "height": height},
            "inspector": [f.to_dict() for f in self.inspector],
        }


# ── Helpers partagés par les templates de rendu ───────────────────────────────

def text_of(content: Dict[str, Any], key: str, default: str = "") -> str:
    value = content.get(key)
    return default if value is None else str(value)


def items_of(content: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
    """Liste de sous-enregistrements ; tout ce qui n'est pas un dict est ignoré."""
    value = content.get(key) or []
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def pick_style(style: Dict[str, Any], key: str, default: Any) -> Any:
    value = style.get(key)
    return default if value in (None, "") else value

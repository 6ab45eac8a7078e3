"""
Arbre de rendu — sortie du dispatcher, indépendante du format final.

Un RenderNode décrit un nœud HTML (tag, attributs, style, classes, enfants).
Le renderer HTML le sérialise ; les tests l'inspectent directement.
"""
from typing import Any, Callable, Dict, Iterator, List, Optional, Union

from pydantic import BaseModel, Field


class RenderNode(BaseModel):
    tag: str
    attrs: Dict[str, Any] = Field(default_factory=dict)
    style: Dict[str, Any] = Field(default_factory=dict)
    classes: List[str] = Field(default_factory=list)
    children: List[Union["RenderNode", str]] = Field(default_factory=list)

    def walk(self) -> Iterator["RenderNode"]:
        """Parcours en profondeur (self inclus)."""
        yield self
        for child in self.children:
            if isinstance(child, RenderNode):
                yield from child.walk()

    def find_all(self, predicate: Callable[["RenderNode"], bool]) -> List["RenderNode"]:
        return [n for n in self.walk() if predicate(n)]

    def find(self, tag: str) -> Optional["RenderNode"]:
        for node in self.walk():
            if node.tag == tag:
                return node
        return None

    def text(self) -> str:
        """Texte concaténé de tout le sous-arbre."""
        parts = []
        for child in self.children:
            parts.append(child.text() if isinstance(child, RenderNode) else child)
        return "".join(parts)


RenderNode.model_rebuild()


def _flatten(children) -> Iterator[Any]:
    for child in children:
        if child is None or child == "":
            continue
        if isinstance(child, (list, tuple)):
            yield from _flatten(child)
        else:
            yield child


def h(
    tag: str,
    *children: Any,
    style: Optional[Dict[str, Any]] = None,
    classes: Optional[List[str]] = None,
    **attrs: Any,
) -> RenderNode:
    """
    Fabrique de nœud.

    - enfants None / "" ignorés, nombres convertis en texte
    - attributs None ignorés ; `data_element_id` → `data-element-id`
    """
    kids: List[Union[RenderNode, str]] = [
        child if isinstance(child, RenderNode) else str(child)
        for child in _flatten(children)
    ]
    clean_attrs = {
        key.rstrip("_").replace("_", "-"): value
        for key, value in attrs.items()
        if value is not None and value is not False
    }
    return RenderNode(
        tag=tag,
        attrs=clean_attrs,
        style=dict(style or {}),
        classes=list(classes or []),
        children=kids,
    )

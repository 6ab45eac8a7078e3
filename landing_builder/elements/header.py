"""Élément Header — titre h1..h6."""
from pydantic import Field

from ..core.nodes import h
from ..core.schemas import ElementType
from .base import ContentModel, ElementDescriptor, InspectorField, text_of


class HeaderContent(ContentModel):
    text: str = ""
    level: int = Field(default=2, ge=1, le=6)


def heading_level(value) -> int:
    """Niveau borné à 1..6 (2 si illisible)."""
    try:
        level = int(value)
    except (TypeError, ValueError):
        return 2
    return min(max(level, 1), 6)


def render(element, mode):
    level = heading_level(element.content.get("level", 2))
    return h(f"h{level}", text_of(element.content, "text"), style=element.style)


DESCRIPTOR = ElementDescriptor(
    type=ElementType.HEADER,
    label="Header",
    group="basic",
    content_model=HeaderContent,
    content_defaults={"text": "New Header", "level": 2},
    style_defaults={"fontSize": 32, "fontWeight": "bold", "color": "#1F2937", "textAlign": "center"},
    size_defaults=(800, 80),
    render=render,
    inspector=(
        InspectorField("content.text", "Header text"),
        InspectorField(
            "content.level", "Level", kind="select", default=2,
            options=tuple((str(i), f"H{i}") for i in range(1, 7)),
            minimum=1, maximum=6,
        ),
        InspectorField("style.fontSize", "Font size", kind="number", default=32, minimum=1),
        InspectorField(
            "style.textAlign", "Alignment", kind="select", default="left",
            options=(("left", "Left"), ("center", "Center"), ("right", "Right")),
        ),
        InspectorField("style.color", "Color", kind="color", default="#000000"),
    ),
)

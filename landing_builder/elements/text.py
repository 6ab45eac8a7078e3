"""Élément Text — paragraphe libre."""
from ..core.nodes import h
from ..core.schemas import ElementType
from .base import ContentModel, ElementDescriptor, InspectorField, text_of


class TextContent(ContentModel):
    text: str = ""


def render(element, mode):
    return h("p", text_of(element.content, "text"), style=element.style)


DESCRIPTOR = ElementDescriptor(
    type=ElementType.TEXT,
    label="Text",
    group="basic",
    content_model=TextContent,
    content_defaults={"text": "Your text here..."},
    style_defaults={"fontSize": 16, "color": "#4B5563", "lineHeight": 1.6},
    size_defaults=(600, 100),
    render=render,
    inspector=(
        InspectorField("content.text", "Text content", kind="textarea"),
        InspectorField("style.fontSize", "Font size", kind="number", default=16, minimum=1),
        InspectorField("style.color", "Color", kind="color", default="#4B5563"),
    ),
)

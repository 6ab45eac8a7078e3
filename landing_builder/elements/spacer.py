"""Élément Spacer — espace vertical (visible en pointillés en édition uniquement)."""
from pydantic import Field

from ..core.nodes import h
from ..core.schemas import ElementType
from .base import ContentModel, ElementDescriptor, InspectorField


class SpacerContent(ContentModel):
    height: int = Field(default=50, ge=0)


def spacer_height(element) -> int:
    try:
        return max(int(element.content.get("height") or 50), 0)
    except (TypeError, ValueError):
        return 50


def render(element, mode):
    if mode != "edit":
        return []
    return h(
        "div", "Spacer",
        style={
            "width": "100%", "height": "100%", "border": "2px dashed #D1D5DB",
            "display": "flex", "alignItems": "center", "justifyContent": "center",
            "color": "#9CA3AF", "fontSize": "12px",
        },
        classes=["lb-spacer__guide"],
    )


def frame_style(element):
    return {"height": f"{spacer_height(element)}px", "backgroundColor": "transparent"}


DESCRIPTOR = ElementDescriptor(
    type=ElementType.SPACER,
    label="Spacer",
    group="spacing",
    content_model=SpacerContent,
    content_defaults={"height": 50},
    style_defaults={"height": "50px"},
    size_defaults=(400, 50),
    render=render,
    frame_style=frame_style,
    inspector=(
        InspectorField("content.height", "Spacer height (px)", kind="number", default=50, minimum=0),
    ),
)

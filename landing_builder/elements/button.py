"""Élément Button — lien stylé en bouton."""
from typing import Literal

from ..core.nodes import h
from ..core.schemas import ElementType
from .base import ContentModel, ElementDescriptor, InspectorField, text_of


class ButtonContent(ContentModel):
    text: str = ""
    action: str = "#"
    style: Literal["primary", "secondary", "outline"] = "primary"


def render(element, mode):
    c = element.content
    variant = text_of(c, "style", "primary")
    return h(
        "a",
        text_of(c, "text"),
        href=text_of(c, "action", "#"),
        role="button",
        style=element.style,
        classes=["lb-btn", f"lb-btn--{variant}"],
    )


DESCRIPTOR = ElementDescriptor(
    type=ElementType.BUTTON,
    label="Button",
    group="basic",
    content_model=ButtonContent,
    content_defaults={"text": "Click Me", "action": "#", "style": "primary"},
    style_defaults={
        "backgroundColor": "#3B82F6",
        "color": "white",
        "padding": "12px 24px",
        "borderRadius": "6px",
        "border": "none",
        "cursor": "pointer",
        "fontSize": 16,
        "fontWeight": "500",
    },
    size_defaults=(200, 50),
    render=render,
    inspector=(
        InspectorField("content.text", "Button text"),
        InspectorField("content.action", "Button link", kind="url", default="#"),
        InspectorField(
            "content.style", "Variant", kind="select", default="primary",
            options=(("primary", "Primary"), ("secondary", "Secondary"), ("outline", "Outline")),
        ),
        InspectorField("style.backgroundColor", "Background color", kind="color", default="#3B82F6"),
        InspectorField("style.color", "Text color", kind="color", default="#ffffff"),
    ),
)

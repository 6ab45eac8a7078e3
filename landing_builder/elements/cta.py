"""Élément CTA — bandeau d'appel à l'action."""
from ..core.nodes import h
from ..core.schemas import ElementType
from .base import ContentModel, ElementDescriptor, InspectorField, pick_style, text_of


class CTAContent(ContentModel):
    title: str = ""
    description: str = ""
    buttonText: str = ""
    buttonAction: str = "#"


def render(element, mode):
    c = element.content
    return [
        h("h2", text_of(c, "title"), style={"fontSize": "36px", "fontWeight": "bold", "marginBottom": "16px"}),
        h("p", text_of(c, "description"), style={"fontSize": "18px", "marginBottom": "32px"}),
        h(
            "a", text_of(c, "buttonText"),
            href=text_of(c, "buttonAction", "#"),
            role="button",
            style={
                "backgroundColor": "white",
                # le bouton reprend la couleur de fond du bandeau
                "color": pick_style(element.style, "backgroundColor", "#3B82F6"),
                "padding": "12px 24px",
                "borderRadius": "6px",
                "border": "none",
                "fontSize": "16px",
                "fontWeight": "bold",
                "textDecoration": "none",
            },
            classes=["lb-cta__btn"],
        ),
    ]


DESCRIPTOR = ElementDescriptor(
    type=ElementType.CTA,
    label="CTA",
    group="layout",
    content_model=CTAContent,
    content_defaults={
        "title": "Ready to Get Started?",
        "description": "Join thousands of satisfied students",
        "buttonText": "Get Started Now",
        "buttonAction": "#",
    },
    style_defaults={
        "backgroundColor": "#3B82F6",
        "color": "white",
        "padding": "80px 20px",
        "textAlign": "center",
        "borderRadius": "12px",
    },
    size_defaults=(800, 300),
    render=render,
    inspector=(
        InspectorField("content.title", "Title"),
        InspectorField("content.description", "Description", kind="textarea"),
        InspectorField("content.buttonText", "Button text"),
        InspectorField("content.buttonAction", "Button link", kind="url", default="#"),
        InspectorField("style.backgroundColor", "Background color", kind="color", default="#3B82F6"),
    ),
)

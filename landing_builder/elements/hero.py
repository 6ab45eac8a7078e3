"""Élément Hero — titre + sous-titre + 2 CTA sur fond couleur ou image."""
from typing import Optional

from ..core.nodes import h
from ..core.schemas import ElementType
from .base import ContentModel, ElementDescriptor, InspectorField, pick_style, text_of


class HeroButton(ContentModel):
    text: str = ""
    action: str = "#"


class HeroContent(ContentModel):
    title: str = ""
    subtitle: str = ""
    backgroundImage: str = ""
    primaryButton: Optional[HeroButton] = None
    secondaryButton: Optional[HeroButton] = None


_BTN_BASE = {
    "padding": "12px 24px",
    "borderRadius": "6px",
    "cursor": "pointer",
    "fontSize": "16px",
    "textDecoration": "none",
}


def _button(data, primary: bool):
    if not isinstance(data, dict) or not data.get("text"):
        return None
    if primary:
        style = {**_BTN_BASE, "backgroundColor": "#3B82F6", "color": "white", "border": "none"}
    else:
        style = {**_BTN_BASE, "backgroundColor": "transparent", "color": "#3B82F6",
                 "border": "2px solid #3B82F6"}
    return h(
        "a", data.get("text"),
        href=data.get("action") or "#",
        role="button",
        style=style,
        classes=["lb-hero__btn", "lb-hero__btn--primary" if primary else "lb-hero__btn--secondary"],
    )


def render(element, mode):
    c, s = element.content, element.style
    buttons = [_button(c.get("primaryButton"), True), _button(c.get("secondaryButton"), False)]
    buttons = [b for b in buttons if b is not None]
    return [
        h("h1", text_of(c, "title"),
          style={"fontSize": "48px", "fontWeight": "bold", "marginBottom": "16px",
                 "color": pick_style(s, "color", "#1F2937")}),
        h("p", text_of(c, "subtitle"),
          style={"fontSize": "24px", "marginBottom": "32px",
                 "color": pick_style(s, "color", "#6B7280")}),
        h("div", buttons, style={"display": "flex", "gap": "16px", "justifyContent": "center"})
        if buttons else None,
    ]


def frame_style(element):
    bg = element.content.get("backgroundImage")
    return {"backgroundImage": f"url('{bg}')"} if bg else {}


DESCRIPTOR = ElementDescriptor(
    type=ElementType.HERO,
    label="Hero",
    group="layout",
    content_model=HeroContent,
    content_defaults={
        "title": "Welcome to Our Page",
        "subtitle": "Discover amazing opportunities",
        "backgroundImage": "",
        "primaryButton": {"text": "Get Started", "action": "#"},
        "secondaryButton": {"text": "Learn More", "action": "#"},
    },
    style_defaults={
        "backgroundColor": "#f8fafc",
        "padding": "100px 20px",
        "textAlign": "center",
        "minHeight": "600px",
        "backgroundSize": "cover",
        "backgroundPosition": "center",
    },
    size_defaults=(1200, 600),
    render=render,
    frame_style=frame_style,
    inspector=(
        InspectorField("content.title", "Hero title"),
        InspectorField("content.subtitle", "Hero subtitle", kind="textarea"),
        InspectorField("content.backgroundImage", "Background image URL", kind="url"),
        InspectorField("content.primaryButton.text", "Primary button text"),
        InspectorField("content.primaryButton.action", "Primary button link", kind="url", default="#"),
        InspectorField("content.secondaryButton.text", "Secondary button text"),
        InspectorField("content.secondaryButton.action", "Secondary button link", kind="url", default="#"),
        InspectorField("style.backgroundColor", "Background color", kind="color", default="#f8fafc"),
    ),
)

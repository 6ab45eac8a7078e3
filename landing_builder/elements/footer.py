"""Élément Footer — mentions + liens légaux."""
from typing import List

from ..core.nodes import h
from ..core.schemas import ElementType
from .base import ContentModel, ElementDescriptor, InspectorField, items_of, pick_style, text_of
from .navbar import NavLink


class FooterContent(ContentModel):
    text: str = ""
    links: List[NavLink] = []


def render(element, mode):
    c = element.content
    link_color = pick_style(element.style, "color", "#9CA3AF")
    return [
        h("p", text_of(c, "text"), style={"marginBottom": "16px"}),
        h(
            "div",
            [
                h("a", link.get("text"), href=link.get("url") or "#",
                  style={"color": link_color, "textDecoration": "none", "fontSize": "14px"},
                  classes=["lb-footer__link"])
                for link in items_of(c, "links")
            ],
            style={"display": "flex", "gap": "32px", "justifyContent": "center"},
        ),
    ]


DESCRIPTOR = ElementDescriptor(
    type=ElementType.FOOTER,
    label="Footer",
    group="navigation",
    content_model=FooterContent,
    content_defaults={
        "text": "© 2024 Your Agency. All rights reserved.",
        "links": [
            {"text": "Privacy Policy", "url": "#"},
            {"text": "Terms of Service", "url": "#"},
        ],
    },
    style_defaults={"backgroundColor": "#1F2937", "color": "white", "padding": "40px 20px", "textAlign": "center"},
    size_defaults=(1200, 100),
    render=render,
    inspector=(
        InspectorField("content.text", "Footer text", kind="textarea"),
        InspectorField("style.backgroundColor", "Background color", kind="color", default="#1F2937"),
        InspectorField("style.color", "Text color", kind="color", default="#ffffff"),
    ),
)

"""Élément NavBar — logo + liens de navigation."""
from typing import List

from ..core.nodes import h
from ..core.schemas import ElementType
from .base import ContentModel, ElementDescriptor, InspectorField, items_of, text_of


class NavLink(ContentModel):
    text: str = ""
    url: str = "#"


class NavbarContent(ContentModel):
    logo: str = ""
    links: List[NavLink] = []


def render(element, mode):
    c = element.content
    logo = text_of(c, "logo")
    links = [
        h("a", link.get("text"), href=link.get("url") or "#",
          style={"color": "#374151", "textDecoration": "none", "fontWeight": "500", "fontSize": "16px"},
          classes=["lb-navbar__link"])
        for link in items_of(c, "links")
    ]
    return h(
        "nav",
        h("img", src=logo, alt="Logo", style={"height": "40px"}) if logo else None,
        h("div", links, style={"display": "flex", "gap": "32px"}),
        style={"display": "flex", "alignItems": "center", "gap": "16px"},
    )


DESCRIPTOR = ElementDescriptor(
    type=ElementType.NAVBAR,
    label="Navbar",
    group="navigation",
    content_model=NavbarContent,
    content_defaults={
        "logo": "",
        "links": [
            {"text": "Home", "url": "#"},
            {"text": "About", "url": "#"},
            {"text": "Services", "url": "#"},
            {"text": "Contact", "url": "#"},
        ],
    },
    style_defaults={
        "backgroundColor": "white",
        "padding": "20px 40px",
        "boxShadow": "0 2px 4px rgba(0,0,0,0.1)",
        "display": "flex",
        "justifyContent": "space-between",
        "alignItems": "center",
    },
    size_defaults=(1200, 80),
    render=render,
    inspector=(
        InspectorField("content.logo", "Logo URL", kind="url"),
        InspectorField("style.backgroundColor", "Background color", kind="color", default="#ffffff"),
    ),
)

"""Élément Features — grille de fonctionnalités (icône + titre + description)."""
from typing import List

from ..core.nodes import h
from ..core.schemas import ElementType
from .base import ContentModel, ElementDescriptor, InspectorField, items_of, text_of


class FeatureItem(ContentModel):
    title: str = ""
    description: str = ""
    icon: str = ""


class FeaturesContent(ContentModel):
    title: str = ""
    subtitle: str = ""
    features: List[FeatureItem] = []


def _feature(item):
    return h(
        "div",
        h("div", item.get("icon"), style={"fontSize": "48px", "marginBottom": "16px"}),
        h("h3", item.get("title"),
          style={"fontSize": "20px", "fontWeight": "bold", "marginBottom": "8px", "color": "#1F2937"}),
        h("p", item.get("description"), style={"color": "#6B7280"}),
        style={"textAlign": "center"},
        classes=["lb-features__item"],
    )


def render(element, mode):
    c = element.content
    return [
        h("h2", text_of(c, "title"),
          style={"fontSize": "36px", "fontWeight": "bold", "textAlign": "center",
                 "marginBottom": "16px", "color": "#1F2937"}),
        h("p", text_of(c, "subtitle"),
          style={"fontSize": "18px", "textAlign": "center", "marginBottom": "48px", "color": "#6B7280"}),
        h("div", [_feature(item) for item in items_of(c, "features")],
          style={"display": "grid", "gridTemplateColumns": "repeat(auto-fit, minmax(300px, 1fr))",
                 "gap": "32px"},
          classes=["lb-features__grid"]),
    ]


DESCRIPTOR = ElementDescriptor(
    type=ElementType.FEATURES,
    label="Features",
    group="layout",
    content_model=FeaturesContent,
    content_defaults={
        "title": "Our Features",
        "subtitle": "What we offer",
        "features": [
            {"title": "Feature 1", "description": "Description 1", "icon": "⭐"},
            {"title": "Feature 2", "description": "Description 2", "icon": "🚀"},
            {"title": "Feature 3", "description": "Description 3", "icon": "💎"},
        ],
    },
    style_defaults={"padding": "80px 20px", "backgroundColor": "#ffffff"},
    size_defaults=(1200, 400),
    render=render,
    inspector=(
        InspectorField("content.title", "Section title"),
        InspectorField("content.subtitle", "Section subtitle", kind="textarea"),
        InspectorField("style.backgroundColor", "Background color", kind="color", default="#ffffff"),
    ),
)

"""Élément Divider — séparateur horizontal."""
from typing import Literal

from ..core.nodes import h
from ..core.schemas import ElementType
from .base import ContentModel, ElementDescriptor, InspectorField, pick_style, text_of


class DividerContent(ContentModel):
    style: Literal["solid", "dashed", "dotted"] = "solid"
    color: str = "#e5e7eb"


def render(element, mode):
    c, s = element.content, element.style
    width = pick_style(s, "borderWidth", "1px")
    line = text_of(c, "style") or pick_style(s, "borderStyle", "solid")
    color = text_of(c, "color") or pick_style(s, "borderColor", "#e5e7eb")
    return h(
        "hr",
        style={"border": "none", "borderTop": f"{width} {line} {color}",
               "margin": pick_style(s, "margin", "40px 0")},
    )


DESCRIPTOR = ElementDescriptor(
    type=ElementType.DIVIDER,
    label="Divider",
    group="spacing",
    content_model=DividerContent,
    content_defaults={"style": "solid", "color": "#e5e7eb"},
    style_defaults={"borderColor": "#e5e7eb", "borderWidth": "1px", "borderStyle": "solid", "margin": "40px 0"},
    size_defaults=(800, 2),
    render=render,
    inspector=(
        InspectorField(
            "content.style", "Line style", kind="select", default="solid",
            options=(("solid", "Solid"), ("dashed", "Dashed"), ("dotted", "Dotted")),
        ),
        InspectorField("content.color", "Line color", kind="color", default="#e5e7eb"),
    ),
)

"""Élément Image — image simple avec légende optionnelle."""
from ..core.nodes import h
from ..core.schemas import ElementType
from .base import ContentModel, ElementDescriptor, InspectorField, pick_style, text_of


class ImageContent(ContentModel):
    src: str = ""
    alt: str = ""
    caption: str = ""


def render(element, mode):
    c = element.content
    src = text_of(c, "src")
    if not src:
        # pas encore d'URL : zone neutre à la taille du cadre
        return h(
            "div", "Add an image URL",
            style={
                "width": "100%", "height": "100%", "display": "flex",
                "alignItems": "center", "justifyContent": "center",
                "backgroundColor": "#F3F4F6", "color": "#9CA3AF", "fontSize": 14,
            },
            classes=["lb-image--empty"],
        )

    img = h(
        "img", src=src, alt=text_of(c, "alt"),
        style={
            "width": "100%", "height": "100%" if mode == "edit" else "auto",
            "objectFit": pick_style(element.style, "objectFit", "cover"),
            "borderRadius": pick_style(element.style, "borderRadius", 0),
        },
    )
    caption = text_of(c, "caption")
    if not caption:
        return img
    return h(
        "figure",
        img,
        h("figcaption", caption, style={"fontSize": 14, "color": "#6B7280", "marginTop": 8}),
        style={"margin": 0},
    )


DESCRIPTOR = ElementDescriptor(
    type=ElementType.IMAGE,
    label="Image",
    group="basic",
    content_model=ImageContent,
    content_defaults={"src": "", "alt": "Image", "caption": ""},
    style_defaults={"borderRadius": "8px", "objectFit": "cover"},
    size_defaults=(600, 400),
    render=render,
    inspector=(
        InspectorField("content.src", "Image URL", kind="url"),
        InspectorField("content.alt", "Alt text"),
        InspectorField("content.caption", "Caption"),
        InspectorField("style.borderRadius", "Corner radius", default="0px"),
    ),
)

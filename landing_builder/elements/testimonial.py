"""Élément Testimonial — citation + auteur + avatar."""
from ..core.nodes import h
from ..core.schemas import ElementType
from .base import ContentModel, ElementDescriptor, InspectorField, text_of


class TestimonialContent(ContentModel):
    text: str = ""
    author: str = ""
    role: str = ""
    avatar: str = ""


def render(element, mode):
    c = element.content
    author = text_of(c, "author")
    avatar_src = text_of(c, "avatar")
    if avatar_src:
        avatar = h("img", src=avatar_src, alt=author,
                   style={"width": "100%", "height": "100%", "borderRadius": "50%"})
    else:
        avatar = h("span", "👤", style={"fontSize": "20px"})

    return [
        h("p", f"“{text_of(c, 'text')}”",
          style={"fontSize": "18px", "fontStyle": "italic", "marginBottom": "16px", "color": "#4B5563"}),
        h(
            "div",
            h("div", avatar,
              style={"width": "48px", "height": "48px", "borderRadius": "50%",
                     "backgroundColor": "#E5E7EB", "display": "flex",
                     "alignItems": "center", "justifyContent": "center"},
              classes=["lb-testimonial__avatar"]),
            h("div",
              h("p", author, style={"fontWeight": "bold", "color": "#1F2937"}),
              h("p", text_of(c, "role"), style={"color": "#6B7280", "fontSize": "14px"})),
            style={"display": "flex", "alignItems": "center", "gap": "12px"},
        ),
    ]


DESCRIPTOR = ElementDescriptor(
    type=ElementType.TESTIMONIAL,
    label="Testimonial",
    group="layout",
    content_model=TestimonialContent,
    content_defaults={"text": "This is amazing!", "author": "Happy Client", "role": "Student", "avatar": ""},
    style_defaults={"backgroundColor": "#f9fafb", "padding": "40px", "borderRadius": "12px", "textAlign": "center"},
    size_defaults=(400, 200),
    render=render,
    inspector=(
        InspectorField("content.text", "Quote", kind="textarea"),
        InspectorField("content.author", "Author"),
        InspectorField("content.role", "Role"),
        InspectorField("content.avatar", "Avatar URL", kind="url"),
    ),
)

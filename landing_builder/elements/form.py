"""Élément Form — aperçu non interactif d'un formulaire de capture."""
from typing import List, Literal

from ..core.nodes import h
from ..core.schemas import ElementType
from .base import ContentModel, ElementDescriptor, InspectorField, items_of, text_of

FieldKind = Literal["text", "email", "tel", "number", "textarea", "date", "url"]


class FormField(ContentModel):
    name: str
    label: str = ""
    type: FieldKind = "text"
    required: bool = False


class FormContent(ContentModel):
    title: str = ""
    fields: List[FormField] = []
    submitText: str = "Submit"


_INPUT_STYLE = {
    "width": "100%",
    "padding": "8px 12px",
    "border": "1px solid #D1D5DB",
    "borderRadius": "4px",
    "fontSize": "14px",
}


def _field(item):
    label = item.get("label") or item.get("name") or ""
    if item.get("type") == "textarea":
        control = h("textarea", style=_INPUT_STYLE, rows=3, placeholder=label,
                    name=item.get("name"), disabled=True)
    else:
        control = h("input", type=item.get("type") or "text", style=_INPUT_STYLE,
                    placeholder=label, name=item.get("name"),
                    required=bool(item.get("required")), disabled=True)
    return h(
        "div",
        h("label", f"{label} *" if item.get("required") else label,
          style={"display": "block", "marginBottom": "4px", "fontWeight": "500", "color": "#374151"}),
        control,
        classes=["lb-form__field"],
    )


def render(element, mode):
    c = element.content
    return [
        h("h3", text_of(c, "title"),
          style={"fontSize": "24px", "fontWeight": "bold", "marginBottom": "24px", "textAlign": "center"}),
        h(
            "form",
            [_field(item) for item in items_of(c, "fields")],
            h("button", text_of(c, "submitText", "Submit"), type="button", disabled=True,
              style={"backgroundColor": "#3B82F6", "color": "white", "padding": "12px 24px",
                     "borderRadius": "6px", "border": "none", "fontSize": "16px", "fontWeight": "500"}),
            style={"display": "flex", "flexDirection": "column", "gap": "16px"},
            onsubmit="return false",
        ),
    ]


DESCRIPTOR = ElementDescriptor(
    type=ElementType.FORM,
    label="Form",
    group="form",
    content_model=FormContent,
    content_defaults={
        "title": "Contact Us",
        "fields": [
            {"name": "name", "label": "Name", "type": "text", "required": True},
            {"name": "email", "label": "Email", "type": "email", "required": True},
            {"name": "message", "label": "Message", "type": "textarea", "required": False},
        ],
        "submitText": "Submit",
    },
    style_defaults={
        "backgroundColor": "white",
        "padding": "40px",
        "borderRadius": "12px",
        "boxShadow": "0 4px 6px rgba(0,0,0,0.1)",
    },
    size_defaults=(500, 400),
    render=render,
    inspector=(
        InspectorField("content.title", "Form title"),
        InspectorField("content.submitText", "Submit button text", default="Submit"),
    ),
)

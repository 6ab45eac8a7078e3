"""Élément Video — lecteur vidéo (fichier ou embed YouTube / Vimeo)."""
import re

from ..core.nodes import h
from ..core.schemas import ElementType
from .base import ContentModel, ElementDescriptor, InspectorField, text_of

_YOUTUBE = re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/)([\w-]{6,})")
_VIMEO   = re.compile(r"vimeo\.com/(\d+)")


class VideoContent(ContentModel):
    url: str = ""
    autoplay: bool = False
    controls: bool = True


def embed_url(url: str) -> str:
    """URL d'embed pour YouTube/Vimeo, "" pour un fichier vidéo direct."""
    m = _YOUTUBE.search(url)
    if m:
        return f"https://www.youtube.com/embed/{m.group(1)}"
    m = _VIMEO.search(url)
    if m:
        return f"https://player.vimeo.com/video/{m.group(1)}"
    return ""


def render(element, mode):
    c = element.content
    url = text_of(c, "url")
    frame = {"width": "100%", "height": "100%", "border": "none"}
    if not url:
        return h(
            "div", "Add a video URL",
            style={
                **frame, "display": "flex", "alignItems": "center", "justifyContent": "center",
                "color": "#9CA3AF", "fontSize": 14,
            },
            classes=["lb-video--empty"],
        )

    embed = embed_url(url)
    if embed:
        return h("iframe", src=embed, style=frame, allowfullscreen=True, title="Video")
    # en édition : jamais d'autoplay, le canvas reste silencieux
    return h(
        "video",
        src=url,
        style=frame,
        controls=bool(c.get("controls", True)),
        autoplay=bool(c.get("autoplay")) and mode == "preview",
        muted=bool(c.get("autoplay")),
    )


DESCRIPTOR = ElementDescriptor(
    type=ElementType.VIDEO,
    label="Video",
    group="basic",
    content_model=VideoContent,
    content_defaults={"url": "", "autoplay": False, "controls": True},
    style_defaults={"backgroundColor": "#000000", "borderRadius": "8px"},
    size_defaults=(640, 360),
    render=render,
    inspector=(
        InspectorField("content.url", "Video URL", kind="url"),
        InspectorField("content.autoplay", "Autoplay", kind="toggle", default=False),
        InspectorField("content.controls", "Show controls", kind="toggle", default=True),
    ),
)

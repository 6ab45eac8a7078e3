"""
Schémas Pydantic du Landing Builder.
Structure : PageDocument → [Element] (séquence ordonnée), Template → [Element]

Format JSON aligné sur l'API /api/{tenant}/landing-pages :
  Element      : {id, type, content, styles, position:{x,y}, size:{width,height}}
  PageDocument : {id, name, slug, ..., status, content: Element[], seo, settings,
                  viewCount, conversionCount, publishedAt, createdAt, updatedAt}
"""
import json
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ── ENUMS ──────────────────────────────────────────────────────────────

class ElementType(str, Enum):
    HEADER      = "header"
    TEXT        = "text"
    IMAGE       = "image"
    VIDEO       = "video"
    BUTTON      = "button"
    FORM        = "form"
    TESTIMONIAL = "testimonial"
    FEATURES    = "features"
    CTA         = "cta"
    DIVIDER     = "divider"
    SPACER      = "spacer"
    HERO        = "hero"
    FOOTER      = "footer"
    NAVBAR      = "navbar"


ELEMENT_TYPES = frozenset(t.value for t in ElementType)


class PageStatus(str, Enum):
    DRAFT     = "DRAFT"
    PUBLISHED = "PUBLISHED"
    ARCHIVED  = "ARCHIVED"


# PUBLISHED → DRAFT = dépublication (écran liste des landing pages)
_TRANSITIONS: Dict[str, List[str]] = {
    "DRAFT":     ["PUBLISHED", "ARCHIVED"],
    "PUBLISHED": ["DRAFT", "ARCHIVED"],
    "ARCHIVED":  [],
}


def can_transition(current: str, target: str) -> bool:
    return PageStatus(target).value in _TRANSITIONS.get(PageStatus(current).value, [])


class EditorMode(str, Enum):
    EDIT    = "edit"
    PREVIEW = "preview"


class Viewport(str, Enum):
    DESKTOP = "desktop"
    TABLET  = "tablet"
    MOBILE  = "mobile"


# Largeur logique du canvas (px), seule adaptation au viewport
VIEWPORT_WIDTHS: Dict[Viewport, int] = {
    Viewport.DESKTOP: 1200,
    Viewport.TABLET:  768,
    Viewport.MOBILE:  375,
}


# ── Element ────────────────────────────────────────────────────────────

class Position(BaseModel):
    x: int = 0
    y: int = 0


class Size(BaseModel):
    width: int = Field(default=400, ge=0)
    height: int = Field(default=100, ge=0)


class Element(BaseModel):
    """Bloc de contenu positionné. `type` reste une chaîne : un type inconnu
    (schéma plus récent) est conservé tel quel et rendu en placeholder."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., min_length=1)
    type: str
    content: Dict[str, Any] = Field(default_factory=dict)
    style: Dict[str, Any] = Field(default_factory=dict, alias="styles")
    position: Position = Field(default_factory=Position)
    size: Size = Field(default_factory=Size)

    @field_validator("content", "style", mode="before")
    @classmethod
    def _none_as_empty(cls, v):
        return {} if v is None else v

    @property
    def is_known_type(self) -> bool:
        return self.type in ELEMENT_TYPES


# ── Page ───────────────────────────────────────────────────────────────

class Seo(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    keywords: Optional[str] = None


class Tracking(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    google_analytics: Optional[str] = Field(default=None, alias="googleAnalytics")
    facebook_pixel: Optional[str] = Field(default=None, alias="facebookPixel")


class PageSettings(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    custom_css: Optional[str] = Field(default=None, alias="customCss")
    custom_js: Optional[str] = Field(default=None, alias="customJs")
    tracking: Tracking = Field(default_factory=Tracking)

    @field_validator("tracking", mode="before")
    @classmethod
    def _none_tracking(cls, v):
        return {} if v is None else v


class PageDocument(BaseModel):
    """Landing page complète : métadonnées + séquence ordonnée d'éléments.

    L'ordre de `elements` est l'unique source d'ordre : x/y en mode édition,
    flux vertical en mode preview.
    """
    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    id: Optional[str] = None
    name: str = "New Landing Page"
    slug: str = "new-landing-page"
    title: Optional[str] = None
    description: Optional[str] = None
    status: PageStatus = PageStatus.DRAFT
    elements: List[Element] = Field(default_factory=list, alias="content")
    seo: Seo = Field(default_factory=Seo)
    settings: PageSettings = Field(default_factory=PageSettings)
    view_count: int = Field(default=0, ge=0, alias="viewCount")
    conversion_count: int = Field(default=0, ge=0, alias="conversionCount")
    published_at: Optional[datetime] = Field(default=None, alias="publishedAt")
    created_at: datetime = Field(default_factory=utcnow, alias="createdAt")
    updated_at: datetime = Field(default_factory=utcnow, alias="updatedAt")

    @field_validator("elements", mode="before")
    @classmethod
    def _decode_content(cls, v):
        # Le backend stocke `content` via JSON.stringify → peut revenir en chaîne
        if v is None or v == "":
            return []
        if isinstance(v, str):
            return json.loads(v)
        return v

    @field_validator("seo", "settings", mode="before")
    @classmethod
    def _none_as_default(cls, v):
        return {} if v is None else v

    @model_validator(mode="after")
    def _unique_element_ids(self):
        seen = set()
        for el in self.elements:
            if el.id in seen:
                raise ValueError(f"id d'élément dupliqué : {el.id!r}")
            seen.add(el.id)
        return self

    @property
    def conversion_rate(self) -> float:
        """Taux de conversion (0 si aucune vue)."""
        if not self.view_count:
            return 0.0
        return self.conversion_count / self.view_count

    def element_ids(self) -> List[str]:
        return [el.id for el in self.elements]

    def get_element(self, element_id: str) -> Optional[Element]:
        for el in self.elements:
            if el.id == element_id:
                return el
        return None

    def to_api(self) -> Dict[str, Any]:
        """Payload JSON pour POST/PUT /landing-pages."""
        data = self.model_dump(mode="json", by_alias=True)
        if data.get("id") is None:
            data.pop("id", None)
        return data


# ── Template ───────────────────────────────────────────────────────────

class Template(BaseModel):
    """Jeu d'éléments prototypes réutilisable. Jamais aliasé dans un document."""
    id: str
    name: str
    category: str = "General"
    preview: str = ""
    elements: List[Element] = Field(default_factory=list)

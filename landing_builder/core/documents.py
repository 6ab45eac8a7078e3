"""
Cycle de vie d'un PageDocument : création, duplication, transitions de statut.
"""
import logging
import re
import unicodedata
from typing import Optional

from .errors import InvalidStatusTransition
from .ids import clone_elements
from .schemas import PageDocument, PageStatus, can_transition, utcnow

log = logging.getLogger(__name__)

_NON_SLUG = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """'Spring Intake 2024 — Été' → 'spring-intake-2024-ete'."""
    ascii_text = unicodedata.normalize("NFKD", text or "").encode("ascii", "ignore").decode("ascii")
    slug = _NON_SLUG.sub("-", ascii_text.lower()).strip("-")
    return slug or "page"


def new_document(name: str = "New Landing Page", slug: Optional[str] = None) -> PageDocument:
    """Page vierge (DRAFT, sans id tant qu'elle n'est pas sauvegardée)."""
    return PageDocument(
        name=name,
        slug=slug or slugify(name),
        title=name,
        description="",
    )


def duplicate_document(doc: PageDocument) -> PageDocument:
    """Copie brouillon : « (Copy) », slug -copy, compteurs à zéro, ids neufs."""
    copy = PageDocument(
        name=f"{doc.name} (Copy)",
        slug=f"{doc.slug}-copy",
        title=doc.title,
        description=doc.description,
        status=PageStatus.DRAFT,
        elements=clone_elements(doc.elements),
        seo=doc.seo.model_copy(deep=True),
        settings=doc.settings.model_copy(deep=True),
    )
    log.debug("Page %s dupliquée → %s", doc.slug, copy.slug)
    return copy


def transition(doc: PageDocument, target: PageStatus) -> PageDocument:
    """
    Copie de `doc` au statut `target` — le document d'origine n'est pas modifié.

    DRAFT → PUBLISHED | ARCHIVED ; PUBLISHED → DRAFT | ARCHIVED ; ARCHIVED terminal.
    """
    target = PageStatus(target)
    if not can_transition(doc.status, target):
        raise InvalidStatusTransition(PageStatus(doc.status).value, target.value)

    update = {"status": target}
    if target is PageStatus.PUBLISHED:
        update["published_at"] = utcnow()
    elif target is PageStatus.DRAFT:
        update["published_at"] = None
    return doc.model_copy(update=update, deep=True)

"""
Router FastAPI — endpoints landing_builder.

GET  /landing-builder/catalog    → descripteurs d'éléments (palette)
GET  /landing-builder/templates  → templates disponibles (?category=)
POST /landing-builder/validate   → PageDocument → {"valid": bool, "errors"?}
POST /landing-builder/preview    → PageDocument → HTMLResponse (page complète)
POST /landing-builder/canvas     → PageDocument → HTMLResponse (canvas édition/preview)
POST /landing-builder/templates/{id} → PageDocument → page avec le template chargé
"""
from typing import Optional

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import HTMLResponse, JSONResponse

from .core.errors import BuilderError, TemplateNotFound
from .core.schemas import EditorMode, PageDocument, Viewport
from .elements import catalog as element_catalog, validate_elements
from .renderer import render_canvas, render_page, to_html
from .templates import TemplateCatalog

router = APIRouter(prefix="/landing-builder", tags=["landing_builder"])

_templates = TemplateCatalog()


def get_template_catalog() -> TemplateCatalog:
    return _templates


@router.get("/catalog", summary="Liste les éléments disponibles et leurs champs d'inspecteur")
def catalog() -> JSONResponse:
    return JSONResponse({"elements": element_catalog()})


@router.get("/templates", summary="Liste les templates de page")
def templates(category: Optional[str] = Query(default=None)) -> JSONResponse:
    items = get_template_catalog().list(category)
    return JSONResponse({
        "templates": [t.model_dump(mode="json", by_alias=True) for t in items],
        "categories": get_template_catalog().categories(),
    })


@router.post("/validate", summary="Valide le contenu des éléments d'une page")
def validate(doc: PageDocument) -> dict:
    errors = validate_elements(doc.elements)
    if errors:
        return {"valid": False, "errors": errors}
    return {"valid": True}


@router.post("/preview", response_class=HTMLResponse, summary="Rend la page complète en HTML")
def preview(doc: PageDocument, viewport: Viewport = Viewport.DESKTOP) -> HTMLResponse:
    return HTMLResponse(content=render_page(doc, viewport))


@router.post("/canvas", response_class=HTMLResponse, summary="Rend le canvas (édition ou preview)")
def canvas(
    doc: PageDocument,
    mode: EditorMode = EditorMode.EDIT,
    viewport: Viewport = Viewport.DESKTOP,
    selected: Optional[str] = None,
) -> HTMLResponse:
    if selected is not None and doc.get_element(selected) is None:
        raise HTTPException(status_code=404, detail=f"Élément introuvable : {selected!r}")
    return HTMLResponse(content=to_html(render_canvas(doc, mode, viewport, selected)))


@router.post("/templates/{template_id}", summary="Charge un template dans une page")
def apply_template(template_id: str, doc: PageDocument) -> JSONResponse:
    try:
        get_template_catalog().instantiate(doc, template_id)
    except TemplateNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except BuilderError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return JSONResponse(doc.to_api())

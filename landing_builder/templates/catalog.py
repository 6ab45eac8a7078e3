"""
Catalogue de templates — built-ins + templates récupérés via le gateway.

Les templates sont stockés tels quels et ne sortent du catalogue qu'en copie
profonde : aucun document ne peut aliaser un prototype.
"""
import logging
from typing import Dict, Iterable, List, Optional

from ..composition import load_template
from ..core.errors import InvalidElementContent, TemplateNotFound
from ..core.schemas import PageDocument, Template
from ..elements import validate_elements
from .builtin import builtin_templates

log = logging.getLogger(__name__)


class TemplateCatalog:
    def __init__(self, templates: Optional[Iterable[Template]] = None, include_builtin: bool = True):
        self._templates: Dict[str, Template] = {}
        if include_builtin:
            for t in builtin_templates():
                self.register(t)
        for t in templates or ():
            self.register(t)

    def __len__(self) -> int:
        return len(self._templates)

    def __contains__(self, template_id: str) -> bool:
        return template_id in self._templates

    def register(self, template: Template) -> None:
        """Ajoute (ou remplace) un template après contrôle du contenu de ses éléments."""
        errors = validate_elements(template.elements)
        if errors:
            raise InvalidElementContent(f"Template {template.id!r} invalide : {errors[0]}")
        self._templates[template.id] = template.model_copy(deep=True)

    def get(self, template_id: str) -> Template:
        try:
            return self._templates[template_id].model_copy(deep=True)
        except KeyError:
            raise TemplateNotFound(template_id) from None

    def find_by_name(self, name: str) -> Optional[Template]:
        for t in self._templates.values():
            if t.name == name:
                return t.model_copy(deep=True)
        return None

    def list(self, category: Optional[str] = None) -> List[Template]:
        return [
            t.model_copy(deep=True)
            for t in self._templates.values()
            if category is None or t.category == category
        ]

    def categories(self) -> List[str]:
        return sorted({t.category for t in self._templates.values()})

    def refresh(self, gateway) -> int:
        """Importe les templates du backend ; les templates invalides sont ignorés."""
        added = 0
        for t in gateway.fetch_templates():
            try:
                self.register(t)
                added += 1
            except InvalidElementContent as e:
                log.warning("Template distant ignoré : %s", e)
        log.info("Catalogue de templates : %d importé(s), %d au total", added, len(self))
        return added

    def instantiate(self, doc: PageDocument, template_id: str):
        """Charge le template dans `doc` (copies neuves, ids neufs)."""
        return load_template(doc, self.get(template_id))

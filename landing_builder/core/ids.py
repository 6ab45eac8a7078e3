"""Génération d'identifiants — UUID4, jamais dérivés de l'horloge."""
import uuid
from typing import Iterable, List

from .schemas import Element


def new_element_id() -> str:
    return f"el_{uuid.uuid4().hex}"


def clone_elements(elements: Iterable[Element]) -> List[Element]:
    """Copies profondes avec ids neufs (instanciation de template, duplication)."""
    return [
        el.model_copy(update={"id": new_element_id()}, deep=True)
        for el in elements
    ]

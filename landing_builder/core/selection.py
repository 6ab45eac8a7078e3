"""
Sélection courante — référence faible par id.

On ne garde jamais l'objet Element : update_element produit une nouvelle
valeur, l'id est donc résolu contre la séquence courante à chaque lecture.
"""
from typing import Optional

from .schemas import Element, PageDocument


class Selection:
    def __init__(self, element_id: Optional[str] = None):
        self.element_id = element_id

    def select(self, element_id: str) -> None:
        self.element_id = element_id

    def clear(self) -> None:
        self.element_id = None

    def is_selected(self, element_id: str) -> bool:
        return self.element_id is not None and self.element_id == element_id

    def resolve(self, doc: PageDocument) -> Optional[Element]:
        """Élément sélectionné dans `doc`, ou None si l'id n'y est plus."""
        if self.element_id is None:
            return None
        return doc.get_element(self.element_id)

    def __repr__(self) -> str:
        return f"Selection({self.element_id!r})"

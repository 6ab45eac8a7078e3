"""
Erreurs typées du moteur de composition.

Toutes dérivent de BuilderError ; les erreurs d'entrée dérivent aussi de
ValueError / KeyError pour rester compatibles avec les appelants génériques.
"""
from typing import Optional


class BuilderError(Exception):
    """Erreur de base du landing builder."""


class InvalidElementType(BuilderError, ValueError):
    """Type d'élément absent du catalogue."""

    def __init__(self, element_type: str):
        self.element_type = element_type
        super().__init__(f"Type d'élément inconnu : {element_type!r}")


class ElementNotFound(BuilderError, KeyError):
    """Aucun élément avec cet id dans le document."""

    def __init__(self, element_id: str):
        self.element_id = element_id
        super().__init__(element_id)

    def __str__(self) -> str:
        return f"Élément introuvable : {self.element_id!r}"


class InvalidElementContent(BuilderError, ValueError):
    """Contenu ou style non conforme au schéma du type."""


class TemplateNotFound(BuilderError, KeyError):
    def __init__(self, template_id: str):
        self.template_id = template_id
        super().__init__(template_id)

    def __str__(self) -> str:
        return f"Template introuvable : {self.template_id!r}"


class InvalidStatusTransition(BuilderError):
    """Transition de statut non autorisée (ex : ARCHIVED → PUBLISHED)."""

    def __init__(self, current: str, target: str):
        self.current = current
        self.target = target
        super().__init__(f"Transition interdite : {current} → {target}")


class PersistenceError(BuilderError):
    """Échec d'un appel au backend landing-pages (réseau, HTTP, JSON)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)

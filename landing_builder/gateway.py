"""
Gateway HTTP vers le backend landing-pages (/api/{tenant}/landing-pages).

Appels bloquants via requests.Session, timeout systématique, retry borné
(backoff linéaire) sur erreurs réseau / timeouts / 502-503-504.
Le document de l'appelant n'est jamais modifié : chaque opération retourne
un nouveau PageDocument construit depuis la réponse du serveur.
"""
import logging
import threading
import time
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

import requests
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .config import GatewayConfig
from .core.documents import transition
from .core.errors import PersistenceError
from .core.schemas import PageDocument, PageStatus, Template

log = logging.getLogger(__name__)

# Statuts considérés transitoires (proxy / backend en redémarrage)
_RETRY_STATUSES = {502, 503, 504}


class Pagination(BaseModel):
    page: int = 1
    limit: int = 10
    total: int = 0
    pages: int = 0


class LandingPageList(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    landing_pages: List[PageDocument] = Field(default_factory=list, alias="landingPages")
    pagination: Pagination = Field(default_factory=Pagination)


class LandingPageGateway:
    def __init__(self, config: GatewayConfig, session: Optional[requests.Session] = None):
        self.config = config
        self._http = session or requests.Session()
        # clé → [verrou, nombre de détenteurs / attentes] ; entrée retirée à zéro
        self._locks: Dict[str, List[Any]] = {}
        self._locks_guard = threading.Lock()

    def close(self) -> None:
        self._http.close()

    # ── Transport ───────────────────────────────────────────────────────────

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        url = f"{self.config.api_root}{path}"
        attempts = self.config.max_retries + 1
        for attempt in range(1, attempts + 1):
            try:
                resp = self._http.request(method, url, timeout=self.config.timeout, **kwargs)
            except (requests.ConnectionError, requests.Timeout) as e:
                if attempt < attempts:
                    log.warning("%s %s : %s, tentative %d/%d", method, url, e, attempt, attempts)
                    time.sleep(self.config.backoff * attempt)
                    continue
                log.error("%s %s : échec réseau après %d tentative(s) : %s", method, url, attempts, e)
                raise PersistenceError(f"Backend injoignable ({method} {path}) : {e}") from e

            if resp.status_code in _RETRY_STATUSES and attempt < attempts:
                log.warning("%s %s : HTTP %d, tentative %d/%d", method, url, resp.status_code, attempt, attempts)
                time.sleep(self.config.backoff * attempt)
                continue

            try:
                resp.raise_for_status()
            except requests.HTTPError as e:
                log.error("%s %s : HTTP %s", method, url, resp.status_code)
                raise PersistenceError(
                    f"{method} {path} a échoué (HTTP {resp.status_code})", resp.status_code
                ) from e
            return resp

    @staticmethod
    def _json(resp: requests.Response) -> Any:
        try:
            return resp.json()
        except ValueError as e:
            raise PersistenceError("Réponse JSON invalide", resp.status_code) from e

    @staticmethod
    def _page(data: Any) -> PageDocument:
        if isinstance(data, dict) and isinstance(data.get("landingPage"), dict):
            data = data["landingPage"]
        try:
            return PageDocument.model_validate(data)
        except (ValidationError, ValueError) as e:
            raise PersistenceError(f"Landing page invalide dans la réponse : {e}") from e

    @contextmanager
    def _document_lock(self, doc: PageDocument) -> Iterator[None]:
        """Sérialise les écritures d'un même document (last-write-wins ordonné)."""
        key = doc.id or f"new:{doc.slug}"
        with self._locks_guard:
            entry = self._locks.setdefault(key, [threading.Lock(), 0])
            entry[1] += 1
        try:
            with entry[0]:
                yield
        finally:
            with self._locks_guard:
                entry[1] -= 1
                if entry[1] == 0:
                    del self._locks[key]

    def _store(self, doc: PageDocument) -> PageDocument:
        payload = doc.to_api()
        if doc.id is None:
            resp = self._request("POST", "/landing-pages", json=payload)
        else:
            resp = self._request("PUT", f"/landing-pages/{doc.id}", json=payload)
        return self._page(self._json(resp))

    @staticmethod
    def _require_id(doc: PageDocument) -> str:
        if doc.id is None:
            raise PersistenceError("Page jamais sauvegardée : opération impossible")
        return doc.id

    # ── Opérations ──────────────────────────────────────────────────────────

    def load(self, page_id: str) -> PageDocument:
        resp = self._request("GET", f"/landing-pages/{page_id}")
        doc = self._page(self._json(resp))
        log.debug("Landing page %s chargée (%d éléments)", page_id, len(doc.elements))
        return doc

    def save(self, doc: PageDocument) -> PageDocument:
        """POST si `doc.id` est None (id attribué par le serveur), PUT sinon."""
        with self._document_lock(doc):
            saved = self._store(doc)
        log.info("Landing page %s sauvegardée (%d éléments)", saved.id, len(saved.elements))
        return saved

    def publish(self, doc: PageDocument) -> PageDocument:
        """DRAFT → PUBLISHED ; une page jamais sauvegardée est d'abord créée."""
        if doc.id is None:
            # contrôle de la transition avant toute écriture
            transition(doc, PageStatus.PUBLISHED)
            doc = self.save(doc)
        with self._document_lock(doc):
            published = self._store(transition(doc, PageStatus.PUBLISHED))
        log.info("Landing page %s publiée", published.id)
        return published

    def unpublish(self, doc: PageDocument) -> PageDocument:
        self._require_id(doc)
        with self._document_lock(doc):
            draft = self._store(transition(doc, PageStatus.DRAFT))
        log.info("Landing page %s dépubliée", draft.id)
        return draft

    def archive(self, doc: PageDocument) -> PageDocument:
        self._require_id(doc)
        with self._document_lock(doc):
            archived = self._store(transition(doc, PageStatus.ARCHIVED))
        log.info("Landing page %s archivée", archived.id)
        return archived

    def delete(self, page_id: str) -> None:
        self._request("DELETE", f"/landing-pages/{page_id}")
        log.info("Landing page %s supprimée", page_id)

    def list_pages(
        self, status: Optional[PageStatus] = None, page: int = 1, limit: int = 10
    ) -> LandingPageList:
        params: Dict[str, Any] = {"page": page, "limit": limit}
        if status is not None:
            params["status"] = PageStatus(status).value
        data = self._json(self._request("GET", "/landing-pages", params=params))
        try:
            return LandingPageList.model_validate(data)
        except (ValidationError, ValueError) as e:
            raise PersistenceError(f"Liste de landing pages invalide : {e}") from e

    def fetch_templates(self) -> List[Template]:
        data = self._json(self._request("GET", "/landing-page-templates"))
        if isinstance(data, dict):
            data = data.get("templates", [])
        try:
            return [Template.model_validate(item) for item in data or []]
        except (ValidationError, ValueError, TypeError) as e:
            raise PersistenceError(f"Templates invalides dans la réponse : {e}") from e

"""Fixtures partagées : documents, session, gateway HTTP simulé."""
from unittest.mock import MagicMock

import pytest
import requests

from landing_builder import EditorSession, GatewayConfig, LandingPageGateway, new_document


@pytest.fixture
def doc():
    return new_document("Spring Intake")


@pytest.fixture
def session():
    return EditorSession(new_document("Spring Intake"))


@pytest.fixture
def config():
    return GatewayConfig(base_url="http://api.test", tenant="acme", max_retries=2, backoff=0)


@pytest.fixture
def http():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def gateway(config, http):
    return LandingPageGateway(config, session=http)


def make_response(status=200, payload=None):
    """Réponse requests simulée (raise_for_status lève pour >= 400)."""
    resp = MagicMock()
    resp.status_code = status
    resp.json.return_value = payload
    if status >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"HTTP {status}")
    else:
        resp.raise_for_status.return_value = None
    return resp


def page_json(**overrides):
    data = {
        "id": "lp_1",
        "name": "Spring Intake",
        "slug": "spring-intake",
        "title": "Spring Intake",
        "status": "DRAFT",
        "content": [],
        "viewCount": 0,
        "conversionCount": 0,
        "createdAt": "2024-03-01T10:00:00Z",
        "updatedAt": "2024-03-01T10:00:00Z",
    }
    data.update(overrides)
    return data

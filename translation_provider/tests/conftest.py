"""
Pytest configuration and fixtures.
"""
import json
import logging

import pytest
import requests
from unittest.mock import Mock

from translation_provider.api.client import ApiClient
from translation_provider.core.models import Component, Translation
from translation_provider.core.provider import RemoteTranslationProvider


API_URL = "https://translate.example.com/api/"


def make_response(status_code=200, payload=None, content=None):
    """Build a fake requests.Response."""
    response = Mock(spec=requests.Response)
    response.status_code = status_code

    if payload is not None:
        response.json.return_value = payload
        body = json.dumps(payload)
    else:
        response.json.side_effect = ValueError("No JSON body")
        body = ""

    if content is not None:
        response.content = content
        body = content.decode('utf-8', errors='replace')
    else:
        response.content = body.encode('utf-8')

    response.text = body
    return response


def component_payload(slug, project="demo"):
    return {
        "slug": slug,
        "name": slug.title(),
        "url": f"{API_URL}components/{project}/{slug}/",
        "translations_url": f"{API_URL}components/{project}/{slug}/translations/",
        "project": {"slug": project},
    }


def translation_payload(slug, locale, project="demo"):
    base = f"{API_URL}translations/{project}/{slug}/{locale}/"
    return {
        "language_code": locale,
        "filename": f"{slug}/{locale}.xlf",
        "file_url": f"{base}file/",
        "units_list_url": f"{base}units/",
        "url": base,
    }


def unit_payload(unit_id, context, target="", state=0):
    return {
        "id": unit_id,
        "url": f"{API_URL}units/{unit_id}/",
        "context": context,
        "source": [context],
        "target": [target],
        "state": state,
    }


@pytest.fixture
def mock_session():
    """Session double; tests queue responses on ``request``."""
    session = Mock(spec=requests.Session)
    session.headers = requests.utils.default_headers()
    return session


@pytest.fixture
def client(mock_session):
    return ApiClient(API_URL, "secret-token", session=mock_session)


@pytest.fixture
def component():
    return Component.from_dict(component_payload("messages"))


@pytest.fixture
def translation():
    return Translation.from_dict(translation_payload("messages", "de"))


@pytest.fixture
def provider(client):
    return RemoteTranslationProvider(client, project="demo", default_locale="en")


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by setup_logging during a test."""
    yield
    logger = logging.getLogger("translation_provider")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture(autouse=True)
def setup_test_env(monkeypatch):
    """Setup test environment variables."""
    monkeypatch.setenv("TESTING", "true")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    for name in ("DSN", "API_URL", "API_TOKEN", "PROJECT", "VERIFY_PEER"):
        monkeypatch.delenv(f"TRANSLATION_PROVIDER_{name}", raising=False)

"""
Shared fixtures for the Quote Compliance test suite.
"""

import os
from collections.abc import Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient

# Test environment (module level: must be set before `settings = Settings()`)
os.environ["DEBUG"] = "true"
os.environ["LOG_LEVEL"] = "DEBUG"
os.environ["LOG_TO_FILE"] = "false"
os.environ["DEFAULT_LOCALE"] = "fr-BE"
os.environ["DEFAULT_SENSITIVITY"] = "normal"


@pytest.fixture(scope="session")
def test_settings():
    """
    Settings instance built from the test environment.
    """
    from quote_compliance.core.config import Settings

    return Settings()


@pytest.fixture(scope="session")
def app(test_settings):
    """
    FastAPI application under test.
    """
    from quote_compliance.main import create_app

    return create_app()


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    """
    HTTP client for the application.
    Used as a context manager so lifespan events run.

    Yields:
        TestClient: FastAPI test client
    """
    with TestClient(app) as c:
        yield c


@pytest.fixture
def risky_quote() -> dict[str, Any]:
    """Quote whose notes carry a fixed price and a no-cancellation clause."""
    return {
        "locale": "fr-BE",
        "title": "Rénovation salle de bain",
        "notes": "Prix fixe garanti, aucune annulation possible.",
        "items": [],
    }


@pytest.fixture
def clean_quote() -> dict[str, Any]:
    """Quote without risky phrasing nor conditional mentions."""
    return {
        "locale": "fr-BE",
        "title": "Peinture",
        "notes": "Travaux de peinture standard.",
        "items": [{"description": "Peinture des murs du salon"}],
    }


@pytest.fixture
def consumer_remote_quote() -> dict[str, Any]:
    """Belgian consumer quote signed at a distance (withdrawal mention required)."""
    return {
        "locale": "fr-BE",
        "notes": "",
        "is_consumer": True,
        "is_remote_contract": True,
    }


@pytest.fixture
def french_renovation_quote() -> dict[str, Any]:
    return {
        "locale": "fr-FR",
        "sector": "RENOVATION",
        "siret": "123 456 789 00012",
        "tax_rate": 10,
        "notes": "Délai garanti de 5 jours.",
        "items": [{"description": "Environ 10 mètres de plinthes"}],
    }

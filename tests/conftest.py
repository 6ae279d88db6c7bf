"""Shared fixtures: an app per test, bound to its own dataset file."""

import os
from pathlib import Path

# Keep test runs from writing rotating log files
os.environ.setdefault("LOG_FILE", "")

import pytest
from fastapi.testclient import TestClient

from main import create_app
from usersearch.client import SearchClient

FIXTURES = Path(__file__).parent / "fixtures"
SEARCH_URL = "http://testserver/api/v1/search"
TOKEN = "AccessToken"


@pytest.fixture
def dataset_path() -> str:
    return str(FIXTURES / "dataset.xml")


@pytest.fixture
def app(dataset_path):
    return create_app(dataset_path=dataset_path)


@pytest.fixture
def http(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def search_client(http):
    """SearchClient wired straight into the in-process app."""
    return SearchClient(TOKEN, url=SEARCH_URL, http_client=http)

"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from usergraph.api.app import create_app
from usergraph.config import Settings
from usergraph.graphql.executor import QueryExecutor
from usergraph.graphql.schema import build_schema
from usergraph.store import UserStore, seed_store


@pytest.fixture
def store() -> UserStore:
    return seed_store()


@pytest.fixture(scope="session")
def schema():
    return build_schema()


@pytest.fixture
def executor(schema, store: UserStore) -> QueryExecutor:
    return QueryExecutor(schema=schema, store=store)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(debug=False, log_level="WARNING")


@pytest.fixture
def app(test_settings: Settings, store: UserStore) -> FastAPI:
    return create_app(test_settings, store=store)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)

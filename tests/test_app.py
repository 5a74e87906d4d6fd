import pytest

from usergraph.api.app import create_app
from usergraph.graphql.schema import SchemaConstructionError
from usergraph.store import UserRecord, UserStore


def test_create_app_injects_store(test_settings):
    store = UserStore([UserRecord(id="7", name="Grace")])
    app = create_app(test_settings, store=store)

    assert app.state.store is store
    assert app.state.executor.store is store


def test_create_app_fails_fast_on_broken_schema(test_settings, monkeypatch):
    def broken_schema():
        raise SchemaConstructionError("GraphQL schema shape mismatch")

    monkeypatch.setattr("usergraph.api.app.build_schema", broken_schema)

    with pytest.raises(SchemaConstructionError):
        create_app(test_settings)


def test_custom_store_is_served(test_settings):
    from fastapi.testclient import TestClient

    store = UserStore([UserRecord(id="7", name="Grace")])
    client = TestClient(create_app(test_settings, store=store))

    resp = client.post("/graphql", json={"query": '{ user(id: "7") { name } }'})
    assert resp.json() == {"data": {"user": {"name": "Grace"}}}

    resp = client.post("/graphql", json={"query": '{ user(id: "1") { name } }'})
    assert resp.json() == {"data": {"user": None}}

"""
Unit tests for the user resolver and argument extraction
"""

from types import SimpleNamespace

import pytest

from usergraph.graphql.resolvers.user import extract_string_argument, resolve_user_by_id
from usergraph.graphql.types.user import User


@pytest.fixture
def info(store):
    """Minimal stand-in for strawberry.Info carrying the resolver context."""
    return SimpleNamespace(context={"store": store, "request": None})


class TestExtractStringArgument:
    def test_string_is_returned(self):
        assert extract_string_argument("1") == "1"

    def test_empty_string_is_still_a_string(self):
        assert extract_string_argument("") == ""

    @pytest.mark.parametrize("value", [None, 1, 1.5, True, ["1"], {"id": "1"}])
    def test_non_strings_map_to_none(self, value):
        assert extract_string_argument(value) is None


class TestResolveUserById:
    def test_seeded_users(self, info):
        assert resolve_user_by_id(info, "1") == User(id="1", name="Alice")
        assert resolve_user_by_id(info, "2") == User(id="2", name="Bob")

    def test_unknown_id_is_absent_not_an_error(self, info):
        assert resolve_user_by_id(info, "nonexistent") is None

    def test_missing_id(self, info):
        assert resolve_user_by_id(info, None) is None

    def test_wrong_typed_id(self, info):
        assert resolve_user_by_id(info, 1) is None

    def test_does_not_modify_store(self, info, store):
        before = dict(store)
        resolve_user_by_id(info, "1")
        resolve_user_by_id(info, "missing")
        assert dict(store) == before

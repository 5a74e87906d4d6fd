from __future__ import annotations

from typing import TYPE_CHECKING, Any

import strawberry

from ..types.user import User

if TYPE_CHECKING:
    from ...store import UserStore


def extract_string_argument(value: Any) -> str | None:
    """Return ``value`` when it is a string, otherwise None.

    Missing or wrongly typed arguments mean "no value was provided"; they are
    never reported as errors.
    """
    if isinstance(value, str):
        return value
    return None


def get_store(info: strawberry.Info) -> UserStore:
    return info.context["store"]


def resolve_user_by_id(info: strawberry.Info, id: Any) -> User | None:
    user_id = extract_string_argument(id)
    if user_id is None:
        return None

    record = get_store(info).lookup(user_id)
    if record is None:
        return None
    return User.from_record(record)

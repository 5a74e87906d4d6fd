"""
In-memory, read-only user store
"""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class UserRecord:
    """A user as held by the store."""

    id: str
    name: str


SEED_USERS: tuple[UserRecord, ...] = (
    UserRecord(id="1", name="Alice"),
    UserRecord(id="2", name="Bob"),
)


class DuplicateUserError(ValueError):
    """Raised when two seed records share an id."""


class UserStore(Mapping[str, UserRecord]):
    """Immutable mapping from user id to ``UserRecord``.

    The store is populated once at construction and exposes no write path, so a
    single instance can be shared by every concurrent request without locking.
    """

    def __init__(self, records: Iterable[UserRecord]) -> None:
        users: dict[str, UserRecord] = {}
        for record in records:
            if record.id in users:
                raise DuplicateUserError(f"Duplicate user id in seed data: {record.id!r}")
            users[record.id] = record
        self._users = MappingProxyType(users)

    def __getitem__(self, user_id: str) -> UserRecord:
        return self._users[user_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._users)

    def __len__(self) -> int:
        return len(self._users)

    def lookup(self, user_id: str) -> UserRecord | None:
        """Return the record for ``user_id`` or None when it is unknown."""
        return self._users.get(user_id)


def seed_store(records: Iterable[UserRecord] = SEED_USERS) -> UserStore:
    """Build the process-wide store from the fixed seed records."""
    store = UserStore(records)
    logger.info("User store seeded", user_count=len(store))
    return store

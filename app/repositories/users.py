# app/repositories/users.py

from abc import ABC, abstractmethod
from typing import Iterable, List

from sqlalchemy import select
from sqlalchemy.engine import Engine

from app.db.schema import users
from app.models.users import UserIn, UserOut


class UserRepository(ABC):
    @abstractmethod
    def list_users(self) -> List[UserOut]:
        """Return every user in store order. Store errors propagate to the caller."""


class SqlUserRepository(UserRepository):
    def __init__(self, engine: Engine):
        self.engine = engine

    def list_users(self) -> List[UserOut]:
        with self.engine.connect() as conn:
            rows = conn.execute(select(users)).mappings().all()

        return [UserOut.model_validate(dict(row)) for row in rows]


class InMemoryUserRepository(UserRepository):
    """Holds users in a list; ids are assigned in insertion order starting at 1."""

    def __init__(self, records: Iterable[UserIn] = ()):
        self._users: List[UserOut] = [
            UserOut(id=i, **record.model_dump())
            for i, record in enumerate(records, start=1)
        ]

    def list_users(self) -> List[UserOut]:
        return list(self._users)

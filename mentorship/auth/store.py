from typing import Protocol

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from mentorship.core.errors import ConflictError
from mentorship.models.user import User


class IdentityStore(Protocol):
    def get_by_email(self, email: str) -> User | None: ...

    def get_by_id(self, user_id: int) -> User | None: ...

    def create(self, **fields) -> User: ...


class SqlAlchemyIdentityStore:
    """User lookups and creation keyed by the unique email column."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email).first()

    def get_by_id(self, user_id: int) -> User | None:
        return self.db.get(User, user_id)

    def create(self, **fields) -> User:
        user = User(**fields)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as exc:
            # Lost a race against a concurrent registration for the same email.
            self.db.rollback()
            raise ConflictError() from exc
        self.db.refresh(user)
        return user

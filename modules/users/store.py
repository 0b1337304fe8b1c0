"""Persistence for login accounts (members and administrators)."""

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from models import ROLES, User
from stores import BaseStore, FailureKind, StoreResult, is_blank

logger = logging.getLogger(__name__)


class UserStore(BaseStore):
    model = User
    label = "user"

    def create(self, username: str, password: str, role: str,
               membership_end_date: Optional[str] = None) -> StoreResult:
        """Insert a new account. Fails with DUPLICATE_KEY if the username is taken."""
        problem = self.check(username, role)
        if problem:
            return self._invalid(problem)
        if password is None:
            return self._invalid("password is required")
        return self._add(User(
            username=username,
            password=password,
            role=role,
            membership_end_date=membership_end_date,
        ))

    def update(self, user_id: int, username: str, role: str,
               membership_end_date: Optional[str] = None) -> StoreResult:
        # the password column is deliberately not part of an update
        problem = self.check(username, role)
        if problem:
            return self._invalid(problem)
        return self._update(user_id, {
            "username": username,
            "role": role,
            "membership_end_date": membership_end_date,
        })

    def get_by_username(self, username: str) -> Optional[User]:
        try:
            return self.session.query(User).filter_by(username=username).first()
        except SQLAlchemyError:
            self.session.rollback()
            logger.exception("Storage error while looking up user %r", username)
            return None

    def find_by_credentials(self, username: str, password: str) -> StoreResult:
        """Exact match on username AND password; value is the User or None."""
        try:
            user = (self.session.query(User)
                    .filter(User.username == username, User.password == password)
                    .first())
        except SQLAlchemyError:
            self.session.rollback()
            logger.exception("Storage error while checking credentials")
            return StoreResult.failure(FailureKind.IO_ERROR, "Storage unavailable")
        return StoreResult.success(user)

    @staticmethod
    def check(username, role) -> Optional[str]:
        if is_blank(username):
            return "username must not be empty"
        if role not in ROLES:
            return f"unknown role {role!r}"
        return None

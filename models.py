"""Shared SQLAlchemy models."""

from flask_login import UserMixin

from extensions import db

ROLES = ["admin", "user"]


class User(UserMixin, db.Model):
    """A gym member or administrator able to log in."""

    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    username = db.Column(db.Text, unique=True, nullable=False)
    password = db.Column(db.Text, nullable=False)  # stored verbatim
    role = db.Column(db.Text, nullable=False)  # admin, user
    membership_end_date = db.Column(db.Text)

    def to_dict(self) -> dict:
        # password never leaves the store
        return {
            "id": self.id,
            "username": self.username,
            "role": self.role,
            "membership_end_date": self.membership_end_date,
        }

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<User {self.username}>"

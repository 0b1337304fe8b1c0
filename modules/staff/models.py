"""SQLAlchemy models for the staff domain."""

from extensions import db


class Staff(db.Model):
    """An employee of the gym. Not linked to login accounts."""

    __tablename__ = "staff"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.Text, nullable=False)
    position = db.Column(db.Text, nullable=False)
    phone = db.Column(db.Text)
    email = db.Column(db.Text)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "position": self.position,
            "phone": self.phone,
            "email": self.email,
        }

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<Staff {self.name}: {self.position}>"

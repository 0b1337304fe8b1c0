"""SQLAlchemy models for the equipment domain."""

from extensions import db

# Checked by EquipmentStore before writing; the column itself is free text.
EQUIPMENT_STATUSES = ["Available", "In Use", "Maintenance"]


class Equipment(db.Model):
    """A piece of gym equipment."""

    __tablename__ = "equipment"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.Text, nullable=False)
    description = db.Column(db.Text)
    image_path = db.Column(db.Text)  # filename relative to UPLOAD_FOLDER
    status = db.Column(db.Text, nullable=False)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "image_path": self.image_path,
            "status": self.status,
        }

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<Equipment {self.name} ({self.status})>"

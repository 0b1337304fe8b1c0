"""Persistence for equipment records.

Only the image *filename* is stored here; writing the image itself is done by
the HTTP layer (see ``utils.save_equipment_image``).
"""

from typing import Optional

from stores import BaseStore, StoreResult, is_blank

from .models import EQUIPMENT_STATUSES, Equipment


class EquipmentStore(BaseStore):
    model = Equipment
    label = "equipment"

    def create(self, name: str, description: Optional[str] = None,
               image_path: Optional[str] = None, status: str = "Available") -> StoreResult:
        problem = self.check(name, status)
        if problem:
            return self._invalid(problem)
        return self._add(Equipment(
            name=name,
            description=description,
            image_path=image_path,
            status=status,
        ))

    def update(self, equipment_id: int, name: str, description: Optional[str] = None,
               image_path: Optional[str] = None, status: str = "Available") -> StoreResult:
        problem = self.check(name, status)
        if problem:
            return self._invalid(problem)
        return self._update(equipment_id, {
            "name": name,
            "description": description,
            "image_path": image_path,
            "status": status,
        })

    @staticmethod
    def check(name, status) -> Optional[str]:
        if is_blank(name):
            return "name must not be empty"
        if status not in EQUIPMENT_STATUSES:
            return f"status must be one of {', '.join(EQUIPMENT_STATUSES)}"
        return None

"""Persistence for staff records."""

from typing import Optional

from stores import BaseStore, StoreResult, is_blank

from .models import Staff


class StaffStore(BaseStore):
    model = Staff
    label = "staff member"

    def create(self, name: str, position: str, phone: Optional[str] = None,
               email: Optional[str] = None) -> StoreResult:
        problem = self.check(name, position)
        if problem:
            return self._invalid(problem)
        return self._add(Staff(name=name, position=position, phone=phone, email=email))

    def update(self, staff_id: int, name: str, position: str, phone: Optional[str] = None,
               email: Optional[str] = None) -> StoreResult:
        problem = self.check(name, position)
        if problem:
            return self._invalid(problem)
        return self._update(staff_id, {
            "name": name,
            "position": position,
            "phone": phone,
            "email": email,
        })

    @staticmethod
    def check(name, position) -> Optional[str]:
        if is_blank(name):
            return "name must not be empty"
        if is_blank(position):
            return "position must not be empty"
        return None

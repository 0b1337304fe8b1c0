"""Equipment store CRUD and status validation."""

import pytest

from modules.equipment.models import EQUIPMENT_STATUSES
from stores import FailureKind


def test_status_update_visible_in_listing(storage) -> None:
    item = storage.equipment.create("Treadmill", "Cardio zone", None, "Available").value

    assert storage.equipment.update(item.id, "Treadmill", "Cardio zone", None, "Maintenance")

    listed = storage.equipment.list_all()
    assert [(e.id, e.status) for e in listed] == [(item.id, "Maintenance")]


@pytest.mark.parametrize("status", ["available", "Broken", ""])
def test_unknown_status_rejected(storage, status) -> None:
    result = storage.equipment.create("Bench", None, None, status)
    assert result.error is FailureKind.INVALID
    assert storage.equipment.list_all() == []


def test_every_known_status_accepted(storage) -> None:
    for status in EQUIPMENT_STATUSES:
        assert storage.equipment.create(f"Rack {status}", None, None, status)
    assert len(storage.equipment.list_all()) == len(EQUIPMENT_STATUSES)


def test_image_path_is_stored_as_given(storage) -> None:
    item = storage.equipment.create("Rower", None, "abc.jpg", "In Use").value
    assert storage.equipment.get(item.id).image_path == "abc.jpg"

    storage.equipment.update(item.id, "Rower", None, None, "In Use")
    assert storage.equipment.get(item.id).image_path is None


def test_delete_equipment(storage) -> None:
    item = storage.equipment.create("Bike", None, None, "Available").value
    assert storage.equipment.delete(item.id)
    assert storage.equipment.delete(item.id).error is FailureKind.NOT_FOUND

from flask import jsonify

from extensions import get_storage
from permissions import role_required
from utils import failure_response, form_data, optional, text

from . import bp


def _fields(data):
    return {
        "name": text(data, "name"),
        "position": text(data, "position"),
        "phone": optional(data, "phone"),
        "email": optional(data, "email"),
    }


@bp.route("/", methods=["GET"])
@role_required(["admin"])
def list_staff():
    staff = get_storage().staff.list_all()
    return jsonify(staff=[s.to_dict() for s in staff], count=len(staff))


@bp.route("/", methods=["POST"])
@role_required(["admin"])
def add_staff():
    result = get_storage().staff.create(**_fields(form_data()))
    if not result:
        return failure_response(result)
    return jsonify(staff=result.value.to_dict()), 201


@bp.route("/<int:staff_id>", methods=["PUT", "POST"])
@role_required(["admin"])
def edit_staff(staff_id: int):
    result = get_storage().staff.update(staff_id, **_fields(form_data()))
    if not result:
        return failure_response(result)
    return jsonify(staff=result.value.to_dict())


@bp.route("/<int:staff_id>", methods=["DELETE"])
@role_required(["admin"])
def delete_staff(staff_id: int):
    result = get_storage().staff.delete(staff_id)
    if not result:
        return failure_response(result)
    return jsonify(deleted=staff_id)

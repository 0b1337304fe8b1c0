from flask import current_app, jsonify, request
from flask_login import login_required

from extensions import get_storage
from permissions import role_required
from utils import (
    discard_image,
    failure_response,
    form_data,
    invalid_response,
    optional,
    save_equipment_image,
    text,
)

from . import bp


def _fields(data):
    return {
        "name": text(data, "name"),
        "description": optional(data, "description"),
        "status": text(data, "status", default="Available"),
    }


def _save(write, fields, current_image=None):
    """Validate, store a new upload, then write the record.

    The upload only replaces current_image once the record is saved; a
    rejected write removes the new file again.
    """
    store = get_storage().equipment
    problem = store.check(fields["name"], fields["status"])
    if problem:
        return None, invalid_response(problem)

    folder = current_app.config["UPLOAD_FOLDER"]
    new_image = save_equipment_image(request.files.get("image"), folder)
    result = write(image_path=new_image or current_image, **fields)
    if not result:
        discard_image(folder, new_image)
        return None, failure_response(result)
    if new_image and current_image:
        discard_image(folder, current_image)
    return result.value, None


@bp.route("/", methods=["GET"])
@login_required
def list_equipment():
    items = get_storage().equipment.list_all()
    return jsonify(equipment=[e.to_dict() for e in items], count=len(items))


@bp.route("/", methods=["POST"])
@role_required(["admin"])
def add_equipment():
    item, error = _save(get_storage().equipment.create, _fields(form_data()))
    if error:
        return error
    return jsonify(equipment=item.to_dict()), 201


@bp.route("/<int:equipment_id>", methods=["PUT", "POST"])
@role_required(["admin"])
def edit_equipment(equipment_id: int):
    store = get_storage().equipment
    found = store.fetch(equipment_id)
    if not found:
        return failure_response(found)

    def write(**values):
        return store.update(equipment_id, **values)

    item, error = _save(write, _fields(form_data()), found.value.image_path)
    if error:
        return error
    return jsonify(equipment=item.to_dict())


@bp.route("/<int:equipment_id>", methods=["DELETE"])
@role_required(["admin"])
def delete_equipment(equipment_id: int):
    result = get_storage().equipment.delete(equipment_id)
    if not result:
        return failure_response(result)
    return jsonify(deleted=equipment_id)

from flask import jsonify

from extensions import get_storage
from permissions import role_required
from utils import failure_response, form_data, optional, text

from . import bp


def _membership(data, role, current=None):
    # only members carry an end date
    if role != "user":
        return None
    if "membership_end_date" not in data:
        return current
    return optional(data, "membership_end_date")


def _admin_locked(user):
    # admin accounts are not editable from here, so one always remains
    return jsonify(error="forbidden", message=f"Admin account {user.username!r} cannot be changed"), 403


@bp.route("/", methods=["GET"])
@role_required(["admin"])
def list_users():
    users = get_storage().users.list_all()
    return jsonify(users=[u.to_dict() for u in users], count=len(users))


@bp.route("/", methods=["POST"])
@role_required(["admin"])
def create_user():
    data = form_data()
    role = text(data, "role", default="user")
    result = get_storage().users.create(
        username=text(data, "username"),
        password=text(data, "password", strip=False),
        role=role,
        membership_end_date=_membership(data, role),
    )
    if not result:
        return failure_response(result)
    return jsonify(user=result.value.to_dict()), 201


@bp.route("/<int:user_id>", methods=["PUT", "POST"])
@role_required(["admin"])
def update_user(user_id: int):
    store = get_storage().users
    found = store.fetch(user_id)
    if not found:
        return failure_response(found)
    user = found.value
    if user.role == "admin":
        return _admin_locked(user)

    # fields left out keep their stored value
    data = form_data()
    role = text(data, "role", default=user.role)
    result = store.update(
        user_id,
        username=text(data, "username", default=user.username),
        role=role,
        membership_end_date=_membership(data, role, user.membership_end_date),
    )
    if not result:
        return failure_response(result)
    return jsonify(user=result.value.to_dict())


@bp.route("/<int:user_id>", methods=["DELETE"])
@role_required(["admin"])
def delete_user(user_id: int):
    store = get_storage().users
    found = store.fetch(user_id)
    if not found:
        return failure_response(found)
    if found.value.role == "admin":
        return _admin_locked(found.value)

    result = store.delete(user_id)
    if not result:
        return failure_response(result)
    return jsonify(deleted=user_id)

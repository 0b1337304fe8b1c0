from flask import jsonify
from flask_login import current_user, login_required, login_user, logout_user

from auth import logged_in, logged_out
from extensions import get_storage, login_manager
from permissions import available_views, can_equipment_edit, can_staff_manage, can_users_manage
from utils import form_data, text

from . import bp


@login_manager.user_loader
def load_user(user_id):
    return get_storage().users.get(int(user_id))


def _start_session(gateway, identity):
    login_user(get_storage().users.get(identity.id))


def _end_session(gateway):
    logout_user()


@bp.route("/login", methods=["POST"])
def login():
    data = form_data()
    username = text(data, "username", strip=False)
    password = text(data, "password", strip=False)

    gateway = get_storage().new_gateway()
    with logged_in.connected_to(_start_session, sender=gateway):
        gateway.login(username, password)

    if not gateway.is_authenticated:
        return jsonify(error=gateway.error_message), 401
    return jsonify(user=gateway.identity.to_dict(), views=available_views())


@bp.route("/logout", methods=["POST"])
@login_required
def logout():
    gateway = get_storage().new_gateway()
    with logged_out.connected_to(_end_session, sender=gateway):
        gateway.logout()
    return jsonify(status="logged_out")


@bp.route("/me")
@login_required
def me():
    profile = current_user.to_dict()
    if current_user.role == "user":
        profile["membership"] = (
            f"Membership ends: {current_user.membership_end_date}"
            if current_user.membership_end_date else "No active membership"
        )
    permissions = {
        "equipment_edit": can_equipment_edit(),
        "staff_manage": can_staff_manage(),
        "users_manage": can_users_manage(),
    }
    return jsonify(user=profile, views=available_views(), permissions=permissions)

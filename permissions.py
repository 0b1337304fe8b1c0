# permissions.py
"""
RBAC for the gym application.
- role_required([...]) is the main route decorator (admin always passes).
- can_* helpers return True/False for the current user.

Roles:
- user   members: browse equipment, see their own membership
- admin  everything: equipment changes, staff and account management
"""

from functools import wraps
from typing import Iterable, List, Set

from flask import abort
from flask_login import current_user, login_required


# ------------------------------ BASE DECORATOR ------------------------------ #
def role_required(allowed_roles: Iterable[str]):
    """
    Restrict a view to some roles.
    Example:
        @role_required(["admin"])
        def view(): ...

    Rules:
    - anonymous -> 401 through Flask-Login
    - admin always passes
    - any other role outside allowed_roles -> 403
    """
    if isinstance(allowed_roles, str):
        allowed: Set[str] = {allowed_roles}
    else:
        allowed = set(allowed_roles or [])

    def decorator(view_func):
        @wraps(view_func)
        @login_required
        def wrapped(*args, **kwargs):
            role = getattr(current_user, "role", None)
            if role == "admin" or role in allowed:
                return view_func(*args, **kwargs)
            abort(403)

        return wrapped
    return decorator


# -------------------------------- HELPERS ----------------------------------- #
def _is(*roles: str) -> bool:
    if not current_user.is_authenticated:
        return False
    role = getattr(current_user, "role", None)
    return role == "admin" or role in roles


# ================================ UI RIGHTS ================================= #
# ---- Equipment: members browse, admins change ----
def can_equipment_view():   return _is("user")
def can_equipment_edit():   return _is()

# ---- Staff ----
def can_staff_manage():     return _is()

# ---- Accounts ----
def can_users_manage():     return _is()

# ---- Membership card, members only ----
def can_membership_view():  return is_user()


def available_views() -> List[str]:
    """Tabs the current user gets, in display order."""
    views = []
    if can_equipment_view():
        views.append("equipment")
    if can_staff_manage():
        views.append("staff")
    if can_users_manage():
        views.append("users")
    if can_membership_view():
        views.append("membership")
    return views


# ============================== SHORTCUTS ================================== #
def has_role(role: str) -> bool:
    """True only for exactly this role (admin does not stand in)."""
    return bool(current_user.is_authenticated and getattr(current_user, "role", None) == role)

def is_user() -> bool:
    return has_role("user")

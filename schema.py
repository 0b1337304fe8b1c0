"""Table provisioning and the default administrator."""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from extensions import db
from models import User

logger = logging.getLogger(__name__)


class StorageUnavailable(RuntimeError):
    """The database file could not be opened or provisioned."""


def initialize(admin_username: str = "admin", admin_password: str = "admin123") -> None:
    """Create missing tables and seed the admin account.

    Safe to run any number of times: existing tables and rows are left alone,
    and an existing admin keeps its password and role. Must run inside an
    application context.
    """
    # the models have to be imported before create_all()
    from modules.staff import models as staff_models  # noqa: F401
    from modules.equipment import models as equipment_models  # noqa: F401

    try:
        db.create_all()
    except SQLAlchemyError as exc:
        logger.critical("Cannot open database %s: %s", db.engine.url, exc)
        raise StorageUnavailable(f"cannot open database: {exc}") from exc
    logger.info("Tables ready: %s", ", ".join(sorted(db.metadata.tables)))

    seed_admin(admin_username, admin_password)


def seed_admin(username: str, password: str) -> bool:
    """Insert the admin row unless that username exists. True if inserted."""
    try:
        if db.session.query(User).filter_by(username=username).first() is not None:
            return False
        db.session.add(User(username=username, password=password, role="admin"))
        db.session.commit()
    except IntegrityError:
        # created in between; keep the existing row
        db.session.rollback()
        return False
    except SQLAlchemyError as exc:
        db.session.rollback()
        logger.critical("Cannot seed admin account: %s", exc)
        raise StorageUnavailable(f"cannot seed admin account: {exc}") from exc

    logger.info("Seeded default admin account %r", username)
    return True

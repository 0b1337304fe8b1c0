"""The object that owns every store for one application."""

from auth import Authenticator, SessionGateway
from modules.equipment.store import EquipmentStore
from modules.staff.store import StaffStore
from modules.users.store import UserStore


class GymStorage:
    """Users, staff and equipment stores sharing one SQLAlchemy session.

    Built once by ``create_app`` and reached through
    ``extensions.get_storage()``; nothing else holds a global store.
    """

    def __init__(self, session):
        self.users = UserStore(session)
        self.staff = StaffStore(session)
        self.equipment = EquipmentStore(session)
        self.authenticator = Authenticator(self.users)

    def new_gateway(self) -> SessionGateway:
        return SessionGateway(self.authenticator, self.users)

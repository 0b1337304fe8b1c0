"""Credential checks and the login session state machine.

``Authenticator`` answers one question: do this username and password match a
stored account, and with which role. ``SessionGateway`` turns those answers
into a LOGGED_OUT / LOGGED_IN state that presentation code can watch through
the blinker signals below, the same way Flask-Login publishes
``user_logged_in`` / ``user_logged_out``.
"""

import logging
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Optional

from blinker import Namespace

from stores import FailureKind

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username or password"
LOGIN_FAILED = "Login failed"

_signals = Namespace()

#: sent with ``identity=`` after a successful login
logged_in = _signals.signal("logged-in")
#: sent after logout()
logged_out = _signals.signal("logged-out")
#: sent with ``message=`` when a login attempt is refused
login_failed = _signals.signal("login-failed")
#: sent with ``state=`` on every transition, including refused logins
state_changed = _signals.signal("state-changed")


class AuthState(str, Enum):
    LOGGED_OUT = "logged_out"
    LOGGED_IN = "logged_in"


@dataclass(frozen=True)
class AuthResult:
    matched: bool
    role: Optional[str] = None
    # IO_ERROR when the lookup itself failed, None for a plain mismatch
    error: Optional[FailureKind] = None


@dataclass(frozen=True)
class Identity:
    id: int
    username: str
    role: str
    membership_end_date: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)


class Authenticator:
    def __init__(self, user_store):
        self.user_store = user_store

    def authenticate(self, username: str, password: str) -> AuthResult:
        # byte-equal comparison, passwords are not hashed
        result = self.user_store.find_by_credentials(username, password)
        if not result:
            return AuthResult(matched=False, error=result.error)
        user = result.value
        if user is None:
            return AuthResult(matched=False)
        return AuthResult(matched=True, role=user.role)


class SessionGateway:
    """Holds who is logged in.

    Receivers subscribe with :meth:`subscribe` (this gateway only) or connect
    to the module signals directly with ``sender=gateway``.
    """

    def __init__(self, authenticator: Authenticator, user_store):
        self.authenticator = authenticator
        self.user_store = user_store
        self.state = AuthState.LOGGED_OUT
        self.identity: Optional[Identity] = None
        self.error_message: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return self.state is AuthState.LOGGED_IN

    def subscribe(self, receiver):
        """Call ``receiver(gateway, state=...)`` on every transition."""
        state_changed.connect(receiver, sender=self, weak=False)
        return receiver

    def unsubscribe(self, receiver) -> None:
        state_changed.disconnect(receiver, sender=self)

    def login(self, username: str, password: str) -> bool:
        result = self.authenticator.authenticate(username, password)
        if not result.matched:
            message = LOGIN_FAILED if result.error is FailureKind.IO_ERROR else INVALID_CREDENTIALS
            self._refuse(username, message)
            return False

        # re-read the account so the identity carries id and membership date
        user = self.user_store.get_by_username(username)
        if user is None:
            self._refuse(username, LOGIN_FAILED)
            return False

        self.identity = Identity(
            id=user.id,
            username=user.username,
            role=result.role,
            membership_end_date=user.membership_end_date,
        )
        self.state = AuthState.LOGGED_IN
        self.error_message = None
        logger.info("User %s logged in as %s", username, result.role)
        logged_in.send(self, identity=self.identity)
        state_changed.send(self, state=self.state)
        return True

    def logout(self) -> None:
        if self.identity is not None:
            logger.info("User %s logged out", self.identity.username)
        self.state = AuthState.LOGGED_OUT
        self.identity = None
        self.error_message = None
        logged_out.send(self)
        state_changed.send(self, state=self.state)

    def _refuse(self, username: str, message: str) -> None:
        self.state = AuthState.LOGGED_OUT
        self.identity = None
        self.error_message = message
        logger.info("Login refused for %r: %s", username, message)
        login_failed.send(self, message=message)
        state_changed.send(self, state=self.state)

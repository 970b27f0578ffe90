"""In-process authentication service for the Chaum-Pedersen protocol."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass

from chaumpedersen.zkp import ZKP, random_below, random_string

logger = logging.getLogger(__name__)

_ID_LENGTH = 12


class AuthError(Exception):
    """Base class for authentication failures."""


class NotFoundError(AuthError):
    """A user or authentication id is unknown."""


class PermissionDeniedError(AuthError):
    """The proof sent for a challenge did not verify."""


@dataclass
class UserInfo:
    """What the service keeps about a registered user."""

    user_name: str
    y1: int
    y2: int
    r1: int = 0
    r2: int = 0
    c: int = 0
    s: int = 0
    session_id: str = ""


class AuthService:
    """Registers users and checks their proofs of knowledge of a secret."""

    def __init__(self, zkp: ZKP | None = None) -> None:
        self.zkp = zkp if zkp is not None else ZKP.standard()
        self.user_info: dict[str, UserInfo] = {}
        self.auth_id_to_user: dict[str, str] = {}
        self._lock = threading.Lock()

    def register(self, user: str, y1: int, y2: int) -> None:
        """Store the public pair (y1, y2) for a user, replacing any earlier one."""
        logger.info("Processing registration username: %r", user)
        with self._lock:
            self.user_info[user] = UserInfo(user_name=user, y1=y1, y2=y2)
        logger.info("Successful registration username: %r", user)

    def create_authentication_challenge(self, user: str, r1: int, r2: int) -> tuple[str, int]:
        """Record the commitments and return (auth_id, challenge)."""
        logger.info("Processing challenge request username: %r", user)
        with self._lock:
            info = self.user_info.get(user)
            if info is None:
                raise NotFoundError(f"User: {user} not found in database")
            c = random_below(self.zkp.q)
            auth_id = random_string(_ID_LENGTH)
            info.c = c
            info.r1 = r1
            info.r2 = r2
            self.auth_id_to_user[auth_id] = user
        logger.info("Successful challenge request username: %r", user)
        return auth_id, c

    def verify_authentication(self, auth_id: str, s: int) -> str:
        """Check the answer to a challenge and return a new session id."""
        logger.info("Processing challenge solution auth_id: %r", auth_id)
        with self._lock:
            user = self.auth_id_to_user.get(auth_id)
            if user is None:
                raise NotFoundError(f"AuthId: {auth_id} not found in database")
            info = self.user_info[user]
            info.s = s
            ok = self.zkp.verify(info.r1, info.r2, info.y1, info.y2, info.c, info.s)
        if not ok:
            logger.info("Wrong challenge solution username: %r", user)
            raise PermissionDeniedError(f"AuthId: {auth_id} bad solution to the challenge")
        logger.info("Correct challenge solution username: %r", user)
        return random_string(_ID_LENGTH)
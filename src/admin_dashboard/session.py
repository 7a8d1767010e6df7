"""Explicit session object for the signed-in dashboard user.

The session holds the identity in the object itself rather than in a global
store; components that need identity or permissions receive the session.
Talking to an authentication backend is left to the caller, which passes the
resulting user to `login`.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from admin_dashboard.aggregate.relations import field_value
from admin_dashboard.models import User

log = logging.getLogger(__name__)

LOGIN_PATH = "/login"
HOME_PATH = "/"


@dataclass(frozen=True)
class AuthCheck:
    """Result of `Session.check`."""
    authenticated: bool
    logout: bool = False
    redirect_to: str | None = None
    error: str | None = None


@dataclass(frozen=True)
class Identity:
    """Public identity of the signed-in user."""
    id: int | str
    name: str
    email: str
    role: str | None = None
    image: str | None = None
    image_public_id: str | None = None


class Session:
    """Holds at most one signed-in `User`."""

    def __init__(self, user: User | None = None) -> None:
        self._user = user

    @property
    def user(self) -> User | None:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None

    def login(self, user: User | Mapping[str, Any]) -> AuthCheck:
        """Store `user` as the signed-in user.

        Raises:
            pydantic.ValidationError: if a mapping is not a valid user record.
        """
        self._user = user if isinstance(user, User) else User.model_validate(user)
        log.info("Signed in user id=%s", self._user.id)
        return AuthCheck(authenticated=True, redirect_to=HOME_PATH)

    def logout(self) -> AuthCheck:
        if self._user is not None:
            log.info("Signed out user id=%s", self._user.id)
        self._user = None
        return AuthCheck(authenticated=False, redirect_to=LOGIN_PATH)

    def check(self) -> AuthCheck:
        if self._user is not None:
            return AuthCheck(authenticated=True)
        return AuthCheck(
            authenticated=False,
            logout=True,
            redirect_to=LOGIN_PATH,
            error="Unauthorized",
        )

    def get_identity(self) -> Identity | None:
        if self._user is None:
            return None
        user = self._user
        return Identity(
            id=user.id,
            name=user.name,
            email=user.email,
            role=user.role,
            image=field_value(user, "image"),
            image_public_id=field_value(user, "imageCldPubId", "image_cld_pub_id"),
        )

    def get_permissions(self) -> dict[str, str | None] | None:
        if self._user is None:
            return None
        return {"role": self._user.role}

"""Explicit session context handed to every operation that needs the current user."""

from dataclasses import dataclass
from typing import Self

from django.contrib.auth.base_user import AbstractBaseUser


@dataclass(frozen=True)
class SessionContext:
    """The authenticated user an operation acts for.

    Created by the authentication flow on sign-in, discarded on sign-out.
    Consumers only read it.
    """

    user_id: str
    email: str = ""

    @classmethod
    def from_user(cls, user: AbstractBaseUser) -> Self:
        return cls(user_id=str(user.pk), email=getattr(user, "email", "") or "")

"""Authentication flow on top of django.contrib.auth.

This is the only code that creates or tears down a SessionContext.
Identity provider errors are passed to the caller verbatim; nothing is retried.
"""

import logging

from django.contrib import auth
from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction
from django.http import HttpRequest

from calendar_events.domain.errors import AuthenticationError
from calendar_events.services.session import SessionContext

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Невірний email або пароль"
EMAIL_TAKEN = "Користувач з таким email вже існує"
EMAIL_REQUIRED = "Email є обов'язковим"


def current_session(request: HttpRequest) -> SessionContext | None:
    user = getattr(request, "user", None)
    if user is None or not user.is_authenticated:
        return None
    return SessionContext.from_user(user)


def sign_in(request: HttpRequest, email: str, password: str) -> SessionContext:
    """Authenticate and start a session.

    Raises:
        AuthenticationError: If the credentials are rejected.
    """
    user = auth.authenticate(request, username=email.strip().lower(), password=password)
    if user is None:
        logger.info("Rejected sign-in for %s", email)
        raise AuthenticationError(INVALID_CREDENTIALS)
    auth.login(request, user)
    return SessionContext.from_user(user)


def register(request: HttpRequest, email: str, password: str) -> SessionContext:
    """Create an account keyed by email and sign it in.

    Raises:
        AuthenticationError: If the email is missing or taken, or the password
            fails the configured validators.
    """
    email = email.strip().lower()
    if not email:
        raise AuthenticationError(EMAIL_REQUIRED)
    user_model = get_user_model()
    try:
        validate_password(password, user=user_model(username=email, email=email))
    except ValidationError as exc:
        raise AuthenticationError(" ".join(exc.messages)) from exc
    try:
        with transaction.atomic():
            user = user_model.objects.create_user(username=email, email=email, password=password)
    except IntegrityError as exc:
        raise AuthenticationError(EMAIL_TAKEN) from exc
    logger.info("Registered user %s", user.pk)
    auth.login(request, user, backend="django.contrib.auth.backends.ModelBackend")
    return SessionContext.from_user(user)


def sign_out(request: HttpRequest) -> None:
    auth.logout(request)

"""Account registration and credential checks.

This module provides a minimal email/password authentication layer
backed by the users table. Passwords are stored as salted PBKDF2 hashes.
"""

from __future__ import annotations

import hashlib
import hmac
import logging
import os
import re

from resume_ecosystem.data.db import get_session
from resume_ecosystem.data.models import User
from resume_ecosystem.exceptions import AuthenticationError, InvalidDataError
from resume_ecosystem.services.records import user_to_dict
from resume_ecosystem.services.resume_synthesis import get_or_create_resume

logger = logging.getLogger(__name__)

_PBKDF2_ITERATIONS = 100_000
_SALT_BYTES = 16
_MIN_PASSWORD_LENGTH = 6
_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[A-Za-z]{2,}$")


def _hash_password(password: str) -> str:
    """Return a salted PBKDF2 hash for the given password.

    The result is stored as ``<salt_hex>:<hash_hex>``.
    """
    salt = os.urandom(_SALT_BYTES)
    derived = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, _PBKDF2_ITERATIONS)
    return f"{salt.hex()}:{derived.hex()}"


def _verify_password(password: str, stored_hash: str) -> bool:
    """Verify a password against a stored ``salt:hash`` string."""
    try:
        salt_hex, hash_hex = stored_hash.split(":", 1)
    except ValueError:
        return False

    try:
        salt = bytes.fromhex(salt_hex)
        expected = bytes.fromhex(hash_hex)
    except ValueError:
        return False

    candidate = hashlib.pbkdf2_hmac(
        "sha256",
        password.encode("utf-8"),
        salt,
        _PBKDF2_ITERATIONS,
    )
    return hmac.compare_digest(candidate, expected)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def register_user(
    name: str | None,
    email: str | None,
    password: str | None,
    phone: str | None = None,
    location: str | None = None,
) -> dict:
    """Create a user account together with its default resume.

    Args:
        name: Display name (required).
        email: Login email (required, must be unique).
        password: Plaintext password, at least 6 characters.
        phone: Optional phone number.
        location: Optional location.

    Returns:
        Dictionary with the created user's data.

    Raises:
        InvalidDataError: If required fields are missing or invalid, or the
            email is already registered.
    """
    name_clean = (name or "").strip()
    email_clean = normalize_email(email or "")
    if not name_clean or not email_clean or not password:
        raise InvalidDataError("Please provide name, email, and password")
    if not _EMAIL_PATTERN.match(email_clean):
        raise InvalidDataError("Please add a valid email")
    if len(password) < _MIN_PASSWORD_LENGTH:
        raise InvalidDataError(
            f"Password must be at least {_MIN_PASSWORD_LENGTH} characters long"
        )

    with get_session() as session:
        existing = session.query(User).filter(User.email == email_clean).first()
        if existing is not None:
            raise InvalidDataError("User already exists with this email")

        user = User(
            name=name_clean,
            email=email_clean,
            password_hash=_hash_password(password),
            phone=phone or "",
            location=location or "",
        )
        session.add(user)
        session.flush()

        get_or_create_resume(session, user)
        result = user_to_dict(user)

    logger.info("Registered user %d", result["id"])
    return result


def authenticate_user(email: str | None, password: str | None) -> dict:
    """Authenticate a user by email and password.

    Returns:
        Dictionary with the user's data.

    Raises:
        InvalidDataError: If email or password is missing.
        AuthenticationError: If the credentials do not match.
    """
    email_clean = normalize_email(email or "")
    if not email_clean or not password:
        raise InvalidDataError("Please provide email and password")

    with get_session() as session:
        user = session.query(User).filter(User.email == email_clean).first()
        if user is None or not _verify_password(password, user.password_hash):
            raise AuthenticationError("Invalid email or password")
        return user_to_dict(user)

"""
Field validation and collision rules for user registration and login.

All functions here are pure: they inspect the values they are given and
never touch the user store. Validators return a mapping of field name to
message; an empty mapping means the input is well-formed.
"""
# Standard library imports
import re
from enum import Enum
from typing import Any, Dict, Iterable, Mapping, Optional

# Local application imports
from .constants import AuthMessages, UserFields
from .models.user import User


EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
NATIONAL_ID_PATTERN = re.compile(r"[0-9]{13}")
MIN_PASSWORD_LENGTH = 6


class Collision(str, Enum):
    """Which unique field of a candidate already exists in the store"""
    NONE = "none"
    EMAIL = "email"
    NATIONAL_ID = "national_id"


def _check_required_text(
    fields: Mapping[str, Any],
    name: str,
    strip: bool = False,
) -> Optional[str]:
    value = fields.get(name)
    if value is None:
        return AuthMessages.FIELD_REQUIRED.format(field=name)
    if not isinstance(value, str):
        return AuthMessages.FIELD_NOT_TEXT.format(field=name)
    if not (value.strip() if strip else value):
        return AuthMessages.FIELD_REQUIRED.format(field=name)
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        # Lone surrogates decode from JSON but can never be serialized back
        return AuthMessages.FIELD_NOT_UTF8.format(field=name)
    return None


def validate_email(email: str) -> Optional[str]:
    """Return an error message unless email looks like local@domain.tld"""
    if EMAIL_PATTERN.fullmatch(email) is None:
        return AuthMessages.INVALID_EMAIL
    return None


def validate_national_id(national_id: str) -> Optional[str]:
    """Return an error message unless the DPI is exactly 13 decimal digits"""
    if NATIONAL_ID_PATTERN.fullmatch(national_id) is None:
        return AuthMessages.INVALID_NATIONAL_ID
    return None


def validate_password_strength(password: str) -> Optional[str]:
    if len(password) < MIN_PASSWORD_LENGTH:
        return AuthMessages.PASSWORD_TOO_SHORT.format(min_length=MIN_PASSWORD_LENGTH)
    return None


def validate_registration_fields(fields: Mapping[str, Any]) -> Dict[str, str]:
    """
    Validate a registration field set.

    Every failing field is reported, not just the first one. Format checks
    only run on fields that passed the required-text check.

    Args:
        fields: Raw request fields (nombre, dpi, email, password)

    Returns:
        Mapping of field name to error message, empty when valid
    """
    errors: Dict[str, str] = {}

    for name in UserFields.REGISTRATION_FIELDS:
        error = _check_required_text(fields, name, strip=(name == UserFields.FULL_NAME))
        if error:
            errors[name] = error

    format_checks = (
        (UserFields.NATIONAL_ID, validate_national_id),
        (UserFields.EMAIL, validate_email),
        (UserFields.PASSWORD, validate_password_strength),
    )
    for name, check in format_checks:
        if name in errors:
            continue
        error = check(fields[name])
        if error:
            errors[name] = error

    return errors


def validate_login_fields(fields: Mapping[str, Any]) -> Dict[str, str]:
    """
    Validate a login field set.

    Email must be present and well-formed; the password only has to be a
    non-empty string. Password strength is not checked at login.

    Args:
        fields: Raw request fields (email, password)

    Returns:
        Mapping of field name to error message, empty when valid
    """
    errors: Dict[str, str] = {}

    for name in UserFields.LOGIN_FIELDS:
        error = _check_required_text(fields, name)
        if error:
            errors[name] = error

    if UserFields.EMAIL not in errors:
        error = validate_email(fields[UserFields.EMAIL])
        if error:
            errors[UserFields.EMAIL] = error

    return errors


def check_collision(email: str, national_id: str, users: Iterable[User]) -> Collision:
    """
    Determine whether a candidate email or DPI is already taken.

    Email is checked against every record before any DPI comparison, so a
    candidate colliding on both always reports Collision.EMAIL.

    Args:
        email: Candidate email (compared case-sensitively)
        national_id: Candidate DPI
        users: Current records in the store

    Returns:
        Collision.EMAIL, Collision.NATIONAL_ID or Collision.NONE
    """
    existing = list(users)
    if any(user.email == email for user in existing):
        return Collision.EMAIL
    if any(user.national_id == national_id for user in existing):
        return Collision.NATIONAL_ID
    return Collision.NONE

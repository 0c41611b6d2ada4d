"""
Rule-based request validation.

Each endpoint declares an ordered list of ``Rule`` objects. ``run_rules``
evaluates all of them and collects every failure so the client can fix
its input in one round trip.
"""
import re
from dataclasses import dataclass
from typing import Any, Callable, Optional

from email_validator import EmailNotValidError, validate_email

from user_api.core.errors import ValidationError

PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 128

_FULL_NAME_RE = re.compile(r"^[A-Za-z][A-Za-z '.\-]*$")
_USERNAME_RE = re.compile(r"^[A-Za-z0-9_]+$")


@dataclass(frozen=True)
class Rule:
    """A single check against one field of the payload."""

    field: str
    message: str
    check: Callable[[Any], bool]
    # Skip this rule when the field is missing (a "required" rule reports it)
    skip_if_missing: bool = True


def run_rules(rules: list[Rule], payload: dict[str, Any]) -> None:
    """
    Evaluate every rule against the payload.

    Raises:
        ValidationError: Listing each failed rule as ``{field, message}``
    """
    errors = []
    for rule in rules:
        value = payload.get(rule.field)
        if rule.skip_if_missing and is_blank(value):
            continue
        if not rule.check(value):
            errors.append({"field": rule.field, "message": rule.message})

    if errors:
        raise ValidationError(errors=errors)


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def is_email(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def normalize_email(value: Optional[str]) -> Optional[str]:
    """Trim and lower-case an email address."""
    if value is None:
        return None
    return value.strip().lower()


def required(field: str, message: str) -> Rule:
    return Rule(field, message, lambda value: not is_blank(value), skip_if_missing=False)


def _length_between(low: int, high: int) -> Callable[[Any], bool]:
    return lambda value: low <= len(value.strip()) <= high


EMAIL_RULES = [
    required("email", "Email is required"),
    Rule("email", "Please provide a valid email address", is_email),
]

PASSWORD_RULES = [
    required("password", "Password is required"),
    Rule(
        "password",
        f"Password must be between {PASSWORD_MIN_LENGTH} and {PASSWORD_MAX_LENGTH} characters long",
        lambda value: PASSWORD_MIN_LENGTH <= len(value) <= PASSWORD_MAX_LENGTH,
    ),
    Rule(
        "password",
        "Password must contain at least one uppercase letter, one lowercase letter, and one number",
        lambda value: bool(
            re.search(r"[a-z]", value)
            and re.search(r"[A-Z]", value)
            and re.search(r"\d", value)
        ),
    ),
]

USER_PROFILE_RULES = [
    required("fullName", "Full name is required"),
    Rule("fullName", "Full name must be between 2 and 50 characters", _length_between(2, 50)),
    Rule(
        "fullName",
        "Full name can only contain letters, spaces, apostrophes, hyphens and periods",
        lambda value: bool(_FULL_NAME_RE.match(value.strip())),
    ),
    required("username", "Username is required"),
    Rule("username", "Username must be between 3 and 30 characters", _length_between(3, 30)),
    Rule(
        "username",
        "Username can only contain letters, numbers, and underscores",
        lambda value: bool(_USERNAME_RE.match(value.strip())),
    ),
]

USER_REGISTRATION_RULES = USER_PROFILE_RULES + EMAIL_RULES + PASSWORD_RULES

ADMIN_REGISTRATION_RULES = EMAIL_RULES + PASSWORD_RULES

LOGIN_RULES = EMAIL_RULES + [
    required("password", "Password is required"),
]

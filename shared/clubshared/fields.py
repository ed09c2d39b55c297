"""
Reusable field types for request schemas.

Each type is an Annotated alias so that constraints travel with the type
when schemas are derived from one another (see schemas.partial).
"""
import re
from datetime import date, datetime, timezone
from typing import Annotated, Any

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, AnyUrl, BeforeValidator, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

from .constants import PASSWORD_MIN_LENGTH


def _invalid_date() -> PydanticCustomError:
    return PydanticCustomError("invalid_date", "Invalid date")


def coerce_datetime(value: Any) -> datetime:
    """
    Coerce a date-like input to an aware UTC datetime.

    Accepts datetime/date objects, ISO-8601 strings and millisecond
    timestamps. Naive values are read as UTC.
    """
    if isinstance(value, bool):
        raise _invalid_date()

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, (int, float)):
        try:
            parsed = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            raise _invalid_date()
    elif isinstance(value, str):
        text = value.strip()
        if text[-1:] in ("Z", "z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            raise _invalid_date()
    else:
        raise _invalid_date()

    try:
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc)
    except (OverflowError, ValueError):
        # offset pushes the instant outside year 1..9999
        raise _invalid_date()


def reject_bool(value: Any) -> Any:
    """Booleans are not numbers here, even though int(True) works"""
    if isinstance(value, bool):
        raise PydanticCustomError("int_type", "Input should be a valid integer")
    return value


_url_adapter = TypeAdapter(AnyUrl)


def check_url(value: str) -> str:
    """Require an absolute URL; the caller's string is kept unchanged"""
    try:
        _url_adapter.validate_python(value)
    except PydanticValidationError:
        raise PydanticCustomError("url", "Invalid url")
    return value


def check_email(value: str) -> str:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        raise PydanticCustomError("email", "Invalid email address")
    return value


_PASSWORD_RULES = (
    (lambda v: len(v) >= PASSWORD_MIN_LENGTH,
     f"Password must be at least {PASSWORD_MIN_LENGTH} characters"),
    (re.compile(r"[A-Z]").search, "Password must contain at least one uppercase letter"),
    (re.compile(r"[a-z]").search, "Password must contain at least one lowercase letter"),
    (re.compile(r"[0-9]").search, "Password must contain at least one number"),
)


def check_password(value: str) -> str:
    """Report every unmet password requirement in a single message"""
    problems = [message for rule, message in _PASSWORD_RULES if not rule(value)]
    if problems:
        raise PydanticCustomError("password_strength", "; ".join(problems))
    return value


CoercedDatetime = Annotated[datetime, BeforeValidator(coerce_datetime)]
CoercedInt = Annotated[int, BeforeValidator(reject_bool)]
UrlStr = Annotated[str, AfterValidator(check_url)]
Email = Annotated[str, AfterValidator(check_email)]
Password = Annotated[str, AfterValidator(check_password)]

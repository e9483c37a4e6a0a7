"""
Custom GraphQL scalars

Both scalars hold plain strings; output is passed through unchanged and
input is validated but never normalized.
"""

from datetime import date, datetime
from typing import Any, NewType

import strawberry
from pydantic import EmailStr, TypeAdapter, ValidationError

email_adapter = TypeAdapter(EmailStr)


def serialize_datetime(value: Any) -> str:
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)


def parse_datetime(value: Any) -> str:
    """Accept an ISO 8601 date or date-time string."""
    if not isinstance(value, str):
        raise ValueError(f"DateTime must be a string, got {type(value).__name__}")
    try:
        datetime.fromisoformat(value)
    except ValueError:
        raise ValueError(f'DateTime cannot represent "{value}"') from None
    return value


def parse_email(value: Any) -> str:
    """Accept an email address; the value is returned as given, not normalized."""
    if not isinstance(value, str):
        raise ValueError(f"EmailAddress must be a string, got {type(value).__name__}")
    try:
        email_adapter.validate_python(value)
    except ValidationError:
        raise ValueError(f'EmailAddress cannot represent "{value}"') from None
    return value


DateTime = strawberry.scalar(
    NewType("DateTime", str),
    serialize=serialize_datetime,
    parse_value=parse_datetime,
    description="ISO 8601 date or date-time string",
)

EmailAddress = strawberry.scalar(
    NewType("EmailAddress", str),
    serialize=str,
    parse_value=parse_email,
    description="Email address string",
)

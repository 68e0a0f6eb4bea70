"""
Input checks shared by the builder classes.

Each ``validate_*`` function returns the (possibly normalized) value when it
passes, and raises :class:`iiif_creator.serialize.errors.ValidationError`
carrying the caller-provided message otherwise.
"""
import numbers
from datetime import datetime, timezone
from enum import Enum
from typing import Type, TypeVar, Union
from urllib.parse import urlparse

from iiif_creator.serialize.errors import ValidationError

E = TypeVar('E', bound=Enum)


def is_url(value) -> bool:
    """
    True when ``value`` is an absolute URL, that is, a string with both a
    scheme and a network location.

    >>> is_url('http://creativecommons.org/licenses/by/4.0/')
    True
    >>> is_url('creativecommons.org/licenses')
    False
    """
    if not isinstance(value, str) or not value or any(c.isspace() for c in value):
        return False
    try:
        parsed = urlparse(value)
    except ValueError:
        return False
    return bool(parsed.scheme) and bool(parsed.netloc)


def validate_url(value, message: str) -> str:
    if not is_url(value):
        raise ValidationError(message)
    return value


def _is_int(value) -> bool:
    # bool is an int subclass, but True is never a count
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def validate_non_negative_int(value, message: str) -> int:
    if not _is_int(value) or value < 0:
        raise ValidationError(message)
    return int(value)


def validate_positive_int(value, message: str) -> int:
    if not _is_int(value) or value <= 0:
        raise ValidationError(message)
    return int(value)


def validate_positive_number(value, message: str) -> float:
    if not isinstance(value, numbers.Real) or isinstance(value, bool) or value <= 0:
        raise ValidationError(message)
    return value


def validate_in_enum(value: Union[str, E], enum_class: Type[E], message: str) -> E:
    """
    Coerces ``value`` into a member of ``enum_class``.

    :param value: an enum member or its string value
    :param enum_class: the closed vocabulary
    :param message: error message to use when the value is not in the vocabulary
    :return: the enum member
    """
    if isinstance(value, enum_class):
        return value
    try:
        return enum_class(value)
    except ValueError:
        raise ValidationError(f"{message}: {value!r} (allowed: {', '.join(m.value for m in enum_class)})")


def validate_datetime(value: Union[str, datetime], message: str) -> datetime:
    """
    Parses ISO-8601 strings (a trailing ``Z`` is accepted) and returns an
    aware datetime. Naive datetimes are returned as-is; the caller decides
    how to interpret them.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        text = value.strip()
        if text.endswith('Z'):
            text = text[:-1] + '+00:00'
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            raise ValidationError(f"{message}: {value!r}")
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed
    raise ValidationError(f"{message}: {value!r}")

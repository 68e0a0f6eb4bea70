"""
Exceptions raised while building or serializing IIIF resources.

Every failure is a construction bug on the caller's side, so nothing here is
meant to be caught and recovered from inside the library: an error aborts the
whole serialization call and no partial document is produced.
"""
from typing import Optional

__all__ = [
    'IIIFError',
    'InvalidArgument',
    'ValidationError',
    'MissingRequiredField',
    'MissingRequiredItems',
    'InvalidEmbedding',
    'MissingViewingHint',
    'InvalidMemberType',
]


class IIIFError(ValueError):
    """
    Base class of all errors raised by this package.
    """


class InvalidArgument(IIIFError):
    """
    Raised when a constructor receives an unusable argument, e.g. an empty id.
    """


class ValidationError(IIIFError):
    """
    Raised when a value fails a format check: a non-URL where a URL is
    expected, a negative number where a non-negative integer is expected, or
    a value outside of a closed vocabulary.
    """


class MissingRequiredField(IIIFError):
    """
    Raised at serialization time when a required field is empty or unset.

    :param field: the JSON key of the missing field
    :param message: human-readable description, naming the resource
    """

    def __init__(self, field: str, message: Optional[str] = None) -> None:
        self.field = field
        super().__init__(message if message is not None else f"The {field} must be present")


class MissingRequiredItems(MissingRequiredField):
    """
    Raised when a resource that must sequence at least one child has none.
    """


class InvalidEmbedding(IIIFError):
    """
    Raised when a child resource is embedded in a representation its parent
    does not allow.
    """


class MissingViewingHint(InvalidEmbedding):
    """
    Raised when a non top-level Collection embedded in another Collection
    does not declare a behavior.
    """


class InvalidMemberType(IIIFError, TypeError):
    """
    Raised when a member list receives an object of a type it cannot hold.
    """

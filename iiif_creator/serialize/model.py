"""
The :mod:`model` module contains the classes and functions every IIIF node
uses to turn itself into plain JSON-compatible Python data.

The :class:`IIIFObject` class or one of its derivatives is subclassed by
all other classes defined in this SDK, except for :class:`IIIFObjectEncoder`.

Serialization is a depth-first walk: a node's :meth:`IIIFObject._serialize`
builds an ordered ``dict`` (or a ``list``, or a bare ``str`` for id-only
references) by passing each of its fields through one of the three presence
primitives, :func:`add`, :func:`add_required` and :func:`add_if_exists`.
Those primitives convert any child that itself implements ``_serialize``
before assigning it, so the whole graph is rendered by calling
``_serialize()`` on the root.
"""

import json
from datetime import datetime, timezone
from enum import Enum
from typing import Union, Any, Dict, List, Mapping, Optional, TypeVar, Generic, Iterator, Set

from deepdiff import DeepDiff

from .errors import MissingRequiredField

T = TypeVar('T')
S = TypeVar('S')
PRMTV_TYPES = Union[str, int, float, bool, None]
JSON_TYPES = Union[PRMTV_TYPES, Dict[str, Any], List[Any]]

__all__ = [
    'IIIFObject',
    'IIIFObjectEncoder',
    'DataList',
    'DataDict',
    'PRMTV_TYPES',
    'JSON_TYPES',
    'add',
    'add_required',
    'add_if_exists',
    'to_plain',
]

NAVDATE_FORMAT = '%Y-%m-%dT%H:%M:%SZ'


def to_plain(value: Any) -> JSON_TYPES:
    """
    Recursively converts a value into JSON-compatible data. Objects that
    implement ``_serialize`` are rendered (children before parents), enum
    members become their values and datetimes are written as UTC
    ``navDate`` strings.
    """
    if hasattr(value, '_serialize'):
        return value._serialize()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.strftime(NAVDATE_FORMAT)
    if isinstance(value, (list, tuple)):
        return [to_plain(v) for v in value]
    if isinstance(value, dict):
        return {to_plain(k): to_plain(v) for k, v in value.items()}
    return value


def add(container: Dict[str, Any], key: Union[str, Enum], value: Any, flatten: bool = True) -> None:
    """
    Adds a value to the container under ``key``.

    The value is converted with :func:`to_plain` first. When ``flatten`` is
    set and the converted value is a single-element list, the element itself
    is stored instead of the list.

    :param container: the dict being built
    :param key: the JSON key, a string or an :class:`iiif_creator.vocabulary.Identifier`
    :param value: the value to add
    :param flatten: whether to collapse single-element lists into their only element
    """
    if isinstance(key, Enum):
        key = key.value
    value = to_plain(value)
    if flatten and isinstance(value, list) and len(value) == 1:
        value = value[0]
    container[key] = value


def add_required(container: Dict[str, Any], key: Union[str, Enum], value: Any,
                 message: str, flatten: bool = True) -> None:
    """
    Same as :func:`add`, but the value must not be empty.

    :raises MissingRequiredField: when the value is empty
    """
    if IIIFObject.is_empty(value):
        raise MissingRequiredField(key.value if isinstance(key, Enum) else key, message)
    add(container, key, value, flatten)


def add_if_exists(container: Dict[str, Any], key: Union[str, Enum], value: Any, flatten: bool = True) -> None:
    """
    Same as :func:`add`, but empty values are skipped without leaving a key behind.
    """
    if not IIIFObject.is_empty(value):
        add(container, key, value, flatten)


class IIIFObject(object):
    """
    Abstract superclass for IIIF nodes.

    Like in the JSON-LD world, a node is an ordered set of key-value pairs.
    The default :meth:`_serialize` walks the instance attributes in the
    order they were first assigned in ``__init__`` and writes each of them
    under its IIIF key name: ``snake_case`` attribute names become
    ``camelCase`` keys and a leading underscore becomes ``@`` (so ``_context``
    is written as ``@context``).

    Besides the reserved names, three class-level settings steer the
    default serialization, and they MUST be set in the ``__init__()`` before
    calling the super method:

    1. _required_attributes:
       names of attributes that must not be empty when serialized. An empty
       required attribute raises :class:`MissingRequiredField`; an empty
       optional one is skipped, no ``null`` or ``[]`` placeholder is written.
    2. _flatten_attributes:
       names of attributes whose single-element list value is written as the
       element itself.
    3. _exclude_from_diff:
       names of attributes that are ignored by ``__eq__``.

    Classes with a fixed field order or a context dependent representation
    (all resources) override :meth:`_serialize` and use the presence
    primitives directly.
    """

    # these are the reserved names that cannot be used as attribute names, and
    # they won't be serialized
    reserved_names: Set[str] = {
        'reserved_names',
        '_required_attributes',
        '_flatten_attributes',
        '_exclude_from_diff',
    }
    _required_attributes: List[str]
    _flatten_attributes: Set[str]
    _exclude_from_diff: Set[str]

    def __init__(self) -> None:
        if not hasattr(self, '_required_attributes'):
            self._required_attributes = []
        if not hasattr(self, '_flatten_attributes'):
            self._flatten_attributes = set()
        if not hasattr(self, '_exclude_from_diff'):
            self._exclude_from_diff = set()

    @property
    def resource_name(self) -> str:
        """
        Name used in error messages.
        """
        return self.__class__.__name__

    @staticmethod
    def json_key(attribute_name: str) -> str:
        """
        Maps a python attribute name to its IIIF key.

        >>> IIIFObject.json_key('see_also')
        'seeAlso'
        >>> IIIFObject.json_key('_context')
        '@context'
        """
        prefix = ''
        if attribute_name.startswith('_'):   # _ as a placeholder ``@`` in json-ld
            prefix = '@'
            attribute_name = attribute_name[1:]
        head, *tail = attribute_name.split('_')
        return prefix + head + ''.join(part[:1].upper() + part[1:] for part in tail)

    def _named_attributes(self) -> Iterator[str]:
        return (n for n in self.__dict__.keys() if n not in self.reserved_names)

    def serialize(self, pretty: bool = False) -> str:
        """
        Generates JSON representation of an object.

        :param pretty: If True, returns string representation with indentation.
        :return: JSON string of the object.
        """
        return json.dumps(self._serialize(), indent=2 if pretty else None,
                          ensure_ascii=False, cls=IIIFObjectEncoder)

    def _serialize(self) -> JSON_TYPES:
        """
        Maps the object to a plain python dict, applying the presence rules
        to every named attribute.

        If a subclass needs special treatment during the mapping, it needs to
        override this method.

        :return: the prepared dictionary
        """
        serializing_obj: Dict[str, Any] = {}
        for k in self._named_attributes():
            v = self.__dict__[k]
            key = self.json_key(k)
            flatten = k in self._flatten_attributes
            if k in self._required_attributes:
                add_required(serializing_obj, key, v,
                             f"The {key} must be present in the {self.resource_name}", flatten)
            else:
                add_if_exists(serializing_obj, key, v, flatten)
        return serializing_obj

    @staticmethod
    def is_empty(obj) -> bool:
        """
        return True if the obj is None or "emtpy". The emptiness first defined as
        having zero length. But for objects that lack __len__ method, we need
        additional check.
        """
        if obj is None:
            return True
        if hasattr(obj, '__len__') and len(obj) == 0:
            return True
        return False

    def __str__(self) -> str:
        return self.serialize(False)

    def __eq__(self, other) -> bool:
        return isinstance(other, type(self)) and \
               len(DeepDiff(self, other, report_repetition=True,
                            exclude_paths=[f"root.{name}" for name in self._exclude_from_diff])
                   ) == 0


class IIIFObjectEncoder(json.JSONEncoder):
    """
    Encoder class to define behaviors of serialization
    """

    def default(self, obj):
        """
        Overrides default encoding behavior to prioritize :func:`IIIFObject._serialize()`.
        """
        if hasattr(obj, '_serialize') or isinstance(obj, (Enum, datetime)):
            return to_plain(obj)
        return json.JSONEncoder.default(self, obj)


class DataList(IIIFObject, Generic[T]):
    """
    The DataList class is an abstraction that represents the various
    ordered lists found in IIIF documents, such as metadata entries,
    behaviors, providers and services. It serializes to a JSON array.

    :param items: the initial members of the list
    """
    reserved_names = IIIFObject.reserved_names | {'_items'}

    def __init__(self, *items: T) -> None:
        self._items: List[T] = []
        super().__init__()
        for item in items:
            self.append(item)

    def _serialize(self) -> list:  # pytype: disable=signature-mismatch
        """
        Internal serialization method. Returns a list.

        :return: list of the serialized members.
        """
        return [to_plain(item) for item in self._items]

    def _validate_item(self, item: Any) -> T:
        """
        Hook for subclasses to check (and coerce) a member before it is stored.
        """
        return item

    def append(self, item: T) -> None:
        self._items.append(self._validate_item(item))

    def __getitem__(self, idx: int) -> T:
        return self._items[idx]

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._items)

    def __contains__(self, item) -> bool:
        return item in self._items

    def empty(self) -> None:
        self._items = []


class DataDict(IIIFObject, Mapping[T, S]):
    """
    Ordered dict-like node; serializes to a JSON object in insertion order.
    ``__eq__`` is the one of :class:`IIIFObject`: only nodes of the same
    class are equal, never a plain ``dict``. Being a :class:`typing.Mapping`
    makes deepdiff compare two nodes key by key and value by value.
    """
    reserved_names = IIIFObject.reserved_names | {'_items'}

    def __init__(self) -> None:
        self._items: Dict[T, S] = dict()
        super().__init__()

    def _serialize(self) -> dict:  # pytype: disable=signature-mismatch
        return {to_plain(k): to_plain(v) for k, v in self._items.items()}

    def get(self, key: T, default=None) -> Optional[S]:
        return self._items.get(key, default)

    def items(self):
        return self._items.items()

    def keys(self):
        return self._items.keys()

    def values(self):
        return self._items.values()

    def __getitem__(self, key: T) -> S:
        return self._items.__getitem__(key)

    def __setitem__(self, key: T, value: S) -> None:
        self._items.__setitem__(key, value)

    def __iter__(self):
        return self._items.__iter__()

    def __len__(self):
        return self._items.__len__()

    def __contains__(self, item):
        return item in self._items

    def empty(self) -> None:
        self._items = {}

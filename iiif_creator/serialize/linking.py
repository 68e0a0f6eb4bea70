"""
The :mod:`linking` module contains the typed link descriptors of the
Presentation API: ``seeAlso``, ``rendering``, ``homepage``, ``partOf`` and
``service``.

All of them share the same shape (an ``id`` and a ``type``, plus a few
optional descriptive fields) and differ only in which fields they accept
and which of those are required. Each class declares its own attributes
and leaves the rendering to the default presence rules, so the order of
assignment in ``__init__`` is the order of the JSON keys.
"""
from typing import List, Optional

from .errors import InvalidArgument, InvalidMemberType
from .model import IIIFObject, DataList
from .values import LanguageStrings

__all__ = [
    'LinkingProperty',
    'SeeAlso',
    'Rendering',
    'Homepage',
    'PartOf',
    'ServiceItem',
    'Service',
]


class LinkingProperty(IIIFObject):
    """
    Abstract superclass of the link descriptors.

    :param id: URI of the linked resource
    :param type: type of the linked resource, e.g. ``Dataset`` or ``Text``
    """

    def __init__(self, id: str, type: str) -> None:
        if not id:
            raise InvalidArgument(f"The id must be present in a {self.__class__.__name__}")
        self.id = id
        self.type = type
        if not hasattr(self, '_required_attributes'):
            self._required_attributes = ['id', 'type']
        super().__init__()

    def set_label(self, label: LanguageStrings) -> None:
        self.label = label


class SeeAlso(LinkingProperty):
    """
    A machine-readable resource related to the one it is attached to,
    e.g. a MARC or MODS record.
    """

    def __init__(self, id: str, type: str) -> None:
        super().__init__(id, type)
        self.label: Optional[LanguageStrings] = None
        self.format: Optional[str] = None
        self.profile: Optional[str] = None

    def set_format(self, format: str) -> None:
        self.format = format

    def set_profile(self, profile: str) -> None:
        self.profile = profile


class Rendering(LinkingProperty):
    """
    An alternative, non-IIIF representation of the resource, such as a PDF.
    Renderings are for humans, so the label is required. Renderings have no
    ``profile``.
    """

    def __init__(self, id: str, type: str, label: LanguageStrings) -> None:
        self._required_attributes = ['id', 'type', 'label']
        super().__init__(id, type)
        self.label = label
        self.format: Optional[str] = None
        self.language: List[str] = []

    def set_format(self, format: str) -> None:
        self.format = format

    def add_language(self, language: str) -> None:
        self.language.append(language)


class Homepage(Rendering):
    """
    The web page about the resource. Same fields as :class:`Rendering`; a
    homepage has no ``profile`` either.
    """

    def __init__(self, id: str, label: LanguageStrings, type: str = 'Text') -> None:
        super().__init__(id, type, label)


class PartOf(LinkingProperty):
    """
    A larger resource (typically a Collection) this resource is part of.
    """

    def __init__(self, id: str, type: str) -> None:
        super().__init__(id, type)
        self.label: Optional[LanguageStrings] = None


class ServiceItem(LinkingProperty):
    """
    A service the client can interact with, e.g. an IIIF Image API endpoint
    (``ImageService3`` with profile ``level1``). Services can nest their own
    services.
    """

    def __init__(self, id: str, type: str, profile: Optional[str] = None) -> None:
        super().__init__(id, type)
        self.profile = profile
        self.label: Optional[LanguageStrings] = None
        self.service: Optional['Service'] = None

    def set_profile(self, profile: str) -> None:
        self.profile = profile

    def set_service(self, service: 'Service') -> None:
        self.service = service


class Service(DataList[ServiceItem]):
    """
    The ordered list of :class:`ServiceItem` written under a ``service`` key.
    """

    def _validate_item(self, item):
        if not isinstance(item, ServiceItem):
            raise InvalidMemberType(f"A service must be a ServiceItem, got {type(item).__name__}")
        return item

    def add_item(self, item: ServiceItem) -> None:
        self.append(item)

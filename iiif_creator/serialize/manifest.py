"""
The :mod:`manifest` module contains :class:`Manifest`, the description of
one compound object (a book, a painting, a recording): its canvases, its
structure and the information needed to present it.
"""
from typing import Any, Dict, List, Optional, Union

from iiif_creator.vocabulary import Identifier
from .annotation import AnnotationPage
from .canvas import Canvas
from .errors import InvalidMemberType, MissingRequiredItems
from .linking import ServiceItem
from .model import add_if_exists
from .range import Range
from .resource import Resource
from .values import Reference

__all__ = ['Manifest']


class Manifest(Resource):
    """
    A Manifest. It must have a label and at least one Canvas in its
    ``items``. Embedded in a Collection, it renders only its member data
    (``id``, ``type``, ``label`` and ``behavior``).

    :param id: URI of the manifest, where its JSON is published
    :param is_top_level: whether the manifest is the root of the document
    """
    TYPE = 'Manifest'
    _label_required = True

    def __init__(self, id: str, is_top_level: bool = False) -> None:
        super().__init__(id, is_top_level)
        self.items: List[Canvas] = []
        self.structures: List[Range] = []
        self.annotations: List[AnnotationPage] = []
        self.services: List[ServiceItem] = []
        self.start: Optional[Reference] = None

    def add_item(self, canvas: Canvas) -> None:
        if not isinstance(canvas, Canvas):
            raise InvalidMemberType(f"Manifest items must be Canvases, got {type(canvas).__name__}")
        self.items.append(canvas)

    def add_structure(self, range_: Range) -> None:
        if not isinstance(range_, Range):
            raise InvalidMemberType(f"Manifest structures must be Ranges, got {type(range_).__name__}")
        self.structures.append(range_)

    def add_annotation(self, page: AnnotationPage) -> None:
        if not isinstance(page, AnnotationPage):
            raise InvalidMemberType(f"Manifest annotations must be AnnotationPages, got {type(page).__name__}")
        self.annotations.append(page)

    def add_services_item(self, service_item: ServiceItem) -> None:
        """
        Adds a service that is referenced from several places in the
        document and listed once at the top, under ``services``.
        """
        self.services.append(service_item)

    def set_start(self, canvas: Union[Canvas, Reference]) -> None:
        """
        Sets the canvas a client should show first. The canvas itself stays
        owned by ``items``; only a reference to it is kept here.
        """
        self.start = canvas if isinstance(canvas, Reference) else Reference.to(canvas)

    def _serialize_member_extras(self, serialized: Dict[str, Any]) -> None:
        add_if_exists(serialized, Identifier.BEHAVIOR, self.behavior, False)

    def _serialize_full(self, serialized: Dict[str, Any]) -> None:
        if self.is_empty(self.items):
            raise MissingRequiredItems(Identifier.ITEMS.value,
                                       f"A Manifest must have at least one Canvas in its items ({self.id})")
        self._serialize_context(serialized)
        self._serialize_id_and_type(serialized)
        add_if_exists(serialized, Identifier.BEHAVIOR, self.behavior, False)
        add_if_exists(serialized, Identifier.VIEWING_DIRECTION, self.viewing_direction)
        add_if_exists(serialized, Identifier.NAVDATE, self.nav_date)
        self._serialize_label(serialized)
        self._serialize_descriptive(serialized)
        add_if_exists(serialized, Identifier.SERVICES, self.services, False)
        add_if_exists(serialized, Identifier.START, self.start)
        add_if_exists(serialized, Identifier.ITEMS, self.items, False)
        add_if_exists(serialized, Identifier.STRUCTURES, self.structures, False)
        add_if_exists(serialized, Identifier.ANNOTATIONS, self.annotations, False)
        self._serialize_trailing(serialized)

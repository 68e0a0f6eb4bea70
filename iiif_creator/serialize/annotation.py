"""
The :mod:`annotation` module contains the classes that put content on a
Canvas: :class:`ContentResource` (the image, sound, video or text itself),
:class:`Annotation` (associating a body with a target) and
:class:`AnnotationPage` (an ordered list of annotations).
"""
from typing import Any, Dict, List, Optional, Union

from iiif_creator.utils import validator
from iiif_creator.vocabulary import ContentType, Identifier, Motivation
from .errors import InvalidMemberType
from .model import add_if_exists, add_required
from .resource import Resource
from .values import Reference

__all__ = ['ContentResource', 'Annotation', 'AnnotationPage']


class ContentResource(Resource):
    """
    A web resource that is painted onto, or otherwise associated with, a
    Canvas through an :class:`Annotation`.

    :param id: URI of the content
    :param type: ``Image``, ``Sound``, ``Video``, ``Text``, ``Dataset`` or ``Model``
    """

    def __init__(self, id: str, type: Union[str, ContentType], is_top_level: bool = False) -> None:
        super().__init__(id, is_top_level)
        self.type = type.value if isinstance(type, ContentType) else type
        self.format: Optional[str] = None
        self.profile: Optional[str] = None
        self.height: Optional[int] = None
        self.width: Optional[int] = None
        self.duration: Optional[float] = None
        self.rotation: Optional[int] = None
        self.language: List[str] = []

    def set_type(self, type: Union[str, ContentType]) -> None:
        self.type = type.value if isinstance(type, ContentType) else type

    def set_format(self, format: str) -> None:
        self.format = format

    def set_profile(self, profile: str) -> None:
        self.profile = profile

    def set_height(self, height: int) -> None:
        self.height = validator.validate_positive_int(height, "The height must be a positive integer")

    def set_width(self, width: int) -> None:
        self.width = validator.validate_positive_int(width, "The width must be a positive integer")

    def set_dimensions(self, height: int, width: int) -> None:
        self.set_height(height)
        self.set_width(width)

    def set_duration(self, duration: float) -> None:
        self.duration = validator.validate_positive_number(duration, "The duration must be a positive number")

    def set_rotation(self, rotation: int) -> None:
        self.rotation = validator.validate_non_negative_int(rotation, "The rotation must be a non-negative integer")

    def add_language(self, language: str) -> None:
        self.language.append(language)

    def is_image(self) -> bool:
        return self.type == ContentType.IMAGE.value

    def _serialize_full(self, serialized: Dict[str, Any]) -> None:
        self._serialize_context(serialized)
        self._serialize_id_and_type(serialized)
        add_if_exists(serialized, Identifier.FORMAT, self.format)
        add_if_exists(serialized, Identifier.PROFILE, self.profile)
        add_if_exists(serialized, Identifier.HEIGHT, self.height)
        add_if_exists(serialized, Identifier.WIDTH, self.width)
        add_if_exists(serialized, Identifier.DURATION, self.duration)
        add_if_exists(serialized, Identifier.ROTATION, self.rotation)
        add_if_exists(serialized, Identifier.LANGUAGE, self.language, False)
        self._serialize_label(serialized)
        self._serialize_descriptive(serialized)
        self._serialize_trailing(serialized)


class Annotation(Resource):
    """
    An annotation associating a body (usually a :class:`ContentResource`)
    with a target (usually a Canvas, or a region of it). Painting
    annotations put the content of a Canvas on it; any other motivation
    is commentary about it.

    :param id: URI of the annotation
    :param motivation: a :class:`iiif_creator.vocabulary.Motivation` or any other motivation string
    :param target: URI of the target, or a :class:`Reference` to it
    """
    TYPE = 'Annotation'

    def __init__(self, id: str, motivation: Union[str, Motivation, None] = None,
                 target: Union[str, Reference, None] = None, is_top_level: bool = False) -> None:
        super().__init__(id, is_top_level)
        self.motivation: Optional[str] = None
        self.target: Union[str, Reference, None] = target
        self.body: Optional[ContentResource] = None
        if motivation is not None:
            self.set_motivation(motivation)

    def set_motivation(self, motivation: Union[str, Motivation]) -> None:
        self.motivation = motivation.value if isinstance(motivation, Motivation) else motivation

    def set_target(self, target: Union[str, Reference]) -> None:
        self.target = target

    def set_body(self, body: ContentResource) -> None:
        if not isinstance(body, ContentResource):
            raise InvalidMemberType(f"The body of an Annotation must be a ContentResource, got {type(body).__name__}")
        self.body = body

    def is_painting(self) -> bool:
        return self.motivation == Motivation.PAINTING.value

    def _serialize_full(self, serialized: Dict[str, Any]) -> None:
        self._serialize_context(serialized)
        self._serialize_id_and_type(serialized)
        self._serialize_label(serialized)
        self._serialize_descriptive(serialized)
        add_required(serialized, Identifier.MOTIVATION, self.motivation, self._message(Identifier.MOTIVATION))
        add_if_exists(serialized, Identifier.BODY, self.body)
        add_required(serialized, Identifier.TARGET, self.target, self._message(Identifier.TARGET))
        self._serialize_trailing(serialized)


class AnnotationPage(Resource):
    """
    An ordered list of :class:`Annotation`. Canvases list their painting
    annotations in pages under ``items`` and their other annotations in
    pages under ``annotations``.
    """
    TYPE = 'AnnotationPage'

    def __init__(self, id: str, is_top_level: bool = False) -> None:
        super().__init__(id, is_top_level)
        self.items: List[Annotation] = []

    def add_item(self, annotation: Annotation) -> None:
        if not isinstance(annotation, Annotation):
            raise InvalidMemberType(f"An AnnotationPage can only hold Annotations, got {type(annotation).__name__}")
        self.items.append(annotation)

    def _serialize_full(self, serialized: Dict[str, Any]) -> None:
        self._serialize_context(serialized)
        self._serialize_id_and_type(serialized)
        self._serialize_label(serialized)
        self._serialize_descriptive(serialized)
        add_if_exists(serialized, Identifier.ITEMS, self.items, False)
        self._serialize_trailing(serialized)

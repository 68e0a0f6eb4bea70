"""
The :mod:`canvas` module contains :class:`Canvas`, a single view (a page,
a side of a photograph, a track of a recording) of an object.
"""
import warnings
from typing import Any, Dict, Iterator, List, Optional, Tuple

from iiif_creator.utils import validator
from iiif_creator.vocabulary import Identifier
from .annotation import Annotation, AnnotationPage
from .errors import InvalidMemberType
from .model import add_if_exists, add_required
from .resource import Resource

__all__ = ['Canvas', 'DIMENSION_SYNTHESIS_THRESHOLD']

# images with a side below this many pixels are scaled up to make the canvas
DIMENSION_SYNTHESIS_THRESHOLD = 1200


class Canvas(Resource):
    """
    A virtual container with a height and a width (and/or a duration) onto
    which content is painted by annotations.

    When no dimensions are set explicitly, the canvas derives them from
    the images painted on it at serialization time: the largest image
    width and the largest image height are taken, and if either of them is
    below :data:`DIMENSION_SYNTHESIS_THRESHOLD` both are doubled. If no
    image reports both dimensions, or both are already large enough, the
    dimensions stay unset. A canvas in the full view must have a height
    and a width after this step.
    """
    TYPE = 'Canvas'

    def __init__(self, id: str, is_top_level: bool = False) -> None:
        super().__init__(id, is_top_level)
        self.height: Optional[int] = None
        self.width: Optional[int] = None
        self.duration: Optional[float] = None
        self.items: List[AnnotationPage] = []
        self.annotations: List[AnnotationPage] = []

    def set_dimensions(self, height: int, width: int) -> None:
        self.height = validator.validate_positive_int(height, "The height must be a positive integer")
        self.width = validator.validate_positive_int(width, "The width must be a positive integer")

    def set_duration(self, duration: float) -> None:
        self.duration = validator.validate_positive_number(duration, "The duration must be a positive number")

    def add_item(self, page: AnnotationPage) -> None:
        """
        Adds a page of painting annotations.
        """
        if not isinstance(page, AnnotationPage):
            raise InvalidMemberType(f"Canvas items must be AnnotationPages, got {type(page).__name__}")
        self.items.append(page)

    def add_annotation(self, page: AnnotationPage) -> None:
        """
        Adds a page of non-painting annotations (commentary, transcriptions, ...).
        """
        if not isinstance(page, AnnotationPage):
            raise InvalidMemberType(f"Canvas annotations must be AnnotationPages, got {type(page).__name__}")
        self.annotations.append(page)

    def painting_annotations(self) -> Iterator[Annotation]:
        for page in self.items:
            for annotation in page.items:
                if annotation.is_painting():
                    yield annotation

    def _image_dimensions(self) -> Iterator[Tuple[Optional[int], Optional[int]]]:
        for annotation in self.painting_annotations():
            body = annotation.body
            if body is not None and body.is_image():
                yield body.width, body.height

    def synthesized_dimensions(self) -> Tuple[Optional[int], Optional[int]]:
        """
        Computes the ``(width, height)`` the canvas would be given from its
        images, without changing the canvas. Returns ``(None, None)`` when
        nothing can be derived.
        """
        widths, heights = [], []
        for width, height in self._image_dimensions():
            if width:
                widths.append(width)
            if height:
                heights.append(height)
        if not widths or not heights:
            return None, None
        width, height = max(widths), max(heights)
        if width < DIMENSION_SYNTHESIS_THRESHOLD or height < DIMENSION_SYNTHESIS_THRESHOLD:
            return width * 2, height * 2
        return None, None

    def _dimensions(self) -> Tuple[Optional[int], Optional[int]]:
        if self.width is not None or self.height is not None:
            return self.width, self.height
        width, height = self.synthesized_dimensions()
        if width is not None:
            warnings.warn(f"Canvas {self.id} has no dimensions, using {width}x{height} "
                          f"derived from its images.", UserWarning)
        return width, height

    def _serialize_full(self, serialized: Dict[str, Any]) -> None:
        width, height = self._dimensions()
        self._serialize_context(serialized)
        self._serialize_id_and_type(serialized)
        add_if_exists(serialized, Identifier.DURATION, self.duration)
        add_required(serialized, Identifier.HEIGHT, height, self._message(Identifier.HEIGHT))
        add_required(serialized, Identifier.WIDTH, width, self._message(Identifier.WIDTH))
        self._serialize_label(serialized)
        self._serialize_descriptive(serialized)
        add_if_exists(serialized, Identifier.ITEMS, self.items, False)
        add_if_exists(serialized, Identifier.ANNOTATIONS, self.annotations, False)
        self._serialize_trailing(serialized)

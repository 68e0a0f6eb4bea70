"""
The :mod:`range` module contains :class:`Range`, a named sub-sequence of
Canvases (a chapter, an article, a movement), possibly nested.

A Range keeps its structure in exactly one of two forms:

* :class:`RangeMembers`: one ordered list mixing Ranges and Canvases,
  written under ``items``. Members are embedded with their member data only.
* :class:`SplitLists`: the older form with separate ``ranges`` and
  ``canvases`` lists of bare ids.

The form is chosen by the first child added; adding a child of the other
form afterwards is an error.
"""
import warnings
from typing import Any, Dict, List, Optional, Union

from iiif_creator.utils import validator
from iiif_creator.vocabulary import Identifier
from .canvas import Canvas
from .errors import InvalidArgument, InvalidMemberType, ValidationError
from .model import add_if_exists
from .resource import Resource
from .values import Reference

__all__ = ['Range', 'RangeMembers', 'SplitLists']


class RangeMembers(object):
    """
    Structure of a Range as one ordered list of Ranges and Canvases.
    """

    def __init__(self) -> None:
        self.members: List[Union['Range', Canvas, Reference]] = []

    def add(self, member: Union['Range', Canvas, Reference]) -> None:
        if isinstance(member, Reference):
            if member.type not in (Range.TYPE, Canvas.TYPE):
                raise InvalidMemberType(f"A Range can only reference a Range or a Canvas, got {member.type}")
        elif not isinstance(member, (Range, Canvas)):
            raise InvalidMemberType(f"A member of a Range must either be a Range or a Canvas, "
                                    f"got {type(member).__name__}")
        else:
            member.return_only_member_data()
        self.members.append(member)

    def serialize_into(self, serialized: Dict[str, Any]) -> None:
        add_if_exists(serialized, Identifier.ITEMS, self.members, False)


class SplitLists(object):
    """
    Structure of a Range as separate lists of sub-range ids and canvas ids.
    """

    def __init__(self) -> None:
        self.ranges: List['Range'] = []
        self.canvases: List[Canvas] = []

    def add_range(self, range_: 'Range') -> None:
        if not isinstance(range_, Range):
            raise InvalidMemberType(f"Expected a Range, got {type(range_).__name__}")
        range_.return_only_id()
        self.ranges.append(range_)

    def add_canvas(self, canvas: Canvas) -> None:
        if not isinstance(canvas, Canvas):
            raise InvalidMemberType(f"Expected a Canvas, got {type(canvas).__name__}")
        canvas.return_only_id()
        self.canvases.append(canvas)

    def serialize_into(self, serialized: Dict[str, Any]) -> None:
        add_if_exists(serialized, Identifier.CANVASES, self.canvases, False)
        add_if_exists(serialized, Identifier.RANGES, self.ranges, False)


class Range(Resource):
    """
    A Range. Its id must be an absolute URL and it must have a label.

    :param id: URL of the range
    """
    TYPE = 'Range'
    _label_required = True

    def __init__(self, id: str, is_top_level: bool = False) -> None:
        if not id:
            raise InvalidArgument("The id must be present in the Range")
        validator.validate_url(id, "The id of a Range must be a valid URL")
        super().__init__(id, is_top_level)
        self.structure: Union[RangeMembers, SplitLists, None] = None
        self.start: Optional[Reference] = None
        self.content_layer: Optional[str] = None

    def _structure_as(self, form: type) -> Union[RangeMembers, SplitLists]:
        """
        Returns the structure of the given form, a fresh one if the range has
        no children yet. A fresh structure is only attached by the caller,
        once the child is accepted.
        """
        if self.structure is None:
            return form()
        if not isinstance(self.structure, form):
            raise ValidationError(f"Range {self.id} already lists its children as "
                                  f"{type(self.structure).__name__} and cannot mix them with {form.__name__}")
        return self.structure

    def add_member(self, member: Union['Range', Canvas, Reference]) -> None:
        """
        Appends a Range or a Canvas to the ordered ``items`` of this range.
        The member is reduced to its member data. A canvas that is already
        rendered in full by a Manifest's ``items`` should be added as a
        :class:`Reference` instead, which leaves the canvas untouched.

        :raises InvalidMemberType: if ``member`` is neither a Range nor a Canvas
        """
        structure = self._structure_as(RangeMembers)
        structure.add(member)
        self.structure = structure

    def add_range(self, range_: 'Range') -> None:
        """
        .. deprecated::
           Use :meth:`add_member`; separate ``ranges`` lists come from
           Presentation API 2.1.
        """
        warnings.warn("Range.add_range() uses the 2.1 split lists, use add_member() instead.", DeprecationWarning)
        structure = self._structure_as(SplitLists)
        structure.add_range(range_)
        self.structure = structure

    def add_canvas(self, canvas: Canvas) -> None:
        """
        .. deprecated::
           Use :meth:`add_member`; separate ``canvases`` lists come from
           Presentation API 2.1.
        """
        warnings.warn("Range.add_canvas() uses the 2.1 split lists, use add_member() instead.", DeprecationWarning)
        structure = self._structure_as(SplitLists)
        structure.add_canvas(canvas)
        self.structure = structure

    @property
    def members(self) -> List[Union['Range', Canvas, Reference]]:
        if isinstance(self.structure, RangeMembers):
            return list(self.structure.members)
        return []

    def set_start(self, canvas: Union[Canvas, Reference]) -> None:
        """
        Sets the canvas a client should show first for this range. Only a
        reference to the canvas is kept.
        """
        self.start = canvas if isinstance(canvas, Reference) else Reference.to(canvas)

    def set_content_layer(self, content_layer: str) -> None:
        self.content_layer = content_layer

    def _serialize_member_extras(self, serialized: Dict[str, Any]) -> None:
        add_if_exists(serialized, Identifier.CONTENT_LAYER, self.content_layer)

    def _serialize_full(self, serialized: Dict[str, Any]) -> None:
        self._serialize_context(serialized)
        self._serialize_id_and_type(serialized)
        add_if_exists(serialized, Identifier.BEHAVIOR, self.behavior, False)
        add_if_exists(serialized, Identifier.VIEWING_DIRECTION, self.viewing_direction)
        self._serialize_label(serialized)
        self._serialize_descriptive(serialized)
        add_if_exists(serialized, Identifier.CONTENT_LAYER, self.content_layer)
        add_if_exists(serialized, Identifier.START, self.start)
        if self.structure is not None:
            self.structure.serialize_into(serialized)
        self._serialize_trailing(serialized)

"""
The :mod:`collection` module contains :class:`Collection`, an ordered list
of Manifests and other Collections, optionally paged.
"""
import warnings
from typing import Any, Dict, List, Optional, Union

from iiif_creator.utils import validator
from iiif_creator.vocabulary import Identifier, Paging, ViewMode
from .errors import InvalidEmbedding, InvalidMemberType, MissingViewingHint
from .manifest import Manifest
from .model import add_if_exists
from .resource import Resource

__all__ = ['Collection']


class Collection(Resource):
    """
    A Collection. It must have a label.

    Members added with :meth:`add_member` are reduced to their member data
    and written in one ordered ``items`` list. At serialization time every
    embedded Manifest is checked to render only its member data, and every
    embedded Collection that is not itself top-level must declare a
    behavior.

    :param id: URI of the collection
    :param is_top_level: whether the collection is the root of the document
    """
    TYPE = 'Collection'
    _label_required = True

    def __init__(self, id: str, is_top_level: bool = False) -> None:
        super().__init__(id, is_top_level)
        self.items: List[Union['Collection', Manifest]] = []
        self.collections: List['Collection'] = []
        self.manifests: List[Manifest] = []
        self.first: Optional[str] = None
        self.last: Optional[str] = None
        self.total: Optional[int] = None
        self.next: Optional[str] = None
        self.prev: Optional[str] = None
        self.start_index: Optional[int] = None

    def add_member(self, member: Union['Collection', Manifest]) -> None:
        """
        Appends a Manifest or a Collection to ``items``, reducing it to its
        member data.

        :raises InvalidMemberType: if ``member`` is neither a Manifest nor a Collection
        :raises InvalidEmbedding: if ``member`` is this collection
        """
        if not isinstance(member, (Collection, Manifest)):
            raise InvalidMemberType(f"A member of a Collection must either be a Collection or a Manifest, "
                                    f"got {type(member).__name__}")
        if member is self:
            raise InvalidEmbedding(f"Collection {self.id} cannot be a member of itself")
        member.return_only_member_data()
        self.items.append(member)

    def add_collection(self, collection: 'Collection') -> None:
        """
        .. deprecated::
           Use :meth:`add_member`; the ``collections`` list comes from
           Presentation API 2.1.
        """
        warnings.warn("Collection.add_collection() writes the 2.1 'collections' list, "
                      "use add_member() instead.", DeprecationWarning)
        if not isinstance(collection, Collection):
            raise InvalidMemberType(f"Expected a Collection, got {type(collection).__name__}")
        if collection is self:
            raise InvalidEmbedding(f"Collection {self.id} cannot be a member of itself")
        self.collections.append(collection)

    def add_manifest(self, manifest: Manifest) -> None:
        """
        .. deprecated::
           Use :meth:`add_member`; the ``manifests`` list comes from
           Presentation API 2.1. The manifest is not reduced to its member
           data, so it must have been reduced by the caller.
        """
        warnings.warn("Collection.add_manifest() writes the 2.1 'manifests' list, "
                      "use add_member() instead.", DeprecationWarning)
        if not isinstance(manifest, Manifest):
            raise InvalidMemberType(f"Expected a Manifest, got {type(manifest).__name__}")
        self.manifests.append(manifest)

    # paging

    def set_first(self, first: str) -> None:
        self.first = first

    def set_last(self, last: str) -> None:
        self.last = last

    def set_next(self, next: str) -> None:
        self.next = next

    def set_prev(self, prev: str) -> None:
        self.prev = prev

    def set_total(self, total: int) -> None:
        self.total = validator.validate_non_negative_int(total, "The total must be a non-negative integer")

    def set_start_index(self, start_index: int) -> None:
        self.start_index = validator.validate_non_negative_int(
            start_index, "The startIndex must be a non-negative integer")

    # embedding checks

    @staticmethod
    def validate_manifest(manifest: Manifest) -> None:
        """
        A Manifest in its member view writes only ``id``, ``type``, ``label``
        and ``behavior``, so checking the view mode is enough.

        :raises InvalidEmbedding: if the manifest would render more than its member data
        """
        if manifest.view_mode is not ViewMode.MEMBER_ONLY:
            raise InvalidEmbedding(f"A Manifest embedded within a Collection should only contain "
                                   f"an id, type and label ({manifest.id})")

    @staticmethod
    def validate_member_collection(collection: 'Collection') -> None:
        """
        :raises MissingViewingHint: if a non top-level collection has no behavior
        """
        if not collection.is_top_level and collection.is_empty(collection.behavior):
            raise MissingViewingHint(f"The behavior must be present in a non top-level Collection ({collection.id})")

    def _serialize_member_extras(self, serialized: Dict[str, Any]) -> None:
        add_if_exists(serialized, Identifier.BEHAVIOR, self.behavior, False)

    def _serialize_full(self, serialized: Dict[str, Any]) -> None:
        for manifest in self.manifests:
            self.validate_manifest(manifest)
        for member in self.items:
            if isinstance(member, Manifest):
                self.validate_manifest(member)
            else:
                self.validate_member_collection(member)
        self._serialize_context(serialized)
        self._serialize_id_and_type(serialized)
        add_if_exists(serialized, Identifier.BEHAVIOR, self.behavior, False)
        add_if_exists(serialized, Identifier.VIEWING_DIRECTION, self.viewing_direction)
        add_if_exists(serialized, Identifier.NAVDATE, self.nav_date)
        self._serialize_label(serialized)
        self._serialize_descriptive(serialized)
        self._serialize_trailing(serialized)
        add_if_exists(serialized, Paging.FIRST, self.first)
        add_if_exists(serialized, Paging.LAST, self.last)
        add_if_exists(serialized, Paging.TOTAL, self.total)
        add_if_exists(serialized, Paging.NEXT, self.next)
        add_if_exists(serialized, Paging.PREV, self.prev)
        add_if_exists(serialized, Paging.START_INDEX, self.start_index)
        add_if_exists(serialized, Identifier.COLLECTIONS, self.collections, False)
        add_if_exists(serialized, Identifier.MANIFESTS, self.manifests, False)
        add_if_exists(serialized, Identifier.ITEMS, self.items, False)

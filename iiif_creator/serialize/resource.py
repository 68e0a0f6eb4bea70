"""
The :mod:`resource` module contains :class:`Resource`, the shared contract
of every IIIF resource (Manifest, Collection, Canvas, Range, Annotation,
AnnotationPage and content resources).

A resource holds the properties every resource type may carry, knows
whether it is the top-level resource of a document (and thus writes
``@context``), and keeps a *view mode* that decides how much of itself it
renders. Concrete resources only decide the order in which their fields are
written and add their own fields and checks.
"""
import warnings
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Union

from iiif_creator.utils import validator
from iiif_creator.vocabulary import Identifier, ViewingDirection, ViewMode
from .errors import InvalidArgument, InvalidEmbedding, MissingRequiredField
from .linking import Homepage, PartOf, Rendering, SeeAlso, Service
from .model import IIIFObject, add_if_exists, add_required
from .values import Agent, Behavior, ImageProperty, LabelValueItem, LanguageStrings, Metadata

__all__ = ['Resource', 'DEFAULT_CONTEXT']

DEFAULT_CONTEXT = 'http://iiif.io/api/presentation/3/context.json'


class Resource(IIIFObject):
    """
    Abstract superclass of IIIF resources.

    A resource renders itself in one of three view modes
    (:class:`iiif_creator.vocabulary.ViewMode`):

    * ``FULL`` (initial): every set property, in the resource's own order.
      ``@context`` comes first when the resource is top-level.
    * ``MEMBER_ONLY``: ``id``, ``type`` and ``label``, plus a few
      class-specific extras (see :meth:`_serialize_member_extras`).
    * ``ID_ONLY``: the bare ``id`` string.

    Parents switch their children out of ``FULL`` when attaching them
    somewhere the Presentation API restricts their representation, with
    :meth:`return_only_member_data` or :meth:`return_only_id`. The switch is
    one-way; a resource is never switched back to ``FULL``. Nothing
    guards the mode against concurrent mutation, so a resource graph must
    not be built and serialized from different threads at the same time.

    :param id: URI of the resource
    :param is_top_level: whether this resource is the root of a document
    """

    TYPE: str = ''
    # whether the label must be present in FULL and MEMBER_ONLY views
    _label_required: bool = False

    reserved_names = IIIFObject.reserved_names | {'_view_mode', '_is_top_level', '_contexts'}

    def __init__(self, id: str, is_top_level: bool = False) -> None:
        if not id:
            raise InvalidArgument(f"The id must be present in the {self.__class__.__name__}")
        self._is_top_level = bool(is_top_level)
        self._contexts: List[str] = []
        self._view_mode = ViewMode.FULL
        self.id = id
        self.type = self.TYPE
        self.label: Optional[LanguageStrings] = None
        self.summary: List[LanguageStrings] = []
        self.metadata: Optional[Metadata] = None
        self.rights: Optional[str] = None
        self.required_statement: Optional[LabelValueItem] = None
        self.thumbnail: List[ImageProperty] = []
        self.logo: List[ImageProperty] = []
        self.provider: List[Agent] = []
        self.homepage: List[Homepage] = []
        self.see_also: List[SeeAlso] = []
        self.rendering: List[Rendering] = []
        self.service: Optional[Service] = None
        self.part_of: List[PartOf] = []
        self.behavior: Optional[Behavior] = None
        self.nav_date: Optional[datetime] = None
        self.viewing_direction: Optional[ViewingDirection] = None
        super().__init__()
        if self._is_top_level:
            self.add_context(DEFAULT_CONTEXT)

    # technical properties

    @property
    def is_top_level(self) -> bool:
        return self._is_top_level

    @property
    def view_mode(self) -> ViewMode:
        return self._view_mode

    @property
    def contexts(self) -> List[str]:
        return list(self._contexts)

    def add_context(self, context: str) -> None:
        """
        Registers an additional JSON-LD context. Contexts are only written
        for top-level resources.
        """
        self._contexts.append(context)

    def return_only_id(self) -> None:
        """
        Makes this resource render as its bare ``id``.
        """
        self._switch_view(ViewMode.ID_ONLY)

    def return_only_member_data(self) -> None:
        """
        Makes this resource render only ``id``, ``type``, ``label`` and the
        class-specific member extras.
        """
        self._switch_view(ViewMode.MEMBER_ONLY)

    def _switch_view(self, view_mode: ViewMode) -> None:
        if self._view_mode is view_mode:
            return
        if self._view_mode is not ViewMode.FULL:
            raise InvalidEmbedding(f"{self.resource_name} {self.id} is already embedded as "
                                   f"{self._view_mode.value} and cannot be embedded as {view_mode.value}")
        self._view_mode = view_mode

    def set_behavior(self, behavior: Behavior) -> None:
        self.behavior = behavior

    def set_viewing_direction(self, viewing_direction: Union[str, ViewingDirection]) -> None:
        self.viewing_direction = validator.validate_in_enum(
            viewing_direction, ViewingDirection, "Unknown viewing direction")

    def set_nav_date(self, nav_date: Union[str, datetime]) -> None:
        """
        Sets the navigation date. Strings are parsed as ISO-8601. A naive
        datetime is taken as UTC.

        :raises ValidationError: if the string cannot be parsed
        """
        nav_date = validator.validate_datetime(nav_date, "The navDate must be a valid date-time")
        if nav_date.tzinfo is None:
            warnings.warn(f"navDate of {self.resource_name} {self.id} has no timezone, assuming UTC.", UserWarning)
            nav_date = nav_date.replace(tzinfo=timezone.utc)
        self.nav_date = nav_date

    # descriptive properties

    def set_label(self, label: LanguageStrings) -> None:
        self.label = label

    def set_summary(self, summary: LanguageStrings) -> None:
        self.summary = [summary]

    def add_summary(self, summary: LanguageStrings) -> None:
        self.summary.append(summary)

    def set_metadata(self, metadata: Metadata) -> None:
        self.metadata = metadata

    def set_rights(self, rights: str) -> None:
        """
        :raises ValidationError: if ``rights`` is not an absolute URL
        """
        self.rights = validator.validate_url(rights, "The rights must be a valid URL")

    def set_required_statement(self, required_statement: LabelValueItem) -> None:
        self.required_statement = required_statement

    def add_thumbnail(self, thumbnail: ImageProperty) -> None:
        self.thumbnail.append(thumbnail)

    def add_logo(self, logo: ImageProperty) -> None:
        self.logo.append(logo)

    def add_provider(self, agent: Agent) -> None:
        self.provider.append(agent)

    # linking properties

    def add_homepage(self, homepage: Homepage) -> None:
        self.homepage.append(homepage)

    def add_see_also(self, see_also: SeeAlso) -> None:
        self.see_also.append(see_also)

    def add_rendering(self, rendering: Rendering) -> None:
        self.rendering.append(rendering)

    def set_service(self, service: Service) -> None:
        self.service = service

    def add_part_of(self, part_of: PartOf) -> None:
        self.part_of.append(part_of)

    # serialization

    def _message(self, key: Union[str, Identifier]) -> str:
        return f"The {key} must be present in the {self.resource_name}"

    def _serialize(self) -> Union[str, Dict[str, Any]]:
        if self._view_mode is ViewMode.ID_ONLY:
            if self.is_empty(self.id):
                raise MissingRequiredField(Identifier.ID.value, self._message(Identifier.ID))
            return self.id
        serialized: Dict[str, Any] = {}
        if self._view_mode is ViewMode.MEMBER_ONLY:
            self._serialize_id_and_type(serialized)
            self._serialize_label(serialized)
            self._serialize_member_extras(serialized)
        else:
            self._serialize_full(serialized)
        return serialized

    def _serialize_full(self, serialized: Dict[str, Any]) -> None:
        """
        Writes the FULL view. Subclasses override this to impose their own
        order; this default writes the technical, descriptive and trailing
        blocks in sequence.
        """
        self._serialize_context(serialized)
        self._serialize_id_and_type(serialized)
        self._serialize_label(serialized)
        self._serialize_descriptive(serialized)
        self._serialize_trailing(serialized)

    def _serialize_member_extras(self, serialized: Dict[str, Any]) -> None:
        pass

    def _serialize_context(self, serialized: Dict[str, Any]) -> None:
        if self._is_top_level:
            add_required(serialized, Identifier.CONTEXT, self._contexts, self._message(Identifier.CONTEXT))

    def _serialize_id_and_type(self, serialized: Dict[str, Any]) -> None:
        add_required(serialized, Identifier.ID, self.id, self._message(Identifier.ID))
        add_required(serialized, Identifier.TYPE, self.type, self._message(Identifier.TYPE))

    def _serialize_label(self, serialized: Dict[str, Any]) -> None:
        if self._label_required:
            add_required(serialized, Identifier.LABEL, self.label, self._message(Identifier.LABEL), False)
        else:
            add_if_exists(serialized, Identifier.LABEL, self.label, False)

    def _serialize_descriptive(self, serialized: Dict[str, Any]) -> None:
        add_if_exists(serialized, Identifier.METADATA, self.metadata, False)
        add_if_exists(serialized, Identifier.SUMMARY, self.summary)
        add_if_exists(serialized, Identifier.THUMBNAIL, self.thumbnail, False)
        add_if_exists(serialized, Identifier.PROVIDER, self.provider, False)

    @staticmethod
    def _add_once(serialized: Dict[str, Any], key: Identifier, value: Any, flatten: bool = True) -> None:
        if key.value not in serialized:
            add_if_exists(serialized, key, value, flatten)

    def _serialize_trailing(self, serialized: Dict[str, Any]) -> None:
        """
        Rights, technical leftovers and linking properties, written last by
        every resource type. Fields a resource already wrote earlier in its
        own order are not written twice.
        """
        add_if_exists(serialized, Identifier.RIGHTS, self.rights)
        add_if_exists(serialized, Identifier.REQUIRED_STATEMENT, self.required_statement)
        self._add_once(serialized, Identifier.BEHAVIOR, self.behavior, False)
        self._add_once(serialized, Identifier.VIEWING_DIRECTION, self.viewing_direction)
        self._add_once(serialized, Identifier.NAVDATE, self.nav_date)
        add_if_exists(serialized, Identifier.LOGO, self.logo, False)
        add_if_exists(serialized, Identifier.HOMEPAGE, self.homepage, False)
        add_if_exists(serialized, Identifier.SEE_ALSO, self.see_also, False)
        add_if_exists(serialized, Identifier.RENDERING, self.rendering, False)
        add_if_exists(serialized, Identifier.SERVICE, self.service, False)
        add_if_exists(serialized, Identifier.PART_OF, self.part_of, False)

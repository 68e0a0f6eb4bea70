"""
The :mod:`values` module contains the small value holders that resources
compose: language maps, label/value pairs, metadata, behaviors, agents and
image properties such as thumbnails and logos.

None of these objects has a view mode or a JSON-LD context; they always
render in full through the presence rules of
:class:`iiif_creator.serialize.model.IIIFObject`.
"""
from typing import List, Optional, Union

from iiif_creator.utils import validator
from iiif_creator.vocabulary import Behaviors, Identifier
from .errors import InvalidArgument, InvalidMemberType, ValidationError
from .model import IIIFObject, DataList, DataDict, add, add_if_exists

__all__ = [
    'LanguageString',
    'LanguageStrings',
    'LabelValueItem',
    'RequiredStatement',
    'Metadata',
    'Behavior',
    'Agent',
    'Provider',
    'ImageProperty',
    'Thumbnail',
    'Logo',
    'Reference',
]


class LanguageString(object):
    """
    One entry of a language map: a language tag and the strings in that language.

    :param language: BCP-47 language tag, or ``none`` for strings without a language
    :param strings: one or more strings
    """

    def __init__(self, language: str, *strings: str) -> None:
        if not language:
            raise ValidationError("A language string must have a language tag")
        if len(strings) == 1 and isinstance(strings[0], (list, tuple)):
            strings = tuple(strings[0])
        if not strings:
            raise ValidationError(f"The language '{language}' must map to at least one string")
        self.language = language
        self.strings: List[str] = list(strings)


class LanguageStrings(DataDict[str, List[str]]):
    """
    A IIIF language map, e.g. ``{"en": ["Book 1"], "fr": ["Livre 1"]}``.

    Language tags are unique within one map and every tag maps to at
    least one string. Tags and strings keep their insertion order.

    :param language_strings: the entries of the map
    """

    def __init__(self, *language_strings: LanguageString) -> None:
        super().__init__()
        for language_string in language_strings:
            if language_string.language in self._items:
                raise ValidationError(f"Duplicate language '{language_string.language}' in a language map")
            self._items[language_string.language] = list(language_string.strings)

    @classmethod
    def of(cls, language: str, *strings: str) -> 'LanguageStrings':
        """
        Shortcut for the very common single-language map.

        >>> LanguageStrings.of('en', 'Book 1')._serialize()
        {'en': ['Book 1']}
        """
        return cls(LanguageString(language, *strings))

    def add(self, language: str, *strings: str) -> None:
        """
        Appends strings to a language, creating the language entry if needed.
        """
        entry = LanguageString(language, *strings)
        self._items.setdefault(entry.language, []).extend(entry.strings)

    def __setitem__(self, language: str, strings: List[str]) -> None:
        entry = LanguageString(language, *strings)
        self._items[entry.language] = entry.strings


class LabelValueItem(IIIFObject):
    """
    A pair of language maps, used by ``metadata`` entries and ``requiredStatement``.
    """

    def __init__(self, label: LanguageStrings, value: LanguageStrings) -> None:
        self.label = label
        self.value = value
        self._required_attributes = ['label', 'value']
        super().__init__()


class RequiredStatement(LabelValueItem):
    """
    A label/value pair that a client must display with the resource, with
    optional additional information and a restriction flag.
    """

    def __init__(self, label: LanguageStrings, value: LanguageStrings) -> None:
        self.additional_information: List[LabelValueItem] = []
        self.is_restricted: Optional[bool] = None
        super().__init__(label, value)

    def add_additional_information(self, item: LabelValueItem) -> None:
        self.additional_information.append(item)

    def set_is_restricted(self, is_restricted: bool) -> None:
        self.is_restricted = bool(is_restricted)

    def _serialize(self) -> dict:
        serialized = {}
        add(serialized, Identifier.LABEL, self.label, False)
        add(serialized, Identifier.VALUE, self.value, False)
        add_if_exists(serialized, Identifier.ADDITIONAL_INFORMATION, self.additional_information, False)
        if self.is_restricted is not None:
            add(serialized, Identifier.IS_RESTRICTED, self.is_restricted)
        return serialized


class Metadata(DataList[LabelValueItem]):
    """
    Ordered list of :class:`LabelValueItem` entries.
    """

    def _validate_item(self, item):
        if not isinstance(item, LabelValueItem):
            raise InvalidMemberType(f"Metadata entries must be LabelValueItem, got {type(item).__name__}")
        return item

    def add_item(self, item: LabelValueItem) -> None:
        self.append(item)


class Behavior(DataList[Behaviors]):
    """
    Ordered list of behaviors. Strings are accepted and checked against
    :class:`iiif_creator.vocabulary.Behaviors`.
    """

    def _validate_item(self, item: Union[str, Behaviors]) -> Behaviors:
        return validator.validate_in_enum(item, Behaviors, "Unknown behavior")


class ImageProperty(IIIFObject):
    """
    An image content resource referenced from a descriptive property, such
    as a ``thumbnail`` or a ``logo``.

    :param id: URI of the image
    :param type: content type, ``Image`` unless the property points to e.g. a video
    """

    def __init__(self, id: str, type: str = 'Image') -> None:
        if not id:
            raise InvalidArgument(f"The id must be present in a {self.__class__.__name__}")
        self.id = id
        self.type = type
        self.format: Optional[str] = None
        self.height: Optional[int] = None
        self.width: Optional[int] = None
        self.service = None
        self._required_attributes = ['id', 'type']
        super().__init__()

    def set_format(self, format: str) -> None:
        self.format = format

    def set_height(self, height: int) -> None:
        self.height = validator.validate_positive_int(height, "The height must be a positive integer")

    def set_width(self, width: int) -> None:
        self.width = validator.validate_positive_int(width, "The width must be a positive integer")

    def set_service(self, service) -> None:
        """
        :param service: a :class:`iiif_creator.serialize.linking.Service`
        """
        self.service = service


class Thumbnail(ImageProperty):
    pass


class Logo(ImageProperty):
    pass


class Agent(IIIFObject):
    """
    An organization or person that contributed to providing the content,
    listed under a resource's ``provider``.
    """

    def __init__(self, id: str, label: LanguageStrings) -> None:
        if not id:
            raise InvalidArgument("The id must be present in an Agent")
        self.id = id
        self.type = 'Agent'
        self.label = label
        self.homepage: list = []
        self.logo: List[Logo] = []
        self.see_also: list = []
        self._required_attributes = ['id', 'type', 'label']
        super().__init__()

    def add_homepage(self, homepage) -> None:
        self.homepage.append(homepage)

    def add_logo(self, logo: Logo) -> None:
        self.logo.append(logo)

    def add_see_also(self, see_also) -> None:
        self.see_also.append(see_also)


class Provider(DataList[Agent]):

    def _validate_item(self, item):
        if not isinstance(item, Agent):
            raise InvalidMemberType(f"A provider must be an Agent, got {type(item).__name__}")
        return item

    def add_agent(self, agent: Agent) -> None:
        self.append(agent)


class Reference(IIIFObject):
    """
    A non-owning pointer to another resource, rendered as ``{"id", "type"}``
    (plus ``label`` when given). Used where a document points at a resource
    that is owned, and fully rendered, somewhere else, like a Manifest's
    ``start`` canvas.
    """

    def __init__(self, id: str, type: str, label: Optional[LanguageStrings] = None) -> None:
        if not id:
            raise InvalidArgument("A reference must point to an id")
        self.id = id
        self.type = type
        self.label = label
        self._required_attributes = ['id', 'type']
        super().__init__()

    @classmethod
    def to(cls, resource, with_label: bool = False) -> 'Reference':
        """
        Makes a reference to a resource.

        :param resource: any object with ``id`` and ``type`` attributes
        :param with_label: copy the resource's label into the reference
        """
        return cls(resource.id, resource.type, resource.label if with_label else None)

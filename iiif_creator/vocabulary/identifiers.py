from enum import Enum


class Identifier(str, Enum):
    """
    JSON keys of the IIIF Presentation API. These names are an external
    contract and are emitted verbatim.
    """
    ADDITIONAL_INFORMATION = 'additionalInformation'
    ANNOTATIONS = 'annotations'
    BEHAVIOR = 'behavior'
    BODY = 'body'
    CANVASES = 'canvases'
    COLLECTIONS = 'collections'
    CONTENT_LAYER = 'contentLayer'
    CONTEXT = '@context'
    DURATION = 'duration'
    FORMAT = 'format'
    HEIGHT = 'height'
    HOMEPAGE = 'homepage'
    ID = 'id'
    IS_RESTRICTED = 'isRestricted'
    ITEMS = 'items'
    LABEL = 'label'
    LANGUAGE = 'language'
    LOGO = 'logo'
    MANIFESTS = 'manifests'
    METADATA = 'metadata'
    MOTIVATION = 'motivation'
    NAVDATE = 'navDate'
    PART_OF = 'partOf'
    PROFILE = 'profile'
    PROVIDER = 'provider'
    RANGES = 'ranges'
    RENDERING = 'rendering'
    REQUIRED_STATEMENT = 'requiredStatement'
    RIGHTS = 'rights'
    ROTATION = 'rotation'
    SEE_ALSO = 'seeAlso'
    SERVICE = 'service'
    SERVICES = 'services'
    START = 'start'
    STRUCTURES = 'structures'
    SUMMARY = 'summary'
    TARGET = 'target'
    THUMBNAIL = 'thumbnail'
    TYPE = 'type'
    VALUE = 'value'
    VIEWING_DIRECTION = 'viewingDirection'
    WIDTH = 'width'

    def __str__(self) -> str:
        return self.value


class Paging(str, Enum):
    """
    Paging keys of a (paged) Collection.
    """
    FIRST = 'first'
    LAST = 'last'
    NEXT = 'next'
    PREV = 'prev'
    START_INDEX = 'startIndex'
    TOTAL = 'total'

    def __str__(self) -> str:
        return self.value

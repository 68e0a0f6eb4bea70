"""
Closed vocabularies used by the IIIF Presentation API 3.0.

Every value an IIIF document can take from a fixed list (JSON keys,
``behavior`` values, viewing directions, annotation motivations, content
resource types) is a member of one of the enumerations re-exported here.
"""
from .identifiers import Identifier, Paging
from .technical_types import Behaviors, ViewingDirection, ViewMode
from .annotation_types import Motivation, ContentType

__all__ = [
    'Identifier',
    'Paging',
    'Behaviors',
    'ViewingDirection',
    'ViewMode',
    'Motivation',
    'ContentType',
]

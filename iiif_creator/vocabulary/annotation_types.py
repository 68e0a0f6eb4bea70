from enum import Enum


class Motivation(str, Enum):
    """
    Motivations defined by the Presentation API and the Web Annotation model
    that are commonly used in IIIF documents. Annotations also accept any
    other string.
    """
    PAINTING = 'painting'
    SUPPLEMENTING = 'supplementing'
    COMMENTING = 'commenting'
    DESCRIBING = 'describing'
    TAGGING = 'tagging'
    LINKING = 'linking'
    HIGHLIGHTING = 'highlighting'
    IDENTIFYING = 'identifying'
    CLASSIFYING = 'classifying'

    def __str__(self) -> str:
        return self.value


class ContentType(str, Enum):
    DATASET = 'Dataset'
    IMAGE = 'Image'
    MODEL = 'Model'
    SOUND = 'Sound'
    TEXT = 'Text'
    VIDEO = 'Video'

    def __str__(self) -> str:
        return self.value

"""
Builders for the resource graphs shared by the test modules, plus the JSON
they are expected to produce.
"""
import json

from iiif_creator import (Annotation, AnnotationPage, Canvas, Collection, ContentResource,
                          LanguageStrings, Manifest, Motivation, Range)

__all__ = [
    'BASE_URL',
    'BOOK_MANIFEST_JSON',
    'make_image',
    'make_canvas',
    'make_manifest',
    'make_collection',
    'make_range',
]

BASE_URL = 'https://example.org/iiif/book1'


def make_image(width=None, height=None, name='page1'):
    image = ContentResource(f'{BASE_URL}/{name}/full/max/0/default.jpg', 'Image')
    image.set_format('image/jpeg')
    if width is not None:
        image.set_width(width)
    if height is not None:
        image.set_height(height)
    return image


def make_canvas(name='p1', image=None, dimensions=(1800, 1200)):
    """
    Makes a canvas painted with one image.

    :param dimensions: explicit ``(height, width)`` of the canvas, or None to
                       let the canvas derive them from the image
    """
    canvas = Canvas(f'{BASE_URL}/canvas/{name}')
    if dimensions is not None:
        canvas.set_dimensions(*dimensions)
    page = AnnotationPage(f'{BASE_URL}/page/{name}/1')
    annotation = Annotation(f'{BASE_URL}/annotation/{name}-image', Motivation.PAINTING, canvas.id)
    annotation.set_body(image if image is not None else make_image(1200, 1800))
    page.add_item(annotation)
    canvas.add_item(page)
    return canvas


def make_manifest(name='manifest', label='Book 1', is_top_level=False, canvases=1):
    manifest = Manifest(f'{BASE_URL}/{name}', is_top_level=is_top_level)
    manifest.set_label(LanguageStrings.of('en', label))
    for i in range(1, canvases + 1):
        manifest.add_item(make_canvas(f'p{i}'))
    return manifest


def make_collection(name='collection', label='Books', is_top_level=False):
    collection = Collection(f'https://example.org/iiif/{name}', is_top_level=is_top_level)
    collection.set_label(LanguageStrings.of('en', label))
    return collection


def make_range(name='r1', label='Chapter 1'):
    range_ = Range(f'{BASE_URL}/range/{name}')
    range_.set_label(LanguageStrings.of('en', label))
    return range_


BOOK_MANIFEST_JSON = json.dumps({
    "@context": "http://iiif.io/api/presentation/3/context.json",
    "id": "https://example.org/iiif/book1/manifest",
    "type": "Manifest",
    "label": {"en": ["Book 1"]},
    "items": [
        {
            "id": "https://example.org/iiif/book1/canvas/p1",
            "type": "Canvas",
            "height": 1800,
            "width": 1200,
            "items": [
                {
                    "id": "https://example.org/iiif/book1/page/p1/1",
                    "type": "AnnotationPage",
                    "items": [
                        {
                            "id": "https://example.org/iiif/book1/annotation/p1-image",
                            "type": "Annotation",
                            "motivation": "painting",
                            "body": {
                                "id": "https://example.org/iiif/book1/page1/full/max/0/default.jpg",
                                "type": "Image",
                                "format": "image/jpeg",
                                "height": 1800,
                                "width": 1200
                            },
                            "target": "https://example.org/iiif/book1/canvas/p1"
                        }
                    ]
                }
            ]
        }
    ]
}, indent=2)

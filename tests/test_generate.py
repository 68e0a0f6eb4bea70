import json
import unittest

import jsonschema
import pytest

import iiif_creator
from iiif_creator import generate, get_iiif_json_schema
from iiif_creator.serialize import Behavior, LanguageStrings, MissingRequiredField, Range, Reference
from iiif_creator.vocabulary import Behaviors
from tests.iiif_examples import *


class TestGenerate(unittest.TestCase):

    def test_version(self):
        self.assertEqual('3.0', iiif_creator.__specver__)
        self.assertTrue(iiif_creator.__version__)

    def test_pretty(self):
        manifest = make_manifest(is_top_level=True)
        pretty = generate(manifest)
        self.assertTrue(pretty.startswith('{\n  "@context": '))
        compact = generate(manifest, pretty=False)
        self.assertNotIn('\n', compact)
        self.assertEqual(json.loads(pretty), json.loads(compact))

    def test_slashes_and_unicode_unescaped(self):
        manifest = make_manifest(label='Livre numéro 1', is_top_level=True)
        document = generate(manifest)
        self.assertIn('"https://example.org/iiif/book1/manifest"', document)
        self.assertIn('Livre numéro 1', document)

    def test_generate_fails_on_missing_field(self):
        manifest = make_manifest(is_top_level=True)
        manifest.label = None
        with self.assertRaises(MissingRequiredField):
            generate(manifest)


class TestSchema(unittest.TestCase):

    def test_schema_is_json(self):
        schema = json.loads(get_iiif_json_schema())
        jsonschema.validators.validator_for(schema).check_schema(schema)

    def test_valid_manifest(self):
        manifest = make_manifest(is_top_level=True, canvases=2)
        range_ = make_range()
        range_.add_member(Reference.to(manifest.items[0]))
        manifest.add_structure(range_)
        manifest.set_start(manifest.items[1])
        try:
            generate(manifest, validate=True)
        except jsonschema.ValidationError as ve:
            self.fail(ve.message)

    def test_valid_collection(self):
        collection = make_collection(is_top_level=True)
        collection.add_member(make_manifest())
        sub = make_collection('books/19th-century', '19th century')
        sub.set_behavior(Behavior(Behaviors.MULTI_PART))
        collection.add_member(sub)
        collection.set_total(2)
        document = json.loads(generate(collection, validate=True))
        self.assertEqual(['Manifest', 'Collection'], [member['type'] for member in document['items']])

    def test_invalid_documents(self):
        # only Manifests and Collections are documents on their own
        with self.assertRaises(jsonschema.ValidationError):
            generate(make_range(), validate=True)
        range_ = Range(f'{BASE_URL}/range/r1', is_top_level=True)
        range_.set_label(LanguageStrings.of('en', 'Chapter 1'))
        with pytest.raises(jsonschema.ValidationError):
            generate(range_, validate=True)

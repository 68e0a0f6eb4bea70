import unittest

from iiif_creator.serialize import *


class TestLinkingProperties(unittest.TestCase):

    def setUp(self) -> None:
        self.label = LanguageStrings.of('en', 'Download as PDF')

    def test_see_also(self):
        see_also = SeeAlso('https://example.org/library/catalog/book1.xml', 'Dataset')
        self.assertEqual({'id': 'https://example.org/library/catalog/book1.xml', 'type': 'Dataset'},
                         see_also._serialize())
        see_also.set_label(LanguageStrings.of('en', 'Bibliographic Description in MODS'))
        see_also.set_format('text/xml')
        see_also.set_profile('http://www.loc.gov/mods/v3')
        self.assertEqual(['id', 'type', 'label', 'format', 'profile'], list(see_also._serialize().keys()))

    def test_empty_id(self):
        for cls in (SeeAlso, PartOf, ServiceItem):
            with self.assertRaises(InvalidArgument):
                cls('', 'Dataset')

    def test_rendering_requires_label(self):
        rendering = Rendering('https://example.org/iiif/book1.pdf', 'Text', self.label)
        rendering.set_format('application/pdf')
        self.assertEqual({'id': 'https://example.org/iiif/book1.pdf', 'type': 'Text',
                          'label': {'en': ['Download as PDF']}, 'format': 'application/pdf'},
                         rendering._serialize())
        with self.assertRaises(MissingRequiredField) as cm:
            Rendering('https://example.org/iiif/book1.pdf', 'Text', None)._serialize()
        self.assertEqual('label', cm.exception.field)

    def test_homepage(self):
        homepage = Homepage('https://example.org/info/book1/', LanguageStrings.of('en', 'Home page for Book 1'))
        homepage.add_language('en')
        self.assertEqual({'id': 'https://example.org/info/book1/', 'type': 'Text',
                          'label': {'en': ['Home page for Book 1']}, 'language': ['en']},
                         homepage._serialize())

    def test_rendering_languages(self):
        rendering = Rendering('https://example.org/iiif/book1.pdf', 'Text', self.label)
        rendering.add_language('en')
        rendering.add_language('fr')
        self.assertEqual(['en', 'fr'], rendering._serialize()['language'])

    def test_no_profile_on_rendering_and_homepage(self):
        homepage = Homepage('https://example.org/info/book1/', self.label)
        rendering = Rendering('https://example.org/iiif/book1.pdf', 'Text', self.label)
        for linking in (homepage, rendering):
            self.assertFalse(hasattr(linking, 'profile'))
            with self.assertRaises(AttributeError):
                linking.set_profile('http://example.org/profile')

    def test_part_of(self):
        part_of = PartOf('https://example.org/iiif/collection/books', 'Collection')
        part_of.set_label(LanguageStrings.of('en', 'Books'))
        self.assertEqual({'id': 'https://example.org/iiif/collection/books', 'type': 'Collection',
                          'label': {'en': ['Books']}}, part_of._serialize())

    def test_nested_services(self):
        auth = ServiceItem('https://example.org/iiif/auth/login', 'AuthCookieService1',
                           'http://iiif.io/api/auth/1/login')
        image = ServiceItem('https://example.org/iiif/book1/page1', 'ImageService3', 'level2')
        image.set_service(Service(auth))
        service = Service()
        service.add_item(image)
        serialized = service._serialize()
        self.assertEqual(1, len(serialized))
        self.assertEqual('ImageService3', serialized[0]['type'])
        self.assertEqual([auth._serialize()], serialized[0]['service'])

    def test_service_rejects_other_types(self):
        with self.assertRaises(InvalidMemberType):
            Service('https://example.org/iiif/book1/page1')

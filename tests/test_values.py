import unittest

from hypothesis import given, strategies as st

from iiif_creator.serialize import *
from iiif_creator.vocabulary import Behaviors

language_tags = st.sampled_from(['en', 'fr', 'de', 'none', 'zh-Hant'])
non_empty_strings = st.lists(st.text(min_size=1), min_size=1, max_size=3)


class TestLanguageStrings(unittest.TestCase):

    def test_of(self):
        self.assertEqual({'en': ['Book 1']}, LanguageStrings.of('en', 'Book 1')._serialize())
        self.assertEqual({'en': ['a', 'b']}, LanguageStrings.of('en', ['a', 'b'])._serialize())

    def test_multiple_languages_keep_order(self):
        label = LanguageStrings(LanguageString('fr', 'Livre 1'), LanguageString('en', 'Book 1'))
        self.assertEqual(['fr', 'en'], list(label._serialize().keys()))

    def test_duplicate_language(self):
        with self.assertRaises(ValidationError):
            LanguageStrings(LanguageString('en', 'a'), LanguageString('en', 'b'))

    def test_empty_strings(self):
        with self.assertRaises(ValidationError):
            LanguageString('en')
        with self.assertRaises(ValidationError):
            LanguageString('', 'a')
        label = LanguageStrings.of('en', 'a')
        with self.assertRaises(ValidationError):
            label['fr'] = []

    def test_add(self):
        label = LanguageStrings.of('en', 'a')
        label.add('en', 'b')
        label.add('fr', 'c')
        self.assertEqual({'en': ['a', 'b'], 'fr': ['c']}, label._serialize())

    @given(st.dictionaries(language_tags, non_empty_strings, min_size=1))
    def test_every_language_maps_to_strings(self, entries):
        label = LanguageStrings(*(LanguageString(lang, *strings) for lang, strings in entries.items()))
        self.assertEqual(entries, label._serialize())
        self.assertEqual(len(entries), len(label))

    def test_eq(self):
        self.assertEqual(LanguageStrings.of('en', 'a'), LanguageStrings.of('en', 'a'))
        self.assertNotEqual(LanguageStrings.of('en', 'a'), LanguageStrings.of('en', 'b'))
        self.assertNotEqual(LanguageStrings.of('en', 'a'), LanguageStrings.of('fr', 'a'))

    def test_not_equal_to_plain_dict(self):
        label = LanguageStrings.of('en', 'a')
        self.assertEqual({'en': ['a']}, label._serialize())
        self.assertFalse(label == {'en': ['a']})
        self.assertFalse({'en': ['a']} == label)


class TestLabelValues(unittest.TestCase):

    def setUp(self) -> None:
        self.label = LanguageStrings.of('en', 'Author')
        self.value = LanguageStrings.of('none', 'Anne Author')

    def test_label_value_item(self):
        self.assertEqual({'label': {'en': ['Author']}, 'value': {'none': ['Anne Author']}},
                         LabelValueItem(self.label, self.value)._serialize())
        with self.assertRaises(MissingRequiredField):
            LabelValueItem(self.label, None)._serialize()

    def test_required_statement(self):
        statement = RequiredStatement(self.label, self.value)
        self.assertNotIn('isRestricted', statement._serialize())
        statement.set_is_restricted(False)
        statement.add_additional_information(LabelValueItem(self.label, self.value))
        serialized = statement._serialize()
        self.assertEqual(['label', 'value', 'additionalInformation', 'isRestricted'], list(serialized.keys()))
        self.assertIs(False, serialized['isRestricted'])
        self.assertEqual(1, len(serialized['additionalInformation']))

    def test_metadata(self):
        metadata = Metadata(LabelValueItem(self.label, self.value))
        metadata.add_item(LabelValueItem(self.value, self.label))
        self.assertEqual(2, len(metadata._serialize()))
        with self.assertRaises(InvalidMemberType):
            metadata.add_item('Author: Anne')


class TestBehavior(unittest.TestCase):

    def test_coerces_strings(self):
        behavior = Behavior('paged', Behaviors.NO_AUTO_ADVANCE)
        self.assertEqual([Behaviors.PAGED, Behaviors.NO_AUTO_ADVANCE], list(behavior))
        self.assertEqual(['paged', 'no-auto-advance'], behavior._serialize())

    def test_unknown(self):
        with self.assertRaises(ValidationError) as cm:
            Behavior('sideways')
        self.assertIn('sideways', str(cm.exception))


class TestAgents(unittest.TestCase):

    def test_agent(self):
        agent = Agent('https://example.org/about', LanguageStrings.of('en', 'Example Organization'))
        logo = Logo('https://example.org/images/logo.png')
        logo.set_format('image/png')
        logo.set_height(100)
        logo.set_width(120)
        agent.add_logo(logo)
        agent.add_homepage(Homepage('https://example.org/', LanguageStrings.of('en', 'Example Homepage')))
        serialized = agent._serialize()
        self.assertEqual(['id', 'type', 'label', 'homepage', 'logo'], list(serialized.keys()))
        self.assertEqual('Agent', serialized['type'])
        self.assertEqual({'id': 'https://example.org/images/logo.png', 'type': 'Image',
                          'format': 'image/png', 'height': 100, 'width': 120},
                         serialized['logo'][0])

    def test_agent_needs_id(self):
        with self.assertRaises(InvalidArgument):
            Agent('', LanguageStrings.of('en', 'Nobody'))

    def test_provider(self):
        provider = Provider()
        provider.add_agent(Agent('https://example.org/about', LanguageStrings.of('en', 'Example')))
        self.assertEqual(1, len(provider))
        with self.assertRaises(InvalidMemberType):
            provider.add_agent('https://example.org/about')


class TestImageProperty(unittest.TestCase):

    def test_dimensions_must_be_positive(self):
        thumbnail = Thumbnail('https://example.org/thumb.jpg')
        for bad in (0, -1, 1.5, True, '100'):
            with self.assertRaises(ValidationError):
                thumbnail.set_width(bad)
        thumbnail.set_width(100)
        self.assertEqual(100, thumbnail.width)

    def test_service(self):
        thumbnail = Thumbnail('https://example.org/thumb.jpg')
        thumbnail.set_service(Service(ServiceItem('https://example.org/iiif/thumb', 'ImageService3', 'level1')))
        self.assertEqual([{'id': 'https://example.org/iiif/thumb', 'type': 'ImageService3', 'profile': 'level1'}],
                         thumbnail._serialize()['service'])


class TestReference(unittest.TestCase):

    def test_to(self):
        class Target:
            id = 'https://example.org/canvas/1'
            type = 'Canvas'
            label = LanguageStrings.of('en', 'p. 1')

        self.assertEqual({'id': Target.id, 'type': 'Canvas'}, Reference.to(Target)._serialize())
        self.assertEqual({'id': Target.id, 'type': 'Canvas', 'label': {'en': ['p. 1']}},
                         Reference.to(Target, with_label=True)._serialize())

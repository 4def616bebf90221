import tempfile
import unittest
from pathlib import Path
from fountain_tools.lookups import WhitespaceData, ProfileFormatError, UnknownProfileError

class TestWhitespaceData(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def write(self, content):
        path = Path(self.tmp.name) / 'whitespace.yaml'
        path.write_text(content, encoding='utf-8')
        return path

    def test_packaged_profiles(self):
        data = WhitespaceData()
        self.assertIn('ascii', data.names)
        self.assertIn('unicode', data.names)
        self.assertEqual(data.characters('ascii'), ' \t\n\r\f\v')

    def test_custom_file(self):
        path = self.write('profiles:\n  tabs:\n    characters: "\\t"\n')
        data = WhitespaceData(path)
        self.assertEqual(data.names, ['tabs'])
        self.assertEqual(data.characters('tabs'), '\t')

    def test_unknown_profile(self):
        with self.assertRaises(UnknownProfileError):
            WhitespaceData().characters('missing')

    def test_missing_profiles_mapping(self):
        path = self.write('ascii: " "\n')
        with self.assertRaises(ProfileFormatError):
            WhitespaceData(path)

    def test_empty_file(self):
        path = self.write('')
        with self.assertRaises(ProfileFormatError):
            WhitespaceData(path)

    def test_profile_without_characters(self):
        path = self.write('profiles:\n  broken:\n    description: no characters\n')
        with self.assertRaises(ProfileFormatError):
            WhitespaceData(path)

    def test_unknown_profile_logs_warning(self):
        with self.assertLogs('fountain_tools.lookups', level='WARNING') as logs:
            with self.assertRaises(UnknownProfileError):
                WhitespaceData().characters('missing')
        self.assertIn("'missing'", logs.output[0])

    def test_packaged_file_located_without_arguments(self):
        data = WhitespaceData()
        self.assertEqual(data.characters('unicode').count(chr(0x3000)), 1)

    def test_packaged_path_is_cached(self):
        self.assertIs(WhitespaceData.yaml_path(), WhitespaceData.yaml_path())

    def test_empty_path_is_not_packaged_file(self):
        with self.assertRaises(OSError):
            WhitespaceData('')

    def test_unknown_profile_message_unquoted(self):
        with self.assertRaises(UnknownProfileError) as ctx:
            WhitespaceData().characters('missing')
        message = str(ctx.exception)
        self.assertTrue(message.startswith("unknown whitespace profile 'missing'"))
        self.assertIn('ascii', message)

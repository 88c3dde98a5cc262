import unittest
from casewords import words
from casewords.errors import (
    CaseConversionError,
    NotAStringError,
    EmptyInputError,
    InvalidCharactersError,
    NumericOnlyError,
    NoValidWordsError
)

class TestValidate(unittest.TestCase):
    def test_trims_whitespace(self):
        result = words.validate('  abra kadabra ')
        self.assertEqual(result, 'abra kadabra')

    def test_trims_tabs_and_newlines(self):
        result = words.validate('\tabra\n')
        self.assertEqual(result, 'abra')

    def test_rejects_non_string(self):
        for value in (123123, None, ['abra'], b'abra', True):
            with self.subTest(value=value):
                with self.assertRaises(NotAStringError):
                    words.validate(value)

    def test_not_a_string_is_type_error(self):
        with self.assertRaises(TypeError):
            words.validate(123123)

    def test_rejects_empty(self):
        for value in ('', '   ', '\t\n'):
            with self.subTest(value=value):
                with self.assertRaises(EmptyInputError):
                    words.validate(value)

    def test_rejects_invalid_characters(self):
        for value in ('112312#@@#', 'abra.kadabra', 'café', 'abra\tkadabra'):
            with self.subTest(value=value):
                with self.assertRaises(InvalidCharactersError):
                    words.validate(value)

    def test_trims_unicode_whitespace(self):
        result = words.validate('\u3000abra\ufeff\xa0')
        self.assertEqual(result, 'abra')

    def test_keeps_control_separators(self):
        for value in ('\x1fabc', 'abc\x1c', '\x85abc'):
            with self.subTest(value=value):
                with self.assertRaises(InvalidCharactersError):
                    words.validate(value)

    def test_logs_rejections(self):
        cases = [
            (123123, 'Rejected int input: not a string'),
            ('  ', 'Rejected input: empty after trimming'),
            ('a#b', "Rejected input 'a#b': invalid characters"),
        ]
        for value, message in cases:
            with self.subTest(value=value):
                with self.assertLogs('casewords.words', level='DEBUG') as logs:
                    with self.assertRaises(CaseConversionError):
                        words.validate(value)
                self.assertEqual(len(logs.records), 1)
                self.assertEqual(logs.records[0].getMessage(), message)

    def test_errors_share_base_class(self):
        with self.assertRaises(CaseConversionError):
            words.validate('')

class TestTokenize(unittest.TestCase):
    def test_splits_on_all_separators(self):
        result = words.tokenize('abra kadabra_123-go')
        self.assertEqual(result, ['abra', 'kadabra', '123', 'go'])

    def test_collapses_separator_runs(self):
        result = words.tokenize('abra  --__kadabra')
        self.assertEqual(result, ['abra', 'kadabra'])

    def test_drops_leading_and_trailing_separators(self):
        result = words.tokenize('-leading--and__trailing-')
        self.assertEqual(result, ['leading', 'and', 'trailing'])

    def test_keeps_case(self):
        result = words.tokenize('Hello WORLD')
        self.assertEqual(result, ['Hello', 'WORLD'])

    def test_rejects_numeric_only(self):
        with self.assertRaises(NumericOnlyError):
            words.tokenize('123 456')

    def test_accepts_mixed_numeric(self):
        result = words.tokenize('123 abc')
        self.assertEqual(result, ['123', 'abc'])

    def test_rejects_separators_only(self):
        for value in ('---', '_', '- _'):
            with self.subTest(value=value):
                with self.assertRaises(NoValidWordsError):
                    words.tokenize(value)

    def test_logs_rejections(self):
        cases = [
            ('---', "Rejected input '---': no words"),
            ('123 456', "Rejected input '123 456': numeric words only"),
        ]
        for value, message in cases:
            with self.subTest(value=value):
                with self.assertLogs('casewords.words', level='DEBUG') as logs:
                    with self.assertRaises(CaseConversionError):
                        words.tokenize(value)
                self.assertEqual([r.getMessage() for r in logs.records], [message])

class TestIsNumericWord(unittest.TestCase):
    def test_is_numeric_word(self):
        self.assertTrue(words.is_numeric_word('007'))
        self.assertFalse(words.is_numeric_word('7a'))
        self.assertFalse(words.is_numeric_word(''))

class TestSplitWords(unittest.TestCase):
    def test_split_words(self):
        result = words.split_words(' Hello World_Test ')
        self.assertEqual(result, ['Hello', 'World', 'Test'])

    def test_separators_only_is_not_numeric(self):
        with self.assertRaises(NoValidWordsError):
            words.split_words('---')

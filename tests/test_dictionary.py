#!/usr/bin/env python3

from io import StringIO
import unittest

from scrapple.core.dictionary import Dictionary
from tests.fixtures.dictionary_helpers import MINIMAL_DICT, create_test_dictionary


class TestDictionary(unittest.TestCase):
    def setUp(self):
        my_open = lambda filename, mode: StringIO("\n".join([
            "eat zoo",
            "axe 123 don't",
            "",
            "  EAT\tquiz  ",
        ]))
        self.dictionary = Dictionary(open=my_open)
        self.dictionary.read("wordList.txt")

    def test_read_whitespace_separated_tokens(self):
        self.assertEqual(["EAT", "ZOO", "AXE", "QUIZ"], self.dictionary.words)
        self.assertEqual(4, len(self.dictionary))

    def test_is_word(self):
        self.assertTrue(self.dictionary.is_word("QUIZ"))
        self.assertTrue(self.dictionary.is_word("quiz"))
        self.assertIn("axe", self.dictionary)
        self.assertFalse(self.dictionary.is_word("DONT"))
        self.assertFalse(self.dictionary.is_word("123"))

    def test_iterates_in_order(self):
        self.assertEqual(["EAT", "ZOO", "AXE", "QUIZ"], list(self.dictionary))

    def test_words_is_a_copy(self):
        self.dictionary.words.append("NOPE")
        self.assertNotIn("NOPE", self.dictionary)

    def test_index(self):
        index = self.dictionary.index()
        self.assertIs(index, self.dictionary.index())
        self.assertEqual(["AXE"], index.find_all("AEIOUXYZ"))

    def test_from_words(self):
        dictionary = create_test_dictionary(MINIMAL_DICT + ["axe", "x-ray"])
        self.assertEqual(MINIMAL_DICT, dictionary.words)

    def test_empty(self):
        dictionary = Dictionary.from_words([])
        self.assertEqual(0, len(dictionary))
        self.assertEqual([], dictionary.index().find_all("ABC"))

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            Dictionary().read("/nonexistent/wordList.txt")


if __name__ == '__main__':
    unittest.main()

#!/usr/bin/env python3

import unittest

from scrapple.core import validation
from scrapple.core.tiles import Hand
from scrapple.core.validation import Play, WordValidator


class TestWordValidator(unittest.TestCase):
    def setUp(self):
        self.validator = WordValidator()

    def test_ball_needs_two_ls(self):
        self.assertTrue(self.validator.is_valid("BALL", Hand("BALXYZLQ")))
        self.assertFalse(self.validator.is_valid("BALL", Hand("BALXYZQR")))

    def test_length_bounds(self):
        hand = Hand("ABCDEFGH")
        self.assertEqual(Play.TOO_SHORT, self.validator.check("ABC", hand))
        self.assertEqual(Play.TOO_SHORT, self.validator.check("", hand))
        self.assertEqual(Play.GOOD, self.validator.check("ABCD", hand))
        self.assertEqual(Play.GOOD, self.validator.check("HGFEDCBA", hand))
        self.assertEqual(Play.TOO_LONG, self.validator.check("ABCDEFGHA", hand))

    def test_length_checked_before_letters(self):
        self.assertEqual(Play.TOO_SHORT, self.validator.check("ZZ", Hand("ABCDEFGH")))

    def test_case_insensitive(self):
        self.assertTrue(self.validator.is_valid("ball", Hand("BALLOONS")))
        self.assertTrue(self.validator.is_valid("BALL", Hand("balloons")))

    def test_repeated_calls_do_not_mutate_hand(self):
        hand = Hand("BALLOONS")
        results = [self.validator.is_valid("BALLOON", hand) for _ in range(3)]
        self.assertEqual([True, True, True], results)
        self.assertEqual("BALLOONS", hand.letters())
        self.assertFalse(self.validator.is_valid("SNOBS", hand))
        self.assertEqual("BALLOONS", hand.letters())

    def test_custom_bounds(self):
        validator = WordValidator(min_length=2, max_length=3)
        hand = Hand("ABCDEFGH")
        self.assertTrue(validator.is_valid("AB", hand))
        self.assertFalse(validator.is_valid("ABCD", hand))

    def test_module_level_is_valid(self):
        self.assertTrue(validation.is_valid("SNOB", Hand("BALLOONS")))
        self.assertFalse(validation.is_valid("SNOBS", Hand("BALLOONS")))


if __name__ == '__main__':
    unittest.main()

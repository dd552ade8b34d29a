#!/usr/bin/env python3

import unittest

from scrapple.core.scorecard import COMPUTER, PLAYER, ScoreCard, calculate_score, has_double_letters


class TestScore(unittest.TestCase):
    def test_letter_values(self):
        self.assertEqual(22, calculate_score("QUIZ"))
        self.assertEqual(4, calculate_score("TAIL"))
        self.assertEqual(0, calculate_score(""))

    def test_double_letter_bonus(self):
        self.assertEqual(12, calculate_score("BALL"))
        self.assertEqual(58, calculate_score("JAZZ"))

    def test_bonus_not_compounded(self):
        self.assertEqual(16, calculate_score("AABB"))
        self.assertEqual(8, calculate_score("AAAA"))

    def test_case_insensitive(self):
        self.assertEqual(calculate_score("BALL"), calculate_score("ball"))
        self.assertEqual(calculate_score("BALL"), calculate_score("BaLl"))

    def test_non_letters_score_nothing(self):
        self.assertEqual(4, calculate_score("TA-IL"))
        self.assertEqual(1, calculate_score("A1"))

    def test_has_double_letters(self):
        self.assertTrue(has_double_letters("BALLOON"))
        self.assertTrue(has_double_letters("Ll"))
        self.assertFalse(has_double_letters("LOBAL"))
        self.assertFalse(has_double_letters("A"))


class TestScoreCard(unittest.TestCase):
    def setUp(self):
        self.score_card = ScoreCard()

    def test_add_play(self):
        self.assertEqual(12, self.score_card.add_play(PLAYER, "BALL"))
        self.assertEqual(9, self.score_card.add_play(COMPUTER, "ABCD"))
        self.assertEqual(6, self.score_card.add_play(PLAYER, "SNOB"))
        self.assertEqual(18, self.score_card.score(PLAYER))
        self.assertEqual(9, self.score_card.score(COMPUTER))
        self.assertEqual([(PLAYER, "BALL", 12), (COMPUTER, "ABCD", 9), (PLAYER, "SNOB", 6)],
                         self.score_card.plays)

    def test_leader(self):
        self.assertIsNone(self.score_card.leader())
        self.score_card.add_play(COMPUTER, "QUIZ")
        self.assertEqual(COMPUTER, self.score_card.leader())
        self.score_card.add_play(PLAYER, "JAZZ")
        self.assertEqual(PLAYER, self.score_card.leader())


if __name__ == '__main__':
    unittest.main()

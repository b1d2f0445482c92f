import random
import unittest

from leitner.flashcards import AnswerDifficulty, Flashcard
from leitner.modern import format_buckets, random_review, study


def always(difficulty):
    return lambda card: difficulty


class TestStudy(unittest.TestCase):

    def test_promote(self):
        c1, c2 = Flashcard("Q1", "A1"), Flashcard("Q2", "A2")
        buckets = {0: {c1}, 2: {c2}}
        # bucket 2 is not due on day 1
        new_buckets, history = study(buckets, 1, always(AnswerDifficulty.EASY), timestamp=10)
        assert new_buckets[1] == {c1}
        assert new_buckets[2] == {c2}
        assert len(history) == 1
        assert history[0].card is c1
        assert history[0].timestamp == 10
        assert history[0].difficulty == AnswerDifficulty.EASY

    def test_due_buckets(self):
        c1, c2 = Flashcard("Q1", "A1"), Flashcard("Q2", "A2")
        buckets = {0: {c1}, 2: {c2}}
        new_buckets, history = study(buckets, 2, always(AnswerDifficulty.WRONG))
        assert new_buckets[0] == {c1, c2}
        assert new_buckets[2] == set()
        # reviewed in creation order
        assert [entry.card for entry in history] == [c1, c2]

    def test_inputs_unchanged(self):
        c1 = Flashcard("Q1", "A1")
        buckets = {0: {c1}}
        history = []
        new_buckets, new_history = study(buckets, 0, always(AnswerDifficulty.EASY), history)
        assert buckets == {0: {c1}}
        assert history == []
        assert new_buckets[1] == {c1}
        assert len(new_history) == 1

    def test_nothing_due(self):
        c1 = Flashcard("Q1", "A1")
        buckets = {3: {c1}}
        new_buckets, history = study(buckets, 1, always(AnswerDifficulty.EASY))
        assert new_buckets == buckets
        assert new_buckets is not buckets
        assert history == []

    def test_empty(self):
        assert study(None, 0, always(AnswerDifficulty.EASY)) == ({}, [])


class TestSimulation(unittest.TestCase):

    def test_random_review(self):
        random.seed(42)
        card = Flashcard("Q1", "A1")
        answers = {random_review(card) for _ in range(100)}
        assert answers == set(AnswerDifficulty)

    def test_format_buckets(self):
        c1, c2 = Flashcard("Q1", "A1"), Flashcard("Q2", "A2")
        lines = format_buckets({0: {c1, c2}, 2: set()}).splitlines()
        assert len(lines) == 5
        assert lines[1] == "  |\\   2 \\   |\\   0 \\   |\\   0 \\"


if __name__ == '__main__':
    unittest.main()

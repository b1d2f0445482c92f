"""
Data model shared by the Leitner algorithms.

Cards are compared by identity: two cards built from the same text are
still two different cards, so equality and hashing are never overridden.
"""
import itertools
from collections import namedtuple
from enum import Enum

_ids = itertools.count(1)


class AnswerDifficulty(Enum):
    WRONG = 0
    HARD = 1
    EASY = 2


class Flashcard:

    def __init__(self, front, back, hint=None, tags=None):
        self.id = next(_ids)
        self.front = front
        self.back = back
        self.hint = hint
        self.tags = list(tags) if tags else []

    def __repr__(self):
        return f"Flashcard(#{self.id} {self.front!r})"


# One answered card in a review session
HistoryEntry = namedtuple("HistoryEntry", ["card", "timestamp", "difficulty"])

"""
Day-by-day study with the Leitner algorithms.

Each day, the due cards are reviewed once and moved according to the
answer. The result of every review is appended to the history so that
progress can be computed at any time.
"""
import random
import time

from leitner.algorithm import compute_progress, practice, to_bucket_sets, update
from leitner.flashcards import AnswerDifficulty, Flashcard, HistoryEntry

# Relative chances of each answer in the simulation
SUCCESS_WEIGHTS = {
    AnswerDifficulty.WRONG: 1,
    AnswerDifficulty.HARD: 1,
    AnswerDifficulty.EASY: 3,
}

NUMBER_OF_CARDS = 100
NUMBER_OF_DAYS = 30


def random_review(card):
    """Answer a single card."""
    choices = list(SUCCESS_WEIGHTS)
    return random.choices(choices, weights=[SUCCESS_WEIGHTS[c] for c in choices])[0]


def study(buckets, day, review, history=None, timestamp=None):
    """Review the cards due on the given day.

    `review` is called with each due card and must return an AnswerDifficulty.
    Return the new buckets and the new history. Neither input is modified.
    """
    if timestamp is None:
        timestamp = time.time()
    buckets = {bucket: set(cards) for bucket, cards in (buckets or {}).items()}
    new_history = list(history or [])

    cards_to_review = sorted(practice(to_bucket_sets(buckets), day), key=lambda c: c.id)
    for card in cards_to_review:
        difficulty = review(card)
        buckets = update(buckets, card, difficulty)
        new_history.append(HistoryEntry(card, timestamp, difficulty))

    return buckets, new_history


def format_buckets(buckets):
    """Draw the buckets as boxes with the number of cards inside."""
    sizes = [len(cards) for cards in to_bucket_sets(buckets)]
    return "\n".join([
        "  " + "    ".join("+-----+" for _ in sizes),
        "  " + "   ".join(f"|\\ {s:3} \\" for s in sizes),
        "  " + "  ".join("| +-----+" for _ in sizes),
        "  " + "  ".join("| |     |" for _ in sizes),
        "  " + "  ".join(" \\|_____|" for _ in sizes),
    ])


if __name__ == "__main__":

    # Populate the first bucket
    buckets = {0: {Flashcard(f"Q{i}", f"A{i}") for i in range(NUMBER_OF_CARDS)}}
    history = []
    print(format_buckets(buckets))

    # Study
    for day in range(1, NUMBER_OF_DAYS + 1):
        buckets, history = study(buckets, day, random_review, history)
        if day % 10 == 0:
            print(f"\n--- Day {day} ---\n")
            print(format_buckets(buckets))

    progress = compute_progress(buckets, history)
    print()
    print(f"  Cards:    {progress.total_cards}")
    print(f"  Average:  {progress.average_bucket:.2f}")
    print(f"  Mastered: {progress.mastered_cards}")
    print(f"  Success:  {progress.success_rate:.1f}%")

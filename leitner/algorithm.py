"""
Bookkeeping for a Leitner system with an unbounded number of buckets.

The authoritative state is a dict mapping a bucket number to the set of
cards it holds (buckets without cards may be missing). Practice selection
and range queries work on a dense list of sets derived from it with
`to_bucket_sets()`.

Bucket 0 is reviewed every day. Bucket i is reviewed every i-th day:

* Bucket 1: every day
* Bucket 2: every 2 days
* Bucket 3: every 3 days
* ...

Day 0 is divisible by every bucket number, so every bucket is reviewed on day 0.
"""
import logging
import re
from collections import namedtuple

from leitner.flashcards import AnswerDifficulty

logger = logging.getLogger(__name__)

# New and failed cards start over here
FIRST_BUCKET = 0

# Cards in this bucket or above count as mastered
MASTERY_THRESHOLD = 3

BucketRange = namedtuple("BucketRange", ["min_bucket", "max_bucket"])

Progress = namedtuple("Progress", [
    "total_cards",
    "cards_per_bucket",
    "average_bucket",
    "mastered_cards",
    "success_rate",
])

_LEADING_NON_LETTERS = re.compile(r"^[^a-zA-Z]*")
_WHITESPACE = re.compile(r"\s+")


def to_bucket_sets(buckets):
    """Convert the dict of buckets into a list with one set per bucket number.

    Missing bucket numbers become empty sets. Every set is a copy.
    """
    if not buckets:
        return []
    max_bucket = max(buckets.keys())
    return [set(buckets.get(i, ())) for i in range(max_bucket + 1)]


def get_bucket_range(bucket_sets):
    """Return the lowest and highest non-empty buckets. None if all are empty."""
    used = [i for i, cards in enumerate(bucket_sets) if cards]
    if not used:
        return None
    return BucketRange(min(used), max(used))


def practice(bucket_sets, day):
    """Select the cards to review on the given day."""
    cards = set()
    if bucket_sets and bucket_sets[0]:
        cards.update(bucket_sets[0])
    for i, bucket in enumerate(bucket_sets):
        # Day 0 is divisible by everything: all buckets are due
        if i > 0 and bucket and day % i == 0:
            cards.update(bucket)
    return cards


def update(buckets, card, difficulty):
    """Move a card after it has been answered. Return a new dict of buckets.

    A card found in no bucket is considered to be in the first bucket.
    """
    if not isinstance(difficulty, AnswerDifficulty):
        raise ValueError(f"Unknown answer difficulty: {difficulty!r}")

    new_buckets = {bucket: set(cards) for bucket, cards in (buckets or {}).items()}

    current = None
    for bucket, cards in new_buckets.items():
        if card in cards:
            current = bucket
            cards.discard(card)
            break
    if current is None:
        current = FIRST_BUCKET

    if difficulty == AnswerDifficulty.WRONG:
        # Start over
        target = FIRST_BUCKET
    elif difficulty == AnswerDifficulty.HARD:
        target = current
    else:
        # Promote
        target = current + 1

    new_buckets.setdefault(target, set()).add(card)
    logger.debug("%r answered %s: bucket %d -> %d", card, difficulty.name, current, target)
    return new_buckets


def get_hint(card):
    """Return the card's hint, or mask its answer when it has none.

    Each word of the answer becomes its first letter followed by one
    underscore per remaining character, ex: "Paris, France" -> "P_____ F_____".
    Leading non-letters are skipped to find the letter but still counted.
    """
    if card.hint and card.hint.strip():
        return card.hint
    if not card.back:
        return ""

    masked = []
    for word in _WHITESPACE.split(card.back):
        stripped = _LEADING_NON_LETTERS.sub("", word)
        first_letter = stripped[0] if stripped else ""
        if first_letter:
            masked.append(first_letter + "_" * (len(word) - 1))
        else:
            masked.append("")
    return " ".join(masked)


def compute_progress(buckets, history):
    """Compute statistics about the learning progress."""
    cards_per_bucket = {}
    total_cards = 0
    bucket_sum = 0
    for bucket, cards in (buckets or {}).items():
        count = len(cards)
        cards_per_bucket[bucket] = count
        total_cards += count
        bucket_sum += bucket * count

    average_bucket = bucket_sum / total_cards if total_cards > 0 else 0
    mastered_cards = sum(count for bucket, count in cards_per_bucket.items()
                         if bucket >= MASTERY_THRESHOLD)

    history = list(history or [])
    successes = sum(1 for entry in history if entry.difficulty != AnswerDifficulty.WRONG)
    success_rate = successes / len(history) * 100 if history else 0

    return Progress(
        total_cards=total_cards,
        cards_per_bucket=cards_per_bucket,
        average_bucket=average_bucket,
        mastered_cards=mastered_cards,
        success_rate=success_rate,
    )

"""Random English questions drawn from a small context-free grammar."""

from __future__ import annotations

import argparse
import random

AUXILIARIES = ("is", "are", "do", "does", "did", "can", "will")
PRONOUNS = ("he", "she", "it", "they", "we", "you", "I")
NOUNS = ("cat", "dog", "book", "movie", "song", "person", "apple", "car")
ADJECTIVES = ("big", "small", "red", "blue", "old", "new")
VERBS = ("run", "eat", "like", "see", "know", "play", "write", "read")
WH_WORDS = ("who", "what", "where", "when", "why", "how")
QUESTION_TYPES = ("aux", "wh-aux", "wh-verb")

# Do-support takes the bare verb, which is what VERBS holds.
_DO_FORMS = ("do", "does", "did")

_OBJECTS = tuple(
    phrase for noun in NOUNS for phrase in (f"the {noun}", f"a {noun}", f"an {noun}", noun)
)
_SUBJECTS = tuple(f"the {noun}" for noun in NOUNS) + PRONOUNS


def generate_question(rng=None) -> str:
    """Build one question; ``rng`` needs a ``choice`` method like ``random.Random``."""
    rng = random if rng is None else rng
    kind = rng.choice(QUESTION_TYPES)
    if kind == "aux":
        aux = rng.choice(AUXILIARIES)
        subject = rng.choice(PRONOUNS)
        verb = rng.choice(VERBS)
        obj = rng.choice(_OBJECTS)
        return f"{aux} {subject} {verb} {obj}?"
    if kind == "wh-aux":
        wh = rng.choice(WH_WORDS)
        aux = rng.choice(AUXILIARIES)
        subject = rng.choice(PRONOUNS)
        verb = rng.choice(VERBS)
        return f"{wh} {aux} {subject} {verb}?"
    wh = rng.choice(WH_WORDS)
    verb = rng.choice(VERBS)
    subject = rng.choice(_SUBJECTS)
    return f"{wh} {verb} {subject}?"


def main(argv: list[str] | None = None) -> int:
    """Print a batch of random questions, one per line."""
    parser = argparse.ArgumentParser(description="Generate random questions.")
    parser.add_argument("-n", "--count", type=int, default=10, help="how many questions")
    parser.add_argument("--seed", type=int, default=None, help="seed for repeatable output")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)
    for _ in range(args.count):
        print(generate_question(rng))
    return 0
"""Scoring and coverage helpers for word chains."""

from typing import Iterable, List, Set

from .board import LetterBox


def used_letters(chain: Iterable[str]) -> Set[str]:
    """Distinct letters used across all words of a chain."""
    return {letter for word in chain for letter in word.upper()}


def is_complete(box: LetterBox, chain: Iterable[str]) -> bool:
    """True if the chain uses every letter of the puzzle."""
    return used_letters(chain) == box.alphabet


def score(chain: List[str]) -> float:
    """
    Score a chain: fewer words and longer words are better.

    score = 100 * average word length - 50 * word count

    Raises:
        ValueError: If the chain is empty
    """
    if not chain:
        raise ValueError("Cannot score an empty chain")

    word_count = len(chain)
    average_length = sum(len(word) for word in chain) / word_count
    return average_length * 100 - word_count * 50

"""
Letter box model: the letter-to-side mapping for one puzzle and the word
validity rule built on it.
"""

from typing import Dict, FrozenSet, Optional, Sequence
from pydantic import BaseModel, ConfigDict

from .models import Puzzle


MIN_WORD_LENGTH = 3


class LetterBox(BaseModel):
    """
    Read-only view of a puzzle used by the index, the search and the hints.

    Attributes:
        puzzle: The validated puzzle layout
    """

    model_config = ConfigDict(frozen=True)

    puzzle: Puzzle
    _letter_to_side: Dict[str, int] = None
    _alphabet: FrozenSet[str] = None

    def model_post_init(self, __context) -> None:
        """Derive the letter-to-side map once, after validation."""
        self._letter_to_side = {
            letter: side_index
            for side_index, side in enumerate(self.puzzle.sides)
            for letter in side
        }
        self._alphabet = frozenset(self._letter_to_side)

    @classmethod
    def create(cls, sides: Sequence[Sequence[str]]) -> "LetterBox":
        """
        Factory method building the model straight from raw sides.

        Raises:
            ConfigurationError: If the layout is malformed
        """
        return cls(puzzle=Puzzle.create(sides))

    @property
    def letter_to_side(self) -> Dict[str, int]:
        return dict(self._letter_to_side)

    @property
    def alphabet(self) -> FrozenSet[str]:
        return self._alphabet

    def side_of(self, letter: str) -> Optional[int]:
        """Side index (0-3) of a letter, or None if it is not in the puzzle."""
        return self._letter_to_side.get(letter.upper())

    def is_valid_word(self, word: str) -> bool:
        """
        Check whether a word can be played on this puzzle.

        A word is valid if it has at least 3 letters, uses only puzzle
        letters, and never takes two consecutive letters from the same side.
        """
        if len(word) < MIN_WORD_LENGTH:
            return False

        sides = self._letter_to_side
        previous = None
        for letter in word.upper():
            side = sides.get(letter)
            if side is None or side == previous:
                return False
            previous = side
        return True

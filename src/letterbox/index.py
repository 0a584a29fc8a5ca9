"""Per-puzzle index of the corpus words that are valid on a letter box."""

import logging
from typing import Dict, FrozenSet, Iterable, Optional, Tuple
from pydantic import BaseModel, ConfigDict

from .board import LetterBox

logger = logging.getLogger(__name__)


class WordIndex(BaseModel):
    """
    The valid subset of a word corpus for one puzzle, grouped by first letter.

    Built once per puzzle and never mutated afterwards, so a single index can
    be shared between searches and hint requests.

    Attributes:
        words: Valid words in corpus order (uppercase)
    """

    model_config = ConfigDict(frozen=True)

    words: Tuple[str, ...] = ()
    _by_first: Dict[str, Tuple[str, ...]] = None
    _word_set: FrozenSet[str] = None

    def model_post_init(self, __context) -> None:
        groups: Dict[str, list] = {}
        for word in self.words:
            groups.setdefault(word[0], []).append(word)
        self._by_first = {letter: tuple(group) for letter, group in groups.items()}
        self._word_set = frozenset(self.words)

    @classmethod
    def build(cls, box: LetterBox, corpus: Iterable[str]) -> "WordIndex":
        """
        Filter a corpus down to the words valid on `box`.

        Args:
            box: The letter box to validate against
            corpus: Candidate words, in the caller's preferred order

        Returns:
            A new WordIndex
        """
        words = tuple(word.upper() for word in corpus if box.is_valid_word(word))
        logger.info("Found %d valid words for puzzle %s", len(words), box.puzzle)
        return cls(words=words)

    def by_first_letter(self, letter: Optional[str] = None) -> Tuple[str, ...]:
        """
        Valid words starting with `letter`.

        Returns every valid word when `letter` is None, and an empty tuple
        when no word starts with it.
        """
        if letter is None:
            return self.words
        return self._by_first.get(letter.upper(), ())

    def __len__(self) -> int:
        return len(self.words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.upper() in self._word_set

"""Next-word suggestions for a chain that is still in progress."""

from typing import List, Optional
from pydantic import BaseModel, Field

from .index import WordIndex
from .models import NUM_LETTERS
from .scoring import used_letters
from .search import new_letter_count


class HintAdvisor(BaseModel):
    """
    Suggests words that extend a partially played chain.

    Attributes:
        index: Valid words for the current puzzle
        limit: Maximum number of suggestions returned
    """

    index: WordIndex
    limit: int = Field(default=5, ge=1)

    def suggest(self, committed_words: List[str]) -> List[str]:
        """
        Suggest the best next words for the chain played so far.

        Only words that add at least one uncovered letter are considered. They
        are ranked by (new letters x word length), best first. An empty list
        means there is nothing useful to play next.
        """
        words = [word.upper() for word in committed_words if word]
        coverage = used_letters(words)
        required_start: Optional[str] = words[-1][-1] if words else None

        helpful = []
        for word in self.index.by_first_letter(required_start):
            new_coverage = coverage.union(word)
            if len(new_coverage) > len(coverage) and len(new_coverage) <= NUM_LETTERS:
                helpful.append(word)

        helpful.sort(key=lambda word: new_letter_count(word, coverage) * len(word), reverse=True)
        return helpful[:self.limit]

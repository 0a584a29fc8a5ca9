"""
Bounded backtracking search for letter-covering word chains.

The search walks chains depth first. At each step it orders the words that may
follow the current chain by how many uncovered letters they add (weighted 3x)
plus their length, explores only a window of the best ones, and records a chain
as soon as it covers the whole puzzle. Depth, wall clock and solution count are
all bounded; hitting a bound simply ends the search with whatever was found.
"""

import logging
import time
from typing import Callable, List, Optional, Set
from pydantic import BaseModel, ConfigDict, Field

from .index import WordIndex
from .models import NUM_LETTERS, SearchConfig, SolutionCandidate
from .scoring import score, used_letters

logger = logging.getLogger(__name__)

# Past this coverage, words adding no new letter are still tried
NEAR_COMPLETE_COVERAGE = 8


def new_letter_count(word: str, coverage: Set[str]) -> int:
    """Letters of `word` (counted with repetition) not yet in `coverage`."""
    return sum(1 for letter in word if letter not in coverage)


class SolutionSearch(BaseModel):
    """
    Finds and ranks chains that cover all 12 letters of a puzzle.

    Attributes:
        index: Valid words for the puzzle being solved
        config: Search bounds and candidate windows
        clock: Monotonic time source used for the deadline
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    index: WordIndex
    config: SearchConfig = Field(default_factory=SearchConfig)
    clock: Callable[[], float] = time.monotonic

    def find_solutions(
        self,
        deadline: Optional[float] = None,
        cancel: Optional[object] = None,
    ) -> List[List[str]]:
        """
        Run the full search and return every accepted chain, best first.

        Args:
            deadline: Absolute time on `clock` after which the search stops.
                Defaults to now + config.time_limit.
            cancel: Optional token with an `is_set()` method (e.g. a
                threading.Event); the search stops once it is set.

        Returns:
            Chains sorted by score, descending. Ties keep discovery order.
        """
        config = self.config
        started = self.clock()
        if deadline is None:
            deadline = started + config.time_limit

        solutions: List[List[str]] = []
        chain: List[str] = []
        stopped = False

        def backtrack(coverage: Set[str], last_letter: Optional[str], depth: int) -> None:
            nonlocal stopped
            if stopped or self.clock() > deadline or (cancel is not None and cancel.is_set()):
                stopped = True
                return
            if depth > config.max_depth:
                return
            if len(solutions) >= config.max_solutions:
                return
            if len(coverage) == NUM_LETTERS:
                solutions.append(list(chain))
                logger.debug("Found solution #%d: %s", len(solutions), " -> ".join(chain))
                return

            candidates = sorted(
                self.index.by_first_letter(last_letter),
                key=lambda word: new_letter_count(word, coverage) * 3 + len(word),
                reverse=True,
            )
            window = config.wide_window if depth < config.wide_depth else config.narrow_window

            for word in candidates[:window]:
                new_coverage = coverage.union(word)
                adds_letter = len(new_coverage) > len(coverage)
                should_try = adds_letter or depth == 0 or len(coverage) > NEAR_COMPLETE_COVERAGE
                if not should_try or len(new_coverage) > NUM_LETTERS:
                    continue

                chain.append(word)
                backtrack(new_coverage, word[-1], depth + 1)
                chain.pop()

                if stopped or len(solutions) >= config.max_solutions:
                    break

        backtrack(set(), None, 0)

        elapsed = self.clock() - started
        if stopped:
            logger.info("Search stopped early after %.2fs with %d solutions", elapsed, len(solutions))
        else:
            logger.info("Search finished in %.2fs with %d solutions", elapsed, len(solutions))

        # sorted() is stable, so equal scores keep discovery order
        return sorted(solutions, key=score, reverse=True)

    def get_top_solutions(self, n: Optional[int] = None, **kwargs) -> List[SolutionCandidate]:
        """
        Run the search and return the `n` best chains with their scores.

        Args:
            n: Number of solutions to return (defaults to config.top_n)
            **kwargs: Passed through to find_solutions (deadline, cancel)
        """
        if n is None:
            n = self.config.top_n
        return [
            SolutionCandidate(
                words=words,
                score=score(words),
                letter_count=len(used_letters(words)),
            )
            for words in self.find_solutions(**kwargs)[:max(n, 0)]
        ]

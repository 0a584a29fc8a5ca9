"""
Puzzle generator.

Most of the time a puzzle is drawn from a small pool of layouts known to be
solvable. Otherwise a layout is synthesized (one vowel and one common consonant
per side, then fillers) and kept only if a quick, shallow search finds at least
one chain covering all its letters. If no synthesized layout passes within the
attempt budget, the generator falls back to the pool.
"""

import logging
import random
import time
from typing import Callable, List, Optional, Set, Tuple
from pydantic import BaseModel, ConfigDict, Field

from .board import LetterBox
from .index import WordIndex
from .models import LETTERS_PER_SIDE, NUM_LETTERS, NUM_SIDES, GeneratorConfig, Puzzle
from .search import new_letter_count

logger = logging.getLogger(__name__)


KNOWN_PUZZLES: Tuple[Tuple[str, ...], ...] = (
    ("TER", "ASI", "NOL", "DMG"),
    ("PAR", "EDI", "NTO", "SLM"),
    ("BUS", "EAR", "NTI", "LOD"),
    ("CAT", "ERS", "NOI", "LDM"),
    ("FIR", "EAD", "NOT", "SLM"),
    ("GAM", "ERS", "TOI", "NLD"),
    ("HAR", "EST", "ION", "LDM"),
    ("MAR", "ESI", "TON", "LDG"),
    ("WAR", "EST", "ION", "LDM"),
    ("LAR", "EST", "ION", "DMG"),
)

VOWELS = "AEIOU"
COMMON_CONSONANTS = "RTNSLCDPMHGFYWBVK"
RARE_CONSONANTS = "JXQZ"


class PuzzleGenerator(BaseModel):
    """
    Produces new puzzles, biased toward solvable ones.

    Attributes:
        corpus: Word list used to check synthesized puzzles
        config: Generation settings
        rng: Random source; a new one seeded from config.seed if omitted
        clock: Monotonic time source for the probe deadline
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    corpus: List[str] = Field(default_factory=list)
    config: GeneratorConfig = Field(default_factory=GeneratorConfig)
    rng: Optional[random.Random] = None
    clock: Callable[[], float] = time.monotonic

    def model_post_init(self, __context) -> None:
        """Create the random generator if none was injected."""
        if self.rng is None:
            self.rng = random.Random(self.config.seed)

    def generate(self) -> Puzzle:
        """Return a new puzzle from the pool or a verified synthesized one."""
        if self.rng.random() < self.config.known_puzzle_probability:
            return self.from_pool()

        for attempt in range(1, self.config.max_attempts + 1):
            puzzle = self.synthesize()
            if self.probe(puzzle):
                logger.info("Generated new solvable puzzle %s after %d attempts", puzzle, attempt)
                return puzzle

        logger.info("Falling back to known solvable puzzle")
        return self.from_pool()

    def from_pool(self) -> Puzzle:
        """Pick one of the known solvable layouts uniformly at random."""
        return Puzzle.create(self.rng.choice(KNOWN_PUZZLES))

    def synthesize(self) -> Puzzle:
        """
        Build a random layout with no repeated letters.

        Each side gets one vowel and one common consonant; the remaining slot
        is filled from common and rare consonants. Letters within a side are
        shuffled at the end.
        """
        sides: List[List[str]] = [[] for _ in range(NUM_SIDES)]
        used: Set[str] = set()

        def take(pool: List[str], side: List[str]) -> None:
            for letter in pool:
                if letter not in used:
                    side.append(letter)
                    used.add(letter)
                    return

        vowels = list(VOWELS)
        self.rng.shuffle(vowels)
        common = list(COMMON_CONSONANTS)
        self.rng.shuffle(common)
        fillers = list(COMMON_CONSONANTS + RARE_CONSONANTS)
        self.rng.shuffle(fillers)

        for side in sides:
            take(vowels, side)
        for side in sides:
            take(common, side)
        for side in sides:
            while len(side) < LETTERS_PER_SIDE:
                take(fillers, side)

        for side in sides:
            self.rng.shuffle(side)
        return Puzzle.create(sides)

    def probe(self, puzzle: Puzzle) -> bool:
        """
        Quick solvability check for a candidate puzzle.

        Requires enough valid words, then runs a shallow depth-first search
        that only follows words adding new letters. Returns True as soon as one
        chain covers every letter.
        """
        settings = self.config.probe
        index = WordIndex.build(LetterBox(puzzle=puzzle), self.corpus)
        if len(index) < settings.min_valid_words:
            return False

        deadline = self.clock() + settings.time_limit

        def search(coverage: Set[str], last_letter: Optional[str], depth: int) -> bool:
            if self.clock() > deadline or depth > settings.max_depth:
                return False
            if len(coverage) == NUM_LETTERS:
                return True

            candidates = [
                word for word in index.by_first_letter(last_letter)
                if new_letter_count(word, coverage) > 0
            ]
            candidates.sort(key=lambda word: new_letter_count(word, coverage), reverse=True)

            for word in candidates[:settings.window]:
                if search(coverage.union(word), word[-1], depth + 1):
                    return True
            return False

        return search(set(), None, 0)

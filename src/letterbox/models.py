"""
Pydantic models for the letter box engine.

This module contains the puzzle value, the search result type and all the
configuration models. The logic classes (LetterBox, WordIndex, SolutionSearch,
HintAdvisor, PuzzleGenerator) live in their own modules.
"""

from typing import List, Optional, Sequence, Tuple
from pydantic import BaseModel, Field, ConfigDict, field_validator


NUM_SIDES = 4
LETTERS_PER_SIDE = 3
NUM_LETTERS = NUM_SIDES * LETTERS_PER_SIDE

Side = Tuple[str, str, str]


class ConfigurationError(Exception):
    """Raised when a puzzle layout is structurally malformed."""


def normalize_sides(sides: Sequence[Sequence[str]]) -> Tuple[Side, ...]:
    """
    Normalize a raw 4x3 letter layout and check its structure.

    Each side may be given as a sequence of letters or as a 3-letter string.

    Raises:
        ConfigurationError: If there are not exactly 4 sides of exactly 3
            letters, or the 12 letters are not all distinct
    """
    if isinstance(sides, str) or not isinstance(sides, Sequence) or len(sides) != NUM_SIDES:
        raise ConfigurationError(f"A puzzle needs exactly {NUM_SIDES} sides, got {sides!r}")

    normalized = []
    for i, side in enumerate(sides):
        if not isinstance(side, (str, Sequence)):
            raise ConfigurationError(f"Side {i} is not a sequence of letters: {side!r}")
        letters = tuple(str(letter).strip().upper() for letter in side)
        if len(letters) != LETTERS_PER_SIDE:
            raise ConfigurationError(
                f"Side {i} must have exactly {LETTERS_PER_SIDE} letters, got {len(letters)}"
            )
        for letter in letters:
            if len(letter) != 1 or not letter.isalpha():
                raise ConfigurationError(f"Side {i} contains an invalid letter: {letter!r}")
        normalized.append(letters)

    all_letters = [letter for side in normalized for letter in side]
    duplicates = sorted({letter for letter in all_letters if all_letters.count(letter) > 1})
    if duplicates:
        raise ConfigurationError(f"Duplicate letters in puzzle: {', '.join(duplicates)}")

    return tuple(normalized)


class Puzzle(BaseModel):
    """
    An immutable letter box layout: 4 sides of 3 letters, 12 unique letters.

    Attributes:
        sides: The four sides, each a tuple of three uppercase letters
    """

    model_config = ConfigDict(frozen=True)

    sides: Tuple[Side, Side, Side, Side]

    @field_validator("sides", mode="before")
    @classmethod
    def _check_sides(cls, value):
        # ConfigurationError is not a ValueError, so pydantic lets it propagate
        return normalize_sides(value)

    @classmethod
    def create(cls, sides: Sequence[Sequence[str]]) -> "Puzzle":
        """Build a puzzle from nested letter lists (or 3-letter strings)."""
        return cls(sides=sides)

    @property
    def letters(self) -> List[str]:
        """The 12 letters in side order."""
        return [letter for side in self.sides for letter in side]

    def to_lists(self) -> List[List[str]]:
        """Return a fresh, mutable copy of the layout."""
        return [list(side) for side in self.sides]

    def __str__(self) -> str:
        return "-".join("".join(side) for side in self.sides)


class SolutionCandidate(BaseModel):
    """A ranked solution returned by the search."""
    words: List[str]
    score: float
    letter_count: int


class SearchConfig(BaseModel):
    """Bounds and candidate windows for the full solution search."""
    max_depth: int = Field(default=10, ge=1)
    time_limit: float = Field(default=15.0, gt=0)
    wide_window: int = Field(default=50, ge=1)
    narrow_window: int = Field(default=30, ge=1)
    wide_depth: int = Field(default=3, ge=0)  # depths below this use wide_window
    max_solutions: int = Field(default=20, ge=1)
    top_n: int = Field(default=3, ge=1)


class ProbeConfig(BaseModel):
    """Bounds for the generator's shallow solvability probe."""
    min_valid_words: int = Field(default=20, ge=0)
    max_depth: int = Field(default=5, ge=1)
    time_limit: float = Field(default=2.0, gt=0)
    window: int = Field(default=10, ge=1)


class GeneratorConfig(BaseModel):
    """Configuration for puzzle generation."""
    known_puzzle_probability: float = Field(default=0.7, ge=0.0, le=1.0)
    max_attempts: int = Field(default=5, ge=0)
    seed: Optional[int] = None
    probe: ProbeConfig = Field(default_factory=ProbeConfig)


class SolverConfig(BaseModel):
    """Top-level configuration, usually loaded from YAML."""
    word_list: Optional[str] = None
    hint_limit: int = Field(default=5, ge=1)
    search: SearchConfig = Field(default_factory=SearchConfig)
    generator: GeneratorConfig = Field(default_factory=GeneratorConfig)

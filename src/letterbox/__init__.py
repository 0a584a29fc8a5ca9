"""Solving and generation engine for letter box puzzles."""

from .models import (
    ConfigurationError,
    Puzzle,
    SolutionCandidate,
    SearchConfig,
    ProbeConfig,
    GeneratorConfig,
    SolverConfig,
)
from .board import LetterBox
from .index import WordIndex
from .scoring import score, used_letters, is_complete
from .search import SolutionSearch
from .hints import HintAdvisor
from .generator import PuzzleGenerator, KNOWN_PUZZLES
from .wordlist import load_word_list

__all__ = [
    # Models
    "ConfigurationError",
    "Puzzle",
    "SolutionCandidate",
    "SearchConfig",
    "ProbeConfig",
    "GeneratorConfig",
    "SolverConfig",
    # Engine
    "LetterBox",
    "WordIndex",
    "SolutionSearch",
    "HintAdvisor",
    "PuzzleGenerator",
    "KNOWN_PUZZLES",
    # Scoring
    "score",
    "used_letters",
    "is_complete",
    # Corpus
    "load_word_list",
]

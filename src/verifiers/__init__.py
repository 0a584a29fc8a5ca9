"""Word and chain verification for letter box puzzles."""

from .verify import verify_chain, check_word, validate_word, validate_links
from .models import ValidationError, ValidationResult
from .parsing import parse_sides, parse_chain
from .cascade import filter_cascading_errors

__all__ = [
    # Main verification
    "verify_chain",
    "check_word",
    "validate_word",
    "validate_links",
    # Models
    "ValidationError",
    "ValidationResult",
    # Parsing
    "parse_sides",
    "parse_chain",
    # Filtering
    "filter_cascading_errors",
]

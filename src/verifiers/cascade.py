"""Cascading error filtering for validation errors."""

from typing import List

from .models import ValidationError


# Cascade level constants
FATAL = 0  # Nothing to check (empty chain)
CRITICAL = 1  # Word breaks the letter or side rules
HIGH = 2  # Chain link broken
MEDIUM = 3  # Word list errors
LOW = 4  # Coverage


def filter_cascading_errors(
    errors: List[ValidationError],
    max_errors: int = 5
) -> List[ValidationError]:
    """
    Filter out cascading errors based on hierarchy.

    Filtering rules:
    - Level 0 (FATAL) present → Show ONLY Level 0 errors
    - Level 1 (CRITICAL) present → Hide NOT_IN_WORD_LIST for the words already
      reported at Level 1, keep everything else
    - Otherwise → Show all errors

    Args:
        errors: List of validation errors to filter
        max_errors: Maximum number of errors to return (default 5)

    Returns:
        Filtered list of errors, limited to max_errors
    """
    if not errors:
        return errors

    # Group errors by cascade level
    by_level: dict[int, List[ValidationError]] = {}
    for err in errors:
        by_level.setdefault(err.cascade_level, []).append(err)

    if FATAL in by_level:
        result = by_level[FATAL]

    elif CRITICAL in by_level:
        rejected = {e.word for e in by_level[CRITICAL]}
        result = [
            e for e in errors
            if not (e.code == "NOT_IN_WORD_LIST" and e.word in rejected)
        ]

    else:
        result = errors.copy()

    if len(result) > max_errors:
        # Keep first max_errors-1, add summary for rest
        kept = result[:max_errors - 1]
        num_hidden = len(result) - len(kept)

        kept.append(ValidationError(
            code="ADDITIONAL_ERRORS",
            message=f"... and {num_hidden} more similar error{'s' if num_hidden > 1 else ''}. Fix the above first.",
            cascade_level=result[0].cascade_level
        ))
        return kept

    return result

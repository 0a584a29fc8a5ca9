"""
Chain verification for letter box puzzles.

Validates:
1. Word rules (minimum length, puzzle letters only, no two consecutive letters from one side)
2. Chaining (each word starts with the previous word's last letter)
3. Word list membership (when an index is supplied)
4. Coverage (whether all 12 letters are used)
"""

from typing import List, Optional

from ..letterbox.board import LetterBox, MIN_WORD_LENGTH
from ..letterbox.index import WordIndex
from ..letterbox.scoring import score, used_letters
from .cascade import FATAL, CRITICAL, HIGH, MEDIUM, LOW
from .models import ValidationError, ValidationResult


def validate_word(box: LetterBox, word: str, position: Optional[int] = None) -> List[ValidationError]:
    """Check a single word against the puzzle's letter and side rules."""
    errors: List[ValidationError] = []
    word = word.upper()

    if len(word) < MIN_WORD_LENGTH:
        errors.append(ValidationError(
            code="TOO_SHORT",
            message=f"'{word}' is too short (minimum {MIN_WORD_LENGTH} letters)",
            word=word,
            position=position,
            cascade_level=CRITICAL
        ))

    unknown = sorted({letter for letter in word if box.side_of(letter) is None})
    if unknown:
        errors.append(ValidationError(
            code="UNKNOWN_LETTER",
            message=f"'{word}' uses letters not in the puzzle: {', '.join(unknown)}",
            word=word,
            position=position,
            cascade_level=CRITICAL
        ))

    for i in range(len(word) - 1):
        side = box.side_of(word[i])
        if side is not None and side == box.side_of(word[i + 1]):
            errors.append(ValidationError(
                code="SAME_SIDE",
                message=(
                    f"'{word}' uses '{word[i]}' then '{word[i + 1]}', "
                    f"both from side {side + 1}"
                ),
                word=word,
                position=position,
                cascade_level=CRITICAL
            ))
            break

    return errors


def check_word(box: LetterBox, word: str) -> ValidationResult:
    """
    Validate one word and explain why it fails, if it does.

    Agrees with LetterBox.is_valid_word on every input.
    """
    errors = validate_word(box, word)
    return ValidationResult(
        valid=len(errors) == 0,
        errors=errors,
        words=[word.upper()],
        letters_used=sorted(used_letters([word])),
    )


def validate_links(words: List[str]) -> List[ValidationError]:
    """Check that every word starts with the last letter of the word before it."""
    errors: List[ValidationError] = []
    for i in range(1, len(words)):
        previous, word = words[i - 1], words[i]
        if not previous or not word:
            continue
        if word[0] != previous[-1]:
            errors.append(ValidationError(
                code="BROKEN_CHAIN",
                message=f"'{word}' must start with '{previous[-1]}' (the last letter of '{previous}')",
                word=word,
                position=i,
                cascade_level=HIGH
            ))
    return errors


def verify_chain(
    box: LetterBox,
    words: List[str],
    index: Optional[WordIndex] = None,
) -> ValidationResult:
    """
    Main verification function: validates a chain of words for a puzzle.

    Returns a ValidationResult with:
    - valid: True if the chain breaks no rule (it may still be incomplete)
    - complete: True if the chain is valid and uses all 12 letters
    - errors: List of validation errors
    - warnings: Repeated words and missing letters
    - letters_used / missing_letters: Coverage of the puzzle alphabet
    - score: Chain score, if the chain is not empty
    """
    words = [word.upper() for word in words]

    if not words:
        return ValidationResult(
            valid=False,
            errors=[ValidationError(
                code="EMPTY_CHAIN",
                message="No words given",
                cascade_level=FATAL
            )],
            missing_letters=sorted(box.alphabet),
        )

    all_errors: List[ValidationError] = []
    all_warnings: List[ValidationError] = []

    for i, word in enumerate(words):
        all_errors.extend(validate_word(box, word, position=i))

    all_errors.extend(validate_links(words))

    if index is not None:
        for i, word in enumerate(words):
            if word not in index:
                all_errors.append(ValidationError(
                    code="NOT_IN_WORD_LIST",
                    message=f"'{word}' is not in the word list",
                    word=word,
                    position=i,
                    cascade_level=MEDIUM
                ))

    seen = set()
    for i, word in enumerate(words):
        if word in seen:
            all_warnings.append(ValidationError(
                code="REPEATED_WORD",
                message=f"'{word}' is used more than once",
                word=word,
                position=i,
                cascade_level=MEDIUM
            ))
        seen.add(word)

    letters = used_letters(words)
    missing = sorted(box.alphabet - letters)
    if missing:
        all_warnings.append(ValidationError(
            code="INCOMPLETE",
            message=f"Letters not used yet: {', '.join(missing)}",
            cascade_level=LOW
        ))

    valid = len(all_errors) == 0
    return ValidationResult(
        valid=valid,
        complete=valid and not missing,
        errors=all_errors,
        warnings=all_warnings,
        words=words,
        letters_used=sorted(letters & box.alphabet),
        missing_letters=missing,
        score=score(words),
    )

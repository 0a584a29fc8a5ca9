"""Parsing utilities for puzzle layouts and word chains typed as text."""

import re
from typing import List

from ..letterbox.models import ConfigurationError, Puzzle


def parse_sides(spec: str) -> Puzzle:
    """
    Parse a puzzle layout such as "SAT-ERN-OIL-DMG" or "sat ern oil dmg".

    Any run of non-letters separates sides. A single run of 12 letters is read
    as four consecutive sides.

    Raises:
        ConfigurationError: If the text does not describe 4 sides of 3 unique letters
    """
    sides = re.findall(r'[A-Za-z]+', spec)
    if not sides:
        raise ConfigurationError(f"No letters found in puzzle specification: '{spec}'")
    if len(sides) == 1 and len(sides[0]) == 12:
        sides = [sides[0][i:i + 3] for i in range(0, 12, 3)]
    return Puzzle.create(sides)


def parse_chain(spec: str) -> List[str]:
    """Split a chain such as "MEDALS -> SORTING" or "medals, sorting" into words."""
    return [word.upper() for word in re.findall(r'[A-Za-z]+', spec)]

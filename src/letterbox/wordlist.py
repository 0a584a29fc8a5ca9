"""Loading a word corpus from a plain text file."""

from pathlib import Path
from typing import List

from .board import MIN_WORD_LENGTH


def load_word_list(path: str | Path, *, min_len: int = MIN_WORD_LENGTH) -> List[str]:
    """Load a word list, one word per line.

    Words are uppercased; blank lines, words shorter than `min_len` and words
    containing non-letters are skipped. File order is kept and duplicates are
    dropped, so the first occurrence wins.

    Args:
        path: Path to the word list file.
        min_len: Minimum word length to include.

    Returns:
        The words in file order.
    """
    word_list_path = Path(path)
    if not word_list_path.is_file():
        raise FileNotFoundError(f"Word list file not found: {word_list_path}")

    words: List[str] = []
    seen = set()
    with word_list_path.open("r", encoding="utf-8") as f:
        for line in f:
            word = line.strip().upper()
            if len(word) < min_len or not word.isalpha() or word in seen:
                continue
            seen.add(word)
            words.append(word)
    return words

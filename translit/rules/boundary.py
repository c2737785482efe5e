"""
Word-boundary detection shared by both transliteration directions.
"""

from typing import AbstractSet


def is_word_start(text: str, index: int, skippable: AbstractSet[str],
                  separators: AbstractSet[str]) -> bool:
    """
    Check whether ``index`` starts a word.

    Looks backwards from ``index - 1`` over skippable characters (apostrophes,
    soft signs). The position is a word start if the scan reaches a separator
    or the beginning of the text before any other character.

    Args:
        text: Full input text
        index: Cursor position being examined
        skippable: Characters that do not count as part of a word
        separators: Characters that end a word

    Returns:
        True if the position is at a word start
    """
    pos = index - 1
    while pos >= 0:
        char = text[pos]
        if char in separators:
            return True
        if char not in skippable:
            return False
        pos -= 1
    return True

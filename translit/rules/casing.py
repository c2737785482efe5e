"""
Case inference and re-application for multi-character substitutions.
"""

from enum import Enum


class CaseClass(Enum):
    UPPER = "upper"
    TITLE = "title"
    OTHER = "other"


def classify_case(span: str) -> CaseClass:
    """
    Classify the casing of a matched input span.

    Args:
        span: Slice of the original input

    Returns:
        UPPER if the span is unchanged by upper-casing, TITLE if only its
        first character is upper, otherwise OTHER
    """
    if span == span.upper():
        return CaseClass.UPPER
    if span[:1] == span[:1].upper() and span[1:] == span[1:].lower():
        return CaseClass.TITLE
    return CaseClass.OTHER


def apply_case(span: str, replacement: str) -> str:
    """
    Reproduce the casing of ``span`` on a lowercase ``replacement``.

    Examples:
        >>> apply_case("SHCH", "щ")
        'Щ'
        >>> apply_case("Zgh", "зг")
        'Зг'
        >>> apply_case("zGh", "зг")
        'зг'
    """
    case = classify_case(span)
    if case is CaseClass.UPPER:
        return replacement.upper()
    if case is CaseClass.TITLE:
        return replacement[:1].upper() + replacement[1:]
    return replacement


def match_char_case(char: str, replacement: str) -> str:
    """Upper-case ``replacement`` when the single input ``char`` is uppercase."""
    if char == char.upper():
        return replacement.upper()
    return replacement

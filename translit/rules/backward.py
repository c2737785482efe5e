"""
Latin to Ukrainian (Cyrillic) strategies.

The forward mapping is not injective, so this direction cannot invert it.
The precedence below is fixed and deterministic, e.g. "Kyiv" reads back
as "Кїв" because "yi" is matched as a two-letter key before "y".

Precedence, highest first:
1. 4-letter keys ("shch")
2. 3-letter keys ("zgh")
3. "ii" at the end of a word or before a consonant -> "ій"
4. 2-letter keys
5. "y" at a word start -> "й"
6. single letters; anything unmapped passes through
"""

from typing import Optional

from .boundary import is_word_start
from .casing import apply_case, match_char_case
from .strategy import Match, Strategy
from .tables import RuleTables


class LookupOfLength(Strategy):
    """Case-insensitive lookup of a multi-letter key of fixed length."""

    def __init__(self, length: int):
        self.length = length

    def match(self, text: str, index: int, tables: RuleTables) -> Optional[Match]:
        end = index + self.length
        if end > len(text):
            return None

        span = text[index:end]
        value = tables.backward.get(span.lower())
        if value is None:
            return None
        return Match(self.length, apply_case(span, value))

    def __repr__(self) -> str:
        return f"LookupOfLength({self.length})"


class WordFinalDoubleI(Strategy):
    """
    "ii" not followed by a vowel is the word-final "ій" (Андрій -> Andrii).

    Without this step "ii" would fall through to two separate "і".
    """

    def match(self, text: str, index: int, tables: RuleTables) -> Optional[Match]:
        end = index + len(tables.ii_key)
        span = text[index:end]
        if span.lower() != tables.ii_key:
            return None

        if end < len(text) and text[end].lower() in tables.vowels:
            return None

        if span == span.upper():
            return Match(len(span), tables.ii_output.upper())
        return Match(len(span), tables.ii_output)


class WordStartY(Strategy):
    def match(self, text: str, index: int, tables: RuleTables) -> Optional[Match]:
        char = text[index]
        if char.lower() != tables.y_key:
            return None
        # Latin input has no soft sign, only apostrophes are skipped
        if not is_word_start(text, index, tables.apostrophes, tables.separators):
            return None
        return Match(1, match_char_case(char, tables.y_output))


class SingleLetter(Strategy):
    def match(self, text: str, index: int, tables: RuleTables) -> Optional[Match]:
        char = text[index]
        value = tables.backward.get(char.lower())
        if value is None or len(char.lower()) != 1:
            return Match(1, char)
        return Match(1, match_char_case(char, value))


BACKWARD_STRATEGIES = (
    LookupOfLength(4),
    LookupOfLength(3),
    WordFinalDoubleI(),
    LookupOfLength(2),
    WordStartY(),
    SingleLetter(),
)

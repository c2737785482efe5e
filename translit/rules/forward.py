"""
Ukrainian (Cyrillic) to Latin strategies.

Precedence, highest first:
1. "зг" digraph override -> "zgh"
2. position-dependent letters (Є Ї Й Ю Я)
3. fixed clusters (Ж Х Ц Ч Ш Щ)
4. direct table lookup; soft sign and apostrophes are dropped
"""

from typing import Optional

from .boundary import is_word_start
from .strategy import Match, Strategy
from .tables import RuleTables


class DigraphOverride(Strategy):
    """
    "зг" is written "zgh" so it cannot be read back as "zh".

    Each source letter keeps its own case: ЗГ -> ZGH, Зг -> Zgh, зГ -> zGH.
    """

    def match(self, text: str, index: int, tables: RuleTables) -> Optional[Match]:
        if index + 1 >= len(text):
            return None

        first, second = text[index], text[index + 1]
        if first.lower() != tables.override_first or second.lower() != tables.override_second:
            return None

        head, tail = tables.override_output
        if first != first.lower():
            head = head.upper()
        if second != second.lower():
            tail = tail.upper()
        return Match(2, head + tail)


class PositionalLetter(Strategy):
    """Iotated vowels and Й: word-start variant vs. mid-word variant."""

    def match(self, text: str, index: int, tables: RuleTables) -> Optional[Match]:
        variants = tables.positional.get(text[index])
        if variants is None:
            return None

        start, middle = variants
        if is_word_start(text, index, tables.elidables, tables.separators):
            return Match(1, start)
        return Match(1, middle)


class FixedDigraph(Strategy):
    def match(self, text: str, index: int, tables: RuleTables) -> Optional[Match]:
        cluster = tables.fixed_digraphs.get(text[index])
        if cluster is None:
            return None
        return Match(1, cluster)


class DirectLookup(Strategy):
    """1:1 letters; anything unmapped passes through unchanged."""

    def match(self, text: str, index: int, tables: RuleTables) -> Optional[Match]:
        char = text[index]
        return Match(1, tables.forward.get(char, char))


FORWARD_STRATEGIES = (
    DigraphOverride(),
    PositionalLetter(),
    FixedDigraph(),
    DirectLookup(),
)


"""
Rule-based transliteration engine.
Applies the official Ukrainian <-> Latin substitution rules in both directions.
"""

from typing import Dict, Optional, Union

from .backward import BACKWARD_STRATEGIES
from .detector import Direction
from .forward import FORWARD_STRATEGIES
from .strategy import scan
from .tables import RuleTables, get_tables


class TransliterationEngine:
    """
    Apply rule-based transliteration for Ukrainian text.

    The engine keeps no per-call state: it only reads its frozen tables, so
    one instance can serve any number of threads.
    """

    def __init__(self, tables: Optional[RuleTables] = None):
        """
        Initialize engine with substitution tables.

        Args:
            tables: Tables to use; defaults to the ones built from the
                global configuration
        """
        self.tables = tables or get_tables()
        self.forward_strategies = FORWARD_STRATEGIES
        self.backward_strategies = BACKWARD_STRATEGIES

    def forward(self, text: str) -> str:
        """
        Transliterate Ukrainian text to Latin.

        Args:
            text: Input text, any script mix

        Returns:
            Latin text; unmapped characters are kept, soft signs and
            apostrophes are dropped
        """
        if not text:
            return ""
        return scan(text, self.forward_strategies, self.tables)

    def backward(self, text: str) -> str:
        """
        Transliterate Latin text to Ukrainian.

        The result is deterministic but lossy: apostrophes and soft signs
        cannot be restored, and ambiguous clusters follow a fixed precedence.

        Args:
            text: Input text, any script mix

        Returns:
            Cyrillic text; unmapped characters are kept
        """
        if not text:
            return ""
        return scan(text, self.backward_strategies, self.tables)

    def transliterate(self, text: str, direction: Union[Direction, str]) -> str:
        """
        Transliterate in the given direction.

        Args:
            text: Input text
            direction: Direction member or its value ('uk-to-lat', 'lat-to-uk')

        Returns:
            Transliterated text
        """
        direction = Direction(direction)
        if direction is Direction.UK_TO_LAT:
            return self.forward(text)
        return self.backward(text)

    def get_coverage_stats(self, text: str) -> Dict:
        """
        Get statistics on rule coverage for debugging.

        Args:
            text: Input Ukrainian text

        Returns:
            Dictionary with coverage statistics
        """
        tables = self.tables
        override = {tables.override_first, tables.override_first.upper()}
        mapped = (set(tables.forward) | set(tables.fixed_digraphs)
                  | set(tables.positional) | override)

        letters = [c for c in text if not c.isspace()]
        total_chars = len(letters)
        elided = sum(1 for c in letters if c in tables.elidables)
        positional = sum(1 for c in letters if c in tables.positional)
        digraphs = sum(1 for c in letters if c in tables.fixed_digraphs)
        unmapped = sum(1 for c in letters if c not in mapped)

        return {
            'total_characters': total_chars,
            'elided_count': elided,
            'positional_count': positional,
            'digraph_count': digraphs,
            'unmapped_count': unmapped,
            'rule_coverage_estimate': (total_chars - unmapped) / max(1, total_chars) * 100
        }


_default_engine = None


def get_engine() -> TransliterationEngine:
    """Get the shared engine built from the global configuration."""
    global _default_engine
    tables = get_tables()
    if _default_engine is None or _default_engine.tables is not tables:
        _default_engine = TransliterationEngine(tables)
    return _default_engine


def transliterate_forward(text: str) -> str:
    """Ukrainian -> Latin with the shared engine."""
    return get_engine().forward(text)


def transliterate_backward(text: str) -> str:
    """Latin -> Ukrainian with the shared engine."""
    return get_engine().backward(text)


def transliterate(text: str, direction: Union[Direction, str]) -> str:
    return get_engine().transliterate(text, direction)

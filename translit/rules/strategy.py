"""
Match-attempt strategies and the left-to-right scanner that drives them.

Each direction is an ordered tuple of strategies. At every cursor position
the scanner tries them in order; the first one that returns a ``Match``
decides how many characters are consumed and what is emitted. There is no
backtracking once a match has been emitted.
"""

from typing import NamedTuple, Optional, Sequence

from .tables import RuleTables


class Match(NamedTuple):
    """Result of a successful strategy attempt."""
    consumed: int
    output: str


class Strategy:
    """Base class for a single precedence step."""

    def match(self, text: str, index: int, tables: RuleTables) -> Optional[Match]:
        """
        Try to match at ``index``.

        Args:
            text: Full input text
            index: Cursor position
            tables: Substitution tables

        Returns:
            Match or None when this step does not apply
        """
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def scan(text: str, strategies: Sequence[Strategy], tables: RuleTables) -> str:
    """
    Run the strategies over ``text`` from left to right.

    The last strategy of every sequence always matches, so the cursor
    advances on every iteration.
    """
    result = []
    i = 0
    length = len(text)

    while i < length:
        for strategy in strategies:
            found = strategy.match(text, i, tables)
            if found is not None:
                result.append(found.output)
                i += found.consumed
                break
        else:
            # No rule applied: keep the character
            result.append(text[i])
            i += 1

    return ''.join(result)

"""
Exception hierarchy for the transliteration library.

The transliteration engine itself never raises for string input; these
exceptions cover configuration loading, record storage and export.
"""

from typing import Optional


class TranslitError(Exception):
    """Base exception for all library errors."""

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class ConfigurationError(TranslitError):
    """Missing, unreadable or inconsistent configuration / rules files."""

    pass


class StorageError(TranslitError):
    """Record persistence failures (unreadable or unwritable storage)."""

    pass


class ExportError(TranslitError):
    """Export file could not be produced."""

    pass

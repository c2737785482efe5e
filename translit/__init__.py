"""
Ukrainian <-> Latin transliteration following the official national standard.
"""

from .rules import (
    TransliterationEngine, Script, Direction,
    transliterate, transliterate_forward, transliterate_backward,
    detect_script, resolve_direction,
)
from .exceptions import TranslitError, ConfigurationError, StorageError, ExportError

__version__ = "1.0.0"

__all__ = [
    "TransliterationEngine",
    "Script",
    "Direction",
    "transliterate",
    "transliterate_forward",
    "transliterate_backward",
    "detect_script",
    "resolve_direction",
    "TranslitError",
    "ConfigurationError",
    "StorageError",
    "ExportError",
]

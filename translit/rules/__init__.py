# translit/rules/__init__.py
from .tables import RuleTables, get_tables
from .casing import CaseClass, classify_case, apply_case
from .boundary import is_word_start
from .detector import Script, Direction, detect_script, resolve_direction
from .rule_engine import (
    TransliterationEngine, get_engine, transliterate, transliterate_forward, transliterate_backward
)

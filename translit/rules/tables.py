"""
Substitution tables for Ukrainian <-> Latin transliteration.

Tables are read from the rules configuration, expanded into case pairs and
frozen. A built ``RuleTables`` instance is immutable and can be shared freely
between engines and threads.
"""

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Mapping, Optional, Pattern, Tuple

from ..exceptions import ConfigurationError
from ..utils.config import Config, get_config


def capitalise(value: str) -> str:
    """Upper-case the first character only ("shch" -> "Shch", "y" -> "Y")."""
    return value[:1].upper() + value[1:]


@dataclass(frozen=True)
class RuleTables:
    """Frozen view of every table the engine needs."""

    forward: Mapping[str, str]
    fixed_digraphs: Mapping[str, str]
    positional: Mapping[str, Tuple[str, str]]
    override_first: str
    override_second: str
    override_output: Tuple[str, str]
    soft_signs: FrozenSet[str]
    apostrophes: FrozenSet[str]
    elidables: FrozenSet[str]
    separators: FrozenSet[str]
    backward: Mapping[str, str]
    ii_key: str
    ii_output: str
    vowels: FrozenSet[str]
    y_key: str
    y_output: str
    source_letters: Pattern

    @classmethod
    def from_config(cls, config: Optional[Config] = None) -> "RuleTables":
        """
        Build tables from the rules configuration.

        Args:
            config: Configuration to read; defaults to the global instance

        Returns:
            Frozen tables

        Raises:
            ConfigurationError: If the rules are missing or inconsistent
        """
        rules = (config or get_config()).rules
        return cls.from_rules(rules)

    @classmethod
    def from_rules(cls, rules: Dict[str, Any]) -> "RuleTables":
        forward_rules = _section(rules, 'forward')
        backward_rules = _section(rules, 'backward')

        apostrophes = frozenset(rules.get('apostrophes', []))
        soft_signs = _case_pairs_set(forward_rules.get('soft_signs', []))
        separators = frozenset(rules.get('separators') or [])
        if not separators:
            raise ConfigurationError("separators is empty", code="rules_separators")

        # Direct lookups, elidables map to nothing
        forward = _case_pairs(_single_char_keys(forward_rules.get('letters', {}), 'forward.letters'))
        for char in soft_signs | apostrophes:
            forward[char] = ''

        fixed = _case_pairs(
            _single_char_keys(forward_rules.get('fixed_digraphs', {}), 'forward.fixed_digraphs')
        )

        positional = {}
        for char, variants in _single_char_keys(
            forward_rules.get('positional', {}), 'forward.positional'
        ).items():
            if not isinstance(variants, (list, tuple)) or len(variants) != 2:
                raise ConfigurationError(
                    f"forward.positional[{char!r}] needs [word-start, mid-word] variants",
                    code="rules_positional",
                )
            start, middle = (str(v) for v in variants)
            positional[char] = (start, middle)
            positional[char.upper()] = (capitalise(start), capitalise(middle))

        override = _section(forward_rules, 'digraph_override')
        output = override.get('output', [])
        if len(output) != 2:
            raise ConfigurationError(
                "forward.digraph_override.output needs two parts", code="rules_override"
            )

        table = {}
        for key, value in _section(backward_rules, 'table').items():
            key, value = str(key), str(value)
            if key != key.lower() or not 1 <= len(key) <= 4:
                raise ConfigurationError(
                    f"backward.table key {key!r} must be lowercase and 1-4 chars long",
                    code="rules_backward",
                )
            if not value:
                raise ConfigurationError(
                    f"backward.table[{key!r}] maps to nothing", code="rules_backward"
                )
            table[key] = value

        ii_rule = _section(backward_rules, 'word_final_ii')
        y_rule = _section(backward_rules, 'word_start_y')
        letters = _section(rules, 'detection').get('letters', '')
        if not letters:
            raise ConfigurationError("detection.letters is empty", code="rules_detection")

        return cls(
            forward=MappingProxyType(forward),
            fixed_digraphs=MappingProxyType(fixed),
            positional=MappingProxyType(positional),
            override_first=str(override.get('first', '')).lower(),
            override_second=str(override.get('second', '')).lower(),
            override_output=(str(output[0]), str(output[1])),
            soft_signs=soft_signs,
            apostrophes=apostrophes,
            # dropped by the forward direction
            elidables=soft_signs | apostrophes,
            separators=separators,
            backward=MappingProxyType(table),
            ii_key=str(ii_rule.get('key', 'ii')).lower(),
            ii_output=_required(ii_rule, "output", "backward.word_final_ii"),
            vowels=frozenset(str(ii_rule.get('vowels', 'aeiouy'))),
            y_key=str(y_rule.get('key', 'y')).lower(),
            y_output=_required(y_rule, "output", "backward.word_start_y"),
            source_letters=re.compile(f"[{letters}]"),
        )


def _section(rules: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = rules.get(name)
    if not isinstance(section, dict):
        raise ConfigurationError(f"Rules section '{name}' is missing", code="rules_missing")
    return section


def _required(section: Dict[str, Any], key: str, where: str) -> str:
    value = section.get(key)
    if not value:
        raise ConfigurationError(f"{where}.{key} is required", code="rules_missing")
    return str(value)


def _single_char_keys(mapping: Dict[str, Any], where: str) -> Dict[str, Any]:
    for key in mapping:
        if len(str(key)) != 1 or str(key) != str(key).lower():
            raise ConfigurationError(
                f"{where} key {key!r} must be a single lowercase character",
                code="rules_forward",
            )
    return {str(k): v for k, v in mapping.items()}


def _case_pairs(mapping: Dict[str, Any]) -> Dict[str, str]:
    """Add the uppercase partner of every lowercase entry."""
    paired = {}
    for char, target in mapping.items():
        target = str(target)
        paired[char] = target
        paired[char.upper()] = capitalise(target)
    return paired


def _case_pairs_set(chars) -> FrozenSet[str]:
    return frozenset(c for char in chars for c in (char, char.upper()))


_default_tables = None
_tables_config = None


def get_tables() -> RuleTables:
    """Tables built from the global configuration, rebuilt when it is replaced."""
    global _default_tables, _tables_config
    config = get_config()
    if _default_tables is None or config is not _tables_config:
        _default_tables = RuleTables.from_config(config)
        _tables_config = config
    return _default_tables

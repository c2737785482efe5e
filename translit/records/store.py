"""
Persistence for saved translations and translation history.

Records are kept as one JSON array (newest first), either in a file or in
memory. Storage problems never break transliteration: failed reads behave
like an empty store and failed writes are logged and dropped.
"""

import json
import random
import string
import time
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

from ..exceptions import StorageError
from ..rules.detector import Direction
from ..utils.config import get_config
from ..utils.logger import get_logger

logger = get_logger("records.store")

_ID_ALPHABET = string.digits + string.ascii_lowercase


@dataclass
class TranslationRecord:
    """A transliteration the user saved or that was recorded in history."""
    id: str
    input: str
    output: str
    direction: str
    timestamp: int

    def to_dict(self) -> Dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict) -> "TranslationRecord":
        return cls(
            id=str(data['id']),
            input=str(data['input']),
            output=str(data['output']),
            direction=Direction(data['direction']).value,
            timestamp=int(data['timestamp']),
        )

    def same_translation(self, input_text: str, output_text: str, direction: str) -> bool:
        return (self.input == input_text
                and self.output == output_text
                and self.direction == direction)


def generate_record_id(timestamp_ms: int) -> str:
    """Millisecond timestamp followed by nine random base-36 characters."""
    suffix = ''.join(random.choice(_ID_ALPHABET) for _ in range(9))
    return f"{timestamp_ms}{suffix}"


class RecordStore:
    """
    Ordered, capped, de-duplicating record list.

    Args:
        path: JSON file backing the store; ``None`` keeps records in memory
        max_items: Maximum number of records kept (oldest are dropped)
        move_duplicates_to_top: Re-inserting an existing translation moves it
            to the front (history) instead of leaving it in place (saved)
        clock: Returns the current time in seconds
    """

    def __init__(self, path: Optional[Union[str, Path]] = None,
                 max_items: Optional[int] = None,
                 move_duplicates_to_top: bool = False,
                 clock: Callable[[], float] = time.time):
        self.path = Path(path) if path is not None else None
        if max_items is None:
            max_items = int(get_config().get('storage.max_items', 100))
        if max_items < 1:
            raise ValueError(f"max_items must be positive, got {max_items}")
        self.max_items = max_items
        self.move_duplicates_to_top = move_duplicates_to_top
        self.clock = clock
        self._memory: List[Dict] = []

    def list(self) -> List[TranslationRecord]:
        """Return records, most recent first."""
        try:
            raw = self._read()
        except StorageError as e:
            logger.warning("Failed to load records: %s", e)
            return []

        records = []
        for item in raw:
            try:
                records.append(TranslationRecord.from_dict(item))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning("Skipping malformed record %r: %s", item, e)
        return records

    def insert(self, input_text: str, output_text: str,
               direction: Union[Direction, str]) -> TranslationRecord:
        """
        Add a translation, or return the existing identical one.

        Args:
            input_text: Text the user typed
            output_text: Transliteration produced for it
            direction: Direction member or its value

        Returns:
            The stored record (existing one for duplicates)
        """
        direction = Direction(direction).value
        records = self.list()

        existing = next(
            (r for r in records if r.same_translation(input_text, output_text, direction)),
            None
        )
        if existing is not None:
            if self.move_duplicates_to_top:
                others = [r for r in records if r.id != existing.id]
                self._save([existing] + others)
            return existing

        timestamp = int(self.clock() * 1000)
        record = TranslationRecord(
            id=generate_record_id(timestamp),
            input=input_text,
            output=output_text,
            direction=direction,
            timestamp=timestamp,
        )
        self._save(([record] + records)[:self.max_items])
        logger.debug("Inserted record %s", record.id)
        return record

    def delete(self, record_id: str) -> None:
        records = self.list()
        self._save([r for r in records if r.id != record_id])
        logger.debug("Deleted record %s", record_id)

    def clear(self) -> None:
        """Remove every record (and the backing file)."""
        self._memory = []
        if self.path is None:
            return
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning("Failed to clear records at %s: %s", self.path, e)

    def contains(self, input_text: str, output_text: str,
                 direction: Union[Direction, str]) -> bool:
        direction = Direction(direction).value
        return any(r.same_translation(input_text, output_text, direction) for r in self.list())

    def __len__(self) -> int:
        return len(self.list())

    def _save(self, records: List[TranslationRecord]) -> None:
        try:
            self._write([r.to_dict() for r in records])
        except StorageError as e:
            logger.warning("Failed to save records: %s", e)

    def _read(self) -> List[Dict]:
        if self.path is None:
            return [dict(item) for item in self._memory]
        if not self.path.exists():
            return []

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise StorageError(f"Cannot read {self.path}: {e}", code="storage_read") from e

        if not isinstance(data, list):
            raise StorageError(f"{self.path} does not hold a record list", code="storage_shape")
        return data

    def _write(self, data: List[Dict]) -> None:
        if self.path is None:
            self._memory = data
            return

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(data, f, ensure_ascii=False)
        except OSError as e:
            raise StorageError(f"Cannot write {self.path}: {e}", code="storage_write") from e


def _store_from_config(kind: str, directory: Optional[Union[str, Path]]) -> RecordStore:
    settings = get_config().get(f'storage.stores.{kind}', {}) or {}
    path = None
    if directory is not None:
        path = Path(directory) / settings.get('filename', f"translit-{kind}.json")
    return RecordStore(
        path=path,
        move_duplicates_to_top=bool(settings.get('move_duplicates_to_top', False)),
    )


def saved_translations_store(directory: Optional[Union[str, Path]] = None) -> RecordStore:
    """Store for explicitly saved translations; duplicates stay where they are."""
    return _store_from_config('saved', directory)


def history_store(directory: Optional[Union[str, Path]] = None) -> RecordStore:
    """Store for automatic history; a repeated translation moves to the top."""
    return _store_from_config('history', directory)


def should_record_history(input_text: str, output_text: str) -> bool:
    """History only keeps non-trivial translations (input of two chars or more)."""
    min_length = int(get_config().get('storage.history.min_input_length', 2))
    trimmed_input = input_text.strip()
    return bool(trimmed_input) and bool(output_text.strip()) and len(trimmed_input) >= min_length

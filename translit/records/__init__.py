# translit/records/__init__.py
from .store import (
    TranslationRecord, RecordStore, saved_translations_store, history_store, should_record_history
)
from .export import export_records, export_filename, write_export, format_timestamp

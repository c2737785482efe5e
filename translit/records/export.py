"""
Export of saved translations / history as JSON or CSV.
"""

import json
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Iterable, List, Optional, Union

import pandas as pd

from ..exceptions import ExportError
from ..rules.detector import Direction
from ..utils.config import get_config
from .store import TranslationRecord

EXPORT_FORMATS = ('json', 'csv')
DEFAULT_CSV_HEADERS = ['Input Text', 'Output Text', 'Direction', 'Date']


def format_timestamp(timestamp_ms: int) -> str:
    """ISO-8601 UTC with milliseconds, e.g. 2024-05-01T09:30:00.000Z."""
    moment = datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc)
    return moment.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def records_to_dataframe(records: Iterable[TranslationRecord]) -> pd.DataFrame:
    """
    Build the CSV view of records.

    Args:
        records: Records in display order

    Returns:
        DataFrame with the export headers as columns
    """
    headers = get_config().get('storage.export.csv_headers', DEFAULT_CSV_HEADERS)
    rows = [
        [r.input, r.output, Direction(r.direction).label, format_timestamp(r.timestamp)]
        for r in records
    ]
    return pd.DataFrame(rows, columns=headers)


def export_records(records: Iterable[TranslationRecord], fmt: str = 'json') -> str:
    """
    Serialize records.

    Args:
        records: Records to export, most recent first
        fmt: 'json' or 'csv'

    Returns:
        JSON array, or CSV with a header row; CSV fields containing commas,
        quotes or newlines are quoted
    """
    records = list(records)

    if fmt == 'json':
        indent = get_config().get('storage.export.json_indent', 2)
        return json.dumps([r.to_dict() for r in records], indent=indent, ensure_ascii=False)

    if fmt == 'csv':
        df = records_to_dataframe(records)
        content = df.to_csv(index=False, lineterminator='\n')
        # Rows are newline-separated, without a trailing newline
        return content[:-1] if content.endswith('\n') else content

    raise ValueError(f"Unknown export format {fmt!r}, expected one of {EXPORT_FORMATS}")


def export_filename(kind: str, fmt: str, today: Optional[date] = None) -> str:
    """e.g. ``translit-history-2024-05-01.csv``"""
    prefix = get_config().get('storage.export.filename_prefix', 'translit')
    today = today or date.today()
    return f"{prefix}-{kind}-{today.isoformat()}.{fmt}"


def write_export(records: Iterable[TranslationRecord], fmt: str,
                 directory: Union[str, Path], kind: str = 'saved',
                 today: Optional[date] = None) -> Optional[Path]:
    """
    Write an export file.

    Args:
        records: Records to export
        fmt: 'json' or 'csv'
        directory: Target directory (created if needed)
        kind: File name tag, e.g. 'saved' or 'history'
        today: Date used in the file name

    Returns:
        Path of the written file, or None when there was nothing to export
    """
    records: List[TranslationRecord] = list(records)
    if not records:
        return None

    content = export_records(records, fmt)
    output_path = Path(directory) / export_filename(kind, fmt, today)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8', newline='') as f:
            f.write(content)
    except OSError as e:
        raise ExportError(f"Cannot write export to {output_path}: {e}", code="export_io") from e

    return output_path

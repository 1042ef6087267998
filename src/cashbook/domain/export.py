"""CSV export of entry snapshots."""

import csv
import io
from datetime import date
from pathlib import Path
from typing import Callable, Sequence, Union

from cashbook.domain.aggregation import magnitude, quantize_money
from cashbook.domain.entities import Category, Entry, EntryKind
from cashbook.domain.windows import entry_day
from cashbook.logging_setup import get_logger

logger = get_logger("cashbook.domain.export")

EXPORT_HEADER = ("Date", "Title", "Category", "Type", "Amount")

# Persists exported text under a file name and returns where it went.
FileSink = Callable[[str, str], Path]


def _enum_text(value) -> str:
    return value.value if isinstance(value, (Category, EntryKind)) else str(value)


def entry_row(entry: Entry) -> tuple[str, ...]:
    """Render one entry as export fields."""
    return (
        entry_day(entry).isoformat(),
        entry.title,
        _enum_text(entry.category),
        _enum_text(entry.kind),
        f"{quantize_money(magnitude(entry)):f}",
    )


def to_delimited_text(entries: Sequence[Entry]) -> str:
    """Render entries as CSV text in the order given.

    Fields containing commas, quotes or line breaks are quoted. The amount
    column holds the unsigned magnitude as fixed-point cents; the Type
    column carries the sign.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(EXPORT_HEADER)
    for entry in entries:
        writer.writerow(entry_row(entry))
    logger.debug("Serialized %d entries", len(entries))
    return buffer.getvalue()


def export_filename(today: date) -> str:
    """Return the conventional export file name for a day."""
    return f"expenses-{today.isoformat()}.csv"


def directory_sink(directory: Union[str, Path]) -> FileSink:
    """Create a sink that writes exports into a directory as UTF-8.

    The directory is created on first write if missing.
    """
    target_dir = Path(directory)

    def write(filename: str, text: str) -> Path:
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / filename
        # newline="" keeps the serializer's line endings on every platform
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        logger.info("Wrote export to %s", path)
        return path

    return write

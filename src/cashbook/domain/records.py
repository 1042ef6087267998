"""Conversion between JSON-shaped records and Entry entities.

Records use the field names of the ledger HTTP API: ``_id``, ``title``,
``amount``, ``category``, ``date``, ``createdAt`` and ``type``.
"""

from datetime import datetime, UTC
from typing import Any, Iterable, Mapping

from cashbook.domain.entities import Category, Entry, EntryKind
from cashbook.domain.errors import ValidationError, unknown_kind
from cashbook.utils.amount_parser import to_decimal
from cashbook.utils.date_parser import parse_timestamp, to_calendar_date, to_civil_date


def entry_from_record(record: Mapping[str, Any]) -> Entry:
    """Build an Entry from an API record.

    The entry date is reduced to a calendar date here, once. Unknown categories
    map to Other. Amounts are converted to Decimal but not range-checked;
    the aggregation functions count non-positive amounts as zero.

    Raises:
        ValidationError: If a required field is missing or malformed
    """
    try:
        entry_id = record.get("_id", record.get("id"))
        if entry_id is None:
            raise ValidationError("Record has no id")
        kind_value = record.get("type", record.get("kind"))
        try:
            kind = EntryKind(kind_value)
        except ValueError:
            raise ValidationError(unknown_kind(kind_value))

        created_raw = record.get("createdAt", record.get("created_at"))
        if created_raw is None:
            created_at = datetime.now(UTC)
        elif isinstance(created_raw, datetime):
            created_at = created_raw
        else:
            created_at = parse_timestamp(str(created_raw))

        return Entry(
            id=str(entry_id),
            title=str(record["title"]),
            amount=to_decimal(record["amount"]),
            category=Category.coerce(record.get("category")),
            date=to_calendar_date(record["date"]),
            created_at=created_at,
            kind=kind,
        )
    except ValidationError:
        raise
    except KeyError as e:
        raise ValidationError(f"Record is missing field {e.args[0]!r}")
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Malformed record: {e}")


def entries_from_records(records: Iterable[Mapping[str, Any]]) -> tuple[Entry, ...]:
    """Build a snapshot from a JSON array of records."""
    return tuple(entry_from_record(record) for record in records)


def entry_to_record(entry: Entry) -> dict[str, Any]:
    """Render an Entry in the API record shape."""
    return {
        "_id": entry.id,
        "title": entry.title,
        "amount": str(entry.amount),
        "category": Category.coerce(entry.category).value,
        "date": to_civil_date(entry.date).isoformat(),
        "createdAt": entry.created_at.isoformat(),
        "type": EntryKind(entry.kind).value,
    }

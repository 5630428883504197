from datetime import date, datetime, timedelta

from models.journal import EntryType


def parse_entry_date(value):
    """Parse a submitted date string into a calendar date.

    Accepts ``YYYY-MM-DD`` as well as full ISO timestamps, whose time
    component is dropped. Raises ValueError for anything else.
    """
    value = value.strip()
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    try:
        return date.fromisoformat(value)
    except ValueError:
        return datetime.fromisoformat(value).date()


def format_entry_date(value):
    """Format a date (or datetime) as ``YYYY-MM-DD``."""
    if isinstance(value, datetime):
        value = value.date()
    return value.isoformat()


def start_of_week(day):
    """Return the Sunday on or before ``day``."""
    # weekday(): Monday is 0, Sunday is 6
    return day - timedelta(days=(day.weekday() + 1) % 7)


def normalize_entries(entries):
    """Convert stored entries into view-ready dicts."""
    return [
        {
            'id': entry.id,
            'date': format_entry_date(entry.date),
            'type': entry.type,
            'text': entry.text,
        }
        for entry in entries
    ]


def group_entries_by_week(entries):
    """Bucket normalized entries by the Sunday that starts their week.

    Buckets come back sorted by week start. Inside a bucket entries keep the
    order they were encountered in and are split into the three category
    lists; entries with any other type are left out of all of them.
    """
    by_week = {}
    for entry in entries:
        sunday = start_of_week(parse_entry_date(entry['date']))
        by_week.setdefault(format_entry_date(sunday), []).append(entry)

    weeks = []
    for date_string in sorted(by_week):
        week = {'date_string': date_string}
        for entry_type in EntryType.values():
            week[entry_type] = [
                entry for entry in by_week[date_string]
                if entry['type'] == entry_type
            ]
        weeks.append(week)
    return weeks

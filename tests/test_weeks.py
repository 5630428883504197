from __future__ import annotations

from datetime import date, datetime

import pytest

from utils.weeks import (
    format_entry_date,
    group_entries_by_week,
    parse_entry_date,
    start_of_week,
)


def _entry(entry_id: int, date_iso: str, entry_type: str, text: str = "x") -> dict:
    return {"id": entry_id, "date": date_iso, "type": entry_type, "text": text}


@pytest.mark.parametrize(
    "day, expected",
    [
        (date(2024, 1, 7), date(2024, 1, 7)),  # Sunday
        (date(2024, 1, 10), date(2024, 1, 7)),  # Wednesday
        (date(2024, 1, 13), date(2024, 1, 7)),  # Saturday
        (date(2024, 1, 14), date(2024, 1, 14)),
        (date(2024, 3, 1), date(2024, 2, 25)),  # across a month boundary
        (date(2025, 1, 1), date(2024, 12, 29)),  # across a year boundary
    ],
)
def test_start_of_week_is_preceding_sunday(day, expected):
    assert start_of_week(day) == expected


def test_parse_entry_date_accepts_plain_and_timestamp():
    assert parse_entry_date("2024-01-10") == date(2024, 1, 10)
    assert parse_entry_date("2024-01-10T15:30:00") == date(2024, 1, 10)
    assert parse_entry_date(" 2024-01-10 ") == date(2024, 1, 10)


@pytest.mark.parametrize("value", ["", "not-a-date", "2024-13-40"])
def test_parse_entry_date_rejects_garbage(value):
    with pytest.raises(ValueError):
        parse_entry_date(value)


def test_format_entry_date_strips_time():
    assert format_entry_date(datetime(2024, 1, 10, 23, 59)) == "2024-01-10"
    assert format_entry_date(date(2024, 1, 10)) == "2024-01-10"


def test_wednesday_entry_lands_under_preceding_sunday():
    weeks = group_entries_by_week([_entry(1, "2024-01-10", "work", "Shipped feature X")])

    assert len(weeks) == 1
    assert weeks[0]["date_string"] == "2024-01-07"
    assert [e["text"] for e in weeks[0]["work"]] == ["Shipped feature X"]
    assert weeks[0]["learning"] == []
    assert weeks[0]["interesting"] == []


def test_sunday_and_saturday_share_a_bucket_next_sunday_does_not():
    weeks = group_entries_by_week(
        [
            _entry(1, "2024-01-14", "work"),
            _entry(2, "2024-01-07", "work"),
            _entry(3, "2024-01-13", "learning"),
        ]
    )

    assert [w["date_string"] for w in weeks] == ["2024-01-07", "2024-01-14"]
    assert [e["id"] for e in weeks[0]["work"]] == [2]
    assert [e["id"] for e in weeks[0]["learning"]] == [3]
    assert [e["id"] for e in weeks[1]["work"]] == [1]


def test_buckets_sorted_regardless_of_input_order():
    entries = [
        _entry(1, "2024-05-01", "work"),
        _entry(2, "2023-12-25", "work"),
        _entry(3, "2024-02-14", "interesting"),
    ]
    keys = [w["date_string"] for w in group_entries_by_week(entries)]
    assert keys == sorted(keys)
    assert keys == ["2023-12-24", "2024-02-11", "2024-04-28"]


def test_bucket_keeps_encounter_order():
    entries = [
        _entry(5, "2024-01-12", "work", "later day first"),
        _entry(1, "2024-01-08", "work", "earlier day second"),
    ]
    week = group_entries_by_week(entries)[0]
    assert [e["id"] for e in week["work"]] == [5, 1]


def test_each_known_type_lands_in_exactly_one_sub_list():
    entries = [
        _entry(1, "2024-01-08", "work"),
        _entry(2, "2024-01-08", "learning"),
        _entry(3, "2024-01-08", "interesting"),
    ]
    week = group_entries_by_week(entries)[0]
    for entry_id, key in [(1, "work"), (2, "learning"), (3, "interesting")]:
        holders = [k for k in ("work", "learning", "interesting") if any(e["id"] == entry_id for e in week[k])]
        assert holders == [key]


@pytest.mark.parametrize("entry_type", ["unknown-category", "Work", "", "work "])
def test_unknown_type_is_omitted_from_all_sub_lists(entry_type):
    weeks = group_entries_by_week([_entry(1, "2024-02-01", entry_type)])

    assert [w["date_string"] for w in weeks] == ["2024-01-28"]
    assert weeks[0]["work"] == []
    assert weeks[0]["learning"] == []
    assert weeks[0]["interesting"] == []


def test_empty_input_gives_no_weeks():
    assert group_entries_by_week([]) == []


@pytest.mark.parametrize(
    "value",
    ["2024-01-10T00:00:00.000Z", "2024-01-10T23:15:00Z", "2024-01-10T08:00:00+00:00"],
)
def test_parse_entry_date_accepts_utc_timestamps(value):
    assert parse_entry_date(value) == date(2024, 1, 10)

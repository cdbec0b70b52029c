"""
Tests for window filtering and duration aggregation in the log report.
"""

from __future__ import annotations

import copy

import pendulum
import pytest

from timetrack.error import InvalidTimeWindow, UnknownCategory
from timetrack.service.entry import add_entry
from timetrack.service.report import build_report, day_window


def minutes(duration):
    return None if duration is None else int(duration.total_seconds()) // 60


def bucket_minutes(report):
    return [(total["label"], minutes(total["duration"])) for total in report["categories"]]


@pytest.fixture
def day(at):
    """
    Window covering all of 2024-03-04.

    Returns
    -------
    tuple
        Start and end of the day.
    """
    return at(0), at(0, day=5)


@pytest.mark.unit
def test_duration_goes_to_the_entry_that_closes_it(database, at, day):
    """
    Ensure time since the previous entry is credited to the current entry.

    Returns
    -------
    None
        This test asserts retroactive attribution.
    """
    add_entry(database, None, "a", at(9))
    add_entry(database, "did X", "b", at(10, 30))
    add_entry(database, "did Y", "a", at(11))

    report = build_report(database, *day)

    assert [minutes(row["duration"]) for row in report["rows"]] == [None, 90, 30]
    assert bucket_minutes(report) == [("b", 90), ("a", 30)]
    assert minutes(report["total"]) == 120


@pytest.mark.unit
def test_rows_carry_history_indexes_and_labels(database, at, day):
    """
    Ensure rows expose the index used by edit and the category label.

    Returns
    -------
    None
        This test asserts row contents.
    """
    add_entry(database, None, None, at(9))
    add_entry(database, "did X", "b", at(10))

    rows = build_report(database, *day)["rows"]

    assert [row["history_index"] for row in rows] == [2, 1]
    assert [row["category_label"] for row in rows] == ["", "b"]
    assert [row["is_marker"] for row in rows] == [True, False]
    assert rows[1]["message"] == "did X"
    assert rows[1]["timestamp"] == at(10)


@pytest.mark.unit
def test_empty_window_is_not_an_error(database, at, day):
    """
    Ensure a window without entries yields an empty report.

    Returns
    -------
    None
        This test asserts the empty case.
    """
    add_entry(database, "other day", "a", at(9, day=6))

    report = build_report(database, *day)

    assert report["rows"] == []
    assert report["categories"] == []
    assert report["days"] == []
    assert minutes(report["total"]) == 0
    assert minutes(report["idle"]) == 0


@pytest.mark.parametrize(("start_hour", "end_hour"), [(12, 9), (9, 9)])
@pytest.mark.unit
def test_invalid_window(database, at, start_hour, end_hour):
    """
    Ensure a window whose start is not before its end is rejected.

    Returns
    -------
    None
        This test asserts window validation.
    """
    with pytest.raises(InvalidTimeWindow):
        build_report(database, at(start_hour), at(end_hour))


@pytest.mark.unit
def test_window_is_half_open(database, at):
    """
    Ensure entries at the start are included and entries at the end are not.

    Returns
    -------
    None
        This test asserts window bounds.
    """
    add_entry(database, "at start", "a", at(9))
    add_entry(database, "inside", "a", at(10))
    add_entry(database, "at end", "a", at(11))

    report = build_report(database, at(9), at(11))

    assert [row["message"] for row in report["rows"]] == ["at start", "inside"]


@pytest.mark.unit
def test_first_entry_in_window_has_no_duration(database, at):
    """
    Ensure entries before the window do not feed the first duration.

    Returns
    -------
    None
        This test asserts that only entries inside the window are paired.
    """
    add_entry(database, "yesterday", "a", at(17, day=3))
    add_entry(database, "morning", "a", at(9))
    add_entry(database, "later", "b", at(9, 45))

    report = build_report(database, at(0), at(0, day=5))

    assert [minutes(row["duration"]) for row in report["rows"]] == [None, 45]
    assert bucket_minutes(report) == [("b", 45)]


@pytest.mark.unit
def test_marker_time_is_counted_as_idle(database, at, day):
    """
    Ensure markers keep their duration and are summed as idle time.

    Returns
    -------
    None
        This test asserts marker handling.
    """
    add_entry(database, "start", "a", at(9))
    add_entry(database, "work", "a", at(10))
    add_entry(database, None, None, at(12))
    add_entry(database, "more work", "a", at(12, 30))

    report = build_report(database, *day)

    assert [row["is_marker"] for row in report["rows"]] == [False, False, True, False]
    assert minutes(report["rows"][2]["duration"]) == 120
    assert bucket_minutes(report) == [("a", 90), ("uncategorized", 120)]
    assert minutes(report["total"]) == 210
    assert minutes(report["idle"]) == 120


@pytest.mark.unit
def test_empty_message_counts_as_marker(database, at, day):
    """
    Ensure an empty string message marks idle time like a missing one.

    Returns
    -------
    None
        This test asserts empty message handling.
    """
    add_entry(database, "start", None, at(9))
    add_entry(database, "", "b", at(9, 20))

    report = build_report(database, *day)

    assert report["rows"][1]["is_marker"] is True
    assert minutes(report["idle"]) == 20


@pytest.mark.unit
def test_dangling_category_gets_fallback_label(database, at, day):
    """
    Ensure entries pointing at a removed category still aggregate.

    Returns
    -------
    None
        This test asserts dangling reference tolerance.
    """
    add_entry(database, "start", None, at(9))
    database["entries"].append(
        {"timestamp": at(10), "message": "old project", "category_id": 9}
    )

    report = build_report(database, *day)

    assert report["rows"][1]["category_label"] == "#9"
    assert bucket_minutes(report) == [("#9", 60)]


@pytest.mark.unit
def test_back_dated_entry_is_flagged_with_negative_time(database, at, day):
    """
    Ensure entries stored out of time order keep the signed difference.

    Returns
    -------
    None
        This test asserts tolerance of non-monotonic timestamps.
    """
    add_entry(database, "start", None, at(9))
    add_entry(database, "late", "a", at(12))
    add_entry(database, "forgot this one", "b", at(10))
    add_entry(database, "after", "a", at(13))

    report = build_report(database, *day)

    assert [minutes(row["duration"]) for row in report["rows"]] == [None, 180, -120, 180]
    assert [row["out_of_order"] for row in report["rows"]] == [False, False, True, False]
    assert bucket_minutes(report) == [("a", 360), ("b", -120)]


@pytest.mark.unit
def test_back_dated_entry_does_not_inflate_total(database, at, day):
    """
    Ensure the total never exceeds the time between first and last entry.

    Returns
    -------
    None
        This test asserts that no stretch of time is counted twice.
    """
    add_entry(database, "start", None, at(9))
    add_entry(database, "late", "a", at(12))
    add_entry(database, "forgot this one", "b", at(10))
    add_entry(database, "after", "a", at(13))

    report = build_report(database, *day)

    assert minutes(report["total"]) == 4 * 60
    assert [(d["date"], minutes(d["duration"])) for d in report["days"]] == [
        (pendulum.date(2024, 3, 4), 4 * 60)
    ]


@pytest.mark.unit
def test_buckets_follow_first_appearance(database, at, day):
    """
    Ensure aggregate rows are ordered by first appearance, not id or name.

    Returns
    -------
    None
        This test asserts bucket ordering.
    """
    add_entry(database, "start", None, at(8))
    add_entry(database, "b work", "b", at(9))
    add_entry(database, "loose", None, at(9, 10))
    add_entry(database, "a work", "a", at(10))
    add_entry(database, "b again", "b", at(10, 30))

    report = build_report(database, *day)

    assert bucket_minutes(report) == [("b", 90), ("uncategorized", 10), ("a", 50)]


@pytest.mark.unit
def test_day_totals_over_several_days(database, at):
    """
    Ensure per day totals use the day of the closing entry.

    Returns
    -------
    None
        This test asserts daily aggregation.
    """
    add_entry(database, "start", None, at(9, day=4))
    add_entry(database, "mon", "a", at(11, day=4))
    add_entry(database, "overnight", "b", at(8, day=5))
    add_entry(database, "tue", "a", at(9, day=5))

    report = build_report(database, at(0, day=4), at(0, day=6))

    assert [(day_total["date"], minutes(day_total["duration"])) for day_total in report["days"]] == [
        (pendulum.date(2024, 3, 4), 120),
        (pendulum.date(2024, 3, 5), 21 * 60 + 60),
    ]
    assert minutes(report["total"]) == 120 + 21 * 60 + 60


@pytest.mark.unit
def test_category_filter_keeps_window_durations(database, at, day):
    """
    Ensure filtering happens after durations are measured.

    Returns
    -------
    None
        This test asserts the category filter.
    """
    add_entry(database, None, "a", at(9))
    add_entry(database, "did X", "b", at(10, 30))
    add_entry(database, "did Y", "a", at(11))

    report = build_report(database, *day, category="a")

    assert [row["message"] for row in report["rows"]] == [None, "did Y"]
    assert [minutes(row["duration"]) for row in report["rows"]] == [None, 30]
    assert bucket_minutes(report) == [("a", 30)]
    assert minutes(report["total"]) == 30
    assert report["category_filter"] == "a"


@pytest.mark.unit
def test_unknown_category_filter(database, at, day):
    """
    Ensure filtering by an unknown short name raises UnknownCategory.

    Returns
    -------
    None
        This test asserts filter validation.
    """
    with pytest.raises(UnknownCategory):
        build_report(database, *day, category="zz")


@pytest.mark.unit
def test_report_does_not_modify_database(database, at, day):
    """
    Ensure building a report is read only.

    Returns
    -------
    None
        This test asserts the report has no side effects.
    """
    add_entry(database, None, "a", at(9))
    add_entry(database, "did X", "b", at(10, 30))
    before = copy.deepcopy(database)

    build_report(database, *day)

    assert database == before


@pytest.mark.unit
def test_day_window_defaults_to_today(at):
    """
    Ensure the default window is the current local day.

    Returns
    -------
    None
        This test asserts the default window.
    """
    assert day_window(at(15, 20)) == (at(0), at(0, day=5))


@pytest.mark.parametrize(
    ("days", "back", "start_day", "end_day"),
    [
        (2, 0, 12, 15),
        (0, 1, 13, 14),
        (1, 3, 10, 12),
    ],
)
@pytest.mark.unit
def test_day_window_range_and_back(at, days, back, start_day, end_day):
    """
    Ensure DAYS widens the window and back shifts it into the past.

    Returns
    -------
    None
        This test asserts window arithmetic.
    """
    now = at(10, day=14)

    assert day_window(now, days, back) == (at(0, day=start_day), at(0, day=end_day))

from __future__ import annotations

import random
from dataclasses import replace
from datetime import datetime, timezone

import pytest

from src.timesheet_governance.timesheet_governance.core.enums import OccurrenceType, PunchType
from src.timesheet_governance.timesheet_governance.worklog.calculations import (
    calculate_worklog,
    compute_extra_minutes,
    compute_late_minutes,
    compute_under_minutes,
    compute_worked_minutes,
    format_minutes,
    format_time,
    generate_occurrences,
    is_punches_incomplete,
    minutes_since_midnight,
    time_to_minutes,
)
from src.timesheet_governance.timesheet_governance.worklog.model import (
    DEFAULT_WORKDAY_CONFIG,
    LunchPolicy,
    OccurrenceDraft,
    Punch,
)

ENTRY = PunchType.ENTRY
EXIT = PunchType.EXIT


def at(hour: int, minute: int = 0, day: int = 6) -> datetime:
    return datetime(2025, 1, day, hour, minute)


def punch(hour: int, minute: int, type: PunchType, day: int = 6) -> Punch:
    return Punch(timestamp=at(hour, minute, day), type=type)


def full_day(entry=(8, 0), lunch_out=(12, 0), lunch_in=(14, 0), leave=(18, 0)) -> list[Punch]:
    return [
        punch(*entry, ENTRY),
        punch(*lunch_out, EXIT),
        punch(*lunch_in, ENTRY),
        punch(*leave, EXIT),
    ]


NO_LUNCH = replace(DEFAULT_WORKDAY_CONFIG, lunch_policy=LunchPolicy(start_hour=12, start_minute=0, duration_minutes=0))


# --- helpers -----------------------------------------------------------------


def test_time_to_minutes():
    assert time_to_minutes(0, 0) == 0
    assert time_to_minutes(8, 30) == 510
    assert time_to_minutes(23, 59) == 1439


def test_minutes_since_midnight_ignores_date_and_seconds():
    assert minutes_since_midnight(datetime(2024, 12, 31, 8, 11, 59)) == 491


@pytest.mark.parametrize(
    "minutes, expected",
    [(0, "0min"), (45, "45min"), (60, "1h"), (120, "2h"), (90, "1h30"), (65, "1h05"), (605, "10h05")],
)
def test_format_minutes(minutes, expected):
    assert format_minutes(minutes) == expected


def test_format_time_zero_pads():
    assert format_time(at(8, 5)) == "08:05"


def test_default_config_values():
    c = DEFAULT_WORKDAY_CONFIG
    assert (c.expected_start_hour, c.expected_start_minute) == (8, 0)
    assert (c.expected_end_hour, c.expected_end_minute) == (18, 0)
    assert c.expected_work_minutes == 480
    assert c.tolerance_minutes == 10
    assert c.lunch_policy == LunchPolicy(start_hour=12, start_minute=0, duration_minutes=120)


# --- late --------------------------------------------------------------------


def test_late_entry_before_start_is_zero():
    assert compute_late_minutes(at(7, 45)) == 0
    assert compute_late_minutes(at(8, 0)) == 0


def test_late_within_tolerance_is_fully_forgiven():
    assert compute_late_minutes(at(8, 10), 10, 8, 0) == 0


def test_late_past_tolerance_charges_full_offset():
    # 08:11 is 11 minutes late, not 1
    assert compute_late_minutes(at(8, 11), 10, 8, 0) == 11
    assert compute_late_minutes(at(9, 30), 10, 8, 0) == 90


def test_late_respects_custom_start_and_tolerance():
    assert compute_late_minutes(at(9, 35), 5, 9, 30) == 0
    assert compute_late_minutes(at(9, 36), 5, 9, 30) == 6


def test_late_is_monotonic_past_grace():
    values = [compute_late_minutes(at(8, m)) for m in range(11, 60)]
    assert values == sorted(values)
    assert values[0] == 11


# --- extra / under -----------------------------------------------------------


def test_extra_boundaries():
    assert compute_extra_minutes(480, 480, 10) == 0
    assert compute_extra_minutes(490, 480, 10) == 0
    assert compute_extra_minutes(491, 480, 10) == 11


def test_extra_is_monotonic_past_grace():
    values = [compute_extra_minutes(w) for w in range(491, 700)]
    assert values == sorted(values)


def test_under_has_no_tolerance():
    assert compute_under_minutes(480, 480) == 0
    assert compute_under_minutes(479, 480) == 1
    assert compute_under_minutes(600, 480) == 0
    assert compute_under_minutes(0, 480) == 480


# --- worked minutes ----------------------------------------------------------


def test_worked_minutes_without_lunch_policy():
    assert compute_worked_minutes(full_day()) == 480


def test_worked_minutes_deducts_lunch_at_threshold():
    lunch = LunchPolicy(start_hour=12, start_minute=0, duration_minutes=60)
    exactly_six_hours = [punch(8, 0, ENTRY), punch(11, 0, EXIT), punch(13, 0, ENTRY), punch(16, 0, EXIT)]
    assert compute_worked_minutes(exactly_six_hours, lunch) == 300


def test_worked_minutes_below_threshold_keeps_total():
    lunch = LunchPolicy(start_hour=12, start_minute=0, duration_minutes=60)
    short_day = [punch(8, 0, ENTRY), punch(11, 0, EXIT), punch(13, 0, ENTRY), punch(15, 59, EXIT)]
    assert compute_worked_minutes(short_day, lunch) == 359


def test_lunch_is_deducted_even_when_punches_skip_the_window():
    # Known approximation: deduction is threshold based, not a window overlap.
    lunch = LunchPolicy(start_hour=12, start_minute=0, duration_minutes=120)
    morning_only = [punch(5, 0, ENTRY), punch(9, 0, EXIT), punch(9, 30, ENTRY), punch(11, 30, EXIT)]
    assert compute_worked_minutes(morning_only, lunch) == 240


def test_lunch_deduction_clamps_at_zero():
    huge_lunch = LunchPolicy(start_hour=12, start_minute=0, duration_minutes=1000)
    assert compute_worked_minutes(full_day(), huge_lunch) == 0


def test_worked_minutes_skips_malformed_elements():
    punches = [punch(7, 0, EXIT), punch(8, 0, ENTRY), punch(12, 0, EXIT)]
    assert compute_worked_minutes(punches) == 240


def test_worked_minutes_ignores_non_positive_intervals():
    overnight = [punch(22, 0, ENTRY, day=6), punch(6, 0, EXIT, day=7)]
    assert compute_worked_minutes(overnight) == 0


def test_worked_minutes_fewer_than_two_punches():
    assert compute_worked_minutes([]) == 0
    assert compute_worked_minutes([punch(8, 0, ENTRY)]) == 0


def test_worked_minutes_sorts_input():
    shuffled = list(reversed(full_day()))
    assert compute_worked_minutes(shuffled) == 480


# --- incompleteness ----------------------------------------------------------


@pytest.mark.parametrize(
    "punches",
    [
        [],
        [punch(8, 0, ENTRY)],
        [punch(8, 0, ENTRY), punch(12, 0, EXIT)],
        [punch(8, 0, ENTRY), punch(12, 0, EXIT), punch(14, 0, ENTRY)],
        [punch(8, 0, ENTRY), punch(12, 0, EXIT), punch(14, 0, ENTRY), punch(18, 0, EXIT), punch(19, 0, ENTRY)],
        [punch(8, 0, ENTRY), punch(12, 0, ENTRY), punch(14, 0, EXIT), punch(18, 0, EXIT)],
        [punch(8, 0, EXIT), punch(12, 0, ENTRY), punch(14, 0, ENTRY), punch(18, 0, EXIT)],
        [punch(8, 0, ENTRY), punch(12, 0, EXIT), punch(14, 0, EXIT), punch(18, 0, ENTRY)],
    ],
)
def test_incomplete_shapes(punches):
    assert is_punches_incomplete(punches) is True


def test_complete_shapes():
    assert is_punches_incomplete(full_day()) is False
    six = full_day() + [punch(19, 0, ENTRY), punch(20, 0, EXIT)]
    assert is_punches_incomplete(six) is False


def test_incompleteness_is_judged_after_sorting():
    unsorted = [punch(14, 0, ENTRY), punch(8, 0, ENTRY), punch(18, 0, EXIT), punch(12, 0, EXIT)]
    assert is_punches_incomplete(unsorted) is False


def test_mixed_naive_and_aware_timestamps_are_ordered_by_wall_clock():
    punches = [
        punch(8, 0, ENTRY),
        Punch(timestamp=datetime(2025, 1, 6, 12, 0, tzinfo=timezone.utc), type=EXIT),
        punch(14, 0, ENTRY),
        punch(18, 0, EXIT),
    ]

    result = calculate_worklog(list(reversed(punches)))

    assert result.is_incomplete is False
    assert result.worked_minutes == 360
    assert result.under_minutes == 120


# --- occurrences -------------------------------------------------------------


def test_generate_occurrences_fixed_order():
    occ = generate_occurrences(500, 15, 20, 5, False)
    assert [o.type for o in occ] == [OccurrenceType.LATE, OccurrenceType.OVER, OccurrenceType.UNDER]
    assert [o.minutes for o in occ] == [15, 20, 5]


def test_generate_occurrences_skips_zero_metrics():
    assert generate_occurrences(480, 0, 0, 0, False) == ()
    assert generate_occurrences(470, 0, 0, 10, False) == (OccurrenceDraft(OccurrenceType.UNDER, 10),)


def test_generate_occurrences_incomplete_is_exclusive():
    assert generate_occurrences(500, 15, 20, 5, True) == (OccurrenceDraft(OccurrenceType.INCOMPLETE, 0),)


# --- calculate_worklog scenarios ---------------------------------------------


def test_scenario_entry_at_tolerance_limit_is_not_late():
    result = calculate_worklog(full_day(entry=(8, 10)), NO_LUNCH)
    assert result.late_minutes == 0


def test_scenario_entry_one_minute_past_tolerance():
    result = calculate_worklog(full_day(entry=(8, 11)), NO_LUNCH)
    assert result.late_minutes == 11
    assert result.occurrences[0] == OccurrenceDraft(OccurrenceType.LATE, 11)


def test_scenario_worked_490_has_no_extra():
    result = calculate_worklog(full_day(leave=(18, 10)), NO_LUNCH)
    assert result.worked_minutes == 490
    assert result.extra_minutes == 0
    assert result.occurrences == ()


def test_scenario_worked_491_has_full_extra():
    result = calculate_worklog(full_day(leave=(18, 11)), NO_LUNCH)
    assert result.worked_minutes == 491
    assert result.extra_minutes == 11
    assert result.occurrences == (OccurrenceDraft(OccurrenceType.OVER, 11),)


def test_scenario_worked_479_is_one_minute_under():
    result = calculate_worklog(full_day(leave=(17, 59)), NO_LUNCH)
    assert result.worked_minutes == 479
    assert result.under_minutes == 1
    assert result.occurrences == (OccurrenceDraft(OccurrenceType.UNDER, 1),)


def test_scenario_two_punches_is_incomplete():
    result = calculate_worklog([punch(8, 0, ENTRY), punch(12, 0, EXIT)])
    assert result.is_incomplete is True
    assert result.worked_minutes == 0
    assert result.late_minutes == 0
    assert result.extra_minutes == 0
    assert result.under_minutes == 0
    assert result.occurrences == (OccurrenceDraft(OccurrenceType.INCOMPLETE, 0),)


def test_scenario_full_day_zero_lunch_has_no_occurrences():
    result = calculate_worklog(full_day(), NO_LUNCH)
    assert result.worked_minutes == 480
    assert result.is_incomplete is False
    assert result.occurrences == ()


def test_scenario_full_day_default_lunch():
    result = calculate_worklog(full_day())
    assert result.worked_minutes == 360
    assert result.under_minutes == 120
    assert result.occurrences == (OccurrenceDraft(OccurrenceType.UNDER, 120),)


def test_no_lunch_policy_means_no_deduction():
    result = calculate_worklog(full_day(), replace(DEFAULT_WORKDAY_CONFIG, lunch_policy=None))
    assert result.worked_minutes == 480


def test_late_and_over_can_co_occur():
    # Late arrival compensated by a much later exit.
    punches = full_day(entry=(8, 30), leave=(19, 30))
    result = calculate_worklog(punches, NO_LUNCH)
    assert result.late_minutes == 30
    assert result.worked_minutes == 540
    assert [o.type for o in result.occurrences] == [OccurrenceType.LATE, OccurrenceType.OVER]


def test_incomplete_day_never_carries_other_occurrences():
    # Arithmetic would give lateness (09:00) but the pairing is broken.
    punches = [punch(9, 0, ENTRY), punch(12, 0, EXIT), punch(13, 0, EXIT), punch(19, 0, ENTRY)]
    result = calculate_worklog(punches)
    assert result.is_incomplete is True
    assert result.late_minutes == 0
    assert [o.type for o in result.occurrences] == [OccurrenceType.INCOMPLETE]


def test_calculation_is_order_independent_and_idempotent():
    punches = full_day(entry=(8, 20), leave=(18, 45))
    shuffled = punches[:]
    random.Random(7).shuffle(shuffled)

    first = calculate_worklog(punches)
    assert calculate_worklog(shuffled) == first
    assert calculate_worklog(punches) == first


def test_complete_result_never_contains_incomplete_or_duplicates():
    for leave in [(16, 0), (18, 0), (18, 11), (20, 0)]:
        for entry in [(7, 50), (8, 10), (8, 11), (9, 0)]:
            result = calculate_worklog(full_day(entry=entry, leave=leave))
            types = [o.type for o in result.occurrences]
            assert OccurrenceType.INCOMPLETE not in types
            assert len(types) == len(set(types))

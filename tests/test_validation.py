"""Tests for the validation rules of profiles, services and availability."""

import pytest

from scheduling_admin_api.app.core.errors import ValidationFailed
from scheduling_admin_api.app.core.validation import (
    validate_availabilities,
    validate_availability_body,
    validate_profile,
    validate_service,
)


def window(day=1, start="09:00", end="18:00"):
    return {"day_of_week": day, "start_time": start, "end_time": end}


def fields_of(exc_info):
    return [issue["field"] for issue in exc_info.value.issues]


# ---------------------------------------------------------------------------
# Profile name
# ---------------------------------------------------------------------------

def test_profile_name_is_trimmed():
    assert validate_profile({"business_name": "  Salão Bela  "}).business_name == "Salão Bela"


@pytest.mark.parametrize("name", ["Ab", "x" * 100, "  " + "x" * 100 + "  "])
def test_profile_name_length_bounds_accepted(name):
    validate_profile({"business_name": name})


@pytest.mark.parametrize("name", ["", "   ", "a", " a ", "x" * 101, 42, None])
def test_profile_name_rejected(name):
    with pytest.raises(ValidationFailed) as exc_info:
        validate_profile({"business_name": name})
    assert fields_of(exc_info) == ["business_name"]


def test_profile_missing_name():
    with pytest.raises(ValidationFailed) as exc_info:
        validate_profile({})
    assert exc_info.value.issues == [{"field": "business_name", "message": "Field required"}]


def test_profile_body_must_be_an_object():
    with pytest.raises(ValidationFailed) as exc_info:
        validate_profile(["Salão"])
    assert fields_of(exc_info) == ["body"]


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("duration", [15, 16, 30, 45, 240, 479, 480])
def test_service_duration_in_range_accepted(duration):
    service = validate_service({"name": "Corte", "duration": duration})
    assert service.duration == duration


def test_every_duration_in_range_accepted():
    for duration in range(15, 481):
        assert validate_service({"name": "Corte", "duration": duration}).duration == duration


@pytest.mark.parametrize("duration", [14, 481, 0, -30, 10_000])
def test_service_duration_out_of_range_rejected(duration):
    with pytest.raises(ValidationFailed) as exc_info:
        validate_service({"name": "Corte", "duration": duration})
    assert fields_of(exc_info) == ["duration"]


@pytest.mark.parametrize("duration", [30.5, 14.0, "30", True, None, [30]])
def test_service_duration_must_be_integer(duration):
    with pytest.raises(ValidationFailed) as exc_info:
        validate_service({"name": "Corte", "duration": duration})
    assert fields_of(exc_info) == ["duration"]


def test_service_duration_whole_float_accepted():
    service = validate_service({"name": "Corte", "duration": 30.0})
    assert service.duration == 30
    assert type(service.duration) is int


def test_service_reports_all_issues_together():
    with pytest.raises(ValidationFailed) as exc_info:
        validate_service({"name": " ", "duration": 5})
    assert sorted(fields_of(exc_info)) == ["duration", "name"]
    assert all(issue["message"] for issue in exc_info.value.issues)


def test_service_name_trimmed():
    assert validate_service({"name": "  Corte  ", "duration": 30}).name == "Corte"


# ---------------------------------------------------------------------------
# Availability
# ---------------------------------------------------------------------------

def test_valid_window():
    [item] = validate_availabilities([window()])
    assert (item.day_of_week, item.start_time, item.end_time) == (1, "09:00", "18:00")


@pytest.mark.parametrize("day", range(0, 7))
def test_every_weekday_accepted(day):
    validate_availabilities([window(day=day)])


@pytest.mark.parametrize("day", [-1, 7, 8, 1.5, 7.0, "1", True, None])
def test_invalid_weekday_rejected(day):
    with pytest.raises(ValidationFailed) as exc_info:
        validate_availabilities([window(day=day)])
    assert fields_of(exc_info) == ["availabilities.0.day_of_week"]


def test_whole_float_weekday_accepted():
    [item] = validate_availabilities([window(day=1.0)])
    assert item.day_of_week == 1


def test_every_zero_padded_time_accepted():
    for hour in range(24):
        for minute in (0, 30, 59):
            t = f"{hour:02d}:{minute:02d}"
            if t != "00:00":
                validate_availabilities([window(start="00:00", end=t)])
            if t != "23:59":
                validate_availabilities([window(start=t, end="23:59")])


def test_day_boundaries_accepted():
    validate_availabilities([window(day=0, start="00:00", end="23:59")])


@pytest.mark.parametrize(
    "value",
    ["9:00", "09:60", "24:00", "9:5", "0900", "09:00:00", "", " 09:00", "ab:cd", "09:00\n", 900],
)
def test_invalid_time_format_rejected(value):
    with pytest.raises(ValidationFailed) as exc_info:
        validate_availabilities([window(start=value, end="23:59")])
    assert fields_of(exc_info) == ["availabilities.0.start_time"]


def test_invalid_time_format_message():
    with pytest.raises(ValidationFailed) as exc_info:
        validate_availabilities([window(end="18:60")])
    assert exc_info.value.issues == [
        {"field": "availabilities.0.end_time", "message": "Invalid time format, expected HH:MM"}
    ]


def test_equal_start_and_end_rejected():
    with pytest.raises(ValidationFailed) as exc_info:
        validate_availabilities([window(start="12:00", end="12:00")])
    assert exc_info.value.issues == [
        {"field": "availabilities.0.start_time", "message": "start_time must be earlier than end_time"}
    ]


def test_reversed_range_rejected():
    with pytest.raises(ValidationFailed) as exc_info:
        validate_availabilities([window(start="18:00", end="09:00")])
    assert fields_of(exc_info) == ["availabilities.0.start_time"]


def test_missing_field_rejected():
    entry = window()
    del entry["end_time"]
    with pytest.raises(ValidationFailed) as exc_info:
        validate_availabilities([entry])
    assert exc_info.value.issues == [{"field": "availabilities.0.end_time", "message": "Field required"}]


def test_empty_list_is_valid():
    assert validate_availabilities([]) == []


def test_multiple_valid_windows():
    items = validate_availabilities([window(day=1, start="09:00", end="12:00"), window(day=2, start="14:00", end="18:00")])
    assert [item.day_of_week for item in items] == [1, 2]


def test_invalid_entry_reported_with_its_index():
    with pytest.raises(ValidationFailed) as exc_info:
        validate_availabilities([window(), window(day=8), window(start="18:00", end="09:00")])
    assert fields_of(exc_info) == ["availabilities.1.day_of_week", "availabilities.2.start_time"]


def test_overlapping_windows_are_not_rejected():
    items = validate_availabilities([window(start="09:00", end="12:00"), window(start="11:00", end="13:00")])
    assert len(items) == 2


def test_availabilities_must_be_a_list():
    with pytest.raises(ValidationFailed) as exc_info:
        validate_availabilities({"day_of_week": 1})
    assert fields_of(exc_info) == ["availabilities"]


def test_availability_body_requires_key():
    with pytest.raises(ValidationFailed) as exc_info:
        validate_availability_body({})
    assert exc_info.value.issues == [{"field": "availabilities", "message": "Field required"}]


def test_availability_body_must_be_object():
    with pytest.raises(ValidationFailed) as exc_info:
        validate_availability_body([window()])
    assert fields_of(exc_info) == ["body"]


def test_validation_is_deterministic():
    body = [window(start="18:00", end="09:00"), window(day=9)]
    with pytest.raises(ValidationFailed) as first:
        validate_availabilities(body)
    with pytest.raises(ValidationFailed) as second:
        validate_availabilities(body)
    assert first.value.issues == second.value.issues

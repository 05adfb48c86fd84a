"""Tests for form parsing and input validation."""
from datetime import datetime

import pytest

from befit.services.errors import ValidationError
from befit.services.forms import parse_entry_form, parse_session_form


def _entry_form(**overrides):
    form = {
        "training_session_id": "1",
        "exercise_type_id": "2",
        "weight": "82,5",
        "sets": "3",
        "repetitions": "10",
    }
    form.update(overrides)
    return form


def test_session_form_parses_datetime_local():
    data = parse_session_form({"start_time": "2024-05-01T18:00", "end_time": "2024-05-01T19:15"})

    assert data.start_time == datetime(2024, 5, 1, 18, 0)
    assert data.end_time == datetime(2024, 5, 1, 19, 15)


def test_session_form_rejects_end_before_start():
    with pytest.raises(ValidationError) as exc:
        parse_session_form({"start_time": "2024-05-01T18:00", "end_time": "2024-05-01T17:00"})
    assert exc.value.field == "end_time"


@pytest.mark.parametrize("value", ["", "gestern", "2024-13-01T10:00"])
def test_session_form_rejects_bad_dates(value):
    with pytest.raises(ValidationError):
        parse_session_form({"start_time": value, "end_time": "2024-05-01T19:00"})


def test_entry_form_accepts_decimal_comma():
    data = parse_entry_form(_entry_form())

    assert data.training_session_id == 1
    assert data.exercise_type_id == 2
    assert data.weight == 82.5
    assert (data.sets, data.repetitions) == (3, 10)


def test_entry_form_allows_zero_weight():
    assert parse_entry_form(_entry_form(weight="0")).weight == 0


@pytest.mark.parametrize("field,value", [
    ("weight", "-5"),
    ("sets", "0"),
    ("sets", "-1"),
    ("repetitions", "0"),
    ("sets", "drei"),
    ("training_session_id", ""),
])
def test_entry_form_rejects_invalid_values(field, value):
    with pytest.raises(ValidationError) as exc:
        parse_entry_form(_entry_form(**{field: value}))
    assert exc.value.field == field


@pytest.mark.parametrize("field", ["training_session_id", "exercise_type_id", "sets"])
@pytest.mark.parametrize("value", [str(2**63), str(-2**63 - 1), "99999999999999999999999"])
def test_entry_form_rejects_ids_beyond_integer_range(field, value):
    with pytest.raises(ValidationError) as exc:
        parse_entry_form(_entry_form(**{field: value}))
    assert exc.value.field == field


def test_entry_form_accepts_largest_integer():
    assert parse_entry_form(_entry_form(training_session_id=str(2**63 - 1))).training_session_id == 2**63 - 1

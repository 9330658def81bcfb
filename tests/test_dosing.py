import logging
import math
from dataclasses import replace

import numpy as np
import pytest

from doseengine.config import DEFAULT_REGIMEN, FIELD_LABELS, MAX_TIME_SPAN
from doseengine.dosing import dose_schedule, validate_regimen
from doseengine.helpers import parse_number, parse_regimen, series_to_arrays
from doseengine.simulate import run_regimen
from doseengine.solvers import generate_series


def test_default_schedule():
    """2.5 weekly, +2.5 every 28 steps, capped at 15, over 168 steps."""
    schedule = dose_schedule(DEFAULT_REGIMEN)

    assert len(schedule) == 25  # t = 0, 7, ..., 168
    assert schedule[:5] == [(0, 2.5), (7, 2.5), (14, 2.5), (21, 2.5), (28, 5.0)]
    assert schedule[-1] == (168, 15.0)
    assert max(dose for _, dose in schedule) == 15.0


def test_validate_accepts_defaults():
    assert validate_regimen(DEFAULT_REGIMEN) is DEFAULT_REGIMEN


@pytest.mark.parametrize("field, value", [
    ("half_life", 0.0),
    ("half_life", -2.0),
    ("half_life", float("inf")),
    ("initial_dose", float("nan")),
    ("initial_dose", -1.0),
    ("dose_interval", 0),
    ("dose_interval", 2.5),
    ("dose_increase", -0.5),
    ("dose_increase_interval", 0),
    ("max_dose", float("nan")),
    ("time_span", -1),
    ("time_span", 10.5),
    ("time_span", MAX_TIME_SPAN + 1),
])
def test_validate_rejects_bad_field(field, value):
    with pytest.raises(ValueError, match=field):
        validate_regimen(replace(DEFAULT_REGIMEN, **{field: value}))


def test_validate_warns_when_initial_dose_above_cap(caplog):
    reg = replace(DEFAULT_REGIMEN, initial_dose=20.0)
    with caplog.at_level(logging.WARNING, logger="doseengine.dosing"):
        validate_regimen(reg)
    assert "exceeds max_dose" in caplog.text


def test_run_regimen_returns_arrays():
    t, q = run_regimen(DEFAULT_REGIMEN)

    assert t.shape == q.shape == (169,)
    assert np.array_equal(t, np.arange(169.0))
    assert q[0] == 2.5


def test_run_regimen_validation_can_be_skipped():
    reg = replace(DEFAULT_REGIMEN, half_life=0.0)
    with pytest.raises(ValueError):
        run_regimen(reg)
    _, q = run_regimen(reg, validate=False)
    assert q[1] == 0.0


def test_parse_number():
    assert parse_number("5") == 5.0
    assert parse_number(" 2.5 ") == 2.5
    assert parse_number("1e3") == 1000.0
    assert math.isnan(parse_number(""))
    assert math.isnan(parse_number("   "))
    assert math.isnan(parse_number("abc"))


def test_parse_regimen_bad_text_gives_nan_series():
    fields = {name: "1" for name in FIELD_LABELS}
    fields["half_life"] = "five"
    fields["time_span"] = "3"

    reg = parse_regimen(fields)
    assert math.isnan(reg.half_life)
    assert reg.time_span == 3.0

    _, q = series_to_arrays(generate_series(reg))
    assert len(q) == 4
    assert np.all(np.isnan(q))


def test_parse_regimen_missing_field_is_nan():
    reg = parse_regimen({"half_life": "5"})
    assert reg.half_life == 5.0
    assert math.isnan(reg.max_dose)

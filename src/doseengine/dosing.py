# src/doseengine/dosing.py
from __future__ import annotations

import logging
import math

import numpy as np

from .config import MAX_TIME_SPAN
from .helpers import time_steps
from .types import RegimenParameters

logger = logging.getLogger(__name__)


def dose_at(dose_interval: float, initial_dose: float, dose_increase: float,
            dose_increase_interval: float, max_dose: float, time: int) -> float:
    """
    Dose administered at exactly `time` (0.0 when nothing is given).

      time == 0                    -> initial_dose, NOT clamped by max_dose
      time % dose_interval == 0    -> min(initial_dose + dose_increase * floor(time / dose_increase_interval), max_dose)
      otherwise                    -> 0.0

    A zero (or nan) dose_interval means no repeat doses at all.
    Escalation and clamping follow float64 semantics, so a zero
    dose_increase_interval gives an infinite escalation count and a nan
    max_dose propagates as nan rather than being ignored.
    """
    if time == 0:
        return float(initial_dose)
    if dose_interval == 0:
        return 0.0

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        if np.fmod(time, dose_interval) != 0:
            return 0.0
        escalation_count = np.floor(np.divide(time, dose_increase_interval))
        raw_dose = initial_dose + dose_increase * escalation_count
        return float(np.minimum(raw_dose, max_dose))


def dose_schedule(params: RegimenParameters) -> list[tuple[int, float]]:
    """
    Every (time, dose) pair in 0..time_span where a nonzero dose is given.
    Example (defaults): [(0, 2.5), (7, 2.5), ..., (28, 5.0), ...]
    """
    schedule = []
    for t in time_steps(params.time_span):
        dose = dose_at(params.dose_interval, params.initial_dose, params.dose_increase,
                       params.dose_increase_interval, params.max_dose, t)
        if dose != 0:
            schedule.append((t, dose))
    logger.debug("dose_schedule: %d doses over %d steps", len(schedule), len(time_steps(params.time_span)))
    return schedule


def validate_regimen(params: RegimenParameters) -> RegimenParameters:
    """
    Reject parameters the raw engine would turn into nan/inf or unbounded work.
    Returns `params` unchanged so it can be used inline.
    """
    _validate_positive("half_life", params.half_life)
    _validate_non_negative("initial_dose", params.initial_dose)
    _validate_positive_int("dose_interval", params.dose_interval)
    _validate_non_negative("dose_increase", params.dose_increase)
    _validate_positive_int("dose_increase_interval", params.dose_increase_interval)
    _validate_non_negative("max_dose", params.max_dose)
    _validate_non_negative_int("time_span", params.time_span)
    if params.time_span > MAX_TIME_SPAN:
        raise ValueError(f"time_span must be <= {MAX_TIME_SPAN} (got {params.time_span}).")
    if params.initial_dose > params.max_dose:
        # Allowed: the time-0 dose is never clamped.
        logger.warning("initial_dose %s exceeds max_dose %s; only repeat doses are clamped",
                       params.initial_dose, params.max_dose)
    return params


# --------------------------
# Small input validators
# --------------------------
def _validate_positive(name: str, x: float) -> None:
    if not (x > 0 and math.isfinite(x)):
        raise ValueError(f"{name} must be > 0 (got {x}).")

def _validate_non_negative(name: str, x: float) -> None:
    if not (x >= 0 and math.isfinite(x)):
        raise ValueError(f"{name} must be >= 0 (got {x}).")

def _validate_positive_int(name: str, x: float) -> None:
    if not (math.isfinite(x) and float(x).is_integer() and x > 0):
        raise ValueError(f"{name} must be a positive integer (got {x}).")

def _validate_non_negative_int(name: str, x: float) -> None:
    if not (math.isfinite(x) and float(x).is_integer() and x >= 0):
        raise ValueError(f"{name} must be a non-negative integer (got {x}).")

# src/doseengine/types.py
from dataclasses import dataclass

# Time is a plain integer step index. One sample per whole time unit.


@dataclass(frozen=True)
class RegimenParameters:
    """
    Everything needed to simulate one dosing regimen.

    half_life              : time units for the quantity to halve with no new doses
    initial_dose           : dose given at time 0
    dose_interval          : time units between repeat doses (0 disables repeats)
    dose_increase          : amount added to the dose per escalation step
    dose_increase_interval : time units per escalation step
    max_dose               : upper clamp on every repeat dose (time 0 is not clamped)
    time_span              : last time index simulated (inclusive)
    """
    half_life: float
    initial_dose: float
    dose_interval: float
    dose_increase: float
    dose_increase_interval: float
    max_dose: float
    time_span: float


@dataclass(frozen=True)
class Sample:
    """One point of a simulated series."""
    time: int
    quantity: float


# Ordered by time, one Sample per step from 0 to time_span.
Series = list[Sample]

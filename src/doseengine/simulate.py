# src/doseengine/simulate.py
import numpy as np

from .types import RegimenParameters
from .dosing import validate_regimen
from .solvers import generate_series
from .helpers import series_to_arrays


def run_regimen(params: RegimenParameters, validate: bool = True) -> tuple[np.ndarray, np.ndarray]:
    """
    High-level wrapper used by the CLI and the viewer.
    Validates the parameters (ValueError on bad input) unless validate=False,
    then returns the series as (t, q) arrays.
    """
    if validate:
        validate_regimen(params)
    return series_to_arrays(generate_series(params))

# src/doseengine/solvers.py
import logging
import math

from .types import RegimenParameters, Sample, Series
from .dosing import dose_at
from .models.first_order_decay import decay_factor, next_quantity
from .helpers import time_steps

logger = logging.getLogger(__name__)


def generate_series(params: RegimenParameters) -> Series:
    """
    Simulate discrete first-order decay with the regimen's doses added on top.

    The quantity starts at 0 just before t=0. For each whole step
    t = 0, 1, ..., time_span the dose for that step is computed and
      q[t] = q[t-1] * f + dose[t],   f = 0.5 ** (1 / half_life)
    is appended as Sample(t, q[t]).

    Never raises for numeric input: nan/inf parameters flow through the
    arithmetic, and a nan, infinite or negative time_span yields [].

    Returns:
      list of Sample, len == floor(time_span) + 1, times 0..time_span in order
    """
    factor = decay_factor(params.half_life)
    if not math.isfinite(factor):
        logger.warning("non-finite decay factor %s for half_life=%s", factor, params.half_life)
    if params.dose_interval == 0:
        logger.warning("dose_interval is 0; only the initial dose is given")

    steps = time_steps(params.time_span)
    if not steps:
        logger.warning("time_span=%s gives no samples", params.time_span)

    series: Series = []
    quantity = 0.0
    for t in steps:
        dose = dose_at(params.dose_interval, params.initial_dose, params.dose_increase,
                       params.dose_increase_interval, params.max_dose, t)
        quantity = next_quantity(quantity, dose, factor)
        series.append(Sample(time=t, quantity=quantity))

    logger.debug("generate_series: %d samples, decay factor %.6g", len(series), factor)
    return series

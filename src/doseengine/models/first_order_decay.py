# src/doseengine/models/first_order_decay.py
import numpy as np


def decay_factor(half_life: float) -> float:
    """
    Per-step multiplier for first-order decay: 0.5 ** (1 / half_life).

    No validation on purpose; float64 semantics decide the edge cases:
      half_life = 0   -> exponent +inf -> 0.0 (everything gone after one step)
      half_life < 0   -> factor > 1 (growth)
      half_life = nan -> nan
    """
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        exponent = np.divide(1.0, np.float64(half_life))
        return float(np.power(0.5, exponent))


def next_quantity(previous_quantity: float, dose: float, factor: float) -> float:
    """
    One step of the recurrence:
      q[t] = q[t-1] * factor + dose[t]

    Parameters:
      previous_quantity : quantity at the previous step (0 before t=0)
      dose              : amount administered at this step
      factor            : per-step decay factor from decay_factor()
    """
    with np.errstate(invalid="ignore", over="ignore"):
        return float(np.float64(previous_quantity) * factor + dose)

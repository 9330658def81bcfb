# src/doseengine/metrics.py
import numpy as np
from typing import Tuple

# All functions take the (t, q) arrays from series_to_arrays(): t = 0, 1, 2, ...


def cmax(q: np.ndarray) -> float:
    """Highest quantity in the series."""
    return float(np.max(q)) if q.size else float("nan")

def tmax(t: np.ndarray, q: np.ndarray) -> float:
    """Time of the highest quantity (first occurrence)."""
    return float(t[int(np.argmax(q))]) if q.size else float("nan")

def cmin(q: np.ndarray) -> float:
    """Lowest quantity in the series."""
    return float(np.min(q)) if q.size else float("nan")

def tmin(t: np.ndarray, q: np.ndarray) -> float:
    """Time of the lowest quantity (first occurrence)."""
    return float(t[int(np.argmin(q))]) if q.size else float("nan")

def cmax_tmax(t: np.ndarray, q: np.ndarray) -> Tuple[float, float]:
    """Return (Cmax, Tmax)."""
    return cmax(q), tmax(t, q)

def auc_trapz(t: np.ndarray, q: np.ndarray) -> float:
    """Area under the quantity curve, trapezoidal rule (quantity * time)."""
    if q.size < 2:
        return 0.0
    return float(np.trapezoid(q, t))

def cavg(q: np.ndarray) -> float:
    """Mean quantity over the whole span."""
    return float(np.mean(q)) if q.size else float("nan")

def ctrough(t: np.ndarray, q: np.ndarray, interval: int) -> float:
    """
    Trough before the last repeat dose: the sample one step before the
    largest multiple of `interval` that lies inside the series.
    nan if no repeat dose falls inside the span.
    """
    if interval <= 0 or t.size == 0:
        return float("nan")
    interval = int(interval)
    last_dose = int(t[-1] // interval) * interval
    if last_dose < interval:
        return float("nan")
    return float(q[last_dose - 1])


def _last_interval_mask(t: np.ndarray, interval: int) -> np.ndarray:
    """
    Samples in the last full dosing interval [k*interval, (k+1)*interval).
    Falls back to all samples when no full interval fits.
    """
    if interval <= 0 or t.size == 0:
        return np.ones_like(t, dtype=bool)
    interval = int(interval)
    n_full = int((t[-1] + 1) // interval)
    if n_full < 1:
        return np.ones_like(t, dtype=bool)
    start = (n_full - 1) * interval
    return (t >= start) & (t < start + interval)

def _ratio(window: np.ndarray) -> float:
    if window.size == 0:
        return float("nan")
    lo = float(np.min(window))
    if lo <= 0:
        return float("inf")
    return float(np.max(window)) / lo

def _fluctuation(window: np.ndarray) -> float:
    if window.size == 0:
        return float("nan")
    avg = float(np.mean(window))
    if avg == 0.0:
        return float("inf")
    return (float(np.max(window)) - float(np.min(window))) / avg


def peak_to_trough_ratio(t: np.ndarray, q: np.ndarray, interval: int | None = None) -> float:
    """
    Peak-to-Trough Ratio (PTR) = max / min.
    With `interval`, only the last full dosing interval is used; otherwise the whole series.
    """
    window = q[_last_interval_mask(t, interval)] if interval else q
    return _ratio(window)

def fluctuation_index(t: np.ndarray, q: np.ndarray, interval: int | None = None) -> float:
    """
    Fluctuation Index (FI) = (max - min) / mean.
    With `interval`, only the last full dosing interval is used; otherwise the whole series.
    """
    window = q[_last_interval_mask(t, interval)] if interval else q
    return _fluctuation(window)


def steady_state_window_mask(t: np.ndarray, q: np.ndarray, interval: int,
                             tol: float = 0.05, max_lookback: int = 10) -> np.ndarray:
    """
    Latest full dosing interval where the profile repeats itself.

    A window [start, start + interval) is steady when every sample differs
    from the sample one interval earlier by at most `tol` relative to its
    own value. On the integer grid the one-interval shift is an index shift.

    Parameters
    ----------
    t : array of sample times (0, 1, 2, ...)
    q : array of quantities
    interval : dosing interval in steps
    tol : relative tolerance (0.05 = 5%)
    max_lookback : how many intervals to step back from the end

    Returns
    -------
    mask : boolean array selecting the chosen interval. If none is steady,
           the last full interval (or everything when none fits).
    """
    if interval <= 0 or t.size == 0:
        return np.ones_like(t, dtype=bool)
    interval = int(interval)

    shifted = np.full_like(q, np.nan)
    shifted[interval:] = q[:-interval]
    denom = np.maximum(np.abs(q), 1e-12)
    rel_diff = np.abs(q - shifted) / denom

    n_full = int((t[-1] + 1) // interval)
    for k in range(max_lookback):
        start = (n_full - 1 - k) * interval
        # needs a previous interval to compare against
        if start < interval:
            break
        mask = (t >= start) & (t < start + interval)
        if np.all(rel_diff[mask] <= tol):
            return mask

    return _last_interval_mask(t, interval)

def peak_to_trough_ratio_ss(t: np.ndarray, q: np.ndarray, interval: int,
                            tol: float = 0.05) -> float:
    """PTR over the steady-state interval picked by steady_state_window_mask."""
    return _ratio(q[steady_state_window_mask(t, q, interval, tol=tol)])

def fluctuation_index_ss(t: np.ndarray, q: np.ndarray, interval: int,
                         tol: float = 0.05) -> float:
    """FI over the steady-state interval picked by steady_state_window_mask."""
    return _fluctuation(q[steady_state_window_mask(t, q, interval, tol=tol)])

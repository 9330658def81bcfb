import math
from dataclasses import fields as dataclass_fields
from typing import Mapping

import numpy as np

from .types import RegimenParameters, Series


def time_steps(time_span: float) -> range:
    """
    Integer steps 0..floor(time_span) inclusive.
    A nan, infinite or negative span gives an empty range.
    """
    if not math.isfinite(time_span) or time_span < 0:
        return range(0)
    return range(math.floor(time_span) + 1)


def parse_number(text: str) -> float:
    """
    Coerce form text to a float. Blank or malformed text becomes nan
    so it flows through the engine instead of raising.
    """
    text = text.strip()
    if not text:
        return float("nan")
    try:
        return float(text)
    except ValueError:
        return float("nan")


def parse_regimen(fields: Mapping[str, str]) -> RegimenParameters:
    """
    Build RegimenParameters from raw text keyed by field name
    (see config.FIELD_LABELS). Missing fields parse as nan.
    """
    return RegimenParameters(**{
        f.name: parse_number(fields.get(f.name, "")) for f in dataclass_fields(RegimenParameters)
    })


def series_to_arrays(series: Series) -> tuple[np.ndarray, np.ndarray]:
    """Split a series into (t, q) float arrays for plotting and metrics."""
    t = np.fromiter((s.time for s in series), dtype=float, count=len(series))
    q = np.fromiter((s.quantity for s in series), dtype=float, count=len(series))
    return t, q

# src/doseengine/config.py
from .types import RegimenParameters

# Form defaults: 2.5 weekly, +2.5 every four weeks up to 15, for 24 weeks.
DEFAULT_REGIMEN = RegimenParameters(
    half_life=5.0,
    initial_dose=2.5,
    dose_interval=7,
    dose_increase=2.5,
    dose_increase_interval=28,
    max_dose=15.0,
    time_span=168,
)

# Upper bound accepted by validate_regimen; the raw engine has no cap.
MAX_TIME_SPAN = 100_000

# Field name -> input label, in display order
FIELD_LABELS = {
    "half_life": "Halflife",
    "initial_dose": "Initial Dose",
    "dose_interval": "Dose Interval",
    "dose_increase": "Dose Increase",
    "dose_increase_interval": "Dose Increase Interval",
    "max_dose": "Max Dose",
    "time_span": "Time Span",
}

# --------------------------
# Chart
# --------------------------
CHART_TITLE = "Quantity over time"
SERIES_LABEL = "Quantity"
PEN_COLORS = {
    "light": (0, 0, 0),
    "dark": (255, 255, 255),
}
FILL_ALPHA = 128  # 50% of 255

import argparse
import csv
import logging
import sys
from typing import List, Optional

from .config import DEFAULT_REGIMEN
from .dosing import dose_at
from .metrics import auc_trapz, cmax_tmax
from .simulate import run_regimen
from .types import RegimenParameters

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    d = DEFAULT_REGIMEN
    parser = argparse.ArgumentParser(description="Half-life calculator - quantity over time for a repeated, escalating dose")
    parser.add_argument("--half-life", type=float, default=d.half_life, help="Half-life (time units)")
    parser.add_argument("--initial-dose", type=float, default=d.initial_dose, help="Dose at time 0")
    parser.add_argument("--dose-interval", type=float, default=d.dose_interval, help="Time units between doses")
    parser.add_argument("--dose-increase", type=float, default=d.dose_increase, help="Dose added per escalation step")
    parser.add_argument("--dose-increase-interval", type=float, default=d.dose_increase_interval, help="Time units per escalation step")
    parser.add_argument("--max-dose", type=float, default=d.max_dose, help="Upper bound on repeat doses")
    parser.add_argument("--time-span", type=float, default=d.time_span, help="Last time index to simulate")
    parser.add_argument("--csv", type=str, default="output.csv", help="Output CSV path")
    parser.add_argument("--no-validate", action="store_true", help="Skip input checks and let nan/inf propagate")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser


def run_cli(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s: %(message)s")

    params = RegimenParameters(
        half_life=args.half_life,
        initial_dose=args.initial_dose,
        dose_interval=args.dose_interval,
        dose_increase=args.dose_increase,
        dose_increase_interval=args.dose_increase_interval,
        max_dose=args.max_dose,
        time_span=args.time_span,
    )

    try:
        t, q = run_regimen(params, validate=not args.no_validate)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    with open(args.csv, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["time", "quantity", "dose"])
        for time, quantity in zip(t, q):
            dose = dose_at(params.dose_interval, params.initial_dose, params.dose_increase,
                           params.dose_increase_interval, params.max_dose, int(time))
            writer.writerow([int(time), float(quantity), dose])
    logger.info("wrote %d samples to %s", len(t), args.csv)

    peak, peak_time = cmax_tmax(t, q)
    print(f"Cmax {peak:.3f} at t={peak_time:g} | AUC {auc_trapz(t, q):.1f}")
    return 0


def main() -> None:
    sys.exit(run_cli())


if __name__ == "__main__":
    main()

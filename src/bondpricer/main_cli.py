# src/bondpricer/main_cli.py
import argparse
import json
import logging
import os
from typing import List, Optional, Sequence

import pandas as pd

# package-relative imports (works when installed as bondpricer)
from .bonds import BondParams, compute_metrics
from .price_yield_plot import plot_price_yield
from .report import metrics_frame, render_report
from .validation import PARAM_ORDER, BondInputError, parse_bond_args, validate_params

logger = logging.getLogger(__name__)


# ---------- helpers ----------
def _require_file(path: str) -> None:
    if not os.path.isfile(path):
        raise SystemExit(f"Error: file not found: {path}")


def _validated(values: Sequence[str]) -> BondParams:
    try:
        return parse_bond_args(values)
    except BondInputError as e:
        raise SystemExit(f"Error: {e}")


# ---------- commands ----------
def cmd_price(values: Sequence[str], as_json: bool) -> None:
    params = _validated(values)
    metrics = compute_metrics(params)

    if as_json:
        payload = {"params": {k: getattr(params, k) for k in PARAM_ORDER}, "metrics": metrics.to_dict()}
        print(json.dumps(payload, indent=2))
    else:
        print(render_report(params, metrics))


def cmd_batch(file: str, out: str) -> None:
    _require_file(file)
    # cells are parsed by the same rules as command-line arguments
    df = pd.read_csv(file, dtype=str)

    required_cols = set(PARAM_ORDER)
    if not required_cols.issubset(df.columns):
        missing = required_cols - set(df.columns)
        raise SystemExit(f"Error: missing required columns: {sorted(missing)}")

    logger.info("Loaded %d bonds from %s", len(df), file)

    rows = []
    for idx, r in enumerate(df.to_dict("records")):
        name = r["name"] if not pd.isna(r.get("name")) else f"bond_{idx}"
        try:
            params = validate_params(**{k: r[k] for k in PARAM_ORDER})
        except BondInputError as e:
            raise SystemExit(f"Error: row {idx} ({name}): {e}")
        rows.append((name, params, compute_metrics(params)))

    out_df = metrics_frame(rows)
    print("Bond analytics:")
    print(out_df.round(6))

    out_path = out or "bond_analytics_output.csv"
    out_df.to_csv(out_path, index=False)
    print(f"\nSaved: {out_path}")


def cmd_plot(values: Sequence[str], max_shift_bp: float, points: int, out: str) -> None:
    params = _validated(values)
    if points < 2:
        raise SystemExit("Error: --points must be at least 2")
    if max_shift_bp <= 0:
        raise SystemExit("Error: --max-shift-bp must be positive")

    out_df = plot_price_yield(params, max_shift_bp=max_shift_bp, n_points=points, out_path=out or "price_yield.png")
    print(out_df.head())

    print(f"\nSaved plot: {out or 'price_yield.png'}")


# ---------- cli ----------
def _add_bond_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("face_value", help="Face value of the bond (e.g., 1000)")
    p.add_argument("coupon_rate", help="Annual coupon rate as decimal (e.g., 0.05 for 5%%)")
    p.add_argument("ytm", help="Yield to maturity as decimal (e.g., 0.06 for 6%%)")
    p.add_argument("years", help="Years to maturity, 1-100 (e.g., 10)")
    p.add_argument("frequency", help="Payments per year (1=annual, 2=semi-annual, 4=quarterly, 12=monthly)")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Fixed-rate bond pricing and risk metrics")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level (default: WARNING)")
    sub = p.add_subparsers(dest="cmd", required=True)

    # price
    pr = sub.add_parser("price", help="Price one bond and print its analysis report")
    _add_bond_args(pr)
    pr.add_argument("--json", action="store_true", help="Print parameters and metrics as JSON")

    # batch
    b = sub.add_parser("batch", help="Analyze bonds from CSV")
    b.add_argument("--file", required=True, help="CSV with columns: name,face_value,coupon_rate,ytm,years,frequency")
    b.add_argument("--out", default="bond_analytics_output.csv", help="Output CSV filename (default: bond_analytics_output.csv)")

    # plot
    pl = sub.add_parser("plot", help="Plot the price-yield curve with duration/convexity approximations")
    _add_bond_args(pl)
    pl.add_argument("--max-shift-bp", type=float, default=300, help="Largest yield shift in basis points (default: 300)")
    pl.add_argument("--points", type=int, default=61, help="Number of yields along the curve (default: 61)")
    pl.add_argument("--out", default="price_yield.png", help="Output PNG filename (default: price_yield.png)")

    return p


def main(argv: Optional[List[str]] = None) -> None:
    p = build_parser()
    args = p.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.cmd in ("price", "plot"):
        values = [getattr(args, k) for k in PARAM_ORDER]

    if args.cmd == "price":
        cmd_price(values, args.json)
    elif args.cmd == "batch":
        cmd_batch(args.file, args.out)
    elif args.cmd == "plot":
        cmd_plot(values, args.max_shift_bp, args.points, args.out)
    else:
        p.print_help()
        raise SystemExit(2)


if __name__ == "__main__":
    main()

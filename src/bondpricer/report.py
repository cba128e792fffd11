from __future__ import annotations
from typing import Iterable, List, Tuple

import pandas as pd

from .bonds import BondMetrics, BondParams
from .scenarios import approximate_price_change

RULE = "═" * 63
THIN_RULE = "─" * 63


def classify_price(price: float, face_value: float) -> str:
    if price > face_value:
        return "premium"
    if price < face_value:
        return "discount"
    return "par"


def _section(title: str, lines: List[str]) -> List[str]:
    return [f"{title}:", THIN_RULE, *lines, ""]


def render_report(params: BondParams, metrics: BondMetrics) -> str:
    """Plain-text analysis report for one bond."""
    duration_chg, convexity_adj = approximate_price_change(metrics, 0.01)

    out = ["", RULE, "BOND ANALYSIS REPORT".center(63).rstrip(), RULE, ""]
    out += _section("BOND PARAMETERS", [
        f"  Face Value              : ${params.face_value:.2f}",
        f"  Coupon Rate             : {params.coupon_rate * 100:.4f}% ({params.coupon_rate:.4f})",
        f"  Yield to Maturity       : {params.ytm * 100:.4f}% ({params.ytm:.4f})",
        f"  Years to Maturity       : {params.years} years",
        f"  Payment Frequency       : {params.frequency} times per year",
        f"  Total Payments          : {params.periods}",
    ])
    out += _section("PRICING METRICS", [
        f"  Bond Price              : ${metrics.price:.4f}",
        f"  Price as % of Par       : {metrics.price / params.face_value * 100:.4f}%",
    ])
    out += _section("RISK METRICS", [
        f"  Macaulay Duration       : {metrics.macaulay_duration:.4f} years",
        f"  Modified Duration       : {metrics.modified_duration:.4f} years",
        f"  Convexity               : {metrics.convexity:.4f}",
        f"  DV01 (Dollar Duration)  : ${metrics.dv01:.4f}",
    ])
    out += [
        "INTERPRETATION:",
        THIN_RULE,
        "  • A 1% yield change implies:",
        f"    - Price change (duration): ${duration_chg:.2f} ({-metrics.modified_duration:.2f}%)",
        f"    - Convexity adjustment   : ${convexity_adj:.2f}",
        f"  • Bond is trading at a {classify_price(metrics.price, params.face_value)}",
        RULE,
        "",
    ]
    return "\n".join(out)


def metrics_frame(rows: Iterable[Tuple[str, BondParams, BondMetrics]]) -> pd.DataFrame:
    """Flatten (name, params, metrics) triples into one row per bond."""
    records = []
    for name, params, metrics in rows:
        records.append({
            "name": name,
            "face_value": params.face_value,
            "coupon_rate": params.coupon_rate,
            "ytm": params.ytm,
            "years": params.years,
            "frequency": params.frequency,
            "price": metrics.price,
            "macaulay_dur": metrics.macaulay_duration,
            "modified_dur": metrics.modified_duration,
            "convexity": metrics.convexity,
            "DV01": metrics.dv01,
            "position": classify_price(metrics.price, params.face_value),
        })
    return pd.DataFrame(records)

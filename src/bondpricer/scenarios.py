from __future__ import annotations
from dataclasses import replace
from typing import Tuple

import numpy as np
import pandas as pd

from .bonds import BASIS_POINT, BondMetrics, BondParams, compute_metrics


def approximate_price_change(metrics: BondMetrics, shift: float) -> Tuple[float, float]:
    """
    Taylor estimate of the price move for a parallel yield shift.

    Returns (duration_term, convexity_term); the second-order estimate is
    their sum.
    """
    duration_term = -metrics.modified_duration * metrics.price * shift
    convexity_term = 0.5 * metrics.convexity * metrics.price * shift * shift
    return duration_term, convexity_term


def price_yield_curve(params: BondParams, max_shift_bp: float = 300, n_points: int = 61) -> pd.DataFrame:
    # Full repricing vs. first and second order approximations around the base yield.
    if n_points < 2:
        raise ValueError("n_points must be at least 2.")
    if max_shift_bp <= 0:
        raise ValueError("max_shift_bp must be positive.")

    base = compute_metrics(params)
    shifts_bp = np.linspace(-max_shift_bp, max_shift_bp, n_points)
    rows = []
    for bp in shifts_bp:
        shift = float(bp) * BASIS_POINT
        y = params.ytm + shift
        if y < 0:
            continue
        price = compute_metrics(replace(params, ytm=y)).price
        dur, cvx = approximate_price_change(base, shift)
        rows.append({
            "shift_bp": float(bp),
            "ytm": y,
            "price": price,
            "duration_approx": base.price + dur,
            "convexity_approx": base.price + dur + cvx,
        })
    return pd.DataFrame(rows)

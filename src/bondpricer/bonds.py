from __future__ import annotations
import logging
import math
from dataclasses import asdict, dataclass

import pandas as pd

logger = logging.getLogger(__name__)

BASIS_POINT = 0.0001


@dataclass(frozen=True)
class BondParams:
    face_value: float        # Face value (par), repaid at maturity
    coupon_rate: float       # Annual coupon rate as decimal (e.g., 0.05)
    ytm: float               # Annual yield to maturity as decimal
    years: int               # Years to maturity
    frequency: int           # Coupon payments per year (1, 2, 4 or 12)

    @property
    def periods(self) -> int:
        return self.years * self.frequency


@dataclass(frozen=True)
class BondMetrics:
    price: float
    macaulay_duration: float     # years
    modified_duration: float     # years
    convexity: float
    dv01: float                  # price change per 1bp yield move
    yield_to_maturity: float

    def to_dict(self) -> dict:
        return asdict(self)


def compute_metrics(params: BondParams) -> BondMetrics:
    """
    Price a fixed-rate bond and derive its risk metrics in a single pass
    over the cash-flow schedule.

    The discount factor is rolled forward by repeated multiplication with
    1 / (1 + y) instead of calling pow for every period.
    """
    fv = params.face_value
    c = params.coupon_rate / params.frequency
    y = params.ytm / params.frequency
    n = params.years * params.frequency
    coupon_pmt = fv * c

    price = 0.0
    weighted_pv = 0.0
    convexity_sum = 0.0

    discount = 1.0 / (1.0 + y)
    pv_factor = discount
    for t in range(1, n + 1):
        cf = coupon_pmt + fv if t == n else coupon_pmt
        pv = cf * pv_factor

        price += pv
        weighted_pv += t * pv
        convexity_sum += t * (t + 1) * pv

        pv_factor *= discount

    if price == 0.0:
        # every discounted cash flow underflowed; ratios of zero sums are undefined
        logger.warning("Price underflowed to zero for %s; risk metrics are NaN", params)
        macaulay = modified = convexity = dv01 = math.nan
    else:
        macaulay = weighted_pv / (price * params.frequency)
        modified = macaulay / (1.0 + params.ytm / params.frequency)
        convexity = convexity_sum / (price * params.frequency * params.frequency * (1.0 + y) * (1.0 + y))
        dv01 = modified * price / 10000.0

    logger.debug("Priced %s over %d periods: price=%.6f", params, n, price)
    return BondMetrics(
        price=price,
        macaulay_duration=macaulay,
        modified_duration=modified,
        convexity=convexity,
        dv01=dv01,
        yield_to_maturity=params.ytm,
    )


def cash_flow_schedule(params: BondParams) -> pd.DataFrame:
    """One row per coupon date with its cash flow, discount factor and PV."""
    coupon_pmt = params.face_value * params.coupon_rate / params.frequency
    discount = 1.0 / (1.0 + params.ytm / params.frequency)
    n = params.periods

    rows = []
    pv_factor = discount
    for t in range(1, n + 1):
        cf = coupon_pmt + params.face_value if t == n else coupon_pmt
        rows.append({
            "period": t,
            "time_years": t / params.frequency,
            "cash_flow": cf,
            "discount_factor": pv_factor,
            "present_value": cf * pv_factor,
        })
        pv_factor *= discount
    return pd.DataFrame(rows)

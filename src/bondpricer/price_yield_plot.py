# src/bondpricer/price_yield_plot.py
import logging

import pandas as pd
import matplotlib.pyplot as plt

from .bonds import BondParams
from .scenarios import price_yield_curve

logger = logging.getLogger(__name__)


def plot_price_yield(
    params: BondParams,
    max_shift_bp: float = 300,
    n_points: int = 61,
    out_path: str = "price_yield.png",
    show: bool = False,
) -> pd.DataFrame:
    """
    Plot the price-yield curve of a bond against its duration and
    duration + convexity approximations.

    Parameters
    ----------
    params : BondParams
        Validated bond description.
    max_shift_bp : float, optional
        Largest parallel yield shift either side of the base YTM, in basis
        points. Default = 300.
    n_points : int, optional
        Number of yields sampled along the curve. Default = 61.
    out_path : str, optional
        Output path for saving the plot (default: 'price_yield.png').
    show : bool, optional
        If True, displays the plot interactively.

    Returns
    -------
    pd.DataFrame
        Curve points (shift, yield, exact price and both approximations).
    """

    df = price_yield_curve(params, max_shift_bp=max_shift_bp, n_points=n_points)

    fig = plt.figure(figsize=(7, 5))
    plt.plot(df["ytm"], df["price"], color="blue", lw=2, label="Price")
    plt.plot(df["ytm"], df["duration_approx"], color="red", ls="--", label="Duration")
    plt.plot(df["ytm"], df["convexity_approx"], color="green", ls=":", label="Duration + convexity")
    plt.axvline(params.ytm, color="grey", lw=1)
    plt.xlabel("Yield to Maturity")
    plt.ylabel("Price")
    plt.title("Price-Yield Curve")
    plt.legend()
    plt.grid(True, linestyle="--", alpha=0.6)

    if out_path:
        plt.savefig(out_path, bbox_inches="tight")
        logger.info("Saved plot: %s", out_path)

    if show:
        plt.show()
    plt.close(fig)

    return df

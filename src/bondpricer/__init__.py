from .bonds import BondMetrics, BondParams, cash_flow_schedule, compute_metrics
from .validation import (
    BondInputError,
    MalformedNumberError,
    OutOfRangeError,
    WrongArityError,
    parse_bond_args,
    validate_params,
)

__all__ = [
    "BondMetrics",
    "BondParams",
    "cash_flow_schedule",
    "compute_metrics",
    "BondInputError",
    "MalformedNumberError",
    "OutOfRangeError",
    "WrongArityError",
    "parse_bond_args",
    "validate_params",
]

"""
Parsing and range checks for the five bond parameters.

Raw values may be command-line strings or numbers read from a CSV. Every
failure raises a ``BondInputError`` subclass naming the offending parameter;
nothing is clamped or coerced into range.
"""
from __future__ import annotations
import logging
import math
import numbers
from typing import Sequence

from .bonds import BondParams

logger = logging.getLogger(__name__)

ALLOWED_FREQUENCIES = (1, 2, 4, 12)
MIN_YEARS = 1
MAX_YEARS = 100

PARAM_ORDER = ("face_value", "coupon_rate", "ytm", "years", "frequency")

_LABELS = {
    "face_value": "face value",
    "coupon_rate": "coupon rate",
    "ytm": "YTM",
    "years": "years to maturity",
    "frequency": "frequency",
}


class BondInputError(ValueError):
    """Base class for rejected bond parameters."""

    def __init__(self, parameter: str, message: str):
        super().__init__(message)
        self.parameter = parameter


class MalformedNumberError(BondInputError):
    pass


class OutOfRangeError(BondInputError):
    pass


class WrongArityError(BondInputError):
    pass


def _show(raw) -> str:
    return repr(raw) if isinstance(raw, str) else str(raw)


def _is_missing(raw) -> bool:
    return raw is None or (isinstance(raw, float) and math.isnan(raw))


def _check_text(name: str, raw) -> None:
    # blank CSV cells arrive as NaN; digit separators are not part of the accepted syntax
    if _is_missing(raw):
        raise MalformedNumberError(name, f"Invalid {_LABELS[name]}: value is missing.")
    if isinstance(raw, str) and "_" in raw:
        raise MalformedNumberError(name, f"Invalid {_LABELS[name]}: {_show(raw)} is not a number.")


def _parse_float(name: str, raw) -> float:
    _check_text(name, raw)
    if isinstance(raw, bool):
        raise MalformedNumberError(name, f"Invalid {_LABELS[name]}: {_show(raw)} is not a number.")
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise MalformedNumberError(name, f"Invalid {_LABELS[name]}: {_show(raw)} is not a number.")
    if not math.isfinite(value):
        raise MalformedNumberError(name, f"Invalid {_LABELS[name]}: {_show(raw)} is not a finite number.")
    return value


def _parse_int(name: str, raw) -> int:
    _check_text(name, raw)
    if isinstance(raw, numbers.Integral) and not isinstance(raw, bool):
        return int(raw)
    if isinstance(raw, str):
        try:
            return int(raw.strip())
        except ValueError:
            pass
    raise MalformedNumberError(name, f"Invalid {_LABELS[name]}: {_show(raw)} is not an integer.")


def parse_face_value(raw) -> float:
    value = _parse_float("face_value", raw)
    if value <= 0:
        raise OutOfRangeError("face_value", f"Invalid face value: {_show(raw)}. Must be positive number.")
    return value


def parse_coupon_rate(raw) -> float:
    value = _parse_float("coupon_rate", raw)
    if value < 0 or value > 1:
        raise OutOfRangeError(
            "coupon_rate", f"Invalid coupon rate: {_show(raw)} is out of range. Must be between 0 and 1."
        )
    return value


def parse_ytm(raw) -> float:
    value = _parse_float("ytm", raw)
    if value < 0:
        raise OutOfRangeError("ytm", f"Invalid YTM: {_show(raw)}. Must be non-negative.")
    return value


def parse_years(raw) -> int:
    value = _parse_int("years", raw)
    if value < MIN_YEARS or value > MAX_YEARS:
        raise OutOfRangeError(
            "years",
            f"Invalid years to maturity: {_show(raw)}. Must be between {MIN_YEARS} and {MAX_YEARS}.",
        )
    return value


def parse_frequency(raw) -> int:
    value = _parse_int("frequency", raw)
    if value not in ALLOWED_FREQUENCIES:
        allowed = ", ".join(str(f) for f in ALLOWED_FREQUENCIES[:-1]) + f", or {ALLOWED_FREQUENCIES[-1]}"
        raise OutOfRangeError("frequency", f"Invalid frequency: {_show(raw)}. Must be {allowed}.")
    return value


def validate_params(face_value, coupon_rate, ytm, years, frequency) -> BondParams:
    return BondParams(
        face_value=parse_face_value(face_value),
        coupon_rate=parse_coupon_rate(coupon_rate),
        ytm=parse_ytm(ytm),
        years=parse_years(years),
        frequency=parse_frequency(frequency),
    )


def parse_bond_args(args: Sequence) -> BondParams:
    """Validate positional values ordered as face_value, coupon_rate, ytm, years, frequency."""
    if len(args) != len(PARAM_ORDER):
        raise WrongArityError(
            "arguments",
            f"Expected {len(PARAM_ORDER)} arguments ({', '.join(PARAM_ORDER)}), got {len(args)}.",
        )
    params = validate_params(*args)
    logger.debug("Validated %s", params)
    return params

# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

import math

import numpy as np

from .config import DEFAULTS, PaymentTiming
from .errors import InvalidArgumentError, LogDomainError

__version__ = "0.1.0"


# =============================================================================
# Annuity Identity
# =============================================================================
#
# Every closed-form formula in this module solves the same identity for one
# of its unknowns:
#
#     pv·(1+r)ⁿ + pmt·(1+r·when)·[(1+r)ⁿ − 1]/r + fv = 0
#
# The (1+r·when) multiplier is 1 for payments in arrears (when=0) and (1+r)
# for payments in advance (when=1): a payment due at the start of a period
# earns one extra period of interest.
#
# At r = 0 the annuity factor [(1+r)ⁿ − 1]/r degenerates to n and the
# identity becomes  pv + pmt·n + fv = 0.
# =============================================================================

def growth_factor(rate: float, nper: float) -> float:
    """
    Compound growth (1 + rate)^nper with spreadsheet power semantics.

    Python raises where a spreadsheet returns a non-finite number. The
    solvers rely on the spreadsheet behavior (a non-finite residual simply
    never converges), so:
        - overflow returns ±inf
        - a negative base with a fractional exponent returns nan
        - a zero base with a negative exponent returns inf
    """
    base = 1.0 + rate
    try:
        return math.pow(base, nper)
    except OverflowError:
        if base < 0 and float(nper).is_integer() and int(nper) % 2:
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0:
            return math.inf
        return math.nan


def payment_timing(when: int) -> int:
    """Validate the spreadsheet `type` argument and return it as 0 or 1."""
    if when not in (PaymentTiming.END, PaymentTiming.BEGIN):
        raise InvalidArgumentError(f"when must be 0 (end) or 1 (beginning), got {when!r}")
    return int(when)


def pv(
        rate: float,
        nper: float,
        pmt: float,
        fv: float = DEFAULTS.fv,
        when: int = DEFAULTS.when
) -> float:
    """
    Present value of a level annuity plus a lump sum (spreadsheet PV).

    Formula:
        rate = 0:  PV = −pmt·nper − fv
        rate ≠ 0:  PV = −(fv + pmt·(1+r·when)·[(1+r)ⁿ − 1]/r) / (1+r)ⁿ

    Args:
        rate: Interest rate per period as decimal (e.g., 0.05/12)
        nper: Total number of payment periods
        pmt: Payment made each period (negative for outflows)
        fv: Future value after the last payment (default 0)
        when: 0 = payments at end of period, 1 = beginning (default 0)

    Returns:
        Present value (sign opposite to pmt/fv under the cash-flow convention)

    Raises:
        InvalidArgumentError: If rate is -1 (zero discount factor)
        InvalidArgumentError: If when is not 0 or 1

    Example:
        >>> pv(0.0525, 5, 6000)
        -25798.316343571...
    """
    when = payment_timing(when)
    if rate == 0:
        return -pmt * nper - fv
    due = 1 + rate if when else 1.0
    growth = growth_factor(rate, nper)
    if growth == 0:
        raise InvalidArgumentError(f"rate must be greater than -1, got {rate}")
    return -(fv + pmt * due * ((growth - 1) / rate)) / growth


def fv(
        rate: float,
        nper: float,
        pmt: float,
        pv: float,
        when: int = DEFAULTS.when
) -> float:
    """
    Future value of a present sum plus a level annuity (spreadsheet FV).

    Formula:
        rate = 0:  FV = −(pv + pmt·nper)
        rate ≠ 0:  FV = −(pv·(1+r)ⁿ + pmt·(1+r·when)·[(1+r)ⁿ − 1]/r)

    Args:
        rate: Interest rate per period as decimal
        nper: Total number of payment periods
        pmt: Payment made each period
        pv: Present value (lump sum at period 0)
        when: 0 = payments at end of period, 1 = beginning (default 0)

    Returns:
        Future value after nper periods
    """
    when = payment_timing(when)
    if rate == 0:
        return -(pv + pmt * nper)
    due = 1 + rate if when else 1.0
    growth = growth_factor(rate, nper)
    return -(pv * growth + pmt * due * ((growth - 1) / rate))


def pmt(
        rate: float,
        nper: float,
        pv: float,
        fv: float = DEFAULTS.fv,
        when: int = DEFAULTS.when
) -> float:
    """
    Level payment that amortizes pv down to fv over nper periods (spreadsheet PMT).

    Formula:
        rate = 0:  PMT = −(pv + fv) / nper
        rate ≠ 0:  PMT = −(fv + pv·(1+r)ⁿ)·r / ((1+r·when)·[(1+r)ⁿ − 1])

    Args:
        rate: Interest rate per period as decimal
        nper: Total number of payment periods
        pv: Present value (loan principal received is positive)
        fv: Future value after the last payment (default 0)
        when: 0 = payments at end of period, 1 = beginning (default 0)

    Returns:
        Payment per period

    Raises:
        InvalidArgumentError: If the annuity factor is zero (nper = 0)

    Example:
        >>> round(pmt(0.0525, 5, -10000), 2)
        2325.73
    """
    when = payment_timing(when)
    if rate == 0:
        if nper == 0:
            raise InvalidArgumentError("nper must be non-zero when rate is 0")
        return -(pv + fv) / nper
    due = 1 + rate if when else 1.0
    growth = growth_factor(rate, nper)
    denominator = due * (growth - 1)
    if denominator == 0:
        raise InvalidArgumentError(
            f"annuity factor is zero for rate={rate}, nper={nper}; cannot calculate PMT"
        )
    return -(fv + pv * growth) * rate / denominator


def nper(
        rate: float,
        pmt: float,
        pv: float,
        fv: float = DEFAULTS.fv,
        when: int = DEFAULTS.when
) -> float:
    """
    Number of periods needed to move pv to fv with level payments (spreadsheet NPER).

    The identity is solved with logarithms. Writing z = pmt·(1+r·when)/r:

        (1+r)ⁿ·(pv + z) = z − fv
        n = ln(z − fv)/ln(1+r) − ln(pv + z)/ln(1+r)

    Both logarithm arguments must be positive. When both are negative their
    ratio is still positive, so both are negated; when only one is
    non-positive there is no real solution (e.g. the payment does not even
    cover the interest).

    Args:
        rate: Interest rate per period as decimal
        pmt: Payment made each period
        pv: Present value
        fv: Future value after the last payment (default 0)
        when: 0 = payments at end of period, 1 = beginning (default 0)

    Returns:
        Number of periods (may be fractional or negative)

    Raises:
        InvalidArgumentError: If rate is 0 and pmt is 0
        InvalidArgumentError: If rate is -1 or below
        LogDomainError: If the logarithm arguments have opposite signs or are zero
    """
    when = payment_timing(when)
    if rate == 0:
        if pmt == 0:
            raise InvalidArgumentError("pmt must be non-zero when rate is 0; cannot calculate NPER")
        return -(pv + fv) / pmt
    if rate <= -1:
        raise InvalidArgumentError(f"rate must be greater than -1, got {rate}")

    z = pmt * (1 + rate * when) / rate
    numerator = -fv + z
    denominator = pv + z
    if numerator < 0 and denominator < 0:
        numerator = -numerator
        denominator = -denominator
    if numerator <= 0 or denominator <= 0:
        raise LogDomainError(
            f"cannot calculate NPER: log arguments {numerator} and {denominator} "
            f"must both be positive (rate={rate}, pmt={pmt}, pv={pv}, fv={fv})"
        )

    log_growth = math.log(1 + rate)
    if log_growth == 0:
        raise InvalidArgumentError(f"rate {rate} is too small to compound; cannot calculate NPER")
    return math.log(numerator) / log_growth - math.log(denominator) / log_growth


# -----------------------------------------------------------------------------
# Vector Variants
# -----------------------------------------------------------------------------
# numpy-broadcasting versions of pv/fv/pmt for pricing grids (e.g. a payment
# table over many rates and terms). Inputs broadcast against each other.
# Unlike the scalar functions these follow numpy semantics for degenerate
# inputs: division by zero yields inf/nan elements instead of raising.
# -----------------------------------------------------------------------------

def _annuity_terms(rate, nper, when) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Return (growth, annuity_factor, due) arrays with the r=0 limit filled in."""
    rate = np.asarray(rate, dtype=float)
    nper = np.asarray(nper, dtype=float)
    when = np.asarray(when)
    if not np.isin(when, (0, 1)).all():
        raise InvalidArgumentError(f"when must contain only 0 or 1, got {when!r}")
    growth = np.power(1.0 + rate, nper)
    safe_rate = np.where(rate == 0, 1.0, rate)
    annuity_factor = np.where(rate == 0, nper, (growth - 1.0) / safe_rate)
    due = 1.0 + rate * when
    return growth, annuity_factor, due


def pv_vector(rate, nper, pmt, fv=DEFAULTS.fv, when=DEFAULTS.when) -> np.ndarray:
    """Vectorized pv(); returns an ndarray of the broadcast shape."""
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        growth, annuity_factor, due = _annuity_terms(rate, nper, when)
        return -(np.asarray(fv, dtype=float) + np.asarray(pmt, dtype=float) * due * annuity_factor) / growth


def fv_vector(rate, nper, pmt, pv, when=DEFAULTS.when) -> np.ndarray:
    """Vectorized fv(); returns an ndarray of the broadcast shape."""
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        growth, annuity_factor, due = _annuity_terms(rate, nper, when)
        return -(np.asarray(pv, dtype=float) * growth + np.asarray(pmt, dtype=float) * due * annuity_factor)


def pmt_vector(rate, nper, pv, fv=DEFAULTS.fv, when=DEFAULTS.when) -> np.ndarray:
    """Vectorized pmt(); returns an ndarray of the broadcast shape."""
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        growth, annuity_factor, due = _annuity_terms(rate, nper, when)
        return -(np.asarray(fv, dtype=float) + np.asarray(pv, dtype=float) * growth) / (due * annuity_factor)

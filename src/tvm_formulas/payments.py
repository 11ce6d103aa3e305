# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

import warnings
from dataclasses import dataclass

import numpy as np

from . import annuity as tvm_annuity
from .config import DEFAULTS
from .errors import InvalidArgumentError, TVMWarning

__version__ = "0.1.0"


# =============================================================================
# Interest / Principal Split of a Level Payment (IPMT, PPMT)
# =============================================================================

def _check_period(per: float, nper: float) -> None:
    if per <= 0 or per > nper:
        raise InvalidArgumentError(f"per must be in [1, nper={nper}], got {per}")


def ipmt(
        rate: float,
        per: float,
        nper: float,
        pv: float,
        fv: float = DEFAULTS.fv,
        when: int = DEFAULTS.when
) -> float:
    """
    Interest portion of the payment for period `per` (spreadsheet IPMT).

    Interest accrued during a period equals the balance outstanding at the
    start of the period times the rate. That balance is the future value of
    the loan after the payments already made:

        Arrears (when=0):  IPMT = FV(r, per − 1, PMT, pv) · r
        Advance (when=1):  IPMT = FV(r, per − 2, PMT, pv + PMT) · r,  per > 1
                           IPMT = 0,                                  per = 1

    In advance, the first payment is made at time 0 and removed from the
    principal immediately, so no interest accrues before it.

    Args:
        rate: Interest rate per period as decimal
        per: Period of interest, 1-indexed (1 ≤ per ≤ nper)
        nper: Total number of payment periods
        pv: Present value (loan principal)
        fv: Future value after the last payment (default 0)
        when: 0 = payments at end of period, 1 = beginning (default 0)

    Returns:
        Interest paid in period `per` (same sign as the payment)

    Raises:
        InvalidArgumentError: If per is outside [1, nper]

    Example:
        >>> round(ipmt(0.1 / 12, 1, 36, 8000), 2)
        -66.67
    """
    _check_period(per, nper)
    when = tvm_annuity.payment_timing(when)
    if when == 1 and per == 1:
        return 0.0

    payment = tvm_annuity.pmt(rate, nper, pv, fv, when)
    if when == 1:
        pv = pv + payment
    periods_elapsed = per - 2 if when == 1 else per - 1
    return tvm_annuity.fv(rate, periods_elapsed, payment, pv) * rate


def ppmt(
        rate: float,
        per: float,
        nper: float,
        pv: float,
        fv: float = DEFAULTS.fv,
        when: int = DEFAULTS.when
) -> float:
    """
    Principal portion of the payment for period `per` (spreadsheet PPMT).

    PPMT = PMT − IPMT, so IPMT + PPMT reproduces the level payment exactly.

    Raises:
        InvalidArgumentError: If per is outside [1, nper]
    """
    _check_period(per, nper)
    return tvm_annuity.pmt(rate, nper, pv, fv, when) - ipmt(rate, per, nper, pv, fv, when)


# -----------------------------------------------------------------------------
# Cumulative Interest / Principal (CUMIPMT, CUMPRINC)
# -----------------------------------------------------------------------------

def _check_cumulative_args(
        rate: float,
        nper: int,
        pv: float,
        start_period: int,
        end_period: int
) -> None:
    if rate <= 0:
        raise InvalidArgumentError(f"rate must be positive, got {rate}")
    if nper <= 0:
        raise InvalidArgumentError(f"nper must be positive, got {nper}")
    if pv <= 0:
        raise InvalidArgumentError(f"pv must be positive, got {pv}")
    if start_period < 1:
        raise InvalidArgumentError(f"start_period must be at least 1, got {start_period}")
    if end_period < start_period:
        raise InvalidArgumentError(
            f"end_period ({end_period}) cannot be less than start_period ({start_period})"
        )
    if end_period > nper:
        raise InvalidArgumentError(f"end_period ({end_period}) cannot exceed nper ({nper})")


def cumipmt(
        rate: float,
        nper: int,
        pv: float,
        start_period: int,
        end_period: int,
        when: int = DEFAULTS.when
) -> float:
    """
    Cumulative interest paid from start_period to end_period inclusive
    (spreadsheet CUMIPMT). The loan is fully amortized (fv = 0).

    Raises:
        InvalidArgumentError: If rate, nper or pv is not positive, or the
            period window is not within [1, nper]
    """
    _check_cumulative_args(rate, nper, pv, start_period, end_period)
    return sum(
        ipmt(rate, per, nper, pv, 0.0, when)
        for per in range(int(start_period), int(end_period) + 1)
    )


def cumprinc(
        rate: float,
        nper: int,
        pv: float,
        start_period: int,
        end_period: int,
        when: int = DEFAULTS.when
) -> float:
    """
    Cumulative principal repaid from start_period to end_period inclusive
    (spreadsheet CUMPRINC). Same argument rules as cumipmt().
    """
    _check_cumulative_args(rate, nper, pv, start_period, end_period)
    return sum(
        ppmt(rate, per, nper, pv, 0.0, when)
        for per in range(int(start_period), int(end_period) + 1)
    )


# =============================================================================
# Amortization Schedule
# =============================================================================

@dataclass
class AmortizationSchedule:
    """
    Period-by-period split of a level-payment loan.

    Arrays are indexed by period - 1 (row 0 is period 1).

    - payment: level payment (PMT), identical in every row
    - interest: IPMT for the period
    - principal: PPMT for the period (payment - interest)
    - ending_balance: pv + cumulative principal after the period's payment
    """
    period: np.ndarray
    payment: np.ndarray
    interest: np.ndarray
    principal: np.ndarray
    ending_balance: np.ndarray


def amortization_schedule(
        rate: float,
        nper: int,
        pv: float,
        fv: float = DEFAULTS.fv,
        when: int = DEFAULTS.when
) -> AmortizationSchedule:
    """
    Build the full IPMT/PPMT schedule for a level-payment loan.

    Args:
        rate: Interest rate per period as decimal
        nper: Number of periods (positive integer)
        pv: Present value (loan principal)
        fv: Balloon remaining after the last payment (default 0)
        when: 0 = payments at end of period, 1 = beginning (default 0)

    Returns:
        AmortizationSchedule with one row per period

    Raises:
        InvalidArgumentError: If nper is not a positive integer
        Warning: If rate is zero
    """
    if nper <= 0 or int(nper) != nper:
        raise InvalidArgumentError(f"nper must be a positive integer, got {nper}")
    nper = int(nper)
    if rate == 0:
        warnings.warn("rate is zero, returning straight-line amortization", TVMWarning)

    period = np.arange(1, nper + 1)
    payment = np.full(nper, tvm_annuity.pmt(rate, nper, pv, fv, when))
    interest = np.array([ipmt(rate, per, nper, pv, fv, when) for per in period], dtype=float)
    principal = payment - interest
    ending_balance = pv + np.cumsum(principal)

    return AmortizationSchedule(
        period=period,
        payment=payment,
        interest=interest,
        principal=principal,
        ending_balance=ending_balance,
    )

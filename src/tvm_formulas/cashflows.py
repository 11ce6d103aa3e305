# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

import warnings
from collections.abc import Sequence
from enum import Enum

import numpy as np

from . import annuity as tvm_annuity
from .errors import EmptyCashFlowError, InvalidArgumentError, TVMWarning

__version__ = "0.1.0"


# =============================================================================
# Cash-Flow Valuation (NPV, MIRR) and the IRR residual
# =============================================================================
#
# Two discounting conventions live here and must not be mixed up:
#
#   eval_npv / npv   forward discounting, first value discounted ONE period:
#                        Σ values[i] / (1+r)^(i+1)
#                    (spreadsheet NPV, not the "economist" t=0 convention)
#
#   internal_pv      backward Horner discounting, first non-zero value at t=0:
#                        Σ values[t] / (1+r)^(t − t₀)
#                    (residual whose root is the IRR)
#
# For a series without leading zeros: npv(r, *values) = internal_pv(values, r) / (1+r)
# =============================================================================

class SignFilter(Enum):
    """Which cash flows eval_npv() accumulates."""
    NONE = 0
    POSITIVE = 1
    NEGATIVE = -1


def _as_values(values: Sequence[float] | np.ndarray) -> list[float]:
    return [float(v) for v in np.asarray(values, dtype=float).ravel()]


def has_sign_change(values: Sequence[float] | np.ndarray) -> bool:
    """True if the series holds at least one positive and one negative value."""
    arr = np.asarray(values, dtype=float)
    return bool((arr > 0).any() and (arr < 0).any())


def eval_npv(
        rate: float,
        values: Sequence[float] | np.ndarray,
        sign_filter: SignFilter = SignFilter.NONE
) -> float:
    """
    Forward-discounted value of a cash-flow series.

    A running discount factor starts at 1 and is multiplied by (1 + rate)
    before each value, so values[i] is divided by (1+rate)^(i+1). With a
    sign filter, excluded values still advance the discount factor; only
    their contribution is dropped.

    No argument checking is done here; see npv() for the checked entry point.

    Args:
        rate: Discount rate per period as decimal
        values: Cash flows in period order
        sign_filter: SignFilter.NONE (all values), POSITIVE or NEGATIVE only

    Returns:
        Discounted sum
    """
    growth = 1 + rate
    discount = 1.0
    total = 0.0
    for value in _as_values(values):
        discount *= growth
        if (sign_filter is SignFilter.NONE
                or (sign_filter is SignFilter.POSITIVE and value > 0)
                or (sign_filter is SignFilter.NEGATIVE and value < 0)):
            total += value / discount
    return total


def npv(rate: float, *values: float) -> float:
    """
    Net present value of periodic cash flows (spreadsheet NPV).

    The first value is discounted one full period; to value a series whose
    first cash flow is at t=0, add it outside the call:
        values[0] + npv(rate, *values[1:])

    Args:
        rate: Discount rate per period as decimal
        *values: Cash flows value1 ... valueN in period order

    Returns:
        Net present value

    Raises:
        EmptyCashFlowError: If no values are supplied
        InvalidArgumentError: If rate is -1 (zero discount factor)

    Example:
        >>> round(npv(0.1, -10000, 3000, 4200, 6800), 2)
        1188.44
    """
    if len(values) < 1:
        raise EmptyCashFlowError("npv requires at least one value")
    if rate == -1:
        raise InvalidArgumentError("rate must not be -1 (division by zero in discount factor)")
    return eval_npv(rate, values, SignFilter.NONE)


def internal_pv(values: Sequence[float] | np.ndarray, rate: float) -> float:
    """
    Present value at the first non-zero cash flow, by Horner's scheme.

    Walks the series from the last value back to the first non-zero one:
        total = total / (1+rate) + values[i]
    which equals Σ values[t] / (1+rate)^(t − t₀), t₀ = index of the first
    non-zero value. Leading zeros contribute nothing and only shift t₀.

    Args:
        values: Cash flows in period order
        rate: Candidate rate as decimal (must not be -1)

    Returns:
        Present value of the series at t₀ (0.0 for an all-zero series)

    Raises:
        InvalidArgumentError: If rate is -1
    """
    divisor = 1 + rate
    if divisor == 0:
        raise InvalidArgumentError("rate must not be -1 (division by zero in discount factor)")
    flows = _as_values(values)
    lower = 0
    while lower < len(flows) and flows[lower] == 0:
        lower += 1

    total = 0.0
    for value in reversed(flows[lower:]):
        total = total / divisor + value
    return total


def mirr(
        values: Sequence[float] | np.ndarray,
        finance_rate: float,
        reinvest_rate: float
) -> float:
    """
    Modified internal rate of return (spreadsheet MIRR).

    Negative flows are financed at finance_rate (discounted to t=0); positive
    flows are reinvested at reinvest_rate (compounded to the last period):

        MIRR = [ −FV(positive, rr) / PV(negative, fr) ]^(1/(n−1)) − 1

    where, with the forward-discount convention of eval_npv,
        FV(positive, rr) = eval_npv(rr, values, POSITIVE) · (1+rr)^n
        PV(negative, fr) = eval_npv(fr, values, NEGATIVE) · (1+fr)

    Args:
        values: Cash flows in period order (at least one positive and one negative)
        finance_rate: Rate paid on negative cash flows
        reinvest_rate: Rate earned on positive cash flows

    Returns:
        MIRR as decimal

    Raises:
        EmptyCashFlowError: If values is empty
        InvalidArgumentError: If either rate is -1
        InvalidArgumentError: If values lacks a positive or a negative flow
    """
    flows = _as_values(values)
    n = len(flows)
    if n == 0:
        raise EmptyCashFlowError("mirr requires at least one value")
    if finance_rate == -1:
        raise InvalidArgumentError("finance_rate must not be -1")
    if reinvest_rate == -1:
        raise InvalidArgumentError("reinvest_rate must not be -1")
    if not has_sign_change(flows):
        warnings.warn("mirr values need at least one positive and one negative cash flow", TVMWarning)
        raise InvalidArgumentError("mirr values need at least one positive and one negative cash flow")

    negative_pv = eval_npv(finance_rate, flows, SignFilter.NEGATIVE) * (1 + finance_rate)
    positive_fv = eval_npv(reinvest_rate, flows, SignFilter.POSITIVE) * tvm_annuity.growth_factor(reinvest_rate, n)
    return (-positive_fv / negative_pv) ** (1.0 / (n - 1)) - 1

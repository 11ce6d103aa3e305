# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

import warnings
from collections.abc import Sequence

import numpy as np

from . import annuity as tvm_annuity
from . import cashflows as tvm_cashflows
from .config import DEFAULTS, IRR_SETTINGS, RATE_SETTINGS, SolverSettings
from .errors import EmptyCashFlowError, InvalidArgumentError, NumericError, TVMWarning

__version__ = "0.1.0"


# =============================================================================
# Iterative Solvers: RATE and IRR
# =============================================================================
#
# Neither the annuity identity nor the NPV polynomial can be inverted for the
# rate in closed form, so both are solved with the secant method:
#
#     r₂ = r₁ − (r₁ − r₀) · f(r₁) / (f(r₁) − f(r₀))
#
# Only the latest two trial points are kept (this is not regula falsi, the
# root is not kept bracketed). If both points have the same residual the
# slope is undefined; r₀ is nudged one `step` away from r₁ and re-evaluated
# once before giving up.
#
# The constants (step 1e-5, epsilon 1e-7, 128 / 40 iterations, the 0.01 NPV
# scale) reproduce spreadsheet results, including its non-convergence cases.
# All solver state is local to each call.
# =============================================================================

def eval_rate(
        rate: float,
        nper: float,
        pmt: float,
        pv: float,
        fv: float = DEFAULTS.fv,
        when: int = DEFAULTS.when
) -> float:
    """
    Residual of the annuity identity at a candidate rate (RATE's objective).

        rate = 0:  pv + pmt·nper + fv
        rate ≠ 0:  pv·(1+r)ⁿ + pmt·(1+r·when)·[(1+r)ⁿ − 1]/r + fv

    Zero exactly when `rate` is the periodic rate of the payment schedule.
    """
    if rate == 0:
        return pv + pmt * nper + fv
    growth = tvm_annuity.growth_factor(rate, nper)
    return pv * growth + pmt * (1 + rate * when) * (growth - 1) / rate + fv


def rate(
        nper: float,
        pmt: float,
        pv: float,
        fv: float = DEFAULTS.fv,
        when: int = DEFAULTS.when,
        guess: float = DEFAULTS.guess,
        settings: SolverSettings | None = None
) -> float:
    """
    Periodic interest rate of a level payment schedule (spreadsheet RATE).

    ALGORITHM:
    ----------
    1. r₀ = guess, y₀ = eval_rate(r₀)
    2. Second trial point: r₁ = r₀/2 if y₀ > 0 else 2·r₀
    3. Secant updates until |eval_rate(r)| < tolerance (1e-7), for at most
       max_iterations (128) updates

    The convergence test is on the absolute residual, in money units.

    Args:
        nper: Total number of payment periods (must be positive)
        pmt: Payment made each period
        pv: Present value
        fv: Future value after the last payment (default 0)
        when: 0 = payments at end of period, 1 = beginning (default 0)
        guess: Starting rate (default 0.1)
        settings: Iteration controls (default RATE_SETTINGS)

    Returns:
        Rate per period as decimal

    Raises:
        InvalidArgumentError: If nper is not positive
        NumericError: If the secant slope stays zero after nudging ("#NUM!")
        NumericError: If the iteration budget runs out ("did not converge")

    Example:
        >>> round(rate(48, -200, 8000), 4)
        0.0077
    """
    settings = settings or RATE_SETTINGS
    when = tvm_annuity.payment_timing(when)
    if nper <= 0:
        raise InvalidArgumentError(f"nper must be positive, got {nper}")

    def residual(r: float) -> float:
        return eval_rate(r, nper, pmt, pv, fv, when)

    rate0 = guess
    y0 = residual(rate0)
    rate1 = rate0 / 2 if y0 > 0 else rate0 * 2
    y1 = residual(rate1)

    for _ in range(settings.max_iterations):
        if y1 == y0:
            rate0 = rate0 - settings.step if rate1 > rate0 else rate0 + settings.step
            y0 = residual(rate0)
            if y1 == y0:
                raise NumericError("#NUM!: RATE secant slope is zero and could not be resolved")

        rate0 = rate1 - (rate1 - rate0) * y1 / (y1 - y0)
        y0 = residual(rate0)
        if abs(y0) < settings.tolerance:
            return rate0

        rate0, y0, rate1, y1 = rate1, y1, rate0, y0

    raise NumericError(
        f"RATE did not converge within {settings.max_iterations} iterations "
        f"(nper={nper}, pmt={pmt}, pv={pv}, fv={fv}, when={when}, guess={guess})"
    )


def irr(
        values: Sequence[float] | np.ndarray,
        guess: float = DEFAULTS.guess,
        settings: SolverSettings | None = None
) -> float:
    """
    Internal rate of return of periodic cash flows (spreadsheet IRR).

    Finds r with internal_pv(values, r) = 0.

    ALGORITHM:
    ----------
    1. eps_npv = max(|values|) · tolerance · npv_scale   (scale-aware NPV tolerance)
    2. r₀ = guess; r₁ = r₀ ± step, stepping toward the root
    3. Secant updates; an update landing at or below -1 is pulled back to
       (r₁ − 1)/2, which is always above -1 while r₁ is
    4. Converged when |r₀ − r₁| < tolerance AND |NPV(r₀)| < eps_npv

    Args:
        values: Cash flows in period order; needs at least one sign change
        guess: Starting rate (default 0.1, must be greater than -1)
        settings: Iteration controls (default IRR_SETTINGS)

    Returns:
        IRR per period as decimal

    Raises:
        InvalidArgumentError: If guess <= -1, or the second trial rate <= -1
        EmptyCashFlowError: If values is empty
        NumericError: If the secant slope stays zero after nudging ("invalid values")
        NumericError: If the iteration budget runs out ("iteration limit exceeded")
        Warning: If values has no sign change (the solve will normally fail)

    Example:
        >>> round(irr([-1500, 500, 500, 500, 500]), 4)
        0.1259
    """
    settings = settings or IRR_SETTINGS
    if guess <= -1:
        raise InvalidArgumentError(f"guess must be greater than -1, got {guess}")
    flows = np.asarray(values, dtype=float).ravel()
    if flows.size == 0:
        raise EmptyCashFlowError("irr requires at least one value")
    if not tvm_cashflows.has_sign_change(flows):
        warnings.warn(
            "irr values have no sign change; the internal rate of return is undefined",
            TVMWarning,
        )

    eps_npv = float(np.max(np.abs(flows))) * settings.tolerance * settings.npv_scale
    step = settings.step

    rate0 = guess
    npv0 = tvm_cashflows.internal_pv(flows, rate0)
    rate1 = rate0 + step if npv0 > 0 else rate0 - step
    if rate1 <= -1:
        raise InvalidArgumentError(f"second trial rate {rate1} is not greater than -1; use a larger guess")
    npv1 = tvm_cashflows.internal_pv(flows, rate1)

    for _ in range(settings.max_iterations):
        if npv1 == npv0:
            rate0 = rate0 - step if rate1 > rate0 else rate0 + step
            npv0 = tvm_cashflows.internal_pv(flows, rate0)
            if npv1 == npv0:
                raise NumericError("IRR invalid values: secant slope is zero and could not be resolved")

        rate0 = rate1 - (rate1 - rate0) * npv1 / (npv1 - npv0)
        if rate0 <= -1:
            rate0 = (rate1 - 1) / 2
        npv0 = tvm_cashflows.internal_pv(flows, rate0)
        if abs(rate0 - rate1) < settings.tolerance and abs(npv0) < eps_npv:
            return rate0

        rate0, npv0, rate1, npv1 = rate1, npv1, rate0, npv0

    raise NumericError(f"IRR iteration limit exceeded ({settings.max_iterations} iterations)")

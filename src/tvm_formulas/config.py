# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

__version__ = "0.1.0"


# =============================================================================
# Payment Timing
# =============================================================================

class PaymentTiming(IntEnum):
    """Spreadsheet `type` argument: when payments fall within each period."""
    END = 0      # arrears (ordinary annuity)
    BEGIN = 1    # advance (annuity due)


# =============================================================================
# Optional Argument Defaults
# =============================================================================

@dataclass(frozen=True)
class TVMDefaults:
    """
    Values used for optional spreadsheet arguments that are omitted.

    fv:    future value / balloon left after the last payment
    when:  payment timing, 0 = end of period, 1 = beginning of period
    guess: seed rate for the RATE and IRR solvers
    """
    fv: float = 0.0
    when: int = PaymentTiming.END
    guess: float = 0.1


DEFAULTS = TVMDefaults()


# =============================================================================
# Solver Settings
# =============================================================================

@dataclass(frozen=True)
class SolverSettings:
    """
    Iteration controls for the secant solvers.

    max_iterations: hard ceiling on secant updates (bounds the runtime)
    tolerance:      convergence epsilon (residual for RATE, rate delta for IRR)
    step:           nudge applied when two trial points have the same residual
    npv_scale:      IRR only; eps_npv = max(|values|) * tolerance * npv_scale
    """
    max_iterations: int
    tolerance: float
    step: float
    npv_scale: float = 1.0

    def __post_init__(self) -> None:
        if self.max_iterations <= 0:
            raise ValueError(f"max_iterations must be positive, got {self.max_iterations}")
        if self.tolerance <= 0:
            raise ValueError(f"tolerance must be positive, got {self.tolerance}")
        if self.step <= 0:
            raise ValueError(f"step must be positive, got {self.step}")
        if self.npv_scale <= 0:
            raise ValueError(f"npv_scale must be positive, got {self.npv_scale}")


RATE_SETTINGS = SolverSettings(max_iterations=128, tolerance=1e-7, step=1e-5)
IRR_SETTINGS = SolverSettings(max_iterations=40, tolerance=1e-7, step=1e-5, npv_scale=0.01)

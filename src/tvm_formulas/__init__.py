# Requires Python 3.12+
"""
TVM Formulas: spreadsheet-compatible time-value-of-money functions.

Closed-form annuity formulas (PV, FV, PMT, NPER, IPMT, PPMT), cash-flow
valuation (NPV, MIRR) and the secant solvers RATE and IRR, matching
spreadsheet results to 8 decimal places.
"""

from __future__ import annotations

__version__ = "0.1.0"

# Configuration and errors
from tvm_formulas.config import (
    PaymentTiming,
    TVMDefaults,
    DEFAULTS,
    SolverSettings,
    RATE_SETTINGS,
    IRR_SETTINGS,
)
from tvm_formulas.errors import (
    ErrorKind,
    TVMWarning,
    TVMError,
    InvalidArgumentError,
    LogDomainError,
    EmptyCashFlowError,
    NumericError,
    TVMResult,
    evaluate,
)

# Annuity formulas
from tvm_formulas.annuity import (
    growth_factor,
    pv,
    fv,
    pmt,
    nper,
    pv_vector,
    fv_vector,
    pmt_vector,
)

# Periodic payment split
from tvm_formulas.payments import (
    ipmt,
    ppmt,
    cumipmt,
    cumprinc,
    AmortizationSchedule,
    amortization_schedule,
)

# Cash-flow valuation
from tvm_formulas.cashflows import (
    SignFilter,
    has_sign_change,
    eval_npv,
    npv,
    internal_pv,
    mirr,
)

# Solvers
from tvm_formulas.solvers import (
    eval_rate,
    rate,
    irr,
)

# Facade
from tvm_formulas.finance import Finance

__all__ = [
    "__version__",
    # Configuration
    "PaymentTiming",
    "TVMDefaults",
    "DEFAULTS",
    "SolverSettings",
    "RATE_SETTINGS",
    "IRR_SETTINGS",
    # Errors
    "ErrorKind",
    "TVMWarning",
    "TVMError",
    "InvalidArgumentError",
    "LogDomainError",
    "EmptyCashFlowError",
    "NumericError",
    "TVMResult",
    "evaluate",
    # Annuity formulas
    "growth_factor",
    "pv",
    "fv",
    "pmt",
    "nper",
    "pv_vector",
    "fv_vector",
    "pmt_vector",
    # Periodic payment split
    "ipmt",
    "ppmt",
    "cumipmt",
    "cumprinc",
    "AmortizationSchedule",
    "amortization_schedule",
    # Cash-flow valuation
    "SignFilter",
    "has_sign_change",
    "eval_npv",
    "npv",
    "internal_pv",
    "mirr",
    # Solvers
    "eval_rate",
    "rate",
    "irr",
    # Facade
    "Finance",
]

# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

from collections.abc import Sequence

from . import annuity as tvm_annuity
from . import cashflows as tvm_cashflows
from . import payments as tvm_payments
from . import solvers as tvm_solvers
from .config import DEFAULTS, IRR_SETTINGS, RATE_SETTINGS, SolverSettings, TVMDefaults
from .errors import TVMResult, evaluate

__version__ = "0.1.0"


# =============================================================================
# Spreadsheet-style Facade
# =============================================================================
#
# Exposes the formulas under their spreadsheet names and argument order for
# calculator front ends. Optional arguments left as None take the facade's
# TVMDefaults, so a caller can e.g. switch every formula to payments in
# advance with Finance(TVMDefaults(when=1)).
# =============================================================================

class Finance:
    """Spreadsheet TVM functions bound to a set of defaults and solver settings."""

    def __init__(
            self,
            defaults: TVMDefaults = DEFAULTS,
            rate_settings: SolverSettings = RATE_SETTINGS,
            irr_settings: SolverSettings = IRR_SETTINGS
    ) -> None:
        self.defaults = defaults
        self.rate_settings = rate_settings
        self.irr_settings = irr_settings

    def _fv(self, fv: float | None) -> float:
        return self.defaults.fv if fv is None else fv

    def _when(self, when: int | None) -> int:
        return self.defaults.when if when is None else when

    def _guess(self, guess: float | None) -> float:
        return self.defaults.guess if guess is None else guess

    def PV(self, rate: float, nper: float, pmt: float, fv: float | None = None, type: int | None = None) -> float:
        return tvm_annuity.pv(rate, nper, pmt, self._fv(fv), self._when(type))

    def FV(self, rate: float, nper: float, pmt: float, pv: float, type: int | None = None) -> float:
        return tvm_annuity.fv(rate, nper, pmt, pv, self._when(type))

    def PMT(self, rate: float, nper: float, pv: float, fv: float | None = None, type: int | None = None) -> float:
        return tvm_annuity.pmt(rate, nper, pv, self._fv(fv), self._when(type))

    def NPER(self, rate: float, pmt: float, pv: float, fv: float | None = None, type: int | None = None) -> float:
        return tvm_annuity.nper(rate, pmt, pv, self._fv(fv), self._when(type))

    def IPMT(self, rate: float, per: float, nper: float, pv: float,
             fv: float | None = None, type: int | None = None) -> float:
        return tvm_payments.ipmt(rate, per, nper, pv, self._fv(fv), self._when(type))

    def PPMT(self, rate: float, per: float, nper: float, pv: float,
             fv: float | None = None, type: int | None = None) -> float:
        return tvm_payments.ppmt(rate, per, nper, pv, self._fv(fv), self._when(type))

    def CUMIPMT(self, rate: float, nper: int, pv: float, start_period: int, end_period: int,
                type: int | None = None) -> float:
        return tvm_payments.cumipmt(rate, nper, pv, start_period, end_period, self._when(type))

    def CUMPRINC(self, rate: float, nper: int, pv: float, start_period: int, end_period: int,
                 type: int | None = None) -> float:
        return tvm_payments.cumprinc(rate, nper, pv, start_period, end_period, self._when(type))

    def NPV(self, rate: float, *values: float) -> float:
        return tvm_cashflows.npv(rate, *values)

    def MIRR(self, values: Sequence[float], finance_rate: float, reinvest_rate: float) -> float:
        return tvm_cashflows.mirr(values, finance_rate, reinvest_rate)

    def IRR(self, values: Sequence[float], guess: float | None = None) -> float:
        return tvm_solvers.irr(values, self._guess(guess), self.irr_settings)

    def RATE(self, nper: float, pmt: float, pv: float, fv: float | None = None,
             type: int | None = None, guess: float | None = None) -> float:
        return tvm_solvers.rate(
            nper, pmt, pv, self._fv(fv), self._when(type), self._guess(guess), self.rate_settings
        )

    def evaluate(self, name: str, *args, **kwargs) -> TVMResult:
        """
        Call a formula by spreadsheet name and return a TVMResult instead of raising.

        >>> Finance().evaluate("NPER", 0, 0, 1000).kind
        <ErrorKind.INVALID_ARGUMENT: 'INVALID_ARGUMENT'>
        """
        func = getattr(self, name.upper(), None)
        if func is None or name.upper() not in FORMULA_NAMES:
            raise AttributeError(f"unknown formula {name!r}")
        return evaluate(func, *args, **kwargs)


FORMULA_NAMES = (
    "PV", "FV", "PMT", "NPER", "IPMT", "PPMT", "CUMIPMT", "CUMPRINC",
    "NPV", "MIRR", "IRR", "RATE",
)

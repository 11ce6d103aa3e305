"""
TVM Formulas - Spreadsheet Reference Examples

**Version**: 0.1.0
**Last Updated**: 2026-10-18
**Status**: Active

Worked examples with the values a spreadsheet produces for the same inputs.
Used by tests/test_examples_verification.py to check every formula against a
known-good reference.

Structure:
  Formula           - which function the example exercises
  SpreadsheetExample - inputs (positional args in spreadsheet order), expected
                       result and the number of decimal places it is quoted to

Sources:
  - PV-1 .. PV-5: reference test cases, quoted to 8 decimals
  - all others: published spreadsheet function documentation, quoted to the
    precision shown there (usually cents)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple


# =============================================================================
# ENUMS
# =============================================================================

class Formula(Enum):
    """Spreadsheet function names."""
    PV = "PV"
    FV = "FV"
    PMT = "PMT"
    NPER = "NPER"
    IPMT = "IPMT"
    PPMT = "PPMT"
    CUMIPMT = "CUMIPMT"
    CUMPRINC = "CUMPRINC"
    NPV = "NPV"
    MIRR = "MIRR"
    IRR = "IRR"
    RATE = "RATE"


# =============================================================================
# EXAMPLE CONTAINER
# =============================================================================

@dataclass
class SpreadsheetExample:
    """
    One spreadsheet call with its expected result.

    args are in spreadsheet argument order (e.g. PV(rate, nper, pmt, fv, type)),
    so they can be passed straight to the Finance facade method of the same name.
    offset is added to the formula result before comparing; it is used for the
    NPV examples where the spreadsheet adds a t=0 cash flow outside NPV().
    """
    id: str
    description: str
    formula: Formula
    args: Tuple[Any, ...]
    expected: float
    places: int
    kwargs: Dict[str, Any] = field(default_factory=dict)
    offset: float = 0.0

    @property
    def call(self) -> str:
        """Spreadsheet-style rendering, e.g. 'PV(0.0525, 5, 6000)'."""
        return f"{self.formula.value}({', '.join(repr(a) for a in self.args)})"


# =============================================================================
# PRESENT VALUE
# =============================================================================

PV_1 = SpreadsheetExample(
    id="PV-1",
    description="5 annual payments of 6000 at 5.25%, paid in arrears.",
    formula=Formula.PV,
    args=(0.0525, 5, 6000),
    expected=-25798.316343571,
    places=8,
)

PV_2 = SpreadsheetExample(
    id="PV-2",
    description="10 annual payments of 150000 at 6.88% plus 10000 at maturity.",
    formula=Formula.PV,
    args=(0.0688, 10, 150000, 10000),
    expected=-1064546.969721610,
    places=8,
)

PV_3 = SpreadsheetExample(
    id="PV-3",
    description="60 monthly lease payments of 3250 in advance at 0.6875% per month.",
    formula=Formula.PV,
    args=(0.006875, 60, 3250, 0, 1),
    expected=-160438.486624723,
    places=8,
)

PV_4 = SpreadsheetExample(
    id="PV-4",
    description="15-year monthly annuity of 525 at 11% annual plus 50 at maturity.",
    formula=Formula.PV,
    args=(0.11 / 12, 180, 525, 50),
    expected=-46200.1919210731,
    places=8,
)

PV_5 = SpreadsheetExample(
    id="PV-5",
    description="8 payments of 32.5 in advance at 1.0625% per period.",
    formula=Formula.PV,
    args=(0.010625, 8, 32.5, 0, 1),
    expected=-250.631442440053,
    places=8,
)

PV_6 = SpreadsheetExample(
    id="PV-6",
    description="Insurance annuity paying 500 monthly for 20 years at 8% annual.",
    formula=Formula.PV,
    args=(0.08 / 12, 12 * 20, 500, 0),
    expected=-59777.15,
    places=2,
)


# =============================================================================
# FUTURE VALUE
# =============================================================================

FV_1 = SpreadsheetExample(
    id="FV-1",
    description="Deposit 500 then 200 monthly in advance for 10 months at 6% annual.",
    formula=Formula.FV,
    args=(0.06 / 12, 10, -200, -500, 1),
    expected=2581.40,
    places=2,
)

FV_2 = SpreadsheetExample(
    id="FV-2",
    description="1000 monthly in arrears for 12 months at 12% annual.",
    formula=Formula.FV,
    args=(0.12 / 12, 12, -1000, 0),
    expected=12682.50,
    places=2,
)

FV_3 = SpreadsheetExample(
    id="FV-3",
    description="2000 monthly in advance for 35 months at 11% annual.",
    formula=Formula.FV,
    args=(0.11 / 12, 35, -2000, 0, 1),
    expected=82846.25,
    places=2,
)


# =============================================================================
# PAYMENT
# =============================================================================

PMT_1 = SpreadsheetExample(
    id="PMT-1",
    description="Repay 10000 over 10 months at 8% annual, payments in arrears.",
    formula=Formula.PMT,
    args=(0.08 / 12, 10, 10000),
    expected=-1037.03,
    places=2,
)

PMT_2 = SpreadsheetExample(
    id="PMT-2",
    description="Repay 10000 over 10 months at 8% annual, payments in advance.",
    formula=Formula.PMT,
    args=(0.08 / 12, 10, 10000, 0, 1),
    expected=-1030.16,
    places=2,
)

PMT_3 = SpreadsheetExample(
    id="PMT-3",
    description="Receive 2325.73 a year for 5 years on a 10000 investment at 5.25%.",
    formula=Formula.PMT,
    args=(0.0525, 5, -10000),
    expected=2325.73,
    places=2,
)

PMT_4 = SpreadsheetExample(
    id="PMT-4",
    description="Monthly saving to accumulate 50000 in 18 years at 6% annual.",
    formula=Formula.PMT,
    args=(0.06 / 12, 18 * 12, 0, 50000),
    expected=-129.08,
    places=2,
)


# =============================================================================
# NUMBER OF PERIODS
# =============================================================================

NPER_1 = SpreadsheetExample(
    id="NPER-1",
    description="Periods to reach 10000 from 1000 saving 100 monthly in advance at 12% annual.",
    formula=Formula.NPER,
    args=(0.12 / 12, -100, -1000, 10000, 1),
    expected=59.6738657,
    places=6,
)

NPER_2 = SpreadsheetExample(
    id="NPER-2",
    description="As NPER-1 with payments in arrears.",
    formula=Formula.NPER,
    args=(0.12 / 12, -100, -1000, 10000),
    expected=60.0821229,
    places=6,
)

NPER_3 = SpreadsheetExample(
    id="NPER-3",
    description="Target of zero future value gives a negative period count.",
    formula=Formula.NPER,
    args=(0.12 / 12, -100, -1000),
    expected=-9.57859404,
    places=6,
)


# =============================================================================
# INTEREST / PRINCIPAL SPLIT
# =============================================================================

IPMT_1 = SpreadsheetExample(
    id="IPMT-1",
    description="Interest in month 1 of a 3-year 8000 loan at 10% annual.",
    formula=Formula.IPMT,
    args=(0.1 / 12, 1, 3 * 12, 8000),
    expected=-66.67,
    places=2,
)

IPMT_2 = SpreadsheetExample(
    id="IPMT-2",
    description="Interest in year 3 of a 3-year 8000 loan at 10% annual.",
    formula=Formula.IPMT,
    args=(0.1, 3, 3, 8000),
    expected=-292.45,
    places=2,
)

PPMT_1 = SpreadsheetExample(
    id="PPMT-1",
    description="Principal in month 1 of a 2-year 2000 loan at 10% annual.",
    formula=Formula.PPMT,
    args=(0.1 / 12, 1, 2 * 12, 2000),
    expected=-75.62,
    places=2,
)

PPMT_2 = SpreadsheetExample(
    id="PPMT-2",
    description="Principal in year 10 of a 10-year 200000 loan at 8% annual.",
    formula=Formula.PPMT,
    args=(0.08, 10, 10, 200000),
    expected=-27598.05,
    places=2,
)

CUMIPMT_1 = SpreadsheetExample(
    id="CUMIPMT-1",
    description="Interest paid in year 2 (months 13-24) of a 30-year 125000 mortgage at 9%.",
    formula=Formula.CUMIPMT,
    args=(0.09 / 12, 30 * 12, 125000, 13, 24, 0),
    expected=-11135.23,
    places=2,
)

CUMIPMT_2 = SpreadsheetExample(
    id="CUMIPMT-2",
    description="Interest paid in month 1 of the same mortgage.",
    formula=Formula.CUMIPMT,
    args=(0.09 / 12, 30 * 12, 125000, 1, 1, 0),
    expected=-937.50,
    places=2,
)

CUMPRINC_1 = SpreadsheetExample(
    id="CUMPRINC-1",
    description="Principal paid in year 2 (months 13-24) of a 30-year 125000 mortgage at 9%.",
    formula=Formula.CUMPRINC,
    args=(0.09 / 12, 30 * 12, 125000, 13, 24, 0),
    expected=-934.1071234,
    places=4,
)

CUMPRINC_2 = SpreadsheetExample(
    id="CUMPRINC-2",
    description="Principal paid in month 1 of the same mortgage.",
    formula=Formula.CUMPRINC,
    args=(0.09 / 12, 30 * 12, 125000, 1, 1, 0),
    expected=-68.27827118,
    places=4,
)


# =============================================================================
# NET PRESENT VALUE / MIRR
# =============================================================================

NPV_1 = SpreadsheetExample(
    id="NPV-1",
    description="Investment of 10000 one year from today returning 3000, 4200, 6800 at 10%.",
    formula=Formula.NPV,
    args=(0.1, -10000, 3000, 4200, 6800),
    expected=1188.44,
    places=2,
)

NPV_2 = SpreadsheetExample(
    id="NPV-2",
    description="40000 paid today (outside NPV), five annual returns at 8%.",
    formula=Formula.NPV,
    args=(0.08, 8000, 9200, 10000, 12000, 14500),
    offset=-40000,
    expected=1922.06,
    places=2,
)

NPV_3 = SpreadsheetExample(
    id="NPV-3",
    description="As NPV-2 with a 9000 loss in year 6.",
    formula=Formula.NPV,
    args=(0.08, 8000, 9200, 10000, 12000, 14500, -9000),
    offset=-40000,
    expected=-3749.47,
    places=2,
)

MIRR_1 = SpreadsheetExample(
    id="MIRR-1",
    description="120000 boat financed at 10%, five years of income reinvested at 12%.",
    formula=Formula.MIRR,
    args=([-120000, 39000, 30000, 21000, 37000, 46000], 0.10, 0.12),
    expected=0.1261,
    places=4,
)


# =============================================================================
# INTERNAL RATE OF RETURN / RATE
# =============================================================================

IRR_1 = SpreadsheetExample(
    id="IRR-1",
    description="1500 invested, four annual returns of 500.",
    formula=Formula.IRR,
    args=([-1500, 500, 500, 500, 500],),
    expected=0.1259,
    places=4,
)

IRR_2 = SpreadsheetExample(
    id="IRR-2",
    description="70000 business, four years of net income: still negative.",
    formula=Formula.IRR,
    args=([-70000, 12000, 15000, 18000, 21000],),
    expected=-0.02124,
    places=4,
)

IRR_3 = SpreadsheetExample(
    id="IRR-3",
    description="As IRR-2 with a fifth year of 26000.",
    formula=Formula.IRR,
    args=([-70000, 12000, 15000, 18000, 21000, 26000],),
    expected=0.08663,
    places=4,
)

IRR_4 = SpreadsheetExample(
    id="IRR-4",
    description="Two years of income only; needs a negative guess.",
    formula=Formula.IRR,
    args=([-70000, 12000, 15000], -0.10),
    expected=-0.4435,
    places=4,
)

RATE_1 = SpreadsheetExample(
    id="RATE-1",
    description="Monthly rate of a 4-year 8000 loan repaid at 200 a month.",
    formula=Formula.RATE,
    args=(4 * 12, -200, 8000),
    expected=0.0077,
    places=4,
)


SPREADSHEET_EXAMPLES = {
    ex.id: ex for ex in (
        PV_1, PV_2, PV_3, PV_4, PV_5, PV_6,
        FV_1, FV_2, FV_3,
        PMT_1, PMT_2, PMT_3, PMT_4,
        NPER_1, NPER_2, NPER_3,
        IPMT_1, IPMT_2, PPMT_1, PPMT_2,
        CUMIPMT_1, CUMIPMT_2, CUMPRINC_1, CUMPRINC_2,
        NPV_1, NPV_2, NPV_3, MIRR_1,
        IRR_1, IRR_2, IRR_3, IRR_4,
        RATE_1,
    )
}

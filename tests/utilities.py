"""
Test Suite Utilities for TVM Formula Tests

Provides reproducible random annuity and cash-flow scenario generators for
the round-trip and solver tests.

Version: 0.1.0
Last Updated: 2026-10-18
Status: Active
"""

from __future__ import annotations

import numpy as np
from dataclasses import dataclass

from tvm_formulas.annuity import pmt


# =============================================================================
# Random Seed for Reproducibility
# =============================================================================

RANDOM_SEED = 42


def get_random_state(seed: int = RANDOM_SEED) -> np.random.RandomState:
    """Get a reproducible random state."""
    return np.random.RandomState(seed)


# =============================================================================
# Annuity Scenario
# =============================================================================

@dataclass
class AnnuityScenario:
    """Inputs of one level-payment loan plus its computed payment."""
    scenario_id: int
    rate: float        # per-period rate as decimal
    nper: int
    pv: float          # principal received (positive)
    fv: float          # balloon owed at maturity (zero or negative)
    when: int          # 0 = arrears, 1 = advance

    @property
    def pmt(self) -> float:
        return pmt(self.rate, self.nper, self.pv, self.fv, self.when)


def generate_random_annuity(scenario_id: int, rng: np.random.RandomState) -> AnnuityScenario:
    """Generate a realistic loan: 0.2%-2% per period, 12-120 periods."""
    rate = rng.uniform(0.002, 0.02)
    nper = int(rng.randint(12, 121))
    pv = rng.uniform(1_000, 100_000)
    fv = 0.0 if rng.random() < 0.5 else -pv * rng.uniform(0.05, 0.3)
    when = int(rng.randint(0, 2))
    return AnnuityScenario(
        scenario_id=scenario_id,
        rate=rate,
        nper=nper,
        pv=pv,
        fv=fv,
        when=when,
    )


def generate_random_annuities(count: int = 50, seed: int = RANDOM_SEED) -> list[AnnuityScenario]:
    """Generate a list of random annuity scenarios."""
    rng = get_random_state(seed)
    return [generate_random_annuity(i, rng) for i in range(count)]


# =============================================================================
# Cash-Flow Series Generator
# =============================================================================

def generate_investment_cashflows(
        count: int = 25,
        seed: int = RANDOM_SEED
) -> list[tuple[float, list[float]]]:
    """
    Generate (true_rate, values) pairs: an initial outlay followed by level
    returns priced at true_rate, so irr(values) must recover true_rate.
    """
    rng = get_random_state(seed)
    cases = []
    for _ in range(count):
        true_rate = rng.uniform(0.01, 0.25)
        periods = int(rng.randint(3, 31))
        outlay = rng.uniform(1_000, 1_000_000)
        level_return = pmt(true_rate, periods, -outlay)
        cases.append((true_rate, [-outlay] + [level_return] * periods))
    return cases

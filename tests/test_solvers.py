"""
Unit tests for the secant solvers RATE and IRR.

The IRR root is cross-verified against scipy.optimize.brentq on the same
residual (internal_pv), which brackets the root instead of extrapolating.

Version: 0.1.0
Last Updated: 2026-10-18
Status: Active
"""

import unittest
import warnings
from unittest import mock

import numpy as np
from scipy.optimize import brentq

from tvm_formulas import cashflows as tvm_cashflows
from tvm_formulas.annuity import pmt
from tvm_formulas.cashflows import internal_pv, npv
from tvm_formulas.config import IRR_SETTINGS, RATE_SETTINGS, SolverSettings
from tvm_formulas.errors import (
    EmptyCashFlowError,
    ErrorKind,
    InvalidArgumentError,
    NumericError,
    TVMWarning,
)
from tvm_formulas.solvers import eval_rate, rate, irr

from utilities import generate_random_annuities, generate_investment_cashflows


DECIMAL_PLACES_FOR_ASSERTIONS: int = 8


class TestEvalRate(unittest.TestCase):

    def test_zero_rate_branch(self):
        self.assertEqual(eval_rate(0, 10, -100, 1000), 0)
        self.assertEqual(eval_rate(0, 10, -100, 1000, 50), 50)

    def test_zero_at_true_rate(self):
        payment = pmt(0.01, 36, 10000, 0, 1)
        self.assertAlmostEqual(eval_rate(0.01, 36, payment, 10000, 0, 1), 0.0, places=8)

    def test_sign_either_side_of_root(self):
        payment = pmt(0.01, 36, 10000)
        self.assertGreater(eval_rate(0.02, 36, payment, 10000), 0)
        self.assertLess(eval_rate(0.005, 36, payment, 10000), 0)


class TestRate(unittest.TestCase):

    def test_reference_value(self):
        self.assertEqual(round(rate(48, -200, 8000), 4), 0.0077)

    def test_recovers_rate_from_pmt(self):
        for s in generate_random_annuities(count=50):
            with self.subTest(scenario=s.scenario_id, rate=s.rate, nper=s.nper, when=s.when):
                recovered = rate(s.nper, s.pmt, s.pv, s.fv, s.when)
                self.assertAlmostEqual(recovered, s.rate, places=DECIMAL_PLACES_FOR_ASSERTIONS)

    def test_zero_guess(self):
        self.assertAlmostEqual(rate(48, -200, 8000, guess=0), rate(48, -200, 8000), places=8)

    def test_nper_not_positive(self):
        for bad in (0, -12):
            with self.subTest(nper=bad):
                with self.assertRaises(InvalidArgumentError):
                    rate(bad, -200, 8000)

    def test_flat_residual_is_numeric_error(self):
        """With no cash flows the residual is zero everywhere: no usable slope."""
        with self.assertRaises(NumericError) as ctx:
            rate(10, 0, 0, 0)
        self.assertIn("#NUM!", str(ctx.exception))
        self.assertIs(ctx.exception.kind, ErrorKind.NUMERIC)

    def test_iteration_budget_exhausted(self):
        settings = SolverSettings(max_iterations=1, tolerance=1e-7, step=1e-5)
        with self.assertRaises(NumericError) as ctx:
            rate(48, -200, 8000, settings=settings)
        self.assertIn("did not converge", str(ctx.exception))

    def test_default_settings(self):
        self.assertEqual(RATE_SETTINGS.max_iterations, 128)
        self.assertEqual(RATE_SETTINGS.tolerance, 1e-7)
        self.assertEqual(RATE_SETTINGS.step, 1e-5)

    def test_invalid_timing(self):
        with self.assertRaises(InvalidArgumentError):
            rate(48, -200, 8000, 0, 2)


class TestIRR(unittest.TestCase):

    def test_reference_value(self):
        self.assertEqual(round(irr([-1500, 500, 500, 500, 500]), 4), 0.1259)

    def test_recovers_level_return_rate(self):
        for true_rate, values in generate_investment_cashflows(count=25):
            with self.subTest(true_rate=true_rate, periods=len(values) - 1):
                self.assertAlmostEqual(irr(values), true_rate, places=6)

    def test_irr_zeroes_npv(self):
        """npv discounts the first flow one period, so it is internal_pv / (1 + r) here."""
        for _, values in generate_investment_cashflows(count=10, seed=7):
            with self.subTest(values=values[:2]):
                r = irr(values)
                scale = max(abs(v) for v in values)
                self.assertLess(abs(npv(r, *values)), scale * 1e-8)

    def test_matches_brentq_root(self):
        series = [
            [-1500, 500, 500, 500, 500],
            [-70000, 12000, 15000, 18000, 21000],
            [-70000, 12000, 15000, 18000, 21000, 26000],
            [-100, 39, 59, 55, 20],
            [-5000, 0, 0, 1000, 2000, 3000, 1500],
        ]
        for values in series:
            with self.subTest(values=values):
                root = brentq(lambda r: internal_pv(values, r), -0.99, 10.0, xtol=1e-12)
                self.assertAlmostEqual(irr(values), root, places=6)

    def test_leading_zeros_do_not_change_irr(self):
        values = [-1500, 500, 500, 500, 500]
        self.assertAlmostEqual(irr([0, 0] + values), irr(values), places=10)

    def test_update_below_minus_one_is_clamped(self):
        """
        For -1 + 0.01/(1+r) the first secant step from 0.1 lands near r = -120.

        The update is pulled back to (r1 - 1)/2 repeatedly, halving the gap
        to -1, until the iterates bracket the root at -0.99.
        """
        values = [-1.0, 0.01]
        rate1 = 0.1 - IRR_SETTINGS.step
        with mock.patch.object(tvm_cashflows, "internal_pv", wraps=internal_pv) as spy:
            result = irr(values, 0.1)
        trial_rates = [c.args[1] for c in spy.call_args_list]

        self.assertAlmostEqual(result, -0.99, places=6)
        self.assertTrue(all(r > -1 for r in trial_rates))
        self.assertTrue(any(abs(r - (rate1 - 1) / 2) < 1e-12 for r in trial_rates))

    def test_clamped_solve_fails_numerically(self):
        settings = SolverSettings(max_iterations=3, tolerance=1e-7, step=1e-5, npv_scale=0.01)
        with self.assertRaises(NumericError):
            irr([-1.0, 0.01], 0.1, settings=settings)

    def test_negative_guess(self):
        self.assertAlmostEqual(irr([-70000, 12000, 15000], -0.10), -0.4435, places=4)

    def test_accepts_numpy_array(self):
        values = np.array([-1500, 500, 500, 500, 500], dtype=float)
        self.assertEqual(irr(values), irr(list(values)))

    def test_guess_not_above_minus_one(self):
        for bad in (-1, -1.5):
            with self.subTest(guess=bad):
                with self.assertRaises(InvalidArgumentError):
                    irr([-100, 110], bad)

    def test_second_trial_rate_not_above_minus_one(self):
        with self.assertRaises(InvalidArgumentError):
            irr([100, -1], -0.999995)

    def test_empty_values(self):
        with self.assertRaises(EmptyCashFlowError) as ctx:
            irr([])
        self.assertIsInstance(ctx.exception, InvalidArgumentError)
        self.assertIs(ctx.exception.kind, ErrorKind.EMPTY_SERIES)

    def test_no_sign_change_warns_and_fails(self):
        with self.assertWarns(TVMWarning):
            with self.assertRaises(NumericError):
                irr([100, 100, 100])

    def test_all_zero_values(self):
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", TVMWarning)
            with self.assertRaises(NumericError) as ctx:
                irr([0, 0, 0])
        self.assertIn("invalid values", str(ctx.exception))

    def test_iteration_budget_exhausted(self):
        settings = SolverSettings(max_iterations=1, tolerance=1e-7, step=1e-5, npv_scale=0.01)
        with self.assertRaises(NumericError) as ctx:
            irr([-70000, 12000, 15000, 18000, 21000], settings=settings)
        self.assertIn("iteration limit exceeded", str(ctx.exception))

    def test_valid_series_does_not_warn(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error", TVMWarning)
            irr([-1500, 500, 500, 500, 500])

    def test_default_settings(self):
        self.assertEqual(IRR_SETTINGS.max_iterations, 40)
        self.assertEqual(IRR_SETTINGS.npv_scale, 0.01)


class TestSolverSettings(unittest.TestCase):

    def test_validation(self):
        for kwargs in (
                dict(max_iterations=0, tolerance=1e-7, step=1e-5),
                dict(max_iterations=10, tolerance=0, step=1e-5),
                dict(max_iterations=10, tolerance=1e-7, step=-1e-5),
                dict(max_iterations=10, tolerance=1e-7, step=1e-5, npv_scale=0),
        ):
            with self.subTest(**kwargs):
                with self.assertRaises(ValueError):
                    SolverSettings(**kwargs)


if __name__ == '__main__':
    unittest.main(verbosity=2)

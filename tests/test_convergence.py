import unittest

import numpy as np

from gamblers_ruin.core.batch import run_batch
from gamblers_ruin.core.convergence import compute_convergence_series, compute_display_range
from gamblers_ruin.models.parameters import RuinParameters


class ConvergenceSeriesTests(unittest.TestCase):
    def test_cumulative_rates_follow_outcomes(self) -> None:
        series = compute_convergence_series([1, 0, 1, 1])
        self.assertEqual(list(series["trial"]), [1, 2, 3, 4])
        np.testing.assert_allclose(
            series["cumulative_success_rate"], [1.0, 0.5, 2 / 3, 0.75]
        )

    def test_single_trial_is_defined(self) -> None:
        self.assertEqual(list(compute_convergence_series([0])["cumulative_success_rate"]), [0.0])
        self.assertEqual(list(compute_convergence_series([1])["cumulative_success_rate"]), [1.0])

    def test_empty_input_gives_empty_series(self) -> None:
        series = compute_convergence_series([])
        self.assertTrue(series.empty)
        self.assertEqual(list(series.columns), ["trial", "cumulative_success_rate"])

    def test_series_from_batch_uses_simulation_order(self) -> None:
        batch = run_batch(RuinParameters(10, 20, 0.5, 200, random_seed=21))
        series = compute_convergence_series(batch)
        self.assertEqual(len(series), 200)
        flags = batch.outcome_flags()
        expected = np.cumsum(flags) / np.arange(1, 201)
        np.testing.assert_allclose(series["cumulative_success_rate"], expected)
        self.assertAlmostEqual(series["cumulative_success_rate"].iloc[-1], batch.empirical_probability)


class DisplayRangeTests(unittest.TestCase):
    def test_range_pads_series_and_theory(self) -> None:
        lower, upper = compute_display_range([0.5, 0.6], 0.55)
        self.assertAlmostEqual(lower, 0.45)
        self.assertAlmostEqual(upper, 0.65)

    def test_theoretical_value_extends_range(self) -> None:
        lower, upper = compute_display_range([0.5, 0.6], 0.8)
        self.assertAlmostEqual(lower, 0.45)
        self.assertAlmostEqual(upper, 0.85)

    def test_range_is_clamped_to_unit_interval(self) -> None:
        self.assertEqual(compute_display_range([0.0, 0.02], 0.01)[0], 0.0)
        self.assertEqual(compute_display_range([1.0, 0.97], 0.98)[1], 1.0)

    def test_accepts_convergence_frame(self) -> None:
        series = compute_convergence_series([1, 0, 1, 1])
        lower, upper = compute_display_range(series, 0.6)
        self.assertAlmostEqual(lower, 0.45)
        self.assertAlmostEqual(upper, 1.0)


if __name__ == "__main__":
    unittest.main()

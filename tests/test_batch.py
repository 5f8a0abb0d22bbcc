import math
import unittest
from unittest import mock

import numpy as np

from gamblers_ruin.core.batch import BatchRunner, run_batch
from gamblers_ruin.core.theory import compute_ruin_probability
from gamblers_ruin.core.validator import InvalidParameters
from gamblers_ruin.models.parameters import RuinParameters


class BatchRunnerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.params = RuinParameters(
            initial_capital=10,
            target_capital=20,
            success_probability=0.48,
            simulation_count=150,
            random_seed=17,
        )

    def test_outcome_count_and_path_retention(self) -> None:
        batch = run_batch(self.params)
        self.assertEqual(len(batch.outcomes), 150)
        self.assertEqual([o.simulation_id for o in batch.outcomes], list(range(1, 151)))
        for outcome in batch.outcomes[:100]:
            self.assertIsNotNone(outcome.trajectory)
        for outcome in batch.outcomes[100:]:
            self.assertIsNone(outcome.trajectory)
        self.assertEqual(len(batch.retained_trajectories()), 100)

    def test_small_batch_keeps_every_path(self) -> None:
        params = RuinParameters(10, 20, 0.5, 30, random_seed=3)
        batch = run_batch(params)
        self.assertEqual(len(batch.retained_trajectories()), 30)

    def test_outcome_fields_agree_with_trajectory(self) -> None:
        batch = run_batch(self.params)
        for outcome in batch.outcomes[:100]:
            self.assertEqual(outcome.final_balance, int(outcome.trajectory[-1]))
            self.assertEqual(outcome.steps, outcome.trajectory.size - 1)
            self.assertEqual(outcome.reached_target, outcome.final_balance >= 20)

    def test_seeded_batches_are_reproducible(self) -> None:
        first = run_batch(self.params)
        second = run_batch(self.params)
        np.testing.assert_array_equal(first.outcome_flags(), second.outcome_flags())
        for a, b in zip(first.retained_trajectories(), second.retained_trajectories()):
            np.testing.assert_array_equal(a[1], b[1])

    def test_injected_generator_matches_seed(self) -> None:
        seeded = run_batch(self.params)
        injected = run_batch(self.params.with_seed(None), rng=np.random.default_rng(17))
        np.testing.assert_array_equal(seeded.outcome_flags(), injected.outcome_flags())

    def test_invalid_parameters_fail_before_simulating(self) -> None:
        callback = mock.Mock()
        rng = mock.Mock()
        invalid = [
            RuinParameters(20, 20, 0.5, 10),
            RuinParameters(0, 20, 0.5, 10),
            RuinParameters(10, 20, 0.5, 0),
            RuinParameters(10, 20, 1.5, 10),
            RuinParameters(10, 20, 0.5, 10, max_steps=0),
            RuinParameters(10.5, 20, 0.5, 5),
            RuinParameters(10, 20.0, 0.5, 5),
            RuinParameters(10, 20, 0.5, 5.0),
            RuinParameters(True, 20, 0.5, 5),
            RuinParameters(10, 20, 0.5, 5, progress_interval=2.5),
        ]
        for params in invalid:
            with self.assertRaises(InvalidParameters):
                run_batch(params, rng=rng, progress_callback=callback)
        callback.assert_not_called()
        rng.random.assert_not_called()

    def test_progress_events_every_interval_and_at_completion(self) -> None:
        params = RuinParameters(10, 20, 0.5, 120, random_seed=1)
        events = []
        batch = run_batch(params, progress_callback=events.append)
        self.assertEqual([event.completed for event in events], [50, 100, 120])
        self.assertEqual(events[-1].successes, batch.success_count)
        self.assertAlmostEqual(events[-1].cumulative_success_rate, batch.empirical_probability)
        self.assertEqual(events[-1].fraction_complete, 1.0)

    def test_failing_callback_does_not_change_results(self) -> None:
        def broken(_event) -> None:
            raise RuntimeError("progress bar went away")

        with self.assertLogs("gamblers_ruin.core.batch", level="WARNING"):
            noisy = run_batch(self.params, progress_callback=broken)
        quiet = run_batch(self.params)
        np.testing.assert_array_equal(noisy.outcome_flags(), quiet.outcome_flags())

    def test_truncated_walks_are_failures(self) -> None:
        params = RuinParameters(50, 100, 0.5, 20, max_steps=5, random_seed=9)
        batch = run_batch(params)
        self.assertEqual(batch.success_count, 0)
        self.assertEqual(batch.truncated_count, 20)
        self.assertTrue(all(outcome.truncated for outcome in batch.outcomes))
        self.assertTrue(all(o.trajectory.size == 6 for o in batch.outcomes))

    def test_lazy_runner_exposes_result_after_exhaustion(self) -> None:
        runner = BatchRunner(self.params)
        with self.assertRaises(RuntimeError):
            runner.result
        events = list(runner.iter_progress())
        self.assertTrue(runner.done)
        self.assertEqual(events[-1].completed, 150)
        self.assertEqual(len(runner.result.outcomes), 150)
        with self.assertRaises(RuntimeError):
            list(runner.iter_progress())

    def test_truncation_logged_before_final_event(self) -> None:
        params = RuinParameters(50, 100, 0.5, 20, max_steps=5, random_seed=9)
        runner = BatchRunner(params)
        events = runner.iter_progress()
        with self.assertLogs("gamblers_ruin.core.batch", level="INFO") as captured:
            for event in events:
                if event.completed == event.total:
                    break
        self.assertTrue(any("hit the 5-step cap" in line for line in captured.output))
        self.assertEqual(runner.result.truncated_count, 20)

    def test_numpy_integers_are_accepted(self) -> None:
        params = RuinParameters(np.int64(5), np.int64(10), 0.5, np.int64(3), random_seed=2)
        self.assertEqual(len(run_batch(params).outcomes), 3)

    def test_empirical_rate_within_three_standard_errors(self) -> None:
        params = RuinParameters(5, 10, 0.48, 1000, max_steps=20_000, random_seed=12345)
        batch = run_batch(params)
        theoretical = compute_ruin_probability(0.48, 5, 10)
        standard_error = math.sqrt(theoretical * (1 - theoretical) / 1000)
        self.assertEqual(batch.truncated_count, 0)
        self.assertLess(abs(batch.empirical_probability - theoretical), 3 * standard_error)

    def test_single_fair_walk_from_midpoint(self) -> None:
        params = RuinParameters(50, 100, 0.5, 1, random_seed=4)
        batch = run_batch(params)
        self.assertEqual(compute_ruin_probability(0.5, 50, 100), 0.5)
        outcome = batch.outcomes[0]
        self.assertLessEqual(outcome.trajectory.size, 5001)
        if not outcome.truncated:
            self.assertIn(outcome.final_balance, (0, 100))

    def test_paths_frame_is_long_format(self) -> None:
        params = RuinParameters(3, 6, 0.5, 4, random_seed=8)
        batch = run_batch(params)
        frame = batch.paths_frame()
        self.assertEqual(list(frame.columns), ["simulation", "step", "balance"])
        expected_rows = sum(t.size for _, t in batch.retained_trajectories())
        self.assertEqual(len(frame), expected_rows)
        self.assertEqual(sorted(frame["simulation"].unique()), [1, 2, 3, 4])
        self.assertEqual(len(batch.outcomes_frame()), 4)


if __name__ == "__main__":
    unittest.main()

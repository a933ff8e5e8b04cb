import tempfile
import unittest
from pathlib import Path

from hamming84.codec import DataBlock, Position
from hamming84.selftest import (
    DecodingFailure,
    Report,
    Trial,
    run_exhaustive,
    run_random,
    run_trial,
)


def failed_trial() -> Trial:
    return Trial(
        data="1010",
        transmitted="10011010",
        flipped=Position.P,
        decoded="1110",
        corrected=Position.D2,
    )


class TestTrial(unittest.TestCase):
    def test_clean(self):
        trial = run_trial(DataBlock("1010"), None)
        self.assertEqual(trial.transmitted, "01011010")
        self.assertEqual(trial.decoded, "1010")
        self.assertIsNone(trial.corrected)
        self.assertTrue(trial.passed())
        self.assertTrue(trial.correction_matches())

    def test_flipped(self):
        trial = run_trial(DataBlock("1010"), Position.D3)
        self.assertEqual(trial.transmitted, "01011000")
        self.assertEqual(trial.decoded, "1010")
        self.assertEqual(trial.corrected, Position.D3)
        self.assertTrue(trial.passed())


class TestRandom(unittest.TestCase):
    def test_passes(self):
        report = run_random(200, seed=7)
        self.assertEqual(report.mode, "random")
        self.assertEqual(report.seed, 7)
        self.assertEqual(len(report.trials), 200)
        self.assertEqual(report.failures(), [])
        report.raise_for_failures()

    def test_reproducible(self):
        self.assertEqual(run_random(50, seed=3), run_random(50, seed=3))

    def test_generates_seed(self):
        self.assertIsNotNone(run_random(1).seed)

    def test_flip_probability(self):
        never = run_random(50, flip_probability=0, seed=1)
        self.assertTrue(all(t.flipped is None for t in never.trials))

        always = run_random(50, flip_probability=1, seed=1)
        self.assertTrue(all(t.flipped is not None for t in always.trials))
        self.assertEqual(always.summary().flipped_count, 50)

    def test_invalid_arguments(self):
        with self.assertRaises(ValueError):
            _ = run_random(-1)
        with self.assertRaises(ValueError):
            _ = run_random(10, flip_probability=1.5)


class TestExhaustive(unittest.TestCase):
    def test_all_combinations(self):
        report = run_exhaustive()
        self.assertEqual(report.mode, "exhaustive")
        self.assertEqual(len(report.trials), 16 * 9)
        self.assertEqual(report.failures(), [])

        summary = report.summary()
        self.assertEqual(summary.flipped_count, 16 * 8)
        self.assertEqual(summary.failures_count, 0)
        self.assertEqual(summary.misattributed_count, 0)
        self.assertIn("passed", str(summary))


class TestReport(unittest.TestCase):
    def test_raise_for_failures(self):
        report = Report(mode="random", seed=0, trials=[failed_trial()])
        with self.assertRaises(DecodingFailure) as ctx:
            report.raise_for_failures()
        self.assertEqual(
            str(ctx.exception),
            "Decoding unsuccessful for original data 1010 and transmitted data 10011010",
        )
        self.assertIn("FAILED", str(report.summary()))

    def test_save_load(self):
        report = run_random(20, seed=11)
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp).joinpath("out.json")
            report.save(path)
            self.assertEqual(Report.load(path), report)

    def test_save_into_directory(self):
        report = run_exhaustive()
        with tempfile.TemporaryDirectory() as tmp:
            report.save(Path(tmp))
            loaded = Report.load(Path(tmp).joinpath("report.json"))
            self.assertEqual(len(loaded.trials), len(report.trials))
            self.assertEqual(loaded.trials[1].flipped, Position.P)


if __name__ == "__main__":
    unittest.main()

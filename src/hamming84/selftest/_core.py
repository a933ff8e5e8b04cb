from __future__ import annotations

import logging
import random

from hamming84.codec import DataBlock, Position, decode_verbose, encode

from ._report import Report, Trial

logger = logging.getLogger(__name__)

DEFAULT_RUNS = 100
DEFAULT_FLIP_PROBABILITY = 0.5


def run_trial(data: DataBlock, flipped: Position | None) -> Trial:
    """Encode `data`, optionally flip one bit and decode it again."""
    transmitted = encode(data)
    if flipped is not None:
        transmitted = transmitted.flip(flipped)

    result = decode_verbose(transmitted)

    return Trial(
        data=str(data),
        transmitted=str(transmitted),
        flipped=flipped,
        decoded=str(result.data),
        corrected=result.flipped,
    )


def run_random(
    runs: int = DEFAULT_RUNS,
    flip_probability: float = DEFAULT_FLIP_PROBABILITY,
    seed: int | None = None,
) -> Report:
    """Run `runs` trials with random data.

    Each transmission has one random bit flipped with `flip_probability`.
    A seed is generated if none is given so that the report can be reproduced.
    """
    if runs < 0:
        raise ValueError(f"The number of runs must be non-negative, got {runs}")

    if not (0 <= flip_probability <= 1):
        raise ValueError("Flip probability is expected to be within 0 and 1 inclusive")

    if seed is None:
        seed = random.randrange(2**32)
        logger.debug(f"Generated seed {seed}")

    rng = random.Random(seed)
    positions = list(Position)

    trials: list[Trial] = []
    for i in range(runs):
        data = DataBlock([rng.randint(0, 1) for _ in range(DataBlock.LENGTH)])
        flipped = rng.choice(positions) if rng.random() < flip_probability else None

        trial = run_trial(data, flipped)
        if not trial.passed():
            logger.warning(f"Run {i} failed: {trial}")
        trials.append(trial)

    return Report(
        mode="random",
        seed=seed,
        flip_probability=flip_probability,
        trials=trials,
    )


def run_exhaustive() -> Report:
    """Run every data block with no flip and with each single bit flip."""
    flips: list[Position | None] = [None, *Position]

    trials: list[Trial] = []
    for data in DataBlock.all():
        for flipped in flips:
            trial = run_trial(data, flipped)
            if not trial.passed():
                logger.warning(f"Failed: {trial}")
            trials.append(trial)

    logger.debug(f"Ran {len(trials)} trials")
    return Report(mode="exhaustive", trials=trials)

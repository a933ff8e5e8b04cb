from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from pydantic import BaseModel
from typing_extensions import override

from hamming84.codec import Position

logger = logging.getLogger(__name__)


class DecodingFailure(Exception):
    """Decoding didn't recover the original data."""

    def __init__(self, trial: Trial):
        self.trial: Trial = trial
        super().__init__(
            f"Decoding unsuccessful for original data {trial.data} and transmitted data {trial.transmitted}"
        )


class Trial(BaseModel):
    """A single encode, transmit, decode cycle."""

    data: str
    transmitted: str
    # The position flipped during transmission, None for a clean transmission.
    flipped: Position | None
    decoded: str
    # The position reported as corrected by the decoder.
    corrected: Position | None

    def passed(self) -> bool:
        return self.decoded == self.data

    def correction_matches(self) -> bool:
        """Whether the decoder blamed the bit that was actually flipped."""
        return self.corrected == self.flipped


class Report(BaseModel):
    """Results of a self test run."""

    mode: Literal["random", "exhaustive"]
    seed: int | None = None
    flip_probability: float | None = None
    trials: list[Trial]

    @dataclass
    class Summary:
        mode: str
        trials_count: int
        flipped_count: int
        failures_count: int
        misattributed_count: int

        @override
        def __str__(self) -> str:
            status = "passed" if self.failures_count == 0 else "FAILED"
            return f"""Self test ({self.mode}) {status}
Trials: {self.trials_count}, {self.flipped_count} with a flipped bit
Failures: {self.failures_count}
Corrections at the wrong position: {self.misattributed_count}"""

    def failures(self) -> list[Trial]:
        return [t for t in self.trials if not t.passed()]

    def summary(self) -> Report.Summary:
        return Report.Summary(
            mode=self.mode,
            trials_count=len(self.trials),
            flipped_count=sum(1 for t in self.trials if t.flipped is not None),
            failures_count=len(self.failures()),
            misattributed_count=sum(
                1 for t in self.trials if not t.correction_matches()
            ),
        )

    def raise_for_failures(self) -> None:
        """Raises `DecodingFailure` for the first failed trial."""
        failures = self.failures()
        if len(failures) > 0:
            logger.debug(f"{len(failures)} trials failed")
            raise DecodingFailure(failures[0])

    def save(self, path: Path) -> None:
        """Save the report to the given file path in json format.

        If the path is a directory then a file called `report.json` will be
        created in that directory.
        """
        if path.is_dir():
            logger.debug("Path is a directory, defaulting to report.json")
            path = path.joinpath("report.json")

        if path.exists():
            logger.info(f'Saving report to "{path}"')
        else:
            logger.info(f'Saving report to a new file at "{path}"')

        with open(path, "w") as f:
            _ = f.write(self.model_dump_json())

    @classmethod
    def load(cls, path: Path) -> Report:
        with open(path, "r") as f:
            return cls.model_validate_json(f.read())

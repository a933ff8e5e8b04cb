from __future__ import annotations

import itertools
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from hamming84.codec import (
    HAMMING_COVERAGE,
    HAMMING_POSITIONS,
    Codeword,
    InvalidInputShape,
    Position,
    decode_verbose,
    encode,
    locate_flip,
)
from hamming84.selftest import (
    DEFAULT_FLIP_PROBABILITY,
    DEFAULT_RUNS,
    DecodingFailure,
    run_exhaustive,
    run_random,
)

from .utils import setup_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Hamming(8,4) encoding and single error correction.",
    no_args_is_help=True,
)


@contextmanager
def invalid_input_exits() -> Iterator[None]:
    """Log `InvalidInputShape` and exit with status 1."""
    try:
        yield
    except InvalidInputShape as e:
        logger.error(str(e))
        raise typer.Exit(1) from e


@app.command("encode")
def encode_command(
    data: Annotated[
        str,
        typer.Argument(help="4 data bits D1 D2 D3 D4, for example 1010."),
    ],
):
    """Encode 4 data bits as an 8 bit codeword P H1 H2 H3 D1 D2 D3 D4."""
    with invalid_input_exits():
        codeword = encode(data)
    print(codeword)


@app.command("decode")
def decode_command(
    codeword: Annotated[
        str,
        typer.Argument(help="8 received bits P H1 H2 H3 D1 D2 D3 D4."),
    ],
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Also print the position of the corrected bit.",
        ),
    ] = False,
):
    """Decode a codeword, correcting up to one flipped bit."""
    with invalid_input_exits():
        result = decode_verbose(codeword)

    print(result.data)
    if verbose:
        if result.flipped is None:
            print("No bits corrected")
        else:
            print(f"Corrected {result.flipped.name} (bit {int(result.flipped)})")


@app.command("flip")
def flip_command(
    codeword: Annotated[
        str,
        typer.Argument(help="8 bits to flip a bit in."),
    ],
    position: Annotated[
        Position,
        typer.Argument(
            parser=Position.parse,
            help="An index 0-7 or a position name: P, H1-H3, D1-D4.",
        ),
    ],
):
    """Simulate a transmission error by inverting a single bit."""
    with invalid_input_exits():
        word = Codeword(codeword)
    print(word.flip(position))


@app.command("selftest")
def selftest_command(
    runs: Annotated[
        int,
        typer.Option(
            min=0,
            help="How many random trials to run.",
            rich_help_panel="Random trials",
        ),
    ] = DEFAULT_RUNS,
    seed: Annotated[
        int | None,
        typer.Option(
            help="Seed for the random trials. Generated when not set.",
            rich_help_panel="Random trials",
        ),
    ] = None,
    flip_probability: Annotated[
        float,
        typer.Option(
            min=0.0,
            max=1.0,
            help="The probability of flipping one bit during a trial.",
            rich_help_panel="Random trials",
        ),
    ] = DEFAULT_FLIP_PROBABILITY,
    exhaustive: Annotated[
        bool,
        typer.Option(
            help="Check every data block with every single bit flip instead of random trials. \
The random trial options are ignored.",
        ),
    ] = False,
    output_path: Annotated[
        Path | None,
        typer.Option(
            "--output",
            help="Save the report as json. \
If the path is a directory then the file will be called report.json",
        ),
    ] = None,
):
    """Encode, corrupt and decode data, checking that it is recovered."""
    if exhaustive:
        ignored = [
            name
            for name, is_set in [
                ("--runs", runs != DEFAULT_RUNS),
                ("--seed", seed is not None),
                ("--flip-probability", flip_probability != DEFAULT_FLIP_PROBABILITY),
            ]
            if is_set
        ]
        if len(ignored) > 0:
            logger.warning(f"Ignoring {', '.join(ignored)} in exhaustive mode")

        logger.debug("Running exhaustive self test")
        report = run_exhaustive()
    else:
        logger.debug(f"Running {runs} random trials")
        report = run_random(runs, flip_probability=flip_probability, seed=seed)

    print(report.summary())

    if output_path is not None:
        report.save(output_path.expanduser())

    try:
        report.raise_for_failures()
    except DecodingFailure as e:
        logger.error(str(e))
        raise typer.Exit(1) from e

    print("Test successful")


def _mark(ok: bool) -> str:
    return "[green]match[/green]" if ok else "[red]mismatch[/red]"


@app.command("table")
def table_command():
    """Show how a parity mismatch is traced back to the flipped bit."""
    coverage = Table(title="Hamming bit coverage")
    coverage.add_column("Hamming bit")
    coverage.add_column("Data bits")
    for h in HAMMING_POSITIONS:
        coverage.add_row(h.name, " ".join(d.name for d in HAMMING_COVERAGE[h]))

    syndromes = Table(title="Correction after an overall parity mismatch")
    for h in HAMMING_POSITIONS:
        syndromes.add_column(h.name)
    syndromes.add_column("Flipped bit")
    syndromes.add_column("Action")

    for checks in itertools.product([False, True], repeat=len(HAMMING_POSITIONS)):
        flipped = locate_flip(*checks)
        action = (
            "return data unchanged"
            if flipped.is_redundant()
            else f"invert {flipped.name}"
        )
        syndromes.add_row(*(_mark(ok) for ok in checks), flipped.name, action)

    console = Console()
    console.print(coverage)
    console.print(syndromes)


def main():
    setup_logging()
    app()


if __name__ == "__main__":
    main()

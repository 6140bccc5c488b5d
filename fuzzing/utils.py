"""Utilities shared across the rlestream fuzzing harnesses"""

import logging

import atheris

from rlestream.runparser import Run

# Refuse to build reference expansions longer than this
MAX_EXPANSION = 1 << 16


def prepare_rlestream_fuzzing() -> None:
    """Used to disable logging of the rlestream module"""
    logging.getLogger("rlestream").setLevel(logging.CRITICAL)


@atheris.instrument_func  # type: ignore[misc]
def expansion_size(runs: tuple[Run, ...]) -> int:
    return sum(run.repeat for run in runs)


@atheris.instrument_func  # type: ignore[misc]
def reference_expansion(runs: tuple[Run, ...]) -> str:
    return "".join(run.symbol * run.repeat for run in runs)

"""pytest-benchmark configuration for rlestream benchmarks."""

from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def long_run() -> str:
    """A single run with a large count."""
    return "w100000"


@pytest.fixture(scope="session")
def many_runs() -> str:
    """Many short runs, including bare letters and zero counts."""
    return "L1e2t1C1o1d1e1a0xyz" * 2000


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest-benchmark with custom settings."""
    config.option.benchmark_min_rounds = 5
    config.option.benchmark_warmup = True
    config.option.benchmark_warmup_iterations = 3

    # Create benchmarks directory for JSON exports
    benchmark_dir = Path(__file__).parent.parent / ".benchmarks"
    benchmark_dir.mkdir(exist_ok=True)

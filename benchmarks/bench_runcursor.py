"""Benchmarks for the rlestream parser and cursor."""

import io

from rlestream.high_level import decode_text, decode_to_fp
from rlestream.runcursor import RunCursor
from rlestream.runparser import parse_runs


def drain(cursor: RunCursor) -> int:
    count = 0
    while cursor.has_next():
        cursor.next()
        count += 1
    return count


class TestRunParserBenchmarks:
    """Benchmarks for turning encodings into runs."""

    def test_parse_many_runs(self, benchmark, many_runs: str) -> None:
        runs = benchmark(parse_runs, many_runs)
        assert len(runs) == 10 * 2000

    def test_parse_long_count(self, benchmark) -> None:
        runs = benchmark(parse_runs, "a" + "9" * 4000)
        assert len(runs) == 1


class TestRunCursorBenchmarks:
    """Benchmarks for producing characters one at a time."""

    def test_drain_long_run(self, benchmark, long_run: str) -> None:
        count = benchmark(lambda: drain(RunCursor(long_run)))
        assert count == 100000

    def test_drain_many_runs(self, benchmark, many_runs: str) -> None:
        count = benchmark(lambda: drain(RunCursor(many_runs)))
        assert count == 11 * 2000

    def test_decode_text(self, benchmark, long_run: str) -> None:
        text = benchmark(decode_text, long_run)
        assert len(text) == 100000


class TestHighLevelBenchmarks:
    def test_decode_to_fp(self, benchmark) -> None:
        def run() -> str:
            outfp = io.StringIO()
            decode_to_fp(io.StringIO("L1e2t1C1o1d1e1" * 500), outfp)
            return outfp.getvalue()

        assert benchmark(run) == "LeetCode" * 500

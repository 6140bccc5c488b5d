import io
import logging

import pytest

from rlestream import settings
from rlestream.rlexceptions import RLEOF, MalformedEncoding
from rlestream.runparser import Run, RunParser, parse_runs, to_count

logger = logging.getLogger(__name__)


class TestRunParser:
    def test_interleaved_counts(self):
        runs = parse_runs("L1e2t1C1o1d1e1")
        logger.info(runs)
        assert runs == (
            Run("L", 1),
            Run("e", 2),
            Run("t", 1),
            Run("C", 1),
            Run("o", 1),
            Run("d", 1),
            Run("e", 1),
        )

    def test_empty_input(self):
        assert parse_runs("") == ()

    def test_multi_digit_count(self):
        assert parse_runs("a10") == (Run("a", 10),)
        assert parse_runs("w999") == (Run("w", 999),)
        assert parse_runs("s10t1u2") == (Run("s", 10), Run("t", 1), Run("u", 2))

    def test_leading_zeros(self):
        assert parse_runs("a007") == (Run("a", 7),)

    def test_long_zero_padded_count(self):
        assert parse_runs("a" + "0" * 5000 + "1") == (Run("a", 1),)
        assert parse_runs("a" + "0" * 5000 + "b2") == (Run("b", 2),)

    def test_count_longer_than_int_conversion_limit(self):
        runs = parse_runs("a" + "9" * 5000 + "b")
        assert runs == (Run("a", 10**5000 - 1), Run("b", 1))

    def test_to_count(self):
        assert to_count([]) == 0
        assert to_count(list("1234")) == 1234
        digits = "12345678" * 400
        assert to_count(list(digits)) == sum(
            int(digits[i : i + 8]) * 10 ** (len(digits) - i - 8)
            for i in range(0, len(digits), 8)
        )

    def test_long_digit_run_parses(self):
        runs = parse_runs("a" + "0" * 400000 + "1b")
        assert runs == (Run("a", 1), Run("b", 1))

    def test_bare_letters_count_once(self):
        assert parse_runs("ab3c") == (Run("a", 1), Run("b", 3), Run("c", 1))
        assert parse_runs("xyz") == (Run("x", 1), Run("y", 1), Run("z", 1))

    def test_zero_count_runs_are_dropped(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="rlestream.runparser"):
            runs = parse_runs("a0b2c00")
        assert runs == (Run("b", 2),)
        assert "zero-count run 'a'" in caplog.text
        assert "zero-count run 'c'" in caplog.text

    def test_only_zero_counts(self):
        assert parse_runs("a0") == ()

    def test_same_symbol_runs_are_kept_apart(self):
        assert parse_runs("a2a3") == (Run("a", 2), Run("a", 3))

    @pytest.mark.parametrize("encoding", ["1a", "12", "0", "9z1"])
    def test_leading_digit_is_malformed(self, encoding):
        with pytest.raises(MalformedEncoding, match="position 0"):
            parse_runs(encoding)

    def test_malformed_encoding_is_value_error(self):
        with pytest.raises(ValueError):
            parse_runs("3")

    def test_non_letter_symbol_is_lenient_by_default(self, monkeypatch, caplog):
        monkeypatch.setattr(settings, "STRICT", False)
        with caplog.at_level(logging.WARNING, logger="rlestream.runparser"):
            runs = parse_runs("a1-2")
        assert runs == (Run("a", 1), Run("-", 2))
        assert "Non-letter symbol '-' at position 2" in caplog.text

    def test_non_letter_symbol_is_rejected_when_strict(self, monkeypatch):
        monkeypatch.setattr(settings, "STRICT", True)
        with pytest.raises(MalformedEncoding, match="position 2"):
            parse_runs("a1-2")

    def test_iterates_lazily(self):
        parser = RunParser(io.StringIO("a2b3"))
        assert next(parser) == Run("a", 2)
        assert parser.fp.tell() == 3
        assert next(parser) == Run("b", 3)
        with pytest.raises(StopIteration):
            next(parser)

    def test_nextrun_raises_eof(self):
        parser = RunParser(io.StringIO("z1"))
        assert parser.nextrun() == Run("z", 1)
        with pytest.raises(RLEOF):
            parser.nextrun()

    def test_error_is_raised_when_reached(self, monkeypatch):
        monkeypatch.setattr(settings, "STRICT", True)
        parser = RunParser(io.StringIO("a1b1%"))
        assert parser.nextrun() == Run("a", 1)
        with pytest.raises(MalformedEncoding):
            parser.nextrun()

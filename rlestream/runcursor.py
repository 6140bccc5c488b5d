import logging
import sys
from typing import Iterator, List, Tuple, Union

from rlestream.rlexceptions import ExhaustedIterator, RLTypeError
from rlestream.runparser import Run, parse_runs
from rlestream.utils import make_compat_str

log = logging.getLogger(__name__)


class RunCursor:
    """Sequential decoder over a run-length encoded string.

    The whole input is parsed into an immutable run sequence when the
    cursor is created. Characters are then produced one at a time from
    the current run without expanding the string:

        >>> cursor = RunCursor("L1e2t1C1o1d1e1")
        >>> cursor.next(), cursor.next(), cursor.next()
        ('L', 'e', 'e')
        >>> cursor.has_next()
        True

    The cursor is also a regular iterator, so ``"".join(cursor)`` works.
    Calling next() once everything is consumed raises ExhaustedIterator.
    It is a StopIteration, so inside a generator body an unguarded call
    on an exhausted cursor surfaces as RuntimeError (PEP 479).

    A cursor is not safe to share between threads.
    """

    def __init__(self, compressed: Union[str, bytes]) -> None:
        if isinstance(compressed, (bytes, bytearray)):
            compressed = make_compat_str(compressed)
        elif not isinstance(compressed, str):
            raise RLTypeError(f"Unsupported input type: {type(compressed)}")
        self.runs: Tuple[Run, ...] = parse_runs(compressed)
        # _tails[i] is the number of characters in runs[i + 1:]
        tails: List[int] = [0] * len(self.runs)
        for i in range(len(self.runs) - 2, -1, -1):
            tails[i] = tails[i + 1] + self.runs[i + 1].repeat
        self._tails = tails
        self._index = 0
        self._remaining = 0
        self._seek(0)

    def __repr__(self) -> str:
        if not self.has_next():
            return "<RunCursor exhausted>"
        return "<RunCursor run=%d/%d remaining=%d>" % (
            self._index,
            len(self.runs),
            self._remaining,
        )

    def _seek(self, index: int) -> None:
        """Move to the first run at or after index with a positive count."""
        while index < len(self.runs) and self.runs[index].repeat <= 0:
            index += 1
        self._index = index
        if index < len(self.runs):
            self._remaining = self.runs[index].repeat
        else:
            self._remaining = 0
            log.debug("Cursor exhausted after %d runs", len(self.runs))

    def has_next(self) -> bool:
        return self._index < len(self.runs)

    def next(self) -> str:
        """Return the next decoded character.

        Raises ExhaustedIterator when no characters remain.
        """
        if not self.has_next():
            raise ExhaustedIterator("No characters left to decode")
        symbol = self.runs[self._index].symbol
        self._remaining -= 1
        if self._remaining == 0:
            self._seek(self._index + 1)
        return symbol

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        return self.next()

    def __length_hint__(self) -> int:
        if not self.has_next():
            return 0
        # length_hint() needs a value that fits in a Py_ssize_t
        return min(sys.maxsize, self._remaining + self._tails[self._index])

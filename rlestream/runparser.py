import io
import logging
from collections import deque
from typing import Callable, Deque, Iterator, List, NamedTuple, TextIO, Tuple

from rlestream import rlexceptions, settings
from rlestream.utils import shorten_str

log = logging.getLogger(__name__)


RLEOF = rlexceptions.RLEOF
MalformedEncoding = rlexceptions.MalformedEncoding


class Run(NamedTuple):
    """A symbol and the number of times it repeats."""

    symbol: str
    repeat: int


NUMBER = "0123456789"
LETTER = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"

# Digits converted per int() call, below the interpreter limit on string
# to int conversion
COUNT_CHUNK = 1000


def to_count(digits: List[str]) -> int:
    """Convert decimal digits of any length to an int."""
    value = 0
    for i in range(0, len(digits), COUNT_CHUNK):
        chunk = digits[i : i + COUNT_CHUNK]
        value = value * 10 ** len(chunk) + int("".join(chunk))
    return value


class RunParser:
    """
    Lexer for run-length encoded text read from a text file object.

    Every symbol is followed by an optional decimal count; a symbol
    without digits occurs once. Runs with a count of zero are dropped.
    """

    def __init__(self, fp: TextIO) -> None:
        self.fp = fp
        self._runs: Deque[Run] = deque()
        self._parse1: Callable[[], str] = self._parse_main
        self._pos = 0
        self._cursymbol = ""
        self._curdigits: List[str] = []
        self._hascount = False
        self._cursymbolpos = 0

    def _read1(self) -> str:
        c = self.fp.read(1)
        if c:
            self._pos += 1
        return c

    def __iter__(self) -> Iterator[Run]:
        """Iterate over runs."""
        return self

    def __next__(self) -> Run:
        """Get the next run in iteration, raising StopIteration when
        done."""
        while not self._runs:
            c = self._parse1()
            if c == "":
                break
        if not self._runs:
            raise StopIteration
        return self._runs.popleft()

    def nextrun(self) -> Run:
        """Get the next run in iteration, raising RLEOF when done."""
        try:
            return self.__next__()
        except StopIteration:
            raise RLEOF

    def parse(self) -> Tuple[Run, ...]:
        """Consume the remaining input and return its runs."""
        return tuple(self)

    def _parse_main(self) -> str:
        """Initial state: a symbol is expected."""
        c = self._read1()
        if not c:
            return c
        if c in NUMBER:
            raise MalformedEncoding(
                "Count %r at position %d has no preceding symbol" % (c, self._pos - 1)
            )
        self._begin_run(c)
        return c

    def _parse_count(self) -> str:
        """Count state: collect the digits that follow a symbol."""
        c = self._read1()
        # "" is in everything, so check for EOF first
        if c and c in NUMBER:
            self._hascount = True
            # leading zeros do not change the count
            if self._curdigits or c != "0":
                self._curdigits.append(c)
            return c
        self._add_run()
        if c:
            self._begin_run(c)
        else:
            self._parse1 = self._parse_main
        return c

    def _begin_run(self, c: str) -> None:
        if c not in LETTER:
            if settings.STRICT:
                raise MalformedEncoding(
                    "Symbol %r at position %d is not a letter" % (c, self._pos - 1)
                )
            log.warning("Non-letter symbol %r at position %d", c, self._pos - 1)
        self._cursymbol = c
        self._cursymbolpos = self._pos - 1
        self._curdigits = []
        self._hascount = False
        self._parse1 = self._parse_count

    def _add_run(self) -> None:
        """Add a successfully parsed run."""
        repeat = to_count(self._curdigits) if self._hascount else 1
        if repeat == 0:
            log.debug(
                "Dropping zero-count run %r at position %d",
                self._cursymbol,
                self._cursymbolpos,
            )
            return
        self._runs.append(Run(self._cursymbol, repeat))


def parse_runs(text: str) -> Tuple[Run, ...]:
    """Parse a whole compressed string into its run sequence.

    Raises MalformedEncoding when a count has no symbol before it.
    """
    try:
        runs = RunParser(io.StringIO(text)).parse()
    except MalformedEncoding:
        log.debug("Malformed encoding %r", shorten_str(text, 40))
        raise
    log.debug("Parsed %d runs from %d characters", len(runs), len(text))
    return runs

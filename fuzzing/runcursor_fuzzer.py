import operator
import sys
from typing import Union

import atheris

from fuzz_helpers import EnhancedFuzzedDataProvider

with atheris.instrument_imports():
    from utils import (
        MAX_EXPANSION,
        expansion_size,
        prepare_rlestream_fuzzing,
        reference_expansion,
    )
    from rlestream.runcursor import RunCursor

from rlestream.rlexceptions import ExhaustedIterator, MalformedEncoding


def fuzz_one_input(data: bytes) -> None:
    fdp = EnhancedFuzzedDataProvider(data)

    compressed: Union[str, bytes]
    choice = fdp.ConsumeIntInRange(0, 2)
    if choice == 0:
        compressed = fdp.ConsumeEncoding()
    elif choice == 1:
        compressed = fdp.ConsumeRandomString()
    else:
        compressed = fdp.ConsumeRemainingBytes()

    try:
        cursor = RunCursor(compressed)
    except MalformedEncoding:
        return

    size = expansion_size(cursor.runs)
    if size > MAX_EXPANSION:
        # Not worth continuing with this test case
        return
    expected = reference_expansion(cursor.runs)

    decoded = []
    while cursor.has_next():
        assert cursor.has_next()
        assert operator.length_hint(cursor) == size - len(decoded)
        decoded.append(cursor.next())
    assert "".join(decoded) == expected

    try:
        cursor.next()
    except ExhaustedIterator:
        pass
    else:
        raise AssertionError("exhausted cursor returned a character")


if __name__ == "__main__":
    prepare_rlestream_fuzzing()
    atheris.Setup(sys.argv, fuzz_one_input)
    atheris.Fuzz()

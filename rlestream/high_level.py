"""Functions that can be used for the most common use-cases for rlestream"""

import io
import logging
from typing import BinaryIO, Iterator, TextIO, Union, cast

from rlestream.runcursor import RunCursor
from rlestream.runparser import Run, RunParser
from rlestream.utils import FileOrName, make_compat_str, open_filename


def decode_text(compressed: Union[str, bytes]) -> str:
    """Decode a whole run-length encoded string.

    :param compressed: the encoding, as str or bytes. The encoding of
        bytes input is detected.
    :return: the decoded string
    """
    return "".join(RunCursor(compressed))


def iter_runs(compressed: Union[str, bytes]) -> Iterator[Run]:
    """Lazily yield the runs of an encoding, one at a time."""
    yield from RunParser(io.StringIO(make_compat_str(compressed)))


def decode_to_fp(
    inf: FileOrName,
    outfp: Union[TextIO, BinaryIO],
    codec: str = "utf-8",
    chunk_size: int = 4096,
    debug: bool = False,
) -> None:
    """Decodes the encoding read from inf and writes it to outfp.

    The decoded text is written in chunks of at most chunk_size
    characters, so the full expansion is never held in memory.

    :param inf: a path or a file-like object (text or binary) holding a
        single encoding. Surrounding whitespace is ignored.
    :param outfp: a file-like object to write the decoded text to.
    :param codec: Text encoding used when outfp is a binary file.
    :param chunk_size: Maximum number of characters per write.
    :param debug: Output more logging data
    :return: nothing, acting as it does on two streams. Use StringIO to get
        strings.
    """
    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
    if chunk_size < 1:
        raise ValueError("chunk_size must be positive, got %d" % chunk_size)

    with open_filename(inf, "rb") as fp:
        data = fp.read()
    cursor = RunCursor(make_compat_str(data).strip())

    binary = isinstance(outfp, (io.RawIOBase, io.BufferedIOBase))
    buf = []
    while cursor.has_next():
        buf.append(cursor.next())
        if len(buf) == chunk_size:
            _write(outfp, "".join(buf), binary, codec)
            buf = []
    if buf:
        _write(outfp, "".join(buf), binary, codec)


def _write(
    outfp: Union[TextIO, BinaryIO], text: str, binary: bool, codec: str
) -> None:
    if binary:
        cast(BinaryIO, outfp).write(text.encode(codec))
    else:
        cast(TextIO, outfp).write(text)

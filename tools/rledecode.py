#!/usr/bin/env python3
"""Decodes run-length encoded strings such as "L1e2t1C1o1d1e1" to plain text."""

import argparse
import io
import logging
import sys
from typing import Any, Iterator, List, Optional, TextIO

import rlestream
import rlestream.settings
from rlestream.high_level import decode_to_fp, iter_runs
from rlestream.rlexceptions import MalformedEncoding
from rlestream.utils import make_compat_str

logging.basicConfig()

log = logging.getLogger(__name__)


def iter_encodings(encodings: List[str], infiles: List[str]) -> Iterator[str]:
    yield from encodings
    for fname in infiles:
        with open(fname, "rb") as fp:
            text = make_compat_str(fp.read())
        for line in text.splitlines():
            line = line.strip()
            if line:
                yield line


def write_runs(outfp: TextIO, encoding: str) -> None:
    for run in iter_runs(encoding):
        outfp.write("%s\t%d\n" % (run.symbol, run.repeat))


def write_decoded(outfp: TextIO, encoding: str) -> None:
    decode_to_fp(io.StringIO(encoding), outfp)
    outfp.write("\n")


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__, add_help=True)
    parser.add_argument(
        "encodings",
        type=str,
        default=None,
        nargs="*",
        help="One or more run-length encoded strings.",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"rlestream v{rlestream.__version__}",
    )
    parser.add_argument(
        "--debug",
        "-d",
        default=False,
        action="store_true",
        help="Use debug logging level.",
    )
    parser.add_argument(
        "--infile",
        "-i",
        type=str,
        default=[],
        action="append",
        help="File with one encoding per line. May be given more than once.",
    )
    parser.add_argument(
        "--outfile",
        "-o",
        type=str,
        default="-",
        help='Path to file where output is written. Or "-" (default) to '
        "write to stdout.",
    )
    parser.add_argument(
        "--codec",
        "-c",
        type=str,
        default="utf-8",
        help="Text encoding to use in output file.",
    )
    parser.add_argument(
        "--runs",
        "-r",
        default=False,
        action="store_true",
        help="Print the parsed runs, one symbol and count per line, instead "
        "of the decoded text.",
    )
    parser.add_argument(
        "--strict",
        "-S",
        default=False,
        action="store_true",
        help="Reject symbols that are not ASCII letters.",
    )
    return parser


def main(args: Optional[List[str]] = None) -> int:
    parser = create_parser()
    A = parser.parse_args(args=args)

    if A.debug:
        logging.getLogger().setLevel(logging.DEBUG)
    if A.strict:
        rlestream.settings.STRICT = True

    if not A.encodings and not A.infile:
        parser.error("Must provide encodings or input files to work upon!")

    outfp: Any
    if A.outfile == "-":
        outfp = sys.stdout
    else:
        outfp = open(A.outfile, "w", encoding=A.codec)

    try:
        for encoding in iter_encodings(A.encodings, A.infile):
            if A.runs:
                write_runs(outfp, encoding)
            else:
                write_decoded(outfp, encoding)
    except MalformedEncoding as e:
        log.error("Cannot decode: %s", e)
        return 1
    finally:
        if outfp is not sys.stdout:
            outfp.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())

__all__ = [
    "RLException",
    "RLEOF",
    "MalformedEncoding",
    "ExhaustedIterator",
    "RLTypeError",
]


class RLException(Exception):
    """Base class for run-length decoding exceptions."""


class RLEOF(RLException):
    """Raised when the parser runs out of input."""


class MalformedEncoding(RLException, ValueError):
    """Raised when a compressed string cannot be split into runs."""


class ExhaustedIterator(RLException, StopIteration):
    """Raised when a character is requested from an exhausted cursor."""


class RLTypeError(RLException, TypeError):
    pass

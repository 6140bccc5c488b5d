import os


def absolute_sample_path(relative_sample_path):
    sample_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), "../samples"))
    return os.path.join(sample_dir, relative_sample_path)


def expand(encoding):
    """Reference decoding that builds the whole string at once."""
    out = []
    symbol = None
    digits = ""
    for c in encoding + "\0":
        if c.isdigit():
            digits += c
            continue
        if symbol is not None:
            out.append(symbol * (int(digits) if digits else 1))
        symbol = c
        digits = ""
    return "".join(out)

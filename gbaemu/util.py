"""Small file helpers."""

from os import PathLike


def read_bin_file(filename: "str | PathLike[str]") -> bytes:
    """Return the whole contents of a binary file."""
    with open(filename, "rb") as fh:
        return fh.read()
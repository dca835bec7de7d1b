from typing import Optional, TextIO


def read_line(stream: TextIO) -> Optional[str]:
    """One line without its newline, or None at end of input."""
    line = stream.readline()
    if not line:
        return None
    return line.rstrip("\r\n")


def prompt(out: TextIO, stream: TextIO, message: str) -> Optional[str]:
    out.write(message)
    out.flush()
    return read_line(stream)

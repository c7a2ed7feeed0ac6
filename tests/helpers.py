"""Shared test helpers."""
import io


def answers(*lines: str) -> io.StringIO:
    """Input stream yielding one answer per line."""
    return io.StringIO("".join(f"{line}\n" for line in lines))

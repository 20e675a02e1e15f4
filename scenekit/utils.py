"""Small text helpers used when reading scene and asset files."""

from __future__ import annotations

__all__ = ["split"]


def split(line: str, delimiter: str = "\t") -> list[str]:
    """Split ``line`` on ``delimiter``.

    The search resumes one character past the start of each delimiter
    match, so a multi-character delimiter leaves its tail in the next token.
    """
    if not delimiter:
        raise ValueError("delimiter must not be empty")
    tokens: list[str] = []
    last = 0
    while (found := line.find(delimiter, last)) != -1:
        tokens.append(line[last:found])
        last = found + 1
    tokens.append(line[last:])
    return tokens
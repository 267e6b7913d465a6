"""Splitting of comma separated parameter lists."""

from __future__ import annotations


def tokenize(values: str) -> list[str]:
    """Split on commas; '\\,' stands for a literal comma and '\\\\' for a backslash."""
    tokens: list[str] = []
    buf: list[str] = []
    chars = iter(values)
    for c in chars:
        if c == "\\":
            nxt = next(chars, None)
            if nxt is None:
                buf.append("\\")
            elif nxt in (",", "\\"):
                buf.append(nxt)
            else:
                buf.append("\\")
                buf.append(nxt)
        elif c == ",":
            tokens.append("".join(buf))
            buf = []
        else:
            buf.append(c)
    tokens.append("".join(buf))
    return tokens
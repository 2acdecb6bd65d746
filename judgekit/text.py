"""Small string utilities."""

from __future__ import annotations

from collections import Counter


def capitalize_first(line: str) -> str:
    """Upper-case the first character if it is an ASCII lower-case letter."""
    if line and "a" <= line[0] <= "z":
        return line[0].upper() + line[1:]
    return line


def _ascii_counts(text: str) -> Counter[str]:
    return Counter(
        ch.lower() if "A" <= ch <= "Z" else ch for ch in text if ord(ch) < 128
    )


def is_anagram(a: str, b: str) -> bool:
    """Whether a and b use the same ASCII characters, ignoring letter case."""
    return _ascii_counts(a) == _ascii_counts(b)
"""Basic string editing operations returning new strings."""

from __future__ import annotations


def _check_range(text: str, start: int, count: int) -> None:
    if count < 0:
        raise ValueError("count must not be negative")
    if start < 0 or start + count > len(text):
        raise IndexError(f"range [{start}, {start + count}) is outside the string")


def length(text: str) -> int:
    """Return the number of characters in ``text``."""
    return len(text)


def substring(text: str, start: int, count: int) -> str:
    """Return ``count`` characters of ``text`` beginning at ``start``."""
    _check_range(text, start, count)
    return text[start:start + count]


def char_at(text: str, index: int) -> str:
    """Return the character at ``index``; negative indices are rejected."""
    if not 0 <= index < len(text):
        raise IndexError(f"index {index} is outside the string")
    return text[index]


def concatenate(first: str, second: str) -> str:
    """Return ``second`` appended to ``first``."""
    return f"{first}{second}"


def insert(text: str, sub: str, position: int) -> str:
    """Return ``text`` with ``sub`` inserted before ``position``."""
    if not 0 <= position <= len(text):
        raise IndexError(f"position {position} is outside the string")
    return text[:position] + sub + text[position:]


def delete(text: str, start: int, count: int) -> str:
    """Return ``text`` without the ``count`` characters beginning at ``start``."""
    _check_range(text, start, count)
    return text[:start] + text[start + count:]


def replace(text: str, sub: str, start: int, count: int) -> str:
    """Return ``text`` with ``count`` characters at ``start`` replaced by ``sub``."""
    _check_range(text, start, count)
    return insert(delete(text, start, count), sub, start)
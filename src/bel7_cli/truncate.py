"""String truncation helpers for display output.

All lengths are counted in characters (Unicode code points), never bytes,
so a multi-byte character is never split.
"""

from __future__ import annotations

DEFAULT_TRUNCATION_SUFFIX = "..."


def truncate_string(s: str, max_chars: int) -> str:
    """Truncate ``s`` to ``max_chars`` characters using the default suffix.

    Example:
        >>> truncate_string("Hello", 10)
        'Hello'
        >>> truncate_string("Hello, World!", 8)
        'Hello...'
    """
    return truncate_with_suffix(s, max_chars, DEFAULT_TRUNCATION_SUFFIX)


def truncate_with_suffix(s: str, max_chars: int, suffix: str) -> str:
    """Truncate ``s`` and append ``suffix`` when it is longer than ``max_chars``.

    The suffix is always appended in full. When ``max_chars`` is smaller than
    the suffix the result is just the suffix and may exceed ``max_chars``;
    use :func:`truncate_middle` when a hard cap is required.

    Example:
        >>> truncate_with_suffix("Hello, World!", 9, "…")
        'Hello, W…'
    """
    max_chars = max(0, max_chars)
    if len(s) <= max_chars:
        return s

    take_chars = max(0, max_chars - len(suffix))
    return s[:take_chars] + suffix


def truncate_middle(s: str, max_chars: int) -> str:
    """Truncate ``s`` in the middle, keeping its start and its end.

    Useful for file paths and long identifiers where both ends carry
    information. The result is exactly ``max_chars`` characters long; an odd
    spare character goes to the start.

    Example:
        >>> truncate_middle("abcdefghij", 7)
        'ab...ij'
        >>> truncate_middle("Hello, World!", 2)
        '..'
    """
    max_chars = max(0, max_chars)
    if len(s) <= max_chars:
        return s

    marker = DEFAULT_TRUNCATION_SUFFIX
    if max_chars <= len(marker):
        return marker[:max_chars]

    available = max_chars - len(marker)
    start_len = (available + 1) // 2
    end_len = available // 2

    end = s[len(s) - end_len :] if end_len else ""
    return s[:start_len] + marker + end

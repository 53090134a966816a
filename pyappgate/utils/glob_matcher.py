"""
Glob matching of URL paths.

Patterns are split on ``/`` into segments:

- ``*`` as a whole segment matches exactly one non-empty path segment.
- ``**`` as a whole segment matches zero or more path segments.
- Inside a longer segment ``*`` matches any run of characters other than ``/``
  and ``?`` matches a single such character.
- Everything else is literal and case-sensitive.

A pattern must match the entire path, so ``/login`` does not match ``/login/email``.
"""

import re
from collections.abc import Iterable
from functools import lru_cache

SEGMENT = "[^/]+"
ANY_SEGMENTS = f"(?:/{SEGMENT})*"


def _translate_segment(segment: str) -> str:
    if segment == "*":
        return SEGMENT
    translated = []
    for char in segment:
        if char == "*":
            translated.append("[^/]*")
        elif char == "?":
            translated.append("[^/]")
        else:
            translated.append(re.escape(char))
    return "".join(translated)


@lru_cache(maxsize=512)
def compile_glob(pattern: str) -> re.Pattern[str]:
    """
    Translate a glob pattern into an anchored regular expression.

    Args:
        pattern: The glob pattern, e.g. ``/blog/**/*``.

    Returns:
        The compiled expression, to be used with ``fullmatch``.

    """
    first, *rest = pattern.split("/")
    # A leading ``**`` has no slash in front of it
    parts = [f"(?:{SEGMENT}{ANY_SEGMENTS})?" if first == "**" else _translate_segment(first)]
    for segment in rest:
        if segment == "**":
            parts.append(ANY_SEGMENTS)
        else:
            parts.append("/" + _translate_segment(segment))
    return re.compile("".join(parts))


def matches_glob(path: str, pattern: str) -> bool:
    """Check a single pattern against the full path."""
    if not path.startswith("/"):
        return False
    return compile_glob(pattern).fullmatch(path) is not None


def matches_globs(path: str, patterns: Iterable[str]) -> bool:
    """
    Check whether any of the patterns matches the path.

    Args:
        path: A normalized request path, starting with ``/``.
        patterns: The glob patterns to test.

    Returns:
        True if at least one pattern matches. Paths that do not start with ``/``
        never match.

    """
    return any(matches_glob(path, pattern) for pattern in patterns)

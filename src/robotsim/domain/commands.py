"""Command expansion and validation.

Expansion only looks at the *shape* of a token: ``name(N)`` becomes N
copies of ``name``. Whether ``name`` is a real command is decided later
by :func:`is_valid_command`, so malformed shorthand such as
``forward(x)`` or ``forward(2`` passes through untouched and fails
validation like any other unknown token.
"""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Iterator
from itertools import chain, repeat

from robotsim.domain.types import Command

SHORTHAND_PATTERN: re.Pattern[str] = re.compile(r"^([A-Za-z_]+)\((\d+)\)$")

COMMAND_NAMES: frozenset[str] = frozenset(c.value for c in Command)

# Counts are clamped here; no run can consume this many commands anyway.
MAX_REPEAT: int = sys.maxsize
_MAX_REPEAT_DIGITS = len(str(MAX_REPEAT))


def parse_shorthand(token: str) -> tuple[str, int] | None:
    """Split ``name(N)`` into ``(name, N)``; None if *token* is not shorthand.

    Leading zeros are ignored and N is clamped to :data:`MAX_REPEAT`, so
    arbitrarily long digit strings never reach ``int()``.
    """
    match = SHORTHAND_PATTERN.match(token)
    if match is None:
        return None
    digits = match.group(2).lstrip("0") or "0"
    if len(digits) > _MAX_REPEAT_DIGITS:
        return match.group(1), MAX_REPEAT
    return match.group(1), min(int(digits), MAX_REPEAT)


def expand_token(token: str) -> Iterator[str]:
    parsed = parse_shorthand(token)
    if parsed is None:
        return iter((token,))
    name, reps = parsed
    return repeat(name, reps)


def expand_directions(tokens: Iterable[str]) -> Iterator[str]:
    """Lazily flatten *tokens* into atomic-looking tokens, preserving order."""
    return chain.from_iterable(expand_token(t) for t in tokens)


def count_expanded(tokens: Iterable[str]) -> int:
    """Length of ``expand_directions(tokens)`` without materialising it."""
    total = 0
    for token in tokens:
        parsed = parse_shorthand(token)
        total += 1 if parsed is None else parsed[1]
    return total


def is_valid_command(token: str) -> bool:
    """Exact, case-sensitive membership in the atomic command set."""
    return token in COMMAND_NAMES

"""
Criterion construction and input parsing.

This module answers the question: "Is this user input a usable constraint?"
Everything here validates raw text (as typed into a form or a CLI flag) and
either returns clean values or raises CriterionError with a message that can
be shown to the user as-is.

A Criterion, once built, is always valid:
  - letter    : exactly one lowercase a–z character
  - positions : non-empty tuple of 1-indexed integers (>= 1)
  - exclusive_positions : if True, the letter may not appear anywhere else

The filter itself (constraints.py) never re-validates; bad input is stopped here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional, Tuple


class CriterionError(ValueError):
    """Raised when a letter/position input cannot form a Criterion."""


@dataclass(frozen=True)
class Criterion:
    letter: str
    positions: Tuple[int, ...]
    exclusive_positions: bool = True

    def __post_init__(self):
        # Guard direct construction too, so an invalid Criterion can't exist.
        if parse_letter(self.letter) != self.letter:
            raise CriterionError("Letter must be a single alphabet character.")
        if not self.positions or any(
                not isinstance(p, int) or isinstance(p, bool) or p < 1 for p in self.positions):
            raise CriterionError("All positions must be positive numbers separated by commas.")

    def describe(self) -> str:
        """Short label for listings, e.g. "a @ 1,3 (strict)"."""
        mode = "strict" if self.exclusive_positions else "loose"
        return f"{self.letter} @ {','.join(str(p) for p in self.positions)} ({mode})"


def parse_letter(text: str) -> str:
    """
    Validate a single-letter input and return it lowercased.

    Raises CriterionError for empty input or anything other than one a–z letter.
    """
    t = (text or "").strip()
    if not t:
        raise CriterionError("Please enter a letter.")
    if len(t) != 1 or not (t.isascii() and t.isalpha()):
        raise CriterionError("Letter must be a single alphabet character.")
    return t.lower()


def parse_positions(text: str) -> Tuple[int, ...]:
    """
    Parse "1, 3,5" -> (1, 3, 5). Order is kept as entered.

    Every comma-separated piece must be a positive integer.
    """
    t = (text or "").strip()
    if not t:
        raise CriterionError("Please enter at least one position.")

    out = []
    for piece in t.split(","):
        try:
            pos = int(piece.strip())
        except ValueError as e:
            raise CriterionError(
                "All positions must be positive numbers separated by commas.") from e
        if pos < 1:
            raise CriterionError("All positions must be positive numbers separated by commas.")
        out.append(pos)
    return tuple(out)


def make_criterion(letter: str, positions: str | Iterable[int], exclusive: bool = True) -> Criterion:
    """
    Build a Criterion from raw inputs.

    `positions` may be the raw comma-separated string or an iterable of ints.
    """
    if isinstance(positions, str):
        pos = parse_positions(positions)
    else:
        pos = tuple(positions)
    return Criterion(letter=parse_letter(letter), positions=pos, exclusive_positions=bool(exclusive))


def parse_excluded_letters(text: str | None) -> FrozenSet[str]:
    """Lowercase the input and keep only a–z characters (anything else is ignored)."""
    return frozenset(ch for ch in (text or "").lower() if "a" <= ch <= "z")


def parse_length(value) -> Optional[int]:
    """
    Optional positive integer (exact word length, chained positions, ...).

    Returns None when the value is absent, non-numeric or <= 0; callers decide
    whether None means "ignore" or "reject".
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        n = int(str(value).strip())
    except ValueError:
        return None
    return n if n > 0 else None

"""
Chained (stage 2) search.

Pairs each surviving primary word with "secondary" words from the full word
list that share a link letter:

    primary[target_position] == secondary[secondary_match_position]

Steps:
  1) optional strictness filter on the primary words (target letter unique)
  2) collect link letters at the target position
  3) build the secondary exclusion set (excluded letters + criterion letters)
  4) pick secondary candidates from the ORIGINAL word list, not the primary
     results; secondary words only depend on primary filtering via the link
  5) join primary x secondary with an exact per-pair letter check

Invalid configs and an empty link-letter set raise SearchRejected before any
pairs are produced. Positions are 1-indexed throughout.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, FrozenSet, Iterable, List, Optional, Sequence, Set, Tuple

from .criteria import Criterion

NO_LINK_LETTERS = "No primary words available at that position (after the strictness filter)."


class SearchRejected(ValueError):
    """A search that cannot run with the current inputs (user-correctable)."""


@dataclass(frozen=True)
class ChainedConfig:
    target_position: Optional[int] = None
    exclusive_target_position: bool = True
    secondary_length: Optional[int] = None
    secondary_match_position: Optional[int] = None


def _positive(n) -> bool:
    return isinstance(n, int) and not isinstance(n, bool) and n > 0


def validate_chained_config(config: ChainedConfig) -> None:
    """Raise SearchRejected on the first missing/non-positive number."""
    if not _positive(config.target_position):
        raise SearchRejected(
            "Please enter a valid positive number for the chained search target position "
            "in the primary word.")
    if not _positive(config.secondary_length):
        raise SearchRejected("Please enter a valid positive number for the chained search word length.")
    if not _positive(config.secondary_match_position):
        raise SearchRejected(
            "Please enter a valid positive number for the target letter position in the "
            "secondary word.")


def strict_target_filter(primary: Iterable[str], target_position: int) -> List[str]:
    """
    Keep words whose letter at `target_position` appears nowhere else.
    Words shorter than the target position are dropped.
    """
    out: List[str] = []
    for w in primary:
        if len(w) < target_position:
            continue
        ch = w[target_position - 1]
        if w.count(ch) == 1:
            out.append(w)
    return out


def link_letters(primary: Iterable[str], target_position: int) -> Set[str]:
    """Distinct letters at `target_position` (words too short contribute nothing)."""
    return {w[target_position - 1] for w in primary if len(w) >= target_position}


def secondary_exclusions(excluded_letters: AbstractSet[str],
                         criteria: Sequence[Criterion]) -> FrozenSet[str]:
    """Excluded letters plus every letter named by a primary criterion."""
    return frozenset(excluded_letters) | {c.letter for c in criteria}


def secondary_candidates(
        words: Iterable[str],
        *,
        length: int,
        match_position: int,
        links: AbstractSet[str],
        excluded: AbstractSet[str],
) -> List[str]:
    """Words of exactly `length`, free of `excluded`, whose match letter is a link."""
    out: List[str] = []
    for w in words:
        if len(w) != length:
            continue
        if any(ch in excluded for ch in w):
            continue
        if len(w) < match_position:
            continue
        if w[match_position - 1] not in links:
            continue
        out.append(w)
    return out


def chained_search(
        words: Sequence[str],
        primary_filtered: Sequence[str],
        criteria: Sequence[Criterion],
        excluded_letters: AbstractSet[str],
        config: ChainedConfig,
) -> List[Tuple[str, str]]:
    """
    Run stage 2 and return unsorted (primary, secondary) pairs.

    Args:
      words            : the full, original word list (secondary source)
      primary_filtered : output of filter_primary(...)
      criteria         : the primary criteria (their letters are barred from secondaries)
      excluded_letters : primary excluded letters (also barred from secondaries)
      config           : ChainedConfig

    Raises:
      SearchRejected on an invalid config or when no link letters exist.
    """
    validate_chained_config(config)
    target = config.target_position
    match = config.secondary_match_position

    # 1) strictness
    if config.exclusive_target_position:
        primary = strict_target_filter(primary_filtered, target)
    else:
        primary = list(primary_filtered)

    # 2) link letters
    links = link_letters(primary, target)
    if not links:
        raise SearchRejected(NO_LINK_LETTERS)

    # 3) + 4) secondary candidates, always from the original list
    excluded = secondary_exclusions(excluded_letters, criteria)
    secondaries = secondary_candidates(
        words, length=config.secondary_length, match_position=match,
        links=links, excluded=excluded,
    )

    # 5) join; exact re-check because `links` may hold several letters
    pairs: List[Tuple[str, str]] = []
    for p in primary:
        if len(p) < target:
            continue
        ch = p[target - 1]
        for s in secondaries:
            if s[match - 1] == ch:
                pairs.append((p, s))
    return pairs

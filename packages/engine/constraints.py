"""
Primary (stage 1) filtering.

Given:
  - a word list (already lowercase and trimmed)
  - a list of positional criteria (all must hold)
  - an optional exact length
  - a set of excluded letters

Return:
  - the words that pass every check, in input order.

This is the core step that narrows the list before any chained search.
"""

from typing import AbstractSet, Iterable, List, Optional, Sequence

from .criteria import Criterion


def matches_criterion(word: str, criterion: Criterion) -> bool:
    """
    True iff `word` has `criterion.letter` at every listed position and, for an
    exclusive criterion, nowhere else.
    """
    letter = criterion.letter

    # Condition A: letter at all specified positions (1-indexed)
    for pos in criterion.positions:
        if pos > len(word) or word[pos - 1] != letter:
            return False

    # Condition B: exclusive means no extra occurrences
    if criterion.exclusive_positions:
        wanted = set(criterion.positions)
        for i, ch in enumerate(word, start=1):
            if ch == letter and i not in wanted:
                return False

    return True


def filter_primary(
        words: Iterable[str],
        criteria: Sequence[Criterion],
        exact_length: Optional[int] = None,
        excluded_letters: AbstractSet[str] = frozenset(),
) -> List[str]:
    """
    Keep only words that satisfy length, exclusion and every criterion.

    Args:
      words            : word list (order is preserved in the output)
      criteria         : criteria to AND together (may be empty)
      exact_length     : required length; ignored when None or <= 0
      excluded_letters : letters that may not appear anywhere in the word

    Returns:
      List[str] of matching words.
    """
    check_length = exact_length is not None and exact_length > 0
    excluded = set(excluded_letters)
    out: List[str] = []

    for w in words:
        # 1. length
        if check_length and len(w) != exact_length:
            continue

        # 2. excluded letters
        if excluded and any(ch in excluded for ch in w):
            continue

        # 3. positional criteria
        if all(matches_criterion(w, c) for c in criteria):
            out.append(w)

    return out

"""
Search session: one immutable snapshot plus pure transitions.

SearchState holds everything a front end needs to render: the raw word input
and the list parsed from it, the criteria, primary/chained options, the last
results and at most one message (error or success).

Every transition takes a state and returns a NEW state:
  - set_word_input / load_file   -> re-parse the word list explicitly
  - add_criterion / remove_criterion / clear_all
  - update                       -> change primary/chained options
  - run_search                   -> replace results (or set an error)

User-correctable problems never raise; they land in `error_message`, and the
rest of the state is left as it was.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import FrozenSet, Optional, Tuple

from packages.datasets.io import WordListError, parse_word_list, read_text_file
from packages.engine import (ChainedConfig, Criterion, CriterionError, SearchRejected,
                             chained_search, filter_primary, make_criterion, parse_excluded_letters,
                             parse_length, sort_results)

NO_WORDS = "Please enter words or upload a CSV file first."
CLEARED = "All search criteria cleared."


@dataclass(frozen=True)
class SearchState:
    word_input: str = ""
    words: Tuple[str, ...] = ()
    criteria: Tuple[Criterion, ...] = ()
    new_exclusive_position: bool = True     # default for the next added criterion
    exact_length: Optional[int] = None
    excluded_letters: FrozenSet[str] = frozenset()
    chained_enabled: bool = False
    chained: ChainedConfig = field(default_factory=ChainedConfig)
    results: Tuple[Tuple[str, ...], ...] = ()
    error_message: str = ""
    success_message: str = ""


def _fresh(state: SearchState, **changes) -> SearchState:
    """Apply changes and drop any message left from the previous action."""
    return replace(state, **{"error_message": "", "success_message": "", **changes})


def set_word_input(state: SearchState, raw: str) -> SearchState:
    return _fresh(state, word_input=raw or "", words=tuple(parse_word_list(raw or "")))


def load_file(state: SearchState, path: Path | str) -> SearchState:
    """Load a .csv word list; on failure the current word list stays."""
    try:
        raw = read_text_file(path)
    except WordListError as e:
        return _fresh(state, error_message=str(e))
    loaded = set_word_input(state, raw)
    return replace(loaded, success_message=f'Successfully loaded "{Path(path).name}"!')


def add_criterion(state: SearchState, letter: str, positions, exclusive: Optional[bool] = None) -> SearchState:
    """Append a criterion built from raw inputs; nothing is appended on error."""
    if exclusive is None:
        exclusive = state.new_exclusive_position
    try:
        crit = make_criterion(letter, positions, exclusive)
    except CriterionError as e:
        return _fresh(state, error_message=str(e))
    return _fresh(state, criteria=state.criteria + (crit,))


def remove_criterion(state: SearchState, index: int) -> SearchState:
    """Remove the criterion at 0-based `index`."""
    if not 0 <= index < len(state.criteria):
        return _fresh(state, error_message=f"No criterion at position {index + 1}.")
    return _fresh(state, criteria=state.criteria[:index] + state.criteria[index + 1:])


def update(state: SearchState, **options) -> SearchState:
    """
    Set primary/chained options by name.

    Accepted keys: exact_length, excluded_letters, chained_enabled,
    new_exclusive_position, and the ChainedConfig fields (target_position,
    exclusive_target_position, secondary_length, secondary_match_position).

    Values may be raw input: numbers go through parse_length (non-positive or
    non-numeric -> None) and excluded letters through parse_excluded_letters.
    """
    chained_fields = {k: options.pop(k) for k in list(options) if k in ChainedConfig.__dataclass_fields__}
    allowed = {"exact_length", "excluded_letters", "chained_enabled", "new_exclusive_position"}
    unknown = set(options) - allowed
    if unknown:
        raise TypeError(f"unknown search options: {sorted(unknown)}")

    if "exact_length" in options:
        options["exact_length"] = parse_length(options["exact_length"])
    if "excluded_letters" in options:
        letters = options["excluded_letters"]
        if not isinstance(letters, str):
            letters = "".join(letters or ())
        options["excluded_letters"] = parse_excluded_letters(letters)
    for key in ("target_position", "secondary_length", "secondary_match_position"):
        if key in chained_fields:
            chained_fields[key] = parse_length(chained_fields[key])
    return _fresh(state, chained=replace(state.chained, **chained_fields), **options)


def clear_all(state: SearchState) -> SearchState:
    """Reset every primary and chained field; the word list is kept."""
    return SearchState(word_input=state.word_input, words=state.words, success_message=CLEARED)


def run_search(state: SearchState) -> SearchState:
    """
    Execute the search against the current snapshot.

    Success replaces `results`; a rejection sets `error_message` and keeps the
    previous results.
    """
    if not state.words:
        return _fresh(state, error_message=NO_WORDS)

    primary = filter_primary(state.words, state.criteria, state.exact_length, state.excluded_letters)

    if state.chained_enabled:
        try:
            pairs = chained_search(state.words, primary, state.criteria,
                                   state.excluded_letters, state.chained)
        except SearchRejected as e:
            return _fresh(state, error_message=str(e))
        results = sort_results(pairs)
    else:
        results = sort_results([(w,) for w in primary])

    return _fresh(state, results=tuple(results))

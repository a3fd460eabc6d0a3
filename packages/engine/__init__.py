from .criteria import (Criterion, CriterionError, make_criterion, parse_letter, parse_positions,
                       parse_excluded_letters, parse_length)
from .constraints import filter_primary, matches_criterion
from .chained import ChainedConfig, SearchRejected, chained_search, NO_LINK_LETTERS
from .ordering import sort_results

__all__ = [
    "Criterion", "CriterionError", "make_criterion", "parse_letter", "parse_positions",
    "parse_excluded_letters", "parse_length",
    "filter_primary", "matches_criterion",
    "ChainedConfig", "SearchRejected", "chained_search", "NO_LINK_LETTERS",
    "sort_results",
]

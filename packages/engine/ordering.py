"""
Presentation order for search results.

  - (word,)              -> ascending by word
  - (primary, secondary) -> by secondary, then primary

Comparison goes through locale.strxfrm so it follows the active collation
(plain code-point order under the default "C" locale).
"""

import locale
from typing import List, Sequence, Tuple

ResultPair = Tuple[str, ...]


def _key(pair: Sequence[str]) -> Tuple[str, ...]:
    if len(pair) >= 2:
        return locale.strxfrm(pair[1]), locale.strxfrm(pair[0])
    return (locale.strxfrm(pair[0]),)


def sort_results(pairs: Sequence[ResultPair]) -> List[ResultPair]:
    """Return a new list sorted for display (input is not modified)."""
    return sorted((tuple(p) for p in pairs), key=_key)

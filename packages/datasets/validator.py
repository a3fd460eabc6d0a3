"""
Word list report for the searcher.

What this module does:
- Summarize a parsed word list: total/unique counts, length histogram.
- Flag entries that are not plain a–z words (they still load; criteria simply
  never match their odd characters).
- Compute a SHA-256 over the normalized list so exports can record exactly
  which list a search ran against.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from packages.datasets import load_word_file, summarize_word_list, pretty_summary
    words = load_word_file("words.csv")
    print(pretty_summary(summarize_word_list(words, path="words.csv")))
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, asdict, field
from typing import Dict, List, Optional, Sequence
import hashlib


# -----------------------------
# Dataclass for structured reports
# -----------------------------

@dataclass
class WordListReport:
    """Diagnostics and metadata for one word list."""
    path: Optional[str]          # source file (None for typed/pasted text)
    count: int                   # number of entries (duplicates included)
    unique_count: int            # distinct entries
    non_alpha: int               # entries containing anything besides a–z
    lengths: Dict[int, int]      # word length -> number of entries
    sha256: str                  # SHA-256 of the newline-joined list
    passed: bool
    issues: List[str] = field(default_factory=list)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_words(words: Sequence[str]) -> str:
    h = hashlib.sha256()
    h.update("\n".join(words).encode("utf-8"))
    return h.hexdigest()


def _is_plain_word(w: str) -> bool:
    return w.isascii() and w.isalpha()


# -----------------------------
# Public API
# -----------------------------

def summarize_word_list(words: Sequence[str], path: Optional[str] = None) -> Dict:
    """
    Build a report for an already-parsed word list.

    Parameters
    ----------
    words : Sequence[str]
        Output of parse_word_list / load_word_file.
    path : str, optional
        Where the list came from, recorded as-is.

    Returns
    -------
    Dict
        JSON-serializable dictionary (see WordListReport). `passed` is False
        only for an empty list; duplicates and odd entries are warnings.
    """
    issues: List[str] = []

    unique = set(words)
    non_alpha = sum(1 for w in words if not _is_plain_word(w))
    lengths = dict(sorted(Counter(len(w) for w in words).items()))

    if not words:
        issues.append("word list is empty")
    if len(unique) != len(words):
        issues.append(f"word list contains {len(words) - len(unique)} duplicate entr"
                      f"{'y' if len(words) - len(unique) == 1 else 'ies'}")
    if non_alpha:
        # Surface a few examples to debug quickly (limit to 5 for brevity)
        sample = [w for w in words if not _is_plain_word(w)][:5]
        issues.append(f"{non_alpha} non-alphabetic entr{'y' if non_alpha == 1 else 'ies'} (e.g., {sample})")

    rep = WordListReport(
        path=path,
        count=len(words),
        unique_count=len(unique),
        non_alpha=non_alpha,
        lengths=lengths,
        sha256=_sha256_words(words),
        passed=bool(words),
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        words=12 (uniq=11, sha=abc123...) | lengths 2:3 5:9 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    lengths = " ".join(f"{n}:{c}" for n, c in report["lengths"].items()) or "-"
    src = f"{report['path']} | " if report.get("path") else ""
    return (
        f"{src}words={report['count']} (uniq={report['unique_count']}, sha={sha}) "
        f"| lengths {lengths} | {status}"
    )

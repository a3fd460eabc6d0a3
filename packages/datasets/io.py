from __future__ import annotations
import re
from pathlib import Path
from typing import Iterable, List

# Bulk uploads are comma-separated text read as UTF-8.
ACCEPTED_SUFFIX = ".csv"

_SPLIT_RE = re.compile(r"[\n,]+")


class WordListError(ValueError):
    """A word list file that can't be used; the message is user-facing."""


def parse_word_list(raw: str) -> List[str]:
    """
    Split raw text on newlines/commas, trim, lowercase, drop empty entries.

    "Apple, banana\\n\\n  Cherry " -> ["apple", "banana", "cherry"]
    Duplicates are kept; order follows the input.
    """
    if not raw:
        return []
    return [w.strip().lower() for w in _SPLIT_RE.split(raw) if w.strip()]


def read_text_file(p: Path | str) -> str:
    """
    Read an uploaded word list as UTF-8 text.
    Raises WordListError for a non-.csv path, a missing file or bad encoding.
    """
    p = Path(p)
    if p.suffix.lower() != ACCEPTED_SUFFIX:
        raise WordListError("Please upload a .csv file.")
    try:
        return p.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise WordListError("Error reading file. Please ensure it is a valid CSV.") from e
    except OSError as e:
        raise WordListError("Failed to read file.") from e


def load_word_file(p: Path | str) -> List[str]:
    """Read a .csv word list and parse it into a WordList."""
    return parse_word_list(read_text_file(p))


def read_lines(p: Path | str) -> List[str]:
    """
    Raw lines of any UTF-8 word list file (no .csv check, unlike read_text_file).
    Used by the maintenance scripts. Raises FileNotFoundError for a missing path.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write one word per line (UTF-8, trailing newline; an empty list gives an
    empty file). Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    text = "\n".join(lines)
    p.write_text(text + "\n" if text else "", encoding="utf-8")
    return str(p)

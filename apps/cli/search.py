# apps/cli/search.py
"""
CLI entry point for a one-shot word search.

This script:
  1) Loads the word list (a .csv file or inline text) and prints a one-liner
     summary (counts, lengths, SHA).
  2) Builds the criteria and options from flags via the session transitions,
     so bad input is reported exactly as the interactive shell reports it.
  3) Runs the search, prints the results and, optionally, writes:
       - CSV:  one row per result
       - JSON: manifest with the search settings and word list report

Examples:
    python -m apps.cli.search --words words.csv --length 5 --criterion a:1 --exclude xyz
    python -m apps.cli.search --text "ab,ba,xy" --length 2 --chain \
        --chain-target 1 --chain-length 2 --chain-match 1 --chain-loose
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Sequence

from packages.datasets import summarize_word_list, pretty_summary
from packages.engine import parse_excluded_letters, parse_length
from packages.export import write_results_csv, write_manifest, describe_state, timestamp_id
from packages.session import SearchState, add_criterion, load_file, run_search, set_word_input, update

EXIT_REJECTED = 2


def format_result(pair: Sequence[str]) -> str:
    """("ab",) -> "ab";  ("ab", "at") -> "ab -> at"."""
    return " -> ".join(pair)


def _split_criterion(item: str) -> tuple[str, str]:
    """'a:1,3' -> ('a', '1,3'). A missing ':' leaves the positions empty."""
    letter, _, positions = item.partition(":")
    return letter, positions


def _report(state: SearchState) -> bool:
    """Print the state's message, if any. Returns False when it was an error."""
    if state.error_message:
        print(f"Error! {state.error_message}", file=sys.stderr)
        return False
    if state.success_message:
        print(f"Success! {state.success_message}")
    return True


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Word Searcher: filter a word list by letter positions")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--words", help="path to a .csv word list (newline/comma separated)")
    src.add_argument("--text", help="inline word list, e.g. 'apple,bread,crane'")

    ap.add_argument("--length", help="exact word length (ignored if empty or <= 0)")
    ap.add_argument("--exclude", default="", help="letters that must not appear, e.g. 'xyz'")
    ap.add_argument("--criterion", action="append", default=[], metavar="L:POS[,POS]",
                    help="letter at position(s), nowhere else (repeatable)")
    ap.add_argument("--loose-criterion", action="append", default=[], metavar="L:POS[,POS]",
                    help="letter at position(s), may also appear elsewhere (repeatable)")

    ap.add_argument("--chain", action="store_true", help="enable chained search")
    ap.add_argument("--chain-target", help="position in the primary word that links to a secondary word")
    ap.add_argument("--chain-length", help="length of secondary words")
    ap.add_argument("--chain-match", help="position in the secondary word that must hold the link letter")
    ap.add_argument("--chain-loose", action="store_true",
                    help="allow the link letter to repeat elsewhere in the primary word")

    ap.add_argument("--out", help="write results to this CSV path")
    ap.add_argument("--manifest", action="store_true",
                    help="also write a JSON manifest next to --out (or into reports/)")
    return ap


def main(argv: List[str] | None = None) -> int:
    """
    Parse CLI args, run the search, print and optionally export the results.
    Returns the process exit status (2 when the input was rejected).
    """
    args = build_parser().parse_args(argv)

    # 1) Word list
    state = SearchState()
    if args.words:
        state = load_file(state, args.words)
        if not _report(state):
            return EXIT_REJECTED
    else:
        state = set_word_input(state, args.text)

    wl_report = summarize_word_list(state.words, path=args.words)
    print(pretty_summary(wl_report))

    # 2) Criteria and options
    for item in args.criterion:
        state = add_criterion(state, *_split_criterion(item), exclusive=True)
        if not _report(state):
            return EXIT_REJECTED
    for item in args.loose_criterion:
        state = add_criterion(state, *_split_criterion(item), exclusive=False)
        if not _report(state):
            return EXIT_REJECTED

    state = update(
        state,
        exact_length=parse_length(args.length),
        excluded_letters=parse_excluded_letters(args.exclude),
        chained_enabled=args.chain,
        target_position=parse_length(args.chain_target),
        exclusive_target_position=not args.chain_loose,
        secondary_length=parse_length(args.chain_length),
        secondary_match_position=parse_length(args.chain_match),
    )

    # 3) Search
    state = run_search(state)
    if not _report(state):
        return EXIT_REJECTED

    for pair in state.results:
        print(format_result(pair))
    print(f"{len(state.results)} result(s)")

    # 4) Optional export
    if args.out or args.manifest:
        run_id = timestamp_id()
        csv_path = Path(args.out) if args.out else Path("reports") / f"search_{run_id}.csv"
        write_results_csv(state.results, str(csv_path))
        print(f"Wrote: {csv_path}")
        if args.manifest:
            manifest_path = csv_path.with_name(csv_path.stem + "_manifest.json")
            write_manifest({
                "run_id": run_id,
                "search": describe_state(state),
                "wordlist": wl_report,
                "num_results": len(state.results),
            }, str(manifest_path))
            print(f"Wrote: {manifest_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())

# apps/cli/shell.py
"""
Interactive Word Searcher.

A small line-oriented shell over the session transitions. Each command maps
to one transition, the new state replaces the old one, and the state's
message (if any) is printed. Type `help` for the command list.

    python -m apps.cli.shell [--words words.csv]
"""

from __future__ import annotations

import argparse
import shlex
import sys
from typing import Callable, Dict, List, TextIO

from packages.datasets import summarize_word_list, pretty_summary
from packages.engine import parse_excluded_letters, parse_length
from packages.export import write_results_csv
from packages.session import (SearchState, add_criterion, clear_all, load_file, remove_criterion,
                              run_search, set_word_input, update)

from apps.cli.search import format_result

HELP = """\
Commands:
  load PATH                 load a .csv word list
  words TEXT                use TEXT as the word list (comma/newline separated)
  add LETTER POS[,POS] [loose]
                            add a criterion (strict unless 'loose')
  remove N                  remove criterion N (as shown by 'list')
  list                      show criteria and options
  length N                  exact word length (0 or empty to ignore)
  exclude LETTERS           letters that must not appear
  chain on|off              enable/disable chained search
  target N                  chained: position in the primary word
  strict on|off             chained: link letter unique in the primary word
  chain-length N            chained: secondary word length
  match N                   chained: position in the secondary word
  search                    run the search
  save PATH                 write the last results to CSV
  clear                     reset criteria and options
  help                      show this text
  quit                      leave
"""


def _on_off(arg: str) -> bool:
    a = arg.strip().lower()
    if a not in ("on", "off"):
        raise ValueError("expected 'on' or 'off'")
    return a == "on"


def _listing(state: SearchState) -> str:
    lines = [f"words: {len(state.words)}"]
    if state.criteria:
        for i, c in enumerate(state.criteria, 1):
            lines.append(f"  {i}. {c.describe()}")
    else:
        lines.append("  (no criteria)")
    lines.append(f"length: {state.exact_length or '-'}")
    lines.append(f"exclude: {''.join(sorted(state.excluded_letters)) or '-'}")
    cfg = state.chained
    lines.append(
        f"chain: {'on' if state.chained_enabled else 'off'} "
        f"(target={cfg.target_position or '-'}, strict={'on' if cfg.exclusive_target_position else 'off'}, "
        f"length={cfg.secondary_length or '-'}, match={cfg.secondary_match_position or '-'})"
    )
    return "\n".join(lines)


class Shell:
    """Holds the current SearchState and dispatches commands to transitions."""

    def __init__(self, state: SearchState | None = None, out: TextIO | None = None):
        self.state = state or SearchState()
        self.out = out or sys.stdout
        self._commands: Dict[str, Callable[[List[str]], None]] = {
            "load": self._load,
            "words": self._words,
            "add": self._add,
            "remove": self._remove,
            "list": lambda args: self._say(_listing(self.state)),
            "length": lambda args: self._set(exact_length=parse_length(" ".join(args))),
            "exclude": lambda args: self._set(excluded_letters=parse_excluded_letters(" ".join(args))),
            "chain": lambda args: self._set(chained_enabled=_on_off(" ".join(args))),
            "target": lambda args: self._set(target_position=parse_length(" ".join(args))),
            "strict": lambda args: self._set(exclusive_target_position=_on_off(" ".join(args))),
            "chain-length": lambda args: self._set(secondary_length=parse_length(" ".join(args))),
            "match": lambda args: self._set(secondary_match_position=parse_length(" ".join(args))),
            "search": self._search,
            "save": self._save,
            "clear": lambda args: self._apply(clear_all(self.state)),
            "help": lambda args: self._say(HELP.rstrip()),
        }

    # ---- output helpers ----
    def _say(self, text: str) -> None:
        print(text, file=self.out)

    def _apply(self, new_state: SearchState) -> None:
        self.state = new_state
        if new_state.error_message:
            self._say(f"Error! {new_state.error_message}")
        elif new_state.success_message:
            self._say(f"Success! {new_state.success_message}")

    def _set(self, **options) -> None:
        self._apply(update(self.state, **options))

    # ---- commands ----
    def _load(self, args: List[str]) -> None:
        if not args:
            self._say("Error! usage: load PATH")
            return
        self._apply(load_file(self.state, " ".join(args)))
        if not self.state.error_message:
            self._say(pretty_summary(summarize_word_list(self.state.words)))

    def _words(self, args: List[str]) -> None:
        self._apply(set_word_input(self.state, " ".join(args)))
        self._say(f"{len(self.state.words)} word(s) loaded")

    def _add(self, args: List[str]) -> None:
        loose = bool(args) and args[-1].lower() == "loose"
        if loose:
            args = args[:-1]
        letter = args[0] if args else ""
        positions = "".join(args[1:])
        self._apply(add_criterion(self.state, letter, positions, exclusive=False if loose else None))

    def _remove(self, args: List[str]) -> None:
        try:
            n = int(args[0])
        except (IndexError, ValueError):
            self._say("Error! usage: remove N")
            return
        self._apply(remove_criterion(self.state, n - 1))

    def _search(self, args: List[str]) -> None:
        self._apply(run_search(self.state))
        if self.state.error_message:
            return
        for pair in self.state.results:
            self._say(format_result(pair))
        self._say(f"{len(self.state.results)} result(s)")

    def _save(self, args: List[str]) -> None:
        if not args:
            self._say("Error! usage: save PATH")
            return
        try:
            written = write_results_csv(self.state.results, " ".join(args))
        except OSError as e:
            self._say(f"Error! Failed to write file: {e}")
            return
        self._say(f"Wrote: {written}")

    # ---- loop ----
    def handle(self, line: str) -> bool:
        """Run one command line. Returns False when the shell should exit."""
        try:
            parts = shlex.split(line)
        except ValueError as e:
            self._say(f"Error! {e}")
            return True
        if not parts:
            return True
        cmd, args = parts[0].lower(), parts[1:]
        if cmd in ("quit", "exit"):
            return False
        fn = self._commands.get(cmd)
        if fn is None:
            self._say(f"Error! unknown command '{cmd}' (try 'help')")
            return True
        try:
            fn(args)
        except ValueError as e:
            self._say(f"Error! {e}")
        return True

    def loop(self, stdin: TextIO | None = None) -> None:
        stdin = stdin or sys.stdin
        interactive = stdin.isatty()
        while True:
            if interactive:
                self.out.write("search> ")
                self.out.flush()
            line = stdin.readline()
            if not line:
                break
            if not self.handle(line):
                break


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Word Searcher interactive shell")
    ap.add_argument("--words", help="optional .csv word list to load at start")
    args = ap.parse_args(argv)

    shell = Shell()
    shell._say("Word Searcher. Type 'help' for commands.")
    if args.words:
        shell.handle(f"load {shlex.quote(args.words)}")
    shell.loop()
    return 0


if __name__ == "__main__":
    sys.exit(main())

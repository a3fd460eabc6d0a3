from .state import (SearchState, set_word_input, load_file, add_criterion, remove_criterion, update,
                    clear_all, run_search, NO_WORDS, CLEARED)

__all__ = ["SearchState", "set_word_input", "load_file", "add_criterion", "remove_criterion",
           "update", "clear_all", "run_search", "NO_WORDS", "CLEARED"]

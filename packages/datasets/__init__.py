from .validator import summarize_word_list, pretty_summary
from .io import (WordListError, parse_word_list, read_text_file, load_word_file, read_lines,
                 write_lines)

__all__ = ["summarize_word_list", "pretty_summary", "WordListError", "parse_word_list",
           "read_text_file", "load_word_file"]

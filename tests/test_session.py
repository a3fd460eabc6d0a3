from pathlib import Path

import pytest
from packages.engine import ChainedConfig, Criterion
from packages.session import (SearchState, set_word_input, load_file, add_criterion, remove_criterion,
                              update, clear_all, run_search, NO_WORDS, CLEARED)


def _loaded(text="ab,ba,xy"):
    return set_word_input(SearchState(), text)


def test_word_input_is_parsed_explicitly():
    s = set_word_input(SearchState(), "Apple, bread\n\n  CRANE ")
    assert s.words == ("apple", "bread", "crane")
    assert s.word_input == "Apple, bread\n\n  CRANE "

def test_search_without_words_is_rejected():
    s = run_search(SearchState())
    assert s.error_message == NO_WORDS
    assert s.results == ()

def test_add_and_remove_criteria():
    s = add_criterion(_loaded(), "A", "1")
    s = add_criterion(s, "b", "2", exclusive=False)
    assert s.criteria == (Criterion("a", (1,), True), Criterion("b", (2,), False))
    s = remove_criterion(s, 0)
    assert s.criteria == (Criterion("b", (2,), False),)
    assert s.error_message == ""

def test_add_criterion_uses_pending_exclusive_default():
    s = update(_loaded(), new_exclusive_position=False)
    s = add_criterion(s, "a", "1")
    assert s.criteria[0].exclusive_positions is False

@pytest.mark.parametrize("letter,positions,message", [
    ("", "1", "Please enter a letter."),
    ("ab", "1", "Letter must be a single alphabet character."),
    ("a", "", "Please enter at least one position."),
    ("a", "0,2", "All positions must be positive numbers separated by commas."),
])
def test_bad_criterion_appends_nothing(letter, positions, message):
    before = add_criterion(_loaded(), "x", "1")
    after = add_criterion(before, letter, positions)
    assert after.error_message == message
    assert after.criteria == before.criteria

def test_remove_out_of_range():
    s = remove_criterion(_loaded(), 3)
    assert s.error_message == "No criterion at position 4."

def test_messages_are_cleared_by_next_action():
    s = add_criterion(_loaded(), "", "1")
    assert s.error_message
    s = add_criterion(s, "a", "1")
    assert s.error_message == "" and s.success_message == ""

def test_plain_search_sorts_results():
    s = run_search(update(_loaded("pear,apple,fig,banana"), exact_length=None))
    assert s.results == (("apple",), ("banana",), ("fig",), ("pear",))

def test_chained_search_results_sorted_by_secondary():
    s = _loaded("ab,ba,xy,at")
    s = update(s, exact_length=2, chained_enabled=True, target_position=1,
               exclusive_target_position=False, secondary_length=2, secondary_match_position=1)
    s = run_search(s)
    assert s.error_message == ""
    assert s.results == (
        ("ab", "ab"), ("at", "ab"), ("ab", "at"), ("at", "at"), ("ba", "ba"), ("xy", "xy"),
    )

def test_rejected_chained_search_keeps_previous_results():
    s = run_search(_loaded())
    assert len(s.results) == 3
    bad = update(s, chained_enabled=True, target_position=1, secondary_length=0,
                 secondary_match_position=1)
    rejected = run_search(bad)
    assert "word length" in rejected.error_message
    assert rejected.results == s.results

def test_no_link_letters_is_reported():
    s = update(_loaded("aa,bb"), chained_enabled=True, target_position=1,
               exclusive_target_position=True, secondary_length=2, secondary_match_position=1)
    s = run_search(s)
    assert s.error_message.startswith("No primary words available at that position")

def test_clear_all_resets_options_but_keeps_words():
    s = add_criterion(_loaded(), "a", "1")
    s = update(s, exact_length=2, excluded_letters="xyz", chained_enabled=True, target_position=2,
               exclusive_target_position=False, new_exclusive_position=False)
    s = run_search(s)
    cleared = clear_all(s)
    assert cleared.words == s.words
    assert cleared.criteria == ()
    assert cleared.exact_length is None
    assert cleared.excluded_letters == frozenset()
    assert cleared.chained_enabled is False
    assert cleared.chained == ChainedConfig()
    assert cleared.new_exclusive_position is True
    assert cleared.results == ()
    assert cleared.success_message == CLEARED

def test_update_rejects_unknown_options():
    with pytest.raises(TypeError):
        update(SearchState(), colour="red")

def test_transitions_do_not_mutate_input_state():
    s = _loaded()
    add_criterion(s, "a", "1")
    run_search(s)
    assert s.criteria == () and s.results == ()


# --- file loading ---
def test_load_csv_file(tmp_path: Path):
    p = tmp_path / "words.csv"
    p.write_text("Apple,bread\r\ncrane\n", encoding="utf-8")
    s = load_file(SearchState(), p)
    assert s.words == ("apple", "bread", "crane")
    assert s.success_message == 'Successfully loaded "words.csv"!'

def test_load_wrong_type_keeps_word_list(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("zebra\n", encoding="utf-8")
    before = _loaded()
    s = load_file(before, p)
    assert s.error_message == "Please upload a .csv file."
    assert s.words == before.words

def test_load_missing_or_undecodable(tmp_path: Path):
    s = load_file(_loaded(), tmp_path / "nope.csv")
    assert s.error_message == "Failed to read file."
    bad = tmp_path / "bad.csv"
    bad.write_bytes(b"\xff\xfe\xfa")
    s = load_file(_loaded(), bad)
    assert s.error_message == "Error reading file. Please ensure it is a valid CSV."
    assert s.words == ("ab", "ba", "xy")


# --- raw option values ---
def test_update_normalizes_raw_values():
    s = update(_loaded("apple,bread,fig"), excluded_letters="P!", exact_length="5")
    assert s.excluded_letters == frozenset("p")
    assert s.exact_length == 5
    assert run_search(s).results == (("bread",),)

@pytest.mark.parametrize("raw", ["0", "-1", "abc", "", None])
def test_update_ignores_unusable_length(raw):
    s = update(_loaded("ab,abc"), exact_length=raw)
    assert s.exact_length is None
    assert run_search(s).results == (("ab",), ("abc",))

def test_update_parses_chained_numbers():
    s = update(_loaded(), chained_enabled=True, target_position="1", secondary_length=" 2 ",
               secondary_match_position="x", exclusive_target_position=False)
    assert s.chained == ChainedConfig(1, False, 2, None)
    rejected = run_search(s)
    assert "position in the secondary word" in rejected.error_message

def test_error_paths_return_messages():
    assert run_search(SearchState()).error_message == NO_WORDS
    assert add_criterion(SearchState(), "", "1").error_message == "Please enter a letter."
    assert remove_criterion(SearchState(), 0).error_message == "No criterion at position 1."

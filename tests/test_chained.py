import pytest
from packages.engine import (ChainedConfig, Criterion, SearchRejected, NO_LINK_LETTERS,
                             chained_search, filter_primary, sort_results)
from packages.engine.chained import (link_letters, secondary_candidates, strict_target_filter,
                                     validate_chained_config)


def _cfg(target=1, strict=False, length=2, match=1):
    return ChainedConfig(target_position=target, exclusive_target_position=strict,
                         secondary_length=length, secondary_match_position=match)


def test_join_is_exact_on_small_list():
    words = ["ab", "ba", "xy"]
    primary = filter_primary(words, [], exact_length=2)
    assert primary == ["ab", "ba", "xy"]
    assert link_letters(primary, 1) == {"a", "b", "x"}

    pairs = chained_search(words, primary, [], frozenset(), _cfg())
    assert all(s[0] == p[0] for p, s in pairs)
    assert sorted(pairs) == [("ab", "ab"), ("ba", "ba"), ("xy", "xy")]
    assert [s for p, s in pairs if p == "ab"] == ["ab"]

def test_secondaries_come_from_original_list():
    words = ["cat", "cot", "at", "to", "ta"]
    crit = [Criterion("c", (1,), True)]
    primary = filter_primary(words, crit, exact_length=3)
    assert primary == ["cat", "cot"]
    # link letters {a, o}; "at" is not a primary result but still pairs
    pairs = chained_search(words, primary, crit, frozenset(), _cfg(target=2, length=2, match=1))
    assert pairs == [("cat", "at")]

def test_secondaries_exclude_criterion_and_excluded_letters():
    words = ["cab", "ca", "ab", "eb"]
    crit = [Criterion("c", (1,), True)]
    primary = filter_primary(words, crit, exact_length=3)
    # link 'a' at position 2; "ca" matches but contains the criterion letter
    assert chained_search(words, primary, crit, frozenset(), _cfg(target=2, length=2, match=2)) == []

    excluded = secondary_candidates(["ab", "ax"], length=2, match_position=1,
                                    links={"a"}, excluded=frozenset("x"))
    assert excluded == ["ab"]

def test_strictness_filter():
    assert strict_target_filter(["abba", "abcd", "a"], 2) == ["abcd"]
    assert strict_target_filter(["aab", "bac"], 1) == ["bac"]

def test_strict_target_can_leave_no_link_letters():
    words = ["aa", "ab"]
    with pytest.raises(SearchRejected) as ei:
        chained_search(words, ["aa"], [], frozenset(), _cfg(target=1, strict=True))
    assert str(ei.value) == NO_LINK_LETTERS

def test_target_past_every_word_is_rejected():
    with pytest.raises(SearchRejected, match="No primary words"):
        chained_search(["ab"], ["ab"], [], frozenset(), _cfg(target=5))

def test_primary_shorter_than_target_is_skipped_when_loose():
    pairs = chained_search(["abc", "a", "cz"], ["abc", "a"], [], frozenset(),
                           _cfg(target=3, length=2, match=1))
    assert pairs == [("abc", "cz")]

@pytest.mark.parametrize("cfg,fragment", [
    (ChainedConfig(None, True, 2, 1), "target position in the primary word"),
    (ChainedConfig(0, True, 2, 1), "target position in the primary word"),
    (ChainedConfig(1, True, 0, 1), "chained search word length"),
    (ChainedConfig(1, True, None, 1), "chained search word length"),
    (ChainedConfig(1, True, 2, -1), "position in the secondary word"),
])
def test_invalid_config_rejected_before_any_work(cfg, fragment):
    with pytest.raises(SearchRejected, match=fragment):
        validate_chained_config(cfg)
    # empty inputs would otherwise trip the link-letter check instead
    with pytest.raises(SearchRejected, match=fragment):
        chained_search([], [], [], frozenset(), cfg)

def test_sort_results():
    assert sort_results([("b",), ("a",), ("c",)]) == [("a",), ("b",), ("c",)]
    chained = [("zz", "ab"), ("aa", "ab"), ("aa", "aa")]
    assert sort_results(chained) == [("aa", "aa"), ("aa", "ab"), ("zz", "ab")]
    assert chained == [("zz", "ab"), ("aa", "ab"), ("aa", "aa")]  # input untouched

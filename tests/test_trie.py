from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from completer.trie import TernarySearchTrie, TrieNode

SAMPLE = ["a", "aa", "aaab", "abc", "def"]

words_strategy = st.lists(st.text(alphabet="abcd", min_size=1, max_size=6), max_size=40)
prefix_strategy = st.text(alphabet="abcde", max_size=4)


def _shape(node: TrieNode | None) -> tuple | None:
    if node is None:
        return None
    return (node.char, node.is_completion, _shape(node.left), _shape(node.mid), _shape(node.right))


@pytest.fixture
def sample_trie() -> TernarySearchTrie:
    return TernarySearchTrie(SAMPLE)


def test_contains_sample(sample_trie: TernarySearchTrie) -> None:
    assert sample_trie.contains("aa")
    assert not sample_trie.contains("ab")
    assert not sample_trie.contains("")
    assert not sample_trie.contains("abcd")
    assert "def" in sample_trie
    assert 42 not in sample_trie


def test_completions_sample(sample_trie: TernarySearchTrie) -> None:
    assert sample_trie.get_completions("a") == ["a", "aa", "aaab", "abc"]
    assert sample_trie.get_completions("a", 2) == ["a", "aa"]
    assert sample_trie.get_completions("z") == []
    assert sample_trie.get_completions("aaab") == ["aaab"]
    assert sample_trie.get_completions("aaa") == ["aaab"]
    assert sample_trie.get_completions("de") == ["def"]


def test_empty_prefix_yields_nothing() -> None:
    trie = TernarySearchTrie(["b", "a", "c"])
    assert trie.get_completions("") == []
    assert trie.get_completions(None) == []
    assert trie.get_completions("a") == ["a"]
    assert all(trie.contains(s) for s in ("a", "b", "c"))


def test_add_twice_counts_once() -> None:
    trie = TernarySearchTrie()
    trie.add("a")
    trie.add("a")
    assert trie.size == 1
    assert len(trie) == 1
    assert trie.get_completions("a") == ["a"]


def test_add_prefix_of_existing_entry() -> None:
    trie = TernarySearchTrie(["apple"])
    assert not trie.contains("app")
    assert trie.is_prefix("app")
    trie.add("app")
    assert trie.contains("app")
    assert trie.size == 2
    assert trie.get_completions("ap") == ["app", "apple"]


def test_non_positive_limit_means_no_cap(sample_trie: TernarySearchTrie) -> None:
    full = sample_trie.get_completions("a")
    assert sample_trie.get_completions("a", 0) == full
    assert sample_trie.get_completions("a", -3) == full
    assert sample_trie.get_completions("a", 1) == ["a"]


def test_empty_trie_queries() -> None:
    trie = TernarySearchTrie()
    assert trie.root is None
    assert not trie
    assert trie.size == 0
    assert not trie.contains("a")
    assert not trie.is_prefix("")
    assert trie.get_completions("a") == []
    assert list(trie) == []
    assert trie.height() == 0


def test_rejects_empty_string() -> None:
    trie = TernarySearchTrie()
    with pytest.raises(ValueError):
        trie.add("")
    assert trie.size == 0
    with pytest.raises(ValueError):
        TernarySearchTrie(["ok", ""])


def test_rejects_non_strings() -> None:
    with pytest.raises(TypeError):
        TernarySearchTrie().add(7)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        TernarySearchTrie("abc")


def test_accepts_generators() -> None:
    trie = TernarySearchTrie(w for w in SAMPLE)
    assert trie.size == len(SAMPLE)


def test_iter_yields_everything_sorted() -> None:
    words = ["pear", "peach", "apple", "apricot", "banana", "pea"]
    trie = TernarySearchTrie(words, seed=3)
    assert list(trie) == sorted(words)
    assert repr(trie) == "TernarySearchTrie(size=6)"


def test_iter_completions_is_lazy(sample_trie: TernarySearchTrie) -> None:
    it = sample_trie.iter_completions("a")
    assert next(it) == "a"
    assert next(it) == "aa"


def test_long_strings_do_not_recurse() -> None:
    long_word = "x" * 5000
    trie = TernarySearchTrie([long_word, long_word[:-1]])
    assert trie.contains(long_word)
    assert trie.get_completions("xxx") == [long_word[:-1], long_word]


def test_same_seed_same_shape() -> None:
    words = [f"w{i:03d}" for i in range(200)]
    a = TernarySearchTrie(words, seed=11)
    b = TernarySearchTrie(words, seed=11)
    assert _shape(a.root) == _shape(b.root)


def test_sorted_input_stays_shallow() -> None:
    # One character per entry, so the top level is a plain BST over 1000 keys.
    words = [chr(0x100 + i) for i in range(1000)]
    trie = TernarySearchTrie(words, seed=0)
    assert trie.size == 1000
    assert trie.height() < 100

    degenerate = TernarySearchTrie()
    for w in words:
        degenerate.add(w)
    assert degenerate.height() == 1000


def test_bst_ordering_holds() -> None:
    trie = TernarySearchTrie([f"k{i}" for i in range(300)] + ["z", "m", "a"], seed=5)

    def check(node: TrieNode | None, lo: str | None, hi: str | None) -> int:
        if node is None:
            return 0
        assert lo is None or node.char > lo
        assert hi is None or node.char < hi
        marked = int(node.is_completion)
        marked += check(node.left, lo, node.char)
        marked += check(node.right, node.char, hi)
        marked += check(node.mid, None, None)
        return marked

    assert check(trie.root, None, None) == trie.size


@settings(max_examples=200)
@given(words=words_strategy, probe=prefix_strategy)
def test_membership_matches_set(words: list[str], probe: str) -> None:
    """Exactly the inserted strings are members."""
    trie = TernarySearchTrie(words)
    assert trie.size == len(set(words))
    for w in words:
        assert trie.contains(w)
    assert trie.contains(probe) == (probe in set(words))


@settings(max_examples=200)
@given(words=words_strategy, prefix=prefix_strategy)
def test_completions_match_filtered_sort(words: list[str], prefix: str) -> None:
    """Completions are exactly the stored strings with the prefix, ascending."""
    trie = TernarySearchTrie(words)
    expected = sorted(w for w in set(words) if w.startswith(prefix)) if prefix else []
    result = trie.get_completions(prefix)
    assert result == expected
    assert all(a < b for a, b in zip(result, result[1:]))
    assert trie.is_prefix(prefix) == (bool(expected) if prefix else bool(words))


@settings(max_examples=100)
@given(words=words_strategy, prefix=prefix_strategy, limit=st.integers(min_value=1, max_value=10))
def test_limit_takes_leading_results(words: list[str], prefix: str, limit: int) -> None:
    """A capped result is the head of the uncapped result."""
    trie = TernarySearchTrie(words)
    full = trie.get_completions(prefix)
    capped = trie.get_completions(prefix, limit)
    assert len(capped) <= limit
    assert capped == full[:limit]


@settings(max_examples=100)
@given(words=words_strategy, extra=st.text(alphabet="abcd", min_size=1, max_size=6))
def test_readding_is_idempotent(words: list[str], extra: str) -> None:
    trie = TernarySearchTrie(words, seed=1)
    trie.add(extra)
    size = trie.size
    before = list(trie)
    shape = _shape(trie.root)
    trie.add(extra)
    assert trie.size == size
    assert list(trie) == before
    assert _shape(trie.root) == shape


@settings(max_examples=50)
@given(words=st.lists(st.text(min_size=1, max_size=5), max_size=30))
def test_code_point_order_for_any_text(words: list[str]) -> None:
    trie = TernarySearchTrie(words)
    assert list(trie) == sorted(set(words))

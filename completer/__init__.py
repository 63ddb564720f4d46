"""Trie completer -- prefix completion over a ternary search trie."""

from completer.constants import DEFAULT_LIMIT, DEFAULT_SEARCH_PATHS
from completer.trie import TernarySearchTrie, TrieNode
from completer.wordlist import WordList

__all__ = [
    "DEFAULT_LIMIT",
    "DEFAULT_SEARCH_PATHS",
    "TernarySearchTrie",
    "TrieNode",
    "WordList",
]

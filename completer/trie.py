"""Ternary search trie for prefix completion.

Each node holds one character.  Nodes at the same depth form a binary
search tree over characters (``left`` / ``right``); ``mid`` advances to
the next character position of the strings sharing the path so far.

Construction inserts the input in a random order so that the expected
depth stays O(log n) even when the input arrives sorted.

See Sedgewick & Wayne, Algorithms, 4th edition, Section 5.2.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Iterator, Sequence
from itertools import islice

import numpy as np

log = logging.getLogger("completer")


class TrieNode:
    """Single node in the ternary search trie."""

    __slots__ = ("char", "left", "mid", "right", "is_completion")

    def __init__(self, char: str):
        self.char = char
        self.left: TrieNode | None = None
        self.mid: TrieNode | None = None
        self.right: TrieNode | None = None
        self.is_completion: bool = False

    def __repr__(self) -> str:
        mark = "*" if self.is_completion else ""
        return f"TrieNode({self.char!r}{mark})"


class TernarySearchTrie:
    """Prefix-completion index over a set of strings.

    Parameters
    ----------
    initial : iterable of str
        Strings to store.  They are inserted in a uniformly random order.
    seed : int | None
        Optional non-negative RNG seed; the same seed and input give the
        same shape.  numpy rejects negative seeds with ``ValueError``.
    """

    def __init__(self, initial: Iterable[str] = (), seed: int | None = None):
        self.root: TrieNode | None = None
        self.size = 0

        if isinstance(initial, str):
            raise TypeError("initial must be an iterable of strings, not a single str")
        strings = initial if isinstance(initial, Sequence) else list(initial)
        if strings:
            self._build(strings, seed)

    def _build(self, strings: Sequence[str], seed: int | None) -> None:
        t0 = time.perf_counter()
        order = np.random.default_rng(seed).permutation(len(strings))
        for i in order:
            self.add(strings[int(i)])
        if log.isEnabledFor(logging.DEBUG):
            log.debug(
                "Built trie: %d entries from %d strings in %.1f ms (height %d)",
                self.size, len(strings), (time.perf_counter() - t0) * 1000, self.height(),
            )

    # mutation

    def add(self, s: str) -> None:
        """Store ``s``.  Adding a string that is already stored is a no-op."""
        if not isinstance(s, str):
            raise TypeError(f"expected str, got {type(s).__name__}")
        if not s:
            raise ValueError("cannot store an empty string")

        if self.root is None:
            self.root = TrieNode(s[0])

        node = self.root
        d = 0
        last = len(s) - 1
        while True:
            ch = s[d]
            if ch < node.char:
                if node.left is None:
                    node.left = TrieNode(ch)
                node = node.left
            elif ch > node.char:
                if node.right is None:
                    node.right = TrieNode(ch)
                node = node.right
            elif d < last:
                d += 1
                if node.mid is None:
                    node.mid = TrieNode(s[d])
                node = node.mid
            else:
                break

        if not node.is_completion:
            node.is_completion = True
            self.size += 1

    # queries

    def contains(self, s: str) -> bool:
        """True if ``s`` itself is stored (not merely a prefix of an entry)."""
        node = self._walk(s)
        return node is not None and node.is_completion

    def is_prefix(self, prefix: str) -> bool:
        """True if at least one stored string starts with ``prefix``."""
        if not prefix:
            return self.root is not None
        return self._walk(prefix) is not None

    def get_completions(self, prefix: str | None, limit: int | None = None) -> list[str]:
        """Stored strings starting with ``prefix``, in ascending order.

        An empty prefix yields no completions.  ``limit`` caps the number
        of results; ``None`` or a non-positive value means no cap.
        """
        it = self.iter_completions(prefix)
        if limit is not None and limit > 0:
            it = islice(it, limit)
        return list(it)

    def iter_completions(self, prefix: str | None) -> Iterator[str]:
        """Lazily yield the completions of ``prefix`` in ascending order."""
        if not prefix:
            return
        node = self._walk(prefix)
        if node is None:
            return
        if node.is_completion:
            yield prefix
        if node.mid is not None:
            yield from self._collect(node.mid, prefix)

    def height(self) -> int:
        """Nodes on the longest root-to-leaf path (0 when empty)."""
        best = 0
        stack: list[tuple[TrieNode, int]] = []
        if self.root is not None:
            stack.append((self.root, 1))
        while stack:
            node, depth = stack.pop()
            best = max(best, depth)
            for child in (node.left, node.mid, node.right):
                if child is not None:
                    stack.append((child, depth + 1))
        return best

    def _walk(self, s: str) -> TrieNode | None:
        """Node reached for the last character of ``s``, or None."""
        if not s:
            return None
        node = self.root
        d = 0
        last = len(s) - 1
        while node is not None:
            ch = s[d]
            if ch < node.char:
                node = node.left
            elif ch > node.char:
                node = node.right
            elif d < last:
                d += 1
                node = node.mid
            else:
                return node
        return None

    @staticmethod
    def _collect(start: TrieNode, prefix: str) -> Iterator[str]:
        # In-order walk: left, own completion, mid, right.  Pending work is
        # pushed in reverse so it pops in that order.  A str entry is a
        # completion ready to emit.
        stack: list[tuple[TrieNode, str] | str] = [(start, prefix)]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                yield item
                continue
            node, acc = item
            path = acc + node.char
            if node.right is not None:
                stack.append((node.right, acc))
            if node.mid is not None:
                stack.append((node.mid, path))
            if node.is_completion:
                stack.append(path)
            if node.left is not None:
                stack.append((node.left, acc))

    # container protocol

    def __contains__(self, s: object) -> bool:
        return isinstance(s, str) and self.contains(s)

    def __len__(self) -> int:
        return self.size

    def __bool__(self) -> bool:
        return self.root is not None

    def __iter__(self) -> Iterator[str]:
        if self.root is None:
            return iter(())
        return self._collect(self.root, "")

    def __repr__(self) -> str:
        return f"TernarySearchTrie(size={self.size})"

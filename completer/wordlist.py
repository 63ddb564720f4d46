"""Word list loading with a trie-backed completion index."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable

from completer.constants import DEFAULT_SEARCH_PATHS, MIN_LENGTH
from completer.trie import TernarySearchTrie

log = logging.getLogger("completer")


class WordList:
    """Entries read from a word-list file, indexed for prefix completion.

    Parameters
    ----------
    path : str | None
        Word list to read, one entry per line.  When omitted, the default
        search paths are tried in order and the first non-empty file wins.
        A default path that cannot be read or decoded as UTF-8 is skipped.
    strings : iterable of str | None
        In-memory entries to use instead of reading any file.
    lowercase : bool
        Fold every entry to lower case before storing it.
    min_length, max_length : int
        Entries outside these bounds (after stripping) are skipped.
    seed : int | None
        Seed for the randomized trie construction.
    """

    def __init__(
        self,
        path: str | None = None,
        *,
        strings: Iterable[str] | None = None,
        lowercase: bool = False,
        min_length: int = MIN_LENGTH,
        max_length: int | None = None,
        seed: int | None = None,
    ):
        self.lowercase = lowercase
        self.min_length = max(1, min_length)
        self.max_length = max_length
        self.entries: list[str] = []
        self.source: str | None = None
        if strings is not None:
            self._extend(strings)
        else:
            self._load(path)
        self.trie = TernarySearchTrie(self.entries, seed=seed)

    @classmethod
    def from_strings(cls, strings: Iterable[str], **kwargs) -> WordList:
        """Build from in-memory strings instead of a file."""
        return cls(strings=strings, **kwargs)

    def _load(self, path: str | None) -> None:
        if path is not None:
            if not os.path.exists(path):
                raise FileNotFoundError(f"word list not found: {path}")
            try:
                self._read(path)
            except UnicodeDecodeError as exc:
                raise ValueError(f"word list {path} is not valid UTF-8: {exc.reason}") from exc
            self.source = path
            log.info("Loaded %s entries from %s", f"{len(self.entries):,}", path)
            return

        for candidate in DEFAULT_SEARCH_PATHS:
            if os.path.exists(candidate):
                try:
                    self._read(candidate)
                except (OSError, UnicodeDecodeError) as exc:
                    log.warning("Skipping word list %s: %s", candidate, exc)
                    self.entries = []
                    continue
                if self.entries:
                    self.source = candidate
                    log.info("Loaded %s entries from %s", f"{len(self.entries):,}", candidate)
                    return

        log.warning("No word list found -- the completion index is empty.")
        log.warning("Pass --words PATH or create words.txt with one entry per line.")

    def _read(self, path: str) -> None:
        with open(path, "r", encoding="utf-8") as f:
            self._extend(f)

    def _extend(self, lines: Iterable[str]) -> None:
        seen = set(self.entries)
        skipped = 0
        for line in lines:
            word = line.strip()
            if self.lowercase:
                word = word.lower()
            if not self._accepts(word):
                if word:
                    skipped += 1
                continue
            if word not in seen:
                seen.add(word)
                self.entries.append(word)
        if skipped:
            log.debug("Skipped %d entries outside the length bounds", skipped)

    def _accepts(self, word: str) -> bool:
        if len(word) < self.min_length:
            return False
        return self.max_length is None or len(word) <= self.max_length

    def complete(self, prefix: str, limit: int | None = None) -> list[str]:
        """Entries starting with ``prefix`` in ascending order."""
        if self.lowercase and prefix:
            prefix = prefix.lower()
        return self.trie.get_completions(prefix, limit)

    def add(self, word: str) -> None:
        """Store one more entry, applying the same normalisation as loading."""
        word = word.strip()
        if self.lowercase:
            word = word.lower()
        if not self._accepts(word):
            raise ValueError(f"entry {word!r} is outside the configured length bounds")
        if word not in self.trie:
            self.entries.append(word)
        self.trie.add(word)

    def __contains__(self, word: str) -> bool:
        if self.lowercase and isinstance(word, str):
            word = word.lower()
        return word in self.trie

    def __len__(self) -> int:
        return len(self.trie)

"""CLI / terminal mode for the prefix completer."""

from __future__ import annotations

import argparse
import logging
import sys
import time

from completer.constants import DEFAULT_LIMIT, PROMPT
from completer.wordlist import WordList

log = logging.getLogger("completer")


def _print_help() -> None:
    print("Commands:")
    print("  PREFIX             -- list completions  (e.g. app)")
    print("  :add WORD          -- store a new entry")
    print("  :has WORD          -- exact membership test")
    print("  :size              -- number of stored entries")
    print("  :limit N           -- results per query (0 = no cap)")
    print("  :help              -- show this text")
    print("  quit               -- leave")
    print()


def print_completions(words: WordList, prefix: str, limit: int | None) -> list[str]:
    """Print the completions of ``prefix`` under a header line."""
    results = words.complete(prefix, limit or None)
    print(prefix)
    if not results:
        print("  (no completions)")
    for r in results:
        print(f"  {r}")
    return results


def run_interactive(words: WordList, limit: int | None = DEFAULT_LIMIT) -> None:
    """Prompt for prefixes until the user quits."""
    print("\n" + "=" * 60)
    print(f"  TRIE COMPLETER -- {len(words):,} entries")
    print("=" * 60)
    print()
    _print_help()

    while True:
        try:
            inp = input(PROMPT).strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not inp:
            continue

        cmd = inp.lower()
        if cmd in ("quit", "exit"):
            break
        if cmd == ":help":
            _print_help()
            continue
        if cmd == ":size":
            print(f"  {len(words):,} entries")
            continue

        parts = inp.split(maxsplit=1)
        parts[0] = parts[0].lower()
        if parts[0] == ":add":
            if len(parts) != 2:
                print("  Format: :add WORD")
                continue
            try:
                words.add(parts[1])
            except ValueError as exc:
                print(f"  Invalid.  {exc}")
                continue
            print(f"  Added '{parts[1].strip()}' ({len(words):,} entries)")
        elif parts[0] == ":has":
            if len(parts) != 2:
                print("  Format: :has WORD")
                continue
            found = parts[1].strip() in words
            print(f"  {'yes' if found else 'no'}")
        elif parts[0] == ":limit":
            try:
                limit = int(parts[1]) if len(parts) == 2 else -1
                if limit < 0:
                    raise ValueError
            except ValueError:
                print("  Format: :limit N   (N >= 0)")
                continue
            print(f"  Limit set to {limit if limit else 'none'}")
        elif inp.startswith(":"):
            print(f"  Unknown command {parts[0]!r}.  Try :help")
        else:
            t0 = time.perf_counter()
            results = print_completions(words, inp, limit)
            elapsed = (time.perf_counter() - t0) * 1000
            print(f"  -- {len(results)} result(s) in {elapsed:.2f} ms")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trie-completer",
        description="Prefix completion over a word list, backed by a ternary search trie",
    )
    parser.add_argument("prefixes", nargs="*", metavar="PREFIX",
                        help="Prefixes to complete (omit for interactive mode)")
    parser.add_argument("--words", "-w", type=str, default=None,
                        help="Path to word list file, one entry per line")
    parser.add_argument("--limit", "-n", type=int, default=DEFAULT_LIMIT,
                        help=f"Maximum completions per prefix, 0 for all (default {DEFAULT_LIMIT})")
    parser.add_argument("--lower", action="store_true",
                        help="Fold entries and prefixes to lower case")
    parser.add_argument("--seed", type=int, default=None,
                        help="Non-negative seed for the randomized trie construction")
    parser.add_argument("--interactive", "-i", action="store_true",
                        help="Prompt for prefixes even when some are given")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.limit < 0:
        parser.error("--limit must be >= 0")
    if args.seed is not None and args.seed < 0:
        parser.error("--seed must be >= 0")

    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        words = WordList(args.words, lowercase=args.lower, seed=args.seed)
    except (OSError, ValueError) as exc:
        log.error("%s", exc)
        return 1

    for prefix in args.prefixes:
        print_completions(words, prefix, args.limit)

    if args.interactive or not args.prefixes:
        run_interactive(words, args.limit)
    return 0


if __name__ == "__main__":
    sys.exit(main())

# apps/cli/play.py
"""
Interactive terminal front end for wordscramble.

This script:
  1) Loads the root word list and the dictionary.
  2) Starts a game and shows the root word, the score and the accepted words.
  3) Reads one word per line; ':restart' starts a new game, ':quit' (or EOF)
     leaves.

Usage:
    python -m apps.cli.play --seed 7
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from wordscramble.datasets import (
    DEFAULT_ROOTS_PATH,
    FileRootWordSource,
    load_dictionary,
)
from wordscramble.engine import DEFAULT_LANGUAGE, rejection_message
from wordscramble.harness import RESTART_TOKEN
from wordscramble.session import GameSession, SessionError

QUIT_TOKEN = ":quit"


def render(session: GameSession) -> str:
    """Root word, score and history (each word prefixed by its length)."""
    lines = [f"== {session.root_word} ==   Score: {session.score}"]
    for w in session.used_words:
        lines.append(f"  ({len(w)}) {w}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordscramble — make words from a root word")
    ap.add_argument("--roots", default=str(DEFAULT_ROOTS_PATH),
                    help="root word list (whitespace/newline separated)")
    ap.add_argument("--dictionary", help="word list used to judge real words (default: wordfreq English)")
    ap.add_argument("--language", default=DEFAULT_LANGUAGE, help="dictionary language tag")
    ap.add_argument("--seed", type=int, help="RNG seed for root word selection")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        oracle = load_dictionary(args.dictionary, language=args.language)
        session = GameSession(FileRootWordSource(args.roots), oracle,
                              language=args.language, seed=args.seed)
        session.restart()
    except (FileNotFoundError, SessionError) as e:
        print(f"Couldn't start game: {e}", file=sys.stderr)
        return 1

    print(render(session))
    for line in sys.stdin:
        entry = line.strip()
        if entry == QUIT_TOKEN:
            break
        if entry == RESTART_TOKEN:
            try:
                session.restart()
            except (FileNotFoundError, SessionError) as e:
                print(f"Couldn't restart game, keeping this one: {e}", file=sys.stderr)
            print(render(session))
            continue

        outcome = session.submit(entry)
        if outcome.accepted:
            print(render(session))
            continue

        msg = rejection_message(outcome.kind, session.root_word)
        if msg is not None:
            title, body = msg
            print(f"{title}: {body}")

    print(f"Final score: {session.score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

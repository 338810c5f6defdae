# apps/cli/replay.py
"""
Batch replay of scripted submissions.

This script:
  1) Validates the word lists (prints counts + SHA).
  2) Builds a session from them and replays an inputs file, one raw
     submission per line (':restart' lines restart the game).
  3) Writes:
       - CSV:  one row per submission (outcome, points, running score)
       - JSON: manifest with config, word-list reports, git commit, summary

Usage:
    python -m apps.cli.replay --inputs my_words.txt --seed 3
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from tqdm import tqdm

from wordscramble.datasets import (
    DEFAULT_ROOTS_PATH,
    FileRootWordSource,
    load_dictionary,
    pretty_summary,
    read_lines,
    validate_wordlist,
)
from wordscramble.engine import DEFAULT_LANGUAGE, MIN_WORD_LENGTH
from wordscramble.harness import replay, summarize, write_csv, write_manifest
from wordscramble.harness.io import git_commit_or_unknown, timestamp_id
from wordscramble.session import GameSession, SessionError


def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="wordscramble — replay scripted submissions")
    ap.add_argument("--inputs", required=True, help="file with one raw submission per line")
    ap.add_argument("--roots", default=str(DEFAULT_ROOTS_PATH), help="root word list")
    ap.add_argument("--dictionary", help="dictionary word list (default: wordfreq)")
    ap.add_argument("--language", default=DEFAULT_LANGUAGE, help="dictionary language tag")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--no-progress", action="store_true", help="hide the progress bar")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    # 1) Validate word lists and print one-liner summaries
    reports = {"roots": validate_wordlist(args.roots, min_length=MIN_WORD_LENGTH)}
    if args.dictionary:
        reports["dictionary"] = validate_wordlist(args.dictionary, min_length=2)
    for rep in reports.values():
        print(pretty_summary(rep))

    # 2) Build the session and load inputs
    try:
        inputs = read_lines(args.inputs)
        oracle = load_dictionary(args.dictionary, language=args.language)
        session = GameSession(FileRootWordSource(args.roots), oracle,
                              language=args.language, seed=args.seed)
        session.restart()
    except (FileNotFoundError, SessionError) as e:
        print(f"Couldn't start replay: {e}", file=sys.stderr)
        return 1

    # 3) Replay with progress
    iterator = tqdm(inputs, ncols=80, desc="Replaying", unit="word", disable=args.no_progress)
    rows = replay(session, iterator)
    summary = summarize(rows)

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"replay_{run_id}.csv"
    manifest_path = outdir / f"replay_{run_id}_manifest.json"

    write_csv(rows, str(csv_path))
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlists": reports,
        "summary": summary,
    }, str(manifest_path))

    print(f"Accepted {summary['accepted']}/{summary['submissions']} | score {summary['final_score']}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

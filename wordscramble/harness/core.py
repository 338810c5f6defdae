"""
Scripted replay of a game.

- replay: feed a sequence of raw inputs into a session, one submission at a
  time, and record what happened to each.
- The RESTART_TOKEN input restarts the session instead of being submitted.

Like the CLIs, this is UI-agnostic: the same rows can be written to CSV,
asserted in tests, or summarised in a notebook.
"""

from __future__ import annotations
import logging
import time
from typing import Dict, Iterable, List

from wordscramble.engine import normalize
from wordscramble.session import GameSession, SessionError, SessionState

logger = logging.getLogger(__name__)

# Input line that means "start a new game" rather than "submit this word".
RESTART_TOKEN = ":restart"

# Row reasons that are not submissions.
_CONTROL_REASONS = ("restart", "restart_failed")


def replay(session: GameSession, inputs: Iterable[str]) -> List[Dict]:
    """
    Submit every input to `session` in order.

    The session is restarted first if it has never been started.

    Returns:
        list of row dicts with keys:
            turn, root_word, raw, word, accepted, reason, points, score, time_ms
        Restarts produce a row with reason "restart"; a restart the source
        cannot serve is recorded as "restart_failed" and the current game
        carries on.
    """
    if session.state is SessionState.UNINITIALIZED:
        session.restart()

    rows: List[Dict] = []
    for turn, raw in enumerate(inputs, start=1):
        if raw.strip() == RESTART_TOKEN:
            reason = "restart"
            try:
                session.restart()
            except (FileNotFoundError, SessionError) as e:
                logger.warning("restart at turn %d failed, keeping %r: %s", turn, session.root_word, e)
                reason = "restart_failed"
            rows.append({
                "turn": turn, "root_word": session.root_word, "raw": raw,
                "word": "", "accepted": False, "reason": reason,
                "points": 0, "score": session.score, "time_ms": 0.0,
            })
            continue

        t0 = time.perf_counter_ns()
        outcome = session.submit(raw)
        dt = (time.perf_counter_ns() - t0) / 1_000_000.0

        rows.append({
            "turn": turn,
            "root_word": session.root_word,
            "raw": raw,
            "word": normalize(raw),
            "accepted": outcome.accepted,
            "reason": "" if outcome.accepted else outcome.kind.value,
            "points": outcome.points if outcome.accepted else 0,
            "score": session.score,
            "time_ms": dt,
        })
    return rows


def summarize(rows: List[Dict]) -> Dict:
    """Counts per rejection reason plus accepted total and final score."""
    reasons: Dict[str, int] = {}
    accepted = 0
    for r in rows:
        if r["accepted"]:
            accepted += 1
        elif r["reason"] not in _CONTROL_REASONS:
            reasons[r["reason"]] = reasons.get(r["reason"], 0) + 1
    return {
        "submissions": sum(1 for r in rows if r["reason"] not in _CONTROL_REASONS),
        "accepted": accepted,
        "rejected": reasons,
        "final_score": rows[-1]["score"] if rows else 0,
    }

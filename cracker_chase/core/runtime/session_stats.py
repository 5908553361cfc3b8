"""
session_stats.py
----------------
Score tracking for the current run and the best run of the session.
"""

from typing import Optional


class SessionStats:
    """Container for run-specific statistics. Reset when starting a new run."""

    def __init__(self):
        self.score = 0
        self.high_score: Optional[int] = None
        self.crackers_collected = 0
        self.frames = 0
        self.runs_finished = 0

    # ===========================================================
    # Core Stats
    # ===========================================================

    def add_score(self, amount: int):
        if amount < 0:
            raise ValueError(f"Score can only grow, got {amount}")
        self.score += amount

    def add_cracker(self):
        self.crackers_collected += 1

    def add_frame(self):
        self.frames += 1

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def reset(self):
        """Reset for a new run. Preserves the high score."""
        self.score = 0
        self.crackers_collected = 0
        self.frames = 0

    def finish_run(self) -> bool:
        """
        Record the end of a run.

        Returns:
            bool: True if this run set a new high score
        """
        self.runs_finished += 1
        if self.high_score is None or self.score > self.high_score:
            self.high_score = self.score
            return True
        return False

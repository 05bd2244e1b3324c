"""Describes, roughly, how the player is doing."""

from __future__ import annotations

from enum import StrEnum

# How many moves past the minimum still count as doing great.
GREAT_THRESHOLD = 8


class Progress(StrEnum):
    PERFECT = "perfect"  # still on a shortest path
    GREAT = "great"      # within GREAT_THRESHOLD moves of the minimum
    OKAY = "okay"        # further off, but the level can still be won
    DOOM = "doom"        # no way to win from here


def compute_progress(
    min_moves: int,
    moves: int,
    min_moves_remaining: int | None,
) -> Progress:
    """Classify the player's standing.

    *min_moves* is the level's minimum from the start, *moves* the moves
    taken so far and *min_moves_remaining* the solver's answer for the
    current board (``None`` when unsolvable).
    """
    if min_moves_remaining is None:
        return Progress.DOOM
    best_total = moves + min_moves_remaining
    if best_total == min_moves:
        return Progress.PERFECT
    if best_total <= min_moves + GREAT_THRESHOLD:
        return Progress.GREAT
    return Progress.OKAY

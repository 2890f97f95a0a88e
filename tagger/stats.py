from collections import Counter
from typing import Dict, Iterable, List, Tuple

from tagger.models import Direction, Player, PointOutcome, StrokeType, TaggedAction


def outcome_counts(history: Iterable[TaggedAction]) -> Dict[PointOutcome, Dict[Player, int]]:
    """Outcome-by-player matrix; every outcome and player is present."""
    counts = {o: {p: 0 for p in Player} for o in PointOutcome}
    for action in history:
        counts[action.outcome][action.player] += 1
    return counts


def stroke_counts(history: Iterable[TaggedAction]) -> Dict[Player, Dict[StrokeType, int]]:
    counts: Dict[Player, Dict[StrokeType, int]] = {p: {} for p in Player}
    for action in history:
        per_player = counts[action.player]
        per_player[action.stroke] = per_player.get(action.stroke, 0) + 1
    return counts


def stroke_distribution(
    history: Iterable[TaggedAction],
    player: Player,
) -> List[Tuple[StrokeType, int, float]]:
    """
    Stroke share for one player, largest first.

    Returns ``(stroke, count, percentage)`` tuples; empty when the player
    has no tagged actions.
    """
    strokes = Counter(a.stroke for a in history if a.player is player)
    total = sum(strokes.values())
    if total == 0:
        return []

    return [
        (stroke, count, round(count / total * 100, 1))
        for stroke, count in strokes.most_common()
    ]


def direction_counts(history: Iterable[TaggedAction]) -> Dict[Player, Dict[Direction, int]]:
    counts = {p: {d: 0 for d in Direction} for p in Player}
    for action in history:
        counts[action.player][action.direction] += 1
    return counts


def points_won(history: Iterable[TaggedAction]) -> Dict[Player, int]:
    won = {p: 0 for p in Player}
    for action in history:
        won[action.winner] += 1
    return won

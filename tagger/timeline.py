from bisect import bisect_right
from typing import List, Sequence

from tagger.models import Player, Score, TaggedAction
from tagger.score_engine import point_label


def build_match_timeline(history: Sequence[TaggedAction]) -> List[dict]:
    """
    Flattens the history into one snapshot dict per action.
    Does NOT mutate the history.
    """
    timeline: List[dict] = []

    for index, action in enumerate(history):
        score = action.score

        timeline.append({
            "action_index": index + 1,
            "video_time": action.video_time,
            "player": action.player.value,
            "winner": action.winner.value,
            "points_a": point_label(score, Player.A),
            "points_b": point_label(score, Player.B),
            "games_a": score.games_a,
            "games_b": score.games_b,
            "sets_a": score.sets_a,
            "sets_b": score.sets_b,
        })

    return timeline


def score_at(history: Sequence[TaggedAction], video_time: float) -> Score:
    """
    Score in force at ``video_time``.

    ``history`` must be in registration order with non-decreasing video
    times; before the first action the initial score applies.
    """
    times = [a.video_time for a in history]
    index = bisect_right(times, video_time)
    if index == 0:
        return Score.initial()
    return history[index - 1].score

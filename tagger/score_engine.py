from dataclasses import replace
from typing import Iterable, List, Optional

from tagger.config import GAMES_TO_WIN_SET, MIN_SET_MARGIN
from tagger.models import ADVANTAGE, Player, Score


POINT_LABELS = ["0", "15", "30", "40", "Ad"]


def _field(kind: str, player: Player) -> str:
    return f"{kind}_{player.value.lower()}"


def apply_point(score: Score, winner: Player) -> Score:
    """
    Return the score after ``winner`` takes one point.

    Pure reducer: ``score`` is never mutated and every reachable score
    yields a new one. Game and set boundaries are resolved in the same
    call, so the returned value never carries a finished game or set.
    """
    loser = winner.opponent
    w_points = score.points_of(winner)
    l_points = score.points_of(loser)

    if w_points == 3 and l_points < 3:
        nxt = _win_game(score, winner)
    elif w_points == 3 and l_points == 3:
        nxt = replace(score, **{_field("points", winner): ADVANTAGE})
    elif w_points == ADVANTAGE:
        nxt = _win_game(score, winner)
    elif l_points == ADVANTAGE:
        nxt = replace(score, **{_field("points", loser): 3})
    else:
        nxt = replace(score, **{_field("points", winner): w_points + 1})

    return _resolve_set(nxt, winner)


def _win_game(score: Score, winner: Player) -> Score:
    return replace(
        score,
        points_a=0,
        points_b=0,
        **{_field("games", winner): score.games_of(winner) + 1},
    )


def _resolve_set(score: Score, winner: Player) -> Score:
    # No tiebreak at 6-6: games keep accumulating until the margin is reached.
    w_games = score.games_of(winner)
    l_games = score.games_of(winner.opponent)

    if w_games >= GAMES_TO_WIN_SET and w_games - l_games >= MIN_SET_MARGIN:
        return replace(
            score,
            games_a=0,
            games_b=0,
            **{_field("sets", winner): score.sets_of(winner) + 1},
        )
    return score


# =========================================================
# HELPERS
# =========================================================

def replay(winners: Iterable[Player], start: Optional[Score] = None) -> List[Score]:
    """Apply ``winners`` in order and return every intermediate score."""
    score = start if start is not None else Score.initial()
    scores: List[Score] = []
    for winner in winners:
        score = apply_point(score, winner)
        scores.append(score)
    return scores


def is_deuce(score: Score) -> bool:
    return score.points_a == 3 and score.points_b == 3


def advantage(score: Score) -> Optional[Player]:
    if score.points_a == ADVANTAGE:
        return Player.A
    if score.points_b == ADVANTAGE:
        return Player.B
    return None


def point_label(score: Score, player: Player) -> str:
    return POINT_LABELS[score.points_of(player)]

from dataclasses import dataclass
from enum import Enum
from typing import Optional


ADVANTAGE = 4


class Player(str, Enum):
    A = "A"
    B = "B"

    @property
    def opponent(self) -> "Player":
        return Player.B if self is Player.A else Player.A


class PointOutcome(str, Enum):
    POSITIVE_IMBALANCE = "positive_imbalance"
    NEGATIVE_IMBALANCE = "negative_imbalance"
    UNFORCED_ERROR = "unforced_error"


class StrokeType(str, Enum):
    SERVE = "serve"
    FOREHAND = "forehand"
    BACKHAND = "backhand"
    INSIDE_OUT_FOREHAND = "inside_out_forehand"
    INSIDE_OUT_BACKHAND = "inside_out_backhand"
    VOLLEY_FOREHAND = "volley_forehand"
    VOLLEY_BACKHAND = "volley_backhand"
    SMASH = "smash"


class Direction(str, Enum):
    CROSS = "cross"
    CENTER = "center"
    PARALLEL = "parallel"


@dataclass(frozen=True)
class Score:
    points_a: int = 0
    points_b: int = 0
    games_a: int = 0
    games_b: int = 0
    sets_a: int = 0
    sets_b: int = 0

    @classmethod
    def initial(cls) -> "Score":
        return cls()

    def points_of(self, player: Player) -> int:
        return self.points_a if player is Player.A else self.points_b

    def games_of(self, player: Player) -> int:
        return self.games_a if player is Player.A else self.games_b

    def sets_of(self, player: Player) -> int:
        return self.sets_a if player is Player.A else self.sets_b

    def snapshot_text(self) -> str:
        """Set and game score in fixed A/B order, e.g. ``1-0 (3-2)``."""
        return f"{self.sets_a}-{self.sets_b} ({self.games_a}-{self.games_b})"


# --- TAGGING ---

@dataclass(frozen=True)
class TaggedAction:
    """
    One observed point.

    ``score`` is the score *after* the point was applied. Records are
    created by MatchSession and never mutated afterwards.
    """
    id: str
    captured_at: str
    video_time: float
    player: Player
    outcome: PointOutcome
    stroke: StrokeType
    direction: Direction
    score: Score

    @property
    def winner(self) -> Player:
        from tagger.outcome import resolve_winner

        return resolve_winner(self.player, self.outcome)

    @property
    def score_snapshot(self) -> str:
        return self.score.snapshot_text()


@dataclass
class ActionRequest:
    """Selection state collected by a front end before registering a point."""
    player: Optional[Player] = None
    outcome: Optional[PointOutcome] = None
    stroke: Optional[StrokeType] = None
    direction: Optional[Direction] = None
    video_time: float = 0.0

    def missing_fields(self):
        return [
            name
            for name in ("player", "outcome", "stroke", "direction")
            if getattr(self, name) is None
        ]

    def is_complete(self) -> bool:
        return not self.missing_fields()

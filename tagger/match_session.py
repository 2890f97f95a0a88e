import logging
import math
import uuid
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from tagger.config import DEFAULT_PLAYER_A, DEFAULT_PLAYER_B
from tagger.exceptions import IncompleteActionError, InvalidVideoTimeError
from tagger.models import (
    ActionRequest,
    Direction,
    Player,
    PointOutcome,
    Score,
    StrokeType,
    TaggedAction,
)
from tagger.outcome import resolve_winner
from tagger.score_engine import apply_point

logger = logging.getLogger(__name__)


class MatchSession:
    """
    Single local tagging session.

    Responsibilities:
    - Own the current Score (the only mutable slot)
    - Append TaggedAction records in registration order
    - Bulk replay recorded actions (atomic)
    - Reset to the initial state on a new match
    """

    def __init__(
        self,
        player_a: str = DEFAULT_PLAYER_A,
        player_b: str = DEFAULT_PLAYER_B,
    ):
        self._names: Dict[Player, str] = {Player.A: player_a, Player.B: player_b}
        self._score = Score.initial()
        self._history: List[TaggedAction] = []

    # ---------------------------------------------------------
    # State
    # ---------------------------------------------------------

    @property
    def score(self) -> Score:
        return self._score

    @property
    def history(self) -> Tuple[TaggedAction, ...]:
        """Actions in registration order."""
        return tuple(self._history)

    def display_history(self) -> List[TaggedAction]:
        """Actions most recent first, as shown in the history table."""
        return list(reversed(self._history))

    def latest_action(self) -> Optional[TaggedAction]:
        if not self._history:
            return None
        return self._history[-1]

    # ---------------------------------------------------------
    # Players
    # ---------------------------------------------------------

    @property
    def names(self) -> Dict[Player, str]:
        return dict(self._names)

    def name_of(self, player: Player) -> str:
        return self._names[player]

    def rename_players(self, player_a: Optional[str] = None, player_b: Optional[str] = None):
        if player_a is not None:
            self._names[Player.A] = player_a
        if player_b is not None:
            self._names[Player.B] = player_b

    # ---------------------------------------------------------
    # Core API
    # ---------------------------------------------------------

    def register_action(
        self,
        player: Optional[Player],
        outcome: Optional[PointOutcome],
        stroke: Optional[StrokeType],
        direction: Optional[Direction],
        video_time: float = 0.0,
        captured_at: Optional[str] = None,
    ) -> TaggedAction:
        """
        Tag one point and advance the score.

        Raises IncompleteActionError if any selection is missing and
        InvalidVideoTimeError for a negative or non-finite video time.
        Nothing is recorded when a request is rejected.
        """
        request = ActionRequest(player, outcome, stroke, direction, video_time)
        action = self._build_action(request, self._score, captured_at)

        self._history.append(action)
        self._score = action.score

        logger.debug(
            "Registered %s %s by %s at %.2fs -> %s",
            action.outcome.value,
            action.stroke.value,
            action.player.value,
            action.video_time,
            action.score_snapshot,
        )
        return action

    def register(self, request: ActionRequest, captured_at: Optional[str] = None) -> TaggedAction:
        return self.register_action(
            request.player,
            request.outcome,
            request.stroke,
            request.direction,
            request.video_time,
            captured_at,
        )

    def load_actions(self, requests: List[ActionRequest]) -> List[TaggedAction]:
        """
        Replay a batch of requests into a fresh match.
        Atomic: if any request fails -> no state mutation.
        """
        if not isinstance(requests, list):
            raise ValueError("requests must be a list")

        # Check times before sorting; sort is stable, so ties keep file order
        times = [self._video_time(r.video_time) for r in requests]
        ordered = [r for _, r in sorted(zip(times, requests), key=lambda pair: pair[0])]

        score = Score.initial()
        history: List[TaggedAction] = []

        for request in ordered:
            action = self._build_action(request, score, None)
            history.append(action)
            score = action.score

        # If everything succeeds → commit
        self._score = score
        self._history = history

        logger.info("Loaded %d actions, score %s", len(history), score.snapshot_text())
        return list(history)

    def new_match(self):
        self._score = Score.initial()
        self._history = []
        logger.info("New match: %s vs %s", self._names[Player.A], self._names[Player.B])

    # ---------------------------------------------------------
    # Internals
    # ---------------------------------------------------------

    @staticmethod
    def _video_time(value) -> float:
        try:
            video_time = float(value)
        except (TypeError, ValueError):
            raise InvalidVideoTimeError(f"Invalid video time: {value!r}")

        if not math.isfinite(video_time) or video_time < 0:
            raise InvalidVideoTimeError(f"Invalid video time: {value!r}")
        return video_time

    @staticmethod
    def _build_action(
        request: ActionRequest,
        score: Score,
        captured_at: Optional[str],
    ) -> TaggedAction:
        missing = request.missing_fields()
        if missing:
            raise IncompleteActionError(f"Missing selection: {', '.join(missing)}")

        video_time = MatchSession._video_time(request.video_time)
        winner = resolve_winner(request.player, request.outcome)

        return TaggedAction(
            id=uuid.uuid4().hex,
            captured_at=captured_at or datetime.now().strftime("%H:%M:%S"),
            video_time=video_time,
            player=request.player,
            outcome=request.outcome,
            stroke=request.stroke,
            direction=request.direction,
            score=apply_point(score, winner),
        )

import sys

from tagger.main import configure_logging
from tagger.match_session import MatchSession
from tagger.models import Direction, Player, PointOutcome, StrokeType
from render.renderer import ScoreboardRenderer


def main():
    configure_logging()

    session = MatchSession()

    session.register_action(Player.A, PointOutcome.POSITIVE_IMBALANCE, StrokeType.SERVE, Direction.CENTER, 3.0)
    session.register_action(Player.B, PointOutcome.UNFORCED_ERROR, StrokeType.BACKHAND, Direction.CROSS, 7.0)
    session.register_action(Player.B, PointOutcome.POSITIVE_IMBALANCE, StrokeType.FOREHAND, Direction.PARALLEL, 11.0)
    session.register_action(Player.A, PointOutcome.POSITIVE_IMBALANCE, StrokeType.SMASH, Direction.CENTER, 15.0)

    input_path = sys.argv[1] if len(sys.argv) > 1 else "input.mp4"
    output_path = sys.argv[2] if len(sys.argv) > 2 else "output.mp4"

    renderer = ScoreboardRenderer(
        input_path=input_path,
        output_path=output_path,
        history=session.history,
        names=session.names,
    )

    renderer.render()


if __name__ == "__main__":
    main()

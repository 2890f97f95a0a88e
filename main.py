from tagger.match_session import MatchSession
from tagger.main import format_scoreboard
from tagger.models import Direction, Player, PointOutcome, StrokeType

session = MatchSession()


def tag(player, outcome=PointOutcome.POSITIVE_IMBALANCE):
    return session.register_action(player, outcome, StrokeType.FOREHAND, Direction.CROSS)


# Game 1: A to love
for _ in range(4):
    tag(Player.A)

# Games 2-4: B holds three times
for _ in range(12):
    tag(Player.B)

print("After 16 points:")
print(format_scoreboard(session))

# Game 5: deuce, advantage A, back to deuce, then B errs twice
for _ in range(3):
    tag(Player.A)
    tag(Player.B)

tag(Player.A)                                   # Ad A
tag(Player.A, PointOutcome.UNFORCED_ERROR)      # deuce
tag(Player.B, PointOutcome.UNFORCED_ERROR)      # Ad A
tag(Player.B, PointOutcome.NEGATIVE_IMBALANCE)  # game A

print("\nAfter the deuce game:")
print(format_scoreboard(session))

for action in session.display_history()[:5]:
    print(action.player.value, action.outcome.value, action.score_snapshot)

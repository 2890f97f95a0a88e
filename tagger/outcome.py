from tagger.models import Player, PointOutcome


def resolve_winner(player: Player, outcome: PointOutcome) -> Player:
    """
    Map the acting player and the outcome category to the point winner.

    Only a positive imbalance wins the point for the acting player; a
    negative imbalance or an unforced error hands it to the opponent.
    """
    if outcome is PointOutcome.POSITIVE_IMBALANCE:
        return player
    return player.opponent

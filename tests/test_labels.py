import pytest

from tagger.exceptions import UnknownLabelError
from tagger.labels import (
    LABELS,
    label,
    parse_direction,
    parse_outcome,
    parse_player,
    parse_stroke,
)
from tagger.models import Direction, Player, PointOutcome, StrokeType


def test_every_member_has_a_label_in_every_locale():
    members = list(PointOutcome) + list(StrokeType) + list(Direction)

    for locale, table in LABELS.items():
        assert set(table) == set(members), locale


def test_label_per_locale():
    assert label(PointOutcome.UNFORCED_ERROR, "en") == "Unforced error"
    assert label(PointOutcome.UNFORCED_ERROR, "es") == "Error no forzado"
    assert label(StrokeType.INSIDE_OUT_BACKHAND, "es") == "Reves invertido"


def test_unknown_locale():
    with pytest.raises(UnknownLabelError):
        label(Direction.CROSS, "fr")


@pytest.mark.parametrize("text, expected", [
    ("+", PointOutcome.POSITIVE_IMBALANCE),
    ("-", PointOutcome.NEGATIVE_IMBALANCE),
    ("ue", PointOutcome.UNFORCED_ERROR),
    ("UNFORCED_ERROR", PointOutcome.UNFORCED_ERROR),
    ("Desequilibrio positivo", PointOutcome.POSITIVE_IMBALANCE),
])
def test_parse_outcome(text, expected):
    assert parse_outcome(text) is expected


@pytest.mark.parametrize("text, expected", [
    ("fh", StrokeType.FOREHAND),
    ("Remate", StrokeType.SMASH),
    ("inside_out_forehand", StrokeType.INSIDE_OUT_FOREHAND),
    (" serve ", StrokeType.SERVE),
])
def test_parse_stroke(text, expected):
    assert parse_stroke(text) is expected


def test_parse_player_and_direction():
    assert parse_player("a") is Player.A
    assert parse_player("B") is Player.B
    assert parse_direction("Paralelo") is Direction.PARALLEL
    assert parse_direction("dtl") is Direction.PARALLEL


def test_alias_of_other_enum_is_rejected():
    with pytest.raises(UnknownLabelError):
        parse_direction("fh")


@pytest.mark.parametrize("parse, text", [
    (parse_player, "C"),
    (parse_outcome, "winner"),
    (parse_stroke, "lob"),
    (parse_direction, "diagonal"),
])
def test_unknown_values(parse, text):
    with pytest.raises(UnknownLabelError, match=text):
        parse(text)

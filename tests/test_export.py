import csv

from tagger.export import CSV_COLUMNS, export_history, export_rows, format_clock
from tagger.match_session import MatchSession
from tagger.models import Direction, Player, PointOutcome, StrokeType


def tagged_session():
    session = MatchSession("Ostapenko", "Suárez Navarro")
    session.register_action(
        Player.A, PointOutcome.POSITIVE_IMBALANCE, StrokeType.FOREHAND, Direction.CROSS,
        video_time=3.456, captured_at="18:01:02",
    )
    session.register_action(
        Player.B, PointOutcome.UNFORCED_ERROR, StrokeType.BACKHAND, Direction.PARALLEL,
        video_time=61.0, captured_at="18:01:40",
    )
    return session


def test_format_clock():
    assert format_clock(0) == "0:00"
    assert format_clock(9.9) == "0:09"
    assert format_clock(61.0) == "1:01"
    assert format_clock(725.4) == "12:05"


def test_export_rows_shape():
    session = tagged_session()

    rows = export_rows(session.history, session.names, "es")

    assert rows[0] == {
        "Timestamp": "18:01:02",
        "VideoTime_sec": "3.46",
        "Player": "Ostapenko",
        "Result": "Desequilibrio positivo",
        "Stroke": "Derecha",
        "Direction": "Cruzado",
        "Score": "0-0 (0-0)",
    }
    assert rows[1]["Player"] == "Suárez Navarro"
    assert rows[1]["VideoTime_sec"] == "61.00"


def test_score_snapshot_text_after_game():
    session = MatchSession()
    for _ in range(4):
        session.register_action(
            Player.B, PointOutcome.POSITIVE_IMBALANCE, StrokeType.SERVE, Direction.CENTER,
        )

    rows = export_rows(session.history, session.names)

    assert rows[-1]["Score"] == "0-0 (0-1)"


def test_export_history_writes_quoted_csv(tmp_path):
    session = tagged_session()

    path = export_history(session, tmp_path)

    assert path.parent == tmp_path
    assert path.name.startswith("tennis_analysis_Ostapenko_vs_Suárez Navarro_")
    assert path.suffix == ".csv"

    text = path.read_text(encoding="utf-8")
    assert text.splitlines()[0] == ",".join(f'"{c}"' for c in CSV_COLUMNS)

    with path.open(newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))

    # most recent first
    assert [r["Timestamp"] for r in rows] == ["18:01:40", "18:01:02"]
    assert rows[0]["Result"] == "Unforced error"


def test_export_empty_history_writes_nothing(tmp_path):
    assert export_history(MatchSession(), tmp_path) is None
    assert list(tmp_path.iterdir()) == []


def test_export_filename_strips_path_separators(tmp_path):
    session = tagged_session()
    session.rename_players("A/C Milan", "..\\Badosa")

    path = export_history(session, tmp_path)

    assert path.parent == tmp_path
    assert path.name.startswith("tennis_analysis_A_C Milan_vs___Badosa_")
    assert [p.name for p in tmp_path.iterdir()] == [path.name]

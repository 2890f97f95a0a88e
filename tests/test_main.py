import json

import pytest

from tagger.exceptions import IncompleteActionError, InvalidVideoTimeError, UnknownLabelError
from tagger.main import execute, format_scoreboard, main, run_prompt
from tagger.match_session import MatchSession
from tagger.models import Player, Score


# ---------------------------------------------------------
# Prompt commands
# ---------------------------------------------------------

def test_tag_command_registers_point():
    session = MatchSession("Ostapenko", "Badosa")

    output = execute(session, "A ue bh cross 12.5")

    assert output.startswith("Point Badosa")
    assert session.score == Score(points_b=1)
    assert session.history[0].video_time == 12.5


def test_tag_command_defaults_video_time():
    session = MatchSession()

    execute(session, "b + serve center")

    assert session.history[0].video_time == 0.0


@pytest.mark.parametrize("line, error", [
    ("A + fh", IncompleteActionError),
    ("A + fh cross 1 extra", IncompleteActionError),
    ("C + fh cross", UnknownLabelError),
    ("A + fh cross soon", InvalidVideoTimeError),
    ('names "unterminated', IncompleteActionError),
])
def test_bad_commands(line, error):
    session = MatchSession()

    with pytest.raises(error):
        execute(session, line)

    assert session.history == ()


def test_names_and_new_commands():
    session = MatchSession()
    execute(session, "A + fh cross")

    execute(session, 'names "Carla Suárez" "Jelena Ostapenko"')
    assert session.name_of(Player.A) == "Carla Suárez"

    execute(session, "new")
    assert session.history == ()
    assert session.score == Score.initial()


def test_scoreboard_shows_point_labels():
    session = MatchSession("Ostapenko", "Badosa")
    for _ in range(3):
        execute(session, "A + fh cross")
        execute(session, "B + bh cross")
    execute(session, "A + smash center")

    lines = format_scoreboard(session).splitlines()

    assert lines[1].split()[-1] == "Ad"
    assert lines[2].split()[-1] == "40"


def test_history_and_stats_views():
    session = MatchSession()

    assert execute(session, "history") == "No actions recorded"

    execute(session, "A - vfh parallel 65")
    history = execute(session, "history")
    stats = execute(session, "stats")

    assert history.startswith("  1:05")
    assert "Negative imbalance" in stats
    assert "Forehand volley" in stats
    assert "no data" in stats


def test_export_command(tmp_path):
    session = MatchSession()

    assert execute(session, "export", export_dir=tmp_path) == "Nothing to export"

    execute(session, "A + fh cross")
    output = execute(session, f"export {tmp_path}")

    assert output.startswith("Exported to")
    assert len(list(tmp_path.glob("*.csv"))) == 1


def test_run_prompt_reports_errors_and_stops_on_quit():
    session = MatchSession()
    printed = []

    run_prompt(
        session,
        ["A + fh cross", "A + lob cross", "quit", "A + fh cross"],
        out=printed.append,
    )

    assert len(session.history) == 1
    assert any(p.startswith("❌") for p in printed)


# ---------------------------------------------------------
# Entry point
# ---------------------------------------------------------

def test_main_replay(tmp_path, capsys):
    actions = [
        {"player": "A", "outcome": "+", "stroke": "fh", "direction": "cross", "video_time": i}
        for i in range(4)
    ]
    events = tmp_path / "events.json"
    events.write_text(json.dumps({"players": {"A": "Ostapenko", "B": "Badosa"}, "actions": actions}))

    code = main(["replay", str(events), "--csv", str(tmp_path / "out")])

    assert code == 0
    out = capsys.readouterr().out
    assert "Ostapenko" in out
    assert "Exported to" in out
    assert len(list((tmp_path / "out").glob("*.csv"))) == 1


def test_main_replay_invalid_file(tmp_path, capsys):
    events = tmp_path / "events.json"
    events.write_text(json.dumps({"actions": [{"player": "Z"}]}))

    assert main(["replay", str(events)]) == 1
    assert "INVALID EVENT FILE" in capsys.readouterr().out


def test_main_replay_missing_file(tmp_path, capsys):
    assert main(["replay", str(tmp_path / "missing.json")]) == 1
    assert "ERROR" in capsys.readouterr().out


def test_timeline_command():
    session = MatchSession()

    assert execute(session, "timeline") == "No actions recorded"

    for _ in range(4):
        execute(session, "B + serve center 5")
    execute(session, "A ue fh cross 70")

    lines = execute(session, "timeline").splitlines()

    assert len(lines) == 5
    assert lines[3].split()[-2:] == ["(0-1)", "0-0"]
    assert lines[4].split()[1] == "1:10"
    assert lines[4].split()[-1] == "0-15"


def test_invalid_log_level_is_rejected():
    with pytest.raises(SystemExit):
        main(["--log-level", "LOUD", "replay", "events.json"])


def test_log_level_is_case_insensitive(tmp_path, capsys):
    assert main(["--log-level", "debug", "replay", str(tmp_path / "missing.json")]) == 1

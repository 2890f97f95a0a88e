import argparse
import logging
import shlex
import sys
from pathlib import Path
from typing import Iterable, List, Optional

from tagger.config import (
    DEFAULT_LOCALE,
    DEFAULT_PLAYER_A,
    DEFAULT_PLAYER_B,
    EXPORTS_DIR,
    LOG_FORMAT,
    LOG_LEVEL,
)
from tagger.event_file import load_event_file
from tagger.exceptions import EventFileError, IncompleteActionError, TaggingError
from tagger.export import export_history, format_clock
from tagger.labels import label, parse_direction, parse_outcome, parse_player, parse_stroke
from tagger.match_session import MatchSession
from tagger.models import Player
from tagger.score_engine import point_label
from tagger.stats import outcome_counts, points_won, stroke_distribution
from tagger.timeline import build_match_timeline

logger = logging.getLogger(__name__)


HELP_TEXT = """\
Commands:
  <A|B> <outcome> <stroke> <direction> [video_time]   tag a point
      outcome:   +  -  ue  (or positive_imbalance, negative_imbalance, unforced_error)
      stroke:    serve fh bh iofh iobh vfh vbh smash
      direction: cross center parallel
  score | history | stats | timeline
                              show the current state
  names "<A name>" "<B name>" rename players
  new                         start a new match
  export [DIR]                write the history to CSV
  quit"""


def configure_logging(level: str = LOG_LEVEL):
    logging.basicConfig(level=level, format=LOG_FORMAT)


# ---------------------------------------------------------
# Text views
# ---------------------------------------------------------

def format_scoreboard(session: MatchSession) -> str:
    score = session.score
    width = max(len(n) for n in session.names.values()) + 2
    lines = [f"{'Player':<{width}}{'Set':>5}{'Gms':>5}{'Pts':>5}"]
    for player in Player:
        lines.append(
            f"{session.name_of(player):<{width}}"
            f"{score.sets_of(player):>5}"
            f"{score.games_of(player):>5}"
            f"{point_label(score, player):>5}"
        )
    return "\n".join(lines)


def format_history(session: MatchSession, locale: str = DEFAULT_LOCALE) -> str:
    history = session.display_history()
    if not history:
        return "No actions recorded"

    return "\n".join(
        f"{format_clock(a.video_time):>6}  {session.name_of(a.player):<16} "
        f"{label(a.outcome, locale):<24} {label(a.stroke, locale):<20} "
        f"{label(a.direction, locale):<14} {a.score_snapshot}"
        for a in history
    )


def format_stats(session: MatchSession, locale: str = DEFAULT_LOCALE) -> str:
    history = session.history
    name_a = session.name_of(Player.A)
    name_b = session.name_of(Player.B)

    lines = [f"{'Metric':<24}{name_a:>18}{name_b:>18}"]
    for outcome, per_player in outcome_counts(history).items():
        lines.append(
            f"{label(outcome, locale):<24}"
            f"{per_player[Player.A]:>18}{per_player[Player.B]:>18}"
        )

    won = points_won(history)
    lines.append(f"{'Points won':<24}{won[Player.A]:>18}{won[Player.B]:>18}")

    for player in Player:
        lines.append("")
        lines.append(f"Strokes - {session.name_of(player)}")
        distribution = stroke_distribution(history, player)
        if not distribution:
            lines.append("  no data")
        for stroke, count, pct in distribution:
            lines.append(f"  {label(stroke, locale):<22}{count:>5}{pct:>7.1f}%")

    return "\n".join(lines)


def format_timeline(session: MatchSession) -> str:
    rows = build_match_timeline(session.history)
    if not rows:
        return "No actions recorded"

    return "\n".join(
        f"{r['action_index']:>4}  {format_clock(r['video_time']):>6}  point {r['winner']}  "
        f"{r['sets_a']}-{r['sets_b']} ({r['games_a']}-{r['games_b']}) "
        f"{r['points_a']}-{r['points_b']}"
        for r in rows
    )


# ---------------------------------------------------------
# Interactive prompt
# ---------------------------------------------------------

def execute(
    session: MatchSession,
    line: str,
    locale: str = DEFAULT_LOCALE,
    export_dir: Path = EXPORTS_DIR,
) -> str:
    """Run one prompt command against ``session`` and return its output."""
    try:
        args = shlex.split(line)
    except ValueError as e:
        raise IncompleteActionError(f"Cannot parse command: {e}")

    if not args:
        return ""

    cmd = args[0].lower()

    if cmd == "help":
        return HELP_TEXT
    if cmd == "score":
        return format_scoreboard(session)
    if cmd == "history":
        return format_history(session, locale)
    if cmd == "stats":
        return format_stats(session, locale)
    if cmd == "timeline":
        return format_timeline(session)
    if cmd == "new":
        session.new_match()
        return format_scoreboard(session)
    if cmd == "names":
        if len(args) != 3:
            raise IncompleteActionError('Usage: names "<A name>" "<B name>"')
        session.rename_players(args[1], args[2])
        return format_scoreboard(session)
    if cmd == "export":
        path = export_history(session, Path(args[1]) if len(args) > 1 else export_dir, locale)
        return f"Exported to {path}" if path else "Nothing to export"

    if len(args) not in (4, 5):
        raise IncompleteActionError(
            "Expected: <player> <outcome> <stroke> <direction> [video_time]"
        )

    video_time = args[4] if len(args) == 5 else 0.0
    action = session.register_action(
        parse_player(args[0]),
        parse_outcome(args[1]),
        parse_stroke(args[2]),
        parse_direction(args[3]),
        video_time=_to_float(video_time),
    )

    point_to = session.name_of(action.winner)
    return f"Point {point_to}\n{format_scoreboard(session)}"


def _to_float(value):
    try:
        return float(value)
    except (TypeError, ValueError):
        return value


def run_prompt(
    session: MatchSession,
    lines: Iterable[str],
    locale: str = DEFAULT_LOCALE,
    export_dir: Path = EXPORTS_DIR,
    out=print,
):
    out(format_scoreboard(session))
    for line in lines:
        if line.strip().lower() in ("quit", "exit", "q"):
            break
        try:
            output = execute(session, line, locale, export_dir)
        except TaggingError as e:
            out(f"❌ {e}")
            continue
        if output:
            out(output)


def _stdin_lines():
    while True:
        try:
            yield input("tag> ")
        except EOFError:
            return


# ---------------------------------------------------------
# Entry point
# ---------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tennis-tagger",
        description="Tag tennis points and derive the running score.",
    )
    parser.add_argument("--locale", default=DEFAULT_LOCALE, choices=["en", "es"])
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    )

    sub = parser.add_subparsers(dest="command", required=True)

    replay = sub.add_parser("replay", help="Replay a JSON event file")
    replay.add_argument("events", type=Path)
    replay.add_argument("--csv", type=Path, default=None, help="Export directory")

    tag = sub.add_parser("tag", help="Interactive tagging prompt")
    tag.add_argument("--player-a", default=DEFAULT_PLAYER_A)
    tag.add_argument("--player-b", default=DEFAULT_PLAYER_B)
    tag.add_argument("--export-dir", type=Path, default=EXPORTS_DIR)

    return parser


def cmd_replay(args) -> int:
    logger.info("Replaying %s", args.events)
    event_file = load_event_file(args.events)

    session = MatchSession(event_file.player_a, event_file.player_b)
    session.load_actions(event_file.requests)

    print(format_scoreboard(session))
    print()
    print(format_stats(session, args.locale))

    if args.csv is not None:
        path = export_history(session, args.csv, args.locale)
        if path:
            print(f"\nExported to {path}")
    return 0


def cmd_tag(args) -> int:
    session = MatchSession(args.player_a, args.player_b)
    print(HELP_TEXT)
    run_prompt(session, _stdin_lines(), args.locale, args.export_dir)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        if args.command == "replay":
            return cmd_replay(args)
        return cmd_tag(args)

    except FileNotFoundError as e:
        print("❌ ERROR:", e)

    except EventFileError as e:
        print("❌ INVALID EVENT FILE:", e)

    except TaggingError as e:
        print("❌ TAGGING ERROR:", e)

    return 1


if __name__ == "__main__":
    sys.exit(main())

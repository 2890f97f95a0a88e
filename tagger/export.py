import csv
import logging
import time
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from tagger.config import DEFAULT_LOCALE, EXPORTS_DIR
from tagger.labels import label
from tagger.models import Player, TaggedAction

logger = logging.getLogger(__name__)


CSV_COLUMNS = [
    "Timestamp",
    "VideoTime_sec",
    "Player",
    "Result",
    "Stroke",
    "Direction",
    "Score",
]


def format_clock(seconds: float) -> str:
    """Video position as ``m:ss`` for the history table."""
    minutes = int(seconds // 60)
    secs = int(seconds % 60)
    return f"{minutes}:{secs:02d}"


def export_rows(
    history: Iterable[TaggedAction],
    names: Dict[Player, str],
    locale: str = DEFAULT_LOCALE,
) -> List[Dict[str, str]]:
    return [
        {
            "Timestamp": a.captured_at,
            "VideoTime_sec": f"{a.video_time:.2f}",
            "Player": names[a.player],
            "Result": label(a.outcome, locale),
            "Stroke": label(a.stroke, locale),
            "Direction": label(a.direction, locale),
            "Score": a.score_snapshot,
        }
        for a in history
    ]


def write_csv(output_path: Path, rows: List[Dict[str, str]]) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", newline="", encoding="utf-8") as file:
        writer = csv.DictWriter(file, fieldnames=CSV_COLUMNS, quoting=csv.QUOTE_ALL)
        writer.writeheader()
        writer.writerows(rows)


def _safe_name(name: str) -> str:
    # keep the file inside the export directory
    return name.replace("/", "_").replace("\\", "_").replace("..", "_")


def export_filename(player_a: str, player_b: str) -> str:
    stamp = int(time.time() * 1000)
    return f"tennis_analysis_{_safe_name(player_a)}_vs_{_safe_name(player_b)}_{stamp}.csv"


def export_history(
    session,
    output_dir: Path = EXPORTS_DIR,
    locale: str = DEFAULT_LOCALE,
) -> Optional[Path]:
    """
    Write the session history to a CSV file in ``output_dir``.

    Rows are in display order (most recent first). Returns None and
    writes nothing when the history is empty.
    """
    history = session.display_history()
    if not history:
        logger.warning("Nothing to export: history is empty")
        return None

    names = session.names
    output_path = Path(output_dir) / export_filename(names[Player.A], names[Player.B])
    write_csv(output_path, export_rows(history, names, locale))

    logger.info("Exported %d actions to %s", len(history), output_path)
    return output_path

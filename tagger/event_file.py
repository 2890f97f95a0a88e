# tagger/event_file.py
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from tagger.config import DEFAULT_PLAYER_A, DEFAULT_PLAYER_B, SCHEMA_VERSION
from tagger.exceptions import EventFileError, UnknownLabelError
from tagger.labels import parse_direction, parse_outcome, parse_player, parse_stroke
from tagger.models import ActionRequest


REQUIRED_ACTION_FIELDS = ("player", "outcome", "stroke", "direction")


@dataclass
class EventFile:
    """
    Batch input for replaying a tagged match.

    {
      "schema_version": "1.0",
      "players": {"A": "...", "B": "..."},
      "actions": [{"video_time": 3.5, "player": "A", "outcome": "+",
                   "stroke": "fh", "direction": "cross"}, ...]
    }
    """
    schema_version: str = SCHEMA_VERSION
    player_a: str = DEFAULT_PLAYER_A
    player_b: str = DEFAULT_PLAYER_B
    requests: List[ActionRequest] = field(default_factory=list)


# =============================================================================
# Validation (shape + semantics)
# =============================================================================

def _is_finite_number(x: Any) -> bool:
    return (
        isinstance(x, (int, float))
        and not isinstance(x, bool)
        and x == x
        and x not in (float("inf"), float("-inf"))
    )


def validate_event_record(record: Any) -> List[str]:
    """
    Return list of problems (empty == valid).
    """
    if not isinstance(record, dict):
        return ["record must be an object"]

    problems: List[str] = []

    for key in REQUIRED_ACTION_FIELDS:
        if key not in record:
            problems.append(f"missing field: {key}")

    video_time = record.get("video_time", 0.0)
    if not _is_finite_number(video_time):
        problems.append("video_time not finite number")
    elif video_time < 0:
        problems.append("video_time < 0")

    parsers = {
        "player": parse_player,
        "outcome": parse_outcome,
        "stroke": parse_stroke,
        "direction": parse_direction,
    }
    for key, parse in parsers.items():
        if key in record:
            try:
                parse(record[key])
            except UnknownLabelError as e:
                problems.append(str(e))

    return problems


def validate_event_document(data: Any) -> List[str]:
    if not isinstance(data, dict):
        return ["document must be an object"]

    problems: List[str] = []

    version = str(data.get("schema_version", SCHEMA_VERSION))
    if version != SCHEMA_VERSION:
        problems.append(f"unsupported schema_version: {version}")

    players = data.get("players", {})
    if not isinstance(players, dict) or not set(players.keys()) <= {"A", "B"}:
        problems.append("players must only contain keys A and B")

    actions = data.get("actions")
    if not isinstance(actions, list):
        problems.append("actions must be list")
        return problems

    for i, record in enumerate(actions):
        problems.extend(f"actions[{i}]: {msg}" for msg in validate_event_record(record))

    return problems


# =============================================================================
# Conversion
# =============================================================================

def to_request(record: Dict[str, Any]) -> ActionRequest:
    return ActionRequest(
        player=parse_player(record["player"]),
        outcome=parse_outcome(record["outcome"]),
        stroke=parse_stroke(record["stroke"]),
        direction=parse_direction(record["direction"]),
        video_time=float(record.get("video_time", 0.0)),
    )


def parse_event_document(data: Any) -> EventFile:
    problems = validate_event_document(data)
    if problems:
        raise EventFileError(problems)

    players = data.get("players", {})
    return EventFile(
        schema_version=str(data.get("schema_version", SCHEMA_VERSION)),
        player_a=str(players.get("A", DEFAULT_PLAYER_A)),
        player_b=str(players.get("B", DEFAULT_PLAYER_B)),
        requests=[to_request(r) for r in data["actions"]],
    )


# =============================================================================
# IO
# =============================================================================

def load_event_file(path: Path) -> EventFile:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Event file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise EventFileError([f"invalid JSON: {e}"])

    return parse_event_document(data)

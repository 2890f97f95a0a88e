"""
Presentation labels for the tagging enumerations.

Logic only ever compares enum members; everything a person reads goes
through the tables below so that display text can change per locale.
"""
from enum import Enum
from typing import Dict, Type, TypeVar

from tagger.config import DEFAULT_LOCALE
from tagger.exceptions import UnknownLabelError
from tagger.models import Direction, Player, PointOutcome, StrokeType


E = TypeVar("E", bound=Enum)


LABELS: Dict[str, Dict[Enum, str]] = {
    "en": {
        PointOutcome.POSITIVE_IMBALANCE: "Positive imbalance",
        PointOutcome.NEGATIVE_IMBALANCE: "Negative imbalance",
        PointOutcome.UNFORCED_ERROR: "Unforced error",
        StrokeType.SERVE: "Serve",
        StrokeType.FOREHAND: "Forehand",
        StrokeType.BACKHAND: "Backhand",
        StrokeType.INSIDE_OUT_FOREHAND: "Inside-out forehand",
        StrokeType.INSIDE_OUT_BACKHAND: "Inside-out backhand",
        StrokeType.VOLLEY_FOREHAND: "Forehand volley",
        StrokeType.VOLLEY_BACKHAND: "Backhand volley",
        StrokeType.SMASH: "Smash",
        Direction.CROSS: "Cross",
        Direction.CENTER: "Center",
        Direction.PARALLEL: "Down the line",
    },
    "es": {
        PointOutcome.POSITIVE_IMBALANCE: "Desequilibrio positivo",
        PointOutcome.NEGATIVE_IMBALANCE: "Desequilibrio negativo",
        PointOutcome.UNFORCED_ERROR: "Error no forzado",
        StrokeType.SERVE: "Servicio",
        StrokeType.FOREHAND: "Derecha",
        StrokeType.BACKHAND: "Reves",
        StrokeType.INSIDE_OUT_FOREHAND: "Derecha invertida",
        StrokeType.INSIDE_OUT_BACKHAND: "Reves invertido",
        StrokeType.VOLLEY_FOREHAND: "Volea derecha",
        StrokeType.VOLLEY_BACKHAND: "Volea reves",
        StrokeType.SMASH: "Remate",
        Direction.CROSS: "Cruzado",
        Direction.CENTER: "Centro",
        Direction.PARALLEL: "Paralelo",
    },
}

# Short forms accepted by the interactive prompt.
ALIASES: Dict[str, Enum] = {
    "+": PointOutcome.POSITIVE_IMBALANCE,
    "-": PointOutcome.NEGATIVE_IMBALANCE,
    "ue": PointOutcome.UNFORCED_ERROR,
    "fh": StrokeType.FOREHAND,
    "bh": StrokeType.BACKHAND,
    "iofh": StrokeType.INSIDE_OUT_FOREHAND,
    "iobh": StrokeType.INSIDE_OUT_BACKHAND,
    "vfh": StrokeType.VOLLEY_FOREHAND,
    "vbh": StrokeType.VOLLEY_BACKHAND,
    "dtl": Direction.PARALLEL,
}


def label(member: Enum, locale: str = DEFAULT_LOCALE) -> str:
    table = LABELS.get(locale)
    if table is None:
        raise UnknownLabelError(f"Unsupported locale: {locale}")
    return table[member]


def _parse(enum_cls: Type[E], text: str) -> E:
    key = str(text).strip().lower()

    for member in enum_cls:
        if key in (member.name.lower(), str(member.value).lower()):
            return member

    alias = ALIASES.get(key)
    if isinstance(alias, enum_cls):
        return alias

    for table in LABELS.values():
        for member, text_label in table.items():
            if isinstance(member, enum_cls) and text_label.lower() == key:
                return member

    raise UnknownLabelError(f"Unknown {enum_cls.__name__} value: {text!r}")


def parse_player(text: str) -> Player:
    return _parse(Player, text)


def parse_outcome(text: str) -> PointOutcome:
    return _parse(PointOutcome, text)


def parse_stroke(text: str) -> StrokeType:
    return _parse(StrokeType, text)


def parse_direction(text: str) -> Direction:
    return _parse(Direction, text)

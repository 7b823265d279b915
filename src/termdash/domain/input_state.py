from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class EventKind(Enum):
    KEY = auto()
    RESIZE = auto()
    OTHER = auto()


class Key(Enum):
    ESCAPE = auto()
    SPACE = auto()
    CHAR = auto()      # printable character, see InputEvent.ch
    UNKNOWN = auto()


@dataclass(frozen=True)
class InputEvent:
    kind: EventKind
    key: Key = Key.UNKNOWN
    ch: str = ""

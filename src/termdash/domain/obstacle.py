from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

Sprite = tuple[str, ...]

PLAYER_SPRITE: Sprite = (
    " O ",
    "/|\\",
    "/ \\",
)


class ObstacleKind(Enum):
    # Each kind carries its sprite; the sprite's bounding box is the collision footprint.
    ROCK = (
        " /\\ ",
        "/__\\",
    )
    BOX = (
        "+--+",
        "|  |",
        "+--+",
    )
    TREE = (
        " /\\ ",
        "/  \\",
        " || ",
        " || ",
    )

    @property
    def sprite(self) -> Sprite:
        return self.value

    @property
    def width(self) -> int:
        return sprite_width(self.value)

    @property
    def height(self) -> int:
        return len(self.value)


def sprite_width(sprite: Sprite) -> int:
    return max(len(line) for line in sprite)


@dataclass(frozen=True)
class Obstacle:
    x: int
    kind: ObstacleKind

    @property
    def width(self) -> int:
        return self.kind.width

    @property
    def height(self) -> int:
        return self.kind.height

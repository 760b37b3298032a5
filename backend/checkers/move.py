from __future__ import annotations

from dataclasses import dataclass

Coordinate = tuple[int, int]
MoveSequence = tuple[Coordinate, ...]
CaptureSequence = tuple[Coordinate, ...]


def as_sequence(positions) -> MoveSequence:
    return tuple((int(row), int(col)) for row, col in positions)


@dataclass(frozen=True, slots=True)
class MoveResult:
    path: MoveSequence
    captures: CaptureSequence = ()
    crowned: bool = False

    @property
    def start(self) -> Coordinate:
        return self.path[0]

    @property
    def end(self) -> Coordinate:
        return self.path[-1]

    @property
    def is_capture(self) -> bool:
        return bool(self.captures)

    def __str__(self) -> str:
        connector = " x " if self.is_capture else " - "
        return connector.join(f"{row},{col}" for row, col in self.path)

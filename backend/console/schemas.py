from __future__ import annotations

from pydantic import BaseModel, Field, ValidationError

from checkers.board import BOARD_SIZE
from checkers.move import MoveSequence


class InputError(ValueError):
    pass


class CoordinateModel(BaseModel):
    row: int = Field(..., ge=0, lt=BOARD_SIZE)
    col: int = Field(..., ge=0, lt=BOARD_SIZE)


class MoveRequest(BaseModel):
    start: CoordinateModel
    steps: list[CoordinateModel] = Field(
        ..., min_length=1, description="Ordered path after the starting square."
    )

    def as_sequence(self) -> MoveSequence:
        return tuple((node.row, node.col) for node in [self.start, *self.steps])


def _split_coordinate(token: str) -> dict[str, str]:
    parts = token.split(",")
    if len(parts) != 2:
        raise InputError(f"Coordinates look like 'row,col', got '{token}'.")
    row, col = (part.strip() for part in parts)
    return {"row": row, "col": col}


def parse_sequence(text: str) -> MoveSequence:
    """Turn ``"2,1 3,2"`` into ``((2, 1), (3, 2))``."""
    tokens = text.split()
    if len(tokens) < 2:
        raise InputError("Type a start square and at least one destination (Ex: 2,1 3,2).")
    coords = [_split_coordinate(token) for token in tokens]
    try:
        request = MoveRequest.model_validate({"start": coords[0], "steps": coords[1:]})
    except ValidationError as exc:
        raise InputError(f"Coordinates must be whole numbers between 0 and {BOARD_SIZE - 1}.") from exc
    return request.as_sequence()

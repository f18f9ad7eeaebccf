from typing import NamedTuple


class Position(NamedTuple):
    x: float
    y: float

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}

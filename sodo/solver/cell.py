"""
Cell Module - A single grid cell as a tagged value.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CellKind(Enum):
    """Variant tag of a Cell."""
    EMPTY = "empty"
    GIVEN = "given"
    FILLED = "filled"


@dataclass(frozen=True)
class Cell:
    """
    Immutable cell value.

    A cell is either empty, a given (clue of the original puzzle) or
    filled (placed by the solver or the generator).

    Attributes:
        kind: Variant tag
        value: Numeric payload, None for empty cells
    """
    kind: CellKind
    value: Optional[int] = None

    def __post_init__(self):
        if self.kind is CellKind.EMPTY:
            if self.value is not None:
                raise ValueError("Empty cell cannot carry a value")
        elif self.value is None or self.value < 1:
            raise ValueError(f"{self.kind.value} cell needs a positive value, got {self.value}")

    @classmethod
    def empty(cls) -> 'Cell':
        return cls(CellKind.EMPTY)

    @classmethod
    def of_given(cls, value: int) -> 'Cell':
        return cls(CellKind.GIVEN, value)

    @classmethod
    def of_filled(cls, value: int) -> 'Cell':
        return cls(CellKind.FILLED, value)

    @property
    def is_empty(self) -> bool:
        return self.kind is CellKind.EMPTY

    @property
    def is_given(self) -> bool:
        return self.kind is CellKind.GIVEN

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "value": self.value}

    @classmethod
    def from_dict(cls, data: dict) -> 'Cell':
        return cls(CellKind(data["kind"]), data.get("value"))

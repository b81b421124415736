"""Data models shared by the note generator, grid renderer and player."""

from dataclasses import dataclass
from typing import Final

#: Number of time-slots (and note columns) in one table.
SLOT_COUNT: Final[int] = 16

#: Rows drawn as horizontal staff lines.
STAFF_LINES: Final[frozenset[int]] = frozenset({1, 3, 5, 7, 9})

#: One generated pitch (grid row) per time-slot.
PitchSequence = tuple[int, ...]


@dataclass(frozen=True)
class Dimension:
    """
    Fixed grid bounds.

    Attributes:
        width:  Number of columns, including both border columns.
        height: Number of rows.
    """

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Dimension must be positive, got {self.width}x{self.height}.")


#: Reference table size: 16 note columns spaced four apart plus borders.
DEFAULT_DIMENSION: Final[Dimension] = Dimension(width=65, height=15)


@dataclass(frozen=True)
class Frame:
    """One playback step: text to write, then seconds to wait."""

    text: str
    delay: float

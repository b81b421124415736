"""OcarinerConfig: validated settings handed from the CLI to the table."""

from dataclasses import dataclass
from typing import Final

MIN_TEMPO: Final[float] = 0.3
MAX_TEMPO: Final[float] = 1.5
MAX_DIFFICULTY: Final[int] = 10
MAX_WAIT: Final[int] = 8
MAX_MEASURES: Final[int] = 8
MAX_TIME: Final[int] = 8


@dataclass(frozen=True)
class OcarinerConfig:
    """
    Immutable run configuration.

    Attributes:
        tempo:      Seconds each playback step is held (0.3–1.5).
        difficulty: Reserved (1–10).
        wait:       Reserved (0–8).
        ascii:      Draw with plain ASCII instead of box-drawing glyphs.
        series:     Number of generate/render/play cycles to run.
        measures:   Reserved (1–8).
        time:       Reserved, beats per measure (1–8).
        seed:       Seed for note generation; ``None`` for a random run.
    """

    tempo: float = 0.8
    difficulty: int = 1
    wait: int = 0
    ascii: bool = False
    series: int = 1
    measures: int = 1
    time: int = 4
    seed: int | None = None

    def __post_init__(self) -> None:
        checks = [
            ("tempo", self.tempo, MIN_TEMPO, MAX_TEMPO),
            ("difficulty", self.difficulty, 1, MAX_DIFFICULTY),
            ("wait", self.wait, 0, MAX_WAIT),
            ("measures", self.measures, 1, MAX_MEASURES),
            ("time", self.time, 1, MAX_TIME),
        ]
        for name, value, low, high in checks:
            if not low <= value <= high:
                raise ValueError(f"{name} must be between {low} and {high}, got {value}.")
        if self.series < 1:
            raise ValueError(f"series must be at least 1, got {self.series}.")

"""NoteGenerator: maps noise samples onto grid rows."""

import logging
from typing import Protocol

import numpy as np

from ocariner.noise_sampler import NoiseSampler
from ocariner.table_models import SLOT_COUNT, PitchSequence

logger = logging.getLogger(__name__)

# floor((v + 1) * PITCH_SCALE) maps [-1, 1] onto [0, 13]
PITCH_SCALE = 6.5


class Sampler(Protocol):
    def sample(self, count: int) -> list[float]: ...


def noise_to_pitch(value: float) -> int:
    """
    Rescale one noise value to an integer pitch (grid row).

    The upper bound is inclusive: a sample of exactly 1.0 yields 13. Values
    are not clamped, so out-of-range noise simply lands off the staff.
    """
    return int(np.floor((value + 1.0) * PITCH_SCALE))


class NoteGenerator:
    """Produces one full PitchSequence per call from a noise sampler."""

    def __init__(self, sampler: Sampler | None = None, slots: int = SLOT_COUNT) -> None:
        self.sampler = sampler if sampler is not None else NoiseSampler()
        self.slots = slots

    def generate(self) -> PitchSequence:
        """Return a freshly generated sequence of ``slots`` pitches."""
        pitches = tuple(noise_to_pitch(v) for v in self.sampler.sample(self.slots))
        logger.debug("Generated pitches: %s", pitches)
        return pitches

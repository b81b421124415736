"""NoiseSampler: reads values along a random slice of a 2-D OpenSimplex field."""

from __future__ import annotations

import numpy as np
from opensimplex import OpenSimplex


class NoiseSampler:
    """
    Samples a coherent-noise field along a horizontal cross-section.

    Each call to ``sample()`` draws a fresh ``y`` coordinate from the random
    source and then walks ``x`` in fixed steps of ``STEP``:

        values[i] = noise2(i * STEP, y)

    Consecutive values are therefore smoothly related (coherent), while two
    calls explore two different slices of the field. The random source is
    explicit so a seeded sampler reproduces the same slices in order.
    """

    STEP = 0.3         # x distance between consecutive samples
    FIELD_SEED = 0     # permutation seed of the noise field itself

    def __init__(
        self,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
        field_seed: int = FIELD_SEED,
    ) -> None:
        """
        Args:
            seed:       Seed for the slice-selecting random source. Ignored
                        when ``rng`` is given. ``None`` seeds from the OS.
            rng:        Pre-built numpy Generator to draw slices from.
            field_seed: Seed of the OpenSimplex permutation table.
        """
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self._field = OpenSimplex(seed=field_seed)

    def sample(self, count: int) -> list[float]:
        """
        Return ``count`` noise values, nominally within [-1, 1].

        Raises:
            ValueError: If ``count`` is negative.
        """
        if count < 0:
            raise ValueError(f"Sample count must be non-negative, got {count}.")

        y = float(self.rng.random())
        xs = np.arange(count) * self.STEP
        return [float(self._field.noise2(x=float(x), y=y)) for x in xs]

"""OcTable: the table entity that owns one pitch sequence per cycle."""

from __future__ import annotations

import logging
import sys
import threading
from typing import TextIO

from ocariner.config import OcarinerConfig
from ocariner.glyphs import GlyphSet
from ocariner.grid_renderer import GridRenderer
from ocariner.noise_sampler import NoiseSampler
from ocariner.note_generator import NoteGenerator
from ocariner.playback import PlaybackScheduler
from ocariner.table_models import DEFAULT_DIMENSION, STAFF_LINES, Dimension, PitchSequence

logger = logging.getLogger(__name__)


class OcTable:
    """
    Runs generate → render → play cycles on a 65×15 staff table.

    Each cycle generates a brand-new PitchSequence, draws the grid with it and
    only then starts the arrow animation. The sequence lives for exactly one
    cycle and is never reused by the next one.

    Usage:

        table = OcTable(OcarinerConfig(tempo=0.5, series=2))
        table.run()
    """

    def __init__(
        self,
        config: OcarinerConfig | None = None,
        sink: TextIO | None = None,
        generator: NoteGenerator | None = None,
        player: PlaybackScheduler | None = None,
    ) -> None:
        self.config = config if config is not None else OcarinerConfig()
        self.sink = sink if sink is not None else sys.stdout
        self.dimension: Dimension = DEFAULT_DIMENSION
        self.staff_lines = STAFF_LINES

        glyphs = GlyphSet(ascii_mode=self.config.ascii)
        self.generator = (
            generator if generator is not None
            else NoteGenerator(NoiseSampler(seed=self.config.seed))
        )
        self.renderer = GridRenderer(glyphs)
        self.player = player if player is not None else PlaybackScheduler(glyphs)
        self._stop = threading.Event()

    def render(self, pitches: PitchSequence) -> None:
        """Write the table for ``pitches`` to the sink."""
        self.renderer.draw(self.sink, self.dimension, self.staff_lines, pitches)

    def cycle(self) -> PitchSequence:
        """
        Run one full cycle and return the sequence it used.

        Raises:
            RenderError:   If the table cannot be written.
            PlaybackError: If a playback frame cannot be written.
        """
        pitches = self.generator.generate()
        self.render(pitches)
        self.player.play(self.sink, pitches, self.config.tempo, stop=self._stop)
        return pitches

    def run(self) -> list[PitchSequence]:
        """Run ``config.series`` cycles, stopping early if ``stop()`` is called."""
        self._stop.clear()
        played: list[PitchSequence] = []
        for index in range(self.config.series):
            if self._stop.is_set():
                break
            logger.info("Cycle %d/%d started.", index + 1, self.config.series)
            played.append(self.cycle())
            logger.info("Cycle %d/%d finished.", index + 1, self.config.series)
        return played

    def stop(self) -> None:
        """Ask the running playback to end after its current step."""
        logger.info("Stop requested.")
        self._stop.set()

"""PlaybackScheduler: animates an arrow cue under each note in turn."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable, Sequence
from typing import TextIO

from ocariner.errors import PlaybackError
from ocariner.glyphs import Glyph, GlyphSet
from ocariner.table_models import Frame

logger = logging.getLogger(__name__)

# Return to column 0 and ring the bell; the next frame overwrites this one.
FRAME_TERMINATOR = "\r\x07"


class PlaybackScheduler:
    """
    Step an arrow along the note columns, one step per ``tempo`` seconds.

    Step ``i`` indents the arrow by ``NOTE_OFFSET + NOTE_SPACING * i`` blank
    glyphs so it sits right under note column ``i`` of the rendered table.

    The animation is built as a list of :class:`Frame` objects first and then
    driven in order. Without a stop event the driver simply sleeps between
    frames; with one, it waits on the event and ends early once it is set.
    """

    NOTE_OFFSET = 2
    NOTE_SPACING = 4

    def __init__(
        self,
        glyphs: GlyphSet | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """
        Args:
            glyphs: Glyph lookup used for the indent and the arrow.
            sleep:  Blocking delay function, replaceable in tests.
        """
        self.glyphs = glyphs if glyphs is not None else GlyphSet()
        self._sleep = sleep

    def frames(self, pitches: Sequence[int], tempo: float) -> list[Frame]:
        """Build one frame per time-slot of ``pitches``."""
        blank = self.glyphs(Glyph.BLANK)
        arrow = self.glyphs(Glyph.ARROW_UP_FILLED)
        return [
            Frame(
                text=blank * (self.NOTE_OFFSET + self.NOTE_SPACING * step) + arrow + FRAME_TERMINATOR,
                delay=tempo,
            )
            for step in range(len(pitches))
        ]

    def play(
        self,
        sink: TextIO,
        pitches: Sequence[int],
        tempo: float,
        stop: threading.Event | None = None,
    ) -> int:
        """
        Run the animation, blocking for about ``len(pitches) * tempo`` seconds.

        Args:
            sink:    Terminal-like text stream; flushed after every frame.
            pitches: The sequence being played, one frame per entry.
            tempo:   Seconds to hold each frame.
            stop:    Optional event checked between frames.

        Returns:
            Number of frames shown.

        Raises:
            PlaybackError: If a frame cannot be written to the sink.
        """
        shown = 0
        for frame in self.frames(pitches, tempo):
            if stop is not None and stop.is_set():
                logger.info("Playback stopped after %d of %d steps.", shown, len(pitches))
                break

            try:
                sink.write(frame.text)
                sink.flush()
            except OSError as exc:
                raise PlaybackError(f"Could not write playback frame {shown}: {exc}") from exc
            shown += 1

            if stop is None:
                self._sleep(frame.delay)
            elif stop.wait(frame.delay):
                logger.info("Playback stopped after %d of %d steps.", shown, len(pitches))
                break

        return shown

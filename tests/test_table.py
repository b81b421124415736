"""Unit tests for OcTable cycles."""

import io
import threading
from collections.abc import Sequence
from typing import TextIO

from ocariner.config import OcarinerConfig
from ocariner.glyphs import Glyph, glyph
from ocariner.note_generator import NoteGenerator
from ocariner.table import OcTable


class _SequenceSampler:
    """Returns a different constant slice on each call."""

    def __init__(self, values: list[float]) -> None:
        self.values = list(values)

    def sample(self, count: int) -> list[float]:
        return [self.values.pop(0)] * count


class _RecordingPlayer:
    """Stands in for PlaybackScheduler and records what it was asked to play."""

    def __init__(self, on_play=None) -> None:
        self.calls: list[tuple[tuple[int, ...], float, str]] = []
        self.on_play = on_play

    def play(
        self,
        sink: TextIO,
        pitches: Sequence[int],
        tempo: float,
        stop: threading.Event | None = None,
    ) -> int:
        assert isinstance(sink, io.StringIO)
        self.calls.append((tuple(pitches), tempo, sink.getvalue()))
        if self.on_play is not None:
            self.on_play()
        return len(pitches)


def _table(config: OcarinerConfig, values: list[float], player: _RecordingPlayer) -> OcTable:
    generator = NoteGenerator(_SequenceSampler(values))
    return OcTable(config, sink=io.StringIO(), generator=generator, player=player)  # type: ignore[arg-type]


def test_cycle_renders_before_playing() -> None:
    player = _RecordingPlayer()
    table = _table(OcarinerConfig(tempo=0.5), [-1.0], player)

    pitches = table.cycle()

    assert pitches == (0,) * 16
    assert len(player.calls) == 1
    played, tempo, written_before_play = player.calls[0]
    assert played == pitches
    assert tempo == 0.5
    assert written_before_play.splitlines()[0].count(glyph(Glyph.NOTE)) == 16


def test_run_regenerates_pitches_every_cycle() -> None:
    player = _RecordingPlayer()
    table = _table(OcarinerConfig(series=3), [-1.0, 0.0, 1.0], player)

    played = table.run()

    assert played == [(0,) * 16, (6,) * 16, (13,) * 16]
    assert [call[0] for call in player.calls] == played


def test_stop_ends_the_series_early() -> None:
    holder: list[OcTable] = []
    player = _RecordingPlayer(on_play=lambda: holder[0].stop())
    table = _table(OcarinerConfig(series=3), [0.0, 0.0, 0.0], player)
    holder.append(table)

    assert len(table.run()) == 1


def test_default_table_uses_reference_grid() -> None:
    table = OcTable(OcarinerConfig(seed=1), sink=io.StringIO())
    assert (table.dimension.width, table.dimension.height) == (65, 15)
    assert table.staff_lines == frozenset({1, 3, 5, 7, 9})


def test_seeded_tables_render_identically() -> None:
    first = OcTable(OcarinerConfig(seed=9), sink=io.StringIO())
    second = OcTable(OcarinerConfig(seed=9), sink=io.StringIO())
    first.render(first.generator.generate())
    second.render(second.generator.generate())
    assert first.sink.getvalue() == second.sink.getvalue()  # type: ignore[attr-defined]


def test_ascii_config_renders_ascii() -> None:
    table = OcTable(OcarinerConfig(ascii=True, seed=2), sink=io.StringIO())
    table.render(table.generator.generate())
    assert table.sink.getvalue().isascii()  # type: ignore[attr-defined]

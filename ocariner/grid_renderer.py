"""GridRenderer: draws the staff table and the generated notes as text."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TextIO

from ocariner.errors import RenderError
from ocariner.glyphs import Glyph, GlyphSet
from ocariner.table_models import Dimension


class GridRenderer:
    """
    Render a staff table with one note column per time-slot.

    Cell classification
    -------------------
    Every ``(row, column)`` cell is classified by the first rule that matches:

    1. **Note** – the column is a note column (``column % 4 == 2``) and the
       time-slot it belongs to (``column // 4``) has a pitch equal to ``row``.
       Notes are drawn over staff lines and bar lines alike.

    2. **Staff line** – the row is one of the staff-line rows:
         - left border  → ``├``
         - right border → ``┤``
         - bar line (column multiple of ``BAR_SPACING``) → ``┼``
         - anything else → ``─``

    3. **Space between lines** – border and bar columns get ``│``,
       everything else is blank.

    The result depends only on the cell position, the staff lines and the
    pitches, so the same inputs always produce the same text.
    """

    NOTE_SPACING = 4   # columns between consecutive note columns
    NOTE_OFFSET = 2    # column of the first note column
    BAR_SPACING = 16   # columns between vertical bar lines

    def __init__(self, glyphs: GlyphSet | None = None) -> None:
        self.glyphs = glyphs if glyphs is not None else GlyphSet()

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _note_index(self, column: int) -> int | None:
        """Return the time-slot drawn in ``column``, or None for other columns."""
        if column % self.NOTE_SPACING != self.NOTE_OFFSET:
            return None
        return column // self.NOTE_SPACING

    def _row_hits(self, row: int, pitches: Sequence[int]) -> frozenset[int]:
        """Time-slot indices whose pitch lands on ``row``."""
        return frozenset(slot for slot, pitch in enumerate(pitches) if pitch == row)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def classify(
        self,
        row: int,
        column: int,
        dimension: Dimension,
        staff_lines: Iterable[int],
        hits: frozenset[int],
    ) -> Glyph:
        """
        Classify a single cell.

        Args:
            row:         Row index, 0 at the top.
            column:      Column index, 0 at the left border.
            dimension:   Grid bounds.
            staff_lines: Rows drawn as horizontal staff lines.
            hits:        Time-slots whose pitch equals ``row``.

        Returns:
            The Glyph category to display.
        """
        note_index = self._note_index(column)
        if note_index is not None and note_index in hits:
            return Glyph.NOTE

        last_column = dimension.width - 1
        if row in staff_lines:
            if column == 0:
                return Glyph.JUNCTION_RIGHT
            if column == last_column:
                return Glyph.JUNCTION_LEFT
            if column % self.BAR_SPACING == 0:
                return Glyph.JUNCTION_CROSS
            return Glyph.HORIZONTAL

        if column in (0, last_column) or column % self.BAR_SPACING == 0:
            return Glyph.VERTICAL
        return Glyph.BLANK

    def render(
        self,
        dimension: Dimension,
        staff_lines: Iterable[int],
        pitches: Sequence[int],
    ) -> list[str]:
        """
        Render the whole table.

        Returns:
            ``dimension.height`` grid lines followed by one empty separator
            line.
        """
        staff = frozenset(staff_lines)
        lines: list[str] = []
        for row in range(dimension.height):
            hits = self._row_hits(row, pitches)
            lines.append(
                "".join(
                    self.glyphs(self.classify(row, column, dimension, staff, hits))
                    for column in range(dimension.width)
                )
            )
        lines.append("")
        return lines

    def draw(
        self,
        sink: TextIO,
        dimension: Dimension,
        staff_lines: Iterable[int],
        pitches: Sequence[int],
    ) -> None:
        """
        Render the table and write it to ``sink``.

        Raises:
            RenderError: If the sink cannot be written or flushed.
        """
        lines = self.render(dimension, staff_lines, pitches)
        try:
            sink.write("\n".join(lines) + "\n")
            sink.flush()
        except OSError as exc:
            raise RenderError(f"Could not write the table: {exc}") from exc

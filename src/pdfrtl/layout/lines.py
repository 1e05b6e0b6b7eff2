"""Greedy line packing and paginated vertical layout."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, List

from pdfrtl.config import ResolvedMargins
from pdfrtl.layout.words import Word

if TYPE_CHECKING:
    from pdfrtl.base import Renderer

logger = logging.getLogger(__name__)

Line = List[Word]


@dataclass(frozen=True)
class LayoutMetrics:
    """
    Per-paragraph layout measurements.

    Computed once from the renderer's font state when a paragraph starts and
    never changed afterwards.

    Attributes:
        line_height: Vertical advance per line.
        page_width: Full page width.
        page_height: Full page height.
        max_width: Content width (page width minus left and right margins).
        space_width: Width of one inter-word space.
        margins: Left, right, top and bottom margins.
    """
    line_height: float
    page_width: float
    page_height: float
    max_width: float
    space_width: float
    margins: ResolvedMargins

    @property
    def bottom_limit(self) -> float:
        """Lowest cursor position a line may start at without a page break."""
        return self.page_height - self.margins.bottom

    @property
    def page_top(self) -> float:
        """Cursor position of the first line on a fresh page."""
        return min(max(self.margins.top, 0.0), self.bottom_limit)


def calculate_layout_metrics(
    renderer: Renderer,
    margins: ResolvedMargins,
    line_height: float | None = None,
    line_height_ratio: float = 0.5,
) -> LayoutMetrics:
    """
    Calculate layout metrics for the renderer's current state.

    Args:
        renderer: Renderer whose font size and page size are current.
        margins: Resolved paragraph margins.
        line_height: Custom line height. None derives it from the font size.
        line_height_ratio: Line height as a fraction of the font size.

    Returns:
        LayoutMetrics for the paragraph.
    """
    page_width = renderer.get_page_width()
    return LayoutMetrics(
        line_height=line_height or renderer.get_current_font_size() * line_height_ratio,
        page_width=page_width,
        page_height=renderer.get_page_height(),
        max_width=page_width - margins.left - margins.right,
        space_width=renderer.measure_width(" "),
        margins=margins,
    )


def build_lines(words: List[Word], max_width: float, measure: Callable[[Word], float]) -> List[Line]:
    """
    Pack words greedily into lines no wider than max_width.

    A word that is wider than max_width on its own still gets a line to
    itself; words are never split.

    Args:
        words: Words in final logical order.
        max_width: Content width available to a line.
        measure: Width of a word plus one trailing space.

    Returns:
        Lines in order. Empty input gives no lines.
    """
    lines: List[Line] = []
    current_line: Line = []
    current_width = 0.0

    for word in words:
        word_width = measure(word)

        if current_line and current_width + word_width > max_width:
            lines.append(current_line)
            current_line = []
            current_width = 0.0

        current_line.append(word)
        current_width += word_width

    if current_line:
        lines.append(current_line)

    return lines


def paginate(
    lines: List[Line],
    metrics: LayoutMetrics,
    start_y: float,
    on_page_break: Callable[[], None],
    on_line: Callable[[Line, float], None],
) -> float:
    """
    Walk lines down the page, breaking to a new page when needed.

    Before each line, a cursor past the bottom limit triggers on_page_break
    and moves back to the top margin. This can happen before the very first
    line if start_y is already past the limit. No line is ever skipped.

    Args:
        lines: Lines to place.
        metrics: Paragraph layout metrics.
        start_y: Cursor position of the first line.
        on_page_break: Called to start a new page.
        on_line: Called with each line and its cursor position.

    Returns:
        Cursor position after the last line. A paragraph without lines still
        advances by one line height.
    """
    if not lines:
        return start_y + metrics.line_height

    cursor = start_y

    for line in lines:
        if cursor > metrics.bottom_limit:
            on_page_break()
            cursor = metrics.page_top

        on_line(line, cursor)
        cursor += metrics.line_height

    return cursor

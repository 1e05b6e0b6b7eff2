"""Drawing a laid out line word by word."""

from __future__ import annotations

import logging
from typing import Optional

from pdfrtl.base import Renderer
from pdfrtl.layout.alignment import resolve_x
from pdfrtl.layout.lines import LayoutMetrics, Line
from pdfrtl.layout.words import Word
from pdfrtl.types import Alignment

logger = logging.getLogger(__name__)


def apply_word_font(renderer: Renderer, word: Word, font: Optional[str]) -> None:
    """Select the word's weight. Without a font family the current font is kept."""
    if font:
        renderer.set_font(font, "normal", "bold" if word.is_bold else "normal")


def visual_order(line: Line, is_rtl: bool) -> Line:
    """Copy of the line in drawing order. RTL paragraphs mirror the whole line."""
    ordered = list(line)
    if is_rtl:
        ordered.reverse()
    return ordered


def measure_line(renderer: Renderer, line: Line, space_width: float, font: Optional[str]) -> float:
    """
    Measure the rendered width of a line.

    The weight is set before each word is measured, since bold and regular
    widths differ.

    Returns:
        Sum of word widths plus one space per gap.
    """
    width = 0.0
    for index, word in enumerate(line):
        apply_word_font(renderer, word, font)
        width += renderer.measure_width(word.text)
        if index != len(line) - 1:
            width += space_width
    return width


def render_line(
    renderer: Renderer,
    line: Line,
    y: float,
    is_rtl: bool,
    align: Optional[Alignment],
    metrics: LayoutMetrics,
    font: Optional[str] = None,
    show_logs: bool = False,
) -> float:
    """
    Draw a single line of rich text.

    Words are drawn left to right starting at the aligned x. Each word gets
    its own weight and a direction hint from its own script direction.

    Args:
        renderer: Renderer to draw with.
        line: Words in logical order. Not modified.
        y: Baseline position.
        is_rtl: Paragraph direction.
        align: Alignment, None for the direction default.
        metrics: Paragraph layout metrics.
        font: Font family used to switch weights. None keeps the current font.
        show_logs: Log the line at INFO level.

    Returns:
        The x coordinate the line started at.
    """
    ordered = visual_order(line, is_rtl)
    line_width = measure_line(renderer, ordered, metrics.space_width, font)

    start_x = resolve_x(
        metrics.page_width,
        metrics.margins.left,
        metrics.margins.right,
        line_width,
        align,
        is_rtl,
    )

    if show_logs:
        logger.info(
            f"Line at y={y:.2f}: x={start_x:.2f} width={line_width:.2f} "
            f"words={[word.text for word in ordered]}"
        )

    current_x = start_x
    for index, word in enumerate(ordered):
        apply_word_font(renderer, word, font)
        renderer.draw_text(word.text, current_x, y, is_rtl=word.is_rtl)

        current_x += renderer.measure_width(word.text)
        if index != len(ordered) - 1:
            current_x += metrics.space_width

    return start_x

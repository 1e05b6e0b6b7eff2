"""Rich paragraph layout: the public entry points."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Union

from pdfrtl.base import Renderer
from pdfrtl.config import FormatterDefaults, ParagraphOptions
from pdfrtl.layout.direction import ClassificationContext, get_default_context
from pdfrtl.layout.lines import LayoutMetrics, Line, build_lines, calculate_layout_metrics, paginate
from pdfrtl.layout.render import apply_word_font, render_line
from pdfrtl.layout.words import TextFragment, Word, extract_words, reorder_runs

logger = logging.getLogger(__name__)

FragmentLike = Union[TextFragment, str]


@dataclass(frozen=True)
class ParagraphMeasurement:
    """Result of laying out a paragraph without drawing it."""

    line_height: float
    line_count: int
    final_y: float


@dataclass(frozen=True)
class _PreparedParagraph:
    metrics: LayoutMetrics
    is_rtl: bool
    lines: List[Line]


def coerce_fragments(fragments: Iterable[FragmentLike]) -> List[TextFragment]:
    """Accept plain strings as regular-weight fragments."""
    return [f if isinstance(f, TextFragment) else TextFragment(text=f) for f in fragments]


def _setup_font(renderer: Renderer, font_size: Optional[float], font: Optional[str] = None) -> None:
    if font_size:
        renderer.set_font_size(font_size)
    if font:
        renderer.set_font(font, "normal", "normal")


def _reset_font(renderer: Renderer, defaults: FormatterDefaults, previous_size: float) -> None:
    if defaults.font:
        renderer.set_font(defaults.font, "normal", "normal")
    renderer.set_font_size(defaults.font_size or previous_size)


async def _prepare_paragraph(
    renderer: Renderer,
    fragments: Iterable[FragmentLike],
    options: ParagraphOptions,
    defaults: FormatterDefaults,
    context: ClassificationContext,
) -> _PreparedParagraph:
    _setup_font(renderer, options.font_size or defaults.font_size)

    metrics = calculate_layout_metrics(
        renderer,
        options.resolved_margins(defaults.margin),
        line_height=options.line_height,
        line_height_ratio=defaults.line_height_ratio,
    )
    is_rtl = options.is_rtl if options.is_rtl is not None else defaults.is_rtl

    words = await extract_words(coerce_fragments(fragments), context)
    ordered = reorder_runs(words, is_rtl)

    def measure(word: Word) -> float:
        apply_word_font(renderer, word, defaults.font)
        return renderer.measure_width(word.text + " ")

    lines = build_lines(ordered, metrics.max_width, measure)

    if options.show_logs:
        logger.info(
            f"Paragraph: {len(words)} words, {len(lines)} lines, rtl={is_rtl}, "
            f"max_width={metrics.max_width:.2f}, line_height={metrics.line_height:.2f}"
        )
    if metrics.max_width <= 0:
        logger.debug(f"Content width is {metrics.max_width:.2f}, every word gets its own line")

    return _PreparedParagraph(metrics=metrics, is_rtl=is_rtl, lines=lines)


async def add_rich_paragraph(
    renderer: Renderer,
    fragments: Iterable[FragmentLike],
    current_y: float,
    options: Optional[ParagraphOptions] = None,
    defaults: Optional[FormatterDefaults] = None,
    context: Optional[ClassificationContext] = None,
) -> float:
    """
    Lay out and draw a rich text paragraph with RTL support.

    Args:
        renderer: Renderer to measure and draw with.
        fragments: Text fragments making up the paragraph.
        current_y: Vertical position of the first line.
        options: Paragraph options. Unset fields come from defaults.
        defaults: Formatter defaults. None uses FormatterDefaults().
        context: Classification context. None uses the process-wide context.

    Returns:
        Vertical position after the paragraph. An empty paragraph advances
        by exactly one line height and draws nothing.
    """
    options = options or ParagraphOptions()
    defaults = defaults or FormatterDefaults()
    context = context or get_default_context()
    previous_size = renderer.get_current_font_size()

    prepared = await _prepare_paragraph(renderer, fragments, options, defaults, context)

    def draw(line: Line, y: float) -> None:
        render_line(
            renderer,
            line,
            y,
            prepared.is_rtl,
            options.align,
            prepared.metrics,
            font=defaults.font,
            show_logs=options.show_logs,
        )

    def new_page() -> None:
        if options.show_logs:
            logger.info("Page break")
        renderer.add_page()

    final_y = paginate(prepared.lines, prepared.metrics, current_y, new_page, draw)

    _reset_font(renderer, defaults, previous_size)
    return final_y


async def measure_rich_paragraph(
    renderer: Renderer,
    fragments: Iterable[FragmentLike],
    current_y: float,
    options: Optional[ParagraphOptions] = None,
    defaults: Optional[FormatterDefaults] = None,
    context: Optional[ClassificationContext] = None,
) -> ParagraphMeasurement:
    """
    Lay out a paragraph without drawing it.

    Does the same classification, reordering, packing and pagination as
    add_rich_paragraph, but issues no draw calls and creates no pages.
    Page breaks still move the cursor back to the top margin.

    Returns:
        ParagraphMeasurement with line height, line count and final position.
    """
    options = options or ParagraphOptions()
    defaults = defaults or FormatterDefaults()
    context = context or get_default_context()
    previous_size = renderer.get_current_font_size()

    prepared = await _prepare_paragraph(renderer, fragments, options, defaults, context)

    line_count = 0

    def count(line: Line, y: float) -> None:
        nonlocal line_count
        line_count += 1

    final_y = paginate(prepared.lines, prepared.metrics, current_y, lambda: None, count)

    _reset_font(renderer, defaults, previous_size)
    return ParagraphMeasurement(
        line_height=prepared.metrics.line_height,
        line_count=line_count,
        final_y=final_y,
    )


class RichTextFormatter:
    """
    Paragraph formatter bound to a renderer and a set of defaults.

    The default font family and size are applied to the renderer when the
    formatter is created, and restored after every paragraph.
    """

    def __init__(
        self,
        renderer: Renderer,
        defaults: Optional[FormatterDefaults] = None,
        context: Optional[ClassificationContext] = None,
    ) -> None:
        self.renderer = renderer
        self.defaults = defaults or FormatterDefaults()
        self.context = context
        _setup_font(renderer, self.defaults.font_size, self.defaults.font)

    def _options(self, options: Optional[ParagraphOptions], overrides: dict[str, Any]) -> ParagraphOptions:
        if not overrides:
            return options or ParagraphOptions()
        base = options.model_dump(exclude_unset=True) if options else {}
        return ParagraphOptions(**{**base, **overrides})

    async def add_rich_paragraph(
        self,
        fragments: Iterable[FragmentLike],
        current_y: float,
        options: Optional[ParagraphOptions] = None,
        **overrides: Any,
    ) -> float:
        """
        Add a paragraph using the formatter defaults.

        Keyword overrides are ParagraphOptions fields, e.g.
        ``add_rich_paragraph(fragments, 30, is_rtl=True, align="center")``.
        """
        return await add_rich_paragraph(
            self.renderer,
            fragments,
            current_y,
            self._options(options, overrides),
            self.defaults,
            self.context,
        )

    async def measure_rich_paragraph(
        self,
        fragments: Iterable[FragmentLike],
        current_y: float,
        options: Optional[ParagraphOptions] = None,
        **overrides: Any,
    ) -> ParagraphMeasurement:
        """Measure a paragraph using the formatter defaults."""
        return await measure_rich_paragraph(
            self.renderer,
            fragments,
            current_y,
            self._options(options, overrides),
            self.defaults,
            self.context,
        )


def create_rich_text_formatter(
    renderer: Renderer,
    defaults: Optional[FormatterDefaults] = None,
    context: Optional[ClassificationContext] = None,
    **default_overrides: Any,
) -> RichTextFormatter:
    """
    Create a pre-configured rich text formatter.

    Args:
        renderer: Renderer the formatter draws on.
        defaults: Formatter defaults.
        context: Classification context. None uses the process-wide context.
        **default_overrides: FormatterDefaults fields overriding defaults.

    Returns:
        RichTextFormatter bound to the renderer.

    Example:
        ```python
        formatter = create_rich_text_formatter(renderer, font="Helvetica", is_rtl=True)
        y = await formatter.add_rich_paragraph([TextFragment("مرحبا بالعالم")], 30)
        ```
    """
    if default_overrides:
        base = defaults.model_dump(exclude_unset=True) if defaults else {}
        defaults = FormatterDefaults(**{**base, **default_overrides})
    return RichTextFormatter(renderer, defaults, context)

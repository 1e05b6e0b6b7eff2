"""Layout core: classification, reordering, line packing, pagination and drawing."""

from pdfrtl.layout.alignment import resolve_alignment, resolve_x
from pdfrtl.layout.direction import ClassificationContext, get_default_context, is_rtl_text
from pdfrtl.layout.lines import LayoutMetrics, Line, build_lines, calculate_layout_metrics, paginate
from pdfrtl.layout.render import measure_line, render_line
from pdfrtl.layout.words import TextFragment, Word, extract_words, reorder_runs, split_runs

__all__ = [
    "ClassificationContext",
    "LayoutMetrics",
    "Line",
    "TextFragment",
    "Word",
    "build_lines",
    "calculate_layout_metrics",
    "extract_words",
    "get_default_context",
    "is_rtl_text",
    "measure_line",
    "paginate",
    "render_line",
    "reorder_runs",
    "resolve_alignment",
    "resolve_x",
    "split_runs",
]

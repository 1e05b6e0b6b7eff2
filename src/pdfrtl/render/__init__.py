"""Renderer adapters."""

from pdfrtl.render.pdf import PAGE_SIZES, ReportLabRenderer, get_page_size, resolve_font_name, shape_rtl

__all__ = [
    "PAGE_SIZES",
    "ReportLabRenderer",
    "get_page_size",
    "resolve_font_name",
    "shape_rtl",
]

"""Horizontal start position for aligned lines."""

from typing import Optional

from pdfrtl.types import Alignment


def resolve_alignment(align: Optional[Alignment], paragraph_is_rtl: bool) -> Alignment:
    """
    Pick the effective alignment.

    An explicit alignment always wins. Without one, RTL paragraphs align
    right and LTR paragraphs align left.
    """
    if align is not None:
        return align
    return "right" if paragraph_is_rtl else "left"


def resolve_x(
    page_width: float,
    left_margin: float,
    right_margin: float,
    line_width: float,
    align: Optional[Alignment] = None,
    paragraph_is_rtl: bool = False,
) -> float:
    """
    Calculate the x coordinate where a line starts.

    Centered lines are centered within the content area and never start
    left of the left margin.

    Args:
        page_width: Full page width.
        left_margin: Left margin.
        right_margin: Right margin.
        line_width: Rendered width of the line, spaces included.
        align: "left", "center", "right" or None for the direction default.
        paragraph_is_rtl: Paragraph direction, used when align is None.

    Returns:
        X coordinate of the line's left edge.

    Raises:
        ValueError: If align is not a known alignment.
    """
    effective = resolve_alignment(align, paragraph_is_rtl)

    if effective == "left":
        return left_margin
    if effective == "right":
        return page_width - right_margin - line_width
    if effective == "center":
        free_space = page_width - left_margin - right_margin - line_width
        return left_margin + max(0.0, free_space / 2)

    raise ValueError(f"Unknown alignment: {align!r}")

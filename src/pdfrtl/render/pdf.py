"""PDF rendering using ReportLab."""

import logging
from dataclasses import dataclass
from pathlib import Path

import arabic_reshaper
from bidi.algorithm import get_display
from reportlab.lib.fonts import tt2ps
from reportlab.lib.pagesizes import A4, A5, LEGAL, LETTER
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from pdfrtl.base import Renderer
from pdfrtl.layout.direction import is_rtl_text
from pdfrtl.types import FontStyle, FontWeight

logger = logging.getLogger(__name__)

DEFAULT_FONT = "Helvetica"
DEFAULT_FONT_SIZE = 16.0


@dataclass(frozen=True)
class PageSize:
    """Page dimensions in PDF points."""

    width: float   # points
    height: float  # points
    label: str     # display label for CLI/help


# Registry of standard page sizes
PAGE_SIZES = {
    "a4": PageSize(*A4, "A4 (210×297mm)"),
    "a5": PageSize(*A5, "A5 (148×210mm)"),
    "letter": PageSize(*LETTER, "Letter (8.5×11)"),
    "legal": PageSize(*LEGAL, "Legal (8.5×14)"),
}


def get_page_size(name: str) -> PageSize:
    """
    Get page size by name.

    Args:
        name: Page size name (e.g., "a4", "letter").

    Returns:
        PageSize object. Defaults to A4 if name not found.
    """
    return PAGE_SIZES.get(name.lower(), PAGE_SIZES["a4"])


def shape_rtl(text: str) -> str:
    """
    Put RTL text into visual order with joined Arabic letter forms.

    Text without RTL characters is returned unchanged.
    """
    if not is_rtl_text(text):
        return text
    return get_display(arabic_reshaper.reshape(text))


def resolve_font_name(family: str, style: FontStyle = "normal", weight: FontWeight = "normal") -> str:
    """
    Resolve a family plus style and weight to a registered font name.

    Uses ReportLab's family registry, so built-in families (Helvetica,
    Times-Roman, Courier) and families registered with registerFontFamily
    both resolve. Unknown families are used as given.

    Examples:
        >>> resolve_font_name("Helvetica", "normal", "bold")
        "Helvetica-Bold"
    """
    try:
        return tt2ps(family, int(weight == "bold"), int(style == "italic"))
    except ValueError:
        logger.debug(f"Font family '{family}' has no registered variants, using it as-is")
        return family


class ReportLabRenderer(Renderer):
    """
    Renderer drawing onto a ReportLab canvas.

    Works in millimetres with y measured from the top of the page, and
    converts to PDF points (bottom-up) when drawing. ReportLab resets the
    font on every new page, so the current font is re-applied after a page
    break.
    """

    def __init__(
        self,
        output_path: Path,
        page_size: str = "a4",
        font: str = DEFAULT_FONT,
        font_size: float = DEFAULT_FONT_SIZE,
    ) -> None:
        """
        Initialize PDF renderer.

        Args:
            output_path: Path to output PDF file.
            page_size: Page size name (e.g., "a4", "letter").
            font: Initial font family.
            font_size: Initial font size in points.
        """
        ps = get_page_size(page_size)
        self.page_width_pts = ps.width
        self.page_height_pts = ps.height
        self.canvas = canvas.Canvas(str(output_path), pagesize=(ps.width, ps.height))
        self.page_count = 1

        self._font_name = DEFAULT_FONT
        self._font_size = font_size
        self.set_font(font)

    def _apply_font(self) -> None:
        self.canvas.setFont(self._font_name, self._font_size)

    def measure_width(self, text: str) -> float:
        return self.canvas.stringWidth(shape_rtl(text), self._font_name, self._font_size) / mm

    def draw_text(self, text: str, x: float, y: float, is_rtl: bool = False) -> None:
        # Shaped exactly as in measure_width, whatever the word's direction
        self.canvas.drawString(x * mm, self.page_height_pts - y * mm, shape_rtl(text))

    def set_font(self, name: str, style: FontStyle = "normal", weight: FontWeight = "normal") -> None:
        self._font_name = resolve_font_name(name, style, weight)
        self._apply_font()

    def set_font_size(self, size: float) -> None:
        self._font_size = size
        self._apply_font()

    def add_page(self) -> None:
        self.canvas.showPage()
        self.page_count += 1
        self._apply_font()

    def get_current_font_size(self) -> float:
        return self._font_size

    def get_page_width(self) -> float:
        return self.page_width_pts / mm

    def get_page_height(self) -> float:
        return self.page_height_pts / mm

    @property
    def font_name(self) -> str:
        """Registered name of the current font (e.g. "Helvetica-Bold")."""
        return self._font_name

    def save(self) -> None:
        """Write the PDF file."""
        self.canvas.save()
        logger.info(f"Saved PDF with {self.page_count} page(s)")

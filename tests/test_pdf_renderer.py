"""Tests for the ReportLab renderer adapter.

These render real PDFs into a temporary directory.
"""

from pathlib import Path
from unittest.mock import patch

import pytest
from reportlab.lib.units import mm

from conftest import ARABIC_HELLO
from pdfrtl.layout.direction import ClassificationContext
from pdfrtl.layout.words import TextFragment
from pdfrtl.paragraph import add_rich_paragraph, create_rich_text_formatter
from pdfrtl.render.pdf import PAGE_SIZES, ReportLabRenderer, get_page_size, resolve_font_name, shape_rtl


@pytest.fixture
def pdf_renderer(tmp_path: Path) -> ReportLabRenderer:
    return ReportLabRenderer(tmp_path / "out.pdf", page_size="a4", font="Helvetica", font_size=12)


class TestPageSizes:
    """Tests for the page size registry."""

    def test_a4_in_millimetres(self, pdf_renderer):
        assert pdf_renderer.get_page_width() == pytest.approx(210.0, abs=0.1)
        assert pdf_renderer.get_page_height() == pytest.approx(297.0, abs=0.1)

    def test_unknown_size_falls_back_to_a4(self):
        assert get_page_size("tabloid") == PAGE_SIZES["a4"]

    def test_lookup_is_case_insensitive(self):
        assert get_page_size("LETTER") == PAGE_SIZES["letter"]


class TestFonts:
    """Tests for font resolution and font state."""

    @pytest.mark.parametrize(
        "family,style,weight,expected",
        [
            ("Helvetica", "normal", "normal", "Helvetica"),
            ("Helvetica", "normal", "bold", "Helvetica-Bold"),
            ("helvetica", "italic", "bold", "Helvetica-BoldOblique"),
            ("Times-Roman", "normal", "bold", "Times-Bold"),
        ],
    )
    def test_resolve_builtin_families(self, family, style, weight, expected):
        assert resolve_font_name(family, style, weight) == expected

    def test_unknown_family_used_as_is(self):
        assert resolve_font_name("NoSuchFamily", "normal", "bold") == "NoSuchFamily"

    def test_bold_is_wider(self, pdf_renderer):
        regular = pdf_renderer.measure_width("Hello world")
        pdf_renderer.set_font("Helvetica", "normal", "bold")
        bold = pdf_renderer.measure_width("Hello world")

        assert pdf_renderer.font_name == "Helvetica-Bold"
        assert bold > regular > 0

    def test_width_in_millimetres(self, pdf_renderer):
        width_pts = pdf_renderer.canvas.stringWidth("Hello", "Helvetica", 12)
        assert pdf_renderer.measure_width("Hello") == pytest.approx(width_pts / mm)

    def test_font_size_tracked(self, pdf_renderer):
        pdf_renderer.set_font_size(20)
        assert pdf_renderer.get_current_font_size() == 20

    def test_font_survives_page_break(self, pdf_renderer):
        pdf_renderer.set_font("Helvetica", "normal", "bold")
        pdf_renderer.add_page()

        assert pdf_renderer.page_count == 2
        assert pdf_renderer.canvas._fontname == "Helvetica-Bold"


class TestShaping:
    """Tests for RTL visual ordering."""

    def test_latin_unchanged(self):
        assert shape_rtl("Hello") == "Hello"

    def test_hebrew_reversed(self):
        assert shape_rtl("שלום") == "םולש"

    def test_arabic_shaped(self):
        shaped = shape_rtl(ARABIC_HELLO)
        assert shaped != ARABIC_HELLO
        assert len(shaped) == len(ARABIC_HELLO)

    @pytest.mark.parametrize("is_rtl", [True, False])
    def test_drawn_text_matches_measured_text(self, pdf_renderer, is_rtl):
        with patch.object(pdf_renderer.canvas, "drawString") as draw_string:
            pdf_renderer.draw_text(ARABIC_HELLO, 10, 10, is_rtl=is_rtl)

        drawn = draw_string.call_args.args[2]
        assert drawn == shape_rtl(ARABIC_HELLO)
        assert pdf_renderer.canvas.stringWidth(drawn, "Helvetica", 12) / mm == pytest.approx(
            pdf_renderer.measure_width(ARABIC_HELLO)
        )


class TestEndToEnd:
    """Tests rendering paragraphs into a PDF file."""

    async def test_writes_pdf(self, tmp_path: Path):
        output = tmp_path / "paragraphs.pdf"
        renderer = ReportLabRenderer(output, font="Helvetica")
        formatter = create_rich_text_formatter(renderer, font="Helvetica", context=ClassificationContext())

        y = await formatter.add_rich_paragraph([TextFragment("Hello "), TextFragment("world", is_bold=True)], 30)
        await formatter.add_rich_paragraph([TextFragment("Hello "), TextFragment(ARABIC_HELLO)], y, is_rtl=True)
        renderer.save()

        assert output.read_bytes().startswith(b"%PDF")

    async def test_long_paragraph_spans_pages(self, tmp_path: Path):
        renderer = ReportLabRenderer(tmp_path / "long.pdf", page_size="a5")
        text = " ".join(["paragraph"] * 2000)

        final_y = await add_rich_paragraph(renderer, [text], 20.0, context=ClassificationContext())
        renderer.save()

        assert renderer.page_count > 1
        assert final_y <= renderer.get_page_height()

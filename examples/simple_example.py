#!/usr/bin/env python3
"""
Simple Example: Mixed Arabic/English Paragraphs

This is the simplest way to lay out rich RTL/LTR text programmatically.
"""

import asyncio
from pathlib import Path

from pdfrtl import TextFragment, create_rich_text_formatter
from pdfrtl.fonts import register_google_font_family
from pdfrtl.render import ReportLabRenderer

# Arabic glyphs need an Arabic-capable font (downloaded and cached)
family = register_google_font_family("Noto Naskh Arabic") or "Helvetica"

renderer = ReportLabRenderer(Path("rich_paragraphs.pdf"), page_size="a4", font=family)
formatter = create_rich_text_formatter(renderer, font=family, font_size=14, margin=20)


async def main() -> None:
    y = 30.0
    y = await formatter.add_rich_paragraph(
        [TextFragment("Hello "), TextFragment("world", is_bold=True)], y
    )
    y = await formatter.add_rich_paragraph(
        [TextFragment("مرحبا بكم في "), TextFragment("PDF", is_bold=True), TextFragment(" العربي")],
        y + 4,
        is_rtl=True,
    )
    await formatter.add_rich_paragraph(
        [TextFragment("Centered", is_bold=True)], y + 4, align="center", font_size=20
    )


asyncio.run(main())
renderer.save()

print("✓ Paragraphs saved to: rich_paragraphs.pdf")

"""CLI interface for rich RTL/LTR paragraph layout."""

import asyncio
import logging
from pathlib import Path

import click
from pydantic import ValidationError

from pdfrtl.config import DocumentConfig, ParagraphConfig, load_document
from pdfrtl.fonts import register_fonts, register_google_font_family
from pdfrtl.layout.words import TextFragment
from pdfrtl.paragraph import RichTextFormatter, create_rich_text_formatter
from pdfrtl.render.pdf import PAGE_SIZES, ReportLabRenderer


def _fragments(paragraph: ParagraphConfig) -> list[TextFragment]:
    return [TextFragment(text=f.text, is_bold=f.bold) for f in paragraph.fragments]


def _start_y(document: DocumentConfig) -> float:
    if document.start_y is not None:
        return document.start_y
    return document.defaults.margin


def _prepare_fonts(font_dir: Path | None, google_font: str | None) -> str | None:
    """Register requested fonts. Returns the Google family name if one was registered."""
    if font_dir:
        register_fonts(font_dir)
    if google_font:
        family = register_google_font_family(google_font)
        if family is None:
            raise ValueError(f"Could not download Google Font '{google_font}'")
        return family
    return None


async def _render_document(document: DocumentConfig, formatter: RichTextFormatter) -> float:
    y = _start_y(document)
    for paragraph in document.paragraphs:
        y = await formatter.add_rich_paragraph(_fragments(paragraph), y, paragraph.options)
        y += paragraph.space_after
    return y


async def _measure_document(document: DocumentConfig, formatter: RichTextFormatter) -> list[tuple[int, float, float]]:
    y = _start_y(document)
    rows = []
    for paragraph in document.paragraphs:
        result = await formatter.measure_rich_paragraph(_fragments(paragraph), y, paragraph.options)
        y = result.final_y + paragraph.space_after
        rows.append((result.line_count, result.line_height, result.final_y))
    return rows


@click.group()
@click.version_option(package_name="pdf-rtl")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool) -> None:
    """Lay out mixed right-to-left / left-to-right rich text into PDF pages."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


_document_argument = click.argument("document", type=click.Path(exists=True, path_type=Path))
_page_size_option = click.option(
    "--page-size",
    type=click.Choice(list(PAGE_SIZES.keys()), case_sensitive=False),
    help="Page size override. Uses the document's page size if not specified.",
)
_font_dir_option = click.option(
    "--font-dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Directory of TTF files to register (Family-Regular.ttf / Family-Bold.ttf).",
)
_google_font_option = click.option(
    "--google-font",
    type=str,
    help="Google Font family to download and use (e.g. 'Noto Naskh Arabic').",
)


@main.command()
@_document_argument
@click.option(
    "-o",
    "--output",
    type=click.Path(path_type=Path),
    help="Output PDF file path. Defaults to the document name with a .pdf suffix.",
)
@_page_size_option
@_font_dir_option
@_google_font_option
def render(
    document: Path,
    output: Path | None,
    page_size: str | None,
    font_dir: Path | None,
    google_font: str | None,
) -> None:
    """
    Render a TOML document of rich paragraphs to PDF.

    Each [[paragraphs]] entry holds a list of fragments ({text, bold}) and
    optional layout options (is_rtl, align, margin, font_size, ...).
    """
    try:
        doc = load_document(document)
        family = _prepare_fonts(font_dir, google_font)
        if family:
            doc.defaults = doc.defaults.model_copy(update={"font": family})

        output = output or document.with_suffix(".pdf")
        renderer = ReportLabRenderer(
            output,
            page_size=page_size or doc.page_size,
            font=doc.defaults.font or "Helvetica",
        )
        formatter = create_rich_text_formatter(renderer, doc.defaults)

        click.echo(f"Laying out {len(doc.paragraphs)} paragraph(s) on {page_size or doc.page_size} pages...")
        asyncio.run(_render_document(doc, formatter))
        renderer.save()

        click.echo(f"✓ {renderer.page_count} page(s) saved to: {output}")

    except FileNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)
    except ValidationError as e:
        click.echo(f"Error: invalid document {document}:\n{e}", err=True)
        raise SystemExit(1)
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)


@main.command()
@_document_argument
@_page_size_option
@_font_dir_option
@_google_font_option
def measure(
    document: Path,
    page_size: str | None,
    font_dir: Path | None,
    google_font: str | None,
) -> None:
    """
    Measure a TOML document without writing a PDF.

    Prints line count, line height and final vertical position per paragraph.
    """
    try:
        doc = load_document(document)
        family = _prepare_fonts(font_dir, google_font)
        if family:
            doc.defaults = doc.defaults.model_copy(update={"font": family})

        # Nothing is drawn, the canvas is never saved
        renderer = ReportLabRenderer(
            Path("unused.pdf"),
            page_size=page_size or doc.page_size,
            font=doc.defaults.font or "Helvetica",
        )
        formatter = create_rich_text_formatter(renderer, doc.defaults)

        rows = asyncio.run(_measure_document(doc, formatter))
        for index, (line_count, line_height, final_y) in enumerate(rows, start=1):
            click.echo(f"Paragraph {index}: {line_count} line(s), line height {line_height:.2f}, ends at y={final_y:.2f}")

    except FileNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)
    except ValidationError as e:
        click.echo(f"Error: invalid document {document}:\n{e}", err=True)
        raise SystemExit(1)
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)


if __name__ == "__main__":
    main()

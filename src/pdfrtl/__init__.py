"""Mixed-direction rich text paragraphs for paginated PDF canvases."""

__version__ = "0.1.0"

# High-level Python API
from pdfrtl.base import DirectionTable, LanguageGuess, LanguageIdentifier, Renderer
from pdfrtl.config import FormatterDefaults, Margins, ParagraphOptions, load_document
from pdfrtl.layout import ClassificationContext, TextFragment, Word
from pdfrtl.paragraph import (
    ParagraphMeasurement,
    RichTextFormatter,
    add_rich_paragraph,
    create_rich_text_formatter,
    measure_rich_paragraph,
)
from pdfrtl.utils.text import swap_parentheses

__all__ = [
    "ClassificationContext",
    "DirectionTable",
    "FormatterDefaults",
    "LanguageGuess",
    "LanguageIdentifier",
    "Margins",
    "ParagraphMeasurement",
    "ParagraphOptions",
    "Renderer",
    "RichTextFormatter",
    "TextFragment",
    "Word",
    "add_rich_paragraph",
    "create_rich_text_formatter",
    "load_document",
    "measure_rich_paragraph",
    "swap_parentheses",
]

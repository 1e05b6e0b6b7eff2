"""Configuration loading and validation."""

import tomllib
from pathlib import Path

from pydantic import BaseModel, Field

from pdfrtl.types import Alignment

DEFAULT_MARGIN = 20.0
LINE_HEIGHT_RATIO = 0.5


class Margins(BaseModel):
    """
    Per-side margins. Any side left unset falls back to the uniform margin.
    """

    left: float | None = None
    right: float | None = None
    top: float | None = None
    bottom: float | None = None


class ResolvedMargins(BaseModel):
    """Margins with every side filled in."""

    left: float
    right: float
    top: float
    bottom: float


class FragmentConfig(BaseModel):
    """A span of text sharing one weight, as written in a document file."""

    text: str
    bold: bool = False


class ParagraphOptions(BaseModel):
    """
    Layout options for a single paragraph.

    Every field is optional. Unset fields are filled from the formatter
    defaults, so a bare ``ParagraphOptions()`` lays text out exactly like the
    formatter is configured:

        opts = ParagraphOptions(is_rtl=True, align="center")
        bold_variant = opts.model_copy(update={"font_size": 16})
    """

    margin: float | None = None
    """Uniform margin applied to all four sides."""

    margins: Margins | None = None
    """Per-side margins. Each side set here overrides the uniform margin."""

    is_rtl: bool | None = None
    """Overall paragraph direction. Defaults to the formatter's direction."""

    align: Alignment | None = None
    """Line alignment. None means "right" for RTL paragraphs and "left" otherwise."""

    font_size: float | None = None
    """Font size override for this paragraph."""

    line_height: float | None = Field(default=None, gt=0)
    """Custom line height. None derives it from the font size."""

    show_logs: bool = False
    """Log every laid out line at INFO level."""

    def resolved_margins(self, default_margin: float = DEFAULT_MARGIN) -> ResolvedMargins:
        """
        Resolve the four margins for this paragraph.

        Args:
            default_margin: Margin used when neither margin nor margins set a side.

        Returns:
            ResolvedMargins with every side set.
        """
        uniform = self.margin if self.margin is not None else default_margin
        sides = self.margins or Margins()
        return ResolvedMargins(
            left=sides.left if sides.left is not None else uniform,
            right=sides.right if sides.right is not None else uniform,
            top=sides.top if sides.top is not None else uniform,
            bottom=sides.bottom if sides.bottom is not None else uniform,
        )


class FormatterDefaults(BaseModel):
    """
    Defaults bound to a rich text formatter.

    All parameters have sensible defaults. Override only what you need:

        defaults = FormatterDefaults(font="NotoNaskhArabic", is_rtl=True)
    """

    margin: float = DEFAULT_MARGIN
    """Uniform margin used when a paragraph sets none."""

    is_rtl: bool = False
    """Paragraph direction used when a paragraph sets none."""

    font_size: float | None = None
    """Font size applied when the formatter is created and after each paragraph."""

    font: str | None = None
    """Font family. Bold/regular switching per word only happens when this is set."""

    line_height_ratio: float = Field(default=LINE_HEIGHT_RATIO, gt=0)
    """Line height as a fraction of the font size (renderer units per point)."""


class ParagraphConfig(BaseModel):
    """One paragraph in a document file."""

    fragments: list[FragmentConfig]
    options: ParagraphOptions = Field(default_factory=ParagraphOptions)
    space_after: float = 0.0
    """Extra vertical space added after the paragraph."""


class DocumentConfig(BaseModel):
    """Root configuration for the CLI: page setup plus paragraphs."""

    page_size: str = "a4"
    start_y: float | None = None
    """Vertical position of the first paragraph. None starts at the top margin."""

    defaults: FormatterDefaults = Field(default_factory=FormatterDefaults)
    paragraphs: list[ParagraphConfig] = Field(default_factory=list)


def load_document(document_path: Path) -> DocumentConfig:
    """
    Load a document description from a TOML file.

    Args:
        document_path: Path to the TOML document.

    Returns:
        Validated DocumentConfig object.

    Raises:
        FileNotFoundError: If the document doesn't exist.
        pydantic.ValidationError: If the document is invalid.
    """
    if not document_path.exists():
        raise FileNotFoundError(
            f"Document not found: {document_path}\n"
            "See examples/document.toml for the expected layout."
        )

    with open(document_path, "rb") as f:
        document_dict = tomllib.load(f)

    return DocumentConfig(**document_dict)

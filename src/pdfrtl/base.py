"""Base abstractions for the collaborators the layout core talks to."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from pdfrtl.types import FontStyle, FontWeight


@dataclass(frozen=True)
class LanguageGuess:
    """Result of identifying the language of a word."""

    language: str  # ISO 639 code, optionally with region ("ar", "fa-IR")
    probability: float = 1.0


class Renderer(ABC):
    """
    Page canvas used to measure and draw words.

    Coordinates are top-down: y grows towards the bottom of the page.
    Widths must reflect the font state set by the last set_font/set_font_size.
    """

    @abstractmethod
    def measure_width(self, text: str) -> float:
        """Width of text in the current font, size and weight."""

    @abstractmethod
    def draw_text(self, text: str, x: float, y: float, is_rtl: bool = False) -> None:
        """
        Draw text with its left edge at x and its baseline at y.

        Args:
            text: Text to draw, in logical order.
            x: Left edge.
            y: Baseline, measured from the top of the page.
            is_rtl: Direction hint; RTL text is put in visual order before drawing.
        """

    @abstractmethod
    def set_font(self, name: str, style: FontStyle = "normal", weight: FontWeight = "normal") -> None:
        """Select a font family with a style and weight."""

    @abstractmethod
    def set_font_size(self, size: float) -> None:
        """Set the font size in points."""

    @abstractmethod
    def add_page(self) -> None:
        """Finish the current page and start a new one."""

    @abstractmethod
    def get_current_font_size(self) -> float:
        """Current font size in points."""

    @abstractmethod
    def get_page_width(self) -> float:
        """Page width."""

    @abstractmethod
    def get_page_height(self) -> float:
        """Page height."""


class LanguageIdentifier(ABC):
    """Statistical language identification for single words."""

    @abstractmethod
    async def identify(self, word: str) -> LanguageGuess | None:
        """
        Identify the language of a word.

        Returns:
            The most likely language, or None if nothing usable was found.
            May raise; callers treat any exception as "no answer".
        """


class DirectionTable(ABC):
    """Maps language codes to writing direction."""

    @abstractmethod
    def is_rtl_language(self, language: str) -> bool:
        """True if the language is written right to left."""

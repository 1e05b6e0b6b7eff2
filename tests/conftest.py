"""Pytest configuration and shared fixtures for pdfrtl tests."""

import asyncio
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from pdfrtl.base import LanguageGuess, LanguageIdentifier, Renderer
from pdfrtl.layout.direction import ClassificationContext

# Paths
PROJECT_ROOT = Path(__file__).parent.parent
EXAMPLES_DIR = PROJECT_ROOT / "examples"

ARABIC_HELLO = "مرحبا"
HEBREW_PEACE = "שלום"


@dataclass
class DrawCall:
    """One recorded draw_text call."""

    text: str
    x: float
    y: float
    is_rtl: bool
    weight: str


@dataclass
class FakeRenderer(Renderer):
    """
    Renderer with fixed-width glyphs that records every call.

    Every character is 1.0 wide in the regular weight and 1.5 wide in bold,
    independent of the font size.
    """

    page_width: float = 200.0
    page_height: float = 100.0
    font_size: float = 20.0
    font_name: str = "Fake"
    weight: str = "normal"
    draws: list[DrawCall] = field(default_factory=list)
    font_calls: list[tuple[str, str, str]] = field(default_factory=list)
    size_calls: list[float] = field(default_factory=list)
    pages: int = 1

    def measure_width(self, text: str) -> float:
        return len(text) * (1.5 if self.weight == "bold" else 1.0)

    def draw_text(self, text: str, x: float, y: float, is_rtl: bool = False) -> None:
        self.draws.append(DrawCall(text, x, y, is_rtl, self.weight))

    def set_font(self, name: str, style: str = "normal", weight: str = "normal") -> None:
        self.font_name = name
        self.weight = weight
        self.font_calls.append((name, style, weight))

    def set_font_size(self, size: float) -> None:
        self.font_size = size
        self.size_calls.append(size)

    def add_page(self) -> None:
        self.pages += 1

    def get_current_font_size(self) -> float:
        return self.font_size

    def get_page_width(self) -> float:
        return self.page_width

    def get_page_height(self) -> float:
        return self.page_height

    @property
    def drawn_texts(self) -> list[str]:
        return [d.text for d in self.draws]


class CountingIdentifier(LanguageIdentifier):
    """Identifier answering from a fixed word → language mapping."""

    def __init__(self, languages: dict[str, str | None] | None = None) -> None:
        self.languages = languages or {}
        self.calls: list[str] = []

    async def identify(self, word: str) -> LanguageGuess | None:
        self.calls.append(word)
        language = self.languages.get(word)
        return LanguageGuess(language) if language else None


class RaisingIdentifier(LanguageIdentifier):
    """Identifier that fails for every word."""

    def __init__(self) -> None:
        self.calls = 0

    async def identify(self, word: str) -> LanguageGuess | None:
        self.calls += 1
        raise RuntimeError("model crashed")


class LoaderSpy:
    """Async loader returning a fixed identifier (or raising) and counting calls."""

    def __init__(self, identifier: LanguageIdentifier | None = None, error: Exception | None = None) -> None:
        self.identifier = identifier
        self.error = error
        self.calls = 0

    async def __call__(self) -> LanguageIdentifier:
        self.calls += 1
        await asyncio.sleep(0)
        if self.error:
            raise self.error
        return self.identifier


@pytest.fixture
def renderer() -> FakeRenderer:
    """Fresh recording renderer: 200 x 100 page, font size 20."""
    return FakeRenderer()


@pytest.fixture
def heuristic_context() -> ClassificationContext:
    """Classification context without a language identifier."""
    return ClassificationContext()


@pytest.fixture
def examples_dir() -> Path:
    """Return the examples directory containing sample documents."""
    return EXAMPLES_DIR

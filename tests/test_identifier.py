"""Tests for the langdetect language identifier.

These load langdetect's bundled language profiles.
"""

import pytest

from conftest import ARABIC_HELLO, HEBREW_PEACE
from pdfrtl.detection import LangdetectIdentifier, RtlLanguageTable, load_langdetect_identifier
from pdfrtl.layout.direction import ClassificationContext


@pytest.fixture
async def identifier():
    return await load_langdetect_identifier()


class TestLangdetectIdentifier:
    """Tests for identifying word languages."""

    @pytest.mark.parametrize("word", [ARABIC_HELLO, HEBREW_PEACE])
    async def test_rtl_words_identify_as_rtl_languages(self, identifier, word):
        guess = await identifier.identify(word)

        assert guess is not None
        assert RtlLanguageTable().is_rtl_language(guess.language)
        assert 0.0 < guess.probability <= 1.0

    async def test_hebrew_word(self, identifier):
        guess = await identifier.identify(HEBREW_PEACE)
        assert guess.language == "he"

    async def test_no_features_returns_none(self, identifier):
        assert await identifier.identify("123") is None

    async def test_low_probability_discarded(self, identifier):
        strict = LangdetectIdentifier(min_probability=1.01)
        assert await strict.identify(HEBREW_PEACE) is None

    async def test_repeated_calls_agree(self, identifier):
        first = await identifier.identify("Welcome everybody to the garden")
        second = await identifier.identify("Welcome everybody to the garden")

        assert first == second


class TestLoadedContext:
    """Tests for classification with the real identifier loaded."""

    async def test_classifies_mixed_words(self):
        context = ClassificationContext(loader=load_langdetect_identifier)

        assert await context.classify(ARABIC_HELLO) is True
        assert await context.classify(HEBREW_PEACE) is True
        assert await context.classify("123") is False
        assert context.identifier_available

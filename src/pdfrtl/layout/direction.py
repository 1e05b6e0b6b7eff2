"""Per-word writing direction classification with memoization."""

import asyncio
import logging
import re
from typing import Awaitable, Callable, Optional

from pdfrtl.base import DirectionTable, LanguageIdentifier
from pdfrtl.detection.rtl_languages import RtlLanguageTable

logger = logging.getLogger(__name__)

IdentifierLoader = Callable[[], Awaitable[LanguageIdentifier]]

# Blocks used only by right-to-left scripts
_RTL_CHARACTERS = re.compile(
    "["
    "\u0590-\u05FF"  # Hebrew
    "\u0600-\u06FF"  # Arabic
    "\u0750-\u077F"  # Arabic Supplement
    "\u08A0-\u08FF"  # Arabic Extended-A
    "\uFB1D-\uFB4F"  # Hebrew presentation forms
    "\uFB50-\uFDFF"  # Arabic Presentation Forms-A
    "\uFE70-\uFEFF"  # Arabic Presentation Forms-B
    "]"
)


def is_rtl_text(text: str) -> bool:
    """
    Check if text contains characters from a right-to-left script block.

    Args:
        text: Text to analyze.

    Returns:
        True if any character falls in a Hebrew or Arabic block.
    """
    return _RTL_CHARACTERS.search(text) is not None


class ClassificationContext:
    """
    Owns the direction cache and the lazily loaded language identifier.

    The identifier loader runs at most once per context, even when several
    paragraphs are classified concurrently: every caller awaits the same task.
    A failed load is remembered and all later words go straight to the
    Unicode heuristic.
    """

    def __init__(
        self,
        loader: Optional[IdentifierLoader] = None,
        direction_table: Optional[DirectionTable] = None,
    ) -> None:
        """
        Initialize classification context.

        Args:
            loader: Coroutine function returning a LanguageIdentifier. None
                disables statistical identification.
            direction_table: Language to direction mapping. Defaults to RtlLanguageTable.
        """
        self.loader = loader
        self.direction_table = direction_table or RtlLanguageTable()
        self.cache: dict[str, bool] = {}
        self._identifier_task: asyncio.Future | None = None
        self._identifier_failed = loader is None

    @property
    def identifier_available(self) -> bool:
        """False once the identifier failed to load or when none was configured."""
        return not self._identifier_failed

    async def _get_identifier(self) -> LanguageIdentifier | None:
        if self._identifier_failed:
            return None

        if self._identifier_task is None:
            self._identifier_task = asyncio.ensure_future(self.loader())

        try:
            return await self._identifier_task
        except Exception as e:
            if not self._identifier_failed:
                logger.warning(f"Language identifier unavailable, using Unicode ranges only: {e}")
            self._identifier_failed = True
            return None

    async def _identify_direction(self, word: str) -> bool | None:
        identifier = await self._get_identifier()
        if identifier is None:
            return None

        try:
            guess = await identifier.identify(word)
            if guess and guess.language:
                return bool(self.direction_table.is_rtl_language(guess.language))
        except Exception as e:
            logger.debug(f"Language detection failed for {word!r}, falling back to pattern matching: {e}")

        return None

    async def classify(self, word: str) -> bool:
        """
        Classify a word as right-to-left or left-to-right.

        A cached answer is returned as is, even if identification would now
        answer differently.

        Args:
            word: The word to analyze.

        Returns:
            True if the word belongs to a right-to-left script.
        """
        if word in self.cache:
            return self.cache[word]

        is_rtl = await self._identify_direction(word)
        if is_rtl is None:
            is_rtl = is_rtl_text(word)

        self.cache[word] = is_rtl
        return is_rtl


_default_context: ClassificationContext | None = None


def get_default_context() -> ClassificationContext:
    """
    Get the process-wide classification context, creating it on first use.

    The default context identifies languages with langdetect.
    """
    global _default_context
    if _default_context is None:
        from pdfrtl.detection.identifier import load_langdetect_identifier

        _default_context = ClassificationContext(loader=load_langdetect_identifier)
    return _default_context

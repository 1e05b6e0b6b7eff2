"""Language identification adapter for langdetect."""

import asyncio
import logging

from langdetect import DetectorFactory, detect_langs
from langdetect.detector_factory import init_factory
from langdetect.lang_detect_exception import LangDetectException

from pdfrtl.base import LanguageGuess, LanguageIdentifier

logger = logging.getLogger(__name__)


class LangdetectIdentifier(LanguageIdentifier):
    """Identifies word languages with langdetect's n-gram profiles."""

    def __init__(self, min_probability: float = 0.0) -> None:
        """
        Initialize identifier.

        Args:
            min_probability: Guesses below this probability are discarded.
        """
        self.min_probability = min_probability

    def _identify_sync(self, word: str) -> LanguageGuess | None:
        try:
            candidates = detect_langs(word)
        except LangDetectException as e:
            # No usable features (digits, punctuation)
            logger.debug(f"langdetect found no language for {word!r}: {e}")
            return None

        if not candidates:
            return None

        best = candidates[0]
        if best.prob < self.min_probability:
            return None
        return LanguageGuess(language=best.lang, probability=best.prob)

    async def identify(self, word: str) -> LanguageGuess | None:
        return await asyncio.to_thread(self._identify_sync, word)


async def load_langdetect_identifier() -> LanguageIdentifier:
    """
    Load langdetect's language profiles and return an identifier.

    Profile loading reads every profile from disk, so it runs on a worker
    thread. The detector seed is fixed to make results reproducible.

    Returns:
        A ready LangdetectIdentifier.
    """
    DetectorFactory.seed = 0
    await asyncio.to_thread(init_factory)
    logger.info("Loaded langdetect language profiles")
    return LangdetectIdentifier()

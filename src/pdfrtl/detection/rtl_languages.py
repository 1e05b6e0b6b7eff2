"""Language code to writing direction table."""

import re

from pdfrtl.base import DirectionTable

# ISO 639 codes of languages written right to left
RTL_LANGUAGES = frozenset({
    "ae",   # Avestan
    "ar",   # Arabic
    "arc",  # Aramaic
    "bcc",  # Southern Balochi
    "bqi",  # Bakhtiari
    "ckb",  # Sorani Kurdish
    "dv",   # Divehi
    "fa",   # Persian
    "glk",  # Gilaki
    "he",   # Hebrew
    "iw",   # Hebrew (legacy code)
    "ku",   # Kurdish
    "mzn",  # Mazanderani
    "nqo",  # N'Ko
    "pnb",  # Western Punjabi
    "ps",   # Pashto
    "sd",   # Sindhi
    "ug",   # Uyghur
    "ur",   # Urdu
    "yi",   # Yiddish
})

# Script subtags that force RTL regardless of language (e.g. "az-Arab")
RTL_SCRIPTS = frozenset({"arab", "hebr", "thaa", "nkoo", "syrc", "adlm", "rohg"})

_SUBTAG_SPLIT = re.compile(r"[-_]")


class RtlLanguageTable(DirectionTable):
    """Direction table backed by a fixed set of RTL language codes."""

    def __init__(self, languages: frozenset[str] = RTL_LANGUAGES) -> None:
        self.languages = languages

    def is_rtl_language(self, language: str) -> bool:
        """
        Check whether a language tag is written right to left.

        Region suffixes are ignored ("ar-EG", "fa_IR"); an RTL script subtag
        ("ku-Arab") marks the tag RTL even when the base language is not.

        Args:
            language: Language code or BCP 47 style tag, any case.

        Returns:
            True for RTL languages, False for everything else including unknown codes.
        """
        if not language:
            return False
        subtags = _SUBTAG_SPLIT.split(language.strip().lower())
        if subtags[0] in self.languages:
            return True
        return any(tag in RTL_SCRIPTS for tag in subtags[1:])

"""Language identification and direction tables."""

from pdfrtl.detection.identifier import LangdetectIdentifier, load_langdetect_identifier
from pdfrtl.detection.rtl_languages import RTL_LANGUAGES, RtlLanguageTable

__all__ = [
    "LangdetectIdentifier",
    "RTL_LANGUAGES",
    "RtlLanguageTable",
    "load_langdetect_identifier",
]

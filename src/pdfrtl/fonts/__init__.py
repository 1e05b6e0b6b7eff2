"""Font registration and management."""

import logging
import re
from pathlib import Path
from typing import Optional

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from pdfrtl.fonts.google import download_font_weights

logger = logging.getLogger(__name__)

# Filename suffixes naming the weight of a font file
_REGULAR_SUFFIXES = ("regular", "400", "")
_BOLD_SUFFIXES = ("bold", "700")

_WEIGHT_SUFFIX = re.compile(r"[-_](regular|bold|400|700)$", re.IGNORECASE)


def _family_key(stem: str) -> tuple[str, str]:
    """Split a font file stem into (family, weight suffix)."""
    match = _WEIGHT_SUFFIX.search(stem)
    if not match:
        return stem, ""
    return stem[:match.start()], match.group(1).lower()


def register_font_family(family: str, regular_path: Path, bold_path: Optional[Path] = None) -> str:
    """
    Register a TTF family so weight switching resolves to the right file.

    Args:
        family: Family name to register (e.g., "NotoNaskhArabic").
        regular_path: Regular weight TTF.
        bold_path: Bold weight TTF. None reuses the regular file for bold.

    Returns:
        The registered family name.
    """
    regular_name = family
    bold_name = f"{family}-Bold" if bold_path else family

    pdfmetrics.registerFont(TTFont(regular_name, str(regular_path)))
    if bold_path:
        pdfmetrics.registerFont(TTFont(bold_name, str(bold_path)))

    pdfmetrics.registerFontFamily(
        family,
        normal=regular_name,
        bold=bold_name,
        italic=regular_name,
        boldItalic=bold_name,
    )
    logger.info(f"Registered font family: {family} (bold: {bold_name})")
    return family


def register_fonts(font_dir: Path) -> list[str]:
    """
    Register every TTF family found in a directory.

    Files are grouped by family using a weight suffix on the filename:
    "NotoNaskhArabic-Regular.ttf" and "NotoNaskhArabic-Bold.ttf" become the
    family "NotoNaskhArabic". A family without a regular file is skipped.

    Args:
        font_dir: Directory containing .ttf files.

    Returns:
        Names of the registered families.
    """
    ttf_files = sorted(font_dir.glob("*.ttf"))
    if not ttf_files:
        logger.warning(f"No TTF font files found in {font_dir}. Using built-in fonts.")
        return []

    families: dict[str, dict[str, Path]] = {}
    for font_path in ttf_files:
        family, suffix = _family_key(font_path.stem)
        families.setdefault(family, {})[suffix] = font_path

    registered = []
    for family, files in families.items():
        regular = next((files[s] for s in _REGULAR_SUFFIXES if s in files), None)
        bold = next((files[s] for s in _BOLD_SUFFIXES if s in files), None)
        if regular is None:
            logger.warning(f"Skipping font family {family}: no regular weight in {font_dir}")
            continue
        try:
            registered.append(register_font_family(family, regular, bold))
        except Exception as e:
            logger.warning(f"Failed to register font family {family}: {e}. Skipping this font.")

    logger.info(f"Successfully registered {len(registered)} font family(ies).")
    return registered


def register_google_font_family(family: str) -> Optional[str]:
    """
    Download a Google Font family (regular and bold) and register it.

    Args:
        family: Font family name (e.g., "Noto Naskh Arabic").

    Returns:
        Registered family name without spaces (e.g., "NotoNaskhArabic"), or
        None if the regular weight could not be downloaded.
    """
    family_name = family.replace(" ", "")

    paths = download_font_weights(family, (400, 700))
    if 400 not in paths:
        logger.error(f"Failed to download Google Font: {family}")
        return None

    try:
        return register_font_family(family_name, paths[400], paths.get(700))
    except Exception as e:
        logger.error(f"Failed to register Google Font {family_name}: {e}")
        return None

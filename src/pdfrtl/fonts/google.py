"""Google Fonts downloader for regular/bold font pairs."""

import logging
import re
from pathlib import Path

import requests

logger = logging.getLogger(__name__)

# Cache directory for downloaded Google Fonts
CACHE_DIR = Path.home() / ".cache" / "pdf-rtl" / "fonts"

CSS_URL = "https://fonts.googleapis.com/css"

# One @font-face block per weight: font-weight: 700; ... src: url(...ttf)
_FONT_FACE_PATTERN = re.compile(
    r"@font-face\s*{[^}]*?font-weight:\s*(\d+);[^}]*?src:\s*url\((https://[^)]+\.ttf)\)",
    re.DOTALL,
)


def cache_path_for(family: str, weight: int, cache_dir: Path = CACHE_DIR) -> Path:
    """Cache location of one weight of a family."""
    return cache_dir / f"{family.replace(' ', '')}-{weight}.ttf"


def parse_font_urls(css_content: str) -> dict[int, str]:
    """
    Extract TTF URLs per weight from Google Fonts CSS.

    Args:
        css_content: CSS returned by the Google Fonts v1 API.

    Returns:
        Mapping of font weight to TTF URL.
    """
    return {int(weight): url for weight, url in _FONT_FACE_PATTERN.findall(css_content)}


def download_font_weights(
    family: str, weights: tuple[int, ...] = (400, 700), cache_dir: Path = CACHE_DIR
) -> dict[int, Path]:
    """
    Download several weights of a Google Font family into the cache.

    Weights already cached are not downloaded again. Failures are logged and
    the missing weights are left out of the result.

    Args:
        family: Font family name (e.g., "Noto Naskh Arabic").
        weights: Weights to fetch.
        cache_dir: Directory to cache TTF files in.

    Returns:
        Mapping of weight to cached TTF path for every weight available.
    """
    cache_dir.mkdir(parents=True, exist_ok=True)

    paths = {w: cache_path_for(family, w, cache_dir) for w in weights}
    missing = [w for w, path in paths.items() if not path.exists()]
    if not missing:
        logger.info(f"Using cached Google Font: {family} {list(weights)}")
        return paths

    params = {"family": f"{family}:{','.join(str(w) for w in missing)}"}

    try:
        logger.info(f"Downloading Google Font: {family} (weights {missing})")
        css_response = requests.get(CSS_URL, params=params, timeout=10)
        css_response.raise_for_status()

        urls = parse_font_urls(css_response.text)
        for weight in missing:
            if weight not in urls:
                logger.warning(f"Google Fonts has no weight {weight} for {family}")
                continue
            font_response = requests.get(urls[weight], timeout=30)
            font_response.raise_for_status()
            paths[weight].write_bytes(font_response.content)
            logger.info(f"Downloaded and cached Google Font: {paths[weight].name}")

    except requests.RequestException as e:
        logger.error(f"Failed to download Google Font {family}: {e}")

    return {w: path for w, path in paths.items() if path.exists()}

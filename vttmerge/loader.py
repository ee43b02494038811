"""
Input loading for VTTMerge.

Reads WebVTT documents from the local filesystem or, for http(s) sources,
downloads them with requests.
"""

import logging

import requests

from .errors import ParsingError, SourceError
from .track import Track

logger = logging.getLogger(__name__)


def is_url(source: str) -> bool:
    """
    Check if a source refers to an HTTP(S) resource rather than a local file.

    Example:
        >>> is_url("https://example.com/a.vtt")
        True
        >>> is_url("a.vtt")
        False
    """
    return source.startswith(("http://", "https://"))


def load_vtt_text(source: str, timeout: int = 30, verify_ssl: bool = True) -> str:
    """
    Read the text of one WebVTT document.

    Args:
        source: Local file path or http(s) URL
        timeout: Request timeout in seconds for URL sources (default: 30)
        verify_ssl: Whether to verify SSL certificates for URL sources

    Returns:
        Document text

    Raises:
        OSError: If a local file cannot be read
        requests.RequestException: If a download fails
    """
    if is_url(source):
        logger.info(f"Downloading VTT from {source}")
        response = requests.get(source, timeout=timeout, verify=verify_ssl)
        response.raise_for_status()
        return response.text

    logger.info(f"Reading VTT file: {source}")
    with open(source, 'r', encoding='utf-8', newline='') as f:
        return f.read()


def load_track(source: str, timeout: int = 30, verify_ssl: bool = True) -> Track:
    """
    Load and parse one WebVTT source.

    Raises:
        SourceError: If the source cannot be read or parsed; the original
            exception is chained as the cause
    """
    try:
        content = load_vtt_text(source, timeout=timeout, verify_ssl=verify_ssl)
        return Track.parse(content)
    except (OSError, UnicodeDecodeError, requests.RequestException, ParsingError) as e:
        logger.error(f"Failed to load {source}: {str(e)}")
        raise SourceError(source, e) from e

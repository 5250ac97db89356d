"""Text helpers for item bodies: read time, display dates and excerpts."""

import math
import re
from datetime import datetime
from typing import Optional

from bs4 import BeautifulSoup

DEFAULT_WORDS_PER_MINUTE = 200
HTML_PARSER = "html.parser"


def html_to_text(html: str) -> str:
    """Strip tags and return the text content of an HTML fragment."""
    if not html:
        return ""
    return BeautifulSoup(html, HTML_PARSER).get_text(" ")


def calculate_read_time(html: str, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE) -> str:
    """Estimate reading time for an HTML body.

    Args:
        html: HTML (or plain text) content
        words_per_minute: Reading speed, must be positive

    Returns:
        A label such as ``"3 min read"``; empty content reads in 1 minute
    """
    if words_per_minute < 1:
        raise ValueError(f"words_per_minute must be positive, got {words_per_minute}")

    words = html_to_text(html).split()
    if not words:
        return "1 min read"
    minutes = math.ceil(len(words) / words_per_minute)
    return f"{minutes} min read"


def format_date(date_string: str) -> str:
    """Format an ISO 8601 timestamp for display, e.g. ``"January 5, 2024"``.

    Raises:
        ValueError: If the string is not an ISO 8601 date or timestamp
    """
    value = date_string.strip()
    # fromisoformat before Python 3.11 rejects the Z suffix
    if value.endswith('Z'):
        value = value[:-1] + '+00:00'
    parsed = datetime.fromisoformat(value)
    return f"{parsed.strftime('%B')} {parsed.day}, {parsed.year}"


def extract_text_from_html(html: str, max_length: Optional[int] = None) -> str:
    """Return the trimmed text of an HTML fragment, optionally truncated.

    Text longer than max_length is cut to max_length characters and
    suffixed with ``...``.
    """
    text = re.sub(r'\s+', ' ', html_to_text(html)).strip()
    if max_length and len(text) > max_length:
        return text[:max_length] + '...'
    return text


def slugify(text: str) -> str:
    """Lowercase text and collapse everything but letters and digits to dashes."""
    slug = re.sub(r'[^\w]+', '-', text.lower(), flags=re.UNICODE)
    slug = slug.replace('_', '-')
    return re.sub(r'-{2,}', '-', slug).strip('-')

"""Presentation helpers for item content.

Pure functions over HTML bodies: reading time, display dates, excerpts and
table-of-contents entries.
"""

from .text_utils import (
    calculate_read_time,
    extract_text_from_html,
    format_date,
    html_to_text,
    slugify,
)
from .toc import TocEntry, extract_headings, render_toc_html

__all__ = [
    'calculate_read_time',
    'extract_text_from_html',
    'format_date',
    'html_to_text',
    'slugify',
    'TocEntry',
    'extract_headings',
    'render_toc_html',
]

"""Table-of-contents extraction and rendering.

Headings are pulled from an item's HTML body into TocEntry values, which
can be rendered as a flat list of anchor links. Rendering only produces a
string; attaching scroll tracking is left to the page.
"""

import html
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence

from bs4 import BeautifulSoup

from .text_utils import HTML_PARSER, slugify

logger = logging.getLogger(__name__)

HEADING_TAGS = ('h1', 'h2', 'h3', 'h4', 'h5', 'h6')


@dataclass
class TocEntry:
    """One heading in a table of contents.

    Attributes:
        id: Anchor id of the heading element
        text: Heading text
        level: Heading level, 1 for h1 through 6 for h6
    """
    id: str
    text: str
    level: int


def extract_headings(body_html: str, exclude_levels: Iterable[int] = ()) -> List[TocEntry]:
    """Collect headings from an HTML body in document order.

    The anchor id is the heading's own id attribute, or a slug of its text.
    Repeated ids get ``-1``, ``-2``... suffixes so every anchor is unique.

    Args:
        body_html: HTML content of an item
        exclude_levels: Heading levels to leave out (e.g. ``[1]``)

    Returns:
        List of TocEntry, one per heading kept
    """
    if not body_html:
        return []

    excluded = set(exclude_levels)
    soup = BeautifulSoup(body_html, HTML_PARSER)
    seen: Dict[str, int] = {}
    entries: List[TocEntry] = []

    for heading in soup.find_all(HEADING_TAGS):
        level = int(heading.name[1])
        if level in excluded:
            continue

        text = heading.get_text(" ", strip=True)
        anchor = heading.get('id') or slugify(text) or 'section'

        if anchor in seen:
            seen[anchor] += 1
            anchor = f"{anchor}-{seen[anchor]}"
        else:
            seen[anchor] = 0

        entries.append(TocEntry(id=anchor, text=text, level=level))

    logger.debug(f"Extracted {len(entries)} headings")
    return entries


def render_toc_html(
    entries: Sequence[TocEntry],
    add_numbers: bool = False,
    link_class: str = "toc-link",
) -> str:
    """Render TOC entries as a string of anchor links.

    Args:
        entries: Headings in document order
        add_numbers: Prefix each label with its outline number (1., 1.1., ...)
        link_class: CSS class set on every link

    Returns:
        Concatenated ``<a>`` elements, all values HTML-escaped
    """
    numbers = _outline_numbers(entries) if add_numbers else [''] * len(entries)
    escaped_class = html.escape(link_class)
    parts = []

    for entry, number in zip(entries, numbers):
        text = html.escape(entry.text.strip() or 'Untitled')
        if number:
            text = f"{number} {text}"
        anchor = html.escape(entry.id)
        padding = (entry.level - 1) * 12 + 8
        parts.append(
            f'<a href="#{anchor}" class="{escaped_class}" data-level="{entry.level}" '
            f'data-target-id="{anchor}" role="link" style="padding-left: {padding}px;">'
            f'{text}</a>'
        )

    return ''.join(parts)


def _outline_numbers(entries: Sequence[TocEntry]) -> List[str]:
    """Hierarchical numbers relative to the shallowest heading level."""
    if not entries:
        return []

    top = min(entry.level for entry in entries)
    counters: List[int] = []
    numbers = []
    for entry in entries:
        depth = entry.level - top + 1
        # Skipped levels count as 1
        while len(counters) < depth:
            counters.append(0)
        del counters[depth:]
        counters[-1] += 1
        numbers.append('.'.join(str(c or 1) for c in counters) + '.')
    return numbers

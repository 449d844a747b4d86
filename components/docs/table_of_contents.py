"""TableOfContents Component - Extract and display markdown headings.

Builds a table of contents from the headings of a docs page. Headings in
fenced code blocks are ignored.
"""

import re
from typing import List, Tuple

import streamlit as st

HEADING = re.compile(r'^(#{1,6})\s+(.+?)\s*#*\s*$')


def slugify(text: str) -> str:
    """URL-safe anchor for a heading, matching Streamlit's header anchors."""
    slug = text.lower().strip()
    slug = re.sub(r'[^\w\s-]', '', slug)
    slug = re.sub(r'[-\s]+', '-', slug)
    return slug.strip('-')


def extract_headings(content: str) -> List[Tuple[int, str, str]]:
    """Find markdown headings.

    Args:
        content: Raw markdown

    Returns:
        List of (level, text, slug), level 1 for '#'
    """
    headings = []
    fence = None
    for line in content.splitlines():
        marker = line.lstrip()[:3]
        if marker in ('```', '~~~'):
            # A block only closes on the marker that opened it
            if fence is None:
                fence = marker
            elif marker == fence:
                fence = None
            continue
        if fence is not None:
            continue
        match = HEADING.match(line)
        if match:
            text = match.group(2)
            headings.append((len(match.group(1)), text, slugify(text)))
    return headings


def render(content: str) -> None:
    """Render the table of contents for a page.

    Args:
        content: Raw markdown content to extract headings from
    """
    headings = extract_headings(content)

    if not headings:
        st.caption("No headings on this page")
        return

    st.markdown("**On this page**")

    lines = []
    for level, text, slug in headings:
        indent = "  " * (level - 1)
        lines.append(f"{indent}- [{text}](#{slug})")
    st.markdown("\n".join(lines))

"""MarkdownViewer Component - Docs renderer with embedded components.

Renders a markdown document, replacing lines that hold a single
self-closing component tag (e.g. `<ThroughputChart />`) with the
component registered under that name.
"""

import logging
import re
from typing import List, Mapping, Tuple

import streamlit as st

from lib.component_registry import Component, lookup_component

logger = logging.getLogger(__name__)

COMPONENT_TAG = re.compile(r'^[ \t]*<([A-Z][A-Za-z0-9]*)\s*/>[ \t]*$', re.MULTILINE)
FENCE = re.compile(r'^[ \t]*(```|~~~)', re.MULTILINE)


def _fenced_ranges(content: str) -> List[Tuple[int, int]]:
    """Character ranges covered by fenced code blocks."""
    ranges = []
    opening = None
    for fence in FENCE.finditer(content):
        if opening is None:
            opening = fence
        elif fence.group(1) == opening.group(1):
            ranges.append((opening.start(), fence.end()))
            opening = None
    if opening is not None:
        ranges.append((opening.start(), len(content)))
    return ranges


def split_segments(content: str) -> List[Tuple[str, str]]:
    """Split markdown into text and component segments.

    Tags inside fenced code blocks are left as text.

    Args:
        content: Raw markdown

    Returns:
        List of ('markdown', text) and ('component', name) tuples in
        document order. Whitespace-only text is dropped.
    """
    fenced = _fenced_ranges(content)
    segments: List[Tuple[str, str]] = []
    position = 0

    for match in COMPONENT_TAG.finditer(content):
        if any(start <= match.start() < end for start, end in fenced):
            continue
        text = content[position:match.start()]
        if text.strip():
            segments.append(('markdown', text))
        segments.append(('component', match.group(1)))
        position = match.end()

    tail = content[position:]
    if tail.strip():
        segments.append(('markdown', tail))
    return segments


def render(content: str, components: Mapping[str, Component]) -> None:
    """Render a docs page.

    Args:
        content: Raw markdown content to render
        components: Name to component mapping for embedded tags
    """
    for kind, value in split_segments(content):
        if kind == 'markdown':
            st.markdown(value)
            continue

        try:
            component = lookup_component(components, value)
        except KeyError:
            logger.warning(f"Document references unknown component <{value} />")
            st.error(f"Unknown component: <{value} />")
            continue

        component()

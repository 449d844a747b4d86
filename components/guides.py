"""Guides Component - Grid of getting-started guides.

Shows each guide as a card with a short description and a "Read more"
button that switches the current docs page.
"""

from typing import Dict, List

import streamlit as st

from lib.docs_loader import slug_from_href
from lib.session_state import navigate_to

GUIDES: List[Dict[str, str]] = [
    {
        'href': '/quickstart',
        'name': 'Quickstart',
        'description': 'Get started with FileLens in minutes with our quick setup guide.',
    },
    {
        'href': '/implementation',
        'name': 'Implementation',
        'description': 'Complete integration guide with code examples for popular languages.',
    },
    {
        'href': '/multi-page',
        'name': 'Multi-Page Processing',
        'description': 'Learn how to process all pages in PDF, DOC, DOCX, PPT, PPTX files.',
    },
    {
        'href': '/docker',
        'name': 'Docker Deployment',
        'description': 'Deploy FileLens using Docker with production-ready configurations.',
    },
]


def render() -> None:
    """Render the guides grid, four cards per row."""
    st.subheader("Guides", anchor="guides")
    st.divider()

    cols = st.columns(4)
    for i, guide in enumerate(GUIDES):
        with cols[i % 4]:
            with st.container(border=True):
                st.markdown(f"**{guide['name']}**")
                st.caption(guide['description'])
                st.button(
                    "Read more →",
                    key=f"guide_{slug_from_href(guide['href'])}",
                    on_click=navigate_to,
                    args=(slug_from_href(guide['href']),),
                    type="tertiary",
                )

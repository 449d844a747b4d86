"""
FileLens Docs - Sidebar Component

Renders the navigation sidebar listing every docs page. The radio is
bound to the 'current_page' session key so other components can
navigate by setting it.
"""

from typing import Dict

import streamlit as st

from lib.docs_loader import DocsLoader
from lib.site_config import site_config


def render_sidebar(loader: DocsLoader) -> str:
    """
    Render the sidebar and return the selected page slug.

    Args:
        loader: Docs loader providing the page list

    Returns:
        str: Slug of the selected page, or the default page when the docs
        directory is empty
    """
    pages = loader.list_pages()
    titles: Dict[str, str] = {page.slug: page.title for page in pages}

    with st.sidebar:
        st.title(site_config.title)
        st.caption("Documentation")

        st.divider()

        if not pages:
            st.warning(f"No docs found in {loader.docs_dir}")
            return site_config.default_page

        if st.session_state.get('current_page') not in titles:
            st.session_state['current_page'] = pages[0].slug

        st.subheader("Navigation")

        page = st.radio(
            "Select a page:",
            list(titles),
            format_func=lambda slug: titles[slug],
            key="current_page",
            label_visibility="collapsed"
        )

        st.divider()

        st.toggle("Show table of contents", key="show_toc")

    return page

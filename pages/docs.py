"""Docs Page.

Renders one markdown docs page with its table of contents and any
embedded components (guides list, benchmark charts).
"""

import logging
from typing import Mapping, Optional

import streamlit as st

from components.docs import doc_components, render_markdown, render_toc
from lib.component_registry import Component
from lib.docs_loader import DocsLoader
from lib.session_state import get_state

logger = logging.getLogger(__name__)


def render(slug: str, loader: DocsLoader, components: Optional[Mapping[str, Component]] = None) -> None:
    """Render the docs page for a slug.

    Args:
        slug: Page slug (file name without .md)
        loader: Docs loader to read content from
        components: Extra components for this page; charts and guides are
            always available
    """
    try:
        content = loader.get_content(slug)
    except FileNotFoundError as e:
        logger.warning(f"Docs page not found: {slug}")
        st.error(f"Page not found: {slug}")
        st.caption(str(e))
        return

    registry = doc_components(components)

    if get_state('show_toc', True):
        main, toc = st.columns([4, 1])
        with toc:
            render_toc(content)
    else:
        main = st.container()

    with main:
        render_markdown(content, registry)

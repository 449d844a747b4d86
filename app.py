"""
FileLens Docs - Main Application Entry Point

This is the root application file that handles:
- Page configuration (MUST be first Streamlit command)
- Logging setup from site.toml
- Session state initialization
- Sidebar navigation
- Routing to the selected docs page
"""

import logging

import streamlit as st

# Core library imports
from lib.docs_loader import DocsLoader
from lib.session_state import initialize_session_state
from lib.site_config import site_config
from components.sidebar import render_sidebar
from pages import docs

# =============================================================================
# PAGE CONFIG - MUST BE FIRST STREAMLIT COMMAND
# =============================================================================

st.set_page_config(
    page_title=site_config.title,
    page_icon=site_config.icon,
    layout="wide",
    initial_sidebar_state="expanded",
    menu_items={
        'About': """
        # FileLens Docs

        Guides and deployment benchmarks for FileLens.
        """
    }
)

# =============================================================================
# LOGGING
# =============================================================================

logging.basicConfig(
    level=site_config.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# =============================================================================
# SESSION STATE INITIALIZATION
# =============================================================================

initialize_session_state()

# =============================================================================
# SIDEBAR AND NAVIGATION
# =============================================================================

loader = DocsLoader(site_config.docs_dir, nav=site_config.nav)
selected_page = render_sidebar(loader)

# =============================================================================
# PAGE ROUTING
# =============================================================================

docs.render(selected_page, loader)

# =============================================================================
# FOOTER
# =============================================================================

st.divider()
st.caption(f"{site_config.title} | Built with Streamlit")

"""Session state initialization and management for the docs app.

Centralizes the Streamlit session state keys used across pages and
components.
"""

import streamlit as st
from typing import Any, Dict

from lib.site_config import site_config


def initialize_session_state() -> None:
    """Initialize all session state variables used across the app.

    Groups:
    - Navigation (current docs page, bound to the sidebar radio)
    - UI state (table of contents visibility)
    """

    defaults: Dict[str, Any] = {
        # Navigation
        'current_page': site_config.default_page,

        # UI state
        'show_toc': True,
    }

    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def navigate_to(slug: str) -> None:
    """Switch the current docs page.

    Meant for button on_click callbacks, which run before the sidebar radio
    bound to 'current_page' is drawn.

    Args:
        slug: Target page slug
    """
    st.session_state['current_page'] = slug


def get_state(key: str, default: Any = None) -> Any:
    """Safely get a value from session state with a default.

    Args:
        key: Session state key
        default: Default value if key doesn't exist

    Returns:
        Value from session state or default
    """
    return st.session_state.get(key, default)


def set_state(key: str, value: Any) -> None:
    """Set a value in session state.

    Args:
        key: Session state key
        value: Value to set
    """
    st.session_state[key] = value


def has_state(key: str) -> bool:
    """Check if a key exists in session state."""
    return key in st.session_state

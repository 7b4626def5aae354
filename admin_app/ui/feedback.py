"""
Standardized feedback utilities for consistent error, empty, and loading states.

Provides reusable components for displaying errors, empty states, and loading
indicators across all pages in a consistent manner.
"""

import logging
from contextlib import contextmanager
from typing import Optional

import streamlit as st

from pricewatch.exceptions import ApiError, AuthenticationError
from utils.session import LOGIN_PAGE

logger = logging.getLogger(__name__)


def show_error(message: str, hint: Optional[str] = None) -> None:
    """
    Display a standardized error message with optional hint.

    Args:
        message: Main error message to display
        hint: Optional hint text to help users resolve the issue
    """
    st.error(f"⚠️ {message}")
    if hint:
        st.caption(f"💡 {hint}")


def show_api_error(error: ApiError, action_message: str) -> None:
    """
    Surface a failed backend call.

    Authentication failures send the user to the login page. Everything else
    shows ``action_message`` with the backend's message as a hint.

    Args:
        error: The caught ApiError
        action_message: What failed, e.g. "Failed to archive selected markets. Please try again."
    """
    if isinstance(error, AuthenticationError):
        st.warning("Your session has expired. Please sign in again.")
        st.switch_page(LOGIN_PAGE)
        return
    logger.info("%s (%s)", action_message, error)
    show_error(action_message, hint=error.message if error.message != action_message else None)


def show_success(message: str) -> None:
    st.success(f"✅ {message}")


def show_empty_state(
    title: str,
    subtitle: Optional[str] = None,
    action_label: str = "Get started",
    action_page_path: Optional[str] = None,
) -> None:
    """
    Display a standardized empty state with optional action button.

    Args:
        title: Main empty state title
        subtitle: Optional subtitle/description text
        action_label: Label for the action button
        action_page_path: Optional page path to navigate to when button is clicked
    """
    st.info(f"📭 **{title}**")
    if subtitle:
        st.caption(subtitle)

    if action_page_path:
        if st.button(action_label, use_container_width=True, type="primary"):
            st.switch_page(action_page_path)


@contextmanager
def working_spinner(label: str = "Working…"):
    """
    Context manager wrapper for standardized loading spinners.

    Usage:
        with working_spinner("Saving…"):
            update_market(...)
    """
    with st.spinner(label):
        yield

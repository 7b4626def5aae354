"""
Layout primitives for consistent page structure.

Provides reusable components for page headers, sections, cards, KPI rows,
status badges, the admin sidebar and table pagination controls.
"""

from contextlib import contextmanager
from typing import Callable, Optional

import streamlit as st

from pricewatch.pagination import page_window, showing_range
from utils import table_state
from utils.session import get_current_user, logout

# Sidebar navigation: (page path relative to app.py, label, icon)
NAV_ITEMS = [
    ("app.py", "Overview", "🏠"),
    ("pages/02_🏷_Dietary_Tags.py", "Dietary Tags", "🏷"),
    ("pages/03_🏪_Markets.py", "Markets", "🏪"),
    ("pages/04_📦_Products.py", "Products", "📦"),
    ("pages/05_🗄_Archive.py", "Archive", "🗄"),
    ("pages/06_📄_Price_Reports.py", "Price Reports", "📄"),
    ("pages/07_📈_Analytics.py", "Analytics", "📈"),
    ("pages/08_🔮_Predictions.py", "Predictions", "🔮"),
]

_BADGE_COLORS = {
    "ACTIVE": "green",
    "COMPLETED": "green",
    "NORMAL": "green",
    "EXCELLENT": "green",
    "INACTIVE": "gray",
    "ARCHIVED": "gray",
    "DEACTIVATED": "gray",
    "PENDING": "yellow",
    "PROCESSING": "blue",
    "WARNING": "yellow",
    "GOOD": "yellow",
    "MEDIUM": "yellow",
    "FAILED": "red",
    "ANOMALY": "red",
    "HIGH": "red",
    "NEEDS WORK": "red",
    "LOW": "blue",
}


def page_header(title: str, subtitle: Optional[str] = None, right: Optional[Callable[[], None]] = None) -> None:
    """
    Render a consistent page header with title and optional subtitle.

    Args:
        title: Main page title
        subtitle: Optional subtitle/description text
        right: Optional callable that renders right-side content (e.g., buttons)
    """
    if right is not None:
        col_title, col_right = st.columns([3, 1])
        with col_title:
            _render_title(title, subtitle)
        with col_right:
            right()
    else:
        _render_title(title, subtitle)


def _render_title(title: str, subtitle: Optional[str]) -> None:
    st.markdown('<div class="pw-page-header">', unsafe_allow_html=True)
    st.markdown(f"# {title}")
    if subtitle:
        st.markdown(f'<div class="subtitle">{subtitle}</div>', unsafe_allow_html=True)
    st.markdown("</div>", unsafe_allow_html=True)


def kpi_row(kpis: list[dict]) -> None:
    """
    Render a row of KPI metrics.

    Args:
        kpis: List of dicts with keys:
            - label: KPI label text
            - value: KPI value (number or string)
            - delta: Optional delta/change indicator
            - icon: Optional emoji prefix
            - help: Optional tooltip text
    """
    if not kpis:
        return
    cols = st.columns(len(kpis))
    for col, kpi in zip(cols, kpis):
        with col:
            icon = kpi.get("icon", "")
            label = kpi.get("label", "")
            st.metric(
                label=f"{icon} {label}" if icon else label,
                value=kpi.get("value", "—"),
                delta=kpi.get("delta"),
                help=kpi.get("help"),
            )


def section(title: str, caption: Optional[str] = None) -> None:
    st.markdown('<div class="pw-section">', unsafe_allow_html=True)
    st.markdown(f"## {title}")
    if caption:
        st.markdown(f'<div class="pw-section-caption">{caption}</div>', unsafe_allow_html=True)
    st.markdown("</div>", unsafe_allow_html=True)


@contextmanager
def card(title: Optional[str] = None):
    """
    Context manager for a bordered card container.

    Usage:
        with card("Card Title"):
            st.write("Card content")
    """
    with st.container(border=True):
        if title:
            st.markdown(f"### {title}")
        yield


def status_badge(status: Optional[str], color: Optional[str] = None) -> str:
    """HTML badge for a status value; color is looked up when not given."""
    text = (status or "").replace("_", " ")
    tone = color or _BADGE_COLORS.get(text.upper(), "gray")
    return f'<span class="pw-badge pw-badge--{tone}">{text or "—"}</span>'


def render_sidebar() -> None:
    """Admin navigation, signed-in user and logout button."""
    with st.sidebar:
        st.markdown("### 🥬 **PriceWatch Admin**")
        st.divider()
        for path, label, icon in NAV_ITEMS:
            st.page_link(path, label=label, icon=icon)
        st.divider()
        user = get_current_user()
        if user is not None:
            st.caption(f"Signed in as **{user.email or user.user_id}**")
            if st.button("Log out", use_container_width=True, key="sidebar_logout"):
                logout()


def pagination_controls(table: str, total_pages: int, total_items: Optional[int] = None, size: Optional[int] = None) -> None:
    """
    Render Previous / numbered / Next buttons for a table.

    The current page comes from utils.table_state; clicking a button updates it
    and reruns the script.

    Args:
        table: Table key used with table_state
        total_pages: Number of pages available
        total_items: Optional row count for the "Showing X to Y of Z" caption
        size: Page size, required for the caption
    """
    page = table_state.get_page(table)
    if total_items is not None and size:
        first, last = showing_range(page, size, total_items)
        st.markdown(
            f'<div class="pw-pager-caption">Showing {first} to {last} of {total_items} results</div>',
            unsafe_allow_html=True,
        )
    if total_pages <= 1:
        return

    window = page_window(page, total_pages)
    cols = st.columns(len(window) + 2)
    with cols[0]:
        if st.button("‹ Previous", key=f"{table}_prev", disabled=page <= 0, use_container_width=True):
            table_state.go_previous(table)
            st.rerun()
    for col, number in zip(cols[1:-1], window):
        with col:
            if st.button(
                str(number + 1),
                key=f"{table}_page_{number}",
                type="primary" if number == page else "secondary",
                use_container_width=True,
            ):
                table_state.set_page(table, number, total_pages)
                st.rerun()
    with cols[-1]:
        if st.button("Next ›", key=f"{table}_next", disabled=page >= total_pages - 1, use_container_width=True):
            table_state.go_next(table, total_pages)
            st.rerun()

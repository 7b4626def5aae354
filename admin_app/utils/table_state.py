"""
Table State Management Module.

Admin tables keep three things in st.session_state, namespaced by a table key
(e.g. "markets", "coverage"):

- `{key}_page`: current 0-indexed page
- `{key}_filters`: the *applied* filters (dict)
- `{key}_selected`: ids of selected rows (list)

Filters are edited in widgets but only take effect when applied, so typing in
a search box does not refetch or reset paging until the admin clicks *Apply*.
Applying or resetting filters always returns the table to page 0.

# NOTE: State lives only for the current Streamlit session; a browser refresh
    starts from page 0 with no filters.
"""

from typing import Any, Dict, Iterable, List, Optional

import streamlit as st

from pricewatch.pagination import clamp_page, next_page, previous_page


def _key(table: str, suffix: str) -> str:
    return f"{table}_{suffix}"


def init_table(table: str, default_filters: Optional[Dict[str, Any]] = None) -> None:
    """
    Ensure page, filters and selection exist for ``table``.

    Call this at the top of any page that renders the table.
    """
    st.session_state.setdefault(_key(table, "page"), 0)
    st.session_state.setdefault(_key(table, "filters"), dict(default_filters or {}))
    st.session_state.setdefault(_key(table, "defaults"), dict(default_filters or {}))
    st.session_state.setdefault(_key(table, "selected"), [])


def get_page(table: str) -> int:
    return st.session_state.get(_key(table, "page"), 0)


def set_page(table: str, page: int, total_pages: Optional[int] = None) -> None:
    """Jump to ``page``; clamped to the known page count when given."""
    if total_pages is not None:
        page = clamp_page(page, total_pages)
    st.session_state[_key(table, "page")] = max(0, page)


def go_next(table: str, total_pages: int) -> None:
    set_page(table, next_page(get_page(table), total_pages))


def go_previous(table: str) -> None:
    set_page(table, previous_page(get_page(table)))


def get_filters(table: str) -> Dict[str, Any]:
    return st.session_state.get(_key(table, "filters"), {})


def apply_filters(table: str, filters: Dict[str, Any]) -> None:
    """Store the filters from the widgets and return to the first page."""
    st.session_state[_key(table, "filters")] = dict(filters)
    st.session_state[_key(table, "page")] = 0


def reset_filters(table: str) -> None:
    """Restore the filters given to init_table() and return to the first page."""
    st.session_state[_key(table, "filters")] = dict(st.session_state.get(_key(table, "defaults"), {}))
    st.session_state[_key(table, "page")] = 0


def get_selected(table: str) -> List[Any]:
    return st.session_state.get(_key(table, "selected"), [])


def set_selected(table: str, ids: Iterable[Any]) -> None:
    st.session_state[_key(table, "selected")] = list(ids)


def clear_selected(table: str) -> None:
    st.session_state[_key(table, "selected")] = []


def selected_items(items: List[Any], rows: Iterable[int]) -> List[Any]:
    """
    Map dataframe selection indices to the rows currently shown.

    A selection kept by Streamlit from an earlier, longer table can point past
    the end of ``items``; those indices are dropped.
    """
    return [items[i] for i in rows if 0 <= i < len(items)]

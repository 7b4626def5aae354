"""
Tests for per-table paging, filter and selection state.
"""

from utils import table_state


class TestTableState:
    def test_init_is_idempotent(self, session_state):
        table_state.init_table("markets", {"search": ""})
        table_state.set_page("markets", 3)
        table_state.init_table("markets", {"search": ""})
        assert table_state.get_page("markets") == 3

    def test_navigation_is_clamped(self, session_state):
        table_state.init_table("t")
        table_state.go_previous("t")
        assert table_state.get_page("t") == 0
        table_state.go_next("t", 2)
        table_state.go_next("t", 2)
        assert table_state.get_page("t") == 1
        table_state.set_page("t", 10, total_pages=4)
        assert table_state.get_page("t") == 3

    def test_apply_and_reset_filters_return_to_first_page(self, session_state):
        table_state.init_table("t", {"search": "", "status": "all"})
        table_state.set_page("t", 2)

        table_state.apply_filters("t", {"search": "rice", "status": "ACTIVE"})
        assert table_state.get_filters("t") == {"search": "rice", "status": "ACTIVE"}
        assert table_state.get_page("t") == 0

        table_state.set_page("t", 1)
        table_state.reset_filters("t")
        assert table_state.get_filters("t") == {"search": "", "status": "all"}
        assert table_state.get_page("t") == 0

    def test_selection(self, session_state):
        table_state.init_table("t")
        table_state.set_selected("t", (1, 2))
        assert table_state.get_selected("t") == [1, 2]
        table_state.clear_selected("t")
        assert table_state.get_selected("t") == []

    def test_selected_items_drops_stale_indices(self):
        shown = ["rice", "eggs"]
        assert table_state.selected_items(shown, [1, 4]) == ["eggs"]
        assert table_state.selected_items(shown, []) == []

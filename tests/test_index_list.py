import pytest

from pdbview.index_list import IndexList, IndexListOrdering

ENTRIES = [("Zeta", 3), ("Alpha", 7), ("Mid", 1)]


def test_alphabetical_ordering_sorts_by_name():
    index_list = IndexList(IndexListOrdering.ALPHABETICAL)
    index_list.update_index_list(ENTRIES)
    assert index_list.entries == sorted(ENTRIES, key=lambda e: e[0])


def test_no_ordering_keeps_input_order():
    index_list = IndexList(IndexListOrdering.NONE)
    index_list.update_index_list(ENTRIES)
    assert index_list.entries == ENTRIES


def test_default_ordering_is_none():
    index_list = IndexList()
    index_list.update_index_list(ENTRIES)
    assert index_list.ordering is IndexListOrdering.NONE
    assert index_list.entries == ENTRIES


def test_nothing_selected_initially():
    index_list = IndexList(IndexListOrdering.ALPHABETICAL)
    index_list.update_index_list(ENTRIES)
    assert index_list.selected() is None
    assert index_list.selected_row is None


def test_select_returns_entry():
    index_list = IndexList(IndexListOrdering.ALPHABETICAL)
    index_list.update_index_list(ENTRIES)
    assert index_list.select(0) == ("Alpha", 7)
    assert index_list.selected() == ("Alpha", 7)


def test_update_clears_selection():
    index_list = IndexList()
    index_list.update_index_list(ENTRIES)
    index_list.select(1)
    index_list.update_index_list(ENTRIES)
    assert index_list.selected() is None


@pytest.mark.parametrize("row", [-1, 3, 100])
def test_select_out_of_range_raises(row):
    index_list = IndexList()
    index_list.update_index_list(ENTRIES)
    with pytest.raises(IndexError):
        index_list.select(row)


def test_select_next_and_previous_move_by_one():
    index_list = IndexList()
    index_list.update_index_list(ENTRIES)
    index_list.select(0)
    assert index_list.select_next() == ENTRIES[1]
    assert index_list.select_next() == ENTRIES[2]
    assert index_list.select_previous() == ENTRIES[1]


def test_navigation_stays_in_bounds():
    index_list = IndexList()
    index_list.update_index_list(ENTRIES)
    index_list.select(len(ENTRIES) - 1)
    assert index_list.select_next() == ENTRIES[-1]
    index_list.select(0)
    assert index_list.select_previous() == ENTRIES[0]
    assert index_list.selected_row == 0


def test_navigation_without_selection_is_noop():
    index_list = IndexList()
    index_list.update_index_list(ENTRIES)
    assert index_list.select_next() is None
    assert index_list.select_previous() is None


def test_empty_list():
    index_list = IndexList(IndexListOrdering.ALPHABETICAL)
    index_list.update_index_list([])
    assert len(index_list) == 0
    assert index_list.select_next() is None
    with pytest.raises(IndexError):
        index_list.select(0)


def test_len_matches_entries():
    index_list = IndexList()
    index_list.update_index_list(ENTRIES)
    assert len(index_list) == len(ENTRIES)
import pytest

from core import ItemList


def test_new_list_selects_first_item_or_nothing():
    assert ItemList(["a", "b"]).selected == 0
    assert ItemList().selected is None
    assert ItemList(["a", "b"], selected=9).selected == 1


@pytest.mark.parametrize("deltas", [[1, 1, 1, 1], [-1, -5], [3, -1, 10, -10, 2], [0]])
def test_move_selection_stays_in_bounds(deltas):
    items = ItemList(["a", "b", "c"])
    for delta in deltas:
        items.move_selection(delta)
        assert 0 <= items.selected < len(items)


def test_move_selection_clamps_without_wrapping():
    items = ItemList(["a", "b", "c"])
    items.move_selection(-1)
    assert items.selected == 0
    items.move_selection(10)
    assert items.selected == 2


def test_move_selection_on_empty_list_is_noop():
    items = ItemList()
    items.move_selection(1)
    assert items.selected is None


def test_drag_down_moves_item_and_selection():
    items = ItemList(["a", "b"])
    items.drag(1)
    assert items.items == ["b", "a"]
    assert items.selected == 1


def test_drag_at_boundaries_is_noop():
    items = ItemList(["a", "b"])
    items.drag(-1)
    assert items.items == ["a", "b"] and items.selected == 0
    items.jump_end()
    items.drag(1)
    assert items.items == ["a", "b"] and items.selected == 1


def test_insert_defaults_after_selection_and_selects_new_item():
    items = ItemList(["a", "b"])
    index = items.insert("new")
    assert index == 1
    assert items.items == ["a", "new", "b"]
    assert items.selected == 1


def test_insert_into_empty_list_and_explicit_index_is_clamped():
    items = ItemList()
    assert items.insert("first") == 0
    assert items.selected == 0
    assert items.insert("last", at=99) == 1
    assert items.items == ["first", "last"]


def test_rename_replaces_selected_text():
    items = ItemList(["a", "b"], selected=1)
    items.rename("B")
    assert items.items == ["a", "B"]
    empty = ItemList()
    empty.rename("x")
    assert empty.items == []


def test_delete_last_item_moves_selection_up():
    items = ItemList(["a", "b", "c"], selected=2)
    assert items.delete() == "c"
    assert items.selected == 1


def test_delete_middle_keeps_index():
    items = ItemList(["a", "b", "c"], selected=1)
    items.delete()
    assert items.items == ["a", "c"]
    assert items.selected == 1


def test_delete_single_item_leaves_sentinel():
    items = ItemList(["only"])
    items.delete()
    assert items.items == []
    assert items.selected is None
    assert items.current is None


def test_delete_on_empty_list_is_noop():
    items = ItemList()
    assert items.delete() is None
    assert items.selected is None


def test_jump_start_and_end():
    items = ItemList(["a", "b", "c"], selected=1)
    items.jump_end()
    assert items.selected == 2
    items.jump_start()
    assert items.selected == 0
    empty = ItemList()
    empty.jump_end()
    assert empty.selected is None


def test_append_selects_only_when_list_was_empty():
    items = ItemList()
    items.append("a")
    assert items.selected == 0
    items.append("b")
    assert items.selected == 0
    assert list(items) == ["a", "b"]

from core import Board, Panel


def test_panel_other_and_labels():
    assert Panel.TODO.other() is Panel.DONE
    assert Panel.DONE.other() is Panel.TODO
    assert Panel.TODO.title == "TODO"
    assert Panel.DONE.mark == "[x]"


def test_toggle_focus_preserves_both_selections():
    board = Board(["a", "b", "c"], ["x", "y"])
    board.move_selection(2)
    board.toggle_focus()
    assert board.focused is Panel.DONE
    board.move_selection(1)
    board.toggle_focus()
    assert board.focused is Panel.TODO
    assert board.todo.selected == 2
    assert board.done.selected == 1


def test_move_item_to_other_list_keeps_focus_on_source():
    board = Board(["a"], [])
    moved = board.move_item_to_other_list()
    assert moved == "a"
    assert board.todo.items == []
    assert board.todo.selected is None
    assert board.done.items == ["a"]
    assert board.done.selected == 0
    assert board.focused is Panel.TODO


def test_move_item_to_other_list_appends_and_selects_in_destination():
    board = Board(["a", "b", "c"], ["x"])
    board.move_selection(1)
    board.move_item_to_other_list()
    assert board.todo.items == ["a", "c"]
    assert board.todo.selected == 1
    assert board.done.items == ["x", "b"]
    assert board.done.selected == 1


def test_move_item_preserves_count_and_text():
    text = "  spaced \\ text ü  "
    board = Board([text, "b"], ["c"])
    total = board.total_items()
    board.move_item_to_other_list()
    assert board.total_items() == total
    assert board.done.items[-1] == text


def test_move_item_from_done_reopens_it():
    board = Board(["a"], ["done"], focused=Panel.DONE)
    board.move_item_to_other_list()
    assert board.todo.items == ["a", "done"]
    assert board.done.items == []


def test_move_item_from_empty_list_is_noop():
    board = Board([], ["x"])
    assert board.move_item_to_other_list() is None
    assert board.snapshot() == [[], ["x"]]


def test_operations_delegate_to_focused_list():
    board = Board(["a", "b"], ["x", "y"], focused=Panel.DONE)
    board.drag(1)
    assert board.done.items == ["y", "x"]
    assert board.todo.items == ["a", "b"]
    board.rename("Y")
    board.insert("z")
    assert board.done.items == ["y", "Y", "z"]
    board.jump_start()
    assert board.delete() == "y"
    board.jump_end()
    assert board.done.selected == 1


def test_same_items_ignores_selection_and_focus():
    left = Board(["a", "b"], ["c"])
    right = Board(["a", "b"], ["c"], focused=Panel.DONE)
    right.move_selection(1)
    assert left.same_items(right)
    right.rename("B")
    assert not left.same_items(right)

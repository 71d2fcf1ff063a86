from core import Board, EditKind, EditState, Mode, Panel, mode_of


def test_begin_insert_targets_row_after_selection():
    board = Board(["a", "b"], [])
    edit = EditState.begin_insert(board)
    assert edit.kind is EditKind.INSERT
    assert edit.panel is Panel.TODO
    assert edit.index == 1
    assert edit.draft == "" and edit.cursor == 0
    assert edit.mode is Mode.INSERT


def test_begin_insert_on_empty_list_targets_top():
    board = Board([], [], focused=Panel.DONE)
    edit = EditState.begin_insert(board)
    assert edit.index == 0
    assert edit.panel is Panel.DONE


def test_begin_rename_prefills_draft_with_cursor_at_end():
    board = Board(["old"], [])
    edit = EditState.begin_rename(board)
    assert edit.kind is EditKind.RENAME
    assert edit.draft == "old"
    assert edit.cursor == 3
    assert edit.mode is Mode.RENAME


def test_begin_rename_on_empty_list_returns_none():
    assert EditState.begin_rename(Board()) is None


def test_insert_text_at_cursor():
    edit = EditState(EditKind.INSERT, Panel.TODO, 0, "ac", cursor=1)
    edit.insert_text("b")
    assert edit.draft == "abc"
    assert edit.cursor == 2


def test_insert_text_drops_newlines():
    edit = EditState(EditKind.INSERT, Panel.TODO, 0)
    edit.insert_text("one\r\ntwo\n")
    assert edit.draft == "onetwo"
    edit.insert_text("\n")
    assert edit.draft == "onetwo"


def test_delete_back_and_forward_respect_bounds():
    edit = EditState(EditKind.INSERT, Panel.TODO, 0, "abc", cursor=0)
    edit.delete_back()
    assert edit.draft == "abc"
    edit.delete_forward()
    assert edit.draft == "bc" and edit.cursor == 0
    edit.cursor_end()
    edit.delete_forward()
    assert edit.draft == "bc"
    edit.delete_back()
    assert edit.draft == "b" and edit.cursor == 1


def test_cursor_movement_is_clamped():
    edit = EditState(EditKind.INSERT, Panel.TODO, 0, "ab", cursor=99)
    assert edit.cursor == 2
    edit.move_cursor(5)
    assert edit.cursor == 2
    edit.move_cursor(-10)
    assert edit.cursor == 0
    edit.cursor_end()
    assert edit.cursor == 2
    edit.cursor_home()
    assert edit.cursor == 0


def test_commit_insert_places_draft_and_selects_it():
    board = Board(["a", "b"], [])
    edit = EditState.begin_insert(board)
    edit.insert_text("x")
    edit.commit(board)
    assert board.todo.items == ["a", "x", "b"]
    assert board.todo.selected == 1


def test_commit_insert_with_empty_draft_adds_empty_item():
    board = Board([], [])
    EditState.begin_insert(board).commit(board)
    assert board.todo.items == [""]


def test_commit_rename_replaces_item():
    board = Board(["a", "old"], [])
    board.move_selection(1)
    edit = EditState.begin_rename(board)
    edit.delete_back()
    edit.delete_back()
    edit.delete_back()
    edit.insert_text("new")
    edit.commit(board)
    assert board.todo.items == ["a", "new"]
    assert board.todo.selected == 1


def test_commit_targets_the_panel_the_edit_started_in():
    board = Board(["a"], ["b"])
    edit = EditState.begin_insert(board)
    board.toggle_focus()
    edit.insert_text("c")
    edit.commit(board)
    assert board.todo.items == ["a", "c"]
    assert board.done.items == ["b"]


def test_mode_of():
    assert mode_of(None) is Mode.NAVIGATION
    assert mode_of(EditState(EditKind.RENAME, Panel.TODO, 0)) is Mode.RENAME


def test_insert_text_drops_controls_and_undecodable_bytes():
    edit = EditState(EditKind.INSERT, Panel.TODO, 0)
    edit.insert_text("caf\udce9")
    edit.insert_text("\tx\x1b\x7f")
    assert edit.draft == "cafx"
    assert edit.cursor == 4

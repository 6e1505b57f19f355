import pytest

from tictactoe.components.cell import Cell
from tictactoe.timeline import apply_move, current_view, jump_to, new_game, toggle_order
from tests.helpers import play


def test_new_game_seeds_single_empty_snapshot():
    timeline = new_game(4)
    assert timeline.side == 4
    assert len(timeline.history) == 1
    assert timeline.history[0] == (Cell.EMPTY,) * 16
    assert timeline.current_step == 0
    assert timeline.next_mover is Cell.X
    assert timeline.display_ascending


@pytest.mark.parametrize("side", [0, -1, 2.0, True, "3", None])
def test_new_game_rejects_invalid_side(side):
    with pytest.raises(ValueError):
        new_game(side)


def test_center_then_corner_then_occupied_center():
    timeline = new_game(3)
    assert apply_move(timeline, 4)
    assert timeline.current[4] is Cell.X
    assert timeline.next_mover is Cell.O
    assert len(timeline.history) == 2

    assert apply_move(timeline, 0)
    assert timeline.current[0] is Cell.O
    assert len(timeline.history) == 3

    assert not apply_move(timeline, 4)
    assert len(timeline.history) == 3


def test_repeated_move_on_occupied_cell_is_inert():
    timeline = play([0, 4])
    apply_move(timeline, 4)
    state = (len(timeline.history), timeline.current_step, timeline.next_mover)
    assert not apply_move(timeline, 4)
    assert (len(timeline.history), timeline.current_step, timeline.next_mover) == state


def test_alternating_top_row_is_not_a_win():
    timeline = play([0, 1, 2])
    assert timeline.current[:3] == (Cell.X, Cell.O, Cell.X)
    assert not current_view(timeline).result.decided


def test_x_completes_top_row():
    timeline = play([0, 3, 1, 4, 2])
    result = current_view(timeline).result
    assert result.decided
    assert result.winner is Cell.X
    assert result.cells == {0, 1, 2}


def test_moves_ignored_once_decided():
    timeline = play([0, 3, 1, 4, 2])
    assert not apply_move(timeline, 8)
    assert len(timeline.history) == 6
    assert timeline.current_step == 5


def test_full_board_without_line_ends_in_draw():
    timeline = play([0, 1, 2, 4, 3, 5, 7, 6, 8])
    view = current_view(timeline)
    assert view.result.decided and view.result.winner is None
    assert all(cell is not Cell.EMPTY for cell in view.board)


def test_out_of_range_move_is_contract_violation():
    timeline = new_game(3)
    with pytest.raises(IndexError):
        apply_move(timeline, 9)
    with pytest.raises(IndexError):
        apply_move(timeline, -1)
    assert len(timeline.history) == 1


def test_jump_recomputes_next_mover_from_parity():
    timeline = play([0, 1, 2])
    jump_to(timeline, 1)
    assert timeline.next_mover is Cell.O
    jump_to(timeline, 2)
    assert timeline.next_mover is Cell.X
    jump_to(timeline, 0)
    assert timeline.next_mover is Cell.X
    assert len(timeline.history) == 4


def test_jump_out_of_range_raises_without_clamping():
    timeline = play([0, 1])
    with pytest.raises(IndexError):
        jump_to(timeline, 3)
    with pytest.raises(IndexError):
        jump_to(timeline, -1)
    assert timeline.current_step == 2


def test_jump_round_trip_restores_view():
    timeline = play([4, 0, 8])
    before = current_view(timeline)
    step = timeline.current_step
    jump_to(timeline, 1)
    assert current_view(timeline) != before
    jump_to(timeline, step)
    assert current_view(timeline) == before


def test_jump_to_decided_snapshot_is_allowed():
    timeline = play([0, 3, 1, 4, 2])
    jump_to(timeline, 2)
    jump_to(timeline, 5)
    assert current_view(timeline).result.winner is Cell.X


def test_move_after_jump_discards_future():
    timeline = play([0, 1, 2, 3])
    jump_to(timeline, 1)
    assert apply_move(timeline, 8)
    assert len(timeline.history) == 3
    assert timeline.current_step == 2
    assert timeline.current[8] is Cell.O
    assert timeline.current[1] is Cell.EMPTY
    assert timeline.next_mover is Cell.X


def test_play_resumes_from_earlier_point_of_decided_game():
    timeline = play([0, 3, 1, 4, 2])
    jump_to(timeline, 4)
    assert apply_move(timeline, 8)
    assert not current_view(timeline).result.decided
    assert len(timeline.history) == 6


def test_consecutive_snapshots_differ_by_one_filled_cell():
    timeline = play([4, 0, 8, 2, 6])
    for prev, curr in zip(timeline.history, timeline.history[1:]):
        changed = [i for i, (a, b) in enumerate(zip(prev, curr)) if a is not b]
        assert len(changed) == 1
        assert prev[changed[0]] is Cell.EMPTY
        assert curr[changed[0]] is not Cell.EMPTY


def test_toggle_order_leaves_history_alone():
    timeline = play([4, 0])
    jump_to(timeline, 1)
    toggle_order(timeline)
    assert not timeline.display_ascending
    assert len(timeline.history) == 3
    assert timeline.current_step == 1
    toggle_order(timeline)
    assert timeline.display_ascending


def test_larger_board_needs_full_line():
    # X fills three of four cells in the top row of a 4x4 board.
    timeline = play([0, 4, 1, 5, 2, 6], side=4)
    assert not current_view(timeline).result.decided
    play([3], timeline=timeline)
    result = current_view(timeline).result
    assert result.winner is Cell.X
    assert result.cells == {0, 1, 2, 3}

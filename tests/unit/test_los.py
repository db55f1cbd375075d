"""
単体テスト: 視線判定のテスト
"""

import pytest
from src.engine import Board, Door, Feature, has_line_of_sight, trace_line


class LosBlocker(Feature):
    """視線だけを妨げるテスト用の地形効果"""

    def blocks_los(self) -> bool:
        return True


def _block(board, coord):
    square = board.get_square(*coord)
    square.add_feature(LosBlocker(square))


class TestLineOfSight:
    """視線判定のテストクラス"""

    @pytest.mark.parametrize("start, end, expected, blocker", [
        ((2, 2), (2, 0), True, None),       # 縦・遮蔽なし
        ((0, 2), (4, 2), True, None),       # 横・遮蔽なし
        ((2, 2), (2, 4), False, (2, 3)),    # 縦・遮蔽あり
        ((2, 2), (0, 0), True, None),       # 45°・遮蔽なし
        ((2, 2), (4, 4), False, (3, 3)),    # 45°・遮蔽あり
        ((0, 2), (4, 3), True, None),       # 浅い角度・遮蔽なし
        ((0, 1), (4, 2), False, (2, 2)),    # 浅い角度・遮蔽あり
        ((2, 2), (2, 2), True, None),       # 同じマス
        ((0, 0), (0, 4), True, None),       # 縦（盤端）
    ])
    def test_line_of_sight_cases(self, empty_board, start, end, expected, blocker):
        if blocker:
            _block(empty_board, blocker)
        a = empty_board.get_square(*start)
        b = empty_board.get_square(*end)
        assert has_line_of_sight(empty_board, a, b) == expected

    def test_blocker_next_to_viewer(self, empty_board):
        """(2,1) の遮蔽で (2,2) から (2,0) が見えなくなる"""
        a = empty_board.get_square(2, 2)
        b = empty_board.get_square(2, 0)
        assert has_line_of_sight(empty_board, a, b)
        _block(empty_board, (2, 1))
        assert not has_line_of_sight(empty_board, a, b)

    def test_endpoints_are_not_checked(self, empty_board):
        """始点・終点にある遮蔽は判定に含まない"""
        _block(empty_board, (2, 2))
        _block(empty_board, (2, 0))
        a = empty_board.get_square(2, 2)
        b = empty_board.get_square(2, 0)
        assert has_line_of_sight(empty_board, a, b)

    def test_same_square_is_always_visible(self, empty_board):
        """自分自身への視線は遮蔽があっても通る"""
        _block(empty_board, (1, 1))
        a = empty_board.get_square(1, 1)
        assert has_line_of_sight(empty_board, a, a)

    def test_door_blocks_until_opened(self, empty_board):
        """閉じたドアは視線を遮り、開けると通る"""
        square = empty_board.get_square(2, 1)
        door = Door(square)
        square.add_feature(door)
        a = empty_board.get_square(2, 2)
        b = empty_board.get_square(2, 0)

        assert not has_line_of_sight(empty_board, a, b)
        door.open()
        assert has_line_of_sight(empty_board, a, b)

    def test_adjacent_squares_always_visible(self):
        """隣接マス同士には途中のマスがない"""
        board = Board(3, 3)
        _block(board, (1, 1))
        assert has_line_of_sight(board, board.get_square(0, 0), board.get_square(1, 0))


class TestTraceLine:
    """線のたどり方のテストクラス"""

    def test_orthogonal(self):
        assert trace_line((2, 2), (2, 0)) == [(2, 2), (2, 1), (2, 0)]

    def test_diagonal(self):
        assert trace_line((0, 0), (3, 3)) == [(0, 0), (1, 1), (2, 2), (3, 3)]

    def test_oblique_rounds_half_up(self):
        assert trace_line((0, 1), (4, 2)) == [(0, 1), (1, 1), (2, 2), (3, 2), (4, 2)]

    def test_oblique_reverse_direction(self):
        # t=0.5 で y=1.5 は 2 に丸める
        assert trace_line((4, 2), (0, 1)) == [(4, 2), (3, 2), (2, 2), (1, 1), (0, 1)]

    def test_same_point(self):
        assert trace_line((1, 1), (1, 1)) == [(1, 1)]

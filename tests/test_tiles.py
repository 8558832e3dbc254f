"""
Tests for the flat index helpers and the hex neighbor offsets.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from tiles import neighbors, to_index, to_row_col


class TestIndex:
    def test_to_index(self):
        assert to_index(0, 0, 3) == 0
        assert to_index(1, 2, 3) == 5
        assert to_index(4, 4, 5) == 24

    @pytest.mark.parametrize("size", [2, 3, 5, 11])
    def test_row_col_inverts_index(self, size):
        for r in range(size):
            for c in range(size):
                assert to_row_col(to_index(r, c, size), size) == (r, c)


class TestNeighbors:
    def test_middle_cell(self):
        """Center of a 3x3 board touches six cells, not (0,2) or (2,0)"""
        assert neighbors(1, 1, 3) == (5, 3, 7, 1, 8, 0)

    def test_corner_goes_out_of_range(self):
        candidates = neighbors(0, 0, 3)
        assert candidates == (1, -1, 3, -3, 4, -4)
        assert [i for i in candidates if 0 <= i < 9] == [1, 3, 4]

    def test_last_column_wraps_to_next_row(self):
        """The +1 and +size+1 offsets of (0,2) land on (1,0) and (2,0)"""
        candidates = neighbors(0, 2, 3)
        assert candidates == (3, 1, 5, -1, 6, -2)
        assert to_row_col(3, 3) == (1, 0)
        assert to_row_col(6, 3) == (2, 0)

    def test_bottom_right_corner(self):
        assert neighbors(2, 2, 3) == (9, 7, 11, 5, 12, 4)

    @pytest.mark.parametrize("size", [2, 4, 7])
    def test_offsets_are_symmetric(self, size):
        """If b is a candidate of a then a is a candidate of b"""
        n = size * size
        for a in range(n):
            for b in neighbors(*to_row_col(a, size), size):
                if 0 <= b < n:
                    assert a in neighbors(*to_row_col(b, size), size)

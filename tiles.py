"""Translate board coordinates to flat cell indices"""


def to_index(row: int, col: int, size: int) -> int:
    return row * size + col


def to_row_col(index: int, size: int) -> tuple[int, int]:
    return index // size, index % size


def neighbors(row: int, col: int, size: int) -> tuple[int, ...]:
    """The six candidate hex neighbors of (row, col).

    Plain offsets from the flat index, so cells on the left and right
    edges pick up candidates that wrap onto the adjacent row, and cells
    on the top and bottom rows get indices outside the board. Callers
    must bounds check every value.
    """
    S = size
    index = to_index(row, col, S)
    return (
        index + 1,
        index - 1,
        index + S,
        index - S,
        index + S + 1,
        index - S - 1,
    )

import logging
from enum import IntEnum

import numpy as np
import numpy.typing as npt

from tiles import to_index, to_row_col
from unionfind import EMPTY, EdgePolicy, UnionFind

log = logging.getLogger(__name__)


class Player(IntEnum):
    WHITE = 1
    BLACK = -1
    # aliases by turn order
    FIRST = 1
    SECOND = -1


class IslandGame:
    """Two players claiming cells on a size x size hex board.

    Each player has its own UnionFind over every cell. A cell can be
    claimed by one player only, and a player wins by connecting the
    first row to the last. The score of a player is its number of
    islands. Turn order is up to the caller.
    """

    def __init__(self, size: int, policy: EdgePolicy = EdgePolicy.RESOLVE):
        if size <= 1:
            raise ValueError(f"Game size must be > 1, got {size}")
        S = self.size = size
        self.engines = {
            Player.WHITE: UnionFind(S * S, policy),
            Player.BLACK: UnionFind(S * S, policy),
        }
        self.winner: Player | None = None

    def engine(self, player: Player) -> UnionFind:
        return self.engines[Player(player)]

    def index(self, r: int, c: int) -> int:
        return to_index(r, c, self.size)

    def rc(self, index: int) -> tuple[int, int]:
        return to_row_col(index, self.size)

    def can_play(self, row: int, col: int) -> bool:
        S = self.size
        if row < 0 or row >= S:
            raise ValueError(f"Row {row} out of bounds, must be between 0 and {S - 1}")
        if col < 0 or col >= S:
            raise ValueError(
                f"Column {col} out of bounds, must be between 0 and {S - 1}"
            )
        index = self.index(row, col)
        return all(engine.is_empty(index) for engine in self.engines.values())

    def make_play(self, row: int, col: int, player: Player) -> bool:
        """Claim (row, col) for player and report whether that player has won"""
        engine = self.engine(player)
        if not self.can_play(row, col):
            log.debug("rejected %s at (%d, %d)", Player(player).name, row, col)
            raise ValueError(f"Choose another tile, ({row}, {col}) is taken")
        engine.process_tile(row, col, self.size)
        over = engine.game_over()
        if over and self.winner is None:
            self.winner = Player(player)
            log.debug("%s connects top to bottom", self.winner.name)
        return over

    def score(self, player: Player) -> int:
        return self.engine(player).number_of_islands()

    def white_score(self) -> int:
        return self.score(Player.WHITE)

    def black_score(self) -> int:
        return self.score(Player.BLACK)

    def board(self) -> npt.NDArray[np.int8]:
        """Flat board with Player values in claimed cells and 0 elsewhere"""
        board = np.zeros(self.size * self.size, dtype=np.int8)
        for player, engine in self.engines.items():
            board[engine.parent != EMPTY] = player
        return board

    def legal_moves(self) -> npt.NDArray[np.intp]:
        return np.where(self.board() == 0)[0]

    def __str__(self):
        chars = {Player.WHITE: "X", Player.BLACK: "O", 0: "_"}
        S = self.size
        board = self.board()
        lines = []
        for r in range(S):
            index = r * S
            cells = board[index : index + S]
            lines.append(" " * r + " ".join(chars[int(c)] for c in cells))
        return "\n".join(lines)

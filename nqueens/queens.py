import enum
import logging

from nqueens.helpers.Board import Board, build_attack_masks

logger = logging.getLogger(__name__)

UNSET = -1


class Mode(enum.Enum):
    FIND_ALL = "all"
    FIND_FIRST = "first"

    def is_satisfied(self, solution_count: int) -> bool:
        """True once the search has collected enough solutions for this mode."""
        return self is Mode.FIND_FIRST and solution_count > 0


def is_valid_solution(solution: list[int]) -> bool:
    """
    Check that no two queens of a complete assignment attack each other.

    Args:
        solution (list[int]): solution[col] = row of the queen in that column.

    Returns:
        bool: True if every row and diagonal holds at most one queen.

    Examples:
        >>> is_valid_solution([1, 3, 0, 2])
        True
        >>> is_valid_solution([0, 6, 4, 7, 3, 1, 2, 5])
        False
    """
    n = len(solution)
    seen_rows, seen_diag1, seen_diag2 = set(), set(), set()

    for col, row in enumerate(solution):
        if not 0 <= row < n or row in seen_rows or (row - col) in seen_diag1 or (row + col) in seen_diag2:
            return False
        seen_rows.add(row)
        seen_diag1.add(row - col)
        seen_diag2.add(row + col)

    return True


class Solver:
    def __init__(self, n: int, attack_masks: list[int], fixed_queens=(), stop_after_first: bool = False):
        """
        Initialize an n-Queens solver.

        Args:
            n (int): Board dimension (n x n).
            attack_masks (list[int]): Per-column rows forbidden by fixed queens.
            fixed_queens (Iterable[tuple[int, int]]): (row, col) of each fixed queen.
            stop_after_first (bool): Stop searching once one solution is found.
        """
        self.n = n
        self.mode = Mode.FIND_FIRST if stop_after_first else Mode.FIND_ALL
        self.all_ones = (1 << n) - 1
        self.attack_masks = list(attack_masks)
        self.queens = [UNSET] * n  # queens[col] = row, or UNSET while searching
        for row, col in fixed_queens:
            self.queens[col] = row
        self.all_solutions = []
        self.solved = False

    @classmethod
    def from_board(cls, board: Board, stop_after_first: bool = False):
        return cls(board.n, board.attack_masks(), board.queens, stop_after_first)

    @property
    def solutions(self) -> list[list[int]]:
        return self.run()

    def run(self) -> list[list[int]]:
        """
        Find the solutions allowed by the mode, searching only on the first call.

        Returns:
            list[list[int]]: Solutions in discovery order, each one row index per column.

        Examples:
            >>> len(Solver(8, [0] * 8).run())
            92
            >>> Solver(5, build_attack_masks(5, [(0, 0)]), [(0, 0)], stop_after_first=True).run()
            [[0, 2, 4, 1, 3]]
        """
        if not self.solved:
            self.search(0, 0, 0, 0)
            self.solved = True
            logger.debug("%d-queens search (%s) found %d solutions",
                         self.n, self.mode.value, len(self.all_solutions))
        return self.all_solutions

    def search(self, col: int, rows: int, left_diagonals: int, right_diagonals: int):
        """
        Recursive backtracking helper.

        The three masks hold, for column col, the rows attacked by queens
        already placed in columns 0..col-1: along rows, along "/" diagonals
        and along "\\" diagonals.

        Args:
            col (int): Current column being filled.
            rows (int): Rows taken by earlier queens.
            left_diagonals (int): Rows hit by earlier "/" diagonals.
            right_diagonals (int): Rows hit by earlier "\\" diagonals.
        """
        if self.mode.is_satisfied(len(self.all_solutions)):
            return

        # Base case: all columns filled → one full solution found
        if col == self.n:
            self.all_solutions.append(self.queens.copy())
            return

        # Fixed queens are already covered by the static attack masks
        if self.queens[col] != UNSET:
            self.search(col + 1, rows, left_diagonals >> 1, (right_diagonals << 1) & self.all_ones)
            return

        available = self.all_ones & ~(rows | left_diagonals | right_diagonals | self.attack_masks[col])

        while available:
            position = available & -available
            self.queens[col] = position.bit_length() - 1
            self.search(
                col + 1,
                rows | position,
                (left_diagonals | position) >> 1,
                ((right_diagonals | position) << 1) & self.all_ones,
            )
            # Backtrack
            self.queens[col] = UNSET
            available ^= position

    def prettify(self, solution: list[int]) -> str:
        """
        Convert a solution into a human-readable board string.

        Examples:
            >>> print(Solver(4, [0] * 4).prettify([1, 3, 0, 2]))
             · · ♛ ·
             ♛ · · ·
             · · · ♛
             · ♛ · ·
        """
        return Board(self.n).render(solution)

    def __str__(self) -> str:
        """Return a summary of how many solutions were found."""
        return f"{self.n}-Queens has {len(self.run())} solutions"


def solve(n: int, fixed_queens=(), stop_after_first: bool = False) -> list[list[int]]:
    """Build the attack masks for fixed_queens and run a solver over them."""
    fixed_queens = list(fixed_queens)
    masks = build_attack_masks(n, fixed_queens)
    return Solver(n, masks, fixed_queens, stop_after_first).run()


if __name__ == "__main__":
    solver = Solver(8, [0] * 8)
    print(solver.prettify(solver.run()[0]))
    print(solver)

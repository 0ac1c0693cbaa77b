import logging

from nqueens.errors import BoardFormatError, ConflictError

logger = logging.getLogger(__name__)

MIN_BOARD_SIZE = 4
MAX_BOARD_SIZE = 128

QUEEN = "Q"
EMPTY = "0"

# (row step, column step) for every direction a queen attacks along
QUEEN_MOVES = [
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
    (0, -1),
    (1, -1),
]


def build_attack_masks(n: int, fixed_queens) -> list[int]:
    """
    Compute, for each column, the rows a new queen may not use.

    Bit r of masks[c] is set when square (r, c) holds a fixed queen or lies
    on one of its rays.

    Args:
        n (int): Board size.
        fixed_queens (Iterable[tuple[int, int]]): (row, col) of each fixed queen.

    Returns:
        list[int]: One bitmask per column.

    Raises:
        ConflictError: If two fixed queens attack each other.

    Examples:
        >>> [bin(m) for m in build_attack_masks(4, [(0, 2), (1, 0), (2, 3)])]
        ['0b1111', '0b111', '0b1111', '0b1111']
    """
    masks = [0] * n

    for row, col in fixed_queens:
        if masks[col] & (1 << row):
            raise ConflictError(
                "Invalid configuration. There are two queens attacking each other."
            )

        masks[col] |= 1 << row

        for d_row, d_col in QUEEN_MOVES:
            r, c = row + d_row, col + d_col
            while 0 <= r < n and 0 <= c < n:
                masks[c] |= 1 << r
                r += d_row
                c += d_col

    logger.debug("attack masks for n=%d: %s", n, [bin(m) for m in masks])
    return masks


def check_board_size(n) -> int:
    """Return n if it is a supported board size, else raise BoardFormatError."""
    if isinstance(n, bool) or not isinstance(n, int) or not MIN_BOARD_SIZE <= n <= MAX_BOARD_SIZE:
        raise BoardFormatError(
            f"Board size must be between {MIN_BOARD_SIZE} and {MAX_BOARD_SIZE}."
        )
    return n


class Board:
    """
    An n x n board with optional pre-placed queens.
    Handles reading the text grid format, attack maps and rendering.
    """

    queen_glyph = "♛"
    empty_glyph = "·"

    def __init__(self, n: int, queens=()):
        """
        Initialize a board.

        Args:
            n (int): Board size (n x n).
            queens (Iterable[tuple[int, int]]): (row, col) of each fixed queen.

        Raises:
            BoardFormatError: If n is unsupported or a queen is off the board.
        """
        self.n = check_board_size(n)
        self.queens = []
        for queen in queens:
            try:
                row, col = queen
            except (TypeError, ValueError):
                raise BoardFormatError(f"Invalid queen coordinate: {queen!r}.") from None
            if not all(isinstance(v, int) and not isinstance(v, bool) for v in (row, col)):
                raise BoardFormatError(f"Invalid queen coordinate: {queen!r}.")
            if not (0 <= row < n and 0 <= col < n):
                raise BoardFormatError(f"Queen ({row}, {col}) is outside the {n}x{n} board.")
            self.queens.append((row, col))

    @classmethod
    def from_lines(cls, n: int, lines):
        """
        Read the queens of an n x n grid of 'Q' and '0' characters.

        Args:
            n (int): Board size.
            lines (Iterable[str]): At least n lines; only the first n are read.

        Returns:
            Board: Board holding the queens found in the grid.
        """
        check_board_size(n)
        queens = []
        lines = iter(lines)

        for row in range(n):
            line = next(lines, "").strip()
            if len(line) != n:
                raise BoardFormatError(f"The input is not a square matrix of size {n}.")

            for col, char in enumerate(line):
                if char == QUEEN:
                    queens.append((row, col))
                elif char != EMPTY:
                    raise BoardFormatError("The input must be a matrix of characters 'Q' and '0'.")

        return cls(n, queens)

    @classmethod
    def from_text(cls, text: str):
        """
        Parse a board size line followed by the grid.

        Examples:
            >>> Board.from_text("4\\n0Q00\\n0000\\n0000\\n0000\\n").queens
            [(0, 1)]
        """
        lines = text.splitlines()
        if not lines:
            raise BoardFormatError("The input is empty.")
        try:
            n = int(lines[0].strip())
        except ValueError:
            raise BoardFormatError(
                f"Board size must be between {MIN_BOARD_SIZE} and {MAX_BOARD_SIZE}."
            ) from None
        return cls.from_lines(n, lines[1:])

    def attack_masks(self) -> list[int]:
        return build_attack_masks(self.n, self.queens)

    def render(self, solution) -> str:
        """
        Draw a solution with queen glyphs.

        Args:
            solution (list[int]): solution[col] = row of the queen in that column.

        Returns:
            str: One line per row, each cell preceded by a space.
        """
        lines = []
        for row in range(self.n):
            cells = [
                self.queen_glyph if solution[col] == row else self.empty_glyph
                for col in range(self.n)
            ]
            lines.append("".join(" " + cell for cell in cells))
        return "\n".join(lines)

    def __str__(self):
        """Return the fixed queens in the input grid format."""
        grid = [[EMPTY] * self.n for _ in range(self.n)]
        for row, col in self.queens:
            grid[row][col] = QUEEN
        return "\n".join("".join(row) for row in grid)

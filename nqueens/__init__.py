from nqueens.errors import BoardFormatError, ClientError, ConflictError, NQueensError
from nqueens.helpers.Board import Board, build_attack_masks
from nqueens.queens import Mode, Solver, is_valid_solution, solve

__all__ = [
    "Board",
    "BoardFormatError",
    "ClientError",
    "ConflictError",
    "Mode",
    "NQueensError",
    "Solver",
    "build_attack_masks",
    "is_valid_solution",
    "solve",
]

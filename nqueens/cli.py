import argparse
import logging
import sys

from nqueens.client import SolverClient
from nqueens.errors import NQueensError, BoardFormatError
from nqueens.helpers.Board import Board, MAX_BOARD_SIZE, MIN_BOARD_SIZE, check_board_size
from nqueens.queens import Solver

logger = logging.getLogger(__name__)

PROMPT = "Find all solutions? [y/n]: "
NO_SOLUTIONS = "There are no solutions for the configuration provided."


def read_board(stream) -> Board:
    """Read the size line and then the n grid lines from stream."""
    first = stream.readline()
    try:
        n = int(first.strip())
    except ValueError:
        raise BoardFormatError(
            f"Board size must be between {MIN_BOARD_SIZE} and {MAX_BOARD_SIZE}."
        ) from None
    return Board.from_lines(check_board_size(n), (stream.readline() for _ in range(n)))


def ask_find_all(stream, out) -> bool:
    while True:
        out.write(PROMPT)
        out.flush()
        answer = stream.readline()
        if not answer:
            # EOF: default to every solution
            out.write("\n")
            return True
        answer = answer.strip().lower()
        if answer in ("y", "yes"):
            return True
        if answer in ("n", "no"):
            return False


def build_parser():
    parser = argparse.ArgumentParser(
        prog="nqueens",
        description="Complete an n-queens board read from stdin: a size line, then n rows of 'Q' and '0'.",
    )
    parser.add_argument("--file", type=argparse.FileType("r", encoding="utf-8"),
                        help="read the board from this file instead of stdin")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--all", dest="find_all", action="store_true", default=None,
                      help="print every solution")
    mode.add_argument("--first", dest="find_all", action="store_false",
                      help="print only the first solution")
    parser.add_argument("--count", action="store_true", help="print only the number of solutions")
    parser.add_argument("--server", metavar="URL", help="solve on a running nqueens-server")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    return parser


def main(argv=None, stdin=None, stdout=None):
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        board = read_board(args.file or stdin)
        find_all = args.find_all if args.find_all is not None else ask_find_all(stdin, stdout)

        if args.server:
            response = SolverClient(args.server).solve(
                n=board.n, queens=board.queens, stop_after_first=not find_all)
            solutions = response["solutions"]
        else:
            solutions = Solver.from_board(board, stop_after_first=not find_all).run()
    except NQueensError as e:
        logger.debug("aborting", exc_info=True)
        print(e, file=sys.stderr)
        return 1
    finally:
        if args.file:
            args.file.close()

    if args.count:
        print(len(solutions), file=stdout)
        return 0

    if not solutions:
        print(NO_SOLUTIONS, file=stdout)
        return 0

    for solution in solutions:
        print(board.render(solution), file=stdout)
        print(file=stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())

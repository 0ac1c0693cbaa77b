from flask import Flask, jsonify, request
import os
import traceback

from nqueens.errors import BoardFormatError, ConflictError
from nqueens.helpers.Board import Board, MAX_BOARD_SIZE, MIN_BOARD_SIZE
from nqueens.queens import Mode, Solver

TITLE = "N-Queens Solver"


def create_app(config=None):
    app = Flask(__name__)
    app.config.update(MAX_BOARD_SIZE=MAX_BOARD_SIZE, DEFAULT_MODE=Mode.FIND_ALL.value)
    # e.g. NQUEENS_MAX_BOARD_SIZE=16 NQUEENS_DEFAULT_MODE=first
    app.config.from_prefixed_env("NQUEENS")
    if config:
        app.config.update(config)
    app.config["MAX_BOARD_SIZE"] = min(int(app.config["MAX_BOARD_SIZE"]), MAX_BOARD_SIZE)

    register_routes(app)
    return app


# ---------------- Request Helpers ---------------- #

def parse_mode(value, default):
    try:
        return Mode(value if value is not None else default)
    except ValueError:
        raise BoardFormatError("mode must be 'all' or 'first'.") from None


def board_from_payload(data, max_size):
    """Build a Board from either a text grid or an n + queens pair."""
    if "board" in data:
        lines = data["board"]
        if isinstance(lines, str):
            lines = lines.splitlines()
        if not isinstance(lines, list) or not all(isinstance(line, str) for line in lines):
            raise BoardFormatError("board must be a list of rows.")
        board = Board.from_lines(data.get("n", len(lines)), lines)
    elif "n" in data:
        queens = data.get("queens") or []
        if not isinstance(queens, list):
            raise BoardFormatError("queens must be a list of [row, col] pairs.")
        board = Board(data["n"], queens)
    else:
        raise BoardFormatError("Request must contain 'n' or 'board'.")

    if board.n > max_size:
        raise BoardFormatError(f"Board size must be between {MIN_BOARD_SIZE} and {max_size}.")
    return board


# ---------------- Routes ---------------- #

def register_routes(app):

    @app.errorhandler(BoardFormatError)
    def bad_board(e):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(ConflictError)
    def conflicting_queens(e):
        return jsonify({"error": str(e)}), 409

    @app.route("/")
    def index():
        return jsonify({
            "title": TITLE,
            "min_board_size": MIN_BOARD_SIZE,
            "max_board_size": app.config["MAX_BOARD_SIZE"],
        })

    @app.route("/solve", methods=["POST"])
    def solve():
        try:
            data = request.get_json(silent=True)
            if not isinstance(data, dict):
                raise BoardFormatError("Request body must be a JSON object.")

            mode = parse_mode(data.get("mode"), app.config["DEFAULT_MODE"])
            board = board_from_payload(data, app.config["MAX_BOARD_SIZE"])
            solutions = Solver.from_board(board, stop_after_first=mode is Mode.FIND_FIRST).run()

            app.logger.info("Solved %d-queens with %d fixed queens (%s): %d solutions",
                            board.n, len(board.queens), mode.value, len(solutions))

            result = {
                "n": board.n,
                "mode": mode.value,
                "count": len(solutions),
                "solutions": solutions,
            }
            if data.get("render"):
                result["boards"] = [board.render(solution) for solution in solutions]
            return jsonify(result)

        except (BoardFormatError, ConflictError):
            raise
        except Exception:
            app.logger.error("Error solving board:\n%s", traceback.format_exc())
            return jsonify({"error": "Server error."}), 500


app = create_app()


def main():
    port = int(os.environ.get("PORT", 8080))
    app.run(debug=bool(os.environ.get("FLASK_DEBUG")), port=port)


if __name__ == "__main__":
    main()

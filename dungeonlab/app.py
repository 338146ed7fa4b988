import logging

from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

# Use absolute imports from the 'dungeonlab' package.
from dungeonlab import puzzle_handler as pz
from dungeonlab import constants as const
from dungeonlab.errors import ParseError, PuzzleNotFoundError, Unsolvable
from dungeonlab.solver import DungeonSolver
from dungeonlab.validator import check_solved, maybe_solvable
from dungeonlab.z3_solver import Z3DungeonSolver

app = Flask(__name__)
CORS(app)


def _board_from_request():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        raise ParseError("The request body must be a JSON object")
    board_string = data.get('board')
    if not isinstance(board_string, str):
        raise ParseError("Missing board in request")
    return pz.parse_board(board_string), data


def _error_payload(error):
    return error.to_dict() if error else None


# ParseError is a ValueError, so malformed boards end up here too.
@app.errorhandler(ValueError)
def handle_value_error(e):
    logging.warning(f"Rejected request: {e}")
    return jsonify({'error': str(e)}), 400


@app.errorhandler(Exception)
def handle_unexpected_error(e):
    if isinstance(e, HTTPException):
        return e
    logging.error(f"Error in {request.path}: {e}")
    return jsonify({'error': 'An internal error occurred'}), 500


@app.route('/api/puzzles', methods=['GET'])
def get_puzzles():
    return jsonify({'puzzles': pz.list_puzzles()})


@app.route('/api/puzzles/<name>', methods=['GET'])
def get_puzzle(name):
    try:
        board = pz.load_puzzle(name)
    except PuzzleNotFoundError:
        return jsonify({'error': f"Unknown puzzle '{name}'"}), 404
    return jsonify({'name': name, 'board': pz.format_board(board)})


@app.route('/api/check', methods=['POST'])
def check_board():
    board, _ = _board_from_request()
    error = check_solved(board)
    return jsonify({'isValid': error is None, 'error': _error_payload(error)})


@app.route('/api/feasible', methods=['POST'])
def check_feasible():
    board, _ = _board_from_request()
    error = maybe_solvable(board)
    return jsonify({'isFeasible': error is None, 'error': _error_payload(error)})


@app.route('/api/solve', methods=['POST'])
def find_solution():
    board, data = _board_from_request()
    engine = data.get('engine', const.ENGINE_BACKTRACKING)
    if engine not in const.SOLVER_ENGINES:
        return jsonify({'error': f"Unknown engine '{engine}'"}), 400
    unique = data.get('unique', False)
    if not isinstance(unique, bool):
        return jsonify({'error': "'unique' must be true or false"}), 400
    if unique and engine != const.ENGINE_Z3:
        return jsonify({'error': "Uniqueness checks need the z3 engine"}), 400

    logging.info(f"/api/solve with engine={engine} unique={unique}")
    response = {}
    if engine == const.ENGINE_Z3:
        solver = Z3DungeonSolver(board)
        solutions = solver.find_solutions(2 if unique else 1)
        error = None if solutions else Unsolvable()
        if solutions:
            board = solutions[0]
        if unique:
            response['isUnique'] = len(solutions) == 1
    else:
        error = DungeonSolver(board).solve()

    response.update({
        'solved': error is None,
        'solution': pz.format_board(board) if error is None else None,
        'error': _error_payload(error),
    })
    return jsonify(response)

# --- File: queenslab/app.py ---
import logging
import random

from flask import Flask, jsonify, request
from flask_cors import CORS

from queenslab import puzzle_handler as pz
from queenslab import constants as const
from queenslab.generator import generate_level
from queenslab.models import InvalidGridError, check_region_grid
from queenslab.solver import solve_placement
from queenslab.validator import validate_board
from queenslab.z3_solver import Z3QueensSolver

app = Flask(__name__)
CORS(app)


def _json_body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else None


def _region_grid_from(data):
    """Reads the layout either as a regionGrid matrix or as a comma-separated task string."""
    if data.get('regionGrid') is not None:
        return data['regionGrid']
    if data.get('task') is not None:
        if not isinstance(data['task'], str):
            raise InvalidGridError("Task must be a string of comma-separated region ids.")
        region_grid, _ = pz.parse_and_validate_grid(data['task'])
        if region_grid is None:
            raise InvalidGridError("Task string is not a square grid of region ids.")
        return region_grid
    return None


def _check_api_size(size):
    if not const.MIN_API_SIZE <= size <= const.MAX_API_SIZE:
        raise InvalidGridError(f"Size must be between {const.MIN_API_SIZE} and {const.MAX_API_SIZE}.")


@app.route('/api/new_puzzle', methods=['GET'])
def get_new_puzzle():
    try:
        size = int(request.args.get('size', const.DEFAULT_SIZE))
        seed = request.args.get('seed')
        rng = random.Random(int(seed)) if seed is not None else None
        _check_api_size(size)
    except ValueError as e:
        return jsonify({'error': str(e) or 'Invalid size or seed'}), 400
    try:
        level = generate_level(size, rng)
        return jsonify(pz.level_to_dict(level))
    except Exception as e:
        logging.error(f"Error in /api/new_puzzle: {e}")
        return jsonify({'error': 'An internal error occurred'}), 500


@app.route('/api/validate', methods=['POST'])
def check_board():
    data = _json_body()
    if data is None:
        return jsonify({'error': 'Request body must be a JSON object'}), 400
    try:
        region_grid, player_grid = _region_grid_from(data), data.get('playerGrid')
        if region_grid is None or player_grid is None:
            return jsonify({'error': 'Missing regionGrid (or task) or playerGrid in request'}), 400
        grid = pz.grid_from_payload(region_grid, player_grid)
        _check_api_size(len(grid))
    except InvalidGridError as e:
        return jsonify({'error': str(e)}), 400
    try:
        return jsonify(pz.result_to_dict(validate_board(grid)))
    except Exception as e:
        logging.error(f"Error in /api/validate: {e}")
        return jsonify({'error': 'An internal error occurred'}), 500


@app.route('/api/solve', methods=['POST'])
def find_solution():
    data = _json_body()
    if data is None:
        return jsonify({'error': 'Request body must be a JSON object'}), 400
    try:
        region_grid = _region_grid_from(data)
        if region_grid is None:
            return jsonify({'error': 'Missing regionGrid or task in request'}), 400
        size = check_region_grid(region_grid)
        _check_api_size(size)
    except InvalidGridError as e:
        return jsonify({'error': str(e)}), 400
    try:
        placement = solve_placement(region_grid, size)
        if placement is None:
            return jsonify({'solution': None, 'unique': False})
        unique = Z3QueensSolver(region_grid).is_unique()
        return jsonify({'solution': [[row, col] for row, col in enumerate(placement)], 'unique': unique})
    except Exception as e:
        logging.error(f"Error in /api/solve: {e}")
        return jsonify({'error': 'An internal error occurred'}), 500

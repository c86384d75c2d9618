"""
Regional Queens Lab - Core Package
Level generation, solvability checking and board validation.
"""
from .generator import generate_level
from .validator import validate_board
from .models import Cell, CellState, Level, ValidationResult, InvalidGridError

__all__ = ['generate_level', 'validate_board', 'Cell', 'CellState', 'Level', 'ValidationResult', 'InvalidGridError']

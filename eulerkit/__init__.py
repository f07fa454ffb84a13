"""Solvers for classic recreational mathematics problems: primes, squares, chains, Roman numerals, Sudoku, paths, dice and more."""

__version__ = "1.0.0"
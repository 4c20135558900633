"""Small studies: weighted graphs and a poet, turtle geometry, and minesweeper."""

__version__ = "1.0.0"
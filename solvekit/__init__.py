"""Classic algorithm solutions for trees, grids, graphs, dynamic programming, sequences, strings and data structures."""

__version__ = "0.1.0"
__all__ = ["dynamic", "graphs", "grids", "sequences", "strings", "structures", "tree"]
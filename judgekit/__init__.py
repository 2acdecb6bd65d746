"""Solutions to classic algorithm puzzles: dp, graphs, flow, vectors, arrays and text."""

__version__ = "0.1.0"
__all__ = ["dp", "graphs", "flow", "vectors", "arrays", "text"]
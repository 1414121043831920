"""Classic algorithm solutions over plain Python data: string and sequence
dynamic programming, stock trading, heaps, grids and counting."""

__version__ = "0.1.0"
__all__ = ["textdp", "stocks", "sequences", "heaps", "grids", "counting"]
"""Bitboard draughts engine with move generation, Monte Carlo tree search and human players."""

__version__ = "0.1.0"
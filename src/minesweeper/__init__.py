"""
Minesweeper game module.

Provides core game logic including board management and cell state,
plus a text renderer and command line front end.
"""
from .cell import Cell, CellState, CellView, MINE_SENTINEL
from .board import Board, BoardConfig, GameStatus, DEFAULT_CONFIG

__all__ = [
    "Cell",
    "CellState",
    "CellView",
    "MINE_SENTINEL",
    "Board",
    "BoardConfig",
    "GameStatus",
    "DEFAULT_CONFIG",
]

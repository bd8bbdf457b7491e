"""Single-player Snake on a fixed grid, drawn with pygame."""
from .direction import Direction, opposite
from .snake import Snake
from .game import Game, GameSnapshot

__all__ = ["Direction", "opposite", "Snake", "Game", "GameSnapshot"]

from .score import Score
from .app import App, Move, PlayerSession

__all__ = ["App", "Move", "PlayerSession", "Score"]

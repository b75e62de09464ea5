from .game import GameConfig, WordGame
from .core import GameResult, play_game, run_case, run_batch, summarize

__all__ = ["GameConfig", "WordGame", "GameResult", "play_game", "run_case", "run_batch", "summarize"]

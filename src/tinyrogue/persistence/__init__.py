from .highscore import HighScoreRepository, HighScoreStore, default_highscore_path

__all__ = ["HighScoreRepository", "HighScoreStore", "default_highscore_path"]

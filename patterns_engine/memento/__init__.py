from .score import SavedScore, ScorePlayer, DefaultScorePlayer
from .slots import SaveSlots

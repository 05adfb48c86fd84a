from .exercise import ExerciseType
from .session import TrainingEntry, TrainingSession
from .user import User

__all__ = ["ExerciseType", "TrainingSession", "TrainingEntry", "User"]

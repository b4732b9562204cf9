from app.models.user import User
from app.models.trainee import Trainee, BeltEnum, GenderEnum
from app.models.session import TrainingSession
from app.models.progress import TraineeProgress, FormRecord
from app.models.belt_summary import BeltSummary
from app.models.post import Post, PostLike, PostComment
from app.models.resource import Resource, ResourceTypeEnum

__all__ = [
    "User",
    "Trainee", "BeltEnum", "GenderEnum",
    "TrainingSession",
    "TraineeProgress", "FormRecord",
    "BeltSummary",
    "Post", "PostLike", "PostComment",
    "Resource", "ResourceTypeEnum",
]

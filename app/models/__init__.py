"""Models module - Import all models here for Alembic."""
from app.db.base import Base
from app.models.mcq import MCQ, Choice
from app.models.attempt import Attempt

__all__ = ["Base", "MCQ", "Choice", "Attempt"]

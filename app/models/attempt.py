"""
Attempt model - one recorded selection against an MCQ.
"""
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship

from app.db.base import Base
from app.db.booleans import StorageBoolean
from app.models.mcq import utcnow


class Attempt(Base):
    """Append-only attempt record with correctness snapshotted at write time."""

    __tablename__ = "attempts"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    mcq_id = Column(Integer, ForeignKey("mcqs.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(String, nullable=False, index=True)

    # Choice rows are replaced on every MCQ update; the snapshots below keep
    # history readable once this reference is nulled.
    selected_choice_id = Column(Integer, ForeignKey("choices.id", ondelete="SET NULL"), nullable=True)
    selected_choice_text = Column(Text, nullable=False)
    is_correct = Column(StorageBoolean, nullable=False)

    attempted_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    # Relationships
    mcq = relationship("MCQ", back_populates="attempts")
    selected_choice = relationship("Choice")

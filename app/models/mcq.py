"""
MCQ (Multiple Choice Question) and Choice models.
"""
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from app.db.base import Base
from app.db.booleans import StorageBoolean


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MCQ(Base):
    """Multiple Choice Question owned by a single identity."""

    __tablename__ = "mcqs"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    description = Column(String(500), nullable=True)
    question = Column(Text, nullable=False)
    created_by = Column(String, nullable=False, index=True)  # opaque identity, never changes
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    # Relationships
    choices = relationship(
        "Choice",
        back_populates="mcq",
        order_by="Choice.order_index",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    attempts = relationship(
        "Attempt",
        back_populates="mcq",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class Choice(Base):
    """One answer option of an MCQ."""

    __tablename__ = "choices"
    __table_args__ = (
        UniqueConstraint("mcq_id", "order_index", name="uq_choices_mcq_order"),
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, index=True)
    mcq_id = Column(Integer, ForeignKey("mcqs.id", ondelete="CASCADE"), nullable=False, index=True)
    choice_text = Column(Text, nullable=False)
    is_correct = Column(StorageBoolean, nullable=False, default=False)
    order_index = Column(Integer, nullable=False)

    # Relationships
    mcq = relationship("MCQ", back_populates="choices")

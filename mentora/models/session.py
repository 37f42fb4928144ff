# mentora/models/session.py
import enum

from sqlalchemy import TIMESTAMP, CheckConstraint, Column, Enum, ForeignKey, Index, Integer, String, Text, func, text
from sqlalchemy.orm import relationship

from mentora.database import Base


class SessionStatus(str, enum.Enum):
    SCHEDULED = "SCHEDULED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
    # Kept for stored-data compatibility; nothing transitions into it.
    PENDING_FEEDBACK = "PENDING_FEEDBACK"


class Session(Base):
    __tablename__ = "sessions"

    id = Column(Integer, primary_key=True, index=True)
    mentor_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    mentee_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    # Wall-clock time of the booked slot, stored without a timezone.
    date = Column(TIMESTAMP, nullable=False)
    status = Column(Enum(SessionStatus), nullable=False, default=SessionStatus.SCHEDULED)
    notes = Column(String, default="")
    mentee_rating = Column(Integer, nullable=True)
    mentee_feedback = Column(Text, default="")
    mentor_feedback = Column(Text, default="")
    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        CheckConstraint(
            "mentee_rating IS NULL OR (mentee_rating >= 1 AND mentee_rating <= 5)",
            name="check_mentee_rating_range",
        ),
        Index("ix_sessions_mentor_date", "mentor_id", "date"),
        Index("ix_sessions_mentee_date", "mentee_id", "date"),
        # One live booking per mentor and time; cancelled rows free the slot.
        Index(
            "uq_sessions_live_mentor_date",
            "mentor_id",
            "date",
            unique=True,
            sqlite_where=text("status != 'CANCELLED'"),
            postgresql_where=text("status != 'CANCELLED'"),
        ),
    )

    # Relationships
    mentor = relationship("User", foreign_keys=[mentor_id], back_populates="mentor_sessions")
    mentee = relationship("User", foreign_keys=[mentee_id], back_populates="mentee_sessions")

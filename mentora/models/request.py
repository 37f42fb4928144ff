# mentora/models/request.py
import enum

from sqlalchemy import TIMESTAMP, Column, Enum, ForeignKey, Index, Integer, String, func, text
from sqlalchemy.orm import relationship

from mentora.database import Base


class RequestStatus(str, enum.Enum):
    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"


class MentorshipRequest(Base):
    __tablename__ = "mentorship_requests"

    id = Column(Integer, primary_key=True, index=True)
    mentee_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    mentor_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    message = Column(String(1000), nullable=False, default="")
    status = Column(Enum(RequestStatus), nullable=False, default=RequestStatus.PENDING)
    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        Index("ix_mentorship_requests_pair_status", "mentee_id", "mentor_id", "status"),
        # At most one open request per mentee/mentor pair.
        Index(
            "uq_mentorship_requests_pending_pair",
            "mentee_id",
            "mentor_id",
            unique=True,
            sqlite_where=text("status = 'PENDING'"),
            postgresql_where=text("status = 'PENDING'"),
        ),
    )

    mentee = relationship("User", foreign_keys=[mentee_id], back_populates="sent_requests")
    mentor = relationship("User", foreign_keys=[mentor_id], back_populates="received_requests")

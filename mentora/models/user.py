import enum

from sqlalchemy import (
    ARRAY,
    JSON,
    TIMESTAMP,
    Boolean,
    Column,
    Enum,
    ForeignKey,
    Integer,
    String,
    Text,
    func,
)
from sqlalchemy.orm import relationship

from mentora.database import Base


def _enum_values(enum_cls):
    return [member.value for member in enum_cls]


class UserRole(str, enum.Enum):
    ADMIN = "admin"
    MENTOR = "mentor"
    MENTEE = "mentee"


class DayOfWeek(str, enum.Enum):
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"


# Indexed like date.weekday(): Monday == 0.
WEEKDAYS = list(DayOfWeek)


# ---------------- USER (AUTH TABLE) ----------------
class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    role = Column(
        Enum(UserRole, native_enum=False, length=20, values_callable=_enum_values),
        nullable=False,
        default=UserRole.MENTEE,
    )
    bio = Column(Text, default="")
    # SQLite (used by tests) does not support ARRAY; store as JSON there.
    skills = Column(ARRAY(String).with_variant(JSON, "sqlite"), default=list)
    goals = Column(ARRAY(String).with_variant(JSON, "sqlite"), default=list)
    interests = Column(ARRAY(String).with_variant(JSON, "sqlite"), default=list)
    is_profile_complete = Column(Boolean, default=False, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, onupdate=func.now())

    availability = relationship(
        "AvailabilityBlock",
        back_populates="mentor",
        order_by="AvailabilityBlock.position",
        cascade="all, delete-orphan",
    )
    sent_requests = relationship(
        "MentorshipRequest", foreign_keys="MentorshipRequest.mentee_id", back_populates="mentee"
    )
    received_requests = relationship(
        "MentorshipRequest", foreign_keys="MentorshipRequest.mentor_id", back_populates="mentor"
    )
    mentee_sessions = relationship("Session", foreign_keys="Session.mentee_id", back_populates="mentee")
    mentor_sessions = relationship("Session", foreign_keys="Session.mentor_id", back_populates="mentor")


# ---------------- WEEKLY AVAILABILITY ----------------
class AvailabilityBlock(Base):
    __tablename__ = "availability_blocks"

    id = Column(Integer, primary_key=True, index=True)
    mentor_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    # Position in the list the mentor saved.
    position = Column(Integer, nullable=False, default=0)
    day = Column(
        Enum(DayOfWeek, native_enum=False, length=10, values_callable=_enum_values),
        nullable=False,
    )
    start_time = Column(String(5), nullable=False)  # "HH:MM", zero-padded 24h
    end_time = Column(String(5), nullable=False)

    mentor = relationship("User", back_populates="availability")

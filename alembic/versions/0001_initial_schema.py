"""initial schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19 09:00:00

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "0001"
down_revision = None
branch_labels = None
depends_on = None

USER_ROLES = ("admin", "mentor", "mentee")
DAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
REQUEST_STATUSES = ("PENDING", "ACCEPTED", "REJECTED")
SESSION_STATUSES = ("SCHEDULED", "COMPLETED", "CANCELLED", "PENDING_FEEDBACK")


def _string_list():
    return sa.ARRAY(sa.String()).with_variant(sa.JSON(), "sqlite")


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column(
            "role",
            sa.Enum(*USER_ROLES, name="userrole", native_enum=False, length=20),
            nullable=False,
        ),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("skills", _string_list(), nullable=True),
        sa.Column("goals", _string_list(), nullable=True),
        sa.Column("interests", _string_list(), nullable=True),
        sa.Column("is_profile_complete", sa.Boolean(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.TIMESTAMP(), server_default=sa.func.now(), nullable=True),
        sa.Column("updated_at", sa.TIMESTAMP(), nullable=True),
    )
    op.create_index("ix_users_id", "users", ["id"])
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "availability_blocks",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "mentor_id",
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column(
            "day",
            sa.Enum(*DAYS, name="dayofweek", native_enum=False, length=10),
            nullable=False,
        ),
        sa.Column("start_time", sa.String(length=5), nullable=False),
        sa.Column("end_time", sa.String(length=5), nullable=False),
    )
    op.create_index("ix_availability_blocks_id", "availability_blocks", ["id"])
    op.create_index("ix_availability_blocks_mentor_id", "availability_blocks", ["mentor_id"])

    op.create_table(
        "mentorship_requests",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "mentee_id",
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "mentor_id",
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("message", sa.String(length=1000), nullable=False),
        sa.Column("status", sa.Enum(*REQUEST_STATUSES, name="requeststatus"), nullable=False),
        sa.Column("created_at", sa.TIMESTAMP(), server_default=sa.func.now(), nullable=True),
        sa.Column("updated_at", sa.TIMESTAMP(), server_default=sa.func.now(), nullable=True),
    )
    op.create_index("ix_mentorship_requests_id", "mentorship_requests", ["id"])
    op.create_index("ix_mentorship_requests_mentee_id", "mentorship_requests", ["mentee_id"])
    op.create_index("ix_mentorship_requests_mentor_id", "mentorship_requests", ["mentor_id"])
    op.create_index(
        "ix_mentorship_requests_pair_status",
        "mentorship_requests",
        ["mentee_id", "mentor_id", "status"],
    )
    op.create_index(
        "uq_mentorship_requests_pending_pair",
        "mentorship_requests",
        ["mentee_id", "mentor_id"],
        unique=True,
        sqlite_where=sa.text("status = 'PENDING'"),
        postgresql_where=sa.text("status = 'PENDING'"),
    )

    op.create_table(
        "sessions",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "mentor_id",
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "mentee_id",
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("date", sa.TIMESTAMP(), nullable=False),
        sa.Column("status", sa.Enum(*SESSION_STATUSES, name="sessionstatus"), nullable=False),
        sa.Column("notes", sa.String(), nullable=True),
        sa.Column("mentee_rating", sa.Integer(), nullable=True),
        sa.Column("mentee_feedback", sa.Text(), nullable=True),
        sa.Column("mentor_feedback", sa.Text(), nullable=True),
        sa.Column("created_at", sa.TIMESTAMP(), server_default=sa.func.now(), nullable=True),
        sa.Column("updated_at", sa.TIMESTAMP(), server_default=sa.func.now(), nullable=True),
        sa.CheckConstraint(
            "mentee_rating IS NULL OR (mentee_rating >= 1 AND mentee_rating <= 5)",
            name="check_mentee_rating_range",
        ),
    )
    op.create_index("ix_sessions_id", "sessions", ["id"])
    op.create_index("ix_sessions_mentor_date", "sessions", ["mentor_id", "date"])
    op.create_index("ix_sessions_mentee_date", "sessions", ["mentee_id", "date"])
    op.create_index(
        "uq_sessions_live_mentor_date",
        "sessions",
        ["mentor_id", "date"],
        unique=True,
        sqlite_where=sa.text("status != 'CANCELLED'"),
        postgresql_where=sa.text("status != 'CANCELLED'"),
    )


def downgrade() -> None:
    op.drop_table("sessions")
    op.drop_table("mentorship_requests")
    op.drop_table("availability_blocks")
    op.drop_table("users")
    for enum_name in ("sessionstatus", "requeststatus"):
        sa.Enum(name=enum_name).drop(op.get_bind(), checkfirst=True)

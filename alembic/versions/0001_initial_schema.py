"""initial schema: domains, users, content, submissions, points ledger, notifications

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-18

"""
from alembic import op
import sqlalchemy as sa


revision = "0001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def _base_columns():
    return [
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    ]


user_role = sa.Enum("MEMBER", "LEAD", "ADMIN", name="user_role")
resource_type = sa.Enum("VIDEO", "IMAGE", "PDF", "DOC", "DRIVE_LINK", "EXTERNAL_LINK", name="resource_type")
submission_type = sa.Enum("FILE", "IN_PERSON", name="submission_type")
question_type = sa.Enum("MCQ", "SHORT_ANSWER", "LONG_ANSWER", name="question_type")
submission_status = sa.Enum("PENDING", "SUBMITTED", "CHECKED", "REJECTED", name="submission_status")
points_source_type = sa.Enum("ASSIGNMENT", "QUIZ", name="points_source_type")
notification_type = sa.Enum("INFO", "WARNING", "ALERT", "SUCCESS", name="notification_type")


def upgrade() -> None:
    op.create_table(
        "domains",
        *_base_columns(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("max_capacity", sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )
    op.create_index(op.f("ix_domains_id"), "domains", ["id"], unique=False)

    op.create_table(
        "users",
        *_base_columns(),
        sa.Column("username", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("role", user_role, nullable=False),
        sa.Column("domain_id", sa.Uuid(), nullable=True),
        sa.ForeignKeyConstraint(["domain_id"], ["domains.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_id"), "users", ["id"], unique=False)
    op.create_index(op.f("ix_users_username"), "users", ["username"], unique=True)
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)
    op.create_index(op.f("ix_users_role"), "users", ["role"], unique=False)
    op.create_index(op.f("ix_users_domain_id"), "users", ["domain_id"], unique=False)

    op.create_table(
        "domain_leads",
        *_base_columns(),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("domain_id", sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["domain_id"], ["domains.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "domain_id", name="uq_domain_leads_user_domain"),
    )
    op.create_index(op.f("ix_domain_leads_id"), "domain_leads", ["id"], unique=False)
    op.create_index(op.f("ix_domain_leads_user_id"), "domain_leads", ["user_id"], unique=False)
    op.create_index(op.f("ix_domain_leads_domain_id"), "domain_leads", ["domain_id"], unique=False)

    op.create_table(
        "resources",
        *_base_columns(),
        sa.Column("domain_id", sa.Uuid(), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("type", resource_type, nullable=False),
        sa.Column("url", sa.String(1000), nullable=False),
        sa.Column("uploaded_by", sa.Uuid(), nullable=True),
        sa.ForeignKeyConstraint(["domain_id"], ["domains.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["uploaded_by"], ["users.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_resources_id"), "resources", ["id"], unique=False)
    op.create_index(op.f("ix_resources_domain_id"), "resources", ["domain_id"], unique=False)

    op.create_table(
        "assignments",
        *_base_columns(),
        sa.Column("domain_id", sa.Uuid(), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("due_date", sa.DateTime(), nullable=True),
        sa.Column("points_base", sa.Integer(), nullable=False),
        sa.Column("timely_bonus_points", sa.Integer(), nullable=False),
        sa.Column("submission_type", submission_type, nullable=False),
        sa.Column("published", sa.Boolean(), nullable=False),
        sa.Column("created_by", sa.Uuid(), nullable=True),
        sa.ForeignKeyConstraint(["domain_id"], ["domains.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["created_by"], ["users.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_assignments_id"), "assignments", ["id"], unique=False)
    op.create_index(op.f("ix_assignments_domain_id"), "assignments", ["domain_id"], unique=False)
    op.create_index(op.f("ix_assignments_published"), "assignments", ["published"], unique=False)

    op.create_table(
        "quizzes",
        *_base_columns(),
        sa.Column("domain_id", sa.Uuid(), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("published", sa.Boolean(), nullable=False),
        sa.Column("total_points", sa.Integer(), nullable=False),
        sa.Column("created_by", sa.Uuid(), nullable=True),
        sa.ForeignKeyConstraint(["domain_id"], ["domains.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["created_by"], ["users.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_quizzes_id"), "quizzes", ["id"], unique=False)
    op.create_index(op.f("ix_quizzes_domain_id"), "quizzes", ["domain_id"], unique=False)
    op.create_index(op.f("ix_quizzes_published"), "quizzes", ["published"], unique=False)

    op.create_table(
        "questions",
        *_base_columns(),
        sa.Column("quiz_id", sa.Uuid(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("question_text", sa.Text(), nullable=False),
        sa.Column("question_type", question_type, nullable=False),
        sa.Column("options", sa.JSON(), nullable=True),
        sa.Column("correct_answer", sa.JSON(), nullable=True),
        sa.Column("points", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["quiz_id"], ["quizzes.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_questions_id"), "questions", ["id"], unique=False)
    op.create_index(op.f("ix_questions_quiz_id"), "questions", ["quiz_id"], unique=False)

    op.create_table(
        "submissions",
        *_base_columns(),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("assignment_id", sa.Uuid(), nullable=True),
        sa.Column("quiz_id", sa.Uuid(), nullable=True),
        sa.Column("files", sa.JSON(), nullable=True),
        sa.Column("answer_text", sa.Text(), nullable=True),
        sa.Column("answers", sa.JSON(), nullable=True),
        sa.Column("status", submission_status, nullable=False),
        sa.Column("grade_points", sa.Integer(), nullable=False),
        sa.Column("graded_by", sa.Uuid(), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["assignment_id"], ["assignments.id"], ondelete="RESTRICT"),
        sa.ForeignKeyConstraint(["quiz_id"], ["quizzes.id"], ondelete="RESTRICT"),
        sa.ForeignKeyConstraint(["graded_by"], ["users.id"], ondelete="SET NULL"),
        sa.CheckConstraint("(assignment_id IS NULL) <> (quiz_id IS NULL)", name="ck_submissions_single_target"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_submissions_id"), "submissions", ["id"], unique=False)
    op.create_index(op.f("ix_submissions_user_id"), "submissions", ["user_id"], unique=False)
    op.create_index(op.f("ix_submissions_assignment_id"), "submissions", ["assignment_id"], unique=False)
    op.create_index(op.f("ix_submissions_quiz_id"), "submissions", ["quiz_id"], unique=False)
    op.create_index(op.f("ix_submissions_status"), "submissions", ["status"], unique=False)
    op.create_index(
        "uq_submissions_user_assignment",
        "submissions",
        ["user_id", "assignment_id"],
        unique=True,
        postgresql_where=sa.text("assignment_id IS NOT NULL"),
    )
    op.create_index(
        "uq_submissions_user_quiz",
        "submissions",
        ["user_id", "quiz_id"],
        unique=True,
        postgresql_where=sa.text("quiz_id IS NOT NULL"),
    )

    op.create_table(
        "points_entries",
        *_base_columns(),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("source_type", points_source_type, nullable=False),
        sa.Column("source_id", sa.Uuid(), nullable=False),
        sa.Column("points", sa.Integer(), nullable=False),
        sa.Column("reason", sa.String(500), nullable=False),
        sa.Column("awarded_by", sa.Uuid(), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["awarded_by"], ["users.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_points_entries_id"), "points_entries", ["id"], unique=False)
    op.create_index(op.f("ix_points_entries_user_id"), "points_entries", ["user_id"], unique=False)
    op.create_index("uq_points_entries_source", "points_entries", ["source_id", "source_type"], unique=True)

    op.create_table(
        "notifications",
        *_base_columns(),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column("type", notification_type, nullable=False),
        sa.Column("is_read", sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_notifications_id"), "notifications", ["id"], unique=False)
    op.create_index(op.f("ix_notifications_user_id"), "notifications", ["user_id"], unique=False)
    op.create_index(op.f("ix_notifications_is_read"), "notifications", ["is_read"], unique=False)


def downgrade() -> None:
    for table in (
        "notifications",
        "points_entries",
        "submissions",
        "questions",
        "quizzes",
        "assignments",
        "resources",
        "domain_leads",
        "users",
        "domains",
    ):
        op.drop_table(table)
    bind = op.get_bind()
    for enum_type in (
        notification_type,
        points_source_type,
        submission_status,
        question_type,
        submission_type,
        resource_type,
        user_role,
    ):
        enum_type.drop(bind, checkfirst=True)

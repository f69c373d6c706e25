"""initial capacity planning schema

Revision ID: 4b8e2c1d9a07
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "4b8e2c1d9a07"
down_revision = None
branch_labels = None
depends_on = None

_USER_ROLE = sa.Enum("ENGINEER", "MANAGER", name="userrole")
_SENIORITY = sa.Enum("JUNIOR", "MID", "SENIOR", name="seniority")
_PROJECT_STATUS = sa.Enum("PLANNING", "ACTIVE", "COMPLETED", "ON_HOLD", name="projectstatus")


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("email", sa.String(length=256), nullable=False, unique=True),
        sa.Column("role", _USER_ROLE, nullable=False),
        sa.Column("skills", sa.JSON(), nullable=False),
        sa.Column("seniority", _SENIORITY, nullable=False),
        sa.Column("max_capacity", sa.Integer(), nullable=False, server_default=sa.text("100")),
        sa.Column("department", sa.String(), nullable=True),
        sa.Column("version", sa.Integer(), nullable=False, server_default=sa.text("1")),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_users_role", "users", ["role"])

    op.create_table(
        "projects",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("required_skills", sa.JSON(), nullable=False),
        sa.Column("team_size", sa.Integer(), nullable=False, server_default=sa.text("1")),
        sa.Column("status", _PROJECT_STATUS, nullable=False),
        sa.Column("manager_id", sa.String(), sa.ForeignKey("users.id", ondelete="SET NULL"), nullable=True),
        sa.Column("version", sa.Integer(), nullable=False, server_default=sa.text("1")),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_projects_status", "projects", ["status"])

    op.create_table(
        "assignments",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("engineer_id", sa.String(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("project_id", sa.String(), sa.ForeignKey("projects.id", ondelete="RESTRICT"), nullable=False),
        sa.Column("allocation_percentage", sa.Integer(), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("role", sa.String(), nullable=False, server_default=sa.text("'Developer'")),
        sa.Column("version", sa.Integer(), nullable=False, server_default=sa.text("1")),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_assignments_engineer_dates",
        "assignments",
        ["engineer_id", "start_date", "end_date"],
    )
    op.create_index("idx_assignments_project", "assignments", ["project_id"])
    op.create_index("idx_assignments_start_end", "assignments", ["start_date", "end_date"])


def downgrade() -> None:
    op.drop_index("idx_assignments_start_end", table_name="assignments")
    op.drop_index("idx_assignments_project", table_name="assignments")
    op.drop_index("idx_assignments_engineer_dates", table_name="assignments")
    op.drop_table("assignments")
    op.drop_index("idx_projects_status", table_name="projects")
    op.drop_table("projects")
    op.drop_index("idx_users_role", table_name="users")
    op.drop_table("users")

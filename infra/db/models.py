# infra/db/models.py
from __future__ import annotations
from datetime import date
from typing import List, Optional

from sqlalchemy import (
    JSON,
    String,
    Date,
    ForeignKey,
    Enum as SAEnum,
    Index,
    Integer,
)
from sqlalchemy.orm import Mapped, mapped_column

from infra.db.base import Base
from core.domain import ProjectStatus, Seniority, UserRole


class UserORM(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    email: Mapped[str] = mapped_column(String(256), nullable=False, unique=True)
    role: Mapped[UserRole] = mapped_column(SAEnum(UserRole), default=UserRole.ENGINEER, nullable=False)
    skills: Mapped[List[str]] = mapped_column(JSON, default=list, nullable=False)
    seniority: Mapped[Seniority] = mapped_column(SAEnum(Seniority), default=Seniority.MID, nullable=False)
    max_capacity: Mapped[int] = mapped_column(Integer, default=100, nullable=False)
    department: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    version: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
Index("idx_users_role", UserORM.role)


class ProjectORM(Base):
    __tablename__ = "projects"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str] = mapped_column(String, default="")
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    required_skills: Mapped[List[str]] = mapped_column(JSON, default=list, nullable=False)
    team_size: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    status: Mapped[ProjectStatus] = mapped_column(
        SAEnum(ProjectStatus), default=ProjectStatus.PLANNING, nullable=False
    )
    manager_id: Mapped[Optional[str]] = mapped_column(
        String,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    version: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
Index("idx_projects_status", ProjectORM.status)


class AssignmentORM(Base):
    __tablename__ = "assignments"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    engineer_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    project_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("projects.id", ondelete="RESTRICT"),
        nullable=False,
    )
    allocation_percentage: Mapped[int] = mapped_column(Integer, nullable=False)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    role: Mapped[str] = mapped_column(String, default="Developer", nullable=False)
    version: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
Index("idx_assignments_engineer_dates", AssignmentORM.engineer_id, AssignmentORM.start_date, AssignmentORM.end_date)
Index("idx_assignments_project", AssignmentORM.project_id)
Index("idx_assignments_start_end", AssignmentORM.start_date, AssignmentORM.end_date)

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from core.domain import User, UserRole
from core.interfaces import UserRepository
from infra.db.models import UserORM
from infra.db.optimistic import update_with_version_check
from infra.db.user.mapper import user_from_orm, user_to_orm


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, user: User) -> None:
        self.session.add(user_to_orm(user))

    def update(self, user: User) -> None:
        user.version = update_with_version_check(
            self.session,
            UserORM,
            user.id,
            getattr(user, "version", 1),
            {
                "name": user.name,
                "email": user.email,
                "role": user.role,
                "skills": list(user.skills),
                "seniority": user.seniority,
                "max_capacity": user.max_capacity,
                "department": user.department,
            },
            not_found_message="Engineer not found.",
            stale_message="Engineer was updated by another user.",
            not_found_code="ENGINEER_NOT_FOUND",
        )

    def bump_version(self, user_id: str, expected_version: int) -> int:
        return update_with_version_check(
            self.session,
            UserORM,
            user_id,
            expected_version,
            {},
            not_found_message="Engineer not found.",
            stale_message="Engineer allocations changed concurrently. Refresh and try again.",
            not_found_code="ENGINEER_NOT_FOUND",
        )

    def get(self, user_id: str) -> Optional[User]:
        obj = self.session.get(UserORM, user_id)
        return user_from_orm(obj) if obj else None

    def get_by_email(self, email: str) -> Optional[User]:
        stmt = select(UserORM).where(func.lower(UserORM.email) == (email or "").strip().lower())
        obj = self.session.execute(stmt).scalars().first()
        return user_from_orm(obj) if obj else None

    def list_all(self) -> List[User]:
        rows = self.session.execute(select(UserORM).order_by(UserORM.name)).scalars().all()
        return [user_from_orm(row) for row in rows]

    def list_by_role(self, role: UserRole) -> List[User]:
        stmt = select(UserORM).where(UserORM.role == role).order_by(UserORM.name)
        rows = self.session.execute(stmt).scalars().all()
        return [user_from_orm(row) for row in rows]


__all__ = ["SqlAlchemyUserRepository"]

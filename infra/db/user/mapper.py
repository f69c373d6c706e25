from __future__ import annotations

from core.domain import User
from infra.db.models import UserORM


def user_to_orm(user: User) -> UserORM:
    return UserORM(
        id=user.id,
        name=user.name,
        email=user.email,
        role=user.role,
        skills=list(user.skills),
        seniority=user.seniority,
        max_capacity=user.max_capacity,
        department=user.department,
        version=getattr(user, "version", 1),
    )


def user_from_orm(obj: UserORM) -> User:
    return User(
        id=obj.id,
        name=obj.name,
        email=obj.email,
        role=obj.role,
        skills=list(obj.skills or []),
        seniority=obj.seniority,
        max_capacity=obj.max_capacity,
        department=obj.department,
        version=getattr(obj, "version", 1),
    )


__all__ = ["user_to_orm", "user_from_orm"]

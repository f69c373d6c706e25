from infra.db.user.mapper import user_from_orm, user_to_orm
from infra.db.user.repository import SqlAlchemyUserRepository

__all__ = ["user_to_orm", "user_from_orm", "SqlAlchemyUserRepository"]

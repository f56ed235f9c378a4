"""SQLAlchemy User Repository — UserRepository protocol backed by the users table.

Invariants:
    - One short-lived AsyncSession per call; the repository itself is long-lived
    - ORM rows never escape: every read returns a fresh core User
    - save() inserts when user.id is None, otherwise updates the existing row
    - ids outside the column range are never sent to the driver: lookups miss, deletes no-op
"""

from sqlalchemy import delete, select

from user_api.core.domain_types import MAX_USER_ID, User, UserId
from user_api.core.errors import InternalServerError
from user_api.infrastructure.database import DatabaseSessionManager
from user_api.models.user import User as UserModel


class SqlAlchemyUserRepository:
    """UserRepository implementation over DatabaseSessionManager."""

    def __init__(self, db_manager: DatabaseSessionManager):
        self._db = db_manager

    async def find_by_id(self, user_id: UserId) -> User | None:
        if not _in_id_range(user_id):
            return None
        async with self._db.session("Failed to fetch user by ID") as db:
            row = await db.get(UserModel, user_id)
            return _to_entity(row) if row else None

    async def find_by_email(self, email: str) -> User | None:
        async with self._db.session("Failed to fetch user by email") as db:
            result = await db.execute(
                select(UserModel).where(UserModel.email == email),
            )
            row = result.scalar_one_or_none()
            return _to_entity(row) if row else None

    async def save(self, user: User) -> User:
        async with self._db.session("Failed to save user") as db:
            if user.id is None:
                row = UserModel(
                    name=user.name, email=user.email, password=user.password,
                )
                db.add(row)
            else:
                row = await db.get(UserModel, user.id)
                if row is None:
                    # Deleted between the use case's read and this write
                    raise InternalServerError("Failed to save user", "update")
                row.name = user.name
                row.email = user.email
                row.password = user.password
            await db.commit()
            await db.refresh(row)
            return _to_entity(row)

    async def delete(self, user_id: UserId) -> None:
        if not _in_id_range(user_id):
            return
        async with self._db.session("Failed to delete user") as db:
            await db.execute(delete(UserModel).where(UserModel.id == user_id))
            await db.commit()


def _in_id_range(user_id: int) -> bool:
    return 0 < user_id <= MAX_USER_ID


def _to_entity(row: UserModel) -> User:
    return User(
        id=UserId(row.id), name=row.name, email=row.email, password=row.password,
    )

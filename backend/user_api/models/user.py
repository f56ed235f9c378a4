"""User ORM — persists accounts in the users table.

Invariants:
    - id is an autoincrement integer primary key assigned by the store
    - email carries the unique constraint that backstops CreateUser's pre-check
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from user_api.db.base import Base


class User(Base):
    """User account row."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True, index=True,
    )
    password: Mapped[str] = mapped_column(String(255), nullable=False)

"""User Schemas — declarative rules for create, update, login, and id inputs.

Invariants:
    - Strict parsing: no type coercion ("5" is not an id, 5 is not a name)
    - All violations of one input are collected, never fail-fast
    - name: min length 1; email: valid address; password: min length 6; id: positive int
    - UpdateUserInput fields other than id may be omitted; when present (null included)
      they obey the create rules, and model_fields_set tells which were sent
    - Unknown keys are ignored

Design Decisions:
    - PydanticCustomError in AfterValidators: human messages without the
      "Value error, " prefix pydantic adds to plain ValueErrors
    - email-validator does the syntax check; the submitted address is kept as-is
      (no normalization) so clients get back exactly what they sent
"""

from typing import Annotated

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic_core import PydanticCustomError


def _check_name(v: str) -> str:
    if len(v) < 1:
        raise PydanticCustomError("name_required", "Name is required")
    return v


def _check_email(v: str) -> str:
    try:
        validate_email(v, check_deliverability=False)
    except EmailNotValidError:
        raise PydanticCustomError("invalid_email", "Invalid email address")
    return v


def _check_password(v: str) -> str:
    if len(v) < 6:
        raise PydanticCustomError(
            "password_too_short", "Password must be at least 6 characters",
        )
    return v


def _check_id(v: int) -> int:
    if v <= 0:
        raise PydanticCustomError(
            "id_not_positive", "ID must be a positive integer",
        )
    return v


Name = Annotated[str, AfterValidator(_check_name)]
Email = Annotated[str, AfterValidator(_check_email)]
Password = Annotated[str, AfterValidator(_check_password)]
PositiveId = Annotated[int, AfterValidator(_check_id)]


class _StrictInput(BaseModel):
    model_config = ConfigDict(strict=True, extra="ignore")


class CreateUserInput(_StrictInput):
    """POST /users body."""
    name: Name
    email: Email
    password: Password


class UpdateUserInput(_StrictInput):
    """PUT /users/{id} path id merged with a partial body."""
    id: PositiveId
    # None defaults are never validated; an explicit null fails the str check
    name: Name = None
    email: Email = None
    password: Password = None


class UserIdInput(_StrictInput):
    """Path id for get/delete."""
    id: PositiveId


class LoginInput(_StrictInput):
    """POST /users/login body."""
    email: Email
    password: Password


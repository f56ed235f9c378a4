"""Input Validation — runs a schema over raw input and raises the domain ValidationError."""

from typing import TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from user_api.core.errors import ValidationError
from user_api.core.format_violations import format_violations, to_violations

ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_input(schema: type[ModelT], raw: object) -> ModelT:
    """Validate raw input against schema, collecting every violation."""
    try:
        return schema.model_validate(raw)
    except PydanticValidationError as e:
        violations = to_violations(e.errors())
        raise ValidationError(format_violations(violations), violations) from e

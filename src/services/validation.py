"""Declarative request validation.

Field rules live on the pydantic request models (see ``api.models``);
``validate`` runs all of them and reports every failing field at once.
"""

from typing import Any, TypeVar

import pydantic

from domain.model.errors import ValidationError

ModelT = TypeVar("ModelT", bound=pydantic.BaseModel)


def _format_error(error: dict[str, Any]) -> str:
    field = ".".join(str(part) for part in error.get("loc", ())) or "body"
    if error["type"] == "value_error":
        return str(error["ctx"]["error"])
    if error["type"] == "missing":
        return f"{field} is required"
    return f"{field}: {error['msg']}"


def format_errors(exc: pydantic.ValidationError) -> list[str]:
    """Turn a pydantic ValidationError into one message per failure."""
    return [_format_error(error) for error in exc.errors()]


def validate(model: type[ModelT], payload: Any) -> ModelT:
    """Validate a raw request body against a request model.

    Raises:
        ValidationError: one or more fields failed; ``errors`` lists them all
    """
    try:
        return model.model_validate(payload)
    except pydantic.ValidationError as e:
        raise ValidationError(format_errors(e)) from e

# search_mcp/core/validation.py
# Validates raw tool arguments against a tool's declared input model.

from collections.abc import Mapping
from typing import Any, Type, TypeVar, Union
from pydantic import BaseModel, ValidationError
from search_mcp.models.common import InvocationError

M = TypeVar("M", bound=BaseModel)


def _field_path(loc) -> str:
    return ".".join(str(part) for part in loc) or "arguments"


def validate_arguments(schema: Type[M], raw: Any) -> Union[M, InvocationError]:
    """
    Validates `raw` against `schema` and returns the typed model, or a
    ValidationFailed error naming the first failing field and every reason.
    A missing arguments object (None) is treated as {}.
    """
    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        return InvocationError.validation_failed(
            "arguments", f"arguments must be an object, got {type(raw).__name__}"
        )

    try:
        return schema.model_validate(dict(raw))
    except ValidationError as e:
        errors = e.errors(include_url=False)
        reasons = "; ".join(f"{_field_path(err['loc'])}: {err['msg']}" for err in errors)
        return InvocationError.validation_failed(_field_path(errors[0]["loc"]), reasons)

"""
Explicit validation of raw request parameters.

Every search and write operation validates its input through
``validate_params``, which returns the typed parameter object or raises
ServiceValidationError carrying the structured error set.
"""

from typing import Any, Dict, List, Mapping, Type, TypeVar

from pydantic import BaseModel, ValidationError

from app.exceptions import ServiceValidationError

SchemaType = TypeVar("SchemaType", bound=BaseModel)


def format_errors(errors) -> List[Dict[str, Any]]:
    """Flatten pydantic error dicts into ``{field, message, type}`` entries"""
    formatted = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query")]
        formatted.append(
            {
                "field": ".".join(loc) or "__root__",
                "message": err.get("msg", "invalid value"),
                "type": err.get("type", "value_error"),
            }
        )
    return formatted


def validate_params(schema: Type[SchemaType], data: Mapping[str, Any]) -> SchemaType:
    """Validate ``data`` against ``schema``.

    Keys whose value is None are treated as absent so optional filters
    fall back to their defaults.

    Raises:
        ServiceValidationError: with ``details`` listing every failing field
    """
    cleaned = {k: v for k, v in dict(data).items() if v is not None}
    try:
        return schema.model_validate(cleaned)
    except ValidationError as exc:
        raise ServiceValidationError(details=format_errors(exc.errors())) from exc

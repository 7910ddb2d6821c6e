"""
Input checks shared by the entity commands.

These run inside commands rather than in FastAPI so that update requests
are checked in a fixed order: identifiers first, existence second and the
payload fields last.
"""

from typing import Any, Type, TypeVar

from pydantic import BaseModel, ValidationError

from bookstore.schemas.errors import FieldError, field_errors_from_pydantic

TModel = TypeVar("TModel", bound=BaseModel)


def identifier_errors(path_id: int) -> list[FieldError]:
    """Reject identifiers that can never belong to a stored record."""
    if path_id < 1:
        return [FieldError(field="id", message="Id must be a positive integer")]
    return []


def update_identifier_errors(
    path_id: int, payload: dict[str, Any] | None
) -> list[FieldError]:
    """
    Check that an update payload targets the record named in the path.

    Args:
        path_id: Identifier taken from the URL.
        payload: Raw request body.

    Returns:
        Field errors; empty when the identifiers are usable and equal.
    """
    errors = identifier_errors(path_id)
    if errors:
        return errors

    if not isinstance(payload, dict) or not payload:
        return [FieldError(field="body", message="Request body is required")]

    body_id = payload.get("id")
    if type(body_id) is not int or body_id != path_id:
        return [
            FieldError(
                field="id",
                message=f"Body id {body_id!r} does not match path id {path_id}",
            )
        ]
    return []


def parse_payload(
    model: Type[TModel], payload: dict[str, Any]
) -> tuple[TModel | None, list[FieldError]]:
    """
    Validate a raw payload against a DTO.

    Args:
        model: DTO class to validate against.
        payload: Raw request body.

    Returns:
        Tuple of (dto, errors); dto is None when errors is not empty.
    """
    try:
        return model.model_validate(payload), []
    except ValidationError as ex:
        return None, field_errors_from_pydantic(ex.errors())

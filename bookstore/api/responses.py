"""
Translation of command outcomes into HTTP responses.

| Outcome      | Status | Body                                  |
|--------------|--------|---------------------------------------|
| SUCCESS      | given  | serialized value, none for 204        |
| INVALID      | 400    | validation_error envelope with errors |
| NOT_FOUND    | 404    | empty                                 |
| CONFLICT     | 409    | conflict envelope                     |
| UNAUTHORIZED | 401    | authentication_failed envelope        |
| FAILED       | 500    | internal_error envelope               |
"""

from fastapi import Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from bookstore.commands.base import Outcome, OutcomeStatus
from bookstore.constants import INTERNAL_ERROR_MESSAGE
from bookstore.schemas.errors import ErrorCode, http_error_response


def outcome_response(
    outcome: Outcome, success_status: int = status.HTTP_200_OK
) -> Response:
    """
    Build the HTTP response for a command outcome.

    Args:
        outcome: Result returned by a command.
        success_status: Status code used when the outcome is SUCCESS.

    Returns:
        Response ready to be returned from an endpoint.
    """
    if outcome.status is OutcomeStatus.SUCCESS:
        if success_status == status.HTTP_204_NO_CONTENT:
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        return JSONResponse(
            status_code=success_status,
            content=jsonable_encoder(outcome.value, by_alias=True),
        )

    if outcome.status is OutcomeStatus.NOT_FOUND:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    if outcome.status is OutcomeStatus.INVALID:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=http_error_response(
                ErrorCode.VALIDATION_ERROR,
                outcome.message or "Request data is invalid",
                {"errors": [e.model_dump() for e in outcome.errors]},
            ),
        )

    if outcome.status is OutcomeStatus.CONFLICT:
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content=http_error_response(ErrorCode.CONFLICT, outcome.message),
        )

    if outcome.status is OutcomeStatus.UNAUTHORIZED:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content=http_error_response(
                ErrorCode.AUTHENTICATION_FAILED,
                outcome.message,
                outcome.details,
            ),
        )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=http_error_response(
            ErrorCode.INTERNAL_ERROR, INTERNAL_ERROR_MESSAGE
        ),
    )

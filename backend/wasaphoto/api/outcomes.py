"""Outcome Responses — maps a service ActionOutcome to its HTTP response.

Invariants:
    - CREATED → 201 {"message": "Created Successfully"}
    - NO_CONTENT → 204 with an empty body
"""

from fastapi import Response, status
from fastapi.responses import JSONResponse

from wasaphoto.core.domain_types import ActionOutcome
from wasaphoto.schemas.common import CREATED_MESSAGE

OUTCOME_STATUS: dict[ActionOutcome, int] = {
    ActionOutcome.CREATED: status.HTTP_201_CREATED,
    ActionOutcome.NO_CONTENT: status.HTTP_204_NO_CONTENT,
}


def outcome_response(outcome: ActionOutcome) -> Response:
    status_code = OUTCOME_STATUS[outcome]
    if status_code == status.HTTP_204_NO_CONTENT:
        return Response(status_code=status_code)
    return JSONResponse(status_code=status_code, content=CREATED_MESSAGE.model_dump())

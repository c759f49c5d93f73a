"""Maps resolver outcomes onto HTTP responses."""

import json
import logging

from fastapi.responses import JSONResponse

from .errors import ErrorTag, FactError
from .models import ErrorResponse, FactResponse
from .resolver import ResolvedFact

logger = logging.getLogger(__name__)

STATUS_BY_TAG: dict[ErrorTag, int] = {
    ErrorTag.VALIDATION: 400,
    ErrorTag.CONVERT_TO_ANIMAL: 400,
    ErrorTag.API_REQUEST: 500,
    ErrorTag.API_RESPONSE: 500,
    ErrorTag.TO_TEXT: 500,
    ErrorTag.DESERIALIZATION: 500,
}


class ResponseShaper:
    """Builds the outward JSON envelope and logs each outcome."""

    def respond_ok(self, result: ResolvedFact) -> JSONResponse:
        payload = FactResponse(fact=result.fact, animal=result.animal).model_dump()
        logger.info(json.dumps(payload))
        return JSONResponse(status_code=200, content=payload)

    def respond_error(self, error: FactError) -> JSONResponse:
        payload = ErrorResponse(error=error.message).model_dump(exclude_none=True)
        logger.error("%s %s", error.tag.value, json.dumps(payload))
        return JSONResponse(status_code=STATUS_BY_TAG[error.tag], content=payload)

    def to_http(self, result: ResolvedFact | FactError) -> JSONResponse:
        if isinstance(result, FactError):
            return self.respond_error(result)
        return self.respond_ok(result)

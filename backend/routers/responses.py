"""Conversion of facade results into HTTP responses."""

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from services.facades import FacadeResponse


def to_json_response(result: FacadeResponse) -> JSONResponse:
    """Send a facade result as JSON with its status code (string bodies become JSON strings)."""
    return JSONResponse(status_code=result.status_code, content=jsonable_encoder(result.content))

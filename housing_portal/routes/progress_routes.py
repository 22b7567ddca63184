"""
Progress preview route.
"""
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from housing_portal.config import DEFAULT_PROGRESS_STRATEGY
from housing_portal.dependencies import read_json_body
from housing_portal.exceptions import MalformedInput
from housing_portal.models import ConstructionDetails
from housing_portal.progress import get_progress_strategy

router = APIRouter()


@router.post("/preview", response_class=JSONResponse)
async def preview_progress(request: Request, strategy: str = DEFAULT_PROGRESS_STRATEGY):
    """Compute the progress percentage for a set of stage statuses."""
    try:
        compute = get_progress_strategy(strategy)
    except ValueError as e:
        raise MalformedInput(str(e)) from e

    payload = await read_json_body(request)
    try:
        details = ConstructionDetails.model_validate(payload) if payload else None
    except ValidationError as e:
        raise MalformedInput(f"Invalid construction details: {e.errors()[0]['msg']}") from e
    return JSONResponse({"progress": compute(details), "strategy": strategy})

"""
Beneficiary (house) routes: read access to the canonical records and the
progress-update submission flow.
"""
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from housing_portal.dependencies import get_services, read_json_body
from housing_portal.exceptions import MalformedInput
from housing_portal.models import ProgressUpdateForm
from housing_portal.services import PortalServices

router = APIRouter()


@router.get("", response_class=JSONResponse)
async def list_houses(services: PortalServices = Depends(get_services)):
    beneficiaries = services.beneficiaries.list()
    return JSONResponse({"beneficiaries": [b.to_record() for b in beneficiaries]})


@router.get("/{house_id}", response_class=JSONResponse)
async def get_house(house_id: int, services: PortalServices = Depends(get_services)):
    beneficiary = services.beneficiaries.get(house_id)
    return JSONResponse({"beneficiary": beneficiary.to_record()})


@router.post("/{house_id}/progress-update", response_class=JSONResponse)
async def submit_progress_update(house_id: int, request: Request,
                                 services: PortalServices = Depends(get_services)):
    """
    Submit a progress update for admin approval.
    The beneficiary record stays unchanged until the update is approved.
    """
    payload = await read_json_body(request)
    if not isinstance(payload, dict):
        raise MalformedInput("Progress update must be a JSON object")
    try:
        form = ProgressUpdateForm.model_validate(payload)
    except ValidationError as e:
        raise MalformedInput(f"Invalid progress update: {e.errors()[0]['msg']}") from e

    entry, preview = services.intake.submit_progress_update(house_id, form)
    return JSONResponse({
        "success": True,
        "entry": entry.to_record(),
        "previewProgress": preview,
    })

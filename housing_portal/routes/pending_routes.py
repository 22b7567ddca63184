"""
Pending entry routes: queue listing, submission, approval and rejection.
"""
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from housing_portal.dependencies import get_services, read_json_body
from housing_portal.services import PortalServices

router = APIRouter()


@router.get("", response_class=JSONResponse)
async def list_pending_entries(services: PortalServices = Depends(get_services)):
    """List entries awaiting a decision, oldest first."""
    entries = services.pending.list()
    return JSONResponse({"pendingEntries": [entry.to_record() for entry in entries]})


@router.post("", response_class=JSONResponse)
async def submit_pending_entry(request: Request, services: PortalServices = Depends(get_services)):
    """Queue a new beneficiary or an update for admin review."""
    payload = await read_json_body(request)
    entry = services.intake.submit(payload)
    return JSONResponse({"success": True, "entry": entry.to_record()})


@router.get("/{entry_id}", response_class=JSONResponse)
async def get_pending_entry(entry_id: int, services: PortalServices = Depends(get_services)):
    entry = services.pending.get(entry_id)
    return JSONResponse({"entry": entry.to_record()})


@router.post("/{entry_id}/approve", response_class=JSONResponse)
async def approve_pending_entry(entry_id: int, services: PortalServices = Depends(get_services)):
    """Approve an entry and merge it into the beneficiary records."""
    result = services.reconciler.approve(entry_id)
    return JSONResponse({
        "success": True,
        "message": result.message,
        "beneficiary": result.beneficiary.to_record(),
        "officerUpdated": result.officer_updated,
    })


@router.post("/{entry_id}/reject", response_class=JSONResponse)
async def reject_pending_entry(entry_id: int, services: PortalServices = Depends(get_services)):
    services.reconciler.reject(entry_id)
    return JSONResponse({"success": True})

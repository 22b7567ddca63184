"""
Officer routes: list, add and remove field officers.
"""
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from housing_portal.dependencies import get_services, read_json_body
from housing_portal.services import PortalServices

router = APIRouter()


@router.get("", response_class=JSONResponse)
async def list_officers(services: PortalServices = Depends(get_services)):
    officers = services.officers.list()
    return JSONResponse({"officers": [officer.to_record() for officer in officers]})


@router.post("", response_class=JSONResponse)
async def add_officer(request: Request, services: PortalServices = Depends(get_services)):
    payload = await read_json_body(request)
    officer = services.officers.add(payload)
    return JSONResponse({"officer": officer.to_record()})


@router.delete("/{officer_id}", response_class=JSONResponse)
async def remove_officer(officer_id: int, services: PortalServices = Depends(get_services)):
    services.officers.remove(officer_id)
    return JSONResponse({"success": True})

"""Software product endpoints."""

from typing import List

from fastapi import APIRouter, Depends, Response
from sqlmodel import Session

from .. import models, services
from ..auth import require_access
from ..database import get_session
from ..schemas import NameIn, SoftwareIn, StatusIn
from ._errors import translate_errors
from ._params import RecordId

router = APIRouter(prefix="/api/software", tags=["software"], dependencies=[Depends(require_access)])


def get_service(db: Session = Depends(get_session)) -> services.SoftwareService:
    return services.SoftwareService(db)


@router.post("", response_model=models.Software, status_code=201)
def create_software(payload: SoftwareIn, svc: services.SoftwareService = Depends(get_service)):
    """Register a new software product."""
    with translate_errors("add the software"):
        return svc.create(payload)


@router.get("", response_model=List[models.Software])
def list_software(svc: services.SoftwareService = Depends(get_service)):
    with translate_errors("list the software"):
        return svc.list_all()


@router.get("/{software_id}", response_model=models.Software)
def get_software(software_id: RecordId, svc: services.SoftwareService = Depends(get_service)):
    with translate_errors("fetch the software"):
        return svc.get(software_id)


@router.put("/{software_id}", response_model=models.Software)
def update_software(software_id: RecordId, payload: SoftwareIn, svc: services.SoftwareService = Depends(get_service)):
    """Overwrite every mutable field of a software product."""
    with translate_errors("update the software"):
        return svc.update(software_id, payload)


@router.put("/{software_id}/status", response_model=models.Software)
def update_software_status(software_id: RecordId, payload: StatusIn, svc: services.SoftwareService = Depends(get_service)):
    with translate_errors("update the software status"):
        return svc.set_field(software_id, "status", payload.status)


@router.put("/{software_id}/name", response_model=models.Software)
def update_software_name(software_id: RecordId, payload: NameIn, svc: services.SoftwareService = Depends(get_service)):
    with translate_errors("update the software name"):
        return svc.set_field(software_id, "name", payload.name)


@router.delete("/{software_id}", status_code=204)
def delete_software(software_id: RecordId, svc: services.SoftwareService = Depends(get_service)):
    """Delete a software product.

    Fails with 500 while modules still reference it.
    """
    with translate_errors("remove the software"):
        svc.delete(software_id)
    return Response(status_code=204)

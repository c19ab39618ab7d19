"""Module endpoints.

Every module belongs to a software product; creating a module or moving
it to another product requires that product to exist (400 otherwise).
"""

from typing import List

from fastapi import APIRouter, Depends, Response
from sqlmodel import Session

from .. import models, services
from ..auth import require_access
from ..database import get_session
from ..schemas import ModuleIn, NameIn, StatusIn
from ._errors import translate_errors
from ._params import RecordId

router = APIRouter(prefix="/api/modules", tags=["modules"], dependencies=[Depends(require_access)])


def get_service(db: Session = Depends(get_session)) -> services.ModuleService:
    return services.ModuleService(db)


@router.post("", response_model=models.Module, status_code=201)
def create_module(payload: ModuleIn, svc: services.ModuleService = Depends(get_service)):
    with translate_errors("add the module"):
        return svc.create(payload)


@router.get("", response_model=List[models.Module])
def list_modules(svc: services.ModuleService = Depends(get_service)):
    with translate_errors("list the modules"):
        return svc.list_all()


@router.get("/by-software/{software_id}", response_model=List[models.Module])
def list_modules_by_software(software_id: RecordId, svc: services.ModuleService = Depends(get_service)):
    """Return the modules of a software product (404 if the product is unknown)."""
    with translate_errors("list the modules of the software"):
        return svc.list_by_software(software_id)


@router.get("/{module_id}", response_model=models.Module)
def get_module(module_id: RecordId, svc: services.ModuleService = Depends(get_service)):
    with translate_errors("fetch the module"):
        return svc.get(module_id)


@router.put("/{module_id}", response_model=models.Module)
def update_module(module_id: RecordId, payload: ModuleIn, svc: services.ModuleService = Depends(get_service)):
    with translate_errors("update the module"):
        return svc.update(module_id, payload)


@router.put("/{module_id}/status", response_model=models.Module)
def update_module_status(module_id: RecordId, payload: StatusIn, svc: services.ModuleService = Depends(get_service)):
    with translate_errors("update the module status"):
        return svc.set_field(module_id, "status", payload.status)


@router.put("/{module_id}/name", response_model=models.Module)
def update_module_name(module_id: RecordId, payload: NameIn, svc: services.ModuleService = Depends(get_service)):
    with translate_errors("update the module name"):
        return svc.set_field(module_id, "name", payload.name)


@router.delete("/{module_id}", status_code=204)
def delete_module(module_id: RecordId, svc: services.ModuleService = Depends(get_service)):
    with translate_errors("remove the module"):
        svc.delete(module_id)
    return Response(status_code=204)

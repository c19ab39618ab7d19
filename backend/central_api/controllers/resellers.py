"""Reseller endpoints."""

from typing import List

from fastapi import APIRouter, Depends, Response
from sqlmodel import Session

from .. import models, services
from ..auth import require_access
from ..database import get_session
from ..schemas import ResellerIn, StatusIn
from ._errors import translate_errors
from ._params import RecordId

router = APIRouter(prefix="/api/resellers", tags=["resellers"], dependencies=[Depends(require_access)])


def get_service(db: Session = Depends(get_session)) -> services.ResellerService:
    return services.ResellerService(db)


@router.post("", response_model=models.Reseller, status_code=201)
def create_reseller(payload: ResellerIn, svc: services.ResellerService = Depends(get_service)):
    """Attach a reseller to an existing organizational entity."""
    with translate_errors("add the reseller"):
        return svc.create(payload)


@router.get("", response_model=List[models.Reseller])
def list_resellers(svc: services.ResellerService = Depends(get_service)):
    with translate_errors("list the resellers"):
        return svc.list_all()


@router.get("/by-entity/{entity_id}", response_model=List[models.Reseller])
def list_resellers_by_entity(entity_id: RecordId, svc: services.ResellerService = Depends(get_service)):
    with translate_errors("list the resellers of the entity"):
        return svc.list_by_entity(entity_id)


@router.get("/{reseller_id}", response_model=models.Reseller)
def get_reseller(reseller_id: RecordId, svc: services.ResellerService = Depends(get_service)):
    with translate_errors("fetch the reseller"):
        return svc.get(reseller_id)


@router.put("/{reseller_id}", response_model=models.Reseller)
def update_reseller(reseller_id: RecordId, payload: ResellerIn, svc: services.ResellerService = Depends(get_service)):
    with translate_errors("update the reseller"):
        return svc.update(reseller_id, payload)


@router.put("/{reseller_id}/status", response_model=models.Reseller)
def update_reseller_status(reseller_id: RecordId, payload: StatusIn, svc: services.ResellerService = Depends(get_service)):
    with translate_errors("update the reseller status"):
        return svc.set_field(reseller_id, "status", payload.status)


@router.delete("/{reseller_id}", status_code=204)
def delete_reseller(reseller_id: RecordId, svc: services.ResellerService = Depends(get_service)):
    with translate_errors("remove the reseller"):
        svc.delete(reseller_id)
    return Response(status_code=204)

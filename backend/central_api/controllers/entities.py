"""Organizational entity endpoints.

Besides the whole-record update, each contact field has its own narrow
update endpoint. All of them address the entity by the id in the path.
"""

from typing import List

from fastapi import APIRouter, Depends, Response
from sqlmodel import Session

from .. import models, services
from ..auth import require_access
from ..database import get_session
from ..schemas import AddressIn, EntityIn, EntityTypeIn, NameIn, PhoneIn, StatusIn
from ._errors import translate_errors
from ._params import RecordId

router = APIRouter(prefix="/api/entities", tags=["entities"], dependencies=[Depends(require_access)])


def get_service(db: Session = Depends(get_session)) -> services.OrganizationalEntityService:
    return services.OrganizationalEntityService(db)


@router.post("", response_model=models.OrganizationalEntity, status_code=201)
def create_entity(payload: EntityIn, svc: services.OrganizationalEntityService = Depends(get_service)):
    with translate_errors("add the entity"):
        return svc.create(payload)


@router.get("", response_model=List[models.OrganizationalEntity])
def list_entities(svc: services.OrganizationalEntityService = Depends(get_service)):
    with translate_errors("list the entities"):
        return svc.list_all()


@router.get("/{entity_id}", response_model=models.OrganizationalEntity)
def get_entity(entity_id: RecordId, svc: services.OrganizationalEntityService = Depends(get_service)):
    with translate_errors("fetch the entity"):
        return svc.get(entity_id)


@router.put("/{entity_id}", response_model=models.OrganizationalEntity)
def update_entity(entity_id: RecordId, payload: EntityIn, svc: services.OrganizationalEntityService = Depends(get_service)):
    with translate_errors("update the entity"):
        return svc.update(entity_id, payload)


@router.put("/{entity_id}/status", response_model=models.OrganizationalEntity)
def update_entity_status(entity_id: RecordId, payload: StatusIn, svc: services.OrganizationalEntityService = Depends(get_service)):
    with translate_errors("update the entity status"):
        return svc.set_field(entity_id, "status", payload.status)


@router.put("/{entity_id}/name", response_model=models.OrganizationalEntity)
def update_entity_name(entity_id: RecordId, payload: NameIn, svc: services.OrganizationalEntityService = Depends(get_service)):
    with translate_errors("update the entity name"):
        return svc.set_field(entity_id, "name", payload.name)


@router.put("/{entity_id}/address", response_model=models.OrganizationalEntity)
def update_entity_address(entity_id: RecordId, payload: AddressIn, svc: services.OrganizationalEntityService = Depends(get_service)):
    with translate_errors("update the entity address"):
        return svc.set_field(entity_id, "address", payload.address)


@router.put("/{entity_id}/phone", response_model=models.OrganizationalEntity)
def update_entity_phone(entity_id: RecordId, payload: PhoneIn, svc: services.OrganizationalEntityService = Depends(get_service)):
    with translate_errors("update the entity phone"):
        return svc.set_field(entity_id, "phone", payload.phone)


@router.put("/{entity_id}/type", response_model=models.OrganizationalEntity)
def update_entity_type(entity_id: RecordId, payload: EntityTypeIn, svc: services.OrganizationalEntityService = Depends(get_service)):
    with translate_errors("update the entity type"):
        return svc.set_field(entity_id, "entity_type", payload.entity_type)


@router.delete("/{entity_id}", status_code=204)
def delete_entity(entity_id: RecordId, svc: services.OrganizationalEntityService = Depends(get_service)):
    """Delete an entity; rejected with 500 while a reseller references it."""
    with translate_errors("remove the entity"):
        svc.delete(entity_id)
    return Response(status_code=204)

"""Business logic services used by HTTP controllers.

One service per record type. Services check that referenced parents
exist, copy payload fields onto records, stamp audit timestamps and
persist through the repositories. They raise the exceptions from
`central_api.exceptions` and leave HTTP concerns to the controllers.
"""

import logging
from typing import Generic, List, TypeVar

from sqlmodel import Session

from . import models, repositories, schemas
from .exceptions import ParentNotFoundError, RecordNotFoundError

logger = logging.getLogger("central_api.services")

T = TypeVar("T")


class RecordService(Generic[T]):
    """Lookups and single-field updates shared by every record type."""
    label = "record"

    def __init__(self, repo: repositories.Repository):
        self.repo = repo

    def list_all(self) -> List[T]:
        return self.repo.list_all()

    def get(self, record_id: int) -> T:
        """Return the record or raise `RecordNotFoundError`."""
        record = self.repo.get(record_id)
        if record is None:
            raise RecordNotFoundError(self.label, record_id)
        return record

    def set_field(self, record_id: int, field: str, value) -> T:
        """Change exactly one field of an existing record.

        `updated_at` is stamped as well on record types that carry it.
        """
        record = self.get(record_id)
        setattr(record, field, value)
        self._touch(record)
        self.repo.update(record)
        logger.info("%s_updated id=%s field=%s", self.label, record_id, field)
        return record

    def delete(self, record_id: int) -> None:
        record = self.get(record_id)
        self.repo.delete(record)
        logger.info("%s_deleted id=%s", self.label, record_id)

    def _touch(self, record) -> None:
        if hasattr(record, "updated_at"):
            record.updated_at = models.utcnow()


class SoftwareService(RecordService[models.Software]):
    """Create and update software products."""
    label = "software"

    def __init__(self, session: Session):
        super().__init__(repositories.SoftwareRepository(session))

    def create(self, payload: schemas.SoftwareIn) -> models.Software:
        software = models.Software(
            name=payload.name,
            description=payload.description,
            status=payload.status,
            created_at=models.utcnow(),
        )
        self.repo.add(software)
        logger.info("software_created id=%s", software.id)
        return software

    def update(self, software_id: int, payload: schemas.SoftwareIn) -> models.Software:
        software = self.get(software_id)
        software.name = payload.name
        software.description = payload.description
        software.status = payload.status
        self._touch(software)
        self.repo.update(software)
        logger.info("software_updated id=%s", software_id)
        return software


class ModuleService(RecordService[models.Module]):
    """Create, update and list modules of a software product.

    A module can only point at a software product that exists, both at
    creation and whenever `software_id` is reassigned.
    """
    label = "module"

    def __init__(self, session: Session):
        super().__init__(repositories.ModuleRepository(session))
        self.software_repo = repositories.SoftwareRepository(session)

    def create(self, payload: schemas.ModuleIn) -> models.Module:
        self._require_software(payload.software_id)
        module = models.Module(
            name=payload.name,
            description=payload.description,
            status=payload.status,
            software_id=payload.software_id,
            created_at=models.utcnow(),
        )
        self.repo.add(module)
        logger.info("module_created id=%s software_id=%s", module.id, module.software_id)
        return module

    def list_by_software(self, software_id: int) -> List[models.Module]:
        """Return the modules of `software_id`; an empty list if it has none."""
        if self.software_repo.get(software_id) is None:
            raise RecordNotFoundError("software", software_id)
        return self.repo.list_by_software(software_id)

    def update(self, module_id: int, payload: schemas.ModuleIn) -> models.Module:
        module = self.get(module_id)
        self._require_software(payload.software_id)
        module.name = payload.name
        module.description = payload.description
        module.software_id = payload.software_id
        module.status = payload.status
        self._touch(module)
        self.repo.update(module)
        logger.info("module_updated id=%s", module_id)
        return module

    def _require_software(self, software_id: int) -> None:
        if self.software_repo.find_first(models.Software.id == software_id) is None:
            raise ParentNotFoundError("software", software_id)


class OrganizationalEntityService(RecordService[models.OrganizationalEntity]):
    """Create and update organizational entities."""
    label = "entity"

    def __init__(self, session: Session):
        super().__init__(repositories.OrganizationalEntityRepository(session))

    def create(self, payload: schemas.EntityIn) -> models.OrganizationalEntity:
        entity = models.OrganizationalEntity(
            name=payload.name,
            address=payload.address,
            phone=payload.phone,
            status=payload.status,
            entity_type=payload.entity_type,
            created_at=models.utcnow(),
        )
        self.repo.add(entity)
        logger.info("entity_created id=%s type=%s", entity.id, entity.entity_type.value)
        return entity

    def update(self, entity_id: int, payload: schemas.EntityIn) -> models.OrganizationalEntity:
        entity = self.get(entity_id)
        entity.name = payload.name
        entity.address = payload.address
        entity.phone = payload.phone
        entity.status = payload.status
        entity.entity_type = payload.entity_type
        self._touch(entity)
        self.repo.update(entity)
        logger.info("entity_updated id=%s", entity_id)
        return entity


class ResellerService(RecordService[models.Reseller]):
    """Create, update and list resellers of an organizational entity."""
    label = "reseller"

    def __init__(self, session: Session):
        super().__init__(repositories.ResellerRepository(session))
        self.entity_repo = repositories.OrganizationalEntityRepository(session)

    def create(self, payload: schemas.ResellerIn) -> models.Reseller:
        self._require_entity(payload.entity_id)
        reseller = models.Reseller(
            entity_id=payload.entity_id,
            status=payload.status,
            created_at=models.utcnow(),
        )
        self.repo.add(reseller)
        logger.info("reseller_created id=%s entity_id=%s", reseller.id, reseller.entity_id)
        return reseller

    def list_by_entity(self, entity_id: int) -> List[models.Reseller]:
        """Return the resellers of `entity_id`; an empty list if it has none."""
        if self.entity_repo.get(entity_id) is None:
            raise RecordNotFoundError("entity", entity_id)
        return self.repo.list_by_entity(entity_id)

    def update(self, reseller_id: int, payload: schemas.ResellerIn) -> models.Reseller:
        reseller = self.get(reseller_id)
        self._require_entity(payload.entity_id)
        reseller.entity_id = payload.entity_id
        reseller.status = payload.status
        self.repo.update(reseller)
        logger.info("reseller_updated id=%s", reseller_id)
        return reseller

    def _require_entity(self, entity_id: int) -> None:
        if self.entity_repo.find_first(models.OrganizationalEntity.id == entity_id) is None:
            raise ParentNotFoundError("entity", entity_id)

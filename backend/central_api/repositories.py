"""Repository classes encapsulating database operations.

`Repository` is a single generic data-access class parametrized over a
SQLModel table type. It commits and refreshes where appropriate and
turns integrity failures into domain exceptions after rolling back, so
the session stays usable for the rest of the request. The small
subclasses add the lookups the services need for each record type.
"""

from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlmodel import SQLModel, Session, select

from . import models
from .exceptions import RecordValidationError, ReferentialIntegrityError

T = TypeVar("T", bound=SQLModel)


class Repository(Generic[T]):
    """CRUD operations for one record type."""
    model: Type[T]

    def __init__(self, session: Session, model: Optional[Type[T]] = None):
        self.session = session
        if model is not None:
            self.model = model

    def add(self, record: T) -> T:
        """Persist a new record and return the managed instance with its id."""
        self.session.add(record)
        self._commit(record)
        return record

    def list_all(self) -> List[T]:
        """Return every stored record of this type."""
        stmt = select(self.model).order_by(self.model.id)
        return list(self.session.exec(stmt).all())

    def get(self, record_id: int) -> Optional[T]:
        """Get a record by primary key or `None`."""
        return self.session.get(self.model, record_id)

    def find_first(self, *criteria) -> Optional[T]:
        """Return the first record matching all `criteria` or `None`.

        `criteria` are SQLAlchemy column expressions, e.g.
        `repo.find_first(models.Module.name == "Billing")`.
        """
        stmt = select(self.model).where(*criteria)
        return self.session.exec(stmt).first()

    def find_all(self, *criteria) -> List[T]:
        """Return every record matching all `criteria`."""
        stmt = select(self.model).where(*criteria).order_by(self.model.id)
        return list(self.session.exec(stmt).all())

    def update(self, record: T) -> T:
        """Persist in-place changes to an existing record."""
        if getattr(record, "id", None) is None:
            raise RecordValidationError(f"{self.model.__name__} has no id; add it before updating")
        self.session.add(record)
        self._commit(record)
        return record

    def delete(self, record: T) -> None:
        """Remove a record.

        Raises `ReferentialIntegrityError` when a restrict-on-delete
        relationship still points at the row; nothing is removed then.
        """
        record_id = record.id
        self.session.delete(record)
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            raise ReferentialIntegrityError(
                f"{self.model.__name__} {record_id} is still referenced by other records: {exc.orig}"
            ) from exc

    def _commit(self, record: T) -> None:
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            raise RecordValidationError(f"{self.model.__name__} could not be saved: {exc.orig}") from exc
        self.session.refresh(record)


class SoftwareRepository(Repository[models.Software]):
    model = models.Software


class ModuleRepository(Repository[models.Module]):
    model = models.Module

    def list_by_software(self, software_id: int) -> List[models.Module]:
        """List all modules that belong to `software_id`."""
        return self.find_all(models.Module.software_id == software_id)


class OrganizationalEntityRepository(Repository[models.OrganizationalEntity]):
    model = models.OrganizationalEntity

    def get_by_name(self, name: str) -> Optional[models.OrganizationalEntity]:
        """Return the first entity with exactly this name or `None`."""
        return self.find_first(models.OrganizationalEntity.name == name)


class ResellerRepository(Repository[models.Reseller]):
    model = models.Reseller

    def list_by_entity(self, entity_id: int) -> List[models.Reseller]:
        """List all resellers attached to `entity_id`."""
        return self.find_all(models.Reseller.entity_id == entity_id)

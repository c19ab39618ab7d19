import pytest

from central_api import models
from central_api.exceptions import RecordValidationError, ReferentialIntegrityError
from central_api.repositories import (
    ModuleRepository,
    OrganizationalEntityRepository,
    Repository,
    ResellerRepository,
    SoftwareRepository,
)


def _software(session, name="ERP"):
    return SoftwareRepository(session).add(models.Software(name=name, description="core"))


def test_add_assigns_identity_and_lists(session):
    repo = SoftwareRepository(session)
    first = _software(session)
    second = _software(session, "POS")
    assert first.id is not None
    assert second.id != first.id
    assert [s.name for s in repo.list_all()] == ["ERP", "POS"]


def test_add_rejects_missing_required_field(session):
    repo = SoftwareRepository(session)
    with pytest.raises(RecordValidationError):
        repo.add(models.Software(name=None))
    assert repo.list_all() == []


def test_add_rejects_unknown_foreign_key(session):
    repo = ModuleRepository(session)
    with pytest.raises(RecordValidationError):
        repo.add(models.Module(name="Billing", software_id=999))
    assert repo.list_all() == []


def test_find_first_returns_none_when_nothing_matches(session):
    repo = SoftwareRepository(session)
    _software(session)
    assert repo.find_first(models.Software.name == "missing") is None
    found = repo.find_first(models.Software.name == "ERP")
    assert found is not None and found.description == "core"


def test_generic_repository_accepts_model_argument(session):
    repo = Repository(session, models.Software)
    created = repo.add(models.Software(name="CRM"))
    assert repo.get(created.id).name == "CRM"


def test_update_persists_in_place(session):
    repo = SoftwareRepository(session)
    software = _software(session)
    software.description = "changed"
    repo.update(software)
    session.expire_all()
    assert repo.get(software.id).description == "changed"


def test_update_requires_identity(session):
    with pytest.raises(RecordValidationError):
        SoftwareRepository(session).update(models.Software(name="unsaved"))


def test_list_by_parent(session):
    software = _software(session)
    other = _software(session, "POS")
    modules = ModuleRepository(session)
    modules.add(models.Module(name="Billing", software_id=software.id))
    modules.add(models.Module(name="Stock", software_id=software.id))
    modules.add(models.Module(name="Checkout", software_id=other.id))
    assert [m.name for m in modules.list_by_software(software.id)] == ["Billing", "Stock"]


def test_delete_blocked_by_restrict_keeps_both_records(session):
    entities = OrganizationalEntityRepository(session)
    resellers = ResellerRepository(session)
    entity = entities.add(models.OrganizationalEntity(name="Acme", entity_type=models.EntityType.COMPANY))
    reseller = resellers.add(models.Reseller(entity_id=entity.id))
    with pytest.raises(ReferentialIntegrityError):
        entities.delete(entity)
    assert entities.get(entity.id) is not None
    assert resellers.get(reseller.id) is not None
    assert resellers.list_by_entity(entity.id) == [reseller]


def test_delete_removes_record(session):
    repo = SoftwareRepository(session)
    software = _software(session)
    repo.delete(software)
    assert repo.get(software.id) is None


def test_get_by_name(session):
    entities = OrganizationalEntityRepository(session)
    entities.add(models.OrganizationalEntity(name="Acme", entity_type=models.EntityType.COMPANY))
    partner = entities.add(models.OrganizationalEntity(name="Partner", entity_type=models.EntityType.RESELLER))
    assert entities.get_by_name("Partner").id == partner.id
    assert entities.get_by_name("Nobody") is None


def test_update_with_unknown_parent_rolls_back(session):
    software = _software(session)
    modules = ModuleRepository(session)
    module = modules.add(models.Module(name="Billing", software_id=software.id))
    module.software_id = 999
    with pytest.raises(RecordValidationError):
        modules.update(module)
    session.expire_all()
    assert modules.get(module.id).software_id == software.id
    # the session is still usable after the failed commit
    modules.add(models.Module(name="Stock", software_id=software.id))
    assert [m.name for m in modules.list_by_software(software.id)] == ["Billing", "Stock"]

"""CLI script to load a small demo catalogue into the backend DB.
Usage: python scripts/seed_demo.py
"""
import sys
import pathlib
# Ensure `backend/` is on sys.path so `central_api` imports work when running this script directly
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
from sqlmodel import Session
from central_api.database import engine, create_db_and_tables
from central_api import models, schemas, services

DEMO_SOFTWARE = {
    'ERP': ['Billing', 'Inventory', 'Payroll'],
    'POS': ['Checkout'],
}

def main():
    """Create demo software products, their modules and one reseller.

    Products that already exist (by name) are left alone, so the script
    can be run repeatedly.
    """
    create_db_and_tables()
    with Session(engine) as session:
        software_svc = services.SoftwareService(session)
        module_svc = services.ModuleService(session)
        for name, module_names in DEMO_SOFTWARE.items():
            if software_svc.repo.find_first(models.Software.name == name):
                print(f'Skipping {name}: already present')
                continue
            software = software_svc.create(schemas.SoftwareIn(name=name, description='demo'))
            for module_name in module_names:
                module_svc.create(schemas.ModuleIn(name=module_name, software_id=software.id))
            print(f'Created {name} (id {software.id}) with {len(module_names)} modules')
        entity_svc = services.OrganizationalEntityService(session)
        if not entity_svc.repo.get_by_name('Demo Partner'):
            entity = entity_svc.create(schemas.EntityIn(name='Demo Partner', entity_type=models.EntityType.RESELLER))
            reseller = services.ResellerService(session).create(schemas.ResellerIn(entity_id=entity.id))
            print(f'Created reseller {reseller.id} for entity {entity.id}')

if __name__ == '__main__':
    main()

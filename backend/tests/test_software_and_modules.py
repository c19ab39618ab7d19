from fastapi.testclient import TestClient

from central_api.main import app

client = TestClient(app)


def _create_software(name="ERP", description="core"):
    r = client.post('/api/software', json={'name': name, 'description': description})
    assert r.status_code == 201
    return r.json()


def _create_module(software_id, name="Billing"):
    r = client.post('/api/modules', json={'name': name, 'software_id': software_id})
    assert r.status_code == 201
    return r.json()


def test_software_module_scenario():
    software = _create_software()
    assert software['id'] is not None
    assert software['status'] is True
    assert software['created_at']

    module = _create_module(software['id'])
    assert module['software_id'] == software['id']
    assert module['created_at']

    r = client.get(f"/api/modules/by-software/{software['id']}")
    assert r.status_code == 200
    assert [m['id'] for m in r.json()] == [module['id']]

    # modules still reference the software, the database refuses the delete
    r = client.delete(f"/api/software/{software['id']}")
    assert r.status_code == 500
    assert 'Error while trying to remove the software' in r.json()['detail']
    assert client.get(f"/api/software/{software['id']}").status_code == 200
    assert client.get(f"/api/modules/{module['id']}").status_code == 200


def test_create_module_with_unknown_software_is_rejected():
    r = client.post('/api/modules', json={'name': 'Billing', 'software_id': 4242})
    assert r.status_code == 400
    assert '4242' in r.json()['detail']
    assert client.get('/api/modules').json() == []


def test_get_unknown_records_returns_404():
    assert client.get('/api/software/77').status_code == 404
    assert client.get('/api/modules/77').status_code == 404
    assert client.delete('/api/software/77').status_code == 404
    assert client.put('/api/modules/77/status', json={'status': False}).status_code == 404


def test_modules_by_software():
    software = _create_software()
    assert client.get(f"/api/modules/by-software/{software['id']}").json() == []
    assert client.get('/api/modules/by-software/999').status_code == 404


def test_status_update_changes_only_status():
    software = _create_software()
    module = _create_module(software['id'])
    r = client.put(f"/api/modules/{module['id']}/status", json={'status': False})
    assert r.status_code == 200
    updated = r.json()
    assert updated['status'] is False
    assert updated['updated_at'] is not None
    for key in ('id', 'name', 'description', 'software_id', 'created_at'):
        assert updated[key] == module[key]


def test_name_update_addresses_record_by_path_id():
    first = _create_software('ERP')
    second = _create_software('POS')
    r = client.put(f"/api/software/{second['id']}/name", json={'name': 'ERP'})
    assert r.status_code == 200
    assert client.get(f"/api/software/{first['id']}").json()['name'] == 'ERP'
    assert client.get(f"/api/software/{second['id']}").json()['name'] == 'ERP'
    assert client.get(f"/api/software/{second['id']}").json()['description'] == 'core'


def test_update_whole_software():
    software = _create_software()
    r = client.put(f"/api/software/{software['id']}", json={'name': 'ERP 2', 'description': None, 'status': False})
    assert r.status_code == 200
    body = r.json()
    assert body['name'] == 'ERP 2'
    assert body['description'] is None
    assert body['status'] is False
    assert body['updated_at'] is not None
    assert client.put('/api/software/999', json={'name': 'x'}).status_code == 404


def test_update_module_reassigns_and_validates_parent():
    erp = _create_software('ERP')
    pos = _create_software('POS')
    module = _create_module(erp['id'])
    payload = {'name': 'Checkout', 'description': 'till', 'status': True, 'software_id': pos['id']}
    r = client.put(f"/api/modules/{module['id']}", json=payload)
    assert r.status_code == 200
    assert r.json()['software_id'] == pos['id']

    payload['software_id'] = 999
    r = client.put(f"/api/modules/{module['id']}", json=payload)
    assert r.status_code == 400
    assert client.get(f"/api/modules/{module['id']}").json()['software_id'] == pos['id']

    assert client.put('/api/modules/999', json={**payload, 'software_id': erp['id']}).status_code == 404


def test_list_after_creates_and_deletes():
    created = [_create_software(f'S{i}') for i in range(5)]
    for s in created[:2]:
        r = client.delete(f"/api/software/{s['id']}")
        assert r.status_code == 204
    r = client.get('/api/software')
    assert r.status_code == 200
    assert len(r.json()) == 3


def test_delete_module_then_software():
    software = _create_software()
    module = _create_module(software['id'])
    assert client.delete(f"/api/modules/{module['id']}").status_code == 204
    assert client.get(f"/api/modules/{module['id']}").status_code == 404
    assert client.delete(f"/api/software/{software['id']}").status_code == 204


def test_ids_outside_integer_range_are_rejected():
    too_big = 2**63
    r = client.get(f'/api/software/{too_big}')
    assert r.status_code == 400
    assert client.get('/api/software/0').status_code == 400
    r = client.post('/api/modules', json={'name': 'Billing', 'software_id': too_big})
    assert r.status_code == 400
    assert client.get('/api/modules').json() == []
    r = client.post('/api/resellers', json={'entity_id': too_big})
    assert r.status_code == 400
    # the largest storable id is valid input and simply does not exist
    assert client.get(f'/api/software/{too_big - 1}').status_code == 404

"""
Project CRUD through the JSON API.
"""

import pytest


@pytest.mark.api
def test_create_returns_entity_with_id_and_timestamps(admin_client, project_payload):
    resp = admin_client.post('/api/projects', json=project_payload)
    assert resp.status_code == 201
    project = resp.get_json()
    assert project['id']
    assert project['createdAt']
    assert project['createdAt'] == project['updatedAt']
    assert project['title'] == 'Placement Notifier'
    assert project['technologies'] == ['Next.js', 'FastAPI']
    assert project['imageUrl'] is None
    assert project['featured'] is True


@pytest.mark.api
def test_create_defaults_lists_and_flags(admin_client):
    resp = admin_client.post('/api/projects', json={'title': 'Bare', 'description': 'Minimal'})
    assert resp.status_code == 201
    project = resp.get_json()
    assert project['technologies'] == []
    assert project['featured'] is False


@pytest.mark.api
@pytest.mark.parametrize('missing', ['title', 'description'])
def test_create_requires_fields(admin_client, project_payload, missing):
    project_payload.pop(missing)
    resp = admin_client.post('/api/projects', json=project_payload)
    assert resp.status_code == 400
    assert missing in resp.get_json()['error']


@pytest.mark.api
def test_create_rejects_non_object_body(admin_client):
    resp = admin_client.post('/api/projects', json=['not', 'an', 'object'])
    assert resp.status_code == 400


@pytest.mark.api
def test_generated_ids_are_unique(admin_client, project_payload):
    ids = {
        admin_client.post('/api/projects', json=project_payload).get_json()['id']
        for _ in range(5)
    }
    assert len(ids) == 5


@pytest.mark.api
def test_partial_update_keeps_unspecified_fields(admin_client, project_payload):
    created = admin_client.post('/api/projects', json=project_payload).get_json()

    resp = admin_client.put(f"/api/projects/{created['id']}", json={'title': 'Renamed'})
    assert resp.status_code == 200
    updated = resp.get_json()
    assert updated['title'] == 'Renamed'
    assert updated['description'] == project_payload['description']
    assert updated['technologies'] == project_payload['technologies']
    assert updated['githubUrl'] == project_payload['githubUrl']
    assert updated['featured'] is True
    assert updated['createdAt'] == created['createdAt']
    assert updated['updatedAt'] >= created['updatedAt']


@pytest.mark.api
def test_update_null_and_empty_values_do_not_clobber(admin_client, project_payload):
    created = admin_client.post('/api/projects', json=project_payload).get_json()
    resp = admin_client.put(f"/api/projects/{created['id']}",
                            json={'title': None, 'githubUrl': '', 'featured': None})
    updated = resp.get_json()
    assert updated['title'] == project_payload['title']
    assert updated['githubUrl'] == project_payload['githubUrl']
    assert updated['featured'] is True


@pytest.mark.api
def test_update_false_flag_and_empty_list_overwrite(admin_client, project_payload):
    created = admin_client.post('/api/projects', json=project_payload).get_json()
    resp = admin_client.put(f"/api/projects/{created['id']}",
                            json={'featured': False, 'technologies': []})
    updated = resp.get_json()
    assert updated['featured'] is False
    assert updated['technologies'] == []


@pytest.mark.api
def test_update_unknown_id_is_404(admin_client):
    resp = admin_client.put('/api/projects/does-not-exist', json={'title': 'x'})
    assert resp.status_code == 404


@pytest.mark.api
def test_get_by_id(client, admin_client, project_payload):
    created = admin_client.post('/api/projects', json=project_payload).get_json()
    resp = client.get(f"/api/projects/{created['id']}")
    assert resp.status_code == 200
    assert resp.get_json() == created


@pytest.mark.api
def test_delete_then_get_is_404(admin_client, project_payload):
    created = admin_client.post('/api/projects', json=project_payload).get_json()
    resp = admin_client.delete(f"/api/projects/{created['id']}")
    assert resp.status_code == 200
    assert resp.get_json() == {'success': True}
    assert admin_client.get(f"/api/projects/{created['id']}").status_code == 404


@pytest.mark.api
def test_delete_nonexistent_is_404(admin_client):
    resp = admin_client.delete('/api/projects/does-not-exist')
    assert resp.status_code == 404
    assert resp.get_json() == {'error': 'Project not found'}


@pytest.mark.api
def test_list_is_public_and_filterable(client, admin_client, project_payload):
    admin_client.post('/api/projects', json=project_payload)
    admin_client.post('/api/projects', json={
        'title': 'Water Delivery', 'description': 'Ecommerce',
        'technologies': ['React', 'Supabase'], 'featured': False,
    })

    assert len(client.get('/api/projects').get_json()) == 2

    featured = client.get('/api/projects?featured=true').get_json()
    assert [p['title'] for p in featured] == ['Placement Notifier']

    react = client.get('/api/projects?tech=react').get_json()
    assert [p['title'] for p in react] == ['Water Delivery']


@pytest.mark.api
def test_storage_failure_returns_generic_500(admin_client, project_payload, monkeypatch):
    from sqlalchemy.exc import OperationalError
    import blueprints.api.routes as api_routes

    def broken(values):
        raise OperationalError('INSERT', {}, Exception('database is locked'))

    monkeypatch.setattr(api_routes, 'create_project', broken)
    resp = admin_client.post('/api/projects', json=project_payload)
    assert resp.status_code == 500
    assert resp.get_json() == {'error': 'Failed to create project'}


@pytest.mark.api
@pytest.mark.parametrize('technologies', [5, True, {'React': 1}, ['React', 3]])
def test_create_rejects_malformed_list_field(admin_client, project_payload, technologies):
    project_payload['technologies'] = technologies
    resp = admin_client.post('/api/projects', json=project_payload)
    assert resp.status_code == 400
    assert resp.get_json() == {'error': 'technologies must be a list of strings'}
    assert admin_client.get('/api/projects').get_json() == []


@pytest.mark.api
@pytest.mark.parametrize('technologies', [5, True, {'React': 1}])
def test_update_rejects_malformed_list_field(admin_client, project_payload, technologies):
    created = admin_client.post('/api/projects', json=project_payload).get_json()
    resp = admin_client.put(f"/api/projects/{created['id']}",
                            json={'title': 'Renamed', 'technologies': technologies})
    assert resp.status_code == 400
    assert resp.get_json() == {'error': 'technologies must be a list of strings'}

    stored = admin_client.get(f"/api/projects/{created['id']}").get_json()
    assert stored['title'] == project_payload['title']
    assert stored['technologies'] == project_payload['technologies']


@pytest.mark.api
def test_comma_separated_string_is_accepted_for_list_field(admin_client, project_payload):
    project_payload['technologies'] = 'Flask, SQLAlchemy'
    created = admin_client.post('/api/projects', json=project_payload).get_json()
    assert created['technologies'] == ['Flask', 'SQLAlchemy']


@pytest.mark.api
def test_timestamps_are_utc_iso_strings(admin_client, project_payload):
    created = admin_client.post('/api/projects', json=project_payload).get_json()
    assert created['createdAt'].endswith('Z')
    assert created['updatedAt'].endswith('Z')
    assert 'T' in created['createdAt']

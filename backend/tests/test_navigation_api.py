def test_session_resolves_primary_role(client, auth_headers):
    resp = client.get('/nav/session', headers=auth_headers(' MaterialControl', 'AppUser'))
    assert resp.status_code == 200
    body = resp.get_json()
    assert body['role'] == 'AppUser'
    assert body['default_route'] == '/po/list'
    assert body['label'] == 'ผู้ใช้ทั่วไป'


def test_token_without_usable_role_is_refused(client, auth_headers):
    for headers in (auth_headers('SomeUnknownRole'), auth_headers()):
        resp = client.get('/nav/menu', headers=headers)
        assert resp.status_code == 403
        assert resp.get_json()['error']['detail'] == 'No usable role'


def test_missing_token_is_401(client):
    resp = client.get('/nav/menu')
    assert resp.status_code == 401
    assert resp.get_json()['error']['status'] == 401


def test_menu_is_sidebar_by_default(client, auth_headers):
    resp = client.get('/nav/menu', headers=auth_headers('Vendor'))
    assert resp.status_code == 200
    body = resp.get_json()
    assert body['role'] == 'Vendor'
    assert [n['id'] for n in body['data']] == ['home', 'vendor-portal']


def test_menu_include_hidden(client, auth_headers):
    headers = auth_headers('AppUser')
    sidebar = client.get('/nav/menu', headers=headers).get_json()['data']
    full = client.get('/nav/menu?include_hidden=1', headers=headers).get_json()['data']
    po_sidebar = next(n for n in sidebar if n['id'] == 'po-management')
    po_full = next(n for n in full if n['id'] == 'po-management')
    assert [c['id'] for c in po_sidebar['children']] == ['po-list']
    assert [c['id'] for c in po_full['children']] == ['po-list', 'po-detail']


def test_breadcrumb_endpoint(client, auth_headers):
    resp = client.get('/nav/breadcrumb?path=/admin/users', headers=auth_headers('Admin'))
    assert resp.status_code == 200
    assert resp.get_json()['data'] == [
        {'title': 'Administration', 'path': '/admin'},
        {'title': 'Manage Users', 'path': '/admin/users'},
    ]
    denied = client.get('/nav/breadcrumb?path=/admin/users', headers=auth_headers('Vendor'))
    assert denied.get_json()['data'] == []


def test_breadcrumb_requires_path(client, auth_headers):
    resp = client.get('/nav/breadcrumb', headers=auth_headers('Admin'))
    assert resp.status_code == 400
    assert resp.get_json()['error']['detail'] == 'path required'


def test_permissions_endpoint(client, auth_headers):
    body = client.get('/nav/permissions', headers=auth_headers('AppUser')).get_json()
    assert body['role'] == 'AppUser'
    assert body['permissions']['can_edit_remarks'] is True
    assert body['permissions']['can_send_email'] is False
    assert 'unit_price' in body['permissions']['masked_fields']


def test_access_endpoint(client, auth_headers):
    ok = client.get('/nav/access?path=/po/PO-1/edit', headers=auth_headers('AppUser')).get_json()
    assert ok == {'path': '/po/PO-1/edit', 'allowed': True, 'redirect': None}
    denied = client.get('/nav/access?path=/po/PO-1/send-email', headers=auth_headers('AppUser')).get_json()
    assert denied['allowed'] is False
    assert denied['redirect'] == '/po/list'
    unlisted = client.get('/nav/access?path=/beta/feature', headers=auth_headers('Admin')).get_json()
    assert unlisted['allowed'] is True


def test_mask_endpoint(client, auth_headers):
    po = {'po_number': 'PO-1', 'total_amount': 10, 'items': [{'unit_price': 1, 'quantity': 10}]}
    body = client.post('/nav/mask', json=po, headers=auth_headers('Vendor')).get_json()
    assert body['data']['po_number'] == 'PO-1'
    assert body['data']['total_amount'] == '***'
    assert body['data']['items'][0] == {'unit_price': '***', 'quantity': 10}
    bad = client.post('/nav/mask', json=[1, 2], headers=auth_headers('Vendor'))
    assert bad.status_code == 400


def test_custom_roles_claim():
    from flask_jwt_extended import create_access_token
    from po_access import create_app
    app = create_app({'TESTING': True, 'JWT_SECRET_KEY': 'another-test-secret-with-enough-length', 'JWT_ROLES_CLAIM': 'groups'})
    with app.app_context():
        token = create_access_token(identity='u', additional_claims={'groups': ['Admin']})
    resp = app.test_client().get('/nav/session', headers={'Authorization': f'Bearer {token}'})
    assert resp.get_json()['role'] == 'Admin'


def test_single_string_roles_claim(app_instance, client):
    from flask_jwt_extended import create_access_token
    with app_instance.app_context():
        token = create_access_token(identity='u', additional_claims={'roles': ' Admin '})
    resp = client.get('/nav/session', headers={'Authorization': f'Bearer {token}'})
    assert resp.status_code == 200
    assert resp.get_json()['role'] == 'Admin'


def test_roles_claim_of_wrong_type_is_refused(app_instance, client):
    from flask_jwt_extended import create_access_token
    with app_instance.app_context():
        token = create_access_token(identity='u', additional_claims={'roles': {'Admin': True}})
    resp = client.get('/nav/session', headers={'Authorization': f'Bearer {token}'})
    assert resp.status_code == 403

def test_unknown_path_returns_error_json(client):
    resp = client.get('/non-existent-path')
    # Flask default 404 should be wrapped by error handler
    assert resp.status_code == 404
    body = resp.get_json()
    assert 'error' in body
    assert body['error']['status'] == 404
    assert 'detail' in body['error']


def test_healthz(client):
    resp = client.get('/healthz')
    assert resp.status_code == 200
    assert resp.get_json() == {'status': 'ok'}


def test_internal_error_shape(client, auth_headers, monkeypatch):
    import po_access.routes.navigation as nav_mod

    def boom(*a, **k):
        raise RuntimeError('explode')

    monkeypatch.setattr(nav_mod, 'permissions_for', boom)
    resp = client.get('/nav/permissions', headers=auth_headers('Admin'))
    assert resp.status_code == 500
    body = resp.get_json()
    assert body['error']['status'] == 500
    assert body['error']['title'] == 'Internal Server Error'

def test_list_scenes(client):
    response = client.get('/api/scenes')

    assert response.status_code == 200
    scenes = response.get_json()['data']
    assert [s['id'] for s in scenes] == ['coffee-shop', 'subway', 'office', 'supermarket']
    assert scenes[0]['imageUrl'] == 'https://picsum.photos/seed/coffee/600/400'


def test_filter_by_category(client):
    scenes = client.get('/api/scenes?category=travel').get_json()['data']

    assert [s['id'] for s in scenes] == ['subway']


def test_unknown_category_is_rejected(client):
    response = client.get('/api/scenes?category=space')

    assert response.status_code == 400
    body = response.get_json()
    assert body['code'] == 'VALIDATION_ERROR'
    assert 'daily' in body['details']['errors']['category']


def test_get_scene(client):
    data = client.get('/api/scenes/office').get_json()['data']

    assert data['title'] == 'Business Meeting'
    assert data['category'] == 'business'


def test_get_unknown_scene(client):
    response = client.get('/api/scenes/nowhere')

    assert response.status_code == 404
    assert response.get_json()['details'] == {'resource': 'scene'}


def test_unknown_api_route_uses_error_envelope(client):
    response = client.get('/api/nothing-here')

    assert response.status_code == 404
    assert response.get_json() == {'success': False, 'message': 'Endpoint not found', 'code': 'NOT_FOUND'}

from wordmap_app.core.signals import center_changed, hover_changed


def _payload(response):
    assert response.status_code == 200, response.get_json()
    return response.get_json()['data']


def test_requires_login(client):
    response = client.get('/api/mindmap/')

    assert response.status_code == 401
    assert response.get_json()['code'] == 'UNAUTHENTICATED'


def test_empty_map_for_new_user(auth_client):
    data = _payload(auth_client.get('/api/mindmap/'))

    assert data['nodes'] == []
    assert data['edges'] == []
    assert data['center'] is None
    assert data['center_mode'] == 'none'


def test_auto_center_on_most_connected_word(auth_client, seeded_vocabulary):
    data = _payload(auth_client.get('/api/mindmap/'))

    # casa, hogar and home have two links each; casa is seen first
    assert data['center'] == 'casa'
    assert data['center_mode'] == 'auto'
    tiers = {node['id']: node['tier'] for node in data['nodes']}
    assert tiers == {'casa': 0, 'hogar': 1, 'home': 1, 'familia': 2, 'house': 2}
    assert data['available_words'] == ['casa', 'familia', 'hogar', 'home', 'house']


def test_vault_filter(auth_client, seeded_vocabulary):
    english = seeded_vocabulary['english'].vault_id

    data = _payload(auth_client.get(f'/api/mindmap/?vault={english}'))

    assert data['vault'] == english
    edges = {(edge['source'], edge['target']) for edge in data['edges']}
    assert ('casa', 'hogar') not in edges
    assert ('home', 'house') in edges


def test_invalid_vault_filter(auth_client):
    response = auth_client.get('/api/mindmap/?vault=banana')

    assert response.status_code == 400
    assert response.get_json()['code'] == 'VALIDATION_ERROR'


def test_click_pins_center_across_requests(auth_client, seeded_vocabulary):
    data = _payload(auth_client.post('/api/mindmap/center', json={'word': 'familia'}))

    assert data['center'] == 'familia'
    assert data['center_mode'] == 'pinned'
    assert {n['id']: n['tier'] for n in data['nodes']} == {'familia': 0, 'hogar': 1, 'casa': 2}

    again = _payload(auth_client.get('/api/mindmap/'))
    assert again['center'] == 'familia'


def test_search_and_reset(app, auth_client, seeded_vocabulary):
    changes = []

    def record(sender, **kwargs):
        changes.append((kwargs['previous'], kwargs['center']))

    with center_changed.connected_to(record, app):
        searched = _payload(auth_client.post('/api/mindmap/search', json={'word': 'home'}))
        reset = _payload(auth_client.post('/api/mindmap/reset'))

    assert searched['center'] == 'home'
    assert searched['search_term'] == 'home'
    assert {n['id'] for n in searched['nodes']} == {'home', 'house', 'casa'}

    assert reset['center_mode'] == 'auto'
    assert reset['center'] == 'casa'
    assert ('home', None) in changes


def test_search_for_unknown_word_keeps_empty_map(auth_client, seeded_vocabulary):
    data = _payload(auth_client.post('/api/mindmap/search', json={'word': 'perro'}))

    assert data['center'] == 'perro'
    assert data['nodes'] == []


def test_center_requires_word(auth_client):
    response = auth_client.post('/api/mindmap/center', json={})

    assert response.status_code == 400


def test_hover(app, auth_client, seeded_vocabulary):
    hovered = []

    def record(sender, **kwargs):
        hovered.append(kwargs['node_id'])

    with hover_changed.connected_to(record, app):
        data = _payload(auth_client.post('/api/mindmap/hover', json={'node_id': 'hogar'}))
        _payload(auth_client.post('/api/mindmap/hover', json={'node_id': 'hogar'}))
        cleared = _payload(auth_client.post('/api/mindmap/hover', json={'node_id': None}))

    assert data['hovered_node'] == 'hogar'
    assert cleared['hovered_node'] is None
    assert hovered == ['hogar', None]


def test_suggestions(auth_client, seeded_vocabulary):
    data = _payload(auth_client.get('/api/mindmap/suggestions?q=HO'))

    assert data['words'] == ['hogar', 'home', 'house']
    assert data['total'] == 3

from conftest import make_user, make_word

from wordmap_app.modules.texts.logics.text_analysis import extract_unique_words


class TestExtractWords:
    def test_unique_lowercase_in_first_seen_order(self):
        text = "La casa, LA CASA y el hogar. Casa-hogar 2024!"

        assert extract_unique_words(text) == ['la', 'casa', 'y', 'el', 'hogar']

    def test_empty(self):
        assert extract_unique_words('') == []
        assert extract_unique_words('123 ... !!!') == []


class TestTextsApi:
    def test_crud(self, auth_client):
        created = auth_client.post('/api/texts/', json={'title': 'Diario', 'content': 'Mi casa'})
        assert created.status_code == 201
        text_id = created.get_json()['data']['id']

        updated = auth_client.patch(f'/api/texts/{text_id}', json={'content': 'Mi hogar'})
        assert updated.get_json()['data']['content'] == 'Mi hogar'
        assert updated.get_json()['data']['title'] == 'Diario'

        listed = auth_client.get('/api/texts/').get_json()['data']
        assert [t['id'] for t in listed] == [text_id]

        assert auth_client.delete(f'/api/texts/{text_id}').status_code == 200
        assert auth_client.get(f'/api/texts/{text_id}').status_code == 404

    def test_title_required(self, auth_client):
        response = auth_client.post('/api/texts/', json={'title': ' ', 'content': 'x'})

        assert response.status_code == 400

    def test_analysis_matches_vault_words(self, auth_client, seeded_vocabulary):
        response = auth_client.post('/api/texts/analysis', json={'content': 'My HOME is my Casa, casa.'})

        found = response.get_json()['data']
        assert [entry['word'] for entry in found] == ['home', 'casa']
        assert found[0]['vaults'][0]['name'] == 'English'
        assert found[1]['vaults'][0]['words'][0]['name'] == 'casa'

    def test_word_in_two_vaults(self, auth_client, user, seeded_vocabulary):
        make_word(seeded_vocabulary['english'], 'Casa')

        found = auth_client.post('/api/texts/analysis', json={'content': 'casa'}).get_json()['data']

        assert len(found) == 1
        assert sorted(v['name'] for v in found[0]['vaults']) == ['English', 'Spanish']

    def test_stored_text_analysis(self, auth_client, seeded_vocabulary):
        text_id = auth_client.post(
            '/api/texts/', json={'title': 'Notes', 'content': 'familia y hogar'}
        ).get_json()['data']['id']

        found = auth_client.get(f'/api/texts/{text_id}/analysis').get_json()['data']

        assert [entry['word'] for entry in found] == ['familia', 'hogar']

    def test_texts_are_private(self, auth_client, app):
        from wordmap_app.models import Text, db

        other = make_user(name='Bo', email='bo@example.com')
        text = Text(title='Secret', content='x', user_id=other.user_id)
        db.session.add(text)
        db.session.commit()

        assert auth_client.get(f'/api/texts/{text.text_id}').status_code == 403

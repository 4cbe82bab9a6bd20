from conftest import make_user, make_vault, make_word

from wordmap_app.models import Sentence, SentenceWord, Vault, Word, db


def create(client, **payload):
    return client.post('/api/sentences/', json=payload)


class TestCreateSentence:
    def test_existing_and_new_words_ordered_by_position(self, auth_client, seeded_vocabulary):
        casa = seeded_vocabulary['casa']

        response = create(
            auth_client,
            title='  Mi casa ',
            notes='   ',
            words=[
                {'word_id': casa.word_id, 'position': 1},
                {'word_data': {'name': 'grande', 'grammatical_class': 'adjective'},
                 'position': 0, 'highlight_color': 'yellow'},
            ],
        )

        assert response.status_code == 201
        data = response.get_json()['data']
        assert data['title'] == 'Mi casa'
        assert data['notes'] is None
        assert [(w['word']['name'], w['position']) for w in data['words']] == [('grande', 0), ('casa', 1)]
        assert data['words'][0]['highlight_color'] == 'yellow'

    def test_new_words_go_to_builder_vault_unsaved(self, auth_client, user):
        create(auth_client, words=[
            {'word_data': {'name': 'grande', 'grammatical_class': 'adjective', 'translations': 'big, large'},
             'position': 0},
        ])

        vault = Vault.query.filter_by(user_id=user.user_id, name='Sentence Builder').one()
        word = Word.query.filter_by(vault_id=vault.vault_id).one()
        assert word.name == 'grande'
        assert word.is_saved is False
        assert word.confidence == 1
        assert word.translations == ['big', 'large']

    def test_builder_vault_reuses_same_name_word(self, auth_client, user):
        first = create(auth_client, words=[
            {'word_data': {'name': 'grande', 'grammatical_class': 'adjective'}, 'position': 0},
        ]).get_json()['data']
        second = create(auth_client, words=[
            {'word_data': {'name': 'GRANDE', 'grammatical_class': 'adjective'}, 'position': 0},
            {'word_data': {'name': 'Grande', 'grammatical_class': 'adjective'}, 'position': 1},
        ]).get_json()['data']

        ids = {entry['word_id'] for entry in first['words'] + second['words']}
        assert len(ids) == 1
        assert Vault.query.filter_by(user_id=user.user_id, name='Sentence Builder').count() == 1

    def test_requires_at_least_one_word(self, auth_client):
        response = create(auth_client, title='Empty', words=[])

        assert response.status_code == 400
        assert response.get_json()['details']['errors'] == {'words': 'required'}
        assert Sentence.query.count() == 0

    def test_word_needs_id_or_data(self, auth_client, seeded_vocabulary):
        casa = seeded_vocabulary['casa']

        both = create(auth_client, words=[{
            'word_id': casa.word_id,
            'word_data': {'name': 'x', 'grammatical_class': 'noun'},
            'position': 0,
        }])
        neither = create(auth_client, words=[{'position': 0}])

        assert both.status_code == 400
        assert neither.status_code == 400

    def test_missing_position_is_rejected(self, auth_client, seeded_vocabulary):
        response = create(auth_client, words=[{'word_id': seeded_vocabulary['casa'].word_id}])

        assert response.status_code == 400
        assert response.get_json()['details']['errors'] == {'position': 'invalid'}

    def test_other_users_word_is_forbidden(self, auth_client):
        other = make_user(name='Bea', email='bea@example.com')
        foreign = make_word(make_vault(other, 'Privado'), 'secreto')

        response = create(auth_client, words=[{'word_id': foreign.word_id, 'position': 0}])

        assert response.status_code == 403
        assert Sentence.query.count() == 0

    def test_unknown_word_is_not_found(self, auth_client):
        response = create(auth_client, words=[{'word_id': 9999, 'position': 0}])

        assert response.status_code == 404


class TestSentenceAccess:
    def test_list_newest_first(self, auth_client, seeded_vocabulary):
        casa = seeded_vocabulary['casa']
        first = create(auth_client, title='one', words=[{'word_id': casa.word_id, 'position': 0}])
        second = create(auth_client, title='two', words=[{'word_id': casa.word_id, 'position': 0}])

        listed = auth_client.get('/api/sentences/').get_json()['data']

        assert [s['id'] for s in listed] == [
            second.get_json()['data']['id'], first.get_json()['data']['id'],
        ]

    def test_other_users_sentence_is_forbidden(self, auth_client):
        other = make_user(name='Bea', email='bea@example.com')
        sentence = Sentence(title='Privada', user_id=other.user_id)
        db.session.add(sentence)
        db.session.commit()

        assert auth_client.get(f'/api/sentences/{sentence.sentence_id}').status_code == 403
        assert auth_client.delete(f'/api/sentences/{sentence.sentence_id}').status_code == 403

    def test_missing_sentence(self, auth_client):
        assert auth_client.get('/api/sentences/404').status_code == 404

    def test_requires_login(self, client):
        assert client.get('/api/sentences/').status_code == 401


class TestEditSentence:
    def test_update_replaces_words(self, auth_client, seeded_vocabulary):
        casa, hogar, familia = (seeded_vocabulary[k] for k in ('casa', 'hogar', 'familia'))
        sentence_id = create(auth_client, title='old', words=[
            {'word_id': casa.word_id, 'position': 0},
            {'word_id': hogar.word_id, 'position': 1},
        ]).get_json()['data']['id']

        response = auth_client.patch(f'/api/sentences/{sentence_id}', json={
            'title': 'new',
            'words': [{'word_id': familia.word_id, 'position': 0}],
        })

        assert response.status_code == 200
        data = response.get_json()['data']
        assert data['title'] == 'new'
        assert [w['word']['name'] for w in data['words']] == ['familia']
        assert SentenceWord.query.count() == 1

    def test_update_with_no_words_keeps_sentence(self, auth_client, seeded_vocabulary):
        casa = seeded_vocabulary['casa']
        sentence_id = create(auth_client, words=[{'word_id': casa.word_id, 'position': 0}]).get_json()['data']['id']

        response = auth_client.patch(f'/api/sentences/{sentence_id}', json={'words': []})

        assert response.status_code == 400
        assert SentenceWord.query.filter_by(sentence_id=sentence_id).count() == 1

    def test_delete_removes_entries(self, auth_client, seeded_vocabulary):
        casa = seeded_vocabulary['casa']
        sentence_id = create(auth_client, words=[{'word_id': casa.word_id, 'position': 0}]).get_json()['data']['id']

        assert auth_client.delete(f'/api/sentences/{sentence_id}').status_code == 200
        assert auth_client.get(f'/api/sentences/{sentence_id}').status_code == 404
        assert SentenceWord.query.count() == 0
        assert db.session.get(Word, casa.word_id) is not None

    def test_deleting_a_word_drops_it_from_sentences(self, auth_client, seeded_vocabulary):
        casa, hogar = seeded_vocabulary['casa'], seeded_vocabulary['hogar']
        sentence_id = create(auth_client, words=[
            {'word_id': casa.word_id, 'position': 0},
            {'word_id': hogar.word_id, 'position': 1},
        ]).get_json()['data']['id']

        assert auth_client.delete(f'/api/words/{hogar.word_id}').status_code == 200

        db.session.expire_all()
        data = auth_client.get(f'/api/sentences/{sentence_id}').get_json()['data']
        assert [w['word']['name'] for w in data['words']] == ['casa']


class TestBuilderWords:
    def test_all_vaults_by_name(self, auth_client, seeded_vocabulary):
        other = make_user(name='Bea', email='bea@example.com')
        make_word(make_vault(other, 'Privado'), 'abeja')

        words = auth_client.get('/api/sentences/words').get_json()['data']

        assert [w['name'] for w in words] == ['casa', 'familia', 'hogar', 'home', 'house']

from conftest import make_user, make_vault, make_word

from wordmap_app.models import UserSettings
from wordmap_app.modules.profile.logics.stats import count_rows


class TestSettings:
    def test_defaults_without_a_stored_row(self, auth_client, user):
        data = auth_client.get('/api/profile/settings').get_json()['data']

        assert data['use_all_vaults_for_links'] is False
        assert UserSettings.query.count() == 0

    def test_update_is_an_upsert(self, auth_client, user):
        first = auth_client.put('/api/profile/settings', json={'use_all_vaults_for_links': True})
        second = auth_client.put('/api/profile/settings', json={'use_all_vaults_for_links': False})

        assert first.status_code == 200
        assert first.get_json()['data']['use_all_vaults_for_links'] is True
        assert second.get_json()['data']['use_all_vaults_for_links'] is False
        assert UserSettings.query.filter_by(user_id=user.user_id).count() == 1

    def test_rejects_non_boolean(self, auth_client):
        response = auth_client.put('/api/profile/settings', json={'use_all_vaults_for_links': 'yes'})

        assert response.status_code == 400
        assert response.get_json()['details']['errors'] == {'use_all_vaults_for_links': 'invalid'}

    def test_requires_login(self, client):
        assert client.get('/api/profile/settings').status_code == 401


class TestStats:
    def test_counts_for_seeded_vocabulary(self, auth_client, seeded_vocabulary):
        make_word(seeded_vocabulary['spanish'], 'correr', 'verb', category='action', confidence=3)
        other = make_user(name='Bea', email='bea@example.com')
        make_word(make_vault(other, 'Privado'), 'secreto', category='action')

        stats = auth_client.get('/api/profile/stats').get_json()['data']

        assert stats == {
            'total_words': 6,
            'total_vaults': 2,
            'words_by_confidence': [{'confidence': 1, 'count': 5}, {'confidence': 3, 'count': 1}],
            'words_by_category': [{'category': 'action', 'count': 1}],
            'words_by_grammatical_class': [
                {'grammatical_class': 'noun', 'count': 5},
                {'grammatical_class': 'verb', 'count': 1},
            ],
            'total_connections': 5,
        }

    def test_empty_account(self, auth_client):
        stats = auth_client.get('/api/profile/stats').get_json()['data']

        assert stats['total_words'] == 0
        assert stats['words_by_confidence'] == []
        assert stats['total_connections'] == 0

    def test_count_rows_drops_null_keys(self):
        rows = [('b', 2), (None, 4), ('a', 1)]

        assert count_rows(rows, 'category') == [{'category': 'a', 'count': 1}, {'category': 'b', 'count': 2}]

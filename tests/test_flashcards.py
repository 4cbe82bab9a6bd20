from datetime import datetime, timedelta, timezone

import pytest

from conftest import make_vault, make_word

from wordmap_app.core.signals import word_progress_updated
from wordmap_app.modules.flashcards.logics.confidence import (
    bucket_counts,
    calculate_next_review,
    review_interval_days,
)


class TestConfidenceRules:
    def test_bucket_counts(self):
        counts = bucket_counts([1, 1, 2, 3, 4, 4])

        assert counts == {'total': 6, 'new': 2, 'for_review': 3, 'mastered': 2}

    @pytest.mark.parametrize('confidence, review_count, expected', [
        (4, 4, 10),
        (3, 4, 7),
        (2, 4, 5),
        (1, 4, 1),
        (4, 0, 1),
        (2, 1, 1),
    ])
    def test_review_interval(self, confidence, review_count, expected):
        assert review_interval_days(confidence, review_count) == expected

    def test_next_review_date(self):
        now = datetime(2024, 1, 1, tzinfo=timezone.utc)

        assert calculate_next_review(4, 2, now=now) == now + timedelta(days=5)


class TestFlashcardApi:
    def test_deck_holds_saved_words_oldest_first(self, auth_client, user):
        vault = make_vault(user, 'Animals')
        make_word(vault, 'gato')
        make_word(vault, 'perro', is_saved=False)
        make_word(vault, 'pez')

        deck = auth_client.get(f'/api/flashcards/vaults/{vault.vault_id}/words').get_json()['data']

        assert [w['name'] for w in deck] == ['gato', 'pez']

    def test_session_summary(self, auth_client, user):
        vault = make_vault(user, 'Animals')
        make_word(vault, 'gato')
        make_word(vault, 'perro', confidence=2)
        make_word(vault, 'pez', confidence=4)

        summary = auth_client.post(f'/api/flashcards/vaults/{vault.vault_id}/session').get_json()['data']

        assert summary['vault_name'] == 'Animals'
        assert summary['total_words'] == 3
        assert summary['new_words'] == 1
        assert summary['words_to_review'] == 2
        assert summary['mastered_words'] == 1
        assert summary['session_id'].endswith(f'_{vault.vault_id}')

    def test_overview(self, auth_client, seeded_vocabulary):
        overview = auth_client.get('/api/flashcards/overview').get_json()['data']

        assert {row['vault_name']: row['total'] for row in overview} == {'Spanish': 3, 'English': 2}

    def test_progress_update(self, app, auth_client, user):
        vault = make_vault(user, 'Animals')
        word = make_word(vault, 'gato')
        updates = []

        with word_progress_updated.connected_to(lambda sender, **kw: updates.append(kw['confidence']), app):
            response = auth_client.post(
                f'/api/flashcards/words/{word.word_id}/progress', json={'confidence': 4, 'review_count': 2}
            )

        data = response.get_json()['data']
        assert data['word']['confidence'] == 4
        assert data['next_review']
        assert updates == [4]

    @pytest.mark.parametrize('payload', [{}, {'confidence': 0}, {'confidence': 5}, {'confidence': 'high'}])
    def test_progress_validation(self, auth_client, user, payload):
        vault = make_vault(user, 'Animals')
        word = make_word(vault, 'gato')

        response = auth_client.post(f'/api/flashcards/words/{word.word_id}/progress', json=payload)

        assert response.status_code == 400

    def test_other_users_vault(self, auth_client):
        assert auth_client.get('/api/flashcards/vaults/999/words').status_code == 404

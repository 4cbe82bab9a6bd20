import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from wordmap_app import create_app, db
from wordmap_app.config import Config
from wordmap_app.models import User, Vault, Word, word_links


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'connect_args': {'check_same_thread': False}
    }
    WTF_CSRF_ENABLED = False
    LOG_TO_FILE = False
    LOG_LEVEL = 'WARNING'


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def make_user(name='Ana', email='ana@example.com', password='secret123'):
    user = User(name=name, email=email)
    user.set_password(password)
    db.session.add(user)
    db.session.commit()
    return user


def make_vault(user, name):
    vault = Vault(name=name, user_id=user.user_id)
    db.session.add(vault)
    db.session.commit()
    return vault


def make_word(vault, name, grammatical_class='noun', **kwargs):
    word = Word(name=name, grammatical_class=grammatical_class, vault_id=vault.vault_id, **kwargs)
    db.session.add(word)
    db.session.commit()
    return word


def link(word_a, word_b):
    db.session.execute(word_links.insert().values(word_a_id=word_a.word_id, word_b_id=word_b.word_id))
    db.session.commit()


def login(client, email='ana@example.com', password='secret123'):
    return client.post('/api/auth/login', json={'email': email, 'password': password})


@pytest.fixture
def user(app):
    return make_user()


@pytest.fixture
def auth_client(client, user):
    response = login(client)
    assert response.status_code == 200
    return client


@pytest.fixture
def seeded_vocabulary(user):
    """
    Two vaults for the logged-in user:

        Spanish:  casa - hogar - familia
        English:  home - house
        casa - home crosses the vaults
    """
    spanish = make_vault(user, 'Spanish')
    english = make_vault(user, 'English')

    casa = make_word(spanish, 'casa', translations=['house', 'home'])
    hogar = make_word(spanish, 'hogar')
    familia = make_word(spanish, 'familia')
    home = make_word(english, 'home')
    house = make_word(english, 'house')

    link(casa, hogar)
    link(hogar, familia)
    link(home, house)
    link(casa, home)

    return {
        'spanish': spanish,
        'english': english,
        'casa': casa,
        'hogar': hogar,
        'familia': familia,
        'home': home,
        'house': house,
    }

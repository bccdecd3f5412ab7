import random

import pytest
from rest_framework.test import APIClient

from common.gateway import PersistenceGateway
from users.models import User, UserSettings
from vocabulary.catalog import Word, WordCatalog


def make_words(n, category='general', start=1):
    return [
        Word(
            id=i,
            category=category,
            english=f'word{i}',
            uzbek=f"so'z{i}",
            example_en=f'Example {i}.',
            example_uz=f'Misol {i}.',
        )
        for i in range(start, start + n)
    ]


@pytest.fixture
def words():
    return (
        [Word(1, 'animals', 'cat', 'mushuk', 'The cat sleeps.', 'Mushuk uxlaydi.')]
        + make_words(19, category='animals', start=2)
        + make_words(10, category='food', start=21)
    )


@pytest.fixture
def catalog(words):
    return WordCatalog(words)


@pytest.fixture
def gateway():
    return PersistenceGateway()


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def make_user(db):
    counter = {'n': 0}

    def _make(username=None, **fields):
        counter['n'] += 1
        username = username or f'user{counter["n"]}'
        user = User.objects.create_user(username=username, password=None, **fields)
        UserSettings.objects.create(user=user)
        return user

    return _make


@pytest.fixture
def user(make_user):
    return make_user('alice', telegram_id=1001, full_name='Alice A')


@pytest.fixture
def api_client(user):
    client = APIClient()
    client.force_authenticate(user=user)
    return client

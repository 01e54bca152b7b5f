import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

User = get_user_model()


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def user(db):
    return User.objects.create_user(
        username="alice",
        email="alice@example.com",
        password="StrongPass123!",
        first_name="Alice",
        last_name="Liddell",
    )


@pytest.fixture
def organizer(db):
    return User.objects.create_user(
        username="olive",
        email="olive@example.com",
        password="StrongPass123!",
        first_name="Olive",
        last_name="Organizer",
    )


def _authenticate(client, user):
    from rest_framework.authtoken.models import Token
    token, _ = Token.objects.get_or_create(user=user)
    client.credentials(HTTP_AUTHORIZATION=f"Token {token.key}")
    return client


@pytest.fixture
def auth_client(api_client, user):
    return _authenticate(api_client, user)


@pytest.fixture
def organizer_client(organizer):
    return _authenticate(APIClient(), organizer)


@pytest.fixture
def group(organizer_client):
    r = organizer_client.post("/api/groups", {
        "name": "Evening Tennis on the Water",
        "about": "Enjoy rounds of tennis with a tight-knit group of people on the water facing the Brooklyn Bridge.",
        "type": "In person",
        "private": True,
        "city": "New York",
        "state": "NY",
    })
    assert r.status_code == 201
    return r.json()

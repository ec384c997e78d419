import pytest
from rest_framework.test import APIClient

from core.store import install_store


@pytest.fixture(autouse=True)
def store():
    """A fresh, empty store for every test."""
    return install_store()


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


def register(client: APIClient, name: str, email: str, password: str):
    return client.post('/api/auth/register/', {'name': name, 'email': email, 'password': password}, format='json')


def login_token(client: APIClient, email: str, password: str) -> str:
    r = client.post('/api/auth/login/', {'email': email, 'password': password}, format='json')
    assert r.status_code == 200, r.data
    return r.data['access']


def bearer_client(token: str) -> APIClient:
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')
    return client


@pytest.fixture
def alice(api_client) -> APIClient:
    register(api_client, 'Alice', 'alice@example.com', 'secret1')
    return bearer_client(login_token(api_client, 'alice@example.com', 'secret1'))


@pytest.fixture
def bob(api_client) -> APIClient:
    register(api_client, 'Bob', 'bob@example.com', 'secret2')
    return bearer_client(login_token(api_client, 'bob@example.com', 'secret2'))

import pytest
from rest_framework.test import APIClient

from .factories import create_user, generate_valid_token


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def user(db):
    return create_user()


@pytest.fixture
def auth_client(api_client, user):
    """Client sending a valid bearer token for `user`."""
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {generate_valid_token(user)}')
    return api_client

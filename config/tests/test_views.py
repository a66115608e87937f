import pytest
from unittest.mock import patch
from django.db import DatabaseError
from django.urls import reverse
from rest_framework import status


@pytest.mark.django_db
class TestHealthCheck:
    """Tests for GET /api/health/"""

    def test_healthy(self, api_client):
        response = api_client.get(reverse('health-check'))

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body['status'] == 'ok'
        assert body['database'] == 'connected'
        assert body['timestamp']

    def test_database_down(self, api_client):
        with patch('config.views.connection') as connection:
            connection.cursor.side_effect = DatabaseError('gone')
            response = api_client.get(reverse('health-check'))

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert response.json()['database'] == 'unavailable'


def test_unknown_route_returns_json(api_client, db):
    response = api_client.get('/api/does-not-exist/')

    assert response.status_code == status.HTTP_404_NOT_FOUND

"""
Integration tests for the seat booking HTTP surface

The app runs its full lifespan against the in-memory store, seeded with the
coach layout on startup.
"""

from unittest.mock import AsyncMock

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from src.platform.config.di import container


pytestmark = pytest.mark.integration


def _selected(body: dict) -> list[str]:
    return body['selected_seat_ids']


class TestSeatEndpoints:
    def test_health(self, client: TestClient):
        response = client.get('/health')

        assert response.status_code == 200
        assert response.json()['status'] == 'healthy'

    def test_chart_without_quantity_has_no_selection(self, client: TestClient):
        response = client.get('/api/seats')

        assert response.status_code == 200
        body = response.json()
        assert len(body['seats']) == 87
        assert body['seats'][0]['id'] == '1-1'
        assert _selected(body) == []
        assert body['total_price'] == 0
        assert body['available_count'] == 87

    def test_chart_with_quantity_auto_selects(self, client: TestClient):
        response = client.get('/api/seats', params={'quantity': 3})

        assert _selected(response.json()) == ['1-1', '1-2', '1-3']
        assert response.json()['total_price'] == 390

    def test_toggle_adds_seat_to_selection(self, client: TestClient):
        response = client.post(
            '/api/seats/toggle', json={'seat_id': '4-3', 'selected_seat_ids': ['1-1']}
        )

        assert response.status_code == 200
        assert _selected(response.json()) == ['1-1', '4-3']
        assert response.json()['total_price'] == 510

    def test_toggle_unknown_seat_is_404(self, client: TestClient):
        response = client.post('/api/seats/toggle', json={'seat_id': '13-4'})

        assert response.status_code == 404

    def test_toggle_over_max_is_400(self, client: TestClient):
        response = client.post(
            '/api/seats/toggle',
            json={'seat_id': '2-1', 'selected_seat_ids': [f'1-{col}' for col in range(1, 8)]},
        )

        assert response.status_code == 400
        assert response.json()['detail'] == 'Max 7 seats allowed.'


class TestBookingEndpoint:
    def test_booking_is_created_and_seats_show_booked(self, client: TestClient, memory_store):
        response = client.post(
            '/api/booking',
            json={'seat_ids': ['4-1', '4-2'], 'name': 'Asha', 'email': 'asha@example.com'},
        )

        assert response.status_code == 201
        body = response.json()
        assert body['seat_ids'] == ['4-1', '4-2']
        assert body['total_price'] == 760
        assert body['id']

        chart = client.get('/api/seats').json()
        assert {seat['id'] for seat in chart['seats'] if seat['booked']} == {'4-1', '4-2'}
        assert chart['available_count'] == 85
        assert [booking.id for booking in memory_store.bookings] == [body['id']]

    def test_second_booking_of_same_seat_is_conflict(self, client: TestClient, memory_store):
        payload = {'seat_ids': ['5-1'], 'name': 'Asha', 'email': 'asha@example.com'}
        assert client.post('/api/booking', json=payload).status_code == 201

        response = client.post(
            '/api/booking',
            json={'seat_ids': ['5-1', '5-2'], 'name': 'Ravi', 'email': 'ravi@example.com'},
        )

        assert response.status_code == 409
        assert response.json() == {'detail': 'Seats already booked: 5-1', 'seat_ids': ['5-1']}
        assert len(memory_store.bookings) == 1
        assert sorted(memory_store.booked_seat_ids()) == ['5-1']

    @pytest.mark.parametrize(
        'payload, message',
        [
            ({'seat_ids': [], 'name': 'A', 'email': 'a@b.c'}, 'Select seats to book.'),
            ({'seat_ids': ['1-1'], 'name': ' ', 'email': 'a@b.c'}, 'Please enter your name and email.'),
            (
                {'seat_ids': [f'2-{col}' for col in range(1, 8)] + ['3-1'], 'name': 'A', 'email': 'a@b.c'},
                'Max 7 seats allowed.',
            ),
        ],
    )
    def test_precondition_failures_are_400(self, client: TestClient, memory_store, payload, message):
        response = client.post('/api/booking', json=payload)

        assert response.status_code == 400
        assert response.json()['detail'] == message
        assert memory_store.bookings == []

    def test_unknown_seat_is_404(self, client: TestClient):
        response = client.post(
            '/api/booking', json={'seat_ids': ['20-1'], 'name': 'A', 'email': 'a@b.c'}
        )

        assert response.status_code == 404

    def test_missing_field_is_400(self, client: TestClient):
        response = client.post('/api/booking', json={'seat_ids': ['1-1']})

        assert response.status_code == 400

    def test_metrics_count_attempts(self, client: TestClient):
        client.post('/api/booking', json={'seat_ids': ['6-1'], 'name': 'A', 'email': 'a@b.c'})

        response = client.get('/metrics')

        assert response.status_code == 200
        assert 'seat_booking_attempts_total{result="committed"}' in response.text


class TestStoreUnavailable:
    @pytest.fixture
    def unreachable_store(self, client: TestClient):
        store = AsyncMock()
        store.fetch_all_seats.side_effect = ConnectionError('kvrocks down')
        with container.seat_state_query_handler.override(providers.Object(store)):
            yield store

    def test_chart_is_empty(self, client: TestClient, unreachable_store):
        response = client.get('/api/seats')

        assert response.status_code == 200
        assert response.json()['seats'] == []

    def test_toggle_reports_store_unavailable(self, client: TestClient, unreachable_store):
        response = client.post('/api/seats/toggle', json={'seat_id': '1-1'})

        assert response.status_code == 502
        assert response.json()['detail'] == 'Seats could not be loaded. Try again.'

    def test_booking_reports_store_unavailable(
        self, client: TestClient, unreachable_store, memory_store
    ):
        response = client.post(
            '/api/booking', json={'seat_ids': ['1-1'], 'name': 'A', 'email': 'a@b.c'}
        )

        assert response.status_code == 502
        assert response.json()['detail'] == 'Seats could not be loaded. Try again.'
        unreachable_store.find_booked_seat_ids.assert_not_called()
        assert memory_store.bookings == []

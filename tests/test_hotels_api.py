"""HTTP tests for the hotel endpoints."""

import pytest
from rest_framework import status

from apps.tickets.models import Ticket

from .factories import (
    create_eligible_enrollment,
    create_enrollment_with_address,
    create_hotel,
    create_presential_with_hotel_ticket_type,
    create_presential_without_hotel_ticket_type,
    create_remote_ticket_type,
    create_room,
    create_ticket,
    create_ticket_type,
)

pytestmark = pytest.mark.django_db

HOTEL_ROUTES = ['/hotels', '/hotels/1234']


def hotel_json(hotel):
    return {
        'id': hotel.id,
        'name': hotel.name,
        'image': hotel.image,
        'createdAt': hotel.created_at.isoformat().replace('+00:00', 'Z'),
        'updatedAt': hotel.updated_at.isoformat().replace('+00:00', 'Z'),
    }


def room_json(room):
    return {
        'id': room.id,
        'name': room.name,
        'capacity': room.capacity,
        'hotelId': room.hotel_id,
        'createdAt': room.created_at.isoformat().replace('+00:00', 'Z'),
        'updatedAt': room.updated_at.isoformat().replace('+00:00', 'Z'),
    }


# ---------------------------------------------------------------------------
# Authentication
# ---------------------------------------------------------------------------


@pytest.mark.parametrize('route', HOTEL_ROUTES)
def test_missing_token_is_unauthorized(api_client, route) -> None:
    response = api_client.get(route)
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.parametrize('route', HOTEL_ROUTES)
def test_invalid_token_is_unauthorized(api_client, route) -> None:
    api_client.credentials(HTTP_AUTHORIZATION='Bearer FakeToken')
    response = api_client.get(route)
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


# ---------------------------------------------------------------------------
# Eligibility
# ---------------------------------------------------------------------------


@pytest.mark.parametrize('route', HOTEL_ROUTES)
def test_remote_ticket_requires_payment(auth_client, user, route) -> None:
    enrollment = create_enrollment_with_address(user)
    create_ticket(enrollment, create_remote_ticket_type(), Ticket.Status.PAID)
    response = auth_client.get(route)
    assert response.status_code == status.HTTP_402_PAYMENT_REQUIRED


@pytest.mark.parametrize('route', HOTEL_ROUTES)
def test_unpaid_ticket_requires_payment(auth_client, user, route) -> None:
    enrollment = create_enrollment_with_address(user)
    create_ticket(enrollment, create_ticket_type(), Ticket.Status.RESERVED)
    response = auth_client.get(route)
    assert response.status_code == status.HTTP_402_PAYMENT_REQUIRED


@pytest.mark.parametrize('route', HOTEL_ROUTES)
def test_ticket_without_hotel_requires_payment(auth_client, user, route) -> None:
    enrollment = create_enrollment_with_address(user)
    create_ticket(enrollment, create_presential_without_hotel_ticket_type(), Ticket.Status.PAID)
    response = auth_client.get(route)
    assert response.status_code == status.HTTP_402_PAYMENT_REQUIRED


@pytest.mark.parametrize('route', HOTEL_ROUTES)
def test_no_enrollment_is_not_found(auth_client, route) -> None:
    create_ticket_type()
    response = auth_client.get(route)
    assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.parametrize('route', HOTEL_ROUTES)
def test_no_ticket_is_not_found(auth_client, user, route) -> None:
    create_enrollment_with_address(user)
    create_ticket_type()
    response = auth_client.get(route)
    assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.parametrize('route', HOTEL_ROUTES)
def test_other_users_ticket_does_not_count(auth_client, route) -> None:
    create_eligible_enrollment()
    create_hotel()
    response = auth_client.get(route)
    assert response.status_code == status.HTTP_404_NOT_FOUND


# ---------------------------------------------------------------------------
# GET /hotels
# ---------------------------------------------------------------------------


def test_no_hotels_is_not_found(auth_client, user) -> None:
    create_eligible_enrollment(user)
    response = auth_client.get('/hotels')
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert 'detail' in response.json()


def test_lists_every_hotel(auth_client, user) -> None:
    create_eligible_enrollment(user)
    hotels = [create_hotel(), create_hotel()]

    response = auth_client.get('/hotels')

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == [hotel_json(hotel) for hotel in hotels]


def test_trailing_slash_is_accepted(auth_client, user) -> None:
    create_eligible_enrollment(user)
    create_hotel()
    response = auth_client.get('/hotels/')
    assert response.status_code == status.HTTP_200_OK
    assert len(response.json()) == 1


def test_repeated_listing_is_identical(auth_client, user) -> None:
    create_eligible_enrollment(user)
    create_hotel()
    first = auth_client.get('/hotels').json()
    second = auth_client.get('/hotels').json()
    assert first == second


# ---------------------------------------------------------------------------
# GET /hotels/<hotelId>
# ---------------------------------------------------------------------------


def test_unknown_hotel_is_not_found(auth_client, user) -> None:
    create_eligible_enrollment(user)
    create_hotel()
    response = auth_client.get('/hotels/1234')
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_non_numeric_hotel_id_is_not_found(auth_client, user) -> None:
    create_eligible_enrollment(user)
    create_hotel()
    response = auth_client.get('/hotels/abc')
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_non_numeric_hotel_id_still_checks_eligibility(auth_client, user) -> None:
    enrollment = create_enrollment_with_address(user)
    create_ticket(enrollment, create_presential_with_hotel_ticket_type(), Ticket.Status.RESERVED)
    response = auth_client.get('/hotels/abc')
    assert response.status_code == status.HTTP_402_PAYMENT_REQUIRED


def test_returns_hotel_with_rooms(auth_client, user) -> None:
    create_eligible_enrollment(user)
    hotel = create_hotel()
    rooms = [create_room(hotel), create_room(hotel)]
    create_room(create_hotel())

    response = auth_client.get(f'/hotels/{hotel.id}')

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {
        **hotel_json(hotel),
        'Rooms': [room_json(room) for room in rooms],
    }


def test_returns_hotel_without_rooms(auth_client, user) -> None:
    create_eligible_enrollment(user)
    hotel = create_hotel()
    response = auth_client.get(f'/hotels/{hotel.id}')
    assert response.status_code == status.HTTP_200_OK
    assert response.json()['Rooms'] == []


def test_detail_trailing_slash_is_accepted(auth_client, user) -> None:
    create_eligible_enrollment(user)
    hotel = create_hotel()
    response = auth_client.get(f'/hotels/{hotel.id}/')
    assert response.status_code == status.HTTP_200_OK
    assert response.json()['id'] == hotel.id


@pytest.mark.parametrize('hotel_id', ['99999999999999999999999', '9223372036854775808', '0', '-1'])
def test_out_of_range_hotel_id_is_not_found(auth_client, user, hotel_id) -> None:
    create_eligible_enrollment(user)
    create_hotel()
    response = auth_client.get(f'/hotels/{hotel_id}')
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_out_of_range_hotel_id_still_checks_eligibility(auth_client, user) -> None:
    enrollment = create_enrollment_with_address(user)
    create_ticket(enrollment, create_remote_ticket_type(), Ticket.Status.PAID)
    response = auth_client.get('/hotels/99999999999999999999999')
    assert response.status_code == status.HTTP_402_PAYMENT_REQUIRED

"""
Business logic and services for Hotel access.

Hotel data is only visible to users whose enrollment holds a paid,
presential ticket that includes lodging.
"""

import logging
from typing import List, Optional

from apps.enrollments.repositories import EnrollmentRepository
from apps.tickets.models import Ticket
from apps.tickets.repositories import TicketRepository

from .exceptions import NotFoundError, PaymentRequiredError
from .models import Hotel
from .repositories import HotelRepository, HotelWithRooms

logger = logging.getLogger(__name__)


class HotelService:
    """Eligibility gate in front of the hotel lookups."""

    def __init__(
        self,
        enrollments: Optional[EnrollmentRepository] = None,
        tickets: Optional[TicketRepository] = None,
        hotels: Optional[HotelRepository] = None
    ):
        self.enrollments = enrollments or EnrollmentRepository()
        self.tickets = tickets or TicketRepository()
        self.hotels = hotels or HotelRepository()

    def check_eligibility(self, user_id: int) -> Ticket:
        """
        Make sure the user may see hotel data.

        Raises NotFoundError when the user has no enrollment or no ticket,
        and PaymentRequiredError when the ticket type carries no lodging or
        the ticket is unpaid. The ticket type is checked first.
        """
        enrollment = self.enrollments.find_with_address_by_user(user_id)
        if not enrollment:
            logger.info(f"Hotel access denied for user {user_id}: no enrollment")
            raise NotFoundError()

        ticket = self.tickets.find_by_enrollment(enrollment.id)
        if not ticket:
            logger.info(f"Hotel access denied for user {user_id}: no ticket")
            raise NotFoundError()

        ticket_type = ticket.ticket_type
        if not ticket_type.grants_lodging:
            logger.info(f"Hotel access denied for user {user_id}: ticket type {ticket_type.id} has no lodging")
            raise PaymentRequiredError()

        if not ticket.is_paid:
            logger.info(f"Hotel access denied for user {user_id}: ticket {ticket.id} is {ticket.status}")
            raise PaymentRequiredError()

        return ticket

    def list_hotels(self, user_id: int) -> List[Hotel]:
        """List every hotel, failing with NotFoundError when there is none."""
        self.check_eligibility(user_id)

        hotels = self.hotels.list_all()
        if not hotels:
            raise NotFoundError()

        return hotels

    def get_hotel(self, user_id: int, hotel_id: int) -> HotelWithRooms:
        self.check_eligibility(user_id)

        hotel = self.hotels.find_with_rooms(hotel_id)
        if hotel is None:
            raise NotFoundError()

        return hotel

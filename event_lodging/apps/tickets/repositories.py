"""
Data access for tickets.
"""

from typing import Optional

from .models import Ticket


class TicketRepository:
    """Read-only lookups over the Ticket table."""

    def find_by_enrollment(self, enrollment_id: int) -> Optional[Ticket]:
        # Ticket type is joined so the eligibility check needs no extra query
        return (
            Ticket.objects
            .select_related('ticket_type')
            .filter(enrollment_id=enrollment_id)
            .first()
        )

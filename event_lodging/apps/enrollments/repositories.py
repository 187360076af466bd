"""
Data access for enrollments.
"""

from typing import Optional

from .models import Enrollment


class EnrollmentRepository:
    """Read-only lookups over the Enrollment table."""

    def find_with_address_by_user(self, user_id: int) -> Optional[Enrollment]:
        return (
            Enrollment.objects
            .select_related('address')
            .filter(user_id=user_id)
            .first()
        )

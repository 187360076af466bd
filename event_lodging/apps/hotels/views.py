"""
Views for Hotel operations.
"""

from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from .exceptions import NotFoundError
from .serializers import HotelSerializer, HotelWithRoomsSerializer
from .services import HotelService

# Primary keys are BigAutoField
MAX_HOTEL_ID = 2 ** 63 - 1


def parse_hotel_id(raw_id):
    """Return the id as an int, or None when no hotel could ever match it."""
    try:
        hotel_id = int(raw_id)
    except ValueError:
        return None
    if not 0 < hotel_id <= MAX_HOTEL_ID:
        return None
    return hotel_id


class HotelListView(APIView):
    """List hotels available to the authenticated user."""
    permission_classes = [IsAuthenticated]
    service_class = HotelService

    def get(self, request):
        hotels = self.service_class().list_hotels(request.user.id)
        return Response(HotelSerializer(hotels, many=True).data, status=status.HTTP_200_OK)


class HotelDetailView(APIView):
    """Hotel details with its rooms."""
    permission_classes = [IsAuthenticated]
    service_class = HotelService

    def get(self, request, hotel_id):
        service = self.service_class()
        parsed_id = parse_hotel_id(hotel_id)
        if parsed_id is None:
            # Eligibility errors still win over a malformed id
            service.check_eligibility(request.user.id)
            raise NotFoundError()

        hotel = service.get_hotel(request.user.id, parsed_id)
        return Response(HotelWithRoomsSerializer(hotel).data, status=status.HTTP_200_OK)

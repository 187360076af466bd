"""
Data access for hotels and rooms.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .models import Hotel, Room


@dataclass
class HotelWithRooms:
    """A hotel composed with its rooms, in insertion order."""
    hotel: Hotel
    rooms: List[Room] = field(default_factory=list)


class HotelRepository:
    """Read-only lookups over the Hotel and Room tables."""

    def list_all(self) -> List[Hotel]:
        return list(Hotel.objects.order_by('id'))

    def find_with_rooms(self, hotel_id: int) -> Optional[HotelWithRooms]:
        hotel = Hotel.objects.filter(id=hotel_id).first()
        if hotel is None:
            return None

        rooms = list(Room.objects.filter(hotel_id=hotel.id).order_by('id'))
        return HotelWithRooms(hotel=hotel, rooms=rooms)

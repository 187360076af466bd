"""
Serializers for Hotel responses.
"""

from rest_framework import serializers

from .models import Hotel, Room


class RoomSerializer(serializers.ModelSerializer):
    hotelId = serializers.IntegerField(source='hotel_id', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Room
        fields = ['id', 'name', 'capacity', 'hotelId', 'createdAt', 'updatedAt']


class HotelSerializer(serializers.ModelSerializer):
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Hotel
        fields = ['id', 'name', 'image', 'createdAt', 'updatedAt']


class HotelWithRoomsSerializer(serializers.Serializer):
    """Flattens a HotelWithRooms into the hotel fields plus a Rooms array."""

    def to_representation(self, instance):
        data = HotelSerializer(instance.hotel).data
        data['Rooms'] = RoomSerializer(instance.rooms, many=True).data
        return data

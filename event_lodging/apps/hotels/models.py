"""
Hotel Models for Event Lodging.
"""

from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _


class Hotel(models.Model):
    """Hotel offered to attendees whose ticket includes lodging."""
    name = models.CharField(_('hotel name'), max_length=255)
    image = models.URLField(_('image URL'), max_length=500)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['id']
        verbose_name = _('Hotel')
        verbose_name_plural = _('Hotels')

    def __str__(self):
        return self.name


class Room(models.Model):
    """Room of a hotel."""
    hotel = models.ForeignKey(
        Hotel,
        on_delete=models.CASCADE,
        related_name='rooms'
    )
    name = models.CharField(_('room name'), max_length=255)
    capacity = models.PositiveIntegerField(
        _('capacity'),
        validators=[MinValueValidator(1)]
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['id']
        verbose_name = _('Room')
        verbose_name_plural = _('Rooms')
        indexes = [
            models.Index(fields=['hotel'], name='room_hotel_idx'),
        ]

    def __str__(self):
        return f"{self.hotel.name} - {self.name}"

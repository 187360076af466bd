"""
Ticket Models for Event Lodging.
"""

from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _


class TicketType(models.Model):
    """Ticket category: remote or presential, with or without hotel."""
    name = models.CharField(_('ticket type'), max_length=255)
    price = models.PositiveIntegerField(
        _('price (cents)'),
        validators=[MinValueValidator(0)]
    )
    is_remote = models.BooleanField(_('is remote'), default=False)
    includes_hotel = models.BooleanField(_('includes hotel'), default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['id']
        verbose_name = _('Ticket Type')
        verbose_name_plural = _('Ticket Types')

    def __str__(self):
        return self.name

    @property
    def grants_lodging(self):
        """Presential tickets with hotel included are the only ones with lodging."""
        return self.includes_hotel and not self.is_remote


class Ticket(models.Model):
    """Ticket bought for an enrollment."""

    class Status(models.TextChoices):
        RESERVED = 'RESERVED', _('Reserved')
        PAID = 'PAID', _('Paid')

    enrollment = models.OneToOneField(
        'enrollments.Enrollment',
        on_delete=models.CASCADE,
        related_name='ticket'
    )
    ticket_type = models.ForeignKey(
        TicketType,
        on_delete=models.PROTECT,
        related_name='tickets'
    )
    status = models.CharField(
        _('status'),
        max_length=10,
        choices=Status.choices,
        default=Status.RESERVED
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['id']
        verbose_name = _('Ticket')
        verbose_name_plural = _('Tickets')
        indexes = [
            models.Index(fields=['status'], name='ticket_status_idx'),
        ]

    def __str__(self):
        return f"{self.ticket_type.name} - {self.get_status_display()}"

    @property
    def is_paid(self):
        return self.status == self.Status.PAID

"""
Admin configuration for Ticket models.
"""

from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from .models import Ticket, TicketType


@admin.register(TicketType)
class TicketTypeAdmin(admin.ModelAdmin):
    """Admin configuration for TicketType model."""

    list_display = ['name', 'price_display', 'is_remote', 'includes_hotel']
    list_filter = ['is_remote', 'includes_hotel']
    search_fields = ['name']

    def price_display(self, obj):
        return f"R$ {obj.price / 100:.2f}"
    price_display.short_description = _('Price')


@admin.register(Ticket)
class TicketAdmin(admin.ModelAdmin):
    """Admin configuration for Ticket model."""

    list_display = ['enrollment', 'ticket_type', 'status', 'created_at']
    list_filter = ['status', 'ticket_type']
    search_fields = ['enrollment__name', 'enrollment__cpf']
    list_select_related = ['enrollment', 'ticket_type']
    readonly_fields = ['created_at', 'updated_at']
    actions = ['mark_as_paid']

    def mark_as_paid(self, request, queryset):
        updated = queryset.update(status=Ticket.Status.PAID)
        self.message_user(request, f'{updated} ticket(s) marked as paid.')
    mark_as_paid.short_description = _('Mark selected tickets as paid')

"""
Admin configuration for Enrollment models.
"""

from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from .models import Enrollment, Address


class AddressInline(admin.StackedInline):
    """Inline for the enrollment address."""
    model = Address
    extra = 0
    can_delete = False


@admin.register(Enrollment)
class EnrollmentAdmin(admin.ModelAdmin):
    """Admin configuration for Enrollment model."""

    inlines = [AddressInline]

    list_display = ['name', 'user', 'cpf', 'phone', 'has_ticket', 'created_at']
    search_fields = ['name', 'cpf', 'user__username', 'user__email']
    readonly_fields = ['created_at', 'updated_at']
    list_select_related = ['user']
    list_per_page = 25

    def has_ticket(self, obj):
        return hasattr(obj, 'ticket')
    has_ticket.boolean = True
    has_ticket.short_description = _('Ticket')
